from abc import ABC, abstractmethod

import numpy as np

from .exceptions import DimensionMismatchError
from .parameters import ParameterVector


class ParametricFunction(ABC):
    """Scalar function of an input vector, controlled by tunable parameters.

    Subclasses choose the initial parameters and implement evaluation and
    the parameter gradients; any subclass can be optimized by
    :func:`gradfit.gradient_descent.gradient_descent_fit`.
    """

    def __init__(self, input_size: int) -> None:
        if input_size < 0:
            raise ValueError("input_size must be non-negative.")
        self._input_size = int(input_size)
        self._parameters = ParameterVector(self.initial_parameters(self._input_size))

    @property
    def input_size(self) -> int:
        return self._input_size

    @staticmethod
    @abstractmethod
    def initial_parameters(input_size: int) -> np.ndarray:
        """Return the parameter vector a new function starts from."""

    def parameters(self) -> np.ndarray:
        return self._parameters.vector()

    def set_parameters(self, new_parameters) -> None:
        self._parameters.set_vector(new_parameters)

    def _as_input(self, input_vector, action: str) -> np.ndarray:
        x = np.asarray(input_vector, dtype=float)
        if x.ndim != 1:
            raise DimensionMismatchError(
                f"{type(self).__name__}: trying to {action} with a {x.ndim}-dimensional "
                "input instead of a vector of input variables.",
                actual=x.ndim,
                expected=1,
            )
        if x.shape[0] != self._input_size:
            raise DimensionMismatchError(
                f"{type(self).__name__}: trying to {action} with the wrong number of "
                f"input variables ({x.shape[0]} instead of {self._input_size}).",
                actual=x.shape[0],
                expected=self._input_size,
            )
        return x

    @abstractmethod
    def f(self, input_vector) -> float:
        """Evaluate the function at ``input_vector``."""

    @abstractmethod
    def df(self, input_vector) -> float:
        """Evaluate the derivative quantity used for diagnostics."""

    @abstractmethod
    def parameter_gradients(self, input_vector) -> np.ndarray:
        """Return df/dparameters at ``input_vector``, one entry per parameter."""
