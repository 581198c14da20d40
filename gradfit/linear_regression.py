from abc import ABC, abstractmethod

import numpy as np

from .datasets import input_size_of, make_dataset
from .exceptions import NotFittedError
from .gradient_descent import Dataset
from .least_squares import least_squares_fit
from .linear_function import LinearFunction


class Model(ABC):
    """Fit/predict interface shared by the models of this package.

    Both fit hooks are unsupported unless a model overrides them.
    """

    def fit_supervised_dataset(self, dataset: Dataset) -> "Model":
        raise NotImplementedError(f"{type(self).__name__} does not support supervised fitting.")

    def fit_unsupervised_dataset(self, dataset) -> "Model":
        raise NotImplementedError(f"{type(self).__name__} does not support unsupervised fitting.")

    @abstractmethod
    def predict_one(self, input_vector) -> float:
        """Predict the output for a single input vector."""


class LinearRegressionModel(Model):
    """Linear regression fitted by least-squares gradient descent.

    Wraps a :class:`LinearFunction` and :func:`least_squares_fit`. The
    error trace of the last fit is kept in ``error_trace``.
    """

    def __init__(self, learning_rate: float = 0.01, max_iterations: int = 1000) -> None:
        self.learning_rate = learning_rate
        self.max_iterations = max_iterations
        self.function: LinearFunction | None = None
        self.error_trace: list[float] = []

    def fit_supervised_dataset(self, dataset: Dataset) -> "LinearRegressionModel":
        """Fit on ``(input_vector, label)`` pairs.

        An empty dataset leaves the model unfitted.
        """
        input_size = input_size_of(dataset)
        if input_size == 0:
            return self

        function = LinearFunction(input_size)
        self.error_trace = least_squares_fit(
            function, dataset, self.learning_rate, self.max_iterations
        )
        self.function = function
        return self

    def fit(self, X, y) -> "LinearRegressionModel":
        """Fit the model on a feature matrix and a target vector.

        Args:
            X: Feature matrix with shape (n_samples, n_features).
            y: Target vector with shape (n_samples,).
        """
        X = np.asarray(X, dtype=float)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        y = np.asarray(y, dtype=float).ravel()
        return self.fit_supervised_dataset(make_dataset(X, y))

    def _fitted_function(self) -> LinearFunction:
        if self.function is None:
            raise NotFittedError("LinearRegressionModel: trying to predict before fitting.")
        return self.function

    def predict_one(self, input_vector) -> float:
        return self._fitted_function().f(input_vector)

    def predict(self, X) -> np.ndarray:
        """Predict targets for input features."""
        function = self._fitted_function()
        X = np.asarray(X, dtype=float)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        return np.array([function.f(row) for row in X], dtype=float)

    @property
    def bias(self) -> float:
        return float(self._fitted_function().parameters()[0])

    @property
    def weights(self) -> np.ndarray:
        return self._fitted_function().parameters()[1:]
