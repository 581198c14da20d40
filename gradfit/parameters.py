import numpy as np

from .exceptions import DimensionMismatchError


class ParameterVector:
    """Fixed-length vector of function parameters.

    The size is set at construction; replacements must keep it.
    """

    def __init__(self, values) -> None:
        self._vector = self._frozen(values)

    @staticmethod
    def _frozen(values) -> np.ndarray:
        vector = np.array(values, dtype=float)
        if vector.ndim != 1:
            raise DimensionMismatchError(
                "ParameterVector: function parameters must be a one-dimensional vector "
                f"({vector.ndim} dimensions instead of 1).",
                actual=vector.ndim,
                expected=1,
            )
        vector.flags.writeable = False
        return vector

    def __len__(self) -> int:
        return self._vector.shape[0]

    def __repr__(self) -> str:
        return f"ParameterVector({self._vector.tolist()!r})"

    def vector(self) -> np.ndarray:
        """Return a read-only view of the current values."""
        return self._vector

    def set_vector(self, new_vector) -> None:
        """Replace the stored values with a vector of the same size."""
        new_vector = self._frozen(new_vector)
        if new_vector.shape[0] != len(self):
            raise DimensionMismatchError(
                "ParameterVector: trying to update function parameters with parameters "
                f"of different size ({new_vector.shape[0]} instead of {len(self)}).",
                actual=new_vector.shape[0],
                expected=len(self),
            )
        self._vector = new_vector
