import numpy as np

from .parametric_function import ParametricFunction


class LinearFunction(ParametricFunction):
    """Affine function ``f(x) = p[0] + p[1] * x[0] + ... + p[d] * x[d - 1]``.

    The intercept is folded into the dot product by prepending a constant
    1.0 to every input (the augmented input).
    """

    @staticmethod
    def initial_parameters(input_size: int) -> np.ndarray:
        return np.zeros(input_size + 1, dtype=float)

    @staticmethod
    def add_y_intercept(input_vector: np.ndarray) -> np.ndarray:
        return np.concatenate(([1.0], np.asarray(input_vector, dtype=float).ravel()))

    def f(self, input_vector) -> float:
        x = self._as_input(input_vector, "apply f()")
        return float(self.parameters() @ self.add_y_intercept(x))

    def df(self, input_vector) -> float:
        """Sum of the weights, i.e. the slope along (1, 1, ..., 1)."""
        self._as_input(input_vector, "apply df()")
        return float(np.sum(self.parameters()[1:]))

    def parameter_gradients(self, input_vector) -> np.ndarray:
        x = self._as_input(input_vector, "get parameter_gradients()")
        return self.add_y_intercept(x)
