from .exceptions import DimensionMismatchError, NotFittedError
from .gradient_descent import gradient_descent_fit
from .least_squares import (
    compute_error,
    compute_error_average,
    compute_error_gradients,
    least_squares_fit,
)
from .linear_function import LinearFunction
from .linear_regression import LinearRegressionModel, Model
from .parameters import ParameterVector
from .parametric_function import ParametricFunction

__all__ = [
    "DimensionMismatchError",
    "LinearFunction",
    "LinearRegressionModel",
    "Model",
    "NotFittedError",
    "ParameterVector",
    "ParametricFunction",
    "compute_error",
    "compute_error_average",
    "compute_error_gradients",
    "gradient_descent_fit",
    "least_squares_fit",
]
