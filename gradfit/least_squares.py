"""Least-squares error and gradient for any :class:`ParametricFunction`.

Error:     E = (1 / n) * sum((y_i - f(x_i))^2)
Gradients: dE/dp_j = (-2 / n) * sum((y_i - f(x_i)) * df(x_i)/dp_j)
"""

import numpy as np

from .gradient_descent import Dataset, gradient_descent_fit
from .parametric_function import ParametricFunction


def _require_samples(dataset: Dataset) -> int:
    n_samples = len(dataset)
    if n_samples == 0:
        raise ValueError("Dataset is empty.")
    return n_samples


def compute_error(function: ParametricFunction, input_vector, label: float) -> float:
    """Squared residual of a single sample."""
    return (label - function.f(input_vector)) ** 2


def compute_error_average(function: ParametricFunction, dataset: Dataset) -> float:
    """Mean squared error over a non-empty dataset."""
    n_samples = _require_samples(dataset)
    errors_sum = sum(compute_error(function, x, y) for x, y in dataset)
    return errors_sum / n_samples


def compute_error_gradients(function: ParametricFunction, dataset: Dataset) -> np.ndarray:
    """Gradient of the mean squared error with respect to the parameters."""
    n_samples = _require_samples(dataset)
    gradients = np.zeros(len(function.parameters()), dtype=float)

    for x, y in dataset:
        # Signed residual: d/dp (y - f)^2 = -2 * (y - f) * df/dp.
        residual = y - function.f(x)
        gradients += (-2.0 / n_samples) * (residual * function.parameter_gradients(x))

    return gradients


def least_squares_fit(
    function: ParametricFunction,
    dataset: Dataset,
    learning_rate: float,
    max_iterations: int,
) -> list[float]:
    """Minimize the mean squared error of ``function`` on ``dataset``.

    Returns the error trace of :func:`gradient_descent_fit`.
    """
    return gradient_descent_fit(
        dataset,
        function,
        compute_error_average,
        compute_error_gradients,
        max_iterations,
        learning_rate,
    )
