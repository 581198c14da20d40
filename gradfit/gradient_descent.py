from typing import Callable, Sequence, Tuple

import numpy as np

from .parametric_function import ParametricFunction

Dataset = Sequence[Tuple[np.ndarray, float]]
ErrorFn = Callable[[ParametricFunction, Dataset], float]
GradientFn = Callable[[ParametricFunction, Dataset], np.ndarray]


def gradient_descent_fit(
    dataset: Dataset,
    function: ParametricFunction,
    compute_error_average: ErrorFn,
    compute_error_gradients: GradientFn,
    max_iterations: int,
    learning_rate: float,
) -> list[float]:
    """Fit ``function`` to ``dataset`` with batch gradient descent.

    Runs ``max_iterations - 1`` update steps. Each step computes the
    gradients on the current parameters, records the error of the current
    (pre-update) parameters and then replaces the parameters with
    ``parameters - learning_rate * gradients``. There is no convergence
    check: a learning rate too large for the data scale makes the
    parameters diverge.

    Args:
        dataset: Sequence of ``(input_vector, label)`` pairs, read only.
        function: Function whose parameters are replaced on every step.
        compute_error_average: ``(function, dataset) -> float``.
        compute_error_gradients: ``(function, dataset) -> array`` parallel
            to the parameter vector.
        max_iterations: Upper bound (exclusive) of the iteration counter.
        learning_rate: Step size of each update.

    Returns:
        Error trace with one entry per update step.
    """
    errors: list[float] = []

    for _ in range(1, max_iterations):
        parameters = function.parameters()
        gradients = np.asarray(compute_error_gradients(function, dataset), dtype=float)
        new_parameters = parameters - learning_rate * gradients

        errors.append(float(compute_error_average(function, dataset)))
        function.set_parameters(new_parameters)

    return errors
