from typing import Dict, List, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .parametric_function import ParametricFunction


def plot_fit(
    inputs: Sequence[float],
    labels: Sequence[float],
    function: ParametricFunction,
    out_path: str,
    title: str = "Least Squares Fit",
) -> None:
    """Plot the samples of a one-variable dataset against the fitted function."""
    xs = np.asarray(inputs, dtype=float).ravel()
    predictions = [function.f([x]) for x in xs]

    plt.figure(figsize=(8, 5))
    plt.plot(xs, labels, color="blue", label="sample")
    plt.plot(xs, predictions, color="red", label="prediction")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()


def plot_error_trace(error_traces: Dict[str, List[float]], out_path: str, title: str) -> None:
    plt.figure(figsize=(8, 5))
    for name, errors in error_traces.items():
        plt.plot(errors, label=name)
    plt.xlabel("Iteration")
    plt.ylabel("Mean Squared Error")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()
