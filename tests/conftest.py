import matplotlib

matplotlib.use("Agg")

import pytest

from gradfit.linear_function import LinearFunction


@pytest.fixture
def identity_function() -> LinearFunction:
    """f(x) = x"""
    function = LinearFunction(1)
    function.set_parameters([0.0, 1.0])
    return function
