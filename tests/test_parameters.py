import re

import numpy as np
import pytest

from gradfit.exceptions import DimensionMismatchError
from gradfit.parameters import ParameterVector


def test_set_vector_replaces_values() -> None:
    parameters = ParameterVector([1.0, 2.0, 3.0])
    assert parameters.vector().tolist() == [1.0, 2.0, 3.0]
    parameters.set_vector([3.0, 2.0, 1.0])
    assert parameters.vector().tolist() == [3.0, 2.0, 1.0]
    assert len(parameters) == 3


@pytest.mark.parametrize("new_vector", [[3.0, 2.0], [3.0, 2.0, 1.0, 0.0]])
def test_set_vector_with_wrong_size(new_vector) -> None:
    parameters = ParameterVector([1.0, 2.0, 3.0])
    expected = re.escape(f"different size ({len(new_vector)} instead of 3)")
    with pytest.raises(DimensionMismatchError, match=expected) as excinfo:
        parameters.set_vector(new_vector)
    assert excinfo.value.actual == len(new_vector)
    assert excinfo.value.expected == 3
    assert parameters.vector().tolist() == [1.0, 2.0, 3.0]


def test_vector_is_read_only() -> None:
    parameters = ParameterVector([1.0, 2.0])
    with pytest.raises(ValueError):
        parameters.vector()[0] = 5.0
    assert parameters.vector().tolist() == [1.0, 2.0]


def test_set_vector_copies_caller_array() -> None:
    source = np.array([1.0, 2.0])
    parameters = ParameterVector([0.0, 0.0])
    parameters.set_vector(source)
    source[0] = 9.0
    assert parameters.vector().tolist() == [1.0, 2.0]


@pytest.mark.parametrize("values", [[[1.0, 2.0]], 3.0])
def test_rejects_non_vector_values(values) -> None:
    with pytest.raises(DimensionMismatchError, match="one-dimensional"):
        ParameterVector(values)

    parameters = ParameterVector([1.0, 2.0])
    with pytest.raises(DimensionMismatchError, match="one-dimensional"):
        parameters.set_vector(values)
    assert parameters.vector().tolist() == [1.0, 2.0]
