import pandas as pd
import pytest

from gradfit.datasets import input_size_of, load_csv_dataset, make_dataset, norris


def test_make_dataset_from_scalars() -> None:
    dataset = make_dataset([1, 2], [3, 4])
    assert [x.tolist() for x, _ in dataset] == [[1.0], [2.0]]
    assert [y for _, y in dataset] == [3.0, 4.0]
    assert input_size_of(dataset) == 1


def test_make_dataset_rejects_ragged_inputs() -> None:
    with pytest.raises(ValueError, match=r"Inconsistent input size"):
        make_dataset([[1.0, 2.0], [1.0]], [0.0, 1.0])


def test_make_dataset_rejects_length_mismatch() -> None:
    with pytest.raises(ValueError):
        make_dataset([1.0, 2.0], [1.0])


def test_input_size_of_empty() -> None:
    assert input_size_of([]) == 0


def test_norris() -> None:
    dataset = norris()
    assert len(dataset) == 36
    assert input_size_of(dataset) == 1
    assert dataset[0][0].tolist() == [0.2]
    assert dataset[0][1] == 0.1


def test_load_csv_dataset(tmp_path) -> None:
    path = tmp_path / "data.csv"
    pd.DataFrame(
        {"a": [1.0, 2.0], "name": ["x", "y"], "b": [3.0, 4.0], "y": [5.0, 6.0]}
    ).to_csv(path, index=False)

    dataset = load_csv_dataset(str(path), "y")
    assert [x.tolist() for x, _ in dataset] == [[1.0, 3.0], [2.0, 4.0]]
    assert [y for _, y in dataset] == [5.0, 6.0]

    dataset = load_csv_dataset(str(path), "y", features=["b"])
    assert [x.tolist() for x, _ in dataset] == [[3.0], [4.0]]


def test_load_csv_dataset_missing_column(tmp_path) -> None:
    path = tmp_path / "data.csv"
    pd.DataFrame({"a": [1.0], "y": [2.0]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="target"):
        load_csv_dataset(str(path), "target")
