from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .gradient_descent import Dataset


# NIST StRD linear regression reference dataset "Norris" (y, x), 36 observations.
NORRIS_DATA = [
    (0.1, 0.2), (338.8, 337.4), (118.1, 118.2), (888.0, 884.6),
    (9.2, 10.1), (228.1, 226.5), (668.5, 666.3), (998.5, 996.3),
    (449.1, 448.6), (778.9, 777.0), (559.2, 558.2), (0.3, 0.4),
    (0.1, 0.6), (778.1, 775.5), (668.8, 666.9), (339.3, 338.0),
    (448.9, 447.5), (10.8, 11.6), (557.7, 556.0), (228.3, 228.1),
    (998.0, 995.8), (888.8, 887.6), (119.6, 120.2), (0.3, 0.3),
    (0.6, 0.3), (557.6, 556.8), (339.3, 339.1), (888.0, 887.2),
    (998.5, 999.0), (778.9, 779.0), (10.2, 11.1), (117.6, 118.3),
    (228.9, 229.2), (668.4, 669.1), (449.2, 448.9), (0.2, 0.5),
]

# Certified values: parameter -> (estimate, standard deviation).
NORRIS_CERTIFIED = {
    "intercept": (-0.262323073774029, 0.232818234301152),
    "slope": (1.00211681802045, 0.429796848199937e-03),
}


def make_dataset(inputs: Iterable, labels: Iterable[float]) -> list[tuple[np.ndarray, float]]:
    """Pair input vectors with labels.

    Scalars are treated as one-variable inputs. All inputs must share the
    same number of variables.
    """
    pairs: list[tuple[np.ndarray, float]] = []
    input_size: int | None = None

    for x, y in zip(inputs, labels, strict=True):
        vector = np.atleast_1d(np.asarray(x, dtype=float)).ravel()
        if input_size is None:
            input_size = vector.shape[0]
        elif vector.shape[0] != input_size:
            raise ValueError(
                f"Inconsistent input size in dataset ({vector.shape[0]} instead of {input_size})."
            )
        pairs.append((vector, float(y)))

    return pairs


def input_size_of(dataset: Dataset) -> int:
    if len(dataset) == 0:
        return 0
    return len(dataset[0][0])


def norris() -> list[tuple[np.ndarray, float]]:
    labels = [y for y, _ in NORRIS_DATA]
    inputs = [x for _, x in NORRIS_DATA]
    return make_dataset(inputs, labels)


def prepare_features(
    df: pd.DataFrame, target: str, features: Sequence[str] | None = None
) -> tuple[pd.DataFrame, pd.Series]:
    missing = [c for c in [target, *(features or [])] if c not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in input: {', '.join(missing)}")

    y = df[target]
    if features:
        X = df[list(features)]
    else:
        X = df.drop(columns=[target])
    X = X.select_dtypes(include=[np.number])
    return X, y


def load_csv_dataset(
    path: str, target: str, features: Sequence[str] | None = None
) -> list[tuple[np.ndarray, float]]:
    """Read a CSV file into ``(input_vector, label)`` pairs.

    Feature columns are ``features`` when given, otherwise every numeric
    column except ``target``.
    """
    X, y = prepare_features(pd.read_csv(path), target, features)
    return make_dataset(X.to_numpy(dtype=float), y.to_numpy(dtype=float))
