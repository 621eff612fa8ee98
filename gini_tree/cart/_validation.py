"""Coercion of caller data into the arrays the tree works on."""

from __future__ import annotations

from typing import Any, List

import numpy as np
import pandas as pd

from gini_tree.core import DataError, Dataset, Labels, Sample
from gini_tree.core import FeatureMatrix, LabelArray


def as_dataset(dataset: Dataset) -> FeatureMatrix:
    """Convert samples to a 2-D float array, checking they share one width."""
    if isinstance(dataset, pd.DataFrame):
        rows: Any = dataset.to_numpy()
    else:
        rows = dataset

    if not isinstance(rows, np.ndarray):
        rows = list(rows)
        if any(isinstance(sample, (str, bytes)) for sample in rows):
            raise DataError("Every sample must be a sequence of features")
        try:
            widths = {len(sample) for sample in rows}
        except TypeError as e:
            raise DataError("Every sample must be a sequence of features") from e
        if len(widths) > 1:
            raise DataError(
                f"All samples must have the same number of features, "
                f"got widths {sorted(widths)}"
            )
        if not rows:
            return np.empty((0, 0), dtype=np.float64)

    try:
        X = np.asarray(rows, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise DataError("Feature values must be numeric") from e

    if X.ndim != 2:
        raise DataError(f"Dataset must be 2-dimensional, got {X.ndim} dims")
    if not np.isfinite(X).all():
        raise DataError("Feature values must be finite; missing values unsupported")
    return X


def as_labels(labels: Labels) -> LabelArray:
    """Convert labels to a 1-D integer array, checking they are all 0 or 1."""
    values = labels.to_numpy() if isinstance(labels, pd.Series) else labels
    y = np.asarray(values)
    if y.ndim != 1:
        raise DataError(f"Labels must be 1-dimensional, got {y.ndim} dims")
    if y.size and (y.dtype.kind not in "biuf" or not np.isin(y, (0, 1)).all()):
        raise DataError("Labels must be binary: every label must be 0 or 1")
    return y.astype(np.intp)


def as_sample(sample: Sample) -> List[float]:
    """Convert one sample to a list of floats."""
    values = sample.to_numpy() if isinstance(sample, pd.Series) else sample
    try:
        x = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise DataError("Feature values must be numeric") from e
    if x.ndim != 1:
        raise DataError(f"A sample must be 1-dimensional, got {x.ndim} dims")
    return [float(v) for v in x]


def check_aligned(X: FeatureMatrix, y: LabelArray) -> None:
    if X.shape[0] != y.shape[0]:
        raise DataError(
            f"Dataset and labels must have the same length, "
            f"got {X.shape[0]} samples and {y.shape[0]} labels"
        )
