from __future__ import annotations

import logging
from typing import NamedTuple

from gini_tree.core import FeatureMatrix, LabelArray
from ._impurity import split_gini


logger = logging.getLogger(__name__)


class Split(NamedTuple):
    """A candidate split and its weighted Gini impurity."""

    feature: int
    threshold: float
    score: float


def best_split(X: FeatureMatrix, y: LabelArray) -> Split | None:
    """Find the split of ``X`` with the lowest weighted Gini impurity.

    Every observed value of every feature is tried as a threshold, feature by
    feature and in sample order. The first candidate reaching the lowest score
    wins; later candidates with an equal score do not replace it.

    Args:
        X: Feature matrix, one row per sample.
        y: Binary labels aligned with the rows of ``X``.

    Returns:
        The winning split, or None if ``X`` has no features to split on.

    Raises:
        ValueError: If ``X`` holds no samples.
    """
    n_samples, n_features = X.shape
    if n_samples == 0:
        raise ValueError("Cannot search splits of an empty dataset")

    best: Split | None = None
    for feature in range(n_features):
        for i in range(n_samples):
            threshold = float(X[i, feature])
            score = split_gini(X, y, feature, threshold)
            if best is None or score < best.score:
                best = Split(feature, threshold, score)

    if best is not None:
        logger.debug(
            f"Best split: feature {best.feature} < {best.threshold} "
            f"(gini={best.score:.4f}) over {n_samples} samples"
        )
    return best
