from __future__ import annotations

import numpy as np

from gini_tree.core import FeatureMatrix, LabelArray


def gini_impurity(n: int, n0: int) -> float:
    """Gini impurity of a group of ``n`` binary labels, ``n0`` of them zero.

    An empty group has impurity 0.
    """
    if n == 0:
        return 0.0
    p0 = n0 / n
    p1 = (n - n0) / n
    return 1.0 - (p0**2 + p1**2)


def split_gini(
    X: FeatureMatrix, y: LabelArray, feature: int, threshold: float
) -> float:
    """Weighted Gini impurity of splitting ``X`` on ``X[:, feature] < threshold``.

    Args:
        X: Feature matrix, one row per sample.
        y: Binary labels aligned with the rows of ``X``.
        feature: Column of ``X`` to split on.
        threshold: Samples strictly below it go left, all others go right.

    Returns:
        ``(n_left / n) * gini(left) + (n_right / n) * gini(right)``.

    Raises:
        ValueError: If ``X`` holds no samples.
    """
    total = y.shape[0]
    if total == 0:
        raise ValueError("Cannot score a split of an empty dataset")

    goes_left = X[:, feature] < threshold
    is_zero = y == 0

    n_left = int(np.count_nonzero(goes_left))
    n_right = total - n_left
    left_zeros = int(np.count_nonzero(goes_left & is_zero))
    right_zeros = int(np.count_nonzero(is_zero)) - left_zeros

    left_gini = gini_impurity(n_left, left_zeros)
    right_gini = gini_impurity(n_right, right_zeros)
    return (n_left / total) * left_gini + (n_right / total) * right_gini
