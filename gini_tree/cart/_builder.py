"""Recursive, greedy induction of Gini decision trees."""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from gini_tree.core import Dataset, FeatureMatrix, Label, LabelArray, Labels
from ._nodes import Decision, Leaf, Node
from ._schemas import resolve_params
from ._split import Split, best_split
from ._validation import as_dataset, as_labels, check_aligned


logger = logging.getLogger(__name__)


def _class_counts(y: LabelArray) -> Tuple[int, int]:
    class_0 = int(np.count_nonzero(y == 0))
    return class_0, y.shape[0] - class_0


def _majority_leaf(class_counts: Tuple[int, int]) -> Leaf:
    class_0, class_1 = class_counts
    return Leaf(label=0 if class_0 > class_1 else 1, class_counts=class_counts)


def _unsplittable_chain(
    split: Split,
    class_counts: Tuple[int, int],
    empty_left: bool,
    depth: int,
    max_depth: int,
    empty_label: Label,
) -> Node:
    """Build the nodes for a split that sends every sample to one side.

    The same samples reach the next level, which repeats the same split, so
    one decision node per remaining level is built bottom-up without
    recursing. Each one has an empty leaf on the empty side, and the chain
    ends in the majority leaf at ``max_depth``.
    """
    node: Node = _majority_leaf(class_counts)
    for _ in range(max_depth - depth):
        empty = Leaf(label=empty_label, class_counts=(0, 0))
        node = Decision(
            feature=split.feature,
            threshold=split.threshold,
            left=empty if empty_left else node,
            right=node if empty_left else empty,
            class_counts=class_counts,
            score=split.score,
        )
    return node


def build(
    X: FeatureMatrix,
    y: LabelArray,
    depth: int,
    max_depth: int,
    empty_label: Label = 1,
) -> Node:
    """Build the subtree for the samples reaching a node at ``depth``.

    The node becomes a leaf when its samples are pure, when ``depth`` has
    reached ``max_depth`` or when no sample reaches it. Leaves predict the
    majority label, with ties going to 1; empty leaves predict ``empty_label``.
    Otherwise the node splits on :func:`best_split` and both children are built
    at ``depth + 1``.

    Args:
        X: Feature matrix of the samples reaching this node.
        y: Binary labels aligned with the rows of ``X``.
        depth: Depth of this node; the root is at 0.
        max_depth: Depth at which nodes are forced to be leaves.
        empty_label: Label of leaves with no training samples.

    Returns:
        The root of the subtree.
    """
    class_counts = _class_counts(y)
    class_0, class_1 = class_counts

    if class_0 + class_1 == 0:
        logger.debug(f"Empty leaf at depth {depth} with label {empty_label}")
        return Leaf(label=empty_label, class_counts=class_counts)

    if class_0 == 0 or class_1 == 0 or depth >= max_depth:
        leaf = _majority_leaf(class_counts)
        logger.debug(
            f"Terminal node at depth {depth} with label {leaf.label} "
            f"(class counts {class_counts})"
        )
        return leaf

    split = best_split(X, y)
    if split is None:
        logger.debug(f"No candidate split at depth {depth}. Terminating node.")
        return _majority_leaf(class_counts)

    goes_left = X[:, split.feature] < split.threshold
    n_left = int(np.count_nonzero(goes_left))
    if n_left == 0 or n_left == y.shape[0]:
        logger.debug(
            f"Split on feature {split.feature} at depth {depth} leaves one side empty"
        )
        return _unsplittable_chain(
            split, class_counts, n_left == 0, depth, max_depth, empty_label
        )

    left = build(X[goes_left], y[goes_left], depth + 1, max_depth, empty_label)
    right = build(X[~goes_left], y[~goes_left], depth + 1, max_depth, empty_label)
    return Decision(
        feature=split.feature,
        threshold=split.threshold,
        left=left,
        right=right,
        class_counts=class_counts,
        score=split.score,
    )


def build_tree(
    dataset: Dataset,
    labels: Labels,
    max_depth: int | None = None,
    *,
    empty_label: Label | None = None,
) -> Node:
    """Induce a decision tree from a labeled dataset.

    Args:
        dataset: Samples of equal width with numeric feature values.
        labels: One label per sample, each 0 or 1.
        max_depth: Maximum number of decision nodes on any root-to-leaf path.
            Defaults to ``settings.MAX_DEPTH``.
        empty_label: Label of leaves that no training sample reaches.
            Defaults to ``settings.EMPTY_LABEL``.

    Returns:
        The root node of the tree.

    Raises:
        DataError: If the samples are ragged or non-numeric, the labels are
            not binary, or the two differ in length.
        ValueError: If ``max_depth`` is not a positive integer.
    """
    params = resolve_params(max_depth, empty_label)
    X = as_dataset(dataset)
    y = as_labels(labels)
    check_aligned(X, y)

    if y.shape[0] == 0:
        logger.warning("Building a tree from an empty dataset")

    return build(X, y, 0, params.max_depth, params.empty_label)
