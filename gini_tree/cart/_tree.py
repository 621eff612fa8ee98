"""GiniTree.

Binary decision tree classifier grown by greedy Gini minimization.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal

import numpy as np
import numpy.typing as npt
import pandas as pd

from gini_tree.core import DataError, Dataset, Label, Labels, Sample
from ._builder import build
from ._classifier import predict
from ._nodes import Decision, Leaf, Node, count_leaves, iter_nodes, tree_depth
from ._schemas import resolve_params
from ._validation import as_dataset, as_labels, check_aligned


logger = logging.getLogger(__name__)


class GiniTree:
    """Binary decision tree classifier.

    Each internal node splits on ``sample[feature] < threshold``, choosing the
    observed feature value with the lowest weighted Gini impurity.

    Args:
        max_depth: Maximum number of decision nodes on any root-to-leaf path.
            If None, ``settings.MAX_DEPTH`` is used.
        empty_label: Label of leaves no training sample reaches.
            If None, ``settings.EMPTY_LABEL`` is used.
    """

    def __init__(
        self,
        max_depth: int | None = None,
        empty_label: Label | None = None,
    ):
        params = resolve_params(max_depth, empty_label)
        self.max_depth: int = params.max_depth
        self.empty_label: Label = params.empty_label

        self._root: Node | None = None
        self._n_features: int | None = None
        self._feature_names: List[str] | None = None

    @property
    def root(self) -> Node:
        """Root node of the fitted tree."""
        if self._root is None:
            raise ValueError("Tree is empty. Fit a tree before using it.")
        return self._root

    @property
    def n_features(self) -> int:
        """Number of features seen during fit."""
        if self._n_features is None:
            raise ValueError("Tree is empty. Fit a tree before using it.")
        return self._n_features

    @property
    def feature_names(self) -> List[str] | None:
        """Column names of the training DataFrame, if fit on one."""
        return self._feature_names

    @property
    def depth(self) -> int:
        """Maximum number of decision nodes on any root-to-leaf path."""
        return tree_depth(self.root)

    @property
    def n_leaves(self) -> int:
        """Number of leaves in the fitted tree."""
        return count_leaves(self.root)

    @property
    def classes(self) -> List[int]:
        """Class labels the tree predicts."""
        return [0, 1]

    def fit(self, X: Dataset, y: Labels) -> GiniTree:
        """Grow the tree on a labeled dataset, replacing any previous tree.

        Args:
            X: Training samples. Column names of a DataFrame are remembered
                and used to align samples at prediction time.
            y: Binary labels aligned with ``X``.

        Returns:
            The fitted tree.

        Raises:
            DataError: If ``X`` or ``y`` is malformed or they differ in length.
        """
        feature_names = (
            [str(c) for c in X.columns] if isinstance(X, pd.DataFrame) else None
        )
        features = as_dataset(X)
        labels = as_labels(y)
        check_aligned(features, labels)
        if labels.shape[0] == 0:
            logger.warning("Fitting a tree on an empty dataset")

        self._root = build(features, labels, 0, self.max_depth, self.empty_label)
        self._n_features = features.shape[1]
        self._feature_names = feature_names
        logger.info(
            f"Fit tree on {labels.shape[0]} samples: depth {self.depth}, "
            f"{self.n_leaves} leaves"
        )
        return self

    def predict_one(self, sample: Sample) -> Label:
        """Predict the label of a single sample."""
        return predict(self.root, sample)

    def predict(self, X: Dataset) -> npt.NDArray[np.intp]:
        """Predict labels for many samples.

        Args:
            X: Samples to classify. A DataFrame is re-ordered to the training
                columns when the tree was fit on one.

        Returns:
            One label per sample.

        Raises:
            DataError: If a sample lacks features used by the tree.
        """
        root = self.root
        if isinstance(X, pd.DataFrame) and self._feature_names is not None:
            missing = [c for c in self._feature_names if c not in X.columns]
            if missing:
                raise DataError(f"Samples are missing training columns: {missing}")
            X = X.loc[:, self._feature_names]

        features = as_dataset(X)
        return np.array([predict(root, row) for row in features], dtype=np.intp)

    def _feature_name(self, feature: int) -> str:
        if self._feature_names is not None:
            return self._feature_names[feature]
        return f"x[{feature}]"

    def to_frame(self) -> pd.DataFrame:
        """Tabulate the nodes of the tree in pre-order, one row per node."""
        rows: List[Dict[str, Any]] = []
        for visit in iter_nodes(self.root):
            node = visit.node
            is_decision = isinstance(node, Decision)
            rows.append(
                {
                    "node_id": visit.node_id,
                    "parent_id": visit.parent_id,
                    "depth": visit.depth,
                    "kind": "decision" if is_decision else "leaf",
                    "feature": node.feature if is_decision else None,
                    "feature_name": (
                        self._feature_name(node.feature) if is_decision else None
                    ),
                    "threshold": node.threshold if is_decision else None,
                    "label": node.label if isinstance(node, Leaf) else None,
                    "n_samples": node.n_samples,
                    "gini": node.gini,
                    "score": node.score if is_decision else None,
                }
            )
        return pd.DataFrame(rows)

    def view(self, format: Literal["png", "svg"] = "png") -> bytes:
        """Render the tree as PNG/SVG bytes.

        Args:
            format: Output image format ('png' or 'svg').

        Returns:
            Rendered tree image data as bytes.

        Raises:
            ValueError: If the tree has not been fit.
            ImportError: If graphviz package is not installed.
        """
        root = self.root
        try:
            from graphviz import Digraph  # type: ignore
        except ImportError as e:
            raise ImportError(
                "The 'graphviz' Python package is required. "
                "Install it with `pip install graphviz`."
            ) from e

        dot = Digraph(
            name="GiniTree",
            format=format,
            graph_attr={"rankdir": "TB"},
        )  # type: ignore

        for visit in iter_nodes(root):
            node = visit.node
            if isinstance(node, Decision):
                label_lines = [
                    f"{self._feature_name(node.feature)} < {node.threshold:g}",
                    f"gini={node.gini:.3f}",
                ]
                fillcolor = "lightgrey"
            else:
                label_lines = [f"label={node.label}", f"gini={node.gini:.3f}"]
                fillcolor = "lightblue"
            label_lines.append(f"samples={node.n_samples}")

            dot.node(  # type: ignore
                str(visit.node_id),
                "\\n".join(label_lines),
                shape="box",
                style="rounded,filled",
                fillcolor=fillcolor,
                fontsize="10",
            )
            if visit.parent_id is not None:
                dot.edge(str(visit.parent_id), str(visit.node_id))  # type: ignore

        return dot.pipe(format=format)  # type: ignore

    def __repr__(self) -> str:
        return f"GiniTree(max_depth={self.max_depth}, empty_label={self.empty_label})"

    def __str__(self) -> str:
        if self._root is None:
            return f"{self!r} (not fitted)"
        return f"{self!r} with depth {self.depth} and {self.n_leaves} leaves"
