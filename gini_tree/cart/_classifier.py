from __future__ import annotations

from gini_tree.core import CorruptionError, DataError, Label, Sample
from ._nodes import Decision, Leaf, Node
from ._validation import as_sample


def predict(tree: Node, sample: Sample) -> Label:
    """Classify one sample by walking the tree from its root.

    At each decision node the sample goes left when
    ``sample[feature] < threshold`` and right otherwise.

    Raises:
        DataError: If the sample lacks a feature the path splits on.
        CorruptionError: If the tree contains something other than nodes.
    """
    values = as_sample(sample)
    node = tree
    while not isinstance(node, Leaf):
        if not isinstance(node, Decision):
            raise CorruptionError(f"Unexpected tree node of type {type(node)!r}")
        if node.feature >= len(values):
            raise DataError(
                f"Sample has {len(values)} features but the tree splits "
                f"on feature {node.feature}"
            )
        node = node.left if values[node.feature] < node.threshold else node.right
    return node.label
