"""Tree node types.

A tree is a strict binary tree of immutable nodes. Every node is exactly one of
:class:`Leaf` or :class:`Decision`; a decision node owns its two children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Tuple, Union

from gini_tree.core import Label
from ._impurity import gini_impurity


@dataclass(frozen=True, slots=True)
class Leaf:
    """A terminal node holding a fixed predicted class label."""

    label: Label = field(metadata={"description": "The predicted class label."})
    class_counts: Tuple[int, int] = field(
        default=(0, 0),
        compare=False,
        metadata={
            "description": "Counts of label 0 and label 1 among the training "
            "samples that reached this node."
        },
    )

    @property
    def n_samples(self) -> int:
        """Number of training samples that reached this node."""
        return self.class_counts[0] + self.class_counts[1]

    @property
    def gini(self) -> float:
        """Gini impurity of the training samples at this node."""
        return gini_impurity(self.n_samples, self.class_counts[0])


@dataclass(frozen=True, slots=True)
class Decision:
    """An internal node routing samples by ``sample[feature] < threshold``."""

    feature: int = field(metadata={"description": "Index of the split feature."})
    threshold: float = field(metadata={"description": "The split threshold."})
    left: Node = field(
        metadata={"description": "Subtree for samples below the threshold."}
    )
    right: Node = field(
        metadata={"description": "Subtree for samples at or above the threshold."}
    )
    class_counts: Tuple[int, int] = field(
        default=(0, 0),
        compare=False,
        metadata={
            "description": "Counts of label 0 and label 1 among the training "
            "samples that reached this node."
        },
    )
    score: float = field(
        default=0.0,
        compare=False,
        metadata={"description": "Weighted Gini impurity of the chosen split."},
    )

    @property
    def n_samples(self) -> int:
        """Number of training samples that reached this node."""
        return self.class_counts[0] + self.class_counts[1]

    @property
    def gini(self) -> float:
        """Gini impurity of the training samples at this node."""
        return gini_impurity(self.n_samples, self.class_counts[0])


Node = Union[Leaf, Decision]


class NodeVisit(NamedTuple):
    node_id: int
    parent_id: int | None
    depth: int
    node: Node


def iter_nodes(tree: Node) -> Iterator[NodeVisit]:
    """Walk the tree in pre-order, left before right.

    Node ids are assigned in visiting order, starting at 0 for the root.
    """
    next_id = 0
    stack: list[tuple[Node, int | None, int]] = [(tree, None, 0)]
    while stack:
        node, parent_id, depth = stack.pop()
        node_id = next_id
        next_id += 1
        yield NodeVisit(node_id, parent_id, depth, node)
        if isinstance(node, Decision):
            stack.append((node.right, node_id, depth + 1))
            stack.append((node.left, node_id, depth + 1))


def tree_depth(tree: Node) -> int:
    """Maximum number of decision nodes on any root-to-leaf path."""
    return max(v.depth for v in iter_nodes(tree) if isinstance(v.node, Leaf))


def count_leaves(tree: Node) -> int:
    """Number of leaves in the tree."""
    return sum(1 for v in iter_nodes(tree) if isinstance(v.node, Leaf))
