"""A binary decision tree classifier grown by greedy Gini minimization.

Each node searches every observed feature value as a threshold, keeps the
split with the lowest weighted Gini impurity, and recurses until its samples
are pure or the depth limit is reached.
"""

from ._nodes import Leaf, Decision, Node, NodeVisit, iter_nodes, tree_depth
from ._nodes import count_leaves
from ._impurity import gini_impurity, split_gini
from ._split import Split, best_split
from ._builder import build, build_tree
from ._classifier import predict
from ._schemas import TreeParams
from ._tree import GiniTree

__all__ = [
    "GiniTree",
    "TreeParams",
    "Leaf",
    "Decision",
    "Node",
    "NodeVisit",
    "iter_nodes",
    "tree_depth",
    "count_leaves",
    "gini_impurity",
    "split_gini",
    "Split",
    "best_split",
    "build",
    "build_tree",
    "predict",
]
