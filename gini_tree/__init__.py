"""Gini Tree.

A small Python library for inducing binary decision-tree classifiers with
greedy, Gini-minimizing recursive partitioning and for classifying new
samples with the resulting trees.
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path

from gini_tree.core import settings, Settings, DataError, CorruptionError
from gini_tree.cart import (
    GiniTree,
    Leaf,
    Decision,
    Node,
    Split,
    build,
    build_tree,
    predict,
    best_split,
    split_gini,
    gini_impurity,
)


def _detect_version() -> str:
    """Return the installed distribution version, with a dev fallback.

    First tries importlib.metadata for the installed wheel/sdist. If that fails
    (e.g., running directly from a source checkout without installation), it
    reads the static ``[project].version`` from ``pyproject.toml`` at the
    repository root. As a last resort, returns a sentinel version string.
    """
    distribution_name = "gini-tree"

    try:
        return _pkg_version(distribution_name)
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).resolve().parent.parent / "pyproject.toml"
    if pyproject_path.is_file():
        import tomllib

        try:
            data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            data = {}
        project_version = data.get("project", {}).get("version")
        if isinstance(project_version, str) and project_version:
            return project_version

    return "0.0.0+unknown"


__version__: str = _detect_version()

__all__ = [
    "__version__",
    "settings",
    "Settings",
    "DataError",
    "CorruptionError",
    "GiniTree",
    "Leaf",
    "Decision",
    "Node",
    "Split",
    "build",
    "build_tree",
    "predict",
    "best_split",
    "split_gini",
    "gini_impurity",
]
