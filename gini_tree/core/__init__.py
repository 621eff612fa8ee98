"""Settings, errors and shared types used across the library."""

from ._config import Settings, settings
from ._exceptions import DataError, CorruptionError
from ._types import Label, Sample, Dataset, Labels, FeatureMatrix, LabelArray

__all__ = [
    "Settings",
    "settings",
    "DataError",
    "CorruptionError",
    "Label",
    "Sample",
    "Dataset",
    "Labels",
    "FeatureMatrix",
    "LabelArray",
]
