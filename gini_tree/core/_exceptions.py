class DataError(Exception):
    """Data not in the expected format."""


class CorruptionError(Exception):
    """Internal state corruption detected. A tree's structure is corrupted."""
