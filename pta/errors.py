"""Errors raised while loading a catalog dump.

Only loading can fail. A malformed numeric field is not an error: the loader
records the value as unknown and keeps going.
"""


class DatasetError(Exception):
    """Base class for fatal load failures."""


class SourceNotFound(DatasetError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Dataset file not found: {path}")
        self.path = path


class EmptyDataset(DatasetError, ValueError):
    def __init__(self, path: str):
        super().__init__(f"Dataset appears to be empty - no valid products found in {path}")
        self.path = path
