# Error types for fileenum.
# Only an invalid root is fatal; every other failure during a walk is
# recorded in the skip log or treated as "no matches".

from __future__ import annotations


class FileEnumError(ValueError):
    """Base class for fileenum errors."""

    pass


class InvalidRootError(FileEnumError):
    """The walk root does not exist, is not a directory, or cannot be listed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid root {path}: {reason}")
