# Package initialization for fileenum.
# Re-exports the walker entry points so callers can use
# `fileenum.enumerate_files(...)` without reaching into submodules.

from fileenum.errors import FileEnumError, InvalidRootError
from fileenum.models import FileAttributes, FileRecord, SkipEntry, WalkResult
from fileenum.patterns import PatternSet
from fileenum.walker import Walk, enumerate_files, get_files, iter_files

__all__ = [
    "__version__",
    "FileAttributes",
    "FileEnumError",
    "FileRecord",
    "InvalidRootError",
    "PatternSet",
    "SkipEntry",
    "Walk",
    "WalkResult",
    "enumerate_files",
    "get_files",
    "iter_files",
]

# Package version.
# This is duplicated in pyproject.toml; keep them in sync.
__version__ = "0.1.0"
