# Record of directories skipped during a walk.
# Skips are data, not exceptions: a directory that cannot be listed is
# appended here and the walk moves on.

from __future__ import annotations

from typing import Iterator, List, Tuple

from fileenum.models import SkipEntry


def describe_error(exc: BaseException) -> str:
    # Human readable one-liner, e.g. "PermissionError: Permission denied".
    name = type(exc).__name__
    if isinstance(exc, OSError) and exc.strerror:
        return f"{name}: {exc.strerror}"
    message = str(exc)
    return f"{name}: {message}" if message else name


class SkipLog:
    """Ordered, append-only list of (path, reason) pairs for one walk."""

    def __init__(self) -> None:
        self._entries: List[SkipEntry] = []

    def record(self, path: str, error: BaseException) -> SkipEntry:
        entry = SkipEntry(path=path, reason=describe_error(error))
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> Tuple[SkipEntry, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[SkipEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
