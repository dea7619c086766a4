# Per-directory multi-pattern scanning for fileenum.
# Each pattern gets its own cursor, drained completely and closed before
# the next pattern's cursor is opened, so only one native handle is live
# at a time. The scanner knows about patterns only; it does not filter
# by entry kind.

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Set

from fileenum.cursor import DirectoryEntryCursor
from fileenum.models import FileRecord

CursorFactory = Callable[[str, str], DirectoryEntryCursor]


def scan_directory(
    directory: str,
    patterns: Iterable[str],
    cursor_factory: CursorFactory = DirectoryEntryCursor,
) -> Iterator[FileRecord]:
    # Yield records for every entry in `directory` matching any pattern.
    # Patterns are tried in order; a name matched by an earlier pattern is
    # not yielded again by a later one.
    seen: Set[str] = set()

    for pattern in patterns:
        with cursor_factory(directory, pattern) as cursor:
            while True:
                raw = cursor.advance()
                if raw is None:
                    break
                if raw.name in seen:
                    continue
                seen.add(raw.name)
                yield FileRecord.from_raw(directory, raw)
