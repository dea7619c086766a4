# Filter string parsing for fileenum.
# A filter is one or more glob patterns joined by a delimiter, e.g.
# "*.mp4|*.mov|". Parsing never fails: blank input means "everything".

from __future__ import annotations

import fnmatch
from typing import Iterator, Optional, Sequence, Tuple, overload

WILDCARD = "*"
DEFAULT_DELIMITER = "|"


def matches(name: str, pattern: str) -> bool:
    # Match a single entry name against one glob pattern.
    # fnmatch normalizes case the way the host filesystem does.
    return fnmatch.fnmatch(name, pattern)


class PatternSet(Sequence[str]):
    """Ordered, duplicate-free, never-empty sequence of glob patterns.

    Order is the left-to-right order of the filter string and decides the
    order in which patterns are tried inside each directory.
    """

    __slots__ = ("_patterns", "delimiter")

    def __init__(self, patterns: Sequence[str] = (), delimiter: str = DEFAULT_DELIMITER):
        cleaned = []
        for pattern in patterns:
            pattern = pattern.strip()
            if pattern and pattern not in cleaned:
                cleaned.append(pattern)
        if not cleaned:
            cleaned.append(WILDCARD)
        self._patterns: Tuple[str, ...] = tuple(cleaned)
        self.delimiter = delimiter

    @classmethod
    def parse(cls, raw: Optional[str], delimiter: str = DEFAULT_DELIMITER) -> "PatternSet":
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if raw is None:
            return cls((), delimiter)
        return cls(raw.split(delimiter), delimiter)

    @property
    def is_wildcard(self) -> bool:
        return self._patterns == (WILDCARD,)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index):
        return self._patterns[index]

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PatternSet):
            return self._patterns == other._patterns
        if isinstance(other, (tuple, list)):
            return self._patterns == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._patterns)

    def __repr__(self) -> str:
        return f"PatternSet({list(self._patterns)!r})"

    def __str__(self) -> str:
        return self.delimiter.join(self._patterns)
