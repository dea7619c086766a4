# Unit tests for fileenum.scanner.
# These tests validate that patterns are drained one at a time, in order,
# with one cursor open at most.

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from fileenum.models import FileAttributes, RawEntry
from fileenum.scanner import scan_directory


class FakeCursor:
    # Cursor stand-in serving canned entries per pattern and logging
    # open/close events.
    def __init__(self, directory: str, pattern: str, entries: Dict[str, List[str]], events: list):
        self.directory = directory
        self.pattern = pattern
        self._names = list(entries.get(pattern, []))
        self._events = events

    def __enter__(self) -> "FakeCursor":
        self._events.append(("open", self.pattern))
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._events.append(("close", self.pattern))

    def advance(self):
        if not self._names:
            return None
        name = self._names.pop(0)
        attrs = FileAttributes.DIRECTORY if name.endswith("/") else FileAttributes.NORMAL
        return RawEntry(name=name.rstrip("/"), attributes=attrs)


def _factory(entries: Dict[str, List[str]], events: list):
    return lambda directory, pattern: FakeCursor(directory, pattern, entries, events)


def test_patterns_drained_in_order_one_cursor_at_a_time() -> None:
    events: list = []
    entries = {"*.txt": ["a.txt", "c.txt"], "*.log": ["b.log"]}

    got = [r.name for r in scan_directory("/d", ["*.txt", "*.log"], _factory(entries, events))]

    assert got == ["a.txt", "c.txt", "b.log"]
    assert events == [
        ("open", "*.txt"),
        ("close", "*.txt"),
        ("open", "*.log"),
        ("close", "*.log"),
    ]


def test_empty_pattern_does_not_stop_later_patterns() -> None:
    events: list = []
    entries = {"*.mp4": [], "*.mov": ["clip.mov"], "*.wmv": ["old.wmv"]}

    got = [
        r.name
        for r in scan_directory("/d", ["*.mp4", "*.mov", "*.wmv"], _factory(entries, events))
    ]

    assert got == ["clip.mov", "old.wmv"]
    assert [e for e in events if e[0] == "open"] == [
        ("open", "*.mp4"),
        ("open", "*.mov"),
        ("open", "*.wmv"),
    ]


def test_overlapping_patterns_do_not_duplicate() -> None:
    entries = {"*.txt": ["a.txt", "b.txt"], "a*": ["a.txt", "a.log"]}

    got = [r.name for r in scan_directory("/d", ["*.txt", "a*"], _factory(entries, []))]

    assert got == ["a.txt", "b.txt", "a.log"]


def test_scanner_yields_directories_and_sets_full_path() -> None:
    entries = {"*": ["sub/", "f.txt"]}

    got = list(scan_directory("/d", ["*"], _factory(entries, [])))

    assert [r.name for r in got] == ["sub", "f.txt"]
    assert got[0].is_directory
    assert got[1].full_path.endswith("f.txt")
    assert got[1].full_path.startswith("/d")


def test_nothing_matching_yields_empty_sequence() -> None:
    assert list(scan_directory("/d", ["*.zip"], _factory({}, []))) == []


def test_union_on_real_directory(tmp_path: Path) -> None:
    for name in ("a.txt", "b.log", "c.txt"):
        (tmp_path / name).write_text(name, encoding="utf-8")

    got = [r.name for r in scan_directory(str(tmp_path), ["*.txt", "*.log"])]

    assert sorted(got) == ["a.txt", "b.log", "c.txt"]
    assert len(got) == 3
    # Every *.txt match comes before the *.log match.
    assert got[-1] == "b.log"


def test_cursor_closed_when_consumer_stops_early() -> None:
    events: list = []
    entries = {"*": ["a", "b", "c"]}

    gen = scan_directory("/d", ["*"], _factory(entries, events))
    next(gen)
    gen.close()

    assert events == [("open", "*"), ("close", "*")]
