# Scoped wrapper around the native directory enumeration primitive.
# One cursor covers one (directory, pattern) pair and owns at most one
# os.scandir handle. The handle is released on every exit path: on
# exhaustion, on close(), and on context-manager exit.

from __future__ import annotations

import os
import stat
from typing import Iterator, Optional

from fileenum.filetime import ns_to_filetime, split_high_low
from fileenum.models import FileAttributes, RawEntry
from fileenum.patterns import matches


def attributes_from_stat(name: str, st: os.stat_result) -> FileAttributes:
    # Prefer the attribute bits the OS reports (Windows); otherwise derive
    # the same flags from the POSIX mode.
    native = getattr(st, "st_file_attributes", None)
    if native is not None:
        return FileAttributes(native)

    attrs = FileAttributes(0)
    if stat.S_ISDIR(st.st_mode):
        attrs |= FileAttributes.DIRECTORY
    if stat.S_ISLNK(st.st_mode):
        attrs |= FileAttributes.REPARSE_POINT
    if name.startswith("."):
        attrs |= FileAttributes.HIDDEN
    if not st.st_mode & stat.S_IWUSR:
        attrs |= FileAttributes.READONLY
    if not attrs:
        attrs = FileAttributes.NORMAL
    return attrs


def _creation_ns(st: os.stat_result) -> int:
    # Birth time where the platform records it, else inode change time.
    birth = getattr(st, "st_birthtime_ns", None)
    if birth is not None:
        return birth
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return int(birth * 1_000_000_000)
    return st.st_ctime_ns


def raw_entry_from_stat(name: str, st: os.stat_result, is_dir: bool = False) -> RawEntry:
    # is_dir marks links whose target is a directory, which lstat alone
    # reports as a plain link.
    attributes = attributes_from_stat(name, st)
    if is_dir:
        attributes |= FileAttributes.DIRECTORY
    size_high, size_low = split_high_low(st.st_size)
    created_high, created_low = ns_to_filetime(_creation_ns(st))
    accessed_high, accessed_low = ns_to_filetime(st.st_atime_ns)
    modified_high, modified_low = ns_to_filetime(st.st_mtime_ns)
    return RawEntry(
        name=name,
        attributes=attributes,
        size_high=size_high,
        size_low=size_low,
        created_high=created_high,
        created_low=created_low,
        accessed_high=accessed_high,
        accessed_low=accessed_low,
        modified_high=modified_high,
        modified_low=modified_low,
    )


class DirectoryEntryCursor:
    """Lazy sequence of raw entries in ``directory`` matching ``pattern``.

    Use as a context manager. If the directory cannot be opened the cursor
    simply has no entries; the error is kept on ``open_error``. A listing
    that fails partway ends the entries early, keeping ``read_error``.
    ``advance()`` returns ``None`` once the entries are exhausted.
    """

    def __init__(self, directory: str, pattern: str):
        self.directory = directory
        self.pattern = pattern
        self.open_error: Optional[OSError] = None
        self.read_error: Optional[OSError] = None
        self._handle = None
        self._opened = False
        self._exhausted = False
        self._closed = False

    def __enter__(self) -> "DirectoryEntryCursor":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[RawEntry]:
        while True:
            raw = self.advance()
            if raw is None:
                return
            yield raw

    @property
    def opened(self) -> bool:
        # True once the native handle was acquired, even if since released.
        return self._opened

    @property
    def closed(self) -> bool:
        # True whenever no native handle is held.
        return self._handle is None

    def open(self) -> None:
        if self._handle is not None or self._exhausted or self._closed:
            return
        try:
            self._handle = os.scandir(self.directory)
            self._opened = True
        except OSError as exc:
            self.open_error = exc
            self._exhausted = True

    def advance(self) -> Optional[RawEntry]:
        if self._exhausted or self._closed:
            return None
        if self._handle is None:
            self.open()
            if self._handle is None:
                return None

        while True:
            try:
                entry = next(self._handle)
            except StopIteration:
                break
            except OSError as exc:
                # Listing failed partway; nothing further can be read.
                self.read_error = exc
                break
            if not matches(entry.name, self.pattern):
                continue
            try:
                st = entry.stat(follow_symlinks=False)
                is_dir = stat.S_ISLNK(st.st_mode) and entry.is_dir()
            except OSError:
                # Vanished or not stat-able (directory without search
                # permission); the entry was never observed.
                continue
            return raw_entry_from_stat(entry.name, st, is_dir=is_dir)

        self._exhausted = True
        self._release()
        return None

    def close(self) -> None:
        self._closed = True
        self._release()

    def _release(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()
