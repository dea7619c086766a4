# Shared data models for fileenum.
# Lives in its own module to avoid circular imports between the walker,
# the cursor, and the cli.

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path as FSPath
from typing import NamedTuple, Optional, Tuple

from fileenum.filetime import combine_high_low, filetime_to_datetime


class FileAttributes(enum.IntFlag):
    # Bit values follow the Win32 FILE_ATTRIBUTE_* constants so that
    # st_file_attributes can be used unchanged where the platform has it.
    READONLY = 0x1
    HIDDEN = 0x2
    SYSTEM = 0x4
    DIRECTORY = 0x10
    ARCHIVE = 0x20
    NORMAL = 0x80
    REPARSE_POINT = 0x400


class WalkState(str, enum.Enum):
    idle = "idle"
    scanning = "scanning"
    expanding = "expanding"
    done = "done"


@dataclass(frozen=True)
class RawEntry:
    # One record as produced by the native enumeration primitive.
    name: str
    attributes: FileAttributes
    size_high: int = 0
    size_low: int = 0
    created_high: int = 0
    created_low: int = 0
    accessed_high: int = 0
    accessed_low: int = 0
    modified_high: int = 0
    modified_low: int = 0


@dataclass(frozen=True)
class FileRecord:
    """Snapshot of one matched filesystem entry at the moment it was observed.

    Timestamps are stored in UTC; the ``created_at`` / ``accessed_at`` /
    ``modified_at`` properties are local-time views computed on access.
    ``full_path`` is fixed at discovery time and never recomputed.
    """

    attributes: FileAttributes
    created_at_utc: datetime
    accessed_at_utc: datetime
    modified_at_utc: datetime
    size_bytes: int
    name: str
    full_path: str

    @classmethod
    def from_raw(cls, directory: str, raw: RawEntry) -> "FileRecord":
        attributes = FileAttributes(raw.attributes)
        if attributes & FileAttributes.DIRECTORY:
            size = 0
        else:
            size = combine_high_low(raw.size_high, raw.size_low)
        return cls(
            attributes=attributes,
            created_at_utc=filetime_to_datetime(raw.created_high, raw.created_low),
            accessed_at_utc=filetime_to_datetime(raw.accessed_high, raw.accessed_low),
            modified_at_utc=filetime_to_datetime(raw.modified_high, raw.modified_low),
            size_bytes=size,
            name=raw.name,
            full_path=os.path.join(directory, raw.name),
        )

    @property
    def is_directory(self) -> bool:
        return bool(self.attributes & FileAttributes.DIRECTORY)

    @property
    def created_at(self) -> datetime:
        return self.created_at_utc.astimezone()

    @property
    def accessed_at(self) -> datetime:
        return self.accessed_at_utc.astimezone()

    @property
    def modified_at(self) -> datetime:
        return self.modified_at_utc.astimezone()

    def __str__(self) -> str:
        return self.name


class SkipEntry(NamedTuple):
    # A directory whose children could not be listed, and why.
    path: str
    reason: str


class WalkResult(NamedTuple):
    # Unpacks as (files, skipped), matching the walk's return pair.
    files: Tuple[FileRecord, ...]
    skipped: Tuple[SkipEntry, ...]


@dataclass(frozen=True)
class Options:
    root: FSPath
    filter_string: str
    delimiter: str

    recursive: bool
    follow_links: bool

    show_skipped: bool
    long_format: bool
    local_time: bool
    verbose: bool

    report_path: Optional[FSPath]
