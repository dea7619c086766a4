# CSV report output for fileenum.
# One file per run, overwritten each time. Matched files and skipped
# directories share one table, told apart by the `kind` column.

from __future__ import annotations

import csv
from pathlib import Path

from fileenum.models import FileRecord, SkipEntry

REPORT_HEADER = [
    "kind",
    "path",
    "name",
    "size_bytes",
    "attributes",
    "modified_utc",
    "reason",
]


class ReportWriter:
    # Rows are flushed as they are written so a report from an
    # interrupted walk is still readable.
    def __init__(self, path: Path):
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._fh)
        self._writer.writerow(REPORT_HEADER)

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write_file(self, record: FileRecord) -> None:
        self._writer.writerow(
            [
                "file",
                record.full_path,
                record.name,
                record.size_bytes,
                f"0x{int(record.attributes):x}",
                record.modified_at_utc.isoformat(timespec="seconds"),
                "",
            ]
        )
        self._fh.flush()

    def write_skip(self, entry: SkipEntry) -> None:
        self._writer.writerow(["skipped", entry.path, "", "", "", "", entry.reason])
        self._fh.flush()

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()
