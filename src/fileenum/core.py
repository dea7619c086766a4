# Run orchestration for the fileenum command line.
# This file connects the walker, console output, and the optional CSV
# report. It contains no argument parsing and no traversal logic.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from fileenum.models import FileRecord, Options
from fileenum.report import ReportWriter
from fileenum.walker import Walk

console = Console()
_err = Console(stderr=True)


# Simple counters used for the mandatory summary block.
@dataclass
class Counters:
    files: int = 0
    skipped: int = 0
    total_bytes: int = 0
    directories: int = 0


def run_list(opts: Options) -> Counters:
    # Entry point for listing. Raises InvalidRootError before printing
    # anything if the root cannot be walked.
    counters = Counters()

    def _visit(directory: str) -> None:
        counters.directories += 1
        if opts.verbose:
            _err.print(f"[dim]Scanning: {escape(directory)}[/dim]", soft_wrap=True)

    walk = Walk(
        opts.root,
        opts.filter_string,
        opts.recursive,
        delimiter=opts.delimiter,
        follow_links=opts.follow_links,
        on_directory=_visit,
    )

    report_writer = ReportWriter(opts.report_path) if opts.report_path else None
    try:
        for record in walk:
            counters.files += 1
            counters.total_bytes += record.size_bytes
            console.print(
                _format_record(record, opts), markup=False, highlight=False, soft_wrap=True
            )
            if report_writer:
                report_writer.write_file(record)

        counters.skipped = len(walk.skipped)
        for entry in walk.skipped:
            if opts.show_skipped:
                _err.print(
                    f"[yellow]SKIPPED:[/yellow] {escape(entry.path)} ({escape(entry.reason)})",
                    soft_wrap=True,
                )
            if report_writer:
                report_writer.write_skip(entry)
    finally:
        if report_writer:
            report_writer.close()

    _print_summary(counters, opts, walk)
    return counters


def _format_record(record: FileRecord, opts: Options) -> str:
    if not opts.long_format:
        return record.full_path
    modified = record.modified_at if opts.local_time else record.modified_at_utc
    return f"{_format_time(modified)}  {record.size_bytes:>12}  {record.full_path}"


def _format_time(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S %z")


def _print_summary(counters: Counters, opts: Options, walk: Walk) -> None:
    # Printed to stderr so stdout stays a clean list of paths.
    patterns = "(all files)" if walk.patterns.is_wildcard else str(walk.patterns)
    _err.print()
    _err.print("[bold]Summary[/bold]")
    _err.print(f"Patterns:    {escape(patterns)}", soft_wrap=True)
    _err.print(f"Files:       {counters.files}")
    _err.print(f"Bytes:       {counters.total_bytes}")
    _err.print(f"Directories: {counters.directories}")
    _err.print(f"Skipped:     {counters.skipped}")
    if counters.skipped and not opts.show_skipped:
        _err.print("[dim]Use --show-skipped to list skipped directories.[/dim]")
    if opts.report_path:
        _err.print(f"Report:      {opts.report_path}")
