# Command-line interface definition for fileenum.
# This file is responsible only for argument parsing, validation,
# and dispatch into core application logic.
#
# No traversal logic should live here.

from __future__ import annotations

from pathlib import Path as FSPath
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from fileenum import __version__
from fileenum.core import run_list
from fileenum.errors import InvalidRootError
from fileenum.models import Options
from fileenum.patterns import DEFAULT_DELIMITER, WILDCARD, PatternSet

app = typer.Typer(
    add_completion=False,
    help="List files in a directory tree, skipping unreadable directories instead of failing.",
)
console = Console()
_err = Console(stderr=True)


def _validate_delimiter(delimiter: str) -> str:
    if len(delimiter) != 1:
        raise typer.BadParameter("--delimiter must be exactly one character")
    return delimiter


def _version_callback(value: bool) -> None:
    # Handle version early and exit cleanly.
    if value:
        console.print(__version__)
        raise typer.Exit(code=0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    pass


@app.command("list", help="List files under ROOT matching one or more glob patterns.")
def list_files(
    root: FSPath = typer.Argument(
        FSPath("."),
        help="Directory to walk. Defaults to the current directory.",
    ),

    # Matching.
    filter_string: str = typer.Option(
        WILDCARD, "--filter", "-f",
        help='Glob patterns separated by the delimiter, e.g. "*.mp4|*.mov".',
        rich_help_panel="Matching",
    ),
    delimiter: str = typer.Option(
        DEFAULT_DELIMITER, "--delimiter",
        help="Character separating patterns in --filter.",
        rich_help_panel="Matching",
    ),

    # Traversal.
    recursive: bool = typer.Option(
        False, "--recursive", "-r",
        help="Walk all subdirectories, not just ROOT.",
        rich_help_panel="Traversal",
    ),
    follow_links: bool = typer.Option(
        False, "--follow-links",
        help="Descend into symlinked directories. Cycles are not detected.",
        rich_help_panel="Traversal",
    ),

    # Output.
    long_format: bool = typer.Option(
        False, "--long", "-l",
        help="Show modified time and size next to each path.",
        rich_help_panel="Output",
    ),
    local_time: bool = typer.Option(
        False, "--local-time",
        help="Show times in local time instead of UTC (with --long).",
        rich_help_panel="Output",
    ),
    show_skipped: bool = typer.Option(
        False, "--show-skipped",
        help="List directories that could not be read, with the reason.",
        rich_help_panel="Output",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Print each directory as it is scanned.",
        rich_help_panel="Output",
    ),
    report_path: Optional[FSPath] = typer.Option(
        None, "--report",
        help="Write matched files and skipped directories to this CSV file.",
        rich_help_panel="Output",
    ),
):
    delimiter = _validate_delimiter(delimiter)

    if local_time and not long_format:
        raise typer.BadParameter("--local-time applies only with --long")

    opts = Options(
        root=root,
        filter_string=filter_string,
        delimiter=delimiter,

        recursive=recursive,
        follow_links=follow_links,

        show_skipped=show_skipped,
        long_format=long_format,
        local_time=local_time,
        verbose=verbose,

        report_path=report_path,
    )

    try:
        run_list(opts)
    except InvalidRootError as exc:
        _err.print(f"[red]ERROR:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)


@app.command(help="Show how a filter string is split into patterns.")
def patterns(
    filter_string: str = typer.Argument("", help="Filter string to parse."),
    delimiter: str = typer.Option(
        DEFAULT_DELIMITER, "--delimiter",
        help="Character separating patterns.",
    ),
):
    delimiter = _validate_delimiter(delimiter)
    for pattern in PatternSet.parse(filter_string, delimiter):
        console.print(pattern, markup=False, highlight=False)


if __name__ == "__main__":
    app()
