# Iterative directory tree walk for fileenum.
# This module drives the frontier, runs the multi-pattern scanner on each
# directory, and turns subdirectory listing failures into skip entries.
#
# Nothing here prints; callers observe progress through on_directory and
# the skip log.

from __future__ import annotations

import os
from contextlib import closing
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

from fileenum.cursor import DirectoryEntryCursor
from fileenum.errors import InvalidRootError
from fileenum.frontier import Frontier
from fileenum.models import FileRecord, SkipEntry, WalkResult, WalkState
from fileenum.patterns import DEFAULT_DELIMITER, WILDCARD, PatternSet
from fileenum.scanner import CursorFactory, scan_directory
from fileenum.skiplog import SkipLog, describe_error

PathLike = Union[str, "os.PathLike[str]"]
SubdirectoryLister = Callable[[str, bool], List[str]]


def list_subdirectories(path: str, follow_links: bool = False) -> List[str]:
    # Immediate child directories of `path`, sorted by name.
    # Raises OSError when `path` cannot be listed.
    with os.scandir(path) as it:
        names = [entry.name for entry in it if entry.is_dir(follow_symlinks=follow_links)]
    names.sort()
    return [os.path.join(path, name) for name in names]


def validate_root(root: PathLike) -> str:
    # Normalize the root to an absolute path and make sure it can be listed.
    path = os.path.abspath(os.fspath(root))

    if not os.path.exists(path):
        raise InvalidRootError(path, "does not exist")
    if not os.path.isdir(path):
        raise InvalidRootError(path, "not a directory")

    try:
        with os.scandir(path):
            pass
    except OSError as exc:
        raise InvalidRootError(path, describe_error(exc)) from exc

    return path


class Walk:
    """Lazy walk over the files under ``root`` matching ``filter_string``.

    The root is validated when the walk is created, so an invalid root
    fails before anything is traversed. Iterating runs the walk and yields
    ``FileRecord`` objects as they are found; stop iterating to stop the
    walk. Each new iteration starts over with a fresh frontier and an
    empty skip log.

    Directories themselves are never yielded. In recursive mode the
    subdirectories of each scanned directory are visited in depth-first
    pre-order, in the order ``list_subdirectories`` returns them.
    """

    def __init__(
        self,
        root: PathLike,
        filter_string: Optional[str] = WILDCARD,
        recursive: bool = False,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        follow_links: bool = False,
        cursor_factory: CursorFactory = DirectoryEntryCursor,
        list_subdirectories: SubdirectoryLister = list_subdirectories,
        on_directory: Optional[Callable[[str], Any]] = None,
    ):
        self.patterns = PatternSet.parse(filter_string, delimiter)
        self.root = validate_root(root)
        self.recursive = recursive
        self.follow_links = follow_links
        self.on_directory = on_directory
        self.state = WalkState.idle

        self._cursor_factory = cursor_factory
        self._list_subdirectories = list_subdirectories
        self._skip_log = SkipLog()

    @property
    def skipped(self) -> Tuple[SkipEntry, ...]:
        # Skip entries of the most recent iteration.
        return self._skip_log.entries

    def __iter__(self) -> Iterator[FileRecord]:
        skip_log = self._skip_log = SkipLog()
        frontier = Frontier(self.root)

        try:
            while frontier:
                directory = frontier.pop()
                self.state = WalkState.scanning
                if self.on_directory is not None:
                    self.on_directory(directory)

                records = scan_directory(directory, self.patterns, self._cursor_factory)
                with closing(records):
                    for record in records:
                        if record.is_directory:
                            continue
                        yield record

                if not self.recursive:
                    continue

                self.state = WalkState.expanding
                try:
                    children = self._list_subdirectories(directory, self.follow_links)
                except OSError as exc:
                    skip_log.record(directory, exc)
                    continue
                frontier.push_children(children)

            self.state = WalkState.done
        finally:
            # Consumer stopped pulling, or a callback raised.
            if self.state is not WalkState.done:
                self.state = WalkState.idle


def iter_files(
    root: PathLike,
    filter_string: Optional[str] = WILDCARD,
    recursive: bool = False,
    **kwargs: Any,
) -> Walk:
    # Lazy form. Read `.skipped` on the returned walk once iteration ends.
    return Walk(root, filter_string, recursive, **kwargs)


def enumerate_files(
    root: PathLike,
    filter_string: Optional[str] = WILDCARD,
    recursive: bool = False,
    **kwargs: Any,
) -> WalkResult:
    # Eager form: run the whole walk and return (files, skipped).
    walk = Walk(root, filter_string, recursive, **kwargs)
    files = tuple(walk)
    return WalkResult(files=files, skipped=walk.skipped)


# Same call under the name of the platform primitive it replaces.
get_files = enumerate_files
