# Shared fixtures for fileenum tests.
# `listing_routes` swaps os.scandir for chosen directories so read failures
# can be produced without depending on the user the tests run as.

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pytest


class FakeEntry:
    # Stands in for os.DirEntry; stat can be made to fail.
    def __init__(self, path: Path, fail_stat: bool = False):
        self.name = path.name
        self.path = str(path)
        self._fail_stat = fail_stat

    def stat(self, follow_symlinks: bool = True) -> os.stat_result:
        if self._fail_stat:
            raise PermissionError(13, "Permission denied", self.path)
        return os.stat(self.path, follow_symlinks=follow_symlinks)

    def is_dir(self, follow_symlinks: bool = True) -> bool:
        return os.path.isdir(self.path)


class FakeListing:
    # Stands in for the os.scandir iterator; may raise after its entries.
    def __init__(self, entries: List[FakeEntry], error: Optional[OSError] = None):
        self._entries = list(entries)
        self._error = error
        self.closed = False

    def __iter__(self) -> "FakeListing":
        return self

    def __next__(self) -> FakeEntry:
        if self._entries:
            return self._entries.pop(0)
        if self._error is not None:
            raise self._error
        raise StopIteration

    def __enter__(self) -> "FakeListing":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.closed = True


class ListingRoutes:
    # Routes os.scandir(directory) to a fresh FakeListing; other paths use
    # the real scandir. Every listing handed out is kept in `listings`.
    def __init__(self, real_scandir: Callable):
        self._real_scandir = real_scandir
        self._routes: Dict[str, Callable[[], FakeListing]] = {}
        self.listings: List[FakeListing] = []

    def route(
        self,
        directory: Path,
        entries: List[Tuple[str, bool]],
        error: Optional[OSError] = None,
    ) -> None:
        # entries: (name, fail_stat) pairs, listed in order.
        def make() -> FakeListing:
            return FakeListing([FakeEntry(directory / name, fail) for name, fail in entries], error)

        self._routes[str(directory)] = make

    def scandir(self, path="."):
        make = self._routes.get(os.fspath(path))
        if make is None:
            return self._real_scandir(path)
        listing = make()
        self.listings.append(listing)
        return listing


@pytest.fixture
def listing_routes(monkeypatch: pytest.MonkeyPatch) -> ListingRoutes:
    routes = ListingRoutes(os.scandir)
    monkeypatch.setattr(os, "scandir", routes.scandir)
    return routes
