"""Unit test fixtures.

Unit tests run without a cluster and only touch the filesystem through
tmp_path. For shared fixtures, see ../conftest.py.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

import pytest

from cluster_manifests.asset import File, FileFetcher

if TYPE_CHECKING:
    from collections.abc import Callable


class InMemoryFetcher(FileFetcher):
    """FileFetcher backed by a dict, for load() tests."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files

    def fetch_by_name(self, name: str) -> File:
        if name not in self.files:
            raise FileNotFoundError(name)
        return File(filename=name, data=self.files[name])

    def fetch_by_pattern(self, pattern: str) -> list[File]:
        return [
            File(filename=name, data=self.files[name])
            for name in sorted(self.files)
            if fnmatch.fnmatch(name, pattern)
        ]


@pytest.fixture
def memory_fetcher() -> Callable[[dict[str, bytes]], InMemoryFetcher]:
    """Factory fixture for in-memory file fetchers.

    Usage:
        fetcher = memory_fetcher({f.filename: f.data for f in asset.files()})
    """

    def _create(files: dict[str, bytes]) -> InMemoryFetcher:
        return InMemoryFetcher(dict(files))

    return _create
