"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mmolb_parsing.cache.sqlite_store import SqliteCacheStore

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture
def sqlite_cache(tmp_path: Path) -> Generator[SqliteCacheStore]:
    """A response cache in a throwaway database, closed after the test."""
    store = SqliteCacheStore(tmp_path / "cache.db")
    yield store
    store.close()
