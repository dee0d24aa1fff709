from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from mmolb_parsing.cache.sqlite_store import SqliteCacheStore

if TYPE_CHECKING:
    from mmolb_parsing.config import AppConfig


def create_cache_store(config: AppConfig | None = None) -> SqliteCacheStore:
    """Open the response cache at ``cache.db_path``, creating it if needed."""
    if config is None:
        from mmolb_parsing.config import create_config

        config = create_config()
    return SqliteCacheStore(Path(str(config["cache.db_path"])).expanduser())
