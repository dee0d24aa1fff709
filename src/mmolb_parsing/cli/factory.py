from __future__ import annotations

from typing import TYPE_CHECKING

from mmolb_parsing.cache.factory import create_cache_store
from mmolb_parsing.config import load_fetch_settings
from mmolb_parsing.ingest.mmolb_source import MmolbGameSource

if TYPE_CHECKING:
    from mmolb_parsing.config import AppConfig


def build_game_source(config: AppConfig) -> MmolbGameSource:
    """Game source wired to the configured API and response cache."""
    return MmolbGameSource(load_fetch_settings(config), cache=create_cache_store(config))
