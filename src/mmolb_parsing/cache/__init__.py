from mmolb_parsing.cache.factory import create_cache_store
from mmolb_parsing.cache.protocol import CacheStore
from mmolb_parsing.cache.sqlite_store import SqliteCacheStore

__all__ = ["CacheStore", "SqliteCacheStore", "create_cache_store"]
