from __future__ import annotations

from typing import Protocol


class CacheStore(Protocol):
    """Keyed text store with per-entry expiry, partitioned by namespace."""

    def get(self, namespace: str, key: str) -> str | None: ...

    def put(self, namespace: str, key: str, value: str, ttl_seconds: int) -> None: ...

    def invalidate(self, namespace: str, key: str | None = None) -> None: ...
