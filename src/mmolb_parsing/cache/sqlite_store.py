"""SQLite-backed response cache.

Game documents are immutable once a game is final, so the cache is a plain
namespace/key/value table with an absolute expiry per row. Expired rows are
dropped lazily on read and in bulk by ``purge_expired``.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from contextlib import contextmanager
from queue import Empty, Full, Queue
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS responses ("
    "  namespace TEXT NOT NULL,"
    "  key TEXT NOT NULL,"
    "  body TEXT NOT NULL,"
    "  expires_at REAL NOT NULL,"
    "  PRIMARY KEY (namespace, key)"
    ")"
)


class SqliteConnectionPool:
    """Reuses up to ``max_connections`` idle connections across threads."""

    def __init__(self, db_path: Path, max_connections: int = 4) -> None:
        self._db_path = db_path
        self._idle: Queue[sqlite3.Connection] = Queue(maxsize=max_connections)
        self._schema_lock = threading.Lock()
        self._schema_ready = False

    def _open(self) -> sqlite3.Connection:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        conn.execute("PRAGMA busy_timeout=5000")
        conn.execute("PRAGMA journal_mode=WAL")
        with self._schema_lock:
            if not self._schema_ready:
                conn.execute(_SCHEMA)
                conn.commit()
                self._schema_ready = True
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self._idle.get_nowait()
        except Empty:
            conn = self._open()
        try:
            yield conn
        finally:
            try:
                self._idle.put_nowait(conn)
            except Full:
                conn.close()

    def close(self) -> None:
        while True:
            try:
                self._idle.get_nowait().close()
            except Empty:
                return


class SqliteCacheStore:
    def __init__(self, db_path: Path, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._pool = SqliteConnectionPool(db_path)

    def get(self, namespace: str, key: str) -> str | None:
        with self._pool.connection() as conn:
            row = conn.execute(
                "SELECT body, expires_at FROM responses WHERE namespace = ? AND key = ?",
                (namespace, key),
            ).fetchone()
            if row is None:
                return None
            body, expires_at = row
            if self._clock() < expires_at:
                return body
            conn.execute("DELETE FROM responses WHERE namespace = ? AND key = ?", (namespace, key))
            conn.commit()
            logger.debug("Cache entry %s/%s expired", namespace, key)
            return None

    def put(self, namespace: str, key: str, value: str, ttl_seconds: int) -> None:
        with self._pool.connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO responses (namespace, key, body, expires_at) VALUES (?, ?, ?, ?)",
                (namespace, key, value, self._clock() + ttl_seconds),
            )
            conn.commit()

    def invalidate(self, namespace: str, key: str | None = None) -> None:
        with self._pool.connection() as conn:
            if key is None:
                conn.execute("DELETE FROM responses WHERE namespace = ?", (namespace,))
            else:
                conn.execute("DELETE FROM responses WHERE namespace = ? AND key = ?", (namespace, key))
            conn.commit()

    def purge_expired(self) -> int:
        """Delete every expired row; returns how many were removed."""
        with self._pool.connection() as conn:
            cursor = conn.execute("DELETE FROM responses WHERE expires_at <= ?", (self._clock(),))
            conn.commit()
            return cursor.rowcount

    def close(self) -> None:
        self._pool.close()
