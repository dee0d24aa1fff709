"""Fetch MMOLB game documents and split them into plays.

A game document is the JSON body of ``GET {base_url}/game/{game_id}``. The
fields read here are ``Season`` and ``EventLog[].message``; everything else
is ignored.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from mmolb_parsing.domain.raw_play import RawPlay
from mmolb_parsing.domain.season import PlaySource
from mmolb_parsing.ingest._retry import default_http_retry

if TYPE_CHECKING:
    from collections.abc import Callable

    from mmolb_parsing.cache.protocol import CacheStore
    from mmolb_parsing.config import FetchSettings

logger = logging.getLogger(__name__)

CACHE_NAMESPACE = "mmolb_game"


class GameDocumentError(ValueError):
    """The API answered, but not with a game document this module can read."""


def plays_from_document(document: Any) -> list[RawPlay]:
    """One RawPlay per event log message, with byte offsets over the concatenated log."""
    if not isinstance(document, dict):
        raise GameDocumentError("game document is not a JSON object")
    season = document.get("Season")
    if isinstance(season, bool) or not isinstance(season, int | str):
        raise GameDocumentError(f"game document has no usable Season (got {season!r})")
    log = document.get("EventLog")
    if not isinstance(log, list):
        raise GameDocumentError("game document has no EventLog list")

    plays: list[RawPlay] = []
    offset = 0
    for index, entry in enumerate(log):
        message = entry.get("message") if isinstance(entry, dict) else None
        if not isinstance(message, str):
            raise GameDocumentError(f"EventLog[{index}] has no message text")
        play = RawPlay(text=message, season=str(season), source=PlaySource.GAME, start=offset)
        plays.append(play)
        offset = play.end
    return plays


class MmolbGameSource:
    def __init__(
        self,
        settings: FetchSettings,
        cache: CacheStore | None = None,
        client: httpx.Client | None = None,
        retry: Callable[[Callable[..., Any]], Callable[..., Any]] | None = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._client = client or httpx.Client(timeout=httpx.Timeout(settings.timeout_seconds, connect=5.0))
        self._get_with_retry = (retry or default_http_retry("MMOLB game request"))(self._get)

    def _get(self, url: str) -> httpx.Response:
        response = self._client.get(url)
        response.raise_for_status()
        return response

    def fetch_document(self, game_id: str, *, refresh: bool = False) -> dict[str, Any]:
        if self._cache is not None and not refresh:
            cached = self._cache.get(CACHE_NAMESPACE, game_id)
            if cached is not None:
                logger.debug("Cache hit for game %s", game_id)
                return json.loads(cached)

        url = f"{self._settings.base_url}/game/{game_id}"
        logger.debug("GET %s", url)
        response = self._get_with_retry(url)
        try:
            document = response.json()
        except json.JSONDecodeError as e:
            raise GameDocumentError(f"game {game_id} response is not JSON: {e.msg}") from e
        if not isinstance(document, dict):
            raise GameDocumentError(f"game {game_id} response is not a JSON object")

        if self._cache is not None:
            self._cache.put(CACHE_NAMESPACE, game_id, response.text, self._settings.ttl_seconds)
        return document

    def fetch_game(self, game_id: str, *, refresh: bool = False) -> list[RawPlay]:
        plays = plays_from_document(self.fetch_document(game_id, refresh=refresh))
        logger.info("Fetched %d plays for game %s", len(plays), game_id)
        return plays
