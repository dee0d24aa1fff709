"""Regression snapshots: play texts paired with the events they parsed to.

A snapshot file is pretty-printed JSON::

    {
      "format_version": 1,
      "records": [
        {"text": "...", "season": "S1", "source": "GAME", "start": 0, "event": {...}},
        ...
      ]
    }

``start`` is the play's byte offset in its source document; files written
before it was recorded load with ``start`` 0.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mmolb_parsing.domain.errors import DecodeError
from mmolb_parsing.domain.raw_play import RawPlay
from mmolb_parsing.domain.result import Err, Ok
from mmolb_parsing.domain.season import PlaySource
from mmolb_parsing.parsing.resolver import parse_play
from mmolb_parsing.serialization.codec import decode_payload, event_to_payload, load_json

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.domain.result import Result

FORMAT_VERSION = 1
_RECORD_KEYS = frozenset({"text", "season", "source", "event"})
_OPTIONAL_RECORD_KEYS = frozenset({"start"})


@dataclass(frozen=True)
class SnapshotRecord:
    text: str
    season: str
    source: PlaySource
    event: Event
    start: int = 0

    def to_play(self) -> RawPlay:
        return RawPlay(text=self.text, season=self.season, source=self.source, start=self.start)


def build_snapshot(plays: Iterable[RawPlay]) -> list[SnapshotRecord]:
    return [
        SnapshotRecord(
            text=play.text,
            season=play.season,
            source=PlaySource(play.source),
            event=parse_play(play),
            start=play.start,
        )
        for play in plays
    ]


def dump_snapshot(records: Sequence[SnapshotRecord]) -> str:
    document = {
        "format_version": FORMAT_VERSION,
        "records": [
            {
                "text": record.text,
                "season": record.season,
                "source": record.source.name,
                "start": record.start,
                "event": event_to_payload(record.event),
            }
            for record in records
        ],
    }
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def _load_record(raw: Any, path: str) -> Result[SnapshotRecord, DecodeError]:
    if not isinstance(raw, dict):
        return Err(DecodeError(message="expected a record object", path=path))
    missing = sorted(_RECORD_KEYS - set(raw))
    if missing:
        return Err(DecodeError(message=f"record is missing '{missing[0]}'", path=f"{path}.{missing[0]}"))
    unknown = sorted(set(raw) - _RECORD_KEYS - _OPTIONAL_RECORD_KEYS)
    if unknown:
        return Err(DecodeError(message=f"unknown record field '{unknown[0]}'", path=f"{path}.{unknown[0]}"))
    if not isinstance(raw["text"], str) or not isinstance(raw["season"], str):
        return Err(DecodeError(message="record text and season must be strings", path=path))
    source = raw["source"]
    if not isinstance(source, str) or source not in PlaySource.__members__:
        return Err(DecodeError(message=f"{source!r} is not a PlaySource", path=f"{path}.source"))
    start = raw.get("start", 0)
    if isinstance(start, bool) or not isinstance(start, int) or start < 0:
        return Err(DecodeError(message=f"expected a byte offset, got {start!r}", path=f"{path}.start"))

    match decode_payload(raw["event"], f"{path}.event"):
        case Ok(event):
            return Ok(
                SnapshotRecord(
                    text=raw["text"], season=raw["season"], source=PlaySource[source], event=event, start=start
                )
            )
        case Err() as failure:
            return failure


def load_snapshot(data: str) -> Result[list[SnapshotRecord], DecodeError]:
    loaded = load_json(data)
    if isinstance(loaded, Err):
        return loaded
    document = loaded.value
    if not isinstance(document, dict):
        return Err(DecodeError(message="expected a snapshot object"))
    version = document.get("format_version")
    if isinstance(version, bool) or version != FORMAT_VERSION:
        return Err(
            DecodeError(message=f"unsupported snapshot format_version {version!r}", path="$.format_version")
        )
    raw_records = document.get("records")
    if not isinstance(raw_records, list):
        return Err(DecodeError(message="expected a list of records", path="$.records"))

    records: list[SnapshotRecord] = []
    for index, raw in enumerate(raw_records):
        match _load_record(raw, f"$.records[{index}]"):
            case Ok(record):
                records.append(record)
            case Err() as failure:
                return failure
    return Ok(records)
