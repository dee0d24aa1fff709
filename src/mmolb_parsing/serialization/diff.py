"""Compare two snapshots record by record.

Records are matched on (text, season, source); repeated plays pair up in
the order they appear. Development tooling for grammar changes.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from mmolb_parsing.serialization.codec import event_to_payload

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.domain.season import PlaySource
    from mmolb_parsing.serialization.snapshot import SnapshotRecord


class DifferenceKind(StrEnum):
    CHANGED = "changed"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class SnapshotDifference:
    kind: DifferenceKind
    text: str
    season: str
    source: PlaySource
    old: Event | None = None
    new: Event | None = None
    paths: tuple[str, ...] = ()


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def differing_paths(old: Any, new: Any, prefix: str = "") -> list[str]:
    """Dotted paths at which two encoded payloads disagree.

    A changed variant tag is reported once as ``type``; list length changes
    are reported at the list itself.
    """
    if isinstance(old, dict) and isinstance(new, dict):
        if old.get("type") != new.get("type"):
            return [_join(prefix, "type")]
        paths: list[str] = []
        for key in list(old) + [key for key in new if key not in old]:
            if key not in old or key not in new:
                paths.append(_join(prefix, key))
            else:
                paths.extend(differing_paths(old[key], new[key], _join(prefix, key)))
        return paths
    if isinstance(old, list) and isinstance(new, list) and len(old) == len(new):
        paths = []
        for index, (old_item, new_item) in enumerate(zip(old, new, strict=True)):
            paths.extend(differing_paths(old_item, new_item, f"{prefix}[{index}]"))
        return paths
    return [] if old == new else [prefix or "$"]


def _key(record: SnapshotRecord) -> tuple[str, str, PlaySource]:
    return (record.text, record.season, record.source)


def diff_snapshots(old: Sequence[SnapshotRecord], new: Sequence[SnapshotRecord]) -> list[SnapshotDifference]:
    """Changed and removed records in ``old`` order, then added records in ``new`` order."""
    pending: dict[tuple[str, str, PlaySource], list[SnapshotRecord]] = defaultdict(list)
    for record in new:
        pending[_key(record)].append(record)

    differences: list[SnapshotDifference] = []
    for record in old:
        candidates = pending.get(_key(record))
        if not candidates:
            differences.append(
                SnapshotDifference(
                    kind=DifferenceKind.REMOVED,
                    text=record.text,
                    season=record.season,
                    source=record.source,
                    old=record.event,
                )
            )
            continue
        counterpart = candidates.pop(0)
        if counterpart.event == record.event:
            continue
        differences.append(
            SnapshotDifference(
                kind=DifferenceKind.CHANGED,
                text=record.text,
                season=record.season,
                source=record.source,
                old=record.event,
                new=counterpart.event,
                paths=tuple(differing_paths(event_to_payload(record.event), event_to_payload(counterpart.event))),
            )
        )

    added = {id(record) for records in pending.values() for record in records}
    differences.extend(
        SnapshotDifference(
            kind=DifferenceKind.ADDED,
            text=record.text,
            season=record.season,
            source=record.source,
            new=record.event,
        )
        for record in new
        if id(record) in added
    )
    return differences
