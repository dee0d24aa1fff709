from mmolb_parsing.serialization.codec import (
    decode_event,
    encode_event,
    event_from_payload,
    event_to_payload,
    load_json,
)
from mmolb_parsing.serialization.diff import DifferenceKind, SnapshotDifference, diff_snapshots
from mmolb_parsing.serialization.snapshot import SnapshotRecord, build_snapshot, dump_snapshot, load_snapshot

__all__ = [
    "DifferenceKind",
    "SnapshotDifference",
    "SnapshotRecord",
    "build_snapshot",
    "decode_event",
    "diff_snapshots",
    "dump_snapshot",
    "encode_event",
    "event_from_payload",
    "event_to_payload",
    "load_json",
    "load_snapshot",
]
