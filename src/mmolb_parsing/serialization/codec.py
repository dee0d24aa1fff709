"""JSON interchange for events.

An encoded event is a JSON object whose first key is ``"type"`` (the variant
class name) followed by the variant's fields in declaration order. Enums are
written by member name, tuples as lists and nested values as objects, so the
encoding is deterministic and ``encode_event(decode(s)) == s`` holds for any
``s`` this module produced.

Decoding is strict about shape and lenient about age: a field missing from
the payload takes its default when the variant declares one, while unknown
tags, unknown fields, wrong JSON types and unknown enum names are reported
as ``DecodeError`` values.
"""

from __future__ import annotations

import functools
import json
import types
import typing
from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from mmolb_parsing.domain import events
from mmolb_parsing.domain.errors import DecodeError
from mmolb_parsing.domain.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.domain.result import Result

TYPE_KEY = "type"

_EVENT_CLASSES: dict[str, type] = {cls.__name__: cls for cls in events.EVENT_TYPES}

# Tags written by earlier releases.
_TAG_ALIASES: dict[str, str] = {
    "Unparsed": "UnparsedEvent",
    "ItemEnchantment": "Enchantment",
    "Robo": "RoboModification",
    "AttributeGain": "AttributeChanges",
}


class _DecodeFailure(Exception):
    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.error = DecodeError(message=message, path=path)


@functools.cache
def _field_types(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _encode_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if is_dataclass(value) and not isinstance(value, type):
        return {field.name: _encode_value(getattr(value, field.name)) for field in fields(value)}
    if isinstance(value, tuple):
        return [_encode_value(item) for item in value]
    return value


def event_to_payload(event: Event) -> dict[str, Any]:
    """The JSON-ready mapping for ``event``, tag first."""
    return {TYPE_KEY: type(event).__name__, **_encode_value(event)}


def encode_event(event: Event) -> str:
    return json.dumps(event_to_payload(event), ensure_ascii=False, separators=(", ", ": "))


def _describe(raw: Any) -> str:
    return "null" if raw is None else type(raw).__name__


def _decode_value(hint: Any, raw: Any, path: str) -> Any:
    origin = typing.get_origin(hint)

    if origin is types.UnionType or origin is typing.Union:
        options = typing.get_args(hint)
        if raw is None:
            if type(None) in options:
                return None
            raise _DecodeFailure("null is not allowed here", path)
        failure: _DecodeFailure | None = None
        for option in options:
            if option is type(None):
                continue
            try:
                return _decode_value(option, raw, path)
            except _DecodeFailure as e:
                failure = failure or e
        assert failure is not None
        raise failure

    if origin is tuple:
        if not isinstance(raw, list):
            raise _DecodeFailure(f"expected a list, got {_describe(raw)}", path)
        item_hint = typing.get_args(hint)[0]
        return tuple(_decode_value(item_hint, item, f"{path}[{index}]") for index, item in enumerate(raw))

    if isinstance(hint, type) and issubclass(hint, Enum):
        if not isinstance(raw, str):
            raise _DecodeFailure(f"expected a {hint.__name__} name, got {_describe(raw)}", path)
        try:
            return hint[raw]
        except KeyError:
            raise _DecodeFailure(f"{raw!r} is not a {hint.__name__}", path) from None

    if isinstance(hint, type) and is_dataclass(hint):
        if not isinstance(raw, dict):
            raise _DecodeFailure(f"expected an object, got {_describe(raw)}", path)
        return _build(hint, raw, path)

    if hint is bool:
        if not isinstance(raw, bool):
            raise _DecodeFailure(f"expected a boolean, got {_describe(raw)}", path)
        return raw
    if hint is int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise _DecodeFailure(f"expected an integer, got {_describe(raw)}", path)
        return raw
    if hint is float:
        if isinstance(raw, bool) or not isinstance(raw, int | float):
            raise _DecodeFailure(f"expected a number, got {_describe(raw)}", path)
        return float(raw)
    if hint is str:
        if not isinstance(raw, str):
            raise _DecodeFailure(f"expected a string, got {_describe(raw)}", path)
        return raw

    raise _DecodeFailure(f"cannot decode a value of type {hint!r}", path)


def _build(cls: type, raw: Mapping[str, Any], path: str) -> Any:
    hints = _field_types(cls)
    declared = {field.name: field for field in fields(cls)}
    unknown = sorted(set(raw) - set(declared))
    if unknown:
        raise _DecodeFailure(f"unknown field '{unknown[0]}' for {cls.__name__}", f"{path}.{unknown[0]}")

    values: dict[str, Any] = {}
    for name, field in declared.items():
        if name not in raw:
            if field.default is MISSING and field.default_factory is MISSING:
                raise _DecodeFailure(f"missing field '{name}' for {cls.__name__}", f"{path}.{name}")
            continue
        values[name] = _decode_value(hints[name], raw[name], f"{path}.{name}")
    return cls(**values)


def _event_class(tag: Any, path: str) -> type:
    if not isinstance(tag, str):
        raise _DecodeFailure(f"expected a string event tag, got {_describe(tag)}", f"{path}.{TYPE_KEY}")
    cls = _EVENT_CLASSES.get(_TAG_ALIASES.get(tag, tag))
    if cls is None:
        raise _DecodeFailure(f"unknown event type {tag!r}", f"{path}.{TYPE_KEY}")
    return cls


def decode_payload(payload: Any, path: str = "$") -> Result[Event, DecodeError]:
    """Rebuild an event from an already-parsed JSON value found at ``path``."""
    try:
        if not isinstance(payload, dict):
            raise _DecodeFailure(f"expected an event object, got {_describe(payload)}", path)
        if TYPE_KEY not in payload:
            raise _DecodeFailure("missing event type", f"{path}.{TYPE_KEY}")
        cls = _event_class(payload[TYPE_KEY], path)
        body = {key: value for key, value in payload.items() if key != TYPE_KEY}
        return Ok(_build(cls, body, path))
    except _DecodeFailure as e:
        return Err(e.error)


def event_from_payload(payload: Mapping[str, Any]) -> Result[Event, DecodeError]:
    return decode_payload(dict(payload))


def load_json(data: str) -> Result[Any, DecodeError]:
    """``json.loads`` with every failure reported as a ``DecodeError`` at ``$``."""
    try:
        return Ok(json.loads(data))
    except json.JSONDecodeError as e:
        return Err(DecodeError(message=f"invalid JSON: {e.msg} at line {e.lineno} column {e.colno}"))
    except RecursionError:
        return Err(DecodeError(message="invalid JSON: nested too deeply"))
    except ValueError as e:
        return Err(DecodeError(message=f"invalid JSON: {e}"))


def decode_event(data: str) -> Result[Event, DecodeError]:
    match load_json(data):
        case Ok(payload):
            return decode_payload(payload)
        case Err() as failure:
            return failure
