"""
Stellara Events - Serialization & Deserialization

msgpack wire codec for published records, plus a JSON rendition for
debugging and log shipping.

Wire format:
    Primary:  msgpack (compact, fast, language-agnostic)
    Debug:    JSON (human-readable, tagged values)

Typed values keep their type across the wire:

    =========  ===================  ==========================
    value      msgpack              JSON
    =========  ===================  ==========================
    Address    ExtType(1, utf-8)    {"$addr": "..."}
    Symbol     ExtType(2, utf-8)    {"$sym": "..."}
    int > 64b  ExtType(3, signed    plain JSON number
               big-endian bytes)
    =========  ===================  ==========================

Legacy struct payloads travel as ``{"$struct": <class name>, "fields":
{...}}`` and are rebuilt through ``LEGACY_STRUCT_REGISTRY``.

Schema version handling:
    On deserialization the envelope's ``version`` is checked against the
    current version.  An incompatible (newer) version produces a logged
    warning, never an error; consumers decide what to do with it.

Usage:
    >>> data = serialize_event(emission.standard)
    >>> restored = deserialize_event(data)
    >>> assert restored == emission.standard
"""
from __future__ import annotations

import enum
import json
import logging
from typing import Any

import msgpack
from msgpack.exceptions import UnpackException
from pydantic import BaseModel, ValidationError

from stellara_events.events.envelope import StandardEvent
from stellara_events.events.errors import EncodingError
from stellara_events.events.legacy import ALL_LEGACY_STRUCTS
from stellara_events.events.schema import check_version
from stellara_events.events.values import Address, Symbol

logger = logging.getLogger(__name__)

EXT_ADDRESS: int = 1
EXT_SYMBOL: int = 2
EXT_BIGINT: int = 3

_I64_MIN = -(2**63)
_U64_MAX = 2**64 - 1


# ---------------------------------------------------------------------------
# Legacy struct registry
# ---------------------------------------------------------------------------
# Maps struct class name -> pydantic model class.
# Built automatically from ALL_LEGACY_STRUCTS defined in legacy.py.
# ---------------------------------------------------------------------------

LEGACY_STRUCT_REGISTRY: dict[str, type[BaseModel]] = {}


def _build_registry() -> None:
    """Populate the legacy struct registry from ALL_LEGACY_STRUCTS."""
    for cls in ALL_LEGACY_STRUCTS:
        key = cls.__name__
        if key in LEGACY_STRUCT_REGISTRY:
            raise RuntimeError(f"Duplicate legacy struct registration: {key!r}")
        LEGACY_STRUCT_REGISTRY[key] = cls


_build_registry()


# ---------------------------------------------------------------------------
# msgpack value mapping
# ---------------------------------------------------------------------------

def _int_to_bytes(value: int) -> bytes:
    length = (value.bit_length() + 8) // 8
    return value.to_bytes(length, "big", signed=True)


def _to_wire(obj: Any) -> Any:
    """Map a record value tree onto msgpack-native types."""
    # Address / Symbol before enum and str: they are str subclasses.
    if isinstance(obj, Address):
        return msgpack.ExtType(EXT_ADDRESS, str(obj).encode("utf-8"))
    if isinstance(obj, Symbol):
        return msgpack.ExtType(EXT_SYMBOL, str(obj).encode("utf-8"))
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, bool) or obj is None:
        return obj
    if isinstance(obj, int):
        if _I64_MIN <= obj <= _U64_MAX:
            return obj
        return msgpack.ExtType(EXT_BIGINT, _int_to_bytes(obj))
    if isinstance(obj, str):
        return str(obj)
    if isinstance(obj, BaseModel):
        return {
            "$struct": type(obj).__name__,
            "fields": {k: _to_wire(getattr(obj, k)) for k in type(obj).model_fields},
        }
    if isinstance(obj, dict):
        return {_to_wire(k): _to_wire(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_wire(v) for v in obj]
    raise EncodingError(f"Cannot serialize {type(obj).__name__}: {obj!r}")


def _ext_hook(code: int, data: bytes) -> Any:
    if code == EXT_ADDRESS:
        return Address(data.decode("utf-8"))
    if code == EXT_SYMBOL:
        return Symbol(data.decode("utf-8"))
    if code == EXT_BIGINT:
        return int.from_bytes(data, "big", signed=True)
    return msgpack.ExtType(code, data)


def _rebuild_structs(obj: Any) -> Any:
    """Turn ``$struct`` maps back into legacy struct models."""
    if isinstance(obj, dict):
        if "$struct" in obj and "fields" in obj:
            cls = LEGACY_STRUCT_REGISTRY.get(obj["$struct"])
            if cls is None:
                logger.warning("Unknown legacy struct %r -- leaving as dict.", obj["$struct"])
                return obj
            return cls(**{k: _rebuild_structs(v) for k, v in obj["fields"].items()})
        return {k: _rebuild_structs(v) for k, v in obj.items()}
    if isinstance(obj, tuple):
        return tuple(_rebuild_structs(v) for v in obj)
    return obj


def _encode_msgpack(obj: Any) -> bytes:
    return msgpack.packb(_to_wire(obj), use_bin_type=True)


def _decode_msgpack(data: bytes) -> Any:
    return msgpack.unpackb(data, raw=False, use_list=False, ext_hook=_ext_hook)


# ---------------------------------------------------------------------------
# JSON value mapping
# ---------------------------------------------------------------------------

def _to_json(obj: Any) -> Any:
    if isinstance(obj, Address):
        return {"$addr": str(obj)}
    if isinstance(obj, Symbol):
        return {"$sym": str(obj)}
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(_to_json(k)): _to_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_json(v) for v in obj]
    return obj


def _json_object_hook(obj: dict[str, Any]) -> Any:
    if len(obj) == 1:
        if "$addr" in obj:
            return Address(obj["$addr"])
        if "$sym" in obj:
            return Symbol(obj["$sym"])
    return obj


# ---------------------------------------------------------------------------
# Envelope documents
# ---------------------------------------------------------------------------

def _event_document(event: StandardEvent) -> dict[str, Any]:
    return {
        "event_type": event.event_type,
        "emitter_identity": event.emitter_identity,
        "actor_identity": event.actor_identity,
        "data": event.data,
        "metadata": event.metadata,
        "timestamp": event.timestamp,
        "version": event.version,
    }


def _event_from_document(doc: dict[str, Any]) -> StandardEvent:
    check_version(doc.get("version", 0), doc.get("event_type", "?"))
    try:
        return StandardEvent.model_validate(doc)
    except ValidationError as exc:
        logger.error(
            "Validation failed for event_type=%s ts=%s: %s",
            doc.get("event_type", "?"),
            doc.get("timestamp", "?"),
            exc,
        )
        raise


# Wire-format prefix bytes for auto-detection:
#   msgpack maps start with 0x80-0x8f (fixmap) or 0xde/0xdf (map16/map32)
#   JSON objects start with 0x7b ('{')
_JSON_BRACE = ord("{")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def serialize_event(event: StandardEvent) -> bytes:
    """Serialize a ``StandardEvent`` to msgpack bytes."""
    return _encode_msgpack(_event_document(event))


def deserialize_event(data: bytes) -> StandardEvent:
    """Deserialize bytes produced by ``serialize_event`` or
    ``serialize_event_json`` (auto-detected).

    Raises:
        ValueError: If ``data`` is empty or cannot be decoded.
        pydantic.ValidationError: If the document is not a valid envelope.
    """
    if not data:
        raise ValueError("Cannot deserialize empty data.")
    if data[0] == _JSON_BRACE:
        return deserialize_event_json(data)
    try:
        doc = _decode_msgpack(data)
    except (UnpackException, ValueError) as exc:
        raise ValueError(f"Undecodable event bytes: {exc}") from exc
    if not isinstance(doc, dict):
        raise ValueError(f"Expected an event map, got {type(doc).__name__}")
    return _event_from_document(doc)


def serialize_event_json(event: StandardEvent) -> bytes:
    """Serialize to tagged JSON (UTF-8).  Useful for logs and debugging."""
    return json.dumps(
        _to_json(_event_document(event)), separators=(",", ":")
    ).encode("utf-8")


def deserialize_event_json(data: bytes) -> StandardEvent:
    """Deserialize tagged JSON bytes back into a ``StandardEvent``."""
    doc = json.loads(data.decode("utf-8"), object_hook=_json_object_hook)
    return _event_from_document(doc)


def serialize_record(channel: tuple[Any, ...], payload: Any) -> bytes:
    """Serialize any published ``(channel, payload)`` pair to msgpack.

    Works for both standardized and legacy records; used by transport
    adapters.
    """
    return _encode_msgpack([channel, payload])


def deserialize_record(data: bytes) -> tuple[tuple[Any, ...], Any]:
    """Inverse of ``serialize_record``.

    Enum members come back as their plain string values; typed values and
    legacy structs are restored.
    """
    channel, payload = _decode_msgpack(data)
    return tuple(channel), _rebuild_structs(payload)


def event_from_payload(channel: tuple[Any, ...], payload: tuple[Any, ...]) -> StandardEvent:
    """Rebuild a ``StandardEvent`` from a standardized ``(channel, payload)``.

    ``channel`` is ``(root_topic, event_type)`` and ``payload`` is
    ``(emitter, actor, data, metadata, timestamp, version)``.
    """
    if len(channel) != 2 or len(payload) != 6:
        raise ValueError(
            f"Not a standardized record: channel={len(channel)} items, "
            f"payload={len(payload)} items"
        )
    emitter, actor, data, metadata, timestamp, version = payload
    return _event_from_document({
        "event_type": channel[1],
        "emitter_identity": emitter,
        "actor_identity": actor,
        "data": data,
        "metadata": metadata,
        "timestamp": timestamp,
        "version": version,
    })
