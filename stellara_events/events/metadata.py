"""
Stellara Events - Metadata Codec

Metadata is a secondary, keyed copy of selected ``data`` fields kept for
indexer convenience.  Keys come from a closed vocabulary; each key maps to
an ordered tuple of typed values so a field can be multi-valued (e.g. a
list of affected tokens) without a schema change.

Encoding rules:
    - the same logical field is always encoded under the same key,
    - a scalar field is always a single-element tuple,
    - a key appears at most once per event,
    - absent optional fields are omitted, never encoded as placeholders.
"""
from __future__ import annotations

import enum
from typing import Any, Iterable, Mapping

from stellara_events.events.errors import EncodingError
from stellara_events.events.values import TypedValue, to_typed_value


class MetadataKey(str, enum.Enum):
    """Closed metadata key vocabulary."""

    AMOUNT = "amount"
    FROM = "from"
    TO = "to"
    TOKEN = "token"
    PAIR = "pair"
    PRICE = "price"
    FEE = "fee"
    REASON = "reason"
    PROPOSAL_ID = "proposal_id"
    VOTE_TYPE = "vote_type"
    LOCK_PERIOD = "lock_period"
    REWARD_RATE = "reward_rate"

    def __str__(self) -> str:
        return self.value


Metadata = dict[MetadataKey, tuple[TypedValue, ...]]
MetadataEntry = tuple[MetadataKey, tuple[TypedValue, ...]]


def metadata_key(key: str | MetadataKey) -> MetadataKey:
    """Resolve ``key`` to a ``MetadataKey``.

    Raises:
        EncodingError: If ``key`` is outside the vocabulary.
    """
    if isinstance(key, MetadataKey):
        return key
    try:
        return MetadataKey(key)
    except ValueError:
        raise EncodingError(f"Metadata key {key!r} is not in the vocabulary") from None


def encode(key: str | MetadataKey, *values: Any) -> MetadataEntry:
    """Encode one named field as a metadata entry.

    Args:
        key: Vocabulary key.
        *values: One or more typed values (plain text is interned).

    Returns:
        ``(MetadataKey, tuple_of_values)`` ready for ``build_metadata``.

    Raises:
        EncodingError: Unknown key, no values, or unrepresentable value.
    """
    resolved = metadata_key(key)
    if not values:
        raise EncodingError(f"Metadata key {resolved.value!r} needs at least one value")
    return resolved, tuple(to_typed_value(v) for v in values)


def build_metadata(*entries: MetadataEntry) -> Metadata:
    """Assemble encoded entries into a metadata mapping, preserving order.

    Raises:
        EncodingError: If the same key is encoded twice.
    """
    metadata: Metadata = {}
    for key, values in entries:
        if key in metadata:
            raise EncodingError(f"Metadata key {key.value!r} encoded twice")
        metadata[key] = values
    return metadata


def validate_metadata(metadata: Mapping[Any, Iterable[Any]]) -> Metadata:
    """Normalise an arbitrary mapping into validated ``Metadata``.

    Used by the envelope builder so hand-built mappings obey the same
    rules as ``encode``.  Each value must be a sequence of values; a bare
    string or scalar is rejected instead of being split or wrapped.

    Raises:
        EncodingError: A value is not a list/tuple of typed values.
    """
    entries = []
    for key, values in metadata.items():
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise EncodingError(
                f"Metadata key {key!r} needs a sequence of values, "
                f"got {type(values).__name__}: {values!r}"
            )
        entries.append(encode(key, *tuple(values)))
    return build_metadata(*entries)


def decode(metadata: Mapping[MetadataKey, tuple[TypedValue, ...]], key: str | MetadataKey) -> tuple[TypedValue, ...]:
    """Return every value stored under ``key``.

    Raises:
        KeyError: If ``key`` is not present in ``metadata``.
    """
    return metadata[metadata_key(key)]


def decode_one(metadata: Mapping[MetadataKey, tuple[TypedValue, ...]], key: str | MetadataKey) -> TypedValue:
    """Return the single value stored under ``key``.

    Raises:
        KeyError: If ``key`` is absent.
        ValueError: If ``key`` holds more than one value.
    """
    values = decode(metadata, key)
    if len(values) != 1:
        raise ValueError(
            f"Metadata key {metadata_key(key).value!r} holds {len(values)} values"
        )
    return values[0]
