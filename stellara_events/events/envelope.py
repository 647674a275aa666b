"""
Stellara Events - Standardized Envelope

Defines the two records handed to the transport and the builder that
stamps the envelope.

StandardEvent -- the envelope every domain event is published in:

    channel  = (root_topic, event_type)
    payload  = (emitter_identity, actor_identity, data, metadata,
                timestamp, version)

LegacyEventRecord -- the older positional format published right after
the envelope for consumers that have not migrated yet.

Both records are write-once: they are built, published, and never mutated
or read back by this layer.

Field semantics (StandardEvent):
    event_type:
        A ``Topic`` member.  Anything else raises ``UnknownTopic``.

    emitter_identity:
        Always ``ctx.current_identity()``.  Callers cannot supply it.

    actor_identity:
        The end user / caller that triggered the event, if any.

    data:
        Positional typed values; layout is defined per event type and is
        part of the external contract.

    metadata:
        Keyed copy of selected fields (see ``metadata.py``).

    timestamp:
        ``ctx.current_time()`` at emission.

    version:
        ``schema.current_version()`` at construction.  Never backfilled.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field, ValidationError

from stellara_events.events.context import EventPublisher, ExecutionContext
from stellara_events.events.errors import EncodingError
from stellara_events.events.metadata import Metadata, MetadataKey, validate_metadata
from stellara_events.events.schema import current_version
from stellara_events.events.topics import Topic, lookup
from stellara_events.events.values import Address, Symbol, as_address, intern_symbol, to_typed_value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class StandardEvent(BaseModel):
    """Standardized, schema-versioned event envelope."""

    event_type: Topic = Field(..., description="Registry topic of the event.")
    emitter_identity: Any = Field(..., description="Address of the emitting component.")
    actor_identity: Any = Field(
        default=None, description="Address of the triggering user, if any."
    )
    data: tuple[Any, ...] = Field(
        default=(), description="Positional typed values, layout per event type."
    )
    metadata: dict[MetadataKey, tuple[Any, ...]] = Field(
        default_factory=dict, description="Keyed copy of selected fields."
    )
    timestamp: int = Field(..., ge=0, description="Context clock at emission.")
    version: int = Field(..., ge=1, description="Schema version at construction.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "title": "Stellara StandardEvent",
        },
    }

    def payload(self) -> tuple[Any, ...]:
        """Return the published payload tuple in wire order."""
        return (
            self.emitter_identity,
            self.actor_identity,
            self.data,
            self.metadata,
            self.timestamp,
            self.version,
        )


class LegacyEventRecord(BaseModel):
    """Positional legacy record: a channel key tuple plus a payload.

    The payload is a single scalar, a tuple of scalars (by convention
    ending with the timestamp), or one of the typed structs in
    ``legacy.py``.
    """

    channel: tuple[Any, ...] = Field(..., min_length=1)
    payload: Any = Field(...)

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @property
    def topic(self) -> Topic:
        return self.channel[0]


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

def channel_key(event_type: Topic, root_topic: str | None = None) -> tuple[Symbol, Topic]:
    """Standardized channel key ``(root_topic, event_type)``."""
    if root_topic is None:
        from stellara_events.config.settings import get_settings

        root_topic = get_settings().root_topic
    return intern_symbol(root_topic), event_type


def build_standard(
    ctx: ExecutionContext,
    event_type: str | Topic,
    actor_identity: str | Address | None,
    data: Iterable[Any],
    metadata: Mapping[Any, Iterable[Any]],
    *,
    timestamp: int | None = None,
) -> StandardEvent:
    """Construct a ``StandardEvent`` without publishing it.

    The emitter identity, clock value, and schema version are stamped from
    the context and the resolver; callers only supply the event-specific
    parts.  ``timestamp`` lets a helper reuse a clock reading it already
    took for the matching legacy record.

    Raises:
        UnknownTopic: ``event_type`` is not in the registry.
        EncodingError: A value, key, identity, or the context clock cannot
            be represented.
    """
    topic = lookup(event_type)
    actor = as_address(actor_identity) if actor_identity is not None else None
    typed_data = tuple(to_typed_value(v) for v in data)
    typed_metadata: Metadata = validate_metadata(metadata)
    try:
        return StandardEvent(
            event_type=topic,
            emitter_identity=as_address(ctx.current_identity()),
            actor_identity=actor,
            data=typed_data,
            metadata=typed_metadata,
            timestamp=ctx.current_time() if timestamp is None else timestamp,
            version=current_version(),
        )
    except ValidationError as exc:
        raise EncodingError(f"Cannot build {topic.value} envelope: {exc}") from exc


def publish_standard(
    publisher: EventPublisher,
    event: StandardEvent,
    root_topic: str | None = None,
) -> None:
    """Publish an already-built envelope on its standardized channel."""
    channel = channel_key(event.event_type, root_topic)
    publisher.publish(channel, event.payload())
    logger.debug(
        "Published standard event type=%s actor=%s ts=%d v=%d",
        event.event_type.value,
        event.actor_identity,
        event.timestamp,
        event.version,
    )


def emit_standard(
    ctx: ExecutionContext,
    publisher: EventPublisher,
    event_type: str | Topic,
    actor_identity: str | Address | None,
    data: Iterable[Any],
    metadata: Mapping[Any, Iterable[Any]],
    *,
    root_topic: str | None = None,
) -> StandardEvent:
    """Build and publish one standardized event.

    Exactly one publish per call.  The envelope is fully constructed before
    the publish, so a validation failure publishes nothing.

    Returns:
        The published ``StandardEvent``.
    """
    event = build_standard(ctx, event_type, actor_identity, data, metadata)
    publish_standard(publisher, event, root_topic)
    return event
