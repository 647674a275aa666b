"""
Stellara Events - Event Emission System

Public API for the event subsystem.  Import the emitter, records, codec,
and schema resolver from here.

Usage:
    from stellara_events.events import EventEmitter, Topic, is_compatible
    from stellara_events.events import serialize_event, deserialize_event
"""
from __future__ import annotations

from stellara_events.events.context import EventPublisher, ExecutionContext, SystemContext
from stellara_events.events.emitter import UNASSIGNED_TRADE_ID, Emission, EventEmitter
from stellara_events.events.envelope import (
    LegacyEventRecord,
    StandardEvent,
    build_standard,
    channel_key,
    emit_standard,
    publish_standard,
)
from stellara_events.events.errors import EncodingError, EventError, PublishError, UnknownTopic
from stellara_events.events.legacy import (
    ALL_LEGACY_STRUCTS,
    ContractPausedEvent,
    ContractUnpausedEvent,
    FeeCollectedEvent,
    ProposalApprovedEvent,
    ProposalCancelledEvent,
    ProposalCreatedEvent,
    ProposalExecutedEvent,
    ProposalRejectedEvent,
    RewardAddedEvent,
    RewardClaimedEvent,
    TradeExecutedEvent,
)
from stellara_events.events.metadata import (
    MetadataKey,
    build_metadata,
    decode,
    decode_one,
    encode,
)
from stellara_events.events.schema import (
    CURRENT_VERSION,
    check_version,
    current_version,
    is_compatible,
    migration_path,
)
from stellara_events.events.serialization import (
    LEGACY_STRUCT_REGISTRY,
    deserialize_event,
    deserialize_event_json,
    deserialize_record,
    event_from_payload,
    serialize_event,
    serialize_event_json,
    serialize_record,
)
from stellara_events.events.topics import Topic, TopicGroup, lookup, topics_in_group
from stellara_events.events.values import Address, Symbol, as_address, intern_symbol

__all__ = [
    # Context
    "ExecutionContext",
    "EventPublisher",
    "SystemContext",
    # Values
    "Address",
    "Symbol",
    "as_address",
    "intern_symbol",
    # Topics
    "Topic",
    "TopicGroup",
    "lookup",
    "topics_in_group",
    # Metadata
    "MetadataKey",
    "encode",
    "build_metadata",
    "decode",
    "decode_one",
    # Envelope
    "StandardEvent",
    "LegacyEventRecord",
    "build_standard",
    "channel_key",
    "emit_standard",
    "publish_standard",
    # Emitter
    "EventEmitter",
    "Emission",
    "UNASSIGNED_TRADE_ID",
    # Legacy structs
    "TradeExecutedEvent",
    "ContractPausedEvent",
    "ContractUnpausedEvent",
    "FeeCollectedEvent",
    "ProposalCreatedEvent",
    "ProposalApprovedEvent",
    "ProposalRejectedEvent",
    "ProposalExecutedEvent",
    "ProposalCancelledEvent",
    "RewardAddedEvent",
    "RewardClaimedEvent",
    "ALL_LEGACY_STRUCTS",
    # Schema
    "CURRENT_VERSION",
    "current_version",
    "is_compatible",
    "migration_path",
    "check_version",
    # Serialization
    "serialize_event",
    "deserialize_event",
    "serialize_event_json",
    "deserialize_event_json",
    "serialize_record",
    "deserialize_record",
    "event_from_payload",
    "LEGACY_STRUCT_REGISTRY",
    # Errors
    "EventError",
    "EncodingError",
    "UnknownTopic",
    "PublishError",
]
