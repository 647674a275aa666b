"""
Stellara Events -- In-process event log.

Append-only ``EventPublisher`` that keeps every ``(channel, payload)`` it
receives, in publish order.  Used by tests, replay tooling, and local
development where no transport is running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PublishedRecord:
    """One publish call as seen by the transport."""
    sequence: int
    channel: tuple[Any, ...]
    payload: Any


class InMemoryEventLog:
    """Append-only in-memory publisher.

    Args:
        fail_on: Optional set of channel topics (first channel element)
            whose publish should raise ``RuntimeError``.  Lets tests exercise
            the emitter's failure path.
    """

    def __init__(self, fail_on: set[Any] | None = None) -> None:
        self._records: list[PublishedRecord] = []
        self._fail_on = set(fail_on or ())

    def publish(self, channel: tuple[Any, ...], payload: Any) -> None:
        if channel and channel[0] in self._fail_on:
            raise RuntimeError(f"Simulated transport failure on {channel[0]!r}")
        record = PublishedRecord(len(self._records), tuple(channel), payload)
        self._records.append(record)
        logger.debug("InMemoryEventLog seq=%d channel=%r", record.sequence, record.channel)

    @property
    def records(self) -> list[PublishedRecord]:
        """Snapshot of every record, oldest first."""
        return list(self._records)

    def channels(self) -> list[tuple[Any, ...]]:
        return [r.channel for r in self._records]

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PublishedRecord]:
        return iter(list(self._records))
