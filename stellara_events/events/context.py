"""
Stellara Events - Execution Context & Publisher Interfaces

The emission layer never reads ambient/global host state.  Everything it
needs from the host is passed in explicitly:

    ExecutionContext  -- own identity + clock of the current unit of work
    EventPublisher    -- append-only publish primitive of the transport

Both are structural ``Protocol`` types so any host object with the right
methods can be used.  ``SystemContext`` is a concrete context for
off-host use (scripts, local tooling, tests).
"""
from __future__ import annotations

import time
from typing import Any, Callable, Protocol, runtime_checkable

from stellara_events.events.values import Address, as_address


@runtime_checkable
class ExecutionContext(Protocol):
    """Host-provided facts about the current unit of work."""

    def current_identity(self) -> Address:
        """Identity of the component that is emitting (never the caller)."""
        ...

    def current_time(self) -> int:
        """Clock value; monotonic non-decreasing for the host's lifetime."""
        ...


@runtime_checkable
class EventPublisher(Protocol):
    """Transport publish primitive.

    ``publish`` either fully delivers ``payload`` on ``channel`` or raises
    synchronously; there is no partial delivery.
    """

    def publish(self, channel: tuple[Any, ...], payload: Any) -> None:
        ...


class SystemContext:
    """Execution context backed by the wall clock.

    The clock is clamped so it never goes backwards even if the system
    clock is adjusted.

    Args:
        identity: Identity stamped as ``emitter_identity``.
        clock: Callable returning seconds; defaults to ``time.time``.
    """

    def __init__(self, identity: str, clock: Callable[[], float] | None = None) -> None:
        self._identity = as_address(identity)
        self._clock = clock or time.time
        self._last: int = 0

    def current_identity(self) -> Address:
        return self._identity

    def current_time(self) -> int:
        now = int(self._clock())
        if now < self._last:
            now = self._last
        self._last = now
        return now

    def __repr__(self) -> str:
        return f"SystemContext(identity={self._identity!r}, last={self._last})"
