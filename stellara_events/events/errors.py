"""
Stellara Events - Error Taxonomy

All emission-path errors are fail-fast: nothing is retried inside this
package and nothing is published when one of them is raised.  The caller
decides whether to retry the whole business operation.

    EncodingError  -- a value cannot be interned / represented on the wire.
    UnknownTopic   -- an event type outside the topic registry was requested.
    PublishError   -- the bundled Redis publisher could not deliver a record.

Schema-version incompatibility is deliberately NOT an exception: consumers
call ``is_compatible()`` and get a boolean back (see ``schema.py``).
"""
from __future__ import annotations


class EventError(Exception):
    """Base class for every error raised by the event subsystem."""


class EncodingError(EventError, ValueError):
    """Raised when a field value cannot be represented in the target encoding.

    Typical causes: free text longer than the symbol length limit, characters
    outside the symbol alphabet, integers outside the 128-bit range, or a
    metadata key outside the fixed vocabulary.
    """


class UnknownTopic(EventError, KeyError):
    """Raised when an event type is not a member of the topic registry."""

    def __init__(self, name: object) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown event topic {self.name!r}"


class PublishError(EventError):
    """Raised when a transport adapter fails to hand a record to its backend."""
