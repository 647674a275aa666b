"""
Stellara Events - Schema Version Resolver

Pure lookups answering two consumer questions:

    "Do I understand envelopes stamped with version V?"   -> is_compatible
    "What changes between version A and version B?"       -> migration_path

Forward compatibility is not supported: a version newer than the one this
library emits is never declared compatible.  The migration table is a
static lookup, not a state machine; add an entry whenever
``CURRENT_VERSION`` is bumped.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Version stamped onto every envelope built by this process.
CURRENT_VERSION: int = 1

# Curated steps per (from, to) transition.
_MIGRATION_STEPS: dict[tuple[int, int], tuple[str, ...]] = {
    (1, 2): (
        "Add metadata fields for enhanced indexing",
        "Update event type symbols for consistency",
    ),
    (1, 3): (
        "Add batch operation support",
        "Include gas usage metadata",
    ),
    (2, 3): (
        "Add batch operation support",
        "Include gas usage metadata",
    ),
}


def current_version() -> int:
    """Return the schema version in effect for emission."""
    return CURRENT_VERSION


def is_compatible(version: int) -> bool:
    """True iff ``version`` is not newer than ``current_version()``."""
    return version <= current_version()


def migration_path(from_version: int, to_version: int) -> list[str] | None:
    """Return the ordered migration steps from one version to another.

    Returns:
        ``None`` when ``from_version >= to_version``.  Otherwise a fresh,
        non-empty list: the curated steps for known transitions, or a single
        generic step naming both endpoints.
    """
    if from_version >= to_version:
        return None
    steps = _MIGRATION_STEPS.get((from_version, to_version))
    if steps is None:
        return [f"Migrate from v{from_version} to v{to_version}"]
    return list(steps)


def check_version(version: int, event_type: object = "?") -> bool:
    """Consumer-side compatibility check that logs instead of raising."""
    compatible = is_compatible(version)
    if not compatible:
        logger.warning(
            "Incompatible schema version: event has v%s, current is v%s. "
            "event_type=%s. Consumer should upgrade before decoding.",
            version,
            current_version(),
            event_type,
        )
    return compatible
