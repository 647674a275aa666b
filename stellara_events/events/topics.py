"""
Stellara Events - Topic Registry

Fixed mapping from semantic event names to the stable short identifiers
that appear on the wire.  Indexers key long-lived filters off these
identifiers, so the registry is APPEND-ONLY:

    - never rename or reuse an identifier,
    - never change what an identifier means,
    - new domain events get a brand new identifier.

Identifiers must also be valid symbols (``[A-Za-z0-9_]``, at most 32 chars)
because they are published as channel keys.

Usage:
    >>> from stellara_events.events.topics import Topic, lookup
    >>> lookup("TRADE_EXECUTED") is Topic.TRADE_EXECUTED
    True
    >>> lookup("trade").value
    'trade'
"""
from __future__ import annotations

import enum

from stellara_events.events.errors import UnknownTopic


class TopicGroup(str, enum.Enum):
    """Business domain a topic belongs to."""

    CORE_TOKEN = "core_token"
    TRADING = "trading"
    STAKING = "staking"
    GOVERNANCE = "governance"
    ADMIN = "admin"
    ORACLE = "oracle"
    UPGRADE = "upgrade"
    SOCIAL_REWARDS = "social_rewards"


class Topic(str, enum.Enum):
    """Closed enumeration of every published event type."""

    # --- Core token ---
    TRANSFER = "transfer"
    APPROVE = "approve"
    MINT = "mint"
    BURN = "burn"

    # --- Trading ---
    TRADE_EXECUTED = "trade"
    CONTRACT_PAUSED = "paused"
    CONTRACT_UNPAUSED = "unpause"
    FEE_COLLECTED = "fee"

    # --- Staking ---
    STAKE = "stake"
    UNSTAKE = "unstake"
    REWARDS_CLAIMED = "rewards_claimed"
    POOL_UPDATED = "pool_updated"

    # --- Governance ---
    PROPOSAL_CREATED = "propose"
    PROPOSAL_APPROVED = "prop_approve"
    PROPOSAL_REJECTED = "reject"
    PROPOSAL_EXECUTED = "execute"
    PROPOSAL_CANCELLED = "cancel"
    VOTE = "vote"

    # --- Admin / authorization ---
    ADMIN_CHANGED = "admin_changed"
    AUTHORIZATION_CHANGED = "auth_changed"
    EMERGENCY_MODE = "emergency_mode"

    # --- Oracle ---
    ORACLE_UPDATED = "oracle_updated"

    # --- Upgrade ---
    UPGRADE_PROPOSED = "upgrade_proposed"
    UPGRADE_EXECUTED = "upgrade_executed"

    # --- Social rewards ---
    REWARD_ADDED = "reward"
    REWARD_CLAIMED = "claimed"

    def __str__(self) -> str:
        return self.value

    @property
    def group(self) -> TopicGroup:
        """Business domain of this topic."""
        return _TOPIC_GROUPS[self]


_TOPIC_GROUPS: dict[Topic, TopicGroup] = {
    Topic.TRANSFER: TopicGroup.CORE_TOKEN,
    Topic.APPROVE: TopicGroup.CORE_TOKEN,
    Topic.MINT: TopicGroup.CORE_TOKEN,
    Topic.BURN: TopicGroup.CORE_TOKEN,
    Topic.TRADE_EXECUTED: TopicGroup.TRADING,
    Topic.CONTRACT_PAUSED: TopicGroup.TRADING,
    Topic.CONTRACT_UNPAUSED: TopicGroup.TRADING,
    Topic.FEE_COLLECTED: TopicGroup.TRADING,
    Topic.STAKE: TopicGroup.STAKING,
    Topic.UNSTAKE: TopicGroup.STAKING,
    Topic.REWARDS_CLAIMED: TopicGroup.STAKING,
    Topic.POOL_UPDATED: TopicGroup.STAKING,
    Topic.PROPOSAL_CREATED: TopicGroup.GOVERNANCE,
    Topic.PROPOSAL_APPROVED: TopicGroup.GOVERNANCE,
    Topic.PROPOSAL_REJECTED: TopicGroup.GOVERNANCE,
    Topic.PROPOSAL_EXECUTED: TopicGroup.GOVERNANCE,
    Topic.PROPOSAL_CANCELLED: TopicGroup.GOVERNANCE,
    Topic.VOTE: TopicGroup.GOVERNANCE,
    Topic.ADMIN_CHANGED: TopicGroup.ADMIN,
    Topic.AUTHORIZATION_CHANGED: TopicGroup.ADMIN,
    Topic.EMERGENCY_MODE: TopicGroup.ADMIN,
    Topic.ORACLE_UPDATED: TopicGroup.ORACLE,
    Topic.UPGRADE_PROPOSED: TopicGroup.UPGRADE,
    Topic.UPGRADE_EXECUTED: TopicGroup.UPGRADE,
    Topic.REWARD_ADDED: TopicGroup.SOCIAL_REWARDS,
    Topic.REWARD_CLAIMED: TopicGroup.SOCIAL_REWARDS,
}


def _check_registry() -> None:
    """Fail at import time if a topic has no group (registry drift)."""
    missing = [t.name for t in Topic if t not in _TOPIC_GROUPS]
    if missing:
        raise RuntimeError(f"Topics without a group: {missing}")


_check_registry()


def lookup(name: str | Topic) -> Topic:
    """Resolve a semantic name or short identifier to its ``Topic``.

    Accepts a ``Topic`` (returned unchanged), the semantic member name
    (``"TRADE_EXECUTED"``, case-insensitive) or the wire identifier
    (``"trade"``).

    Raises:
        UnknownTopic: If ``name`` is not in the registry.
    """
    if isinstance(name, Topic):
        return name
    if not isinstance(name, str):
        raise UnknownTopic(name)
    try:
        return Topic(name)
    except ValueError:
        pass
    try:
        return Topic[name.upper()]
    except KeyError:
        raise UnknownTopic(name) from None


def topics_in_group(group: TopicGroup) -> list[Topic]:
    """Return every topic of ``group`` in declaration order."""
    return [t for t in Topic if _TOPIC_GROUPS[t] is group]
