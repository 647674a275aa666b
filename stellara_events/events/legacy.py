"""
Stellara Events - Legacy Typed Payloads

Struct payloads of the pre-envelope event format.  Consumers that have not
adopted ``StandardEvent`` decode these from single-topic channels such as
``(trade,)`` or ``(fee,)``.  Field names and order are frozen: they are what
those consumers parse.

Every struct carries strictly less information than the matching
``StandardEvent`` and is filled from the same values by the emitter.
"""
from __future__ import annotations

from pydantic import BaseModel, Field, InstanceOf

from stellara_events.events.values import Address, Symbol

_FROZEN = {"frozen": True, "extra": "forbid"}


# ---------------------------------------------------------------------------
# Trading
# ---------------------------------------------------------------------------
class TradeExecutedEvent(BaseModel):
    """Emitted when a trade is executed.

    ``trade_id`` is assigned by the calling business logic; ``0`` is the
    documented placeholder for "not assigned yet".
    """

    trade_id: int = Field(default=0, ge=0)
    trader: InstanceOf[Address]
    pair: InstanceOf[Symbol]
    amount: int
    price: int
    is_buy: bool
    fee_amount: int
    fee_token: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class ContractPausedEvent(BaseModel):
    """Emitted when the contract is paused."""

    paused_by: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class ContractUnpausedEvent(BaseModel):
    """Emitted when the contract is unpaused."""

    unpaused_by: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class FeeCollectedEvent(BaseModel):
    """Emitted when a fee is collected."""

    payer: InstanceOf[Address]
    recipient: InstanceOf[Address]
    amount: int
    token: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


# ---------------------------------------------------------------------------
# Governance / upgrades
# ---------------------------------------------------------------------------
class ProposalCreatedEvent(BaseModel):
    """Emitted when an upgrade proposal is created."""

    proposal_id: int = Field(..., ge=0)
    proposer: InstanceOf[Address]
    new_contract_hash: InstanceOf[Symbol]
    target_contract: InstanceOf[Address]
    description: InstanceOf[Symbol]
    approval_threshold: int = Field(..., ge=0)
    timelock_delay: int = Field(..., ge=0, description="Seconds before execution.")
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class ProposalApprovedEvent(BaseModel):
    """Emitted when a proposal receives an approval."""

    proposal_id: int = Field(..., ge=0)
    approver: InstanceOf[Address]
    current_approvals: int = Field(..., ge=0)
    threshold: int = Field(..., ge=0)
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class ProposalRejectedEvent(BaseModel):
    proposal_id: int = Field(..., ge=0)
    rejector: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class ProposalExecutedEvent(BaseModel):
    """Emitted when an upgrade proposal is executed."""

    proposal_id: int = Field(..., ge=0)
    executor: InstanceOf[Address]
    new_contract_hash: InstanceOf[Symbol]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class ProposalCancelledEvent(BaseModel):
    proposal_id: int = Field(..., ge=0)
    cancelled_by: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


# ---------------------------------------------------------------------------
# Social rewards
# ---------------------------------------------------------------------------
class RewardAddedEvent(BaseModel):
    """Emitted when a reward is granted to a user."""

    reward_id: int = Field(..., ge=0)
    user: InstanceOf[Address]
    amount: int
    reward_type: InstanceOf[Symbol] = Field(
        ..., description="e.g. referral | engagement | achievement."
    )
    reason: InstanceOf[Symbol]
    granted_by: InstanceOf[Address]
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


class RewardClaimedEvent(BaseModel):
    reward_id: int = Field(..., ge=0)
    user: InstanceOf[Address]
    amount: int
    timestamp: int = Field(..., ge=0)

    model_config = _FROZEN


ALL_LEGACY_STRUCTS: list[type[BaseModel]] = [
    TradeExecutedEvent,
    ContractPausedEvent,
    ContractUnpausedEvent,
    FeeCollectedEvent,
    ProposalCreatedEvent,
    ProposalApprovedEvent,
    ProposalRejectedEvent,
    ProposalExecutedEvent,
    ProposalCancelledEvent,
    RewardAddedEvent,
    RewardClaimedEvent,
]
