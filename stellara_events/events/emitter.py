"""
Stellara Events - Domain Emission Helpers

One helper per business event kind.  Each helper maps the business
operation's parameters to ``(event_type, actor, data, metadata)``, builds
the ``StandardEvent`` AND the ``LegacyEventRecord`` from the same values,
then publishes both:

    1. standardized  -> channel (root_topic, event_type)
    2. legacy        -> event-kind specific channel, positional payload

Guarantees:
    - Both records are fully built before the first publish, so an
      ``EncodingError`` or ``UnknownTopic`` publishes nothing.
    - Both records share a single clock reading.
    - If the standardized publish raises, the legacy publish is not
      attempted.  Nothing is retried here.
    - Publish order equals call order; nothing is batched or coalesced.

The ``data`` layout of each helper is part of the external contract:
indexers parse it positionally.  Do not reorder fields without bumping
``schema.CURRENT_VERSION``.

Usage::

    emitter = EventEmitter(publisher)
    emission = emitter.transfer(ctx, alice, bob, 1_000, token)
    emission.standard.data        # (1000, Address('token'))
    emission.legacy.channel       # (Topic.TRANSFER, alice, bob)
"""
from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterable, Iterator, Mapping, NamedTuple

from pydantic import ValidationError

from stellara_events.events.context import EventPublisher, ExecutionContext
from stellara_events.events.envelope import (
    LegacyEventRecord,
    StandardEvent,
    build_standard,
)
from stellara_events.events.errors import EncodingError
from stellara_events.events.legacy import (
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
from stellara_events.events.metadata import MetadataKey as K
from stellara_events.events.metadata import build_metadata, encode
from stellara_events.events.topics import Topic, lookup
from stellara_events.events.values import (
    Address,
    as_address,
    check_bool,
    check_int,
    intern_symbol,
)
from stellara_events.observability.metrics import MetricsCollector

logger = logging.getLogger(__name__)

# Documented placeholder for a trade the caller has not assigned an id to.
UNASSIGNED_TRADE_ID: int = 0


class Emission(NamedTuple):
    """Both records describing one business occurrence."""

    standard: StandardEvent
    legacy: LegacyEventRecord


class EventEmitter:
    """Dual-channel emitter for every Stellara domain event.

    Args:
        publisher: Transport publish primitive (see ``EventPublisher``).
        root_topic: First element of standardized channel keys.  Defaults
            to the ``root_topic`` setting.
        metrics: Optional ``MetricsCollector``; emission counters are only
            recorded when one is given.

    Raises:
        EncodingError: If ``root_topic`` is not a valid symbol.
    """

    def __init__(
        self,
        publisher: EventPublisher,
        *,
        root_topic: str | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        if root_topic is None:
            from stellara_events.config.settings import get_settings

            root_topic = get_settings().root_topic
        self._publisher = publisher
        self._root_topic = intern_symbol(root_topic)
        self._metrics = metrics

    @property
    def root_topic(self) -> str:
        return self._root_topic

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def _encoding(self, topic: Topic) -> Iterator[None]:
        """Turn any representation failure into a counted ``EncodingError``."""
        try:
            yield
        except EncodingError as exc:
            self._on_encoding_error(topic, exc)
            raise
        except ValidationError as exc:
            self._on_encoding_error(topic, exc)
            raise EncodingError(
                f"Cannot represent {topic.value} event: {exc}"
            ) from exc

    def _on_encoding_error(self, topic: Topic, exc: Exception) -> None:
        logger.warning("Rejected %s event before publish: %s", topic.value, exc)
        if self._metrics is not None:
            self._metrics.record_encoding_error(topic.value)

    def _publish(self, standard: StandardEvent, legacy: LegacyEventRecord) -> Emission:
        """Publish standardized then legacy; stop at the first failure."""
        topic = standard.event_type
        try:
            self._publisher.publish((self._root_topic, topic), standard.payload())
            self._publisher.publish(legacy.channel, legacy.payload)
        except Exception:
            logger.error(
                "Publish failed for %s event (actor=%s ts=%d)",
                topic.value,
                standard.actor_identity,
                standard.timestamp,
            )
            if self._metrics is not None:
                self._metrics.record_publish_failure(topic.value)
            raise

        logger.debug(
            "Emitted %s actor=%s ts=%d v=%d legacy_channel_len=%d",
            topic.value,
            standard.actor_identity,
            standard.timestamp,
            standard.version,
            len(legacy.channel),
        )
        if self._metrics is not None:
            self._metrics.record_published("standard", topic.value)
            self._metrics.record_published("legacy", topic.value)
        return Emission(standard, legacy)

    def emit_standard(
        self,
        ctx: ExecutionContext,
        event_type: str | Topic,
        actor_identity: str | Address | None,
        data: Iterable[Any],
        metadata: Mapping[Any, Iterable[Any]],
    ) -> StandardEvent:
        """Publish a standardized event with no legacy counterpart.

        For registry topics without a domain helper (``emergency_mode``,
        ``oracle_updated``, ...), which never had a legacy format.
        """
        topic = lookup(event_type)
        with self._encoding(topic):
            event = build_standard(ctx, topic, actor_identity, data, metadata)
        try:
            self._publisher.publish((self._root_topic, topic), event.payload())
        except Exception:
            if self._metrics is not None:
                self._metrics.record_publish_failure(topic.value)
            raise
        if self._metrics is not None:
            self._metrics.record_published("standard", topic.value)
        return event

    # ------------------------------------------------------------------
    # Core token
    # ------------------------------------------------------------------

    def transfer(self, ctx: ExecutionContext, from_: str, to: str, amount: int, token: str) -> Emission:
        """Tokens moved from ``from_`` to ``to``."""
        topic = Topic.TRANSFER
        with self._encoding(topic):
            from_, to, token = as_address(from_), as_address(to), as_address(token)
            amount = check_int(amount)
            metadata = build_metadata(
                encode(K.FROM, from_),
                encode(K.TO, to),
                encode(K.AMOUNT, amount),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, from_, [amount, token], metadata,
                timestamp=ctx.current_time(),
            )
            legacy = LegacyEventRecord(channel=(topic, from_, to), payload=amount)
        return self._publish(standard, legacy)

    def approve(self, ctx: ExecutionContext, owner: str, spender: str, amount: int, token: str) -> Emission:
        """``owner`` allowed ``spender`` to move ``amount`` of ``token``."""
        topic = Topic.APPROVE
        with self._encoding(topic):
            owner, spender, token = as_address(owner), as_address(spender), as_address(token)
            amount = check_int(amount)
            metadata = build_metadata(
                encode(K.FROM, owner),
                encode(K.TO, spender),
                encode(K.AMOUNT, amount),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, owner, [amount, token], metadata,
                timestamp=ctx.current_time(),
            )
            legacy = LegacyEventRecord(channel=(topic, owner, spender), payload=amount)
        return self._publish(standard, legacy)

    def mint(
        self,
        ctx: ExecutionContext,
        to: str,
        amount: int,
        token: str,
        reason: str | None = None,
    ) -> Emission:
        """New tokens minted to ``to``.

        ``reason`` is optional.  When absent it is left out of both ``data``
        and ``metadata`` entirely; when present it is interned and appended
        to ``data`` and stored under the ``reason`` key.
        """
        topic = Topic.MINT
        with self._encoding(topic):
            to, token = as_address(to), as_address(token)
            amount = check_int(amount)
            data: list[Any] = [amount, token]
            entries = [
                encode(K.TO, to),
                encode(K.AMOUNT, amount),
                encode(K.TOKEN, token),
            ]
            if reason is not None:
                reason_sym = intern_symbol(reason)
                data.append(reason_sym)
                entries.append(encode(K.REASON, reason_sym))
            standard = build_standard(
                ctx, topic, to, data, build_metadata(*entries),
                timestamp=ctx.current_time(),
            )
            legacy = LegacyEventRecord(channel=(topic, to), payload=amount)
        return self._publish(standard, legacy)

    def burn(self, ctx: ExecutionContext, from_: str, amount: int, token: str) -> Emission:
        topic = Topic.BURN
        with self._encoding(topic):
            from_, token = as_address(from_), as_address(token)
            amount = check_int(amount)
            metadata = build_metadata(
                encode(K.FROM, from_),
                encode(K.AMOUNT, amount),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, from_, [amount, token], metadata,
                timestamp=ctx.current_time(),
            )
            legacy = LegacyEventRecord(channel=(topic, from_), payload=amount)
        return self._publish(standard, legacy)

    # ------------------------------------------------------------------
    # Staking
    # ------------------------------------------------------------------

    def stake(self, ctx: ExecutionContext, user: str, amount: int, lock_period: int, token: str) -> Emission:
        """``user`` locked ``amount`` for ``lock_period`` seconds."""
        topic = Topic.STAKE
        with self._encoding(topic):
            user, token = as_address(user), as_address(token)
            amount, lock_period = check_int(amount), check_int(lock_period)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.AMOUNT, amount),
                encode(K.LOCK_PERIOD, lock_period),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, user, [amount, lock_period, token], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic, user), payload=(amount, lock_period, now)
            )
        return self._publish(standard, legacy)

    def unstake(
        self,
        ctx: ExecutionContext,
        user: str,
        amount: int,
        rewards: int,
        fee: int,
        token: str,
    ) -> Emission:
        topic = Topic.UNSTAKE
        with self._encoding(topic):
            user, token = as_address(user), as_address(token)
            amount, rewards, fee = check_int(amount), check_int(rewards), check_int(fee)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.AMOUNT, amount),
                encode(K.FEE, fee),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, user, [amount, rewards, fee, token], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic, user), payload=(amount, rewards, fee, now)
            )
        return self._publish(standard, legacy)

    def rewards_claimed(
        self,
        ctx: ExecutionContext,
        user: str,
        base_rewards: int,
        bonus_rewards: int,
        token: str,
    ) -> Emission:
        """Staking rewards paid out.  Metadata ``amount`` is base + bonus."""
        topic = Topic.REWARDS_CLAIMED
        with self._encoding(topic):
            user, token = as_address(user), as_address(token)
            base_rewards, bonus_rewards = check_int(base_rewards), check_int(bonus_rewards)
            now = ctx.current_time()
            total = check_int(base_rewards + bonus_rewards)
            metadata = build_metadata(
                encode(K.AMOUNT, total),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, user, [base_rewards, bonus_rewards, token], metadata,
                timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic, user), payload=(base_rewards, bonus_rewards, now)
            )
        return self._publish(standard, legacy)

    def pool_updated(
        self,
        ctx: ExecutionContext,
        admin: str,
        reward_rate: int,
        bonus_multiplier: int,
    ) -> Emission:
        topic = Topic.POOL_UPDATED
        with self._encoding(topic):
            admin = as_address(admin)
            reward_rate, bonus_multiplier = check_int(reward_rate), check_int(bonus_multiplier)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.REWARD_RATE, reward_rate))
            standard = build_standard(
                ctx, topic, admin, [reward_rate, bonus_multiplier], metadata,
                timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic, admin), payload=(reward_rate, bonus_multiplier, now)
            )
        return self._publish(standard, legacy)

    # ------------------------------------------------------------------
    # Governance
    # ------------------------------------------------------------------

    def vote(
        self,
        ctx: ExecutionContext,
        voter: str,
        proposal_id: int,
        vote_type: str,
        voting_power: int,
    ) -> Emission:
        """``voter`` cast ``vote_type`` on ``proposal_id``."""
        topic = Topic.VOTE
        with self._encoding(topic):
            voter = as_address(voter)
            proposal_id, voting_power = check_int(proposal_id), check_int(voting_power)
            vote_sym = intern_symbol(vote_type)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.PROPOSAL_ID, proposal_id),
                encode(K.VOTE_TYPE, vote_sym),
            )
            standard = build_standard(
                ctx, topic, voter, [proposal_id, vote_sym, voting_power], metadata,
                timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic, voter),
                payload=(proposal_id, vote_sym, voting_power, now),
            )
        return self._publish(standard, legacy)

    def proposal_created(
        self,
        ctx: ExecutionContext,
        proposer: str,
        proposal_id: int,
        title: str,
        proposal_type: str,
    ) -> Emission:
        """A governance proposal was opened.

        The title is interned for the envelope, so it must satisfy the
        symbol rules.  The legacy payload keeps the original text.
        """
        topic = Topic.PROPOSAL_CREATED
        with self._encoding(topic):
            proposer = as_address(proposer)
            proposal_id = check_int(proposal_id)
            title_sym = intern_symbol(title)
            type_sym = intern_symbol(proposal_type)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.PROPOSAL_ID, proposal_id))
            standard = build_standard(
                ctx, topic, proposer, [proposal_id, title_sym, type_sym], metadata,
                timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic, proposer),
                payload=(proposal_id, str(title), type_sym, now),
            )
        return self._publish(standard, legacy)

    def proposal_executed(
        self,
        ctx: ExecutionContext,
        executor: str,
        proposal_id: int,
        success: bool,
    ) -> Emission:
        topic = Topic.PROPOSAL_EXECUTED
        with self._encoding(topic):
            executor = as_address(executor)
            proposal_id, success = check_int(proposal_id), check_bool(success)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.PROPOSAL_ID, proposal_id))
            standard = build_standard(
                ctx, topic, executor, [proposal_id, success], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic, executor), payload=(proposal_id, success, now)
            )
        return self._publish(standard, legacy)

    def proposal_approved(
        self,
        ctx: ExecutionContext,
        approver: str,
        proposal_id: int,
        current_approvals: int,
        threshold: int,
    ) -> Emission:
        topic = Topic.PROPOSAL_APPROVED
        with self._encoding(topic):
            approver = as_address(approver)
            proposal_id = check_int(proposal_id)
            current_approvals, threshold = check_int(current_approvals), check_int(threshold)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.PROPOSAL_ID, proposal_id))
            standard = build_standard(
                ctx, topic, approver, [proposal_id, current_approvals, threshold],
                metadata, timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=ProposalApprovedEvent(
                    proposal_id=proposal_id,
                    approver=approver,
                    current_approvals=current_approvals,
                    threshold=threshold,
                    timestamp=now,
                ),
            )
        return self._publish(standard, legacy)

    def proposal_rejected(self, ctx: ExecutionContext, rejector: str, proposal_id: int) -> Emission:
        topic = Topic.PROPOSAL_REJECTED
        with self._encoding(topic):
            rejector = as_address(rejector)
            proposal_id = check_int(proposal_id)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.PROPOSAL_ID, proposal_id))
            standard = build_standard(
                ctx, topic, rejector, [proposal_id], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=ProposalRejectedEvent(
                    proposal_id=proposal_id, rejector=rejector, timestamp=now
                ),
            )
        return self._publish(standard, legacy)

    def proposal_cancelled(self, ctx: ExecutionContext, cancelled_by: str, proposal_id: int) -> Emission:
        topic = Topic.PROPOSAL_CANCELLED
        with self._encoding(topic):
            cancelled_by = as_address(cancelled_by)
            proposal_id = check_int(proposal_id)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.PROPOSAL_ID, proposal_id))
            standard = build_standard(
                ctx, topic, cancelled_by, [proposal_id], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=ProposalCancelledEvent(
                    proposal_id=proposal_id, cancelled_by=cancelled_by, timestamp=now
                ),
            )
        return self._publish(standard, legacy)

    # ------------------------------------------------------------------
    # Upgrades
    # ------------------------------------------------------------------

    def upgrade_proposed(
        self,
        ctx: ExecutionContext,
        proposer: str,
        proposal_id: int,
        new_contract_hash: str,
        target_contract: str,
        description: str,
        approval_threshold: int,
        timelock_delay: int,
    ) -> Emission:
        """An upgrade of ``target_contract`` to ``new_contract_hash`` was proposed.

        The legacy record is the historical ``ProposalCreatedEvent`` struct
        on the ``(propose,)`` channel.
        """
        topic = Topic.UPGRADE_PROPOSED
        with self._encoding(topic):
            proposer, target = as_address(proposer), as_address(target_contract)
            proposal_id = check_int(proposal_id)
            approval_threshold, timelock_delay = check_int(approval_threshold), check_int(timelock_delay)
            hash_sym = intern_symbol(new_contract_hash)
            desc_sym = intern_symbol(description)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.PROPOSAL_ID, proposal_id),
                encode(K.TO, target),
            )
            standard = build_standard(
                ctx, topic, proposer,
                [proposal_id, hash_sym, target, desc_sym, approval_threshold, timelock_delay],
                metadata, timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(Topic.PROPOSAL_CREATED,),
                payload=ProposalCreatedEvent(
                    proposal_id=proposal_id,
                    proposer=proposer,
                    new_contract_hash=hash_sym,
                    target_contract=target,
                    description=desc_sym,
                    approval_threshold=approval_threshold,
                    timelock_delay=timelock_delay,
                    timestamp=now,
                ),
            )
        return self._publish(standard, legacy)

    def upgrade_executed(
        self,
        ctx: ExecutionContext,
        executor: str,
        proposal_id: int,
        new_contract_hash: str,
    ) -> Emission:
        topic = Topic.UPGRADE_EXECUTED
        with self._encoding(topic):
            executor = as_address(executor)
            proposal_id = check_int(proposal_id)
            hash_sym = intern_symbol(new_contract_hash)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.PROPOSAL_ID, proposal_id))
            standard = build_standard(
                ctx, topic, executor, [proposal_id, hash_sym], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(Topic.PROPOSAL_EXECUTED,),
                payload=ProposalExecutedEvent(
                    proposal_id=proposal_id,
                    executor=executor,
                    new_contract_hash=hash_sym,
                    timestamp=now,
                ),
            )
        return self._publish(standard, legacy)

    # ------------------------------------------------------------------
    # Admin / authorization
    # ------------------------------------------------------------------

    def admin_changed(self, ctx: ExecutionContext, old_admin: str, new_admin: str) -> Emission:
        """Admin rights moved from ``old_admin`` to ``new_admin``."""
        topic = Topic.ADMIN_CHANGED
        with self._encoding(topic):
            old_admin, new_admin = as_address(old_admin), as_address(new_admin)
            metadata = build_metadata(
                encode(K.FROM, old_admin),
                encode(K.TO, new_admin),
            )
            standard = build_standard(
                ctx, topic, old_admin, [old_admin, new_admin], metadata,
                timestamp=ctx.current_time(),
            )
            legacy = LegacyEventRecord(channel=(topic, old_admin), payload=new_admin)
        return self._publish(standard, legacy)

    def authorization_changed(self, ctx: ExecutionContext, user: str, authorized: bool) -> Emission:
        topic = Topic.AUTHORIZATION_CHANGED
        with self._encoding(topic):
            authorized = check_bool(authorized)
            user = as_address(user)
            metadata = build_metadata(encode(K.TO, user))
            standard = build_standard(
                ctx, topic, user, [authorized], metadata, timestamp=ctx.current_time()
            )
            legacy = LegacyEventRecord(channel=(topic, user), payload=authorized)
        return self._publish(standard, legacy)

    def contract_paused(self, ctx: ExecutionContext, paused_by: str) -> Emission:
        topic = Topic.CONTRACT_PAUSED
        with self._encoding(topic):
            paused_by = as_address(paused_by)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.FROM, paused_by))
            standard = build_standard(
                ctx, topic, paused_by, [paused_by], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=ContractPausedEvent(paused_by=paused_by, timestamp=now),
            )
        return self._publish(standard, legacy)

    def contract_unpaused(self, ctx: ExecutionContext, unpaused_by: str) -> Emission:
        topic = Topic.CONTRACT_UNPAUSED
        with self._encoding(topic):
            unpaused_by = as_address(unpaused_by)
            now = ctx.current_time()
            metadata = build_metadata(encode(K.FROM, unpaused_by))
            standard = build_standard(
                ctx, topic, unpaused_by, [unpaused_by], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=ContractUnpausedEvent(unpaused_by=unpaused_by, timestamp=now),
            )
        return self._publish(standard, legacy)

    # ------------------------------------------------------------------
    # Trading
    # ------------------------------------------------------------------

    def trade_executed(
        self,
        ctx: ExecutionContext,
        trader: str,
        pair: str,
        amount: int,
        price: int,
        is_buy: bool,
        fee_amount: int,
        fee_token: str,
        trade_id: int | None = None,
    ) -> Emission:
        """A trade was filled.

        ``trade_id`` is assigned by the calling business logic.  ``None``
        means "not assigned yet" and is carried in the legacy struct as
        ``UNASSIGNED_TRADE_ID`` (0).  It is not part of the envelope.
        """
        topic = Topic.TRADE_EXECUTED
        with self._encoding(topic):
            trader, fee_token = as_address(trader), as_address(fee_token)
            pair_sym = intern_symbol(pair)
            amount, price, fee_amount = check_int(amount), check_int(price), check_int(fee_amount)
            is_buy = check_bool(is_buy)
            now = ctx.current_time()
            if trade_id is None:
                logger.debug("trade_executed without trade_id; using placeholder 0")
                trade_id = UNASSIGNED_TRADE_ID
            else:
                trade_id = check_int(trade_id)
            metadata = build_metadata(
                encode(K.PAIR, pair_sym),
                encode(K.AMOUNT, amount),
                encode(K.PRICE, price),
                encode(K.FEE, fee_amount),
                encode(K.TOKEN, fee_token),
            )
            standard = build_standard(
                ctx, topic, trader,
                [pair_sym, amount, price, is_buy, fee_amount, fee_token],
                metadata, timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=TradeExecutedEvent(
                    trade_id=trade_id,
                    trader=trader,
                    pair=pair_sym,
                    amount=amount,
                    price=price,
                    is_buy=is_buy,
                    fee_amount=fee_amount,
                    fee_token=fee_token,
                    timestamp=now,
                ),
            )
        return self._publish(standard, legacy)

    def fee_collected(
        self,
        ctx: ExecutionContext,
        payer: str,
        recipient: str,
        amount: int,
        token: str,
    ) -> Emission:
        topic = Topic.FEE_COLLECTED
        with self._encoding(topic):
            payer, recipient, token = as_address(payer), as_address(recipient), as_address(token)
            amount = check_int(amount)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.FROM, payer),
                encode(K.TO, recipient),
                encode(K.AMOUNT, amount),
                encode(K.TOKEN, token),
            )
            standard = build_standard(
                ctx, topic, payer, [amount, token], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=FeeCollectedEvent(
                    payer=payer,
                    recipient=recipient,
                    amount=amount,
                    token=token,
                    timestamp=now,
                ),
            )
        return self._publish(standard, legacy)

    # ------------------------------------------------------------------
    # Social rewards
    # ------------------------------------------------------------------

    def reward_added(
        self,
        ctx: ExecutionContext,
        granted_by: str,
        reward_id: int,
        user: str,
        amount: int,
        reward_type: str,
        reason: str,
    ) -> Emission:
        """``granted_by`` granted a social reward to ``user``."""
        topic = Topic.REWARD_ADDED
        with self._encoding(topic):
            granted_by, user = as_address(granted_by), as_address(user)
            reward_id, amount = check_int(reward_id), check_int(amount)
            type_sym = intern_symbol(reward_type)
            reason_sym = intern_symbol(reason)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.FROM, granted_by),
                encode(K.TO, user),
                encode(K.AMOUNT, amount),
                encode(K.REASON, reason_sym),
            )
            standard = build_standard(
                ctx, topic, granted_by, [reward_id, amount, type_sym, reason_sym],
                metadata, timestamp=now,
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=RewardAddedEvent(
                    reward_id=reward_id,
                    user=user,
                    amount=amount,
                    reward_type=type_sym,
                    reason=reason_sym,
                    granted_by=granted_by,
                    timestamp=now,
                ),
            )
        return self._publish(standard, legacy)

    def reward_claimed(self, ctx: ExecutionContext, reward_id: int, user: str, amount: int) -> Emission:
        topic = Topic.REWARD_CLAIMED
        with self._encoding(topic):
            user = as_address(user)
            reward_id, amount = check_int(reward_id), check_int(amount)
            now = ctx.current_time()
            metadata = build_metadata(
                encode(K.TO, user),
                encode(K.AMOUNT, amount),
            )
            standard = build_standard(
                ctx, topic, user, [reward_id, amount], metadata, timestamp=now
            )
            legacy = LegacyEventRecord(
                channel=(topic,),
                payload=RewardClaimedEvent(
                    reward_id=reward_id, user=user, amount=amount, timestamp=now
                ),
            )
        return self._publish(standard, legacy)

    def __repr__(self) -> str:
        return (
            f"EventEmitter(root_topic={self._root_topic!r}, "
            f"metrics={'configured' if self._metrics else 'NONE'})"
        )
