"""Tests for the domain emission helpers and the legacy bridge."""
import pytest

from stellara_events.bus.memory import InMemoryEventLog
from stellara_events.events.emitter import UNASSIGNED_TRADE_ID, EventEmitter
from stellara_events.events.errors import EncodingError, UnknownTopic
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
from stellara_events.events.metadata import decode, decode_one
from stellara_events.events.schema import current_version
from stellara_events.events.topics import Topic
from stellara_events.events.values import Address, Symbol

ROOT = "stellara_event"


def _emit_all(emitter, ctx, alice, bob, token):
    """Invoke every helper once; returns the emissions in call order."""
    return [
        emitter.transfer(ctx, alice, bob, 100, token),
        emitter.approve(ctx, alice, bob, 50, token),
        emitter.mint(ctx, alice, 10, token, reason="airdrop"),
        emitter.burn(ctx, alice, 5, token),
        emitter.stake(ctx, alice, 1000, 86400, token),
        emitter.unstake(ctx, alice, 1000, 25, 3, token),
        emitter.rewards_claimed(ctx, alice, 20, 5, token),
        emitter.vote(ctx, alice, 7, "yes", 2**100),
        emitter.admin_changed(ctx, alice, bob),
        emitter.authorization_changed(ctx, bob, True),
        emitter.pool_updated(ctx, alice, 15, 2),
        emitter.trade_executed(ctx, alice, "XLM_USDC", 300, 12, True, 1, token, trade_id=9),
        emitter.fee_collected(ctx, alice, bob, 1, token),
        emitter.proposal_created(ctx, alice, 7, "Raise_fee", "param_change"),
        emitter.proposal_executed(ctx, bob, 7, True),
        emitter.proposal_approved(ctx, bob, 7, 2, 3),
        emitter.proposal_rejected(ctx, bob, 8),
        emitter.proposal_cancelled(ctx, alice, 9),
        emitter.upgrade_proposed(ctx, alice, 11, "abc123", token, "v2_rollout", 3, 3600),
        emitter.upgrade_executed(ctx, bob, 11, "abc123"),
        emitter.contract_paused(ctx, alice),
        emitter.contract_unpaused(ctx, alice),
        emitter.reward_added(ctx, alice, 1, bob, 40, "referral", "invited_friend"),
        emitter.reward_claimed(ctx, 1, bob, 40),
    ]


class TestDualChannel:
    def test_every_helper_publishes_standard_then_legacy(self, emitter, log, ctx, alice, bob, token):
        emissions = _emit_all(emitter, ctx, alice, bob, token)
        records = log.records
        assert len(records) == 2 * len(emissions)
        for i, emission in enumerate(emissions):
            standard, legacy = records[2 * i], records[2 * i + 1]
            assert standard.channel == (ROOT, emission.standard.event_type)
            assert standard.payload == emission.standard.payload()
            assert legacy.channel == emission.legacy.channel
            assert legacy.payload == emission.legacy.payload

    def test_envelope_invariants(self, emitter, ctx, alice, bob, token):
        for emission in _emit_all(emitter, ctx, alice, bob, token):
            event = emission.standard
            assert event.emitter_identity == ctx.identity
            assert event.timestamp == ctx.now
            assert event.version == current_version()
            assert isinstance(event.event_type, Topic)

    def test_legacy_channel_starts_with_topic(self, emitter, ctx, alice, bob, token):
        for emission in _emit_all(emitter, ctx, alice, bob, token):
            assert isinstance(emission.legacy.channel[0], Topic)

    def test_transfer_then_approve_ordering(self, emitter, log, ctx, alice, bob, token):
        emitter.transfer(ctx, alice, bob, 1, token)
        emitter.approve(ctx, alice, bob, 2, token)
        assert log.channels() == [
            (ROOT, Topic.TRANSFER),
            (Topic.TRANSFER, alice, bob),
            (ROOT, Topic.APPROVE),
            (Topic.APPROVE, alice, bob),
        ]

    def test_single_clock_reading_shared(self, emitter, ctx, alice, token):
        emission = emitter.stake(ctx, alice, 1, 2, token)
        assert emission.legacy.payload[-1] == emission.standard.timestamp


class TestCoreToken:
    def test_transfer(self, emitter, ctx, alice, bob, token):
        e = emitter.transfer(ctx, alice, bob, 100, token)
        assert e.standard.event_type is Topic.TRANSFER
        assert e.standard.actor_identity == alice
        assert e.standard.data == (100, token)
        assert list(e.standard.metadata) == [K.FROM, K.TO, K.AMOUNT, K.TOKEN]
        assert decode(e.standard.metadata, K.FROM) == (alice,)
        assert decode(e.standard.metadata, K.TO) == (bob,)
        assert e.legacy.channel == (Topic.TRANSFER, alice, bob)
        assert e.legacy.payload == 100

    def test_transfer_accepts_plain_strings(self, emitter, ctx):
        e = emitter.transfer(ctx, "GALICE", "GBOB", 1, "CTOKEN")
        assert isinstance(e.standard.actor_identity, Address)
        assert isinstance(e.legacy.channel[1], Address)

    def test_approve(self, emitter, ctx, alice, bob, token):
        e = emitter.approve(ctx, alice, bob, 50, token)
        assert e.standard.actor_identity == alice
        assert e.standard.data == (50, token)
        assert decode_one(e.standard.metadata, K.TO) == bob
        assert e.legacy.channel == (Topic.APPROVE, alice, bob)
        assert e.legacy.payload == 50

    def test_mint_without_reason(self, emitter, ctx, alice, token):
        e = emitter.mint(ctx, alice, 10, token)
        assert e.standard.data == (10, token)
        assert K.REASON not in e.standard.metadata
        assert list(e.standard.metadata) == [K.TO, K.AMOUNT, K.TOKEN]
        assert e.legacy.channel == (Topic.MINT, alice)
        assert e.legacy.payload == 10

    def test_mint_with_reason(self, emitter, ctx, alice, token):
        e = emitter.mint(ctx, alice, 10, token, reason="airdrop")
        assert e.standard.data == (10, token, Symbol("airdrop"))
        assert isinstance(e.standard.data[2], Symbol)
        assert decode_one(e.standard.metadata, K.REASON) == "airdrop"

    def test_mint_oversized_reason_publishes_nothing(self, emitter, log, ctx, alice, token):
        with pytest.raises(EncodingError):
            emitter.mint(ctx, alice, 10, token, reason="r" * 64)
        assert len(log) == 0

    def test_burn(self, emitter, ctx, alice, token):
        e = emitter.burn(ctx, alice, 5, token)
        assert e.standard.data == (5, token)
        assert list(e.standard.metadata) == [K.FROM, K.AMOUNT, K.TOKEN]
        assert e.legacy.channel == (Topic.BURN, alice)
        assert e.legacy.payload == 5

    def test_i128_amount(self, emitter, ctx, alice, bob, token):
        amount = -(2**120)
        e = emitter.transfer(ctx, alice, bob, amount, token)
        assert e.standard.data[0] == amount
        assert e.legacy.payload == amount


class TestStaking:
    def test_stake(self, emitter, ctx, alice, token):
        e = emitter.stake(ctx, alice, 1000, 86400, token)
        assert e.standard.data == (1000, 86400, token)
        assert list(e.standard.metadata) == [K.AMOUNT, K.LOCK_PERIOD, K.TOKEN]
        assert e.legacy.channel == (Topic.STAKE, alice)
        assert e.legacy.payload == (1000, 86400, ctx.now)

    def test_unstake(self, emitter, ctx, alice, token):
        e = emitter.unstake(ctx, alice, 1000, 25, 3, token)
        assert e.standard.data == (1000, 25, 3, token)
        assert list(e.standard.metadata) == [K.AMOUNT, K.FEE, K.TOKEN]
        assert e.legacy.payload == (1000, 25, 3, ctx.now)

    def test_rewards_claimed_sums_amount(self, emitter, ctx, alice, token):
        e = emitter.rewards_claimed(ctx, alice, 20, 5, token)
        assert e.standard.data == (20, 5, token)
        assert decode_one(e.standard.metadata, K.AMOUNT) == 25
        assert e.legacy.channel == (Topic.REWARDS_CLAIMED, alice)
        assert e.legacy.payload == (20, 5, ctx.now)

    def test_pool_updated(self, emitter, ctx, alice):
        e = emitter.pool_updated(ctx, alice, 15, 2)
        assert e.standard.actor_identity == alice
        assert e.standard.data == (15, 2)
        assert e.standard.metadata == {K.REWARD_RATE: (15,)}
        assert e.legacy.payload == (15, 2, ctx.now)


class TestGovernance:
    def test_vote(self, emitter, ctx, alice):
        e = emitter.vote(ctx, alice, 7, "yes", 2**100)
        assert e.standard.data == (7, Symbol("yes"), 2**100)
        assert list(e.standard.metadata) == [K.PROPOSAL_ID, K.VOTE_TYPE]
        assert e.legacy.channel == (Topic.VOTE, alice)
        assert e.legacy.payload == (7, "yes", 2**100, ctx.now)

    def test_vote_u128_voting_power(self, emitter, ctx, alice):
        e = emitter.vote(ctx, alice, 1, "no", 2**128 - 1)
        assert e.standard.data[2] == 2**128 - 1

    def test_proposal_created(self, emitter, ctx, alice):
        e = emitter.proposal_created(ctx, alice, 7, "Raise_fee", "param_change")
        assert e.standard.data == (7, Symbol("Raise_fee"), Symbol("param_change"))
        assert e.standard.metadata == {K.PROPOSAL_ID: (7,)}
        assert e.legacy.channel == (Topic.PROPOSAL_CREATED, alice)
        assert e.legacy.payload == (7, "Raise_fee", "param_change", ctx.now)
        assert type(e.legacy.payload[1]) is str

    def test_proposal_created_free_text_title_rejected(self, emitter, log, ctx, alice):
        with pytest.raises(EncodingError):
            emitter.proposal_created(ctx, alice, 7, "Raise the fee", "param_change")
        assert len(log) == 0

    def test_proposal_executed(self, emitter, ctx, bob):
        e = emitter.proposal_executed(ctx, bob, 7, False)
        assert e.standard.data == (7, False)
        assert e.legacy.channel == (Topic.PROPOSAL_EXECUTED, bob)
        assert e.legacy.payload == (7, False, ctx.now)

    def test_proposal_approved(self, emitter, ctx, bob):
        e = emitter.proposal_approved(ctx, bob, 7, 2, 3)
        assert e.standard.data == (7, 2, 3)
        assert e.legacy.channel == (Topic.PROPOSAL_APPROVED,)
        assert e.legacy.payload == ProposalApprovedEvent(
            proposal_id=7, approver=bob, current_approvals=2, threshold=3, timestamp=ctx.now
        )

    def test_proposal_rejected(self, emitter, ctx, bob):
        e = emitter.proposal_rejected(ctx, bob, 8)
        assert e.legacy.channel == (Topic.PROPOSAL_REJECTED,)
        assert isinstance(e.legacy.payload, ProposalRejectedEvent)
        assert e.legacy.payload.rejector == bob

    def test_proposal_cancelled(self, emitter, ctx, alice):
        e = emitter.proposal_cancelled(ctx, alice, 9)
        assert e.legacy.channel == (Topic.PROPOSAL_CANCELLED,)
        assert isinstance(e.legacy.payload, ProposalCancelledEvent)
        assert e.legacy.payload.proposal_id == 9

    def test_negative_proposal_id_rejected(self, emitter, log, ctx, bob):
        with pytest.raises(EncodingError):
            emitter.proposal_rejected(ctx, bob, -1)
        assert len(log) == 0


class TestUpgrades:
    def test_upgrade_proposed(self, emitter, ctx, alice, token):
        e = emitter.upgrade_proposed(ctx, alice, 11, "abc123", token, "v2_rollout", 3, 3600)
        assert e.standard.event_type is Topic.UPGRADE_PROPOSED
        assert e.standard.data == (11, Symbol("abc123"), token, Symbol("v2_rollout"), 3, 3600)
        assert e.legacy.channel == (Topic.PROPOSAL_CREATED,)
        payload = e.legacy.payload
        assert isinstance(payload, ProposalCreatedEvent)
        assert payload.target_contract == token
        assert payload.timelock_delay == 3600

    def test_upgrade_executed(self, emitter, ctx, bob):
        e = emitter.upgrade_executed(ctx, bob, 11, "abc123")
        assert e.legacy.channel == (Topic.PROPOSAL_EXECUTED,)
        assert e.legacy.payload == ProposalExecutedEvent(
            proposal_id=11, executor=bob, new_contract_hash=Symbol("abc123"), timestamp=ctx.now
        )


class TestAdmin:
    def test_admin_changed(self, emitter, ctx, alice, bob):
        e = emitter.admin_changed(ctx, alice, bob)
        assert e.standard.actor_identity == alice
        assert e.standard.data == (alice, bob)
        assert list(e.standard.metadata) == [K.FROM, K.TO]
        assert e.legacy.channel == (Topic.ADMIN_CHANGED, alice)
        assert e.legacy.payload == bob

    def test_authorization_toggle(self, emitter, log, ctx, bob):
        first = emitter.authorization_changed(ctx, bob, True)
        ctx.advance(5)
        second = emitter.authorization_changed(ctx, bob, False)

        assert first.standard.actor_identity == second.standard.actor_identity == bob
        assert first.standard.timestamp <= second.standard.timestamp
        assert first.standard.data == (True,)
        assert second.standard.data == (False,)
        assert first.standard.metadata == second.standard.metadata == {K.TO: (bob,)}
        assert first.legacy.payload is True
        assert second.legacy.payload is False

    def test_authorization_requires_bool(self, emitter, log, ctx, bob):
        with pytest.raises(EncodingError):
            emitter.authorization_changed(ctx, bob, 1)
        assert len(log) == 0

    def test_contract_paused_and_unpaused(self, emitter, ctx, alice):
        paused = emitter.contract_paused(ctx, alice)
        unpaused = emitter.contract_unpaused(ctx, alice)
        assert paused.legacy.channel == (Topic.CONTRACT_PAUSED,)
        assert paused.legacy.payload == ContractPausedEvent(paused_by=alice, timestamp=ctx.now)
        assert unpaused.legacy.payload == ContractUnpausedEvent(unpaused_by=alice, timestamp=ctx.now)
        assert paused.standard.metadata == {K.FROM: (alice,)}


class TestTrading:
    def test_trade_executed(self, emitter, ctx, alice, token):
        e = emitter.trade_executed(ctx, alice, "XLM_USDC", 300, 12, True, 1, token, trade_id=9)
        assert e.standard.data == (Symbol("XLM_USDC"), 300, 12, True, 1, token)
        assert list(e.standard.metadata) == [K.PAIR, K.AMOUNT, K.PRICE, K.FEE, K.TOKEN]
        assert decode_one(e.standard.metadata, K.FEE) == 1
        assert e.legacy.channel == (Topic.TRADE_EXECUTED,)
        assert e.legacy.payload == TradeExecutedEvent(
            trade_id=9,
            trader=alice,
            pair=Symbol("XLM_USDC"),
            amount=300,
            price=12,
            is_buy=True,
            fee_amount=1,
            fee_token=token,
            timestamp=ctx.now,
        )

    def test_trade_id_placeholder(self, emitter, ctx, alice, token):
        e = emitter.trade_executed(ctx, alice, "XLM_USDC", 300, 12, False, 1, token)
        assert e.legacy.payload.trade_id == UNASSIGNED_TRADE_ID == 0
        assert len(e.standard.data) == 6

    def test_fee_collected(self, emitter, ctx, alice, bob, token):
        e = emitter.fee_collected(ctx, alice, bob, 1, token)
        assert e.standard.actor_identity == alice
        assert list(e.standard.metadata) == [K.FROM, K.TO, K.AMOUNT, K.TOKEN]
        assert e.legacy.channel == (Topic.FEE_COLLECTED,)
        assert e.legacy.payload == FeeCollectedEvent(
            payer=alice, recipient=bob, amount=1, token=token, timestamp=ctx.now
        )


class TestSocialRewards:
    def test_reward_added(self, emitter, ctx, alice, bob):
        e = emitter.reward_added(ctx, alice, 1, bob, 40, "referral", "invited_friend")
        assert e.standard.actor_identity == alice
        assert e.standard.data == (1, 40, Symbol("referral"), Symbol("invited_friend"))
        assert decode_one(e.standard.metadata, K.TO) == bob
        assert isinstance(e.legacy.payload, RewardAddedEvent)
        assert e.legacy.payload.granted_by == alice

    def test_reward_claimed(self, emitter, ctx, bob):
        e = emitter.reward_claimed(ctx, 1, bob, 40)
        assert e.standard.actor_identity == bob
        assert e.legacy.payload == RewardClaimedEvent(
            reward_id=1, user=bob, amount=40, timestamp=ctx.now
        )


class TestMetadataRoundTrip:
    def test_metadata_mirrors_data(self, emitter, ctx, alice, bob, token):
        """Every metadata value also appears in data or the actor/counterparties."""
        for emission in _emit_all(emitter, ctx, alice, bob, token):
            event = emission.standard
            known = set(event.data) | {event.actor_identity}
            known |= set(v for v in emission.legacy.channel[1:])
            for key, values in event.metadata.items():
                assert len(values) == 1, (event.event_type, key)
                if event.event_type is Topic.REWARDS_CLAIMED and key is K.AMOUNT:
                    assert values[0] == sum(event.data[:2])
                    continue
                if key in (K.TO, K.FROM) and values[0] not in known:
                    # Counterparty that only appears in the typed legacy struct.
                    assert values[0] in (bob, token), (event.event_type, key)
                    continue
                assert values[0] in known, (event.event_type, key)


class TestFailureAtomicity:
    def test_standard_failure_skips_legacy(self, ctx, alice, bob, token, metrics):
        log = InMemoryEventLog(fail_on={ROOT})
        emitter = EventEmitter(log, metrics=metrics)
        with pytest.raises(RuntimeError):
            emitter.transfer(ctx, alice, bob, 1, token)
        assert len(log) == 0
        assert metrics.value(
            "stellara_publish_failures_total", {"event_type": "transfer"}
        ) == 1.0

    def test_legacy_failure_propagates(self, ctx, alice, bob, token):
        log = InMemoryEventLog(fail_on={Topic.TRANSFER})
        emitter = EventEmitter(log)
        with pytest.raises(RuntimeError):
            emitter.transfer(ctx, alice, bob, 1, token)
        assert log.channels() == [(ROOT, Topic.TRANSFER)]

    def test_encoding_error_counted(self, emitter, log, ctx, alice, token, metrics):
        with pytest.raises(EncodingError):
            emitter.trade_executed(ctx, alice, "XLM/USDC", 1, 1, True, 0, token)
        assert len(log) == 0
        assert metrics.value(
            "stellara_encoding_errors_total", {"event_type": "trade"}
        ) == 1.0

    def test_bad_address_rejected(self, emitter, log, ctx, bob, token):
        with pytest.raises(EncodingError):
            emitter.transfer(ctx, "", bob, 1, token)
        assert len(log) == 0

    def test_float_amount_rejected(self, emitter, log, ctx, alice, bob, token):
        with pytest.raises(EncodingError):
            emitter.transfer(ctx, alice, bob, 1.5, token)
        assert len(log) == 0


class TestEmitterConfig:
    def test_published_counters(self, emitter, ctx, alice, bob, token, metrics):
        emitter.transfer(ctx, alice, bob, 1, token)
        emitter.transfer(ctx, alice, bob, 2, token)
        labels = {"channel": "standard", "event_type": "transfer"}
        assert metrics.value("stellara_events_published_total", labels) == 2.0
        labels["channel"] = "legacy"
        assert metrics.value("stellara_events_published_total", labels) == 2.0

    def test_custom_root_topic(self, log, ctx, alice, bob, token):
        emitter = EventEmitter(log, root_topic="dex_event")
        emitter.transfer(ctx, alice, bob, 1, token)
        assert log.records[0].channel == ("dex_event", Topic.TRANSFER)

    def test_invalid_root_topic(self, log):
        with pytest.raises(EncodingError):
            EventEmitter(log, root_topic="not valid")

    def test_emit_standard_only(self, emitter, log, ctx, alice):
        event = emitter.emit_standard(ctx, "oracle_updated", alice, [101], {"price": [101]})
        assert len(log) == 1
        assert event.event_type is Topic.ORACLE_UPDATED

    def test_emit_standard_unknown_topic(self, emitter, log, ctx, alice):
        with pytest.raises(UnknownTopic):
            emitter.emit_standard(ctx, "liquidation", alice, [], {})
        assert len(log) == 0

    def test_works_without_metrics(self, log, ctx, alice, bob, token):
        emission = EventEmitter(log).transfer(ctx, alice, bob, 1, token)
        assert emission.standard.data == (1, token)


# Each entry calls one helper with a single wrongly typed number or flag.
_MISTYPED_CALLS = {
    "transfer_str_amount": lambda em, c, a, b, t: em.transfer(c, a, b, "100", t),
    "approve_bool_amount": lambda em, c, a, b, t: em.approve(c, a, b, True, t),
    "mint_str_amount": lambda em, c, a, b, t: em.mint(c, a, "10", t),
    "burn_float_amount": lambda em, c, a, b, t: em.burn(c, a, 5.0, t),
    "stake_str_lock_period": lambda em, c, a, b, t: em.stake(c, a, 1, "86400", t),
    "unstake_str_fee": lambda em, c, a, b, t: em.unstake(c, a, 1, 2, "3", t),
    "rewards_claimed_str_bonus": lambda em, c, a, b, t: em.rewards_claimed(c, a, 1, "2", t),
    "pool_updated_str_rate": lambda em, c, a, b, t: em.pool_updated(c, a, "15", 2),
    "vote_str_proposal_id": lambda em, c, a, b, t: em.vote(c, a, "7", "yes", 1),
    "vote_bool_voting_power": lambda em, c, a, b, t: em.vote(c, a, 7, "yes", True),
    "proposal_created_str_id": lambda em, c, a, b, t: em.proposal_created(c, a, "7", "T", "p"),
    "proposal_executed_int_success": lambda em, c, a, b, t: em.proposal_executed(c, b, 7, 1),
    "proposal_approved_str_threshold": lambda em, c, a, b, t: em.proposal_approved(c, b, 7, 2, "3"),
    "proposal_rejected_str_id": lambda em, c, a, b, t: em.proposal_rejected(c, b, "8"),
    "proposal_cancelled_str_id": lambda em, c, a, b, t: em.proposal_cancelled(c, a, "9"),
    "upgrade_proposed_str_delay": lambda em, c, a, b, t: em.upgrade_proposed(c, a, 1, "h", t, "d", 3, "3600"),
    "upgrade_executed_str_id": lambda em, c, a, b, t: em.upgrade_executed(c, b, "11", "h"),
    "trade_str_amount": lambda em, c, a, b, t: em.trade_executed(c, a, "XLM", "300", 12, True, 1, t),
    "trade_int_is_buy": lambda em, c, a, b, t: em.trade_executed(c, a, "XLM", 300, 12, 1, 1, t),
    "trade_str_trade_id": lambda em, c, a, b, t: em.trade_executed(c, a, "XLM", 300, 12, True, 1, t, trade_id="4"),
    "fee_collected_str_amount": lambda em, c, a, b, t: em.fee_collected(c, a, b, "1", t),
    "reward_added_str_id": lambda em, c, a, b, t: em.reward_added(c, a, "1", b, 40, "r", "x"),
    "reward_claimed_str_amount": lambda em, c, a, b, t: em.reward_claimed(c, 1, b, "40"),
    "authorization_int_flag": lambda em, c, a, b, t: em.authorization_changed(c, b, 1),
}


class TestStrictArguments:
    @pytest.mark.parametrize("call", list(_MISTYPED_CALLS.values()), ids=list(_MISTYPED_CALLS))
    def test_mistyped_argument_publishes_nothing(self, call, emitter, log, ctx, alice, bob, token):
        with pytest.raises(EncodingError):
            call(emitter, ctx, alice, bob, token)
        assert len(log) == 0

    def test_numeric_text_never_becomes_symbol(self, emitter, log, ctx, alice, bob, token):
        with pytest.raises(EncodingError):
            emitter.transfer(ctx, alice, bob, "100", token)
        assert log.records == []

    def test_trade_values_identical_on_both_channels(self, emitter, ctx, alice, token):
        e = emitter.trade_executed(ctx, alice, "XLM", 300, 12, False, 1, token, trade_id=5)
        legacy = e.legacy.payload
        assert e.standard.data == (
            legacy.pair, legacy.amount, legacy.price, legacy.is_buy,
            legacy.fee_amount, legacy.fee_token,
        )
        assert type(e.standard.data[1]) is int
        assert e.standard.data[3] is False

    def test_emit_standard_bare_string_metadata(self, emitter, log, ctx, alice):
        with pytest.raises(EncodingError):
            emitter.emit_standard(ctx, "oracle_updated", alice, [1], {"pair": "XLM"})
        assert len(log) == 0
