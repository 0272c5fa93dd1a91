"""Tests for the single-flight faucet workflow.

**Feature: ledger-observatory**
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from observatory.config import FaucetConfig
from observatory.engine.faucet import FaucetController
from observatory.engine.scheduler import Scheduler
from observatory.errors import RejectionReason
from observatory.ledger.store import LedgerStore
from observatory.sim.random_source import RandomSource

WALLET = "0x" + "cd" * 20


def make_faucet(balance: float = 0.0, address: str | None = WALLET, seed: int = 5, events=None):
    ledger = LedgerStore(rng=RandomSource(seed=seed))
    if address is not None:
        ledger.set_wallet(address, balance)
    scheduler = Scheduler()
    faucet = FaucetController(
        ledger=ledger,
        scheduler=scheduler,
        rng=RandomSource(seed=seed + 1),
        config=FaucetConfig(settlement_delay=1.8),
        on_event=(lambda actor, message: events.append((actor, message))) if events is not None else None,
    )
    return ledger, scheduler, faucet


class TestFaucetSettlement:
    """
    **Feature: ledger-observatory, Property: Faucet Settlement**

    A drip on an empty wallet eventually credits it and completes.
    """

    def test_drip_settles_after_delay(self):
        ledger, scheduler, faucet = make_faucet(balance=0.0)

        outcome = faucet.request_drip()

        assert outcome.accepted
        assert outcome.record.status == "pending"
        assert faucet.in_flight
        assert faucet.history[0].status == "pending"
        assert ledger.wallet.balance == 0.0

        scheduler.advance(1.0)
        assert faucet.history[0].status == "pending"

        scheduler.advance(1.0)
        assert ledger.wallet.balance > 0
        assert ledger.wallet.balance == outcome.record.amount
        assert faucet.history[0].status == "completed"
        assert faucet.history[0].id == outcome.record.id
        assert not faucet.in_flight
        assert faucet.completed_count == 1

    @given(seed=st.integers(min_value=0, max_value=10**6))
    @settings(max_examples=50)
    def test_amount_range(self, seed: int):
        _, _, faucet = make_faucet(seed=seed)
        amount = faucet.request_drip().record.amount
        assert 24 <= amount < 97

    def test_ledger_credit_entry(self):
        ledger, scheduler, faucet = make_faucet()
        faucet.request_drip()
        scheduler.advance(2.0)

        entry = ledger.entries()[0]
        assert entry.origin == "faucet"
        assert entry.recipient == WALLET

    def test_event_emitted_on_settlement(self):
        events = []
        _, scheduler, faucet = make_faucet(events=events)
        faucet.request_drip()
        assert events == []

        scheduler.advance(2.0)
        assert len(events) == 1
        assert events[0][0] == "faucet"
        assert "disbursed" in events[0][1]


class TestFaucetSingleFlight:
    """
    **Feature: ledger-observatory, Property: Faucet Single-Flight**

    Requests issued while a drip is pending are ignored, not queued.
    """

    def test_second_request_ignored(self):
        ledger, scheduler, faucet = make_faucet()

        first = faucet.request_drip()
        second = faucet.request_drip()

        assert first.accepted
        assert second.status == "IGNORED"
        assert second.reason == RejectionReason.FAUCET_PENDING

        scheduler.advance(5.0)

        completed = [r for r in faucet.history if r.status == "completed"]
        assert len(completed) == 1
        assert len(faucet.history) == 1
        assert len([e for e in ledger.entries() if e.origin == "faucet"]) == 1
        assert ledger.wallet.balance == first.record.amount

    @given(requests=st.integers(min_value=2, max_value=10))
    @settings(max_examples=20)
    def test_burst_yields_one_drip(self, requests: int):
        ledger, scheduler, faucet = make_faucet()
        outcomes = [faucet.request_drip() for _ in range(requests)]
        scheduler.advance(2.0)

        assert sum(1 for o in outcomes if o.accepted) == 1
        assert faucet.completed_count == 1

    def test_new_drip_allowed_after_settlement(self):
        _, scheduler, faucet = make_faucet()
        faucet.request_drip()
        scheduler.advance(2.0)

        assert faucet.request_drip().accepted


class TestFaucetRejections:
    """Drips need a wallet and a live controller."""

    def test_no_wallet_rejected(self):
        ledger, scheduler, faucet = make_faucet(address=None)
        outcome = faucet.request_drip()

        assert outcome.status == "REJECTED"
        assert outcome.reason == RejectionReason.NO_WALLET
        assert faucet.history == []
        assert scheduler.pending == 0

    def test_close_cancels_settlement(self):
        ledger, scheduler, faucet = make_faucet()
        outcome = faucet.request_drip()
        faucet.close()
        scheduler.advance(10.0)

        assert ledger.wallet.balance == 0.0
        assert faucet.history[0].id == outcome.record.id
        assert faucet.history[0].status == "pending"
        assert faucet.completed_count == 0
        assert faucet.request_drip().status == "IGNORED"


class TestFaucetHistoryWindow:
    """Only the five most recent drips are kept, newest first."""

    def test_history_bounded(self):
        _, scheduler, faucet = make_faucet()
        ids = []
        for _ in range(7):
            ids.append(faucet.request_drip().record.id)
            scheduler.advance(2.0)

        assert [r.id for r in faucet.history] == list(reversed(ids))[:5]
        assert faucet.completed_count == 7
