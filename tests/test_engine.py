"""Property-based tests for the Observatory engine facade.

**Feature: ledger-observatory**
"""

from datetime import datetime

from hypothesis import given, settings
from hypothesis import strategies as st

from observatory.bridge import StaticBridge
from observatory.config import EngineConfig
from observatory.engine.core import Observatory
from observatory.errors import RejectionReason
from observatory.sim import BASE_HEIGHT, RandomSource

NOW = datetime(2025, 6, 1, 12, 0, 0)


class TestSeededState:
    """A fresh engine starts with seeded history."""

    def test_initial_buffers(self, engine: Observatory):
        assert [b.height for b in engine.blocks] == [BASE_HEIGHT - i for i in range(6)]
        assert len(engine.candles) == 24
        assert len(engine.ledger_entries()) == 3
        assert [e.actor for e in engine.log] == ["system", "net", "metrics", "scheduler"]
        assert engine.wallet.address is None
        assert engine.wallet.balance == 0
        assert engine.faucet_history == []
        assert len(engine.address_book) == 3

    def test_same_seed_same_history(self):
        a = Observatory(rng=RandomSource(seed=3), now=lambda: NOW)
        b = Observatory(rng=RandomSource(seed=3), now=lambda: NOW)

        assert a.blocks == b.blocks
        assert a.candles == b.candles


class TestPeriodicGeneration:
    """
    **Feature: ledger-observatory, Property: Independent Timers**

    Blocks, candles and the command log advance on their own periods.
    """

    def test_one_minute_of_ticks(self, engine: Observatory):
        first_candle = engine.candles[0]
        engine.start()
        engine.scheduler.advance(60)

        # blocks every 5.8s, candles every 5.0s, log rotation every 6.2s
        assert engine.height == BASE_HEIGHT + 10
        assert engine.blocks[0].height == BASE_HEIGHT + 10
        assert len(engine.blocks) == 6
        assert len(engine.candles) == 24
        assert engine.candles[0] != first_candle
        assert len(engine.log) == 8

    def test_start_is_idempotent(self, engine: Observatory):
        engine.start()
        engine.start()
        engine.scheduler.advance(6)

        assert engine.height == BASE_HEIGHT + 1

    def test_block_events_reach_log(self, engine: Observatory):
        engine.tick_blocks()

        last = engine.log[-1]
        assert last.actor == "blocks"
        assert f"{BASE_HEIGHT + 1:,}" in last.message

    def test_close_stops_all_timers(self, engine: Observatory):
        engine.start()
        engine.scheduler.advance(12)
        height, candles, log = engine.height, engine.candles, engine.log

        engine.close()
        engine.scheduler.advance(120)

        assert engine.closed
        assert engine.height == height
        assert engine.candles == candles
        assert engine.log == log


class TestBlockWindow:
    """
    **Feature: ledger-observatory, Property: Block Ring**

    *For any* number of ticks N from height H, the newest height is H+N
    and the ring never holds more than six blocks.
    """

    @given(ticks=st.integers(min_value=0, max_value=40), seed=st.integers(min_value=0, max_value=10**6))
    @settings(max_examples=50)
    def test_height_and_bound(self, ticks: int, seed: int):
        engine = Observatory(rng=RandomSource(seed=seed), now=lambda: NOW)
        start = engine.blocks[0].height

        for _ in range(ticks):
            engine.tick_blocks()
            assert len(engine.blocks) <= 6

        heights = [b.height for b in engine.blocks]
        assert max(heights) == start + ticks
        assert heights == sorted(heights, reverse=True)
        assert all(a - b == 1 for a, b in zip(heights, heights[1:]))


class TestCandleWindow:
    """
    **Feature: ledger-observatory, Property: Candle Window**

    After generating 30 candles into an empty engine exactly 24 remain,
    chronological, newest last, still continuous.
    """

    def test_thirty_into_empty(self, empty_engine: Observatory):
        assert empty_engine.candles == []

        generated = [empty_engine.tick_candles() for _ in range(30)]
        candles = empty_engine.candles

        assert len(candles) == 24
        assert candles == generated[-24:]
        assert candles[-1] == generated[-1]
        assert all(a.timestamp < b.timestamp for a, b in zip(candles, candles[1:]))
        assert all(b.open == a.close for a, b in zip(candles, candles[1:]))

    def test_tick_continues_seeded_series(self, engine: Observatory):
        last = engine.candles[-1]
        new = engine.tick_candles()

        assert new.open == last.close
        assert new.timestamp > last.timestamp


class TestWalletCommands:
    """Wallet generation and transfers through the command surface."""

    def test_generate_wallet(self, engine: Observatory):
        wallet = engine.generate_wallet()

        assert wallet.address.startswith("0x") and len(wallet.address) == 42
        assert wallet.balance == 512.5
        assert engine.log[-1].actor == "wallet"

    def test_transfer_success(self, engine: Observatory):
        engine.generate_wallet()
        engine.ledger.set_wallet(engine.wallet.address, 100.0)
        before = len(engine.ledger_entries())

        outcome = engine.submit_transfer("0xABC", 40, "memo")

        assert outcome.accepted
        assert engine.wallet.balance == 60.0
        assert len(engine.ledger_entries()) == before + 1
        first = engine.ledger_entries()[0]
        assert first.amount == 40
        assert first.origin == "wallet"
        assert first.status == "confirmed"
        assert "sent" in engine.log[-1].message

    def test_transfer_overdraft(self, engine: Observatory):
        wallet = engine.generate_wallet()
        before = engine.ledger_entries()

        outcome = engine.submit_transfer("0xABC", wallet.balance + 1, "")

        assert outcome.reason == RejectionReason.INSUFFICIENT_BALANCE
        assert engine.wallet.balance == wallet.balance
        assert engine.ledger_entries() == before

    def test_transfer_without_wallet(self, engine: Observatory):
        outcome = engine.submit_transfer("0xABC", 1, "")
        assert outcome.reason == RejectionReason.NO_WALLET

    def test_ledger_filtered_by_wallet(self, engine: Observatory):
        wallet = engine.generate_wallet()
        engine.submit_transfer("0xABC", 1, "")

        mine = engine.ledger_entries(wallet.address)
        assert len(mine) == 1
        assert len(engine.ledger_entries()) == 4


class TestFaucetCommands:
    """Faucet drips through the command surface."""

    def test_two_requests_one_drip(self, engine: Observatory):
        engine.generate_wallet()
        first = engine.request_faucet_drip()
        second = engine.request_faucet_drip()
        engine.scheduler.advance(2.0)

        assert first.accepted
        assert second.status == "IGNORED"
        assert [r.status for r in engine.faucet_history] == ["completed"]
        assert engine.wallet.balance == 512.5 + first.record.amount
        assert engine.network_stats().faucet_count == 1
        assert engine.network_stats().total_transactions == 4
        assert engine.log[-1].actor == "faucet"

    def test_drip_without_wallet(self, engine: Observatory):
        outcome = engine.request_faucet_drip()
        assert outcome.reason == RejectionReason.NO_WALLET

    def test_close_before_settlement(self, engine: Observatory):
        engine.generate_wallet()
        engine.request_faucet_drip()
        engine.close()
        engine.scheduler.advance(10.0)

        assert engine.wallet.balance == 512.5
        assert engine.faucet_history[0].status == "pending"


class TestExternalWallet:
    """Linking an external signing extension."""

    def test_link_seeds_balance_once(self, engine: Observatory):
        outcome = engine.link_external_wallet(StaticBridge("0xEXTERNAL"))

        assert outcome.linked
        assert engine.wallet.address == "0xEXTERNAL"
        assert engine.wallet.balance == 512.5

        engine.submit_transfer("0xABC", 12.5, "")
        engine.link_external_wallet(StaticBridge("0xSECOND"))

        assert engine.wallet.address == "0xSECOND"
        assert engine.wallet.balance == 500.0

    def test_unavailable_extension(self, engine: Observatory):
        engine.generate_wallet()
        before = engine.wallet

        outcome = engine.link_external_wallet(StaticBridge(None))

        assert not outcome.linked
        assert outcome.reason == RejectionReason.EXTERNAL_WALLET_UNAVAILABLE
        assert engine.wallet == before

    def test_rejected_extension(self, engine: Observatory):
        outcome = engine.link_external_wallet(StaticBridge("0xEXTERNAL", approve=False))

        assert outcome.reason == RejectionReason.EXTERNAL_WALLET_REJECTED
        assert engine.wallet.address is None


class TestCopyAddress:
    """Copying an address never changes engine state."""

    def test_clipboard_receives_address(self):
        copied = []
        engine = Observatory(rng=RandomSource(seed=1), clipboard=copied.append)
        ledger = engine.ledger_entries()

        engine.copy_address("0x7E6fD42017b1105CFdf0f45C11a2dD67a4028C11")

        assert copied == ["0x7E6fD42017b1105CFdf0f45C11a2dD67a4028C11"]
        assert engine.ledger_entries() == ledger
        assert engine.log[-1].actor == "explorer"

    def test_clipboard_failure_is_not_fatal(self):
        def broken(_: str) -> None:
            raise OSError("no display")

        engine = Observatory(rng=RandomSource(seed=1), clipboard=broken)
        engine.copy_address("0xABCDEF")

        assert engine.log[-1].message == "copied address 0xABCDEF"


class TestStatsFromEngine:
    """Statistics are recomputed from current contents on every read."""

    def test_stats_track_changes(self, engine: Observatory):
        before = engine.network_stats()
        engine.tick_blocks()
        after = engine.network_stats()

        assert after.latest_height == before.latest_height + 1
        assert engine.market_stats().latest == engine.candles[-1]

    def test_empty_engine_stats(self, empty_engine: Observatory):
        network = empty_engine.network_stats()
        market = empty_engine.market_stats()

        assert network.latest_height == EngineConfig().market.base_height
        assert network.total_transactions == 0
        assert market.latest is None
