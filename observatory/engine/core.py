"""The Observatory engine: state container, timers, queries and commands."""

import logging
import time
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

from observatory.bridge.base import WalletBridge
from observatory.config import EngineConfig
from observatory.engine.command_log import CommandLog
from observatory.engine.faucet import FaucetController
from observatory.engine.scheduler import Scheduler, TimerHandle
from observatory.engine.stats import (
    MarketStats,
    NetworkStats,
    compute_market_stats,
    compute_network_stats,
)
from observatory.errors import ExternalWalletError
from observatory.ledger.registry import ADDRESS_BOOK, AddressBookEntry, seed_ledger
from observatory.ledger.store import LedgerStore
from observatory.models import (
    BlockRecord,
    CandleRecord,
    CommandLogEntry,
    DripOutcome,
    FaucetRecord,
    LedgerEntry,
    LinkOutcome,
    TransferOutcome,
    WalletState,
)
from observatory.sim.blocks import produce_block, seed_blocks
from observatory.sim.candles import CANDLE_INTERVAL, produce_candle, seed_candles
from observatory.sim.random_source import RandomSource
from observatory.utils import format_amount, short_address

logger = logging.getLogger(__name__)

Clipboard = Callable[[str], None]


class Observatory:
    """Synthetic ledger and market telemetry engine.

    Owns every buffer (blocks, candles, ledger, faucet history, command
    log, wallet). Three independent periodic timers drive command-log
    rotation, block generation and candle generation; wallet and faucet
    state only changes through the command methods. All mutation runs
    on the scheduler's single thread.

    Example:
        >>> engine = Observatory(rng=RandomSource(seed=7))
        >>> engine.start()
        >>> engine.scheduler.advance(60)
        >>> engine.close()
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[RandomSource] = None,
        scheduler: Optional[Scheduler] = None,
        now: Optional[Callable[[], datetime]] = None,
        clipboard: Optional[Clipboard] = None,
    ):
        """Initialize the engine and seed its history.

        Args:
            config: Engine configuration. Defaults to EngineConfig().
            rng: Random source shared by all generators.
            scheduler: Scheduler driving timers. Defaults to a virtual clock.
            now: Wall-clock for record timestamps. On a virtual scheduler
                it defaults to the start time plus elapsed virtual seconds.
            clipboard: Optional callable receiving copied addresses.
        """
        self.config = config or EngineConfig()
        self.rng = rng or RandomSource()
        self.scheduler = scheduler or Scheduler()
        self._now = now or self._default_clock()
        self._clipboard = clipboard

        windows = self.config.windows
        self.command_log = CommandLog(capacity=windows.command_log)
        self.ledger = LedgerStore(
            rng=self.rng,
            clock=self._now,
            entries=seed_ledger(self._now()) if self.config.seed_history else None,
        )
        self.faucet = FaucetController(
            ledger=self.ledger,
            scheduler=self.scheduler,
            rng=self.rng,
            config=self.config.faucet,
            history_size=windows.faucet_history,
            clock=self._now,
            on_event=self.command_log.append,
        )

        self._blocks: list[BlockRecord] = []
        self._candles: list[CandleRecord] = []
        self._height = self.config.market.base_height
        self._candle_seq = 0
        self._external_seeded = False
        self._timers: list[TimerHandle] = []
        self._closed = False

        if self.config.seed_history:
            self._seed()

    def _default_clock(self) -> Callable[[], datetime]:
        if not self.scheduler.is_virtual:
            return datetime.now
        start = datetime.now()
        origin = self.scheduler.time()
        return lambda: start + timedelta(seconds=self.scheduler.time() - origin)

    def _seed(self) -> None:
        now = self._now()
        self._blocks = seed_blocks(
            now, self.rng, count=self.config.windows.blocks, base_height=self._height
        )
        self._candles = seed_candles(
            self.config.windows.candles, now, self.rng, self.config.market.baseline
        )
        self._candle_seq = len(self._candles)

    # ==================== Lifecycle ====================

    def start(self) -> None:
        """Start the three periodic generators."""
        if self._timers:
            return
        if self._closed:
            raise RuntimeError("Engine is closed")
        timers = self.config.timers
        self._timers = [
            self.scheduler.call_every(timers.command_log_period, self.rotate_log),
            self.scheduler.call_every(timers.block_period, self.tick_blocks),
            self.scheduler.call_every(timers.candle_period, self.tick_candles),
        ]
        logger.info("Engine started at height %d", self._height)

    def close(self) -> None:
        """Cancel every timer and the pending faucet settlement."""
        for handle in self._timers:
            handle.cancel()
        self._timers = []
        self.faucet.close()
        self._closed = True
        logger.info("Engine closed")

    @property
    def closed(self) -> bool:
        return self._closed

    def run_for(self, seconds: float, sleep: Callable[[float], None] = time.sleep) -> int:
        """Drive the scheduler for ``seconds`` (virtual or real time)."""
        return self.scheduler.run_for(seconds, sleep=sleep)

    # ==================== Timer callbacks ====================

    def rotate_log(self) -> None:
        """Append the next scripted command-log line."""
        self.command_log.rotate()

    def tick_blocks(self) -> BlockRecord:
        """Produce the next block and push it onto the ring."""
        self._height += 1
        block = produce_block(self._height, self._now(), self.rng)
        self._blocks = [block, *self._blocks][: self.config.windows.blocks]
        self.command_log.append(
            "blocks", f"height {block.height:,} finalised by {block.producer}"
        )
        return block

    def tick_candles(self) -> CandleRecord:
        """Produce the next candle from the newest one and slide the window."""
        previous = self._candles[-1] if self._candles else None
        timestamp = previous.timestamp + CANDLE_INTERVAL if previous else self._now()
        candle = produce_candle(
            previous, timestamp, self._candle_seq, self.rng, self.config.market.baseline
        )
        self._candle_seq += 1
        self._candles = [*self._candles, candle][-self.config.windows.candles:]
        logger.debug("Candle closed at %.4f", candle.close)
        return candle

    # ==================== Queries ====================

    @property
    def blocks(self) -> list[BlockRecord]:
        """Block window, newest first."""
        return list(self._blocks)

    @property
    def candles(self) -> list[CandleRecord]:
        """Candle window, oldest first."""
        return list(self._candles)

    @property
    def height(self) -> int:
        return self._height

    def ledger_entries(self, address: Optional[str] = None) -> list[LedgerEntry]:
        """Ledger entries newest first, optionally filtered by address."""
        return self.ledger.entries(address)

    @property
    def faucet_history(self) -> list[FaucetRecord]:
        return self.faucet.history

    @property
    def log(self) -> list[CommandLogEntry]:
        return self.command_log.entries

    @property
    def wallet(self) -> WalletState:
        return self.ledger.wallet

    @property
    def address_book(self) -> tuple[AddressBookEntry, ...]:
        return ADDRESS_BOOK

    def network_stats(self) -> NetworkStats:
        return compute_network_stats(
            self._blocks,
            self.ledger.entries(),
            self.faucet.completed_count,
            base_height=self.config.market.base_height,
        )

    def market_stats(self) -> MarketStats:
        return compute_market_stats(self._candles)

    # ==================== Commands ====================

    def generate_wallet(self) -> WalletState:
        """Create a fresh wallet address with the seed balance."""
        address = f"0x{self.rng.hex_string(40)}"
        wallet = self.ledger.set_wallet(address, self.config.wallet.seed_balance)
        self.command_log.append("wallet", f"generated wallet {short_address(address)}")
        logger.info("Generated wallet %s", short_address(address))
        return wallet

    def submit_transfer(
        self,
        recipient: Optional[str],
        amount: Union[str, float, int, None],
        memo: Optional[str] = None,
    ) -> TransferOutcome:
        """Send funds from the wallet. Validation failures are returned, never raised."""
        outcome = self.ledger.record_transfer(recipient, amount, memo)
        if outcome.accepted:
            entry = outcome.entry
            self.command_log.append(
                "wallet",
                f"sent {format_amount(entry.amount)} XLORE to {short_address(entry.recipient)}",
            )
        return outcome

    def request_faucet_drip(self) -> DripOutcome:
        """Ask the faucet for a drip to the current wallet."""
        return self.faucet.request_drip()

    def link_external_wallet(self, bridge: WalletBridge) -> LinkOutcome:
        """Adopt the address exposed by an external signing extension.

        The balance is seeded only the first time an external wallet is
        linked. Bridge failures leave the wallet untouched.
        """
        try:
            address = bridge.connect()
        except ExternalWalletError as e:
            logger.warning("External wallet link failed: %s", e)
            return LinkOutcome(status="REJECTED", reason=e.reason, message=str(e))

        if self._external_seeded:
            balance = self.ledger.wallet.balance
        else:
            balance = self.config.wallet.external_seed_balance
            self._external_seeded = True

        self.ledger.set_wallet(address, balance)
        self.command_log.append("wallet", f"linked {bridge.name} wallet {short_address(address)}")
        return LinkOutcome(
            status="LINKED",
            address=address,
            message=f"Linked external wallet {short_address(address)}.",
        )

    def copy_address(self, address: str) -> None:
        """Hand an address to the clipboard. Engine state is unchanged."""
        if self._clipboard is not None:
            try:
                self._clipboard(address)
            except Exception as e:
                logger.warning("Clipboard unavailable: %s", e)
        self.command_log.append("explorer", f"copied address {short_address(address)}")
