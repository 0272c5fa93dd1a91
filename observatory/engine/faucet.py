"""Single-flight faucet disbursement workflow."""

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional

from observatory.config import FaucetConfig
from observatory.engine.scheduler import Scheduler, TimerHandle
from observatory.errors import RejectionReason
from observatory.ledger.store import LedgerStore
from observatory.models import DripOutcome, FaucetRecord
from observatory.sim.random_source import RandomSource
from observatory.utils import format_amount, short_address

logger = logging.getLogger(__name__)

EventSink = Callable[[str, str], None]


class FaucetController:
    """Accepts drip requests and settles them after a fixed delay.

    At most one drip is in flight at a time. Requests that arrive while
    one is pending are ignored, not queued. Settlement runs as a
    cancellable scheduler timer; once the controller is closed the
    deferred settlement never fires.
    """

    def __init__(
        self,
        ledger: LedgerStore,
        scheduler: Scheduler,
        rng: RandomSource,
        config: Optional[FaucetConfig] = None,
        history_size: int = 5,
        clock: Callable[[], datetime] = datetime.now,
        on_event: Optional[EventSink] = None,
    ):
        """Initialize the faucet controller.

        Args:
            ledger: Ledger store that receives settlements.
            scheduler: Scheduler for the deferred settlement.
            rng: Random source for drip amounts.
            config: Faucet amount range and settlement delay.
            history_size: Number of drips kept in history.
            clock: Wall-clock used to timestamp drips.
            on_event: Optional callback receiving (actor, message) events.
        """
        self._ledger = ledger
        self._scheduler = scheduler
        self._rng = rng
        self._config = config or FaucetConfig()
        self._history_size = history_size
        self._clock = clock
        self._on_event = on_event

        self._history: list[FaucetRecord] = []
        self._in_flight = False
        self._settlement: Optional[TimerHandle] = None
        self._completed = 0
        self._closed = False

    @property
    def history(self) -> list[FaucetRecord]:
        """Recent drips, newest first."""
        return list(self._history)

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def completed_count(self) -> int:
        """Drips settled since the controller was created."""
        return self._completed

    def request_drip(self) -> DripOutcome:
        """Request a faucet disbursement to the current wallet.

        Returns:
            DripOutcome: ACCEPTED with the pending record, REJECTED when
            there is no wallet, IGNORED while another drip is in flight.
        """
        wallet = self._ledger.wallet
        if not wallet.has_address:
            return DripOutcome(
                status="REJECTED",
                reason=RejectionReason.NO_WALLET,
                message="Generate a wallet before requesting faucet liquidity.",
            )

        if self._closed:
            return DripOutcome(status="IGNORED", message="Faucet is shut down.")

        if self._in_flight:
            logger.debug("Drip request ignored: settlement already pending")
            return DripOutcome(status="IGNORED", reason=RejectionReason.FAUCET_PENDING)

        amount = self._rng.between(self._config.min_amount, self._config.max_amount) + self._rng.fraction()
        record = FaucetRecord(
            id=f"drip-{uuid.uuid4().hex[:12]}",
            amount=amount,
            recipient=wallet.address,
            timestamp=self._clock(),
            status="pending",
        )
        self._in_flight = True
        self._history = [record, *self._history][: self._history_size]
        self._settlement = self._scheduler.call_later(
            self._config.settlement_delay, self._settle, record.id
        )

        logger.info("Drip %s accepted: %s XLORE", record.id, format_amount(amount))
        return DripOutcome(
            status="ACCEPTED",
            record=record,
            message=f"Faucet request accepted. {format_amount(amount)} XLORE settling.",
        )

    def _settle(self, record_id: str) -> None:
        """Complete the pending drip and credit the wallet."""
        self._settlement = None
        record = next((r for r in self._history if r.id == record_id), None)
        if record is None:
            self._in_flight = False
            return

        completed = record.model_copy(update={"status": "completed"})
        self._history = [completed if r.id == record_id else r for r in self._history]
        self._ledger.record_faucet_settlement(completed.amount)
        self._completed += 1
        self._in_flight = False

        logger.info("Drip %s settled", record_id)
        if self._on_event is not None:
            self._on_event(
                "faucet",
                f"disbursed {format_amount(completed.amount)} XLORE to {short_address(completed.recipient)}",
            )

    def close(self) -> None:
        """Cancel any pending settlement. The pending record stays pending."""
        if self._settlement is not None:
            self._settlement.cancel()
            self._settlement = None
        self._closed = True
