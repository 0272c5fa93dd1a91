"""In-memory ledger store and wallet balance rules."""

import logging
import math
import re
import uuid
from datetime import datetime
from typing import Callable, Iterable, Optional, Union

from observatory.errors import RejectionReason
from observatory.models import LedgerEntry, TransferOutcome, WalletState
from observatory.sim.random_source import RandomSource
from observatory.utils import format_amount, short_address

logger = logging.getLogger(__name__)

FAUCET_SENDER = "0xProtocol::Faucet"
FAUCET_MEMO = "faucet disbursement"

_AMOUNT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_amount(raw: Union[str, float, int, None]) -> Optional[float]:
    """Parse a user-supplied amount.

    Strings may carry thousands separators ("1,250.5").

    Args:
        raw: Amount as typed by the operator or a number.

    Returns:
        Finite float, or None if the value cannot be parsed.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.replace(",", "").strip()
        if not _AMOUNT_PATTERN.fullmatch(raw):
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


class LedgerStore:
    """Append-only transaction log plus the wallet it debits and credits.

    Entries are kept newest first and are never edited or deleted.
    The wallet balance can never go negative: a transfer that would
    overdraw it is rejected, not clamped.
    """

    def __init__(
        self,
        rng: RandomSource,
        clock: Callable[[], datetime] = datetime.now,
        entries: Optional[Iterable[LedgerEntry]] = None,
    ):
        """Initialize the ledger store.

        Args:
            rng: Random source for content hashes.
            clock: Wall-clock used to timestamp entries.
            entries: Optional initial entries, newest first.
        """
        self._rng = rng
        self._clock = clock
        self._entries: list[LedgerEntry] = list(entries or [])
        self._wallet = WalletState()

    # ==================== Wallet ====================

    @property
    def wallet(self) -> WalletState:
        """Current wallet state."""
        return self._wallet

    def set_wallet(self, address: str, balance: float) -> WalletState:
        """Replace the wallet with a fresh address and balance.

        Args:
            address: New wallet address.
            balance: New balance.

        Returns:
            Updated wallet state.
        """
        self._wallet = WalletState(address=address, balance=balance)
        return self._wallet

    # ==================== Entries ====================

    def entries(self, address: Optional[str] = None) -> list[LedgerEntry]:
        """Get ledger entries, newest first.

        Args:
            address: Optional address; only entries it sent or received are returned.

        Returns:
            List of ledger entries.
        """
        if address is None:
            return list(self._entries)
        return [e for e in self._entries if address in (e.sender, e.recipient)]

    def __len__(self) -> int:
        return len(self._entries)

    def _new_hash(self) -> str:
        return f"0x{self._rng.hex_string(64)}"

    def _append(self, entry: LedgerEntry) -> LedgerEntry:
        self._entries.insert(0, entry)
        return entry

    def record_transfer(
        self,
        recipient: Optional[str],
        amount: Union[str, float, int, None],
        memo: Optional[str] = None,
    ) -> TransferOutcome:
        """Record an outgoing transfer from the wallet.

        Checks run in order and the first failure wins; a rejected
        transfer leaves the balance and the ledger untouched.

        Args:
            recipient: Recipient address.
            amount: Amount to send (string or number).
            memo: Optional memo.

        Returns:
            TransferOutcome with the new entry or a rejection reason.
        """
        wallet = self._wallet
        if not wallet.has_address:
            return _rejected(
                RejectionReason.NO_WALLET,
                "Generate a wallet address before broadcasting a transfer.",
            )

        value = parse_amount(amount)
        if value is None or value <= 0:
            return _rejected(
                RejectionReason.INVALID_AMOUNT,
                "Enter a valid transfer amount greater than zero.",
            )

        if value > wallet.balance:
            return _rejected(
                RejectionReason.INSUFFICIENT_BALANCE,
                "Insufficient balance for this transfer.",
            )

        recipient = (recipient or "").strip()
        if not recipient:
            return _rejected(
                RejectionReason.MISSING_RECIPIENT,
                "Specify a recipient address.",
            )

        entry = LedgerEntry(
            id=f"tx-{uuid.uuid4().hex[:12]}",
            content_hash=self._new_hash(),
            sender=wallet.address,
            recipient=recipient,
            amount=value,
            memo=memo or None,
            status="confirmed",
            timestamp=self._clock(),
            origin="wallet",
        )
        self._wallet = wallet.model_copy(update={"balance": wallet.balance - value})
        self._append(entry)

        logger.info(
            "Transfer %s: %s XLORE to %s", entry.id, format_amount(value), short_address(recipient)
        )
        return TransferOutcome(
            status="ACCEPTED",
            entry=entry,
            message=f"Transfer executed. Hash {short_address(entry.content_hash)} recorded and balance updated.",
        )

    def record_faucet_settlement(self, amount: float) -> LedgerEntry:
        """Credit the wallet with a faucet disbursement.

        The caller guarantees the wallet has an address.

        Args:
            amount: Disbursed amount.

        Returns:
            The recorded ledger entry.
        """
        wallet = self._wallet
        entry = LedgerEntry(
            id=f"tx-{uuid.uuid4().hex[:12]}",
            content_hash=self._new_hash(),
            sender=FAUCET_SENDER,
            recipient=wallet.address,
            amount=amount,
            memo=FAUCET_MEMO,
            status="confirmed",
            timestamp=self._clock(),
            origin="faucet",
        )
        self._wallet = wallet.model_copy(update={"balance": wallet.balance + amount})
        self._append(entry)

        logger.info("Faucet credit %s: %s XLORE", entry.id, format_amount(amount))
        return entry


def _rejected(reason: RejectionReason, message: str) -> TransferOutcome:
    logger.debug("Transfer rejected: %s", reason.value)
    return TransferOutcome(status="REJECTED", reason=reason, message=message)
