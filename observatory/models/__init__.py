"""Data models for Observatory."""

from observatory.models.block import BlockRecord
from observatory.models.candle import CandleRecord
from observatory.models.command import CommandLogEntry
from observatory.models.faucet import FaucetRecord
from observatory.models.ledger import LedgerEntry
from observatory.models.wallet import WalletState
from observatory.models.outcome import DripOutcome, LinkOutcome, TransferOutcome

__all__ = [
    "BlockRecord",
    "CandleRecord",
    "CommandLogEntry",
    "FaucetRecord",
    "LedgerEntry",
    "WalletState",
    "DripOutcome",
    "LinkOutcome",
    "TransferOutcome",
]
