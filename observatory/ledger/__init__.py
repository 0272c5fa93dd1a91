"""Ledger storage for Observatory."""

from observatory.ledger.store import FAUCET_SENDER, LedgerStore, parse_amount

__all__ = ["FAUCET_SENDER", "LedgerStore", "parse_amount"]
