"""Fixed explorer address book and seed ledger."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from observatory.models import LedgerEntry


class AddressBookEntry(BaseModel):
    """Represents a well-known explorer address."""

    label: str = Field(..., description="Human readable label")
    address: str = Field(..., description="Account address")
    balance: str = Field(..., description="Displayed balance")
    notes: str = Field(default="", description="Free-form notes")

    model_config = {"frozen": True}


TREASURY = "0x7E6fD42017b1105CFdf0f45C11a2dD67a4028C11"
SYNAPSE_VALIDATOR = "0xa90EE72fDc4a8216584B671781976d74C4B9Ab62"
CITIZEN_KEZ = "0x59c4b7E7b119c6908E9A6E106D05b98B193cA3Db"
INCENTIVE_POOL = "0x000000000000000000000000000000000000000F"

ADDRESS_BOOK: tuple[AddressBookEntry, ...] = (
    AddressBookEntry(
        label="treasury://ecosystem",
        address=TREASURY,
        balance="1 024 512.4488 XLORE",
        notes="Ecosystem runway and grant allocations streamed quarterly.",
    ),
    AddressBookEntry(
        label="validator://synapse",
        address=SYNAPSE_VALIDATOR,
        balance="512 128.2234 XLORE",
        notes="Sequencer collateral locked for epoch rotation.",
    ),
    AddressBookEntry(
        label="citizen://kez",
        address=CITIZEN_KEZ,
        balance="42.0420 XLORE",
        notes="Community delegate participating in protocol votes.",
    ),
)


def seed_ledger(now: datetime) -> list[LedgerEntry]:
    """Build the ledger the engine starts with, newest first.

    Args:
        now: Current time; seed entries are back-dated from it.

    Returns:
        Three confirmed treasury, validator and incentive entries.
    """
    entries = [
        LedgerEntry(
            id="tx-3",
            content_hash="0xc27e19fd01b4e9ab1cc08df73102a671ed8fbc201c5a8d7c3b71a9ef005c44a1",
            sender=INCENTIVE_POOL,
            recipient=SYNAPSE_VALIDATOR,
            amount=4800.75,
            memo="validator performance incentive",
            timestamp=now - timedelta(minutes=11),
            origin="faucet",
        ),
        LedgerEntry(
            id="tx-2",
            content_hash="0x5a4d2ef11bcd1771ab2cd9080c1fa5447d92d736ffa190ab6732c1dd8ea45f21",
            sender=SYNAPSE_VALIDATOR,
            recipient=TREASURY,
            amount=32000.0,
            memo="epoch collateral refresh",
            timestamp=now - timedelta(minutes=28),
            origin="wallet",
        ),
        LedgerEntry(
            id="tx-1",
            content_hash="0x8f3fad9bc2ab394f271d3cc61aa58cc0fe19d2c3a1dd8e7fd1b49ab7c2c3b45",
            sender=TREASURY,
            recipient=CITIZEN_KEZ,
            amount=1250.4821,
            memo="community grants disbursement",
            timestamp=now - timedelta(minutes=45),
            origin="wallet",
        ),
    ]
    return entries
