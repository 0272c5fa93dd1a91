"""LedgerEntry data model."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field


class LedgerEntry(BaseModel):
    """Represents an immutable ledger transaction."""

    id: str = Field(..., min_length=1, description="Transaction identifier")
    content_hash: str = Field(..., description="Transaction hash")
    sender: str = Field(..., min_length=1, description="Sender address")
    recipient: str = Field(..., min_length=1, description="Recipient address")
    amount: float = Field(..., gt=0, description="Transferred amount")
    memo: Optional[str] = Field(default=None, description="Optional memo")
    status: Literal["confirmed", "pending"] = Field(
        default="confirmed", description="Confirmation status"
    )
    timestamp: datetime = Field(..., description="Transaction timestamp")
    origin: Literal["wallet", "faucet"] = Field(..., description="Where the entry came from")

    model_config = {"frozen": True}
