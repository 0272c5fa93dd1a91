"""Command outcome data models."""

from typing import Literal, Optional
from pydantic import BaseModel, Field

from observatory.errors import RejectionReason
from observatory.models.faucet import FaucetRecord
from observatory.models.ledger import LedgerEntry


class TransferOutcome(BaseModel):
    """Represents the result of a wallet transfer command."""

    status: Literal["ACCEPTED", "REJECTED"] = Field(..., description="Outcome status")
    entry: Optional[LedgerEntry] = Field(default=None, description="Recorded ledger entry")
    reason: Optional[RejectionReason] = Field(default=None, description="Rejection reason")
    message: str = Field(default="", description="User-facing feedback")

    model_config = {"frozen": True}

    @property
    def accepted(self) -> bool:
        return self.status == "ACCEPTED"


class DripOutcome(BaseModel):
    """Represents the result of a faucet drip request."""

    status: Literal["ACCEPTED", "REJECTED", "IGNORED"] = Field(..., description="Outcome status")
    record: Optional[FaucetRecord] = Field(default=None, description="Pending faucet record")
    reason: Optional[RejectionReason] = Field(default=None, description="Rejection reason")
    message: str = Field(default="", description="User-facing feedback")

    model_config = {"frozen": True}

    @property
    def accepted(self) -> bool:
        return self.status == "ACCEPTED"


class LinkOutcome(BaseModel):
    """Represents the result of linking an external signing wallet."""

    status: Literal["LINKED", "REJECTED"] = Field(..., description="Outcome status")
    address: Optional[str] = Field(default=None, description="Linked address")
    reason: Optional[RejectionReason] = Field(default=None, description="Rejection reason")
    message: str = Field(default="", description="User-facing feedback")

    model_config = {"frozen": True}

    @property
    def linked(self) -> bool:
        return self.status == "LINKED"
