"""FaucetRecord data model."""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field


class FaucetRecord(BaseModel):
    """Represents one faucet disbursement (drip)."""

    id: str = Field(..., min_length=1, description="Drip identifier")
    amount: float = Field(..., gt=0, description="Disbursed amount")
    recipient: str = Field(..., min_length=1, description="Recipient address")
    timestamp: datetime = Field(..., description="Request timestamp")
    status: Literal["pending", "completed"] = Field(
        default="pending", description="Settlement status"
    )

    model_config = {"frozen": True}
