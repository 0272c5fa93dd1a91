"""BlockRecord data model."""

from datetime import datetime
from pydantic import BaseModel, Field


class BlockRecord(BaseModel):
    """Represents one fabricated block telemetry sample."""

    height: int = Field(..., ge=0, description="Block height")
    producer: str = Field(..., min_length=1, description="Validator agent that produced the block")
    throughput: int = Field(..., ge=0, description="Transactions per second")
    latency: float = Field(..., ge=0, description="Finality latency in seconds")
    transaction_count: int = Field(..., ge=0, description="Transactions in the block")
    content_hash: str = Field(..., pattern=r"^0x[0-9a-f]{64}$", description="Block hash")
    commentary: str = Field(..., description="Validator commentary line")
    timestamp: datetime = Field(..., description="Block timestamp")

    model_config = {"frozen": True}
