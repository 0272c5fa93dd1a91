"""CandleRecord (OHLCV) data model."""

from datetime import datetime
from pydantic import BaseModel, Field


class CandleRecord(BaseModel):
    """Represents a single five-minute OHLCV candle with participant counters."""

    timestamp: datetime = Field(..., description="Candle timestamp")
    open: float = Field(..., gt=0, description="Opening price")
    high: float = Field(..., gt=0, description="High price")
    low: float = Field(..., gt=0, description="Low price")
    close: float = Field(..., gt=0, description="Closing price")
    volume: float = Field(..., ge=0, description="Traded volume")
    buyers: int = Field(..., ge=0, description="Distinct buyers")
    sellers: int = Field(..., ge=0, description="Distinct sellers")
    holders: int = Field(..., ge=0, description="Token holders")

    model_config = {"frozen": True}
