"""Aggregate network and market statistics.

Everything here is recomputed from the current store contents on
every call; nothing is cached between reads.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from observatory.models import BlockRecord, CandleRecord, LedgerEntry
from observatory.sim.roster import BASE_HEIGHT


class NetworkStats(BaseModel):
    """Network-level summary."""

    latest_height: int = Field(..., description="Height of the newest block")
    avg_latency: float = Field(..., ge=0, description="Mean latency over the block window")
    avg_throughput: float = Field(..., ge=0, description="Mean TPS over the block window")
    total_transactions: int = Field(..., ge=0, description="Ledger entry count")
    total_volume: float = Field(..., ge=0, description="Sum of ledger amounts")
    faucet_count: int = Field(..., ge=0, description="Faucet disbursements processed")

    model_config = {"frozen": True}


class MarketStats(BaseModel):
    """Market-level summary over the candle window."""

    latest: Optional[CandleRecord] = Field(default=None, description="Newest candle")
    previous: Optional[CandleRecord] = Field(default=None, description="Candle before the newest")
    price_delta: float = Field(default=0.0, description="latest.close - previous.close")
    percent_change: float = Field(default=0.0, description="Price delta as a percentage")
    session_delta: float = Field(default=0.0, description="latest.close - first.open")
    session_percent: float = Field(default=0.0, description="Session delta as a percentage")
    buyers_delta: int = Field(default=0, description="Buyers change vs previous candle")
    sellers_delta: int = Field(default=0, description="Sellers change vs previous candle")
    holders_delta: int = Field(default=0, description="Holders change vs previous candle")
    total_volume: float = Field(default=0.0, ge=0, description="Volume summed over the window")

    model_config = {"frozen": True}


def percent_change(delta: float, base: float) -> float:
    """Percentage of ``delta`` relative to ``base``; 0 when base is 0."""
    if base == 0:
        return 0.0
    return delta / base * 100


def compute_network_stats(
    blocks: Sequence[BlockRecord],
    ledger: Sequence[LedgerEntry],
    faucet_count: int,
    base_height: int = BASE_HEIGHT,
) -> NetworkStats:
    """Compute network statistics.

    Args:
        blocks: Block window, newest first.
        ledger: Ledger entries.
        faucet_count: Number of completed faucet disbursements.
        base_height: Height reported when the block window is empty.

    Returns:
        NetworkStats snapshot.
    """
    count = len(blocks) or 1
    return NetworkStats(
        latest_height=blocks[0].height if blocks else base_height,
        avg_latency=sum(b.latency for b in blocks) / count,
        avg_throughput=sum(b.throughput for b in blocks) / count,
        total_transactions=len(ledger),
        total_volume=sum(e.amount for e in ledger),
        faucet_count=faucet_count,
    )


def compute_market_stats(candles: Sequence[CandleRecord]) -> MarketStats:
    """Compute market statistics.

    Args:
        candles: Candle window, oldest first.

    Returns:
        MarketStats snapshot. With fewer than two candles the deltas are 0.
    """
    if not candles:
        return MarketStats()

    latest = candles[-1]
    previous = candles[-2] if len(candles) > 1 else None
    first = candles[0]
    reference = previous or latest

    price_delta = latest.close - reference.close
    session_delta = latest.close - first.open

    return MarketStats(
        latest=latest,
        previous=previous,
        price_delta=price_delta,
        percent_change=percent_change(price_delta, reference.close),
        session_delta=session_delta,
        session_percent=percent_change(session_delta, first.open),
        buyers_delta=latest.buyers - reference.buyers,
        sellers_delta=latest.sellers - reference.sellers,
        holders_delta=latest.holders - reference.holders,
        total_volume=sum(c.volume for c in candles),
    )
