"""Continuity-linked OHLCV candle generation.

Each candle opens exactly at the previous candle's close, so the
price path stays continuous across ticks. The very first candle opens
inside a fixed base range instead.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field

from observatory.models import CandleRecord
from observatory.sim.random_source import RandomSource

CANDLE_INTERVAL = timedelta(minutes=5)
PRICE_DECIMALS = 4

DRIFT_RANGE = (0.001, 0.006)
CORRECTION_PROBABILITY = 0.25
CORRECTION_MAX = 0.002
WICK_MAX = 0.003

BUYERS_STEP = (18, 52)
SELLERS_STEP = (-8, 24)
HOLDERS_STEP = (28, 96)
VOLUME_RANGE = (4100, 7200)


class CandleBaseline(BaseModel):
    """Starting point for the first candle of a series."""

    open_low: float = Field(default=12.4, gt=0, description="Lower bound of the opening price")
    open_high: float = Field(default=12.8, gt=0, description="Upper bound of the opening price")
    buyers: int = Field(default=1200, ge=0, description="Initial buyers counter")
    sellers: int = Field(default=620, ge=0, description="Initial sellers counter")
    holders: int = Field(default=8400, ge=0, description="Initial holders counter")
    sellers_floor: int = Field(default=540, ge=0, description="Minimum sellers count")

    model_config = {"frozen": True}


def produce_candle(
    previous: Optional[CandleRecord],
    timestamp: datetime,
    seed: int,
    rng: RandomSource,
    baseline: Optional[CandleBaseline] = None,
) -> CandleRecord:
    """Produce the next candle from the one before it.

    Args:
        previous: Immediately preceding candle, or None for the first one.
        timestamp: Timestamp of the new candle.
        seed: Sequence number of the candle, used as the buyers tiebreak.
        rng: Random source.
        baseline: Starting values used when there is no previous candle.

    Returns:
        Newly generated CandleRecord.
    """
    baseline = baseline or CandleBaseline()

    if previous is None:
        open_price = round(rng.uniform(baseline.open_low, baseline.open_high), PRICE_DECIMALS)
        buyers, sellers, holders = baseline.buyers, baseline.sellers, baseline.holders
    else:
        open_price = previous.close
        buyers, sellers, holders = previous.buyers, previous.sellers, previous.holders

    drift = rng.uniform(*DRIFT_RANGE)
    correction = rng.uniform(0, CORRECTION_MAX) if rng.chance(CORRECTION_PROBABILITY) else 0.0
    close = round(open_price * (1 + drift - correction), PRICE_DECIMALS)

    # Rounding must never pull a wick inside the body
    high = max(
        round(max(open_price, close) + open_price * rng.uniform(0, WICK_MAX), PRICE_DECIMALS),
        open_price,
        close,
    )
    low = min(
        round(min(open_price, close) - open_price * rng.uniform(0, WICK_MAX), PRICE_DECIMALS),
        open_price,
        close,
    )

    buyers += rng.between(*BUYERS_STEP) + seed % 2
    sellers = max(baseline.sellers_floor, sellers + rng.between(*SELLERS_STEP))
    holders += rng.between(*HOLDERS_STEP)
    volume = round(rng.between(*VOLUME_RANGE) + rng.fraction(), PRICE_DECIMALS)

    return CandleRecord(
        timestamp=timestamp,
        open=open_price,
        high=high,
        low=low,
        close=close,
        volume=volume,
        buyers=buyers,
        sellers=sellers,
        holders=holders,
    )


def seed_candles(
    count: int,
    end: datetime,
    rng: RandomSource,
    baseline: Optional[CandleBaseline] = None,
) -> list[CandleRecord]:
    """Seed a chronological window of candles ending at ``end``.

    Each candle is fed forward into the next; nothing is recomputed
    backwards.

    Args:
        count: Number of candles to generate.
        end: Timestamp of the newest candle.
        rng: Random source.
        baseline: Starting values for the first candle.

    Returns:
        Candles oldest first, spaced one interval apart.
    """
    candles: list[CandleRecord] = []
    previous: Optional[CandleRecord] = None
    for index in range(count):
        timestamp = end - CANDLE_INTERVAL * (count - 1 - index)
        previous = produce_candle(previous, timestamp, index, rng, baseline)
        candles.append(previous)
    return candles
