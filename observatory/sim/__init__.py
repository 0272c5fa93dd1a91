"""Synthetic telemetry generators.

This package provides the pure generator functions that fabricate
block telemetry and OHLCV candles:
- RandomSource: injectable random primitives
- produce_block / seed_blocks: block telemetry
- produce_candle / seed_candles: continuity-linked candles
"""

from observatory.sim.random_source import RandomSource
from observatory.sim.roster import (
    BASE_HEIGHT,
    BLOCK_COMMENTARY,
    VALIDATORS,
    Validator,
    validator_ids,
)
from observatory.sim.blocks import produce_block, seed_blocks
from observatory.sim.candles import CandleBaseline, produce_candle, seed_candles

__all__ = [
    "RandomSource",
    "BASE_HEIGHT",
    "BLOCK_COMMENTARY",
    "VALIDATORS",
    "Validator",
    "validator_ids",
    "produce_block",
    "seed_blocks",
    "CandleBaseline",
    "produce_candle",
    "seed_candles",
]
