"""Block telemetry generation."""

from datetime import datetime, timedelta

from observatory.models import BlockRecord
from observatory.sim.random_source import RandomSource
from observatory.sim.roster import BASE_HEIGHT, BLOCK_COMMENTARY, VALIDATORS

THROUGHPUT_RANGE = (88000, 112000)
LATENCY_MS_RANGE = (320, 460)
TX_COUNT_RANGE = (1800, 2600)
HASH_LENGTH = 64

# Spacing between seeded blocks
SEED_SPACING = timedelta(seconds=5.2)


def produce_block(height: int, timestamp: datetime, rng: RandomSource) -> BlockRecord:
    """Produce one block telemetry record.

    Every field is drawn independently and uniformly from its fixed
    range. The caller is responsible for passing previous height + 1
    and for maintaining the bounded ring.

    Args:
        height: Height of the new block.
        timestamp: Block timestamp.
        rng: Random source.

    Returns:
        Newly generated BlockRecord.
    """
    producer = rng.pick(VALIDATORS).id
    latency = rng.between(*LATENCY_MS_RANGE) / 1000
    throughput = rng.between(*THROUGHPUT_RANGE)
    transaction_count = rng.between(*TX_COUNT_RANGE)

    return BlockRecord(
        height=height,
        producer=producer,
        throughput=throughput,
        latency=latency,
        transaction_count=transaction_count,
        content_hash=f"0x{rng.hex_string(HASH_LENGTH)}",
        commentary=rng.pick(BLOCK_COMMENTARY),
        timestamp=timestamp,
    )


def seed_blocks(
    now: datetime,
    rng: RandomSource,
    count: int = 6,
    base_height: int = BASE_HEIGHT,
) -> list[BlockRecord]:
    """Build the initial block ring, newest first.

    Args:
        now: Timestamp of the newest block.
        rng: Random source.
        count: Number of blocks to seed.
        base_height: Height of the newest block.

    Returns:
        Blocks at heights base_height, base_height - 1, ... (newest first).
    """
    return [
        produce_block(base_height - index, now - SEED_SPACING * index, rng)
        for index in range(count)
    ]
