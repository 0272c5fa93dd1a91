"""Observatory engine components.

- Scheduler: cooperative timer wheel with a virtual clock
- CommandLog: bounded scrolling log
- FaucetController: single-flight drip workflow
- NetworkStats / MarketStats: derived statistics
- Observatory: the engine facade
"""

from observatory.engine.scheduler import Scheduler, TimerHandle, VirtualClock
from observatory.engine.command_log import COMMAND_LOG_SCRIPT, CommandLog
from observatory.engine.faucet import FaucetController
from observatory.engine.stats import (
    MarketStats,
    NetworkStats,
    compute_market_stats,
    compute_network_stats,
)
from observatory.engine.core import Observatory

__all__ = [
    "Scheduler",
    "TimerHandle",
    "VirtualClock",
    "COMMAND_LOG_SCRIPT",
    "CommandLog",
    "FaucetController",
    "MarketStats",
    "NetworkStats",
    "compute_market_stats",
    "compute_network_stats",
    "Observatory",
]
