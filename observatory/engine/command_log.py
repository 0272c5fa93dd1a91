"""Bounded scrolling command log."""

import logging
from typing import Sequence

from observatory.models import CommandLogEntry

logger = logging.getLogger(__name__)

COMMAND_LOG_SCRIPT: tuple[CommandLogEntry, ...] = (
    CommandLogEntry(actor="system", message="Boot sequence complete. 0xProtocol control surface online."),
    CommandLogEntry(actor="net", message="Validator handshake confirmed across all six AI operators."),
    CommandLogEntry(actor="metrics", message="Stabilised throughput baseline at 94,000 TPS."),
    CommandLogEntry(actor="scheduler", message="Sequencer rotation seeded from epoch 518."),
    CommandLogEntry(actor="blocks", message="Monitoring finality within a 0.4s window."),
    CommandLogEntry(actor="wallet", message="Wallet shell ready for transfers and faucet claims."),
    CommandLogEntry(actor="explorer", message="Ledger registry indexed and available for queries."),
)


class CommandLog:
    """Display feed fed by a rotating script and by live engine events.

    Only the most recent ``capacity`` lines are kept, oldest first.
    """

    def __init__(
        self,
        script: Sequence[CommandLogEntry] = COMMAND_LOG_SCRIPT,
        capacity: int = 8,
        preload: int = 4,
    ):
        self._script = tuple(script)
        self._capacity = capacity
        self._entries: list[CommandLogEntry] = list(self._script[:preload])[-capacity:]
        self._cursor = preload % len(self._script) if self._script else 0

    @property
    def entries(self) -> list[CommandLogEntry]:
        return list(self._entries)

    def append(self, actor: str, message: str) -> CommandLogEntry:
        """Append a live event, dropping the oldest line on overflow."""
        entry = CommandLogEntry(actor=actor, message=message)
        self._push(entry)
        logger.debug("[%s] %s", actor, message)
        return entry

    def rotate(self) -> CommandLogEntry | None:
        """Append the next scripted line, wrapping around the script."""
        if not self._script:
            return None
        entry = self._script[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._script)
        self._push(entry)
        return entry

    def _push(self, entry: CommandLogEntry) -> None:
        self._entries = [*self._entries, entry][-self._capacity:]
