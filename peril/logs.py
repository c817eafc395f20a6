"""Persisting game logs to disk."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from .routing import GameLog

LOGS_FILE = "game.log"
WRITE_TO_DISK_SLEEP = 1.0

_logger = logging.getLogger(__name__)


def write_log(
    game_log: GameLog,
    path: str | Path = LOGS_FILE,
    delay: float = WRITE_TO_DISK_SLEEP,
) -> None:
    """Append a game log line to ``path`` after a simulated slow write.

    Raises OSError when the file cannot be opened or written.
    """
    _logger.info("received game log...")
    time.sleep(delay)

    moment = game_log.current_time
    if moment.tzinfo is None:
        moment = moment.astimezone()
    stamp = moment.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    line = f"{stamp} {game_log.username}: {game_log.message}\n"

    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as err:
        raise OSError(f"could not open logs file: {err}") from err
    with handle:
        try:
            handle.write(line)
        except OSError as err:
            raise OSError(f"could not write to logs file: {err}") from err