"""Routing keys, exchange names and the messages exchanged between players."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

ARMY_MOVES_PREFIX = "army_moves"
WAR_RECOGNITIONS_PREFIX = "war"
PAUSE_KEY = "pause"
GAME_LOG_SLUG = "game_logs"

EXCHANGE_PERIL_DIRECT = "peril_direct"
EXCHANGE_PERIL_TOPIC = "peril_topic"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIME_PATTERN = re.compile(r"(.{19})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})")


def _format_time(moment: datetime) -> str:
    """Format as RFC 3339 with trailing zeros of the fraction trimmed."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.replace(microsecond=0).isoformat()
    base, offset = text[:19], text[19:]
    if moment.microsecond:
        base += "." + f"{moment.microsecond:06d}".rstrip("0")
    return base + ("Z" if not moment.utcoffset() else offset)


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, keeping at most microsecond precision."""
    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    base, fraction, zone = match.groups()
    fraction = (fraction or "")[:6].ljust(6, "0")
    zone = "+00:00" if zone == "Z" else zone
    return datetime.fromisoformat(f"{base}.{fraction}{zone}")


@dataclass(frozen=True)
class PlayingState:
    """Whether the game is currently paused."""

    is_paused: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"IsPaused": self.is_paused}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayingState:
        return cls(is_paused=bool(data.get("IsPaused", False)))


@dataclass(frozen=True)
class GameLog:
    """A single log line sent by a player."""

    current_time: datetime
    message: str
    username: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "CurrentTime": _format_time(self.current_time),
            "Message": self.message,
            "Username": self.username,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameLog:
        raw_time = data.get("CurrentTime")
        return cls(
            current_time=_ZERO_TIME if raw_time is None else _parse_time(raw_time),
            message=data.get("Message", ""),
            username=data.get("Username", ""),
        )