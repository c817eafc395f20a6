"""Core game data: ranks, units, players and the messages about them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class UnitRank(str, Enum):
    INFANTRY = "infantry"
    CAVALRY = "cavalry"
    ARTILLERY = "artillery"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Unit:
    id: int
    rank: UnitRank
    location: str


@dataclass
class Player:
    username: str
    units: dict[int, Unit] = field(default_factory=dict)


@dataclass
class ArmyMove:
    player: Player
    units: list[Unit]
    to_location: str


@dataclass
class RecognitionOfWar:
    attacker: Player
    defender: Player


_LOCATIONS = frozenset(
    {"americas", "europe", "africa", "asia", "australia", "antarctica"}
)


def all_ranks() -> frozenset[UnitRank]:
    """Return every valid unit rank."""
    return frozenset(UnitRank)


def all_locations() -> frozenset[str]:
    """Return every valid location name."""
    return _LOCATIONS