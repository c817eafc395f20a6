"""A player's local game state and the commands and events that change it."""

from __future__ import annotations

import dataclasses
import re
import threading
from enum import IntEnum
from typing import Iterable

from .gamedata import (
    ArmyMove,
    Player,
    RecognitionOfWar,
    Unit,
    UnitRank,
    all_locations,
    all_ranks,
)
from .routing import PlayingState

_SEPARATOR = "------------------------"
_INTEGER = re.compile(r"[+-]?[0-9]+")

_POWER = {
    UnitRank.ARTILLERY: 10,
    UnitRank.CAVALRY: 5,
    UnitRank.INFANTRY: 1,
}


class GameCommandError(Exception):
    """Raised when a player command cannot be carried out."""


class MoveOutcome(IntEnum):
    SAME_PLAYER = 0
    SAFE = 1
    MAKE_WAR = 2


class WarOutcome(IntEnum):
    NOT_INVOLVED = 0
    NO_UNITS = 1
    YOU_WON = 2
    OPPONENT_WON = 3
    DRAW = 4


def overlapping_location(first: Player, second: Player) -> str | None:
    """Return a location where both players have units, or None."""
    for mine in first.units.values():
        for theirs in second.units.values():
            if mine.location == theirs.location:
                return mine.location
    return None


def units_to_power_level(units: Iterable[Unit]) -> int:
    """Sum the fighting power of the given units."""
    return sum(_POWER.get(unit.rank, 0) for unit in units)


class GameState:
    """Thread-safe state of the local player."""

    def __init__(self, username: str) -> None:
        self.player = Player(username=username, units={})
        self._paused = False
        self._lock = threading.Lock()

    def pause_game(self) -> None:
        with self._lock:
            self._paused = True

    def resume_game(self) -> None:
        with self._lock:
            self._paused = False

    def is_paused(self) -> bool:
        with self._lock:
            return self._paused

    def add_unit(self, unit: Unit) -> None:
        with self._lock:
            self.player.units[unit.id] = unit

    def update_unit(self, unit: Unit) -> None:
        with self._lock:
            self.player.units[unit.id] = unit

    def remove_units_in_location(self, location: str) -> None:
        with self._lock:
            self.player.units = {
                key: unit
                for key, unit in self.player.units.items()
                if unit.location != location
            }

    @property
    def username(self) -> str:
        return self.player.username

    def units_snapshot(self) -> list[Unit]:
        with self._lock:
            return list(self.player.units.values())

    def get_unit(self, unit_id: int) -> Unit | None:
        with self._lock:
            return self.player.units.get(unit_id)

    def player_snapshot(self) -> Player:
        with self._lock:
            return Player(username=self.player.username, units=dict(self.player.units))

    def command_status(self) -> None:
        """Print whether the game is paused and, if not, the player's units."""
        if self.is_paused():
            print("The game is paused.")
            return
        print("The game is not paused.")
        player = self.player_snapshot()
        print(f"You are {player.username}, and you have {len(player.units)} units.")
        for unit in player.units.values():
            print(f"* {unit.id}: {unit.location}, {unit.rank}")

    def handle_move(self, move: ArmyMove) -> MoveOutcome:
        """React to another player's move."""
        try:
            player = self.player_snapshot()
            print()
            print("==== Move Detected ====")
            print(
                f"{move.player.username} is moving {len(move.units)} unit(s) "
                f"to {move.to_location}"
            )
            for unit in move.units:
                print(f"* {unit.rank}")

            if player.username == move.player.username:
                return MoveOutcome.SAME_PLAYER

            location = overlapping_location(player, move.player)
            if location is not None:
                print(
                    f"You have units in {location}! "
                    f"You are at war with {move.player.username}!"
                )
                return MoveOutcome.MAKE_WAR
            print(f"You are safe from {move.player.username}'s units.")
            return MoveOutcome.SAFE
        finally:
            print(_SEPARATOR)

    def command_move(self, words: list[str]) -> ArmyMove:
        """Move units: ``move <location> <unitID> <unitID>...``."""
        if self.is_paused():
            raise GameCommandError("the game is paused, you can not move units")
        if len(words) < 3:
            raise GameCommandError("usage: move <location> <unitID> <unitID> <unitID> etc")
        new_location = words[1]
        if new_location not in all_locations():
            raise GameCommandError(f"error: {new_location} is not a valid location")

        unit_ids = []
        for word in words[2:]:
            if not _INTEGER.fullmatch(word):
                raise GameCommandError(f"error: {word} is not a valid unit ID")
            unit_ids.append(int(word))

        moved = []
        for unit_id in unit_ids:
            unit = self.get_unit(unit_id)
            if unit is None:
                raise GameCommandError(f"error: unit with ID {unit_id} not found")
            unit = dataclasses.replace(unit, location=new_location)
            self.update_unit(unit)
            moved.append(unit)

        move = ArmyMove(
            player=self.player_snapshot(), units=moved, to_location=new_location
        )
        print(f"Moved {len(move.units)} units to {move.to_location}")
        return move

    def handle_pause(self, playing_state: PlayingState) -> None:
        """Apply a pause or resume broadcast."""
        try:
            print()
            if playing_state.is_paused:
                print("==== Pause Detected ====")
                self.pause_game()
            else:
                print("==== Resume Detected ====")
                self.resume_game()
        finally:
            print(_SEPARATOR)

    def command_spawn(self, words: list[str]) -> Unit:
        """Spawn a unit: ``spawn <location> <rank>``."""
        if len(words) < 3:
            raise GameCommandError("usage: spawn <location> <rank>")
        location = words[1]
        if location not in all_locations():
            raise GameCommandError(f"error: {location} is not a valid location")
        rank_name = words[2]
        rank = next((r for r in all_ranks() if r.value == rank_name), None)
        if rank is None:
            raise GameCommandError(f"error: {rank_name} is not a valid unit")

        unit = Unit(id=len(self.units_snapshot()) + 1, rank=rank, location=location)
        self.add_unit(unit)
        print(f"Spawned a(n) {rank_name} in {location} with id {unit.id}")
        return unit

    def handle_war(self, recognition: RecognitionOfWar) -> tuple[WarOutcome, str, str]:
        """Fight a declared war; return the outcome, the winner and the loser."""
        try:
            attacker, defender = recognition.attacker, recognition.defender
            print()
            print("==== War Declared ====")
            print(f"{attacker.username} has declared war on {defender.username}!")

            player = self.player_snapshot()
            if player.username == defender.username:
                print(f"{player.username}, you published the war.")
                return WarOutcome.NOT_INVOLVED, "", ""
            if player.username != attacker.username:
                print(f"{player.username}, you are not involved in this war.")
                return WarOutcome.NOT_INVOLVED, "", ""

            location = overlapping_location(attacker, defender)
            if location is None:
                print("Error! No units are in the same location. No war will be fought.")
                return WarOutcome.NO_UNITS, "", ""

            attacker_units = [u for u in attacker.units.values() if u.location == location]
            defender_units = [u for u in defender.units.values() if u.location == location]

            print(f"{attacker.username}'s units:")
            for unit in attacker_units:
                print(f"  * {unit.rank}")
            print(f"{defender.username}'s units:")
            for unit in defender_units:
                print(f"  * {unit.rank}")

            attacker_power = units_to_power_level(attacker_units)
            defender_power = units_to_power_level(defender_units)
            print(f"Attacker has a power level of {attacker_power}")
            print(f"Defender has a power level of {defender_power}")

            if attacker_power > defender_power:
                print(f"{attacker.username} has won the war!")
                if player.username == defender.username:
                    self._lose(location)
                    return WarOutcome.OPPONENT_WON, attacker.username, defender.username
                return WarOutcome.YOU_WON, attacker.username, defender.username
            if defender_power > attacker_power:
                print(f"{defender.username} has won the war!")
                if player.username == attacker.username:
                    self._lose(location)
                    return WarOutcome.OPPONENT_WON, defender.username, attacker.username
                return WarOutcome.YOU_WON, defender.username, attacker.username

            print("The war ended in a draw!")
            print(f"Your units in {location} have been killed.")
            self.remove_units_in_location(location)
            return WarOutcome.DRAW, attacker.username, defender.username
        finally:
            print(_SEPARATOR)

    def _lose(self, location: str) -> None:
        print("You have lost the war!")
        self.remove_units_in_location(location)
        print(f"Your units in {location} have been killed.")