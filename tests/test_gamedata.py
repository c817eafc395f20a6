import dataclasses

import pytest

from peril.gamedata import (
    ArmyMove,
    Player,
    RecognitionOfWar,
    Unit,
    UnitRank,
    all_locations,
    all_ranks,
)


def test_all_ranks_are_the_three_source_ranks():
    assert {rank.value for rank in all_ranks()} == {"infantry", "cavalry", "artillery"}


def test_all_locations_matches_source():
    assert all_locations() == {
        "americas",
        "europe",
        "africa",
        "asia",
        "australia",
        "antarctica",
    }


def test_rank_lookup_by_value():
    assert UnitRank("cavalry") is UnitRank.CAVALRY
    assert str(UnitRank.ARTILLERY) == "artillery"
    assert f"{UnitRank.INFANTRY}" == "infantry"


def test_unknown_rank_is_rejected():
    with pytest.raises(ValueError):
        UnitRank("general")


def test_unit_is_immutable():
    unit = Unit(1, UnitRank.INFANTRY, "asia")
    with pytest.raises(dataclasses.FrozenInstanceError):
        unit.location = "europe"  # type: ignore[misc]
    moved = dataclasses.replace(unit, location="europe")
    assert moved.location == "europe"
    assert unit.location == "asia"


def test_players_get_independent_unit_maps():
    first = Player("alice")
    second = Player("bob")
    first.units[1] = Unit(1, UnitRank.CAVALRY, "africa")
    assert second.units == {}
    assert first.units[1].rank is UnitRank.CAVALRY


def test_move_and_war_hold_their_parts():
    attacker = Player("alice", {1: Unit(1, UnitRank.ARTILLERY, "asia")})
    defender = Player("bob")
    move = ArmyMove(player=attacker, units=list(attacker.units.values()), to_location="asia")
    war = RecognitionOfWar(attacker=attacker, defender=defender)
    assert move.units == [Unit(1, UnitRank.ARTILLERY, "asia")]
    assert war.attacker.username == "alice"
    assert war.defender.username == "bob"