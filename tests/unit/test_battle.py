"""Unit tests for phased battle rounds and war conclusion."""

from __future__ import annotations

import pytest

from warmachine.domain import battle, units
from warmachine.domain.country import CountryState
from warmachine.domain.enums import BattleWinner, BorderDirection, Country, UnitBranch, WarConclusion
from warmachine.domain.models import UnitAttributes
from warmachine.domain.profiles import profile_of
from warmachine.domain.wars import War
from warmachine.domain.world import World

UKRAINE_EAST = ["ukraine-kharkiv", "ukraine-sumy", "ukraine-luhansk", "ukraine-donetsk"]


def _world() -> World:
    return World(
        countries={
            c: CountryState(country=c, profile=profile_of(c))
            for c in (Country.RUSSIA, Country.UKRAINE, Country.POLAND)
        },
        seed="test",
    )


def _war(world: World, aggressor=Country.RUSSIA, defender=Country.UKRAINE, frontier=BorderDirection.EAST) -> War:
    war = War(aggressor=aggressor, defender=defender, start_turn=world.turn, frontier=frontier)
    world.wars.wars.append(war)
    world.country(aggressor).declare_war_on(defender)
    world.country(defender).declare_war_on(aggressor, as_aggressor=False)
    return war


def _attacker(world: World, aggressor: Country, defender: Country, *, strength: float = 100.0, morale: float = 80.0):
    state = world.country(aggressor)
    unit = units.new_assault_unit(
        unit_id=state.next_unit_id("assault", UnitBranch.ARMY),
        country=aggressor,
        branch=UnitBranch.ARMY,
        front_id=f"front-{aggressor.value}-{defender.value}",
        max_strength=100,
        equipment=3,
        morale=morale,
    )
    unit.strength = strength
    state.add_assault_unit_for_target(unit, defender)
    return unit


def _garrison(world: World, country: Country, *, strength: float = 100.0):
    state = world.country(country)
    unit = units.new_regular_unit(
        unit_id=state.next_unit_id("regular", UnitBranch.ARMY),
        country=country,
        branch=UnitBranch.ARMY,
        city_id=f"{country.value}-capital",
        max_strength=100,
        equipment=3,
        attributes=UnitAttributes(),
    )
    unit.strength = strength
    state.add_regular_unit(unit)
    return unit


_EVEN = battle.BattleOptions(fixed_rolls={(Country.RUSSIA, Country.UKRAINE): (7, 7)})


def test_roll_modifier():
    assert battle.roll_modifier(7) == 1.0
    assert battle.roll_modifier(12) == pytest.approx(1.25)
    assert battle.roll_modifier(2) == pytest.approx(0.75)


def test_unit_power():
    unit = units.new_assault_unit(
        unit_id="russia-assault-army-1",
        country=Country.RUSSIA,
        branch=UnitBranch.ARMY,
        front_id="front-russia-ukraine",
        max_strength=100,
        equipment=3,
    )
    expected = 100 * units.combat_effectiveness(unit) / 100 * units.attack_bonus(unit)
    assert battle.unit_power(unit) == pytest.approx(expected)


class TestPlanRound:
    """Planning reads the armies and computes the outcome without mutating them."""

    def test_no_attackers_means_no_round(self):
        world = _world()
        war = _war(world)
        _garrison(world, Country.UKRAINE)
        _attacker(world, Country.RUSSIA, Country.UKRAINE, strength=0.0)
        assert battle.plan_round(world, war) is None

    def test_undefended_country_loses_a_frontier_city(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)

        planned = battle.plan_round(world, war, options=_EVEN)

        assert planned.ratio == 1.0
        assert planned.winner == BattleWinner.AGGRESSOR
        assert planned.attacker_damage == 0.0
        assert planned.defender_damage == 10.0
        assert planned.captured_city == "ukraine-kharkiv"

    def test_planning_does_not_mutate(self):
        world = _world()
        war = _war(world)
        attacker = _attacker(world, Country.RUSSIA, Country.UKRAINE)
        defender = _garrison(world, Country.UKRAINE)

        planned = battle.plan_round(world, war, options=_EVEN)

        assert attacker.strength == defender.strength == 100.0
        assert war.captured_cities == []
        assert war.rounds_fought == 0
        assert planned.ratio == pytest.approx(
            planned.attack_power / (planned.attack_power + planned.defense_power)
        )
        assert planned.attacker_damage + planned.defender_damage == pytest.approx(10.0)

    def test_defender_counts_garrison_and_counter_attack(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        garrison = _garrison(world, Country.UKRAINE)
        counter = _attacker(world, Country.UKRAINE, Country.RUSSIA)
        _attacker(world, Country.UKRAINE, Country.POLAND)

        planned = battle.plan_round(world, war, options=_EVEN)

        assert planned.defenders == [garrison, counter]
        expected = battle.unit_power(garrison) + battle.unit_power(counter)
        assert planned.defense_power == pytest.approx(expected)

    def test_rolls_scale_each_side(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE)

        even = battle.plan_round(world, war, options=_EVEN)
        lucky = battle.plan_round(
            world,
            war,
            options=battle.BattleOptions(fixed_rolls={(Country.RUSSIA, Country.UKRAINE): (12, 2)}),
        )

        assert lucky.aggressor_roll == 12 and lucky.defender_roll == 2
        assert lucky.attack_power == pytest.approx(even.attack_power * 1.25)
        assert lucky.defense_power == pytest.approx(even.defense_power * 0.75)

    def test_seeded_rolls_are_reproducible(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE)

        first = battle.plan_round(world, war)
        second = battle.plan_round(world, war)

        assert (first.aggressor_roll, first.defender_roll) == (second.aggressor_roll, second.defender_roll)
        assert 2 <= first.aggressor_roll <= 12

    def test_strong_garrison_holds(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE, strength=5.0)
        for _ in range(4):
            _garrison(world, Country.UKRAINE)

        planned = battle.plan_round(world, war, options=_EVEN)

        assert planned.winner == BattleWinner.DEFENDER
        assert planned.captured_city is None

    def test_no_capture_without_frontier(self):
        world = _world()
        war = _war(world, frontier=None)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)

        planned = battle.plan_round(world, war, options=_EVEN)

        assert planned.ratio == 1.0
        assert planned.captured_city is None
        assert planned.notes == ["no uncaptured frontier city left"]


class TestApplyRound:
    """Applying a plan commits casualties, morale swings and captures."""

    def test_aggressor_victory(self):
        world = _world()
        world.turn = 4
        war = _war(world)
        attacker = _attacker(world, Country.RUSSIA, Country.UKRAINE)

        planned = battle.plan_round(world, war, options=_EVEN)
        battle.apply_round(world, war, planned)

        assert attacker.strength == 100.0
        assert attacker.momentum == 10.0
        assert attacker.morale == 85.0
        assert war.captured_cities == ["ukraine-kharkiv"]
        assert war.last_capture_turn == 4
        assert war.rounds_fought == 1

        battle.apply_round(world, war, battle.plan_round(world, war, options=_EVEN))
        assert war.captured_cities == ["ukraine-kharkiv", "ukraine-sumy"]

    def test_defender_victory(self):
        world = _world()
        war = _war(world)
        attacker = _attacker(world, Country.RUSSIA, Country.UKRAINE, strength=5.0)
        garrisons = [_garrison(world, Country.UKRAINE) for _ in range(4)]

        planned = battle.plan_round(world, war, options=_EVEN)
        battle.apply_round(world, war, planned)

        assert attacker.morale == 70.0
        assert attacker.strength == pytest.approx(max(0.0, 5.0 - planned.attacker_damage))
        for unit in garrisons:
            assert unit.strength == pytest.approx(100.0 - planned.defender_damage)
        assert war.captured_cities == []


class TestEvaluateConclusion:
    """Termination checks run in a fixed order."""

    def test_war_goes_on(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE)
        assert battle.evaluate_conclusion(world, war, turn=3) is None

    def test_capitulation(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE, strength=19.0)
        assert battle.evaluate_conclusion(world, war, turn=1) == WarConclusion.CAPITULATION

    def test_capitulation_checked_before_collapsed_frontier(self):
        world = _world()
        war = _war(world)
        war.captured_cities = list(UKRAINE_EAST)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE, strength=10.0)
        assert battle.evaluate_conclusion(world, war, turn=1) == WarConclusion.CAPITULATION

    def test_frontier_collapsed(self):
        world = _world()
        war = _war(world)
        war.captured_cities = list(UKRAINE_EAST)
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE)
        assert battle.evaluate_conclusion(world, war, turn=1) == WarConclusion.FRONTIER_COLLAPSED

    def test_attack_repelled_when_attackers_destroyed(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE, strength=0.0)
        _garrison(world, Country.UKRAINE)
        assert battle.evaluate_conclusion(world, war, turn=1) == WarConclusion.ATTACK_REPELLED

    def test_attack_repelled_when_morale_breaks(self):
        world = _world()
        war = _war(world)
        _attacker(world, Country.RUSSIA, Country.UKRAINE, morale=5.0)
        _attacker(world, Country.RUSSIA, Country.UKRAINE, morale=12.0)
        _garrison(world, Country.UKRAINE)
        assert battle.evaluate_conclusion(world, war, turn=1) == WarConclusion.ATTACK_REPELLED

    @pytest.mark.parametrize(
        ("last_capture", "turn", "expected"),
        [
            (None, 11, None),
            (None, 12, WarConclusion.NEGOTIATED_PEACE),
            (5, 16, None),
            (5, 17, WarConclusion.NEGOTIATED_PEACE),
        ],
    )
    def test_negotiated_peace_after_stalemate(self, last_capture, turn, expected):
        world = _world()
        war = _war(world)
        war.last_capture_turn = last_capture
        _attacker(world, Country.RUSSIA, Country.UKRAINE)
        _garrison(world, Country.UKRAINE)
        assert battle.evaluate_conclusion(world, war, turn=turn) == expected
