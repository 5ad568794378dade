"""Tests for raising garrisons and assault groups from a country profile."""

from __future__ import annotations

from collections import Counter

import pytest

from warmachine.domain import mobilization
from warmachine.domain.country import CountryState
from warmachine.domain.enums import Country, UnitBranch
from warmachine.domain.profiles import profile_of


def _state(country: Country) -> CountryState:
    return CountryState(country=country, profile=profile_of(country))


def test_garrison_location_uses_the_capital():
    assert mobilization.garrison_location(Country.UKRAINE) == "ukraine-kyiv"
    assert mobilization.garrison_location(Country.USA) == "usa-washington-dc"


def test_garrison_location_without_city_grid():
    assert mobilization.garrison_location(Country.ROMANIA) == "romania-capital"


def test_front_id():
    assert mobilization.front_id(Country.RUSSIA, Country.UKRAINE) == "front-russia-ukraine"


class TestRaiseGarrison:
    """Ukraine: strength (2, 1, 2, 1, 2), production (2, 1, 2, 1, 2), tech (2, 2, 2, 1, 2)."""

    def test_unit_counts_per_branch(self):
        state = _state(Country.UKRAINE)
        raised = mobilization.raise_garrison(state)

        assert len(raised) == 16
        assert state.regular_units == raised
        counts = Counter(unit.branch for unit in raised)
        assert counts == {
            UnitBranch.ARMY: 4,
            UnitBranch.NAVY: 2,
            UnitBranch.AIRFORCE: 4,
            UnitBranch.SPECIAL_FORCES: 2,
            UnitBranch.DRONES: 4,
        }

    def test_units_reflect_profile(self):
        state = _state(Country.UKRAINE)
        army = next(u for u in mobilization.raise_garrison(state) if u.branch == UnitBranch.ARMY)

        assert army.max_strength == army.strength == 70.0
        assert army.equipment == 2
        assert army.city_id == "ukraine-kyiv"
        assert army.attributes.supplies == 60.0
        assert army.attributes.organization == 70.0
        assert army.attributes.training == 64.0

    def test_unit_ids_are_unique(self):
        state = _state(Country.UKRAINE)
        raised = mobilization.raise_garrison(state)
        ids = [unit.id for unit in raised]
        assert len(set(ids)) == len(ids)
        assert ids[0] == "ukraine-regular-army-1"


class TestRaiseAssaultGroup:
    """Russia: strength (4, 3, 4, 3, 4), production (4, 3, 4, 2, 4), tech (3, 3, 3, 2, 3)."""

    def test_units_target_the_enemy(self):
        state = _state(Country.RUSSIA)
        raised = mobilization.raise_assault_group(state, Country.UKRAINE)

        assert len(raised) == 18
        assert state.assault_units_targeting(Country.UKRAINE) == raised
        assert {unit.front_id for unit in raised} == {"front-russia-ukraine"}

    def test_units_reflect_profile(self):
        state = _state(Country.RUSSIA)
        raised = mobilization.raise_assault_group(state, Country.UKRAINE)
        army = next(u for u in raised if u.branch == UnitBranch.ARMY)

        assert army.max_strength == 94.0
        assert army.equipment == 4
        assert army.morale == 76.0
        assert army.momentum == 0.0
        assert army.attributes.supplies == 50.0
        assert army.attributes.organization == 70.0
        assert army.attributes.training == 88.0

    def test_equipment_bonus_is_capped(self):
        # USA tech is 5 across the board
        state = _state(Country.USA)
        raised = mobilization.raise_assault_group(state, Country.MEXICO)
        assert {unit.equipment for unit in raised} == {5}

    @pytest.mark.parametrize("country", [Country.USA, Country.FIJI, Country.LIBYA])
    def test_readiness_stays_in_range(self, country):
        state = _state(country)
        mobilization.raise_garrison(state)
        mobilization.raise_assault_group(state, Country.CHINA)
        for unit in state.all_units():
            for value in (
                unit.attributes.supplies,
                unit.attributes.organization,
                unit.attributes.training,
            ):
                assert 0.0 <= value <= 100.0
