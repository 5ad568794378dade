"""Raising units when a country goes to war.

Garrisons are raised once per country and stationed in the capital.  Assault
groups are raised once per front, i.e. per (country, enemy) pair, and are
committed against that enemy.  Unit numbers and quality follow the country
profile: military strength sets how many units each branch fields, industrial
production sets their size and industrial tech their equipment.
"""

from __future__ import annotations

from warmachine.domain.cities import capital_of, city_slug
from warmachine.domain.country import CountryState
from warmachine.domain.enums import Country, UnitBranch, UnitKind
from warmachine.domain.models import AssaultUnit, CountryProfile, RegularUnit, Unit
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig
from warmachine.domain.units import new_assault_unit, new_regular_unit


def garrison_location(country: Country) -> str:
    capital = capital_of(country)
    if capital is None:
        return f"{country.value}-capital"
    return city_slug(country, capital.name)


def front_id(country: Country, enemy: Country) -> str:
    return f"front-{country.value}-{enemy.value}"


def raise_garrison(state: CountryState, *, rules: RulesConfig = DEFAULT_RULES) -> list[RegularUnit]:
    """Create and attach the country's regular units."""

    m = rules.mobilization
    profile = state.profile
    location = garrison_location(state.country)
    raised: list[RegularUnit] = []
    for branch in UnitBranch:
        count = profile.military_strength.for_branch(branch) * m.regular_units_per_strength
        production = profile.industrial_production.for_branch(branch)
        equipment = _bounded_equipment(profile.industrial_tech.for_branch(branch), rules)
        for _ in range(count):
            unit = new_regular_unit(
                unit_id=state.next_unit_id(UnitKind.REGULAR.value, branch),
                country=state.country,
                branch=branch,
                city_id=location,
                max_strength=m.regular_base_strength + production * m.regular_strength_per_production,
                equipment=equipment,
                rules=rules,
            )
            _apply_profile(unit, profile, rules)
            state.add_regular_unit(unit)
            raised.append(unit)
    return raised


def raise_assault_group(
    state: CountryState,
    enemy: Country,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> list[AssaultUnit]:
    """Create assault units committed against ``enemy``."""

    m = rules.mobilization
    profile = state.profile
    front = front_id(state.country, enemy)
    raised: list[AssaultUnit] = []
    for branch in UnitBranch:
        count = profile.military_strength.for_branch(branch) * m.assault_units_per_strength
        production = profile.industrial_production.for_branch(branch)
        equipment = _bounded_equipment(
            profile.industrial_tech.for_branch(branch) + m.assault_equipment_bonus, rules
        )
        for _ in range(count):
            unit = new_assault_unit(
                unit_id=state.next_unit_id(UnitKind.ASSAULT.value, branch),
                country=state.country,
                branch=branch,
                front_id=front,
                max_strength=m.assault_base_strength + production * m.assault_strength_per_production,
                equipment=equipment,
                rules=rules,
            )
            _apply_profile(unit, profile, rules)
            state.add_assault_unit_for_target(unit, enemy)
            raised.append(unit)
    return raised


def _bounded_equipment(value: int, rules: RulesConfig) -> int:
    return max(rules.units.equipment_min, min(rules.units.equipment_max, value))


def _apply_profile(unit: Unit, profile: CountryProfile, rules: RulesConfig) -> None:
    """Set readiness from the country's corruption, standards and budget."""

    m = rules.mobilization
    cap = rules.units.attribute_max
    attrs = unit.attributes
    attrs.supplies = _bounded(
        max(m.supplies_floor, m.supplies_base - profile.corruption * m.supplies_per_corruption), cap
    )
    attrs.organization = _bounded(
        m.organization_base + profile.standards * m.organization_per_standards, cap
    )
    attrs.training = _bounded(m.training_base + profile.budget * m.training_per_budget, cap)
    if isinstance(unit, AssaultUnit):
        unit.morale = _bounded(m.morale_base + profile.standards * m.morale_per_standards, cap)


def _bounded(value: float, cap: float) -> float:
    return max(0.0, min(cap, value))
