"""Per-country war aggregate.

A :class:`CountryState` tracks who the country is fighting, in which role,
and the units it has fielded.  Assault units are additionally indexed by the
country they are committed against.

When a war ends its assault group is released.  Survivors stay fielded
without a target and keep taking their per-turn update, so every new war on
a front adds a fresh group on top of them; destroyed units are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from warmachine.domain import units as unit_rules
from warmachine.domain.enums import Country, UnitBranch
from warmachine.domain.models import AssaultUnit, CountryProfile, RegularUnit, Unit
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig


@dataclass(slots=True)
class CountryState:
    country: Country
    profile: CountryProfile
    wars_with: set[Country] = field(default_factory=set)
    attacking: set[Country] = field(default_factory=set)
    defending: set[Country] = field(default_factory=set)
    regular_units: list[RegularUnit] = field(default_factory=list)
    assault_units: list[AssaultUnit] = field(default_factory=list)
    assault_units_by_target: dict[Country, list[AssaultUnit]] = field(default_factory=dict)
    unit_serial: int = 0

    @property
    def is_at_war(self) -> bool:
        return bool(self.wars_with)

    # --- war state ----------------------------------------------------------------

    def declare_war_on(self, other: Country, *, as_aggressor: bool = True) -> None:
        """Enter a war with ``other``; a repeated declaration is ignored."""

        if other in self.wars_with:
            return
        self.wars_with.add(other)
        if as_aggressor:
            self.attacking.add(other)
        else:
            self.defending.add(other)

    def end_war_with(self, other: Country) -> None:
        if other not in self.wars_with:
            return
        self.wars_with.discard(other)
        self.attacking.discard(other)
        self.defending.discard(other)

    def military_power(self) -> float:
        """Composite power score over all five branches."""

        p = self.profile
        return (
            p.budget * 2
            + p.military_strength.average() * 1.5
            + p.industrial_production.average()
            + p.industrial_tech.average() * 0.5
        )

    # --- units --------------------------------------------------------------------

    def next_unit_id(self, kind: str, branch: UnitBranch) -> str:
        self.unit_serial += 1
        return f"{self.country.value}-{kind}-{branch.value}-{self.unit_serial}"

    def add_regular_unit(self, unit: RegularUnit) -> None:
        self.regular_units.append(unit)

    def add_assault_unit_for_target(self, unit: AssaultUnit, target: Country) -> None:
        self.assault_units.append(unit)
        self.assault_units_by_target.setdefault(target, []).append(unit)

    def assault_units_targeting(self, target: Country) -> list[AssaultUnit]:
        """Assault units committed against ``target`` (empty when none)."""

        return list(self.assault_units_by_target.get(target, ()))

    def release_assault_units(self, target: Country) -> list[AssaultUnit]:
        """Stand down the assault units committed against ``target``.

        Surviving units stay in the country's order of battle without a
        target; destroyed ones (strength 0) are removed from it.  Released
        units are returned either way.
        """

        released = self.assault_units_by_target.pop(target, [])
        destroyed = {id(unit) for unit in released if unit.strength <= 0}
        if destroyed:
            self.assault_units = [u for u in self.assault_units if id(u) not in destroyed]
        return released

    def all_units(self) -> list[Unit]:
        return [*self.regular_units, *self.assault_units]

    def total_unit_count(self) -> int:
        return len(self.regular_units) + len(self.assault_units)

    def process_units_turn(self, *, rules: RulesConfig = DEFAULT_RULES) -> None:
        for unit in self.all_units():
            unit_rules.process_turn(unit, rules=rules)
