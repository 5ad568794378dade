"""War records, declaration and the opening wars of a campaign."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from warmachine.domain import mobilization
from warmachine.domain.enums import (
    BorderDirection,
    Country,
    PoliticalStance,
    UnitBranch,
    WarConclusion,
    WarStatus,
)
from warmachine.domain.models import CountryProfile
from warmachine.domain.neighbors import facing_direction, neighbors_of
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig
from warmachine.utils.rng import generate_seed, random_choice

if TYPE_CHECKING:
    from warmachine.domain.world import World

logger = logging.getLogger(__name__)

TARGETING_BRANCHES: tuple[UnitBranch, ...] = (
    UnitBranch.ARMY,
    UnitBranch.NAVY,
    UnitBranch.AIRFORCE,
)


@dataclass(slots=True)
class War:
    aggressor: Country
    defender: Country
    start_turn: int
    frontier: BorderDirection | None = None
    status: WarStatus = WarStatus.ACTIVE
    conclusion: WarConclusion | None = None
    end_turn: int | None = None
    captured_cities: list[str] = field(default_factory=list)
    last_capture_turn: int | None = None
    rounds_fought: int = 0

    @property
    def active(self) -> bool:
        return self.status == WarStatus.ACTIVE

    def involves(self, country: Country) -> bool:
        return country in (self.aggressor, self.defender)

    def opponent_of(self, country: Country) -> Country:
        if country == self.aggressor:
            return self.defender
        if country == self.defender:
            return self.aggressor
        raise ValueError(f"{country.value} is not a party to this war")


@dataclass(slots=True)
class WarRegistry:
    """Every war of the campaign plus mobilization bookkeeping."""

    wars: list[War] = field(default_factory=list)
    garrisoned: set[Country] = field(default_factory=set)
    raised_fronts: set[tuple[Country, Country]] = field(default_factory=set)

    def declare_war(
        self,
        world: World,
        aggressor: Country,
        defender: Country,
        *,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> War:
        """Start a war and mobilize both sides."""

        if aggressor == defender:
            raise ValueError(f"{aggressor.value} cannot declare war on itself")
        if self.find_active(aggressor, defender) or self.find_active(defender, aggressor):
            raise ValueError(f"{aggressor.value} and {defender.value} are already at war")
        # both lookups raise before anything is recorded
        aggressor_state = world.country(aggressor)
        defender_state = world.country(defender)

        war = War(
            aggressor=aggressor,
            defender=defender,
            start_turn=world.turn,
            frontier=facing_direction(aggressor, defender),
        )
        self.wars.append(war)

        # war status first so mobilization sees both sides as belligerents
        aggressor_state.declare_war_on(defender, as_aggressor=True)
        defender_state.declare_war_on(aggressor, as_aggressor=False)
        self._mobilize(world, aggressor, defender, rules)
        self._mobilize(world, defender, aggressor, rules)

        logger.info(
            "WAR: %s declares war on %s (turn %d, frontier %s)",
            aggressor.value,
            defender.value,
            world.turn,
            war.frontier.value if war.frontier else "unknown",
        )
        return war

    def end_war(self, world: World, war: War, conclusion: WarConclusion) -> None:
        if not war.active:
            return
        war.status = WarStatus.CONCLUDED
        war.conclusion = conclusion
        war.end_turn = world.turn

        for side in (war.aggressor, war.defender):
            state = world.country(side)
            enemy = war.opponent_of(side)
            state.end_war_with(enemy)
            state.release_assault_units(enemy)
            # a later war on the same front raises a fresh assault group
            self.raised_fronts.discard((side, enemy))

        logger.info(
            "War between %s and %s concluded on turn %d: %s",
            war.aggressor.value,
            war.defender.value,
            world.turn,
            conclusion.value,
        )

    def _mobilize(self, world: World, side: Country, enemy: Country, rules: RulesConfig) -> None:
        state = world.country(side)
        garrison = []
        if side not in self.garrisoned:
            garrison = mobilization.raise_garrison(state, rules=rules)
            self.garrisoned.add(side)
        assault = []
        if (side, enemy) not in self.raised_fronts:
            assault = mobilization.raise_assault_group(state, enemy, rules=rules)
            self.raised_fronts.add((side, enemy))
        logger.info(
            "%s mobilized %d regular and %d assault units against %s",
            side.value,
            len(garrison),
            len(assault),
            enemy.value,
        )

    def find_active(self, aggressor: Country, defender: Country) -> War | None:
        for war in self.wars:
            if war.active and war.aggressor == aggressor and war.defender == defender:
                return war
        return None

    def is_at_war(self, country: Country) -> bool:
        return any(war.active and war.involves(country) for war in self.wars)

    def wars_for_country(self, country: Country) -> list[War]:
        return [war for war in self.wars if war.active and war.involves(country)]

    def active_wars(self) -> list[War]:
        return [war for war in self.wars if war.active]

    def all_wars(self) -> list[War]:
        return list(self.wars)


def targeting_power(profile: CountryProfile) -> float:
    """Power estimate an aggressor uses to size up its neighbours."""

    return (
        profile.budget * 2
        + profile.industrial_production.average(TARGETING_BRANCHES)
        + profile.industrial_tech.average(TARGETING_BRANCHES)
    )


def find_weaker_neighbor(world: World, aggressor: Country) -> Country | None:
    """Pick a random neighbour weaker than ``aggressor`` that is not already at war."""

    power = targeting_power(world.country(aggressor).profile)
    candidates = [
        neighbor
        for neighbor in neighbors_of(aggressor)
        if neighbor in world.countries
        and not world.wars.is_at_war(neighbor)
        and targeting_power(world.country(neighbor).profile) < power
    ]
    if not candidates:
        return None
    seed = generate_seed(world.seed, world.turn, f"initial_war:{aggressor.value}")
    return random_choice(seed, candidates)["choice"]


def initialize_wars(world: World, *, rules: RulesConfig = DEFAULT_RULES) -> list[War]:
    """Let every expansionist country open a war against a weaker neighbour."""

    declared: list[War] = []
    for country, state in world.countries.items():
        if state.profile.political_stance != PoliticalStance.EXPANSIONIST:
            continue
        if world.wars.is_at_war(country):
            continue
        target = find_weaker_neighbor(world, country)
        if target is None:
            logger.info("%s found no weaker neighbour to attack", country.value)
            continue
        declared.append(world.wars.declare_war(world, country, target, rules=rules))
    return declared
