"""The campaign world: every country aggregate plus the war registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from warmachine.config import Settings, get_settings
from warmachine.domain import validation
from warmachine.domain.country import CountryState
from warmachine.domain.enums import Country
from warmachine.domain.models import CountryProfile
from warmachine.domain.profiles import STARTING_PROFILES
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig
from warmachine.domain.wars import WarRegistry, initialize_wars

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class World:
    countries: dict[Country, CountryState]
    wars: WarRegistry = field(default_factory=WarRegistry)
    turn: int = 0
    seed: str = "war-machine"

    def country(self, country: Country) -> CountryState:
        try:
            return self.countries[country]
        except KeyError:
            raise KeyError(f"Unknown country: {country}") from None

    def all_countries(self) -> list[CountryState]:
        return list(self.countries.values())

    def advance_turn(self) -> int:
        self.turn += 1
        return self.turn


def build_world(
    *,
    profiles: Mapping[Country, CountryProfile] = STARTING_PROFILES,
    settings: Settings | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> World:
    """Create a world from country profiles.

    Static geography is validated first when enabled, and expansionist
    countries open their wars last, once every aggregate exists.
    """

    settings = settings or get_settings()
    if settings.validate_static_data:
        validation.validate_static_data()

    world = World(
        countries={
            country: CountryState(country=country, profile=profile)
            for country, profile in profiles.items()
        },
        seed=settings.world_seed,
    )
    if settings.initialize_wars:
        initialize_wars(world, rules=rules)

    logger.info(
        "World built: %d countries, %d active wars (seed %r)",
        len(world.countries),
        len(world.wars.active_wars()),
        world.seed,
    )
    return world
