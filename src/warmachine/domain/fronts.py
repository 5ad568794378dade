"""Read-only views of the live fronts for map rendering."""

from __future__ import annotations

from dataclasses import dataclass

from warmachine.domain.border_cities import border_cities_for_direction
from warmachine.domain.cities import find_city
from warmachine.domain.enums import BorderDirection, Country
from warmachine.domain.geometry import Point, attacker_position, city_position
from warmachine.domain.neighbors import facing_direction
from warmachine.domain.world import World


@dataclass(frozen=True, slots=True)
class AttackInfo:
    attacker: Country
    defender: Country
    direction: BorderDirection | None
    assault_units: int


@dataclass(frozen=True, slots=True)
class AttackLine:
    """Segment from the attacker block to one defending border city."""

    start: Point
    city_id: str
    city_name: str
    end: Point | None


def incoming_attacks(world: World, defender: Country) -> list[AttackInfo]:
    """Aggressors with assault units committed against ``defender``."""

    state = world.country(defender)
    attacks: list[AttackInfo] = []
    for attacker in sorted(state.defending):
        if attacker not in world.countries:
            continue
        committed = world.country(attacker).assault_units_targeting(defender)
        if not committed:
            continue
        attacks.append(
            AttackInfo(
                attacker=attacker,
                defender=defender,
                direction=facing_direction(attacker, defender),
                assault_units=len(committed),
            )
        )
    return attacks


def attack_lines(attack: AttackInfo) -> list[AttackLine]:
    """Pair the attacker block with every border city on the attacked side.

    ``end`` is ``None`` for a border city missing from the city grid.
    """

    if attack.direction is None:
        return []
    start = attacker_position(attack.direction)
    lines: list[AttackLine] = []
    for entry in border_cities_for_direction(attack.defender, attack.direction):
        city = find_city(attack.defender, entry.city_name)
        end = city_position(city.x, city.y) if city is not None else None
        lines.append(AttackLine(start, entry.city_id, entry.city_name, end))
    return lines
