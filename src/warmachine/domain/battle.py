"""Battle round resolution and war termination rules.

A round is fought once per turn for every active war and is phased: every
round of the turn is planned from the same snapshot of unit state before any
of them is applied, so the order in which wars are visited never changes the
outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from warmachine.domain import units as unit_rules
from warmachine.domain.border_cities import border_cities_for_direction
from warmachine.domain.enums import BattleWinner, Country, WarConclusion
from warmachine.domain.models import AssaultUnit, Unit
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig
from warmachine.utils.rng import generate_seed, roll_dice

if TYPE_CHECKING:
    from warmachine.domain.wars import War
    from warmachine.domain.world import World

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleOptions:
    """Configuration for resolving battle rounds."""

    # (aggressor, defender) -> (aggressor roll, defender roll)
    fixed_rolls: dict[tuple[Country, Country], tuple[int, int]] | None = None


@dataclass(slots=True)
class BattleRound:
    """Planned outcome of one round between an aggressor and a defender."""

    aggressor: Country
    defender: Country
    attackers: list[AssaultUnit]
    defenders: list[Unit]
    attack_power: float
    defense_power: float
    aggressor_roll: int
    defender_roll: int
    ratio: float
    winner: BattleWinner
    attacker_damage: float
    defender_damage: float
    captured_city: str | None = None
    notes: list[str] = field(default_factory=list)


def unit_power(unit: Unit, *, rules: RulesConfig = DEFAULT_RULES) -> float:
    """Strength weighted by effectiveness and the unit's combat bonus."""

    effectiveness = unit_rules.combat_effectiveness(unit, rules=rules)
    return unit.strength * effectiveness / 100 * unit_rules.combat_bonus(unit, rules=rules)


def roll_modifier(roll: int, *, rules: RulesConfig = DEFAULT_RULES) -> float:
    b = rules.battle
    return 1 + (roll - b.roll_pivot) * b.roll_swing


def plan_round(
    world: World,
    war: War,
    *,
    rules: RulesConfig = DEFAULT_RULES,
    options: BattleOptions | None = None,
) -> BattleRound | None:
    """Read both sides and compute the round without touching any unit.

    Returns ``None`` when the aggressor has no live assault units committed
    against the defender.
    """

    options = options or BattleOptions()
    b = rules.battle
    aggressor = world.country(war.aggressor)
    defender = world.country(war.defender)

    attackers = [u for u in aggressor.assault_units_targeting(war.defender) if u.strength > 0]
    if not attackers:
        return None
    defenders: list[Unit] = [u for u in defender.regular_units if u.strength > 0]
    defenders.extend(
        u for u in defender.assault_units_targeting(war.aggressor) if u.strength > 0
    )

    aggressor_roll, defender_roll = _rolls_for(world, war, options, rules)
    attack_power = sum(unit_power(u, rules=rules) for u in attackers)
    defense_power = sum(unit_power(u, rules=rules) for u in defenders)
    attack_power *= roll_modifier(aggressor_roll, rules=rules)
    defense_power *= roll_modifier(defender_roll, rules=rules)

    total = attack_power + defense_power
    ratio = attack_power / total if total > 0 else 0.5

    if ratio > 0.5 + b.win_margin:
        winner = BattleWinner.AGGRESSOR
    elif ratio < 0.5 - b.win_margin:
        winner = BattleWinner.DEFENDER
    else:
        winner = BattleWinner.DRAW

    battle_round = BattleRound(
        aggressor=war.aggressor,
        defender=war.defender,
        attackers=attackers,
        defenders=defenders,
        attack_power=attack_power,
        defense_power=defense_power,
        aggressor_roll=aggressor_roll,
        defender_roll=defender_roll,
        ratio=ratio,
        winner=winner,
        attacker_damage=b.damage_per_round * (1 - ratio),
        defender_damage=b.damage_per_round * ratio,
    )

    if ratio >= b.capture_ratio:
        battle_round.captured_city = _next_frontier_city(war)
        if battle_round.captured_city is None:
            battle_round.notes.append("no uncaptured frontier city left")
    return battle_round


def apply_round(
    world: World,
    war: War,
    battle_round: BattleRound,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> None:
    """Commit a planned round: casualties, morale swings and captures."""

    for unit in battle_round.attackers:
        unit_rules.take_damage(unit, battle_round.attacker_damage, rules=rules)
    for unit in battle_round.defenders:
        unit_rules.take_damage(unit, battle_round.defender_damage, rules=rules)

    defending_assault = [u for u in battle_round.defenders if isinstance(u, AssaultUnit)]
    if battle_round.winner == BattleWinner.AGGRESSOR:
        winners, losers = battle_round.attackers, defending_assault
    elif battle_round.winner == BattleWinner.DEFENDER:
        winners, losers = defending_assault, battle_round.attackers
    else:
        winners, losers = [], []
    for unit in winners:
        unit_rules.add_victory_momentum(unit, rules=rules)
    for unit in losers:
        unit_rules.suffer_defeat(unit, rules=rules)

    war.rounds_fought += 1
    if battle_round.captured_city is not None:
        war.captured_cities.append(battle_round.captured_city)
        war.last_capture_turn = world.turn
        logger.info(
            "%s captured %s from %s",
            war.aggressor.value,
            battle_round.captured_city,
            war.defender.value,
        )

    logger.debug(
        "Round %s vs %s: ratio %.3f, winner %s",
        war.aggressor.value,
        war.defender.value,
        battle_round.ratio,
        battle_round.winner.value,
    )


def evaluate_conclusion(
    world: World,
    war: War,
    *,
    turn: int,
    rules: RulesConfig = DEFAULT_RULES,
) -> WarConclusion | None:
    """Return how ``war`` ends this turn, or ``None`` while it goes on."""

    b = rules.battle
    defender = world.country(war.defender)
    aggressor = world.country(war.aggressor)

    garrison_max = sum(u.max_strength for u in defender.regular_units)
    garrison_strength = sum(u.strength for u in defender.regular_units)
    if garrison_max > 0 and garrison_strength < garrison_max * b.capitulation_strength_ratio:
        return WarConclusion.CAPITULATION

    frontier = _frontier_city_ids(war)
    if frontier and all(city_id in war.captured_cities for city_id in frontier):
        return WarConclusion.FRONTIER_COLLAPSED

    attackers = [u for u in aggressor.assault_units_targeting(war.defender) if u.strength > 0]
    if not attackers:
        return WarConclusion.ATTACK_REPELLED
    mean_morale = sum(u.morale for u in attackers) / len(attackers)
    if mean_morale < b.exhaustion_morale:
        return WarConclusion.ATTACK_REPELLED

    since = war.last_capture_turn if war.last_capture_turn is not None else war.start_turn
    if turn - since >= b.stalemate_turns:
        return WarConclusion.NEGOTIATED_PEACE
    return None


def _rolls_for(
    world: World, war: War, options: BattleOptions, rules: RulesConfig
) -> tuple[int, int]:
    key = (war.aggressor, war.defender)
    if options.fixed_rolls and key in options.fixed_rolls:
        return options.fixed_rolls[key]
    context = f"battle:{war.aggressor.value}:{war.defender.value}"
    notation = rules.battle.roll_notation
    aggressor_roll = roll_dice(generate_seed(world.seed, world.turn, f"{context}:aggressor"), notation)
    defender_roll = roll_dice(generate_seed(world.seed, world.turn, f"{context}:defender"), notation)
    return aggressor_roll["total"], defender_roll["total"]


def _frontier_city_ids(war: War) -> list[str]:
    if war.frontier is None:
        return []
    return [entry.city_id for entry in border_cities_for_direction(war.defender, war.frontier)]


def _next_frontier_city(war: War) -> str | None:
    for city_id in _frontier_city_ids(war):
        if city_id not in war.captured_cities:
            return city_id
    return None
