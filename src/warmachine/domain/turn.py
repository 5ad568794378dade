"""Turn orchestration for war machine campaigns."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from warmachine.domain import battle
from warmachine.domain.battle import BattleOptions, BattleRound
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig
from warmachine.domain.wars import War
from warmachine.domain.world import World

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TurnReport:
    """What happened during one turn."""

    turn: int
    rounds: list[BattleRound] = field(default_factory=list)
    concluded: list[War] = field(default_factory=list)

    @property
    def captured_cities(self) -> list[str]:
        return [r.captured_city for r in self.rounds if r.captured_city is not None]


def process_turn(
    world: World,
    *,
    rules: RulesConfig = DEFAULT_RULES,
    options: BattleOptions | None = None,
) -> TurnReport:
    """Advance the world by one turn."""

    report = TurnReport(turn=world.turn)

    _process_units(world, rules)
    planned = _plan_rounds(world, rules, options)
    for war, battle_round in planned:
        battle.apply_round(world, war, battle_round, rules=rules)
        report.rounds.append(battle_round)
    report.concluded = _conclude_wars(world, rules)

    world.advance_turn()
    logger.info(
        "Turn %d processed: %d rounds, %d captures, %d wars concluded, %d still active",
        report.turn,
        len(report.rounds),
        len(report.captured_cities),
        len(report.concluded),
        len(world.wars.active_wars()),
    )
    return report


def _process_units(world: World, rules: RulesConfig) -> None:
    for state in world.all_countries():
        state.process_units_turn(rules=rules)


def _plan_rounds(
    world: World, rules: RulesConfig, options: BattleOptions | None
) -> list[tuple[War, BattleRound]]:
    """Plan every active war from the same unit state before anything is applied."""

    planned: list[tuple[War, BattleRound]] = []
    for war in world.wars.active_wars():
        battle_round = battle.plan_round(world, war, rules=rules, options=options)
        if battle_round is not None:
            planned.append((war, battle_round))
    return planned


def _conclude_wars(world: World, rules: RulesConfig) -> list[War]:
    concluded: list[War] = []
    for war in world.wars.active_wars():
        conclusion = battle.evaluate_conclusion(world, war, turn=world.turn, rules=rules)
        if conclusion is None:
            continue
        world.wars.end_war(world, war, conclusion)
        concluded.append(war)
    return concluded
