"""Unit rules: construction, scoring and per-turn behaviour.

Every mutator is a total function.  Results are clamped into range
(``0 <= strength <= max_strength``, attributes within ``0..100``), and
negative amounts are treated as zero so no operation can push a value past
its bound from the wrong side.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from warmachine.domain.enums import Country, UnitBranch
from warmachine.domain.models import (
    AssaultUnit,
    CityID,
    FrontID,
    RegularUnit,
    Unit,
    UnitAttributes,
    UnitID,
)
from warmachine.domain.rules_config import DEFAULT_RULES, RulesConfig

EFFECTIVENESS_WEIGHTS: dict[str, float] = {
    "strength": 0.30,
    "equipment": 0.25,
    "supplies": 0.15,
    "organization": 0.15,
    "training": 0.15,
}


@dataclass(frozen=True, slots=True)
class EfficiencyReport:
    """Rounded 0-100 efficiency scores for a unit."""

    overall: int
    combat: int
    operational: int
    logistical: int
    breakdown: dict[str, int]


# --- Construction ---------------------------------------------------------------


def new_regular_unit(
    *,
    unit_id: str,
    country: Country,
    branch: UnitBranch,
    city_id: str,
    max_strength: float,
    equipment: int,
    attributes: UnitAttributes | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> RegularUnit:
    """Create a garrison at full strength."""

    _validate_construction(max_strength, equipment, rules)
    return RegularUnit(
        id=UnitID(unit_id),
        country=country,
        branch=branch,
        strength=float(max_strength),
        max_strength=float(max_strength),
        equipment=equipment,
        attributes=_clamped_attributes(attributes or _default_attributes(rules), rules),
        city_id=CityID(city_id),
    )


def new_assault_unit(
    *,
    unit_id: str,
    country: Country,
    branch: UnitBranch,
    front_id: str,
    max_strength: float,
    equipment: int,
    attributes: UnitAttributes | None = None,
    morale: float | None = None,
    momentum: float | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> AssaultUnit:
    """Create an assault formation at full strength.

    Assault units are drawn from better-trained, better-led troops than
    garrisons, so their defaults differ from the shared ones.
    """

    _validate_construction(max_strength, equipment, rules)
    if attributes is None:
        attributes = UnitAttributes(
            supplies=rules.units.default_supplies,
            organization=rules.assault.initial_organization,
            training=rules.assault.initial_training,
        )
    cap = rules.units.attribute_max
    return AssaultUnit(
        id=UnitID(unit_id),
        country=country,
        branch=branch,
        strength=float(max_strength),
        max_strength=float(max_strength),
        equipment=equipment,
        attributes=_clamped_attributes(attributes, rules),
        front_id=FrontID(front_id),
        morale=_clamp(rules.assault.initial_morale if morale is None else morale, 0.0, cap),
        momentum=_clamp(rules.assault.initial_momentum if momentum is None else momentum, 0.0, cap),
    )


def _validate_construction(max_strength: float, equipment: int, rules: RulesConfig) -> None:
    if max_strength <= 0:
        raise ValueError(f"max_strength must be positive, got {max_strength}")
    low, high = rules.units.equipment_min, rules.units.equipment_max
    if not low <= equipment <= high:
        raise ValueError(f"equipment must be within {low}..{high}, got {equipment}")


def _default_attributes(rules: RulesConfig) -> UnitAttributes:
    return UnitAttributes(
        supplies=rules.units.default_supplies,
        organization=rules.units.default_organization,
        training=rules.units.default_training,
    )


def _clamped_attributes(attributes: UnitAttributes, rules: RulesConfig) -> UnitAttributes:
    cap = rules.units.attribute_max
    return UnitAttributes(
        supplies=_clamp(attributes.supplies, 0.0, cap),
        organization=_clamp(attributes.organization, 0.0, cap),
        training=_clamp(attributes.training, 0.0, cap),
    )


# --- Scoring --------------------------------------------------------------------


def factors(unit: Unit, *, rules: RulesConfig = DEFAULT_RULES) -> dict[str, float]:
    """Return each attribute normalised to ``0..1`` against its maximum."""

    cap = rules.units.attribute_max
    return {
        "strength": unit.strength / unit.max_strength,
        "equipment": unit.equipment / rules.units.equipment_max,
        "supplies": unit.attributes.supplies / cap,
        "organization": unit.attributes.organization / cap,
        "training": unit.attributes.training / cap,
    }


def combat_effectiveness(unit: Unit, *, rules: RulesConfig = DEFAULT_RULES) -> int:
    """Weighted 0-100 combat score."""

    values = factors(unit, rules=rules)
    score = sum(values[name] * weight for name, weight in EFFECTIVENESS_WEIGHTS.items())
    return _round_score(score * 100)


def unit_efficiency(unit: Unit, *, rules: RulesConfig = DEFAULT_RULES) -> EfficiencyReport:
    """Break a unit's readiness down into combat, operational and logistical scores."""

    f = factors(unit, rules=rules)
    combat = (f["strength"] * 0.4 + f["equipment"] * 0.35 + f["training"] * 0.25) * 100
    operational = (f["organization"] * 0.6 + f["training"] * 0.4) * 100
    logistical = (f["supplies"] * 0.7 + f["organization"] * 0.3) * 100
    overall = combat * 0.5 + operational * 0.3 + logistical * 0.2
    return EfficiencyReport(
        overall=_round_score(overall),
        combat=_round_score(combat),
        operational=_round_score(operational),
        logistical=_round_score(logistical),
        breakdown={name: _round_score(value * 100) for name, value in f.items()},
    )


def defense_bonus(unit: RegularUnit, *, rules: RulesConfig = DEFAULT_RULES) -> float:
    r = rules.regular
    cap = rules.units.attribute_max
    return (
        r.defense_base
        * (1 + unit.attributes.training / cap * r.defense_training_weight)
        * (1 + unit.attributes.organization / cap * r.defense_organization_weight)
    )


def attack_bonus(unit: AssaultUnit, *, rules: RulesConfig = DEFAULT_RULES) -> float:
    a = rules.assault
    cap = rules.units.attribute_max
    return (
        a.attack_base
        * (1 + unit.morale / cap * a.attack_morale_weight)
        * (1 + unit.momentum / cap * a.attack_momentum_weight)
        * (1 + unit.attributes.training / cap * a.attack_training_weight)
    )


def combat_bonus(unit: Unit, *, rules: RulesConfig = DEFAULT_RULES) -> float:
    """Attack bonus for assault units, defence bonus for garrisons."""

    match unit:
        case AssaultUnit():
            return attack_bonus(unit, rules=rules)
        case RegularUnit():
            return defense_bonus(unit, rules=rules)
    raise TypeError(f"Unsupported unit type: {type(unit).__name__}")


# --- Mutators -------------------------------------------------------------------


def take_damage(unit: Unit, damage: float, *, rules: RulesConfig = DEFAULT_RULES) -> None:
    """Remove strength; combat damage also erodes discipline."""

    damage = max(0.0, damage)
    unit.strength = max(0.0, unit.strength - damage)
    unit.attributes.organization = max(
        0.0, unit.attributes.organization - damage * rules.units.damage_organization_ratio
    )


def consume_supplies(unit: Unit, amount: float | None = None, *, rules: RulesConfig = DEFAULT_RULES) -> None:
    if amount is None:
        amount = rules.units.default_consumption
    unit.attributes.supplies = max(0.0, unit.attributes.supplies - max(0.0, amount))


def resupply(unit: Unit, amount: float, *, rules: RulesConfig = DEFAULT_RULES) -> None:
    unit.attributes.supplies = min(
        rules.units.attribute_max, unit.attributes.supplies + max(0.0, amount)
    )


def train(unit: Unit, amount: float | None = None, *, rules: RulesConfig = DEFAULT_RULES) -> None:
    if amount is None:
        amount = rules.units.default_training_gain
    unit.attributes.training = min(
        rules.units.attribute_max, unit.attributes.training + max(0.0, amount)
    )


def reorganize(unit: Unit, amount: float | None = None, *, rules: RulesConfig = DEFAULT_RULES) -> None:
    if amount is None:
        amount = rules.units.default_reorganization
    unit.attributes.organization = min(
        rules.units.attribute_max, unit.attributes.organization + max(0.0, amount)
    )


def add_victory_momentum(
    unit: AssaultUnit, amount: float | None = None, *, rules: RulesConfig = DEFAULT_RULES
) -> None:
    """Momentum grows by ``amount`` and morale by half of it."""

    if amount is None:
        amount = rules.assault.victory_momentum
    amount = max(0.0, amount)
    cap = rules.units.attribute_max
    unit.momentum = min(cap, unit.momentum + amount)
    unit.morale = min(cap, unit.morale + amount * 0.5)


def suffer_defeat(
    unit: AssaultUnit, severity: float | None = None, *, rules: RulesConfig = DEFAULT_RULES
) -> None:
    """Defeat costs morale, twice as much momentum, and some organization."""

    if severity is None:
        severity = rules.assault.defeat_severity
    severity = max(0.0, severity)
    unit.morale = max(0.0, unit.morale - severity)
    unit.momentum = max(0.0, unit.momentum - severity * 2)
    unit.attributes.organization = max(
        rules.assault.defeat_organization_floor, unit.attributes.organization - severity
    )


# --- Per-turn behaviour ---------------------------------------------------------


def process_turn(unit: Unit, *, rules: RulesConfig = DEFAULT_RULES) -> None:
    """Advance one unit by a turn."""

    match unit:
        case RegularUnit():
            _process_regular_turn(unit, rules)
        case AssaultUnit():
            _process_assault_turn(unit, rules)
        case _:
            raise TypeError(f"Unsupported unit type: {type(unit).__name__}")


def _process_regular_turn(unit: RegularUnit, rules: RulesConfig) -> None:
    r = rules.regular
    cap = rules.units.attribute_max
    attrs = unit.attributes
    if unit.strength < unit.max_strength and attrs.supplies > r.recovery_supply_threshold:
        recovery = r.recovery_rate * (attrs.supplies / cap) * (attrs.organization / cap)
        unit.strength = min(unit.max_strength, unit.strength + recovery)

    consume_supplies(unit, r.turn_supply_use, rules=rules)
    if attrs.organization < cap:
        reorganize(unit, r.turn_reorganization, rules=rules)
    if attrs.training < r.training_cap:
        train(unit, r.turn_training, rules=rules)


def _process_assault_turn(unit: AssaultUnit, rules: RulesConfig) -> None:
    a = rules.assault
    attrs = unit.attributes
    consume_supplies(unit, a.turn_supply_use, rules=rules)

    if attrs.supplies < a.low_supply_threshold:
        unit.morale = max(0.0, unit.morale - a.low_supply_morale_loss)
    if attrs.organization > a.organization_floor:
        attrs.organization = max(a.organization_floor, attrs.organization - a.organization_decay)
    unit.momentum = max(0.0, unit.momentum - a.momentum_decay)

    if attrs.training < a.training_cap:
        train(unit, a.turn_training, rules=rules)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, float(value)))


def _round_score(value: float) -> int:
    # half-up rounding, matching how scores are displayed in game
    return int(_clamp(math.floor(value + 0.5), 0.0, 100.0))
