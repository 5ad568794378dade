"""Declarative rule configuration for the war-machine domain layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UnitRules:
    """Attribute bounds and defaults shared by every unit."""

    attribute_max: float = 100.0
    equipment_min: int = 1
    equipment_max: int = 5
    default_supplies: float = 80.0
    default_organization: float = 70.0
    default_training: float = 60.0
    damage_organization_ratio: float = 0.5
    default_consumption: float = 2.0
    default_training_gain: float = 1.0
    default_reorganization: float = 5.0


@dataclass(frozen=True, slots=True)
class RegularRules:
    """Garrison recovery and defence constants."""

    recovery_rate: float = 2.0
    recovery_supply_threshold: float = 50.0
    turn_supply_use: float = 1.0
    turn_reorganization: float = 2.0
    training_cap: float = 80.0
    turn_training: float = 0.5
    defense_base: float = 1.5
    defense_training_weight: float = 0.3
    defense_organization_weight: float = 0.2


@dataclass(frozen=True, slots=True)
class AssaultRules:
    """Offensive formation constants."""

    initial_training: float = 75.0
    initial_organization: float = 80.0
    initial_morale: float = 80.0
    initial_momentum: float = 0.0
    turn_supply_use: float = 3.0
    low_supply_threshold: float = 30.0
    low_supply_morale_loss: float = 5.0
    organization_floor: float = 50.0
    organization_decay: float = 1.0
    momentum_decay: float = 1.0
    training_cap: float = 90.0
    turn_training: float = 0.3
    attack_base: float = 1.3
    attack_morale_weight: float = 0.4
    attack_momentum_weight: float = 0.3
    attack_training_weight: float = 0.2
    victory_momentum: float = 10.0
    defeat_severity: float = 10.0
    defeat_organization_floor: float = 20.0


@dataclass(frozen=True, slots=True)
class MobilizationRules:
    """How a country's profile is turned into fielded units."""

    regular_units_per_strength: int = 2
    assault_units_per_strength: int = 1
    regular_base_strength: float = 50.0
    regular_strength_per_production: float = 10.0
    assault_base_strength: float = 70.0
    assault_strength_per_production: float = 6.0
    assault_equipment_bonus: int = 1
    supplies_base: float = 100.0
    supplies_per_corruption: float = 10.0
    supplies_floor: float = 40.0
    organization_base: float = 50.0
    organization_per_standards: float = 10.0
    training_base: float = 40.0
    training_per_budget: float = 12.0
    morale_base: float = 60.0
    morale_per_standards: float = 8.0


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Round resolution and war termination thresholds."""

    damage_per_round: float = 10.0
    roll_notation: str = "2d6"
    roll_pivot: int = 7
    roll_swing: float = 0.05
    win_margin: float = 0.05
    capture_ratio: float = 0.6
    capitulation_strength_ratio: float = 0.2
    exhaustion_morale: float = 10.0
    stalemate_turns: int = 12


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    units: UnitRules = UnitRules()
    regular: RegularRules = RegularRules()
    assault: AssaultRules = AssaultRules()
    mobilization: MobilizationRules = MobilizationRules()
    battle: BattleRules = BattleRules()


DEFAULT_RULES = RulesConfig()
