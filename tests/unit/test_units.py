"""Unit tests for unit construction, scoring and per-turn behaviour."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from warmachine.domain import units
from warmachine.domain.enums import Country, UnitBranch, UnitKind
from warmachine.domain.models import AssaultUnit, RegularUnit, UnitAttributes


def _regular(
    *,
    strength: float | None = None,
    max_strength: float = 100.0,
    equipment: int = 3,
    supplies: float = 80.0,
    organization: float = 70.0,
    training: float = 60.0,
) -> RegularUnit:
    unit = units.new_regular_unit(
        unit_id="ukraine-regular-army-1",
        country=Country.UKRAINE,
        branch=UnitBranch.ARMY,
        city_id="ukraine-kyiv",
        max_strength=max_strength,
        equipment=equipment,
        attributes=UnitAttributes(supplies=supplies, organization=organization, training=training),
    )
    if strength is not None:
        unit.strength = strength
    return unit


def _assault(
    *,
    strength: float | None = None,
    supplies: float = 80.0,
    organization: float = 80.0,
    training: float = 75.0,
    morale: float = 80.0,
    momentum: float = 0.0,
) -> AssaultUnit:
    unit = units.new_assault_unit(
        unit_id="russia-assault-army-1",
        country=Country.RUSSIA,
        branch=UnitBranch.ARMY,
        front_id="front-russia-ukraine",
        max_strength=100.0,
        equipment=3,
        attributes=UnitAttributes(supplies=supplies, organization=organization, training=training),
        morale=morale,
        momentum=momentum,
    )
    if strength is not None:
        unit.strength = strength
    return unit


class TestConstruction:
    """Factories start units at full strength with clamped attributes."""

    def test_regular_defaults(self):
        unit = units.new_regular_unit(
            unit_id="poland-regular-army-1",
            country=Country.POLAND,
            branch=UnitBranch.ARMY,
            city_id="poland-warsaw",
            max_strength=80,
            equipment=2,
        )
        assert unit.strength == unit.max_strength == 80.0
        assert unit.attributes == UnitAttributes(supplies=80.0, organization=70.0, training=60.0)
        assert unit.kind == UnitKind.REGULAR
        assert unit.location == "poland-warsaw"

    def test_assault_defaults(self):
        unit = units.new_assault_unit(
            unit_id="russia-assault-drones-4",
            country=Country.RUSSIA,
            branch=UnitBranch.DRONES,
            front_id="front-russia-ukraine",
            max_strength=70,
            equipment=4,
        )
        assert unit.attributes.training == 75.0
        assert unit.attributes.organization == 80.0
        assert unit.morale == 80.0
        assert unit.momentum == 0.0
        assert unit.kind == UnitKind.ASSAULT
        assert unit.location == "front-russia-ukraine"

    def test_attributes_are_clamped(self):
        unit = _regular(supplies=140.0, organization=-5.0)
        assert unit.attributes.supplies == 100.0
        assert unit.attributes.organization == 0.0

    @pytest.mark.parametrize("equipment", [0, 6, -1])
    def test_equipment_out_of_range_rejected(self, equipment):
        with pytest.raises(ValueError, match="equipment must be within 1..5"):
            _regular(equipment=equipment)

    def test_non_positive_max_strength_rejected(self):
        with pytest.raises(ValueError, match="max_strength must be positive"):
            _regular(max_strength=0)


def test_regular_turn_matches_reference_example():
    unit = _regular(strength=50.0, supplies=80.0, organization=70.0, training=60.0)

    units.process_turn(unit)

    assert unit.strength == pytest.approx(51.12)
    assert unit.attributes.supplies == pytest.approx(79.0)
    assert unit.attributes.organization == pytest.approx(72.0)
    assert unit.attributes.training == pytest.approx(60.5)


def test_regular_does_not_recover_when_supplies_low():
    unit = _regular(strength=50.0, supplies=50.0)
    units.process_turn(unit)
    assert unit.strength == 50.0
    assert unit.attributes.supplies == 49.0


def test_regular_training_stops_at_cap():
    unit = _regular(training=80.0)
    units.process_turn(unit)
    assert unit.attributes.training == 80.0


def test_assault_turn_decays_readiness():
    unit = _assault(strength=60.0, supplies=31.0, organization=80.0, momentum=5.0, training=75.0)

    units.process_turn(unit)

    assert unit.strength == 60.0
    assert unit.attributes.supplies == pytest.approx(28.0)
    assert unit.morale == pytest.approx(75.0)
    assert unit.attributes.organization == pytest.approx(79.0)
    assert unit.momentum == pytest.approx(4.0)
    assert unit.attributes.training == pytest.approx(75.3)


def test_assault_organization_does_not_decay_below_floor():
    unit = _assault(organization=50.0)
    units.process_turn(unit)
    assert unit.attributes.organization == 50.0


def test_take_damage_matches_reference_example():
    unit = _regular(strength=50.0, organization=70.0)
    units.take_damage(unit, 30)
    assert unit.strength == 20.0
    assert unit.attributes.organization == 55.0


def test_take_damage_floors_at_zero():
    unit = _regular(strength=10.0, organization=4.0)
    units.take_damage(unit, 30)
    assert unit.strength == 0.0
    assert unit.attributes.organization == 0.0


def test_negative_amounts_are_ignored():
    unit = _regular(strength=90.0, supplies=40.0, organization=60.0, training=50.0)

    units.take_damage(unit, -5)
    units.consume_supplies(unit, -10)
    units.resupply(unit, -10)
    units.train(unit, -3)
    units.reorganize(unit, -3)

    assert unit.strength == 90.0
    assert unit.attributes.supplies == 40.0
    assert unit.attributes.organization == 60.0
    assert unit.attributes.training == 50.0


def test_default_mutator_amounts():
    unit = _regular(supplies=50.0, organization=50.0, training=50.0)
    units.consume_supplies(unit)
    units.train(unit)
    units.reorganize(unit)
    assert unit.attributes.supplies == 48.0
    assert unit.attributes.training == 51.0
    assert unit.attributes.organization == 55.0


def test_resupply_caps_at_maximum():
    unit = _regular(supplies=95.0)
    units.resupply(unit, 20)
    assert unit.attributes.supplies == 100.0


def test_attack_bonus_matches_literal_formula():
    unit = _assault(morale=80.0, momentum=0.0, training=75.0)
    expected = 1.3 * (1 + 0.8 * 0.4) * (1 + 0 * 0.3) * (1 + 0.75 * 0.2)
    assert units.attack_bonus(unit) == pytest.approx(expected, rel=1e-12)


def test_defense_bonus_formula():
    unit = _regular(training=60.0, organization=70.0)
    expected = 1.5 * (1 + 0.6 * 0.3) * (1 + 0.7 * 0.2)
    assert units.defense_bonus(unit) == pytest.approx(expected)


def test_combat_bonus_dispatches_by_variant():
    regular = _regular()
    assault = _assault()
    assert units.combat_bonus(regular) == units.defense_bonus(regular)
    assert units.combat_bonus(assault) == units.attack_bonus(assault)


def test_combat_effectiveness_extremes():
    best = _regular(equipment=5, supplies=100.0, organization=100.0, training=100.0)
    assert units.combat_effectiveness(best) == 100

    worst = _regular(strength=0.0, equipment=1, supplies=0.0, organization=0.0, training=0.0)
    assert units.combat_effectiveness(worst) == 5


def test_unit_efficiency_breakdown():
    unit = _regular(equipment=5, supplies=100.0, organization=100.0, training=100.0)
    report = units.unit_efficiency(unit)
    assert report.overall == 100
    assert report.combat == report.operational == report.logistical == 100
    assert report.breakdown == {
        "strength": 100,
        "equipment": 100,
        "supplies": 100,
        "organization": 100,
        "training": 100,
    }


def test_unit_efficiency_reflects_supply_shortage():
    unit = _regular(equipment=5, supplies=0.0, organization=100.0, training=100.0)
    report = units.unit_efficiency(unit)
    assert report.logistical == 30
    assert report.breakdown["supplies"] == 0
    assert report.combat == 100


def test_victory_momentum_and_defeat():
    unit = _assault(morale=80.0, momentum=0.0, organization=80.0)

    units.add_victory_momentum(unit)
    assert unit.momentum == 10.0
    assert unit.morale == 85.0

    units.suffer_defeat(unit)
    assert unit.morale == 75.0
    assert unit.momentum == 0.0
    assert unit.attributes.organization == 70.0


def test_defeat_organization_floor():
    unit = _assault(organization=25.0)
    units.suffer_defeat(unit, 30)
    assert unit.attributes.organization == 20.0
    assert unit.morale == 50.0


_AMOUNTS = st.floats(min_value=-50, max_value=200, allow_nan=False)
_OPERATIONS = st.lists(
    st.tuples(
        st.sampled_from(["damage", "consume", "resupply", "train", "reorganize", "turn"]),
        _AMOUNTS,
    ),
    max_size=30,
)


def _apply(unit, operation: str, amount: float) -> None:
    match operation:
        case "damage":
            units.take_damage(unit, amount)
        case "consume":
            units.consume_supplies(unit, amount)
        case "resupply":
            units.resupply(unit, amount)
        case "train":
            units.train(unit, amount)
        case "reorganize":
            units.reorganize(unit, amount)
        case "turn":
            units.process_turn(unit)


def _assert_in_range(unit) -> None:
    assert 0.0 <= unit.strength <= unit.max_strength
    for value in (unit.attributes.supplies, unit.attributes.organization, unit.attributes.training):
        assert 0.0 <= value <= 100.0


@given(operations=_OPERATIONS)
def test_regular_stays_in_range(operations):
    unit = _regular(strength=60.0)
    for operation, amount in operations:
        _apply(unit, operation, amount)
        _assert_in_range(unit)


@given(operations=_OPERATIONS, victories=st.integers(min_value=0, max_value=12))
def test_assault_stays_in_range(operations, victories):
    unit = _assault()
    for _ in range(victories):
        units.add_victory_momentum(unit)
    for operation, amount in operations:
        _apply(unit, operation, amount)
        units.suffer_defeat(unit, amount)
        _assert_in_range(unit)
        assert 0.0 <= unit.morale <= 100.0
        assert 0.0 <= unit.momentum <= 100.0


_PERCENT = st.floats(min_value=0, max_value=100, allow_nan=False)


@given(
    strength=_PERCENT,
    equipment=st.integers(min_value=1, max_value=5),
    supplies=_PERCENT,
    organization=_PERCENT,
    training=_PERCENT,
    field_name=st.sampled_from(["strength", "equipment", "supplies", "organization", "training"]),
    bump=st.floats(min_value=0, max_value=100, allow_nan=False),
)
def test_combat_effectiveness_is_monotonic(
    strength, equipment, supplies, organization, training, field_name, bump
):
    values = {
        "strength": strength,
        "equipment": equipment,
        "supplies": supplies,
        "organization": organization,
        "training": training,
    }
    raised = dict(values)
    if field_name == "equipment":
        raised["equipment"] = min(5, equipment + 1)
    else:
        raised[field_name] = min(100.0, values[field_name] + bump)

    lower = _regular(**values)
    higher = _regular(**raised)

    assert units.combat_effectiveness(higher) >= units.combat_effectiveness(lower)
    assert 0 <= units.combat_effectiveness(lower) <= 100


@given(
    strength=st.floats(min_value=0, max_value=100, allow_nan=False),
    supplies=_PERCENT,
    organization=_PERCENT,
    turns=st.integers(min_value=1, max_value=10),
)
def test_only_regular_units_recover_strength(strength, supplies, organization, turns):
    regular = _regular(strength=strength, supplies=supplies, organization=organization)
    assault = _assault(strength=strength, supplies=supplies, organization=organization)
    for _ in range(turns):
        before_regular, before_assault = regular.strength, assault.strength
        units.process_turn(regular)
        units.process_turn(assault)
        assert regular.strength >= before_regular
        assert assault.strength == before_assault
