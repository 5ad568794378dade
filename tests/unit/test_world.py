"""Tests for world construction."""

from __future__ import annotations

import logging

import pytest

from warmachine.config import Settings
from warmachine.domain import validation
from warmachine.domain.enums import Country
from warmachine.domain.profiles import STARTING_PROFILES
from warmachine.domain.world import build_world

QUIET = Settings(world_seed="world-test", initialize_wars=False)


def _subset(*countries: Country):
    return {c: STARTING_PROFILES[c] for c in countries}


def test_build_world_from_profiles():
    world = build_world(profiles=_subset(Country.RUSSIA, Country.UKRAINE), settings=QUIET)

    assert set(world.countries) == {Country.RUSSIA, Country.UKRAINE}
    assert world.turn == 0
    assert world.seed == "world-test"
    assert world.wars.all_wars() == []
    assert world.country(Country.UKRAINE).profile is STARTING_PROFILES[Country.UKRAINE]


def test_unknown_country():
    world = build_world(profiles=_subset(Country.RUSSIA), settings=QUIET)
    with pytest.raises(KeyError, match="Unknown country"):
        world.country(Country.FIJI)


def test_opening_wars_follow_settings():
    settings = Settings(world_seed="world-test", validate_static_data=False)
    world = build_world(profiles=_subset(Country.RUSSIA, Country.UKRAINE), settings=settings)

    [war] = world.wars.active_wars()
    assert (war.aggressor, war.defender) == (Country.RUSSIA, Country.UKRAINE)


def test_static_data_validation_can_be_skipped(monkeypatch):
    calls = []
    monkeypatch.setattr(validation, "validate_static_data", lambda: calls.append(True))

    build_world(profiles=_subset(Country.RUSSIA), settings=QUIET)
    build_world(
        profiles=_subset(Country.RUSSIA),
        settings=Settings(validate_static_data=False, initialize_wars=False),
    )

    assert calls == [True]


def test_advance_turn():
    world = build_world(profiles=_subset(Country.RUSSIA), settings=QUIET)
    assert world.advance_turn() == 1
    assert world.turn == 1


def test_build_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="warmachine.domain.world"):
        build_world(profiles=_subset(Country.RUSSIA), settings=QUIET)
    assert "World built: 1 countries, 0 active wars" in caplog.text
