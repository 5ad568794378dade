"""Data-integrity tests for the border settlement registry and city grids."""

from __future__ import annotations

from collections import Counter

import pytest

from warmachine.domain import border_cities, cities
from warmachine.domain.enums import BorderDirection, Country
from warmachine.domain.geometry import city_position, is_on_side
from warmachine.domain.validation import frontier_occlusions, frontier_overreach

_REGISTERED = sorted(border_cities.BORDER_CITIES)


def _frontiers():
    for country in _REGISTERED:
        for direction in border_cities.border_directions(country):
            yield country, direction


@pytest.mark.parametrize("country", _REGISTERED)
def test_border_cities_exist_on_the_city_grid(country):
    for entry in border_cities.border_cities(country):
        assert cities.find_city(country, entry.city_name) is not None, (
            f"Border city {entry.city_name!r} for {country.value} does not exist in city data"
        )


@pytest.mark.parametrize("country", _REGISTERED)
def test_border_cities_lie_on_their_declared_side(country):
    for entry in border_cities.border_cities(country):
        city = cities.find_city(country, entry.city_name)
        position = city_position(city.x, city.y)
        assert is_on_side(position, entry.direction), (
            f"{entry.city_name!r} declared {entry.direction.value} but sits at {position}"
        )


@pytest.mark.parametrize(("country", "direction"), list(_frontiers()))
def test_no_city_stands_in_front_of_the_frontier(country, direction):
    assert frontier_occlusions(country, direction) == []


@pytest.mark.parametrize(("country", "direction"), list(_frontiers()))
def test_no_inland_city_lies_further_out_than_the_frontier(country, direction):
    assert frontier_overreach(country, direction) == []


def test_no_duplicate_entries_per_direction():
    for country in _REGISTERED:
        counts = Counter((e.direction, e.city_name) for e in border_cities.border_cities(country))
        duplicates = [key for key, count in counts.items() if count > 1]
        assert not duplicates, f"{country.value} registers duplicates: {duplicates}"


def test_registered_countries_are_non_empty():
    assert len(_REGISTERED) == 41
    assert all(border_cities.BORDER_CITIES[country] for country in _REGISTERED)


def test_every_grid_has_a_single_capital():
    for country, grid in cities.COUNTRY_CITIES.items():
        assert sum(city.is_capital for city in grid) == 1, country.value


class TestLookups:
    """Helper functions over the registry."""

    def test_ukraine_east_frontier(self):
        east = border_cities.border_cities_for_direction(Country.UKRAINE, BorderDirection.EAST)
        assert all(city.direction == BorderDirection.EAST for city in east)
        assert [city.city_name for city in east] == ["Kharkiv", "Sumy", "Luhansk", "Donetsk"]

    def test_north_frontier_has_no_positive_y(self):
        north = border_cities.border_cities_for_direction(Country.USA, BorderDirection.NORTH)
        assert north
        for entry in north:
            city = cities.find_city(Country.USA, entry.city_name)
            assert city_position(city.x, city.y).y < 0

    def test_unregistered_country_is_empty(self):
        assert Country.AUSTRIA not in border_cities.BORDER_CITIES
        assert border_cities.border_cities(Country.AUSTRIA) == ()
        assert border_cities.border_cities_for_direction(Country.AUSTRIA, BorderDirection.NORTH) == []
        assert border_cities.border_directions(Country.AUSTRIA) == []

    def test_city_listed_for_two_directions(self):
        south = border_cities.border_cities_for_direction(Country.LATVIA, BorderDirection.SOUTH)
        east = border_cities.border_cities_for_direction(Country.LATVIA, BorderDirection.EAST)
        assert "Daugavpils" in {c.city_name for c in south} & {c.city_name for c in east}

    def test_border_directions_in_compass_order(self):
        assert border_cities.border_directions(Country.UKRAINE) == [
            BorderDirection.NORTH,
            BorderDirection.SOUTH,
            BorderDirection.EAST,
            BorderDirection.WEST,
        ]


def test_capital_and_slug():
    capital = cities.capital_of(Country.UKRAINE)
    assert capital is not None and capital.name == "Kyiv"
    assert cities.city_slug(Country.USA, "Washington DC") == "usa-washington-dc"
    assert cities.capital_of(Country.FIJI) is None
