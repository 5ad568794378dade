"""Load-time validation of the static geography tables.

The adjacency graph, border registry and city grid are hand-maintained data.
:func:`validate_static_data` checks them once when a world is built and
raises :class:`ConfigurationError` for the first defect found, naming the
offending country and city.  Issues that do not break the simulation (a
capital doubling as a border city, one-sided neighbour declarations) are
logged instead.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from warmachine.domain import neighbors as neighbor_rules
from warmachine.domain.border_cities import BORDER_CITIES
from warmachine.domain.cities import COUNTRY_CITIES
from warmachine.domain.enums import BorderDirection, Country
from warmachine.domain.geometry import (
    CITY_GRID_COLUMNS,
    CITY_GRID_ROWS,
    attacker_position,
    city_position,
    is_on_side,
    line_passes_near_point,
    outward_extent,
)
from warmachine.domain.models import BorderCity, CityData, DirectionalNeighbor

logger = logging.getLogger(__name__)

FRONTIER_TOLERANCE = 30.0


class ConfigurationError(ValueError):
    """Static configuration data is inconsistent."""


class _NeighborRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: Country
    direction: BorderDirection


class _BorderRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_id: str = Field(pattern=r"^[a-z]+(-[a-z0-9]+)+$")
    city_name: str = Field(min_length=1)
    direction: BorderDirection


class _CityRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    x: int = Field(ge=0, le=CITY_GRID_COLUMNS - 1)
    y: int = Field(ge=0, le=CITY_GRID_ROWS - 1)
    is_capital: bool = False


_NEIGHBOR_ADAPTER: TypeAdapter[list[_NeighborRecord]] = TypeAdapter(list[_NeighborRecord])
_BORDER_ADAPTER: TypeAdapter[list[_BorderRecord]] = TypeAdapter(list[_BorderRecord])
_CITY_ADAPTER: TypeAdapter[list[_CityRecord]] = TypeAdapter(list[_CityRecord])


@dataclass(frozen=True, slots=True)
class FrontierOcclusion:
    """A city standing between an attacker and a declared border city."""

    country: Country
    direction: BorderDirection
    border_city: str
    occluding_city: str


def validate_static_data(
    *,
    neighbors: Mapping[Country, tuple[DirectionalNeighbor, ...]] | None = None,
    borders: Mapping[Country, tuple[BorderCity, ...]] | None = None,
    cities: Mapping[Country, tuple[CityData, ...]] | None = None,
) -> list[str]:
    """Validate the geography tables, returning non-fatal warnings.

    Raises:
        ConfigurationError: on the first structural or geometric defect
    """

    neighbors = neighbor_rules.NEIGHBOR_DIRECTIONS if neighbors is None else neighbors
    borders = BORDER_CITIES if borders is None else borders
    cities = COUNTRY_CITIES if cities is None else cities

    warnings: list[str] = []
    for country, entries in neighbors.items():
        _check_neighbors(country, entries)
    for country, grid in cities.items():
        _check_city_grid(country, grid)
    for country, entries in borders.items():
        warnings.extend(_check_border_cities(country, entries, cities.get(country, ())))

    for message in warnings:
        logger.warning(message)
    asymmetric = neighbor_rules.log_asymmetries()
    logger.info(
        "Static data validated: %d countries, %d border entries, %d asymmetric neighbour edges",
        len(neighbors),
        sum(len(entries) for entries in borders.values()),
        asymmetric,
    )
    return warnings


def _check_neighbors(country: Country, entries: tuple[DirectionalNeighbor, ...]) -> None:
    try:
        _NEIGHBOR_ADAPTER.validate_python([asdict(entry) for entry in entries])
    except ValidationError as exc:
        raise ConfigurationError(f"{country.value}: malformed neighbour table: {exc}") from exc

    seen: set[Country] = set()
    for entry in entries:
        if entry.country == country:
            raise ConfigurationError(f"{country.value}: lists itself as a neighbour")
        if entry.country in seen:
            raise ConfigurationError(
                f"{country.value}: neighbour {entry.country.value} declared more than once"
            )
        seen.add(entry.country)


def _check_city_grid(country: Country, grid: tuple[CityData, ...]) -> None:
    try:
        _CITY_ADAPTER.validate_python([asdict(city) for city in grid])
    except ValidationError as exc:
        raise ConfigurationError(f"{country.value}: malformed city grid: {exc}") from exc

    capitals = [city.name for city in grid if city.is_capital]
    if len(capitals) != 1:
        raise ConfigurationError(
            f"{country.value}: expected exactly one capital, found {len(capitals)} {capitals}"
        )

    occupied: dict[tuple[int, int], str] = {}
    names: set[str] = set()
    for city in grid:
        if city.name in names:
            raise ConfigurationError(f"{country.value}: city {city.name!r} listed twice")
        names.add(city.name)
        cell = (city.x, city.y)
        if cell in occupied:
            raise ConfigurationError(
                f"{country.value}: {city.name!r} overlaps {occupied[cell]!r} at {cell}"
            )
        occupied[cell] = city.name


def _check_border_cities(
    country: Country,
    entries: tuple[BorderCity, ...],
    grid: tuple[CityData, ...],
) -> list[str]:
    try:
        _BORDER_ADAPTER.validate_python([asdict(entry) for entry in entries])
    except ValidationError as exc:
        raise ConfigurationError(f"{country.value}: malformed border table: {exc}") from exc

    if entries and not grid:
        raise ConfigurationError(f"{country.value}: border cities declared but no city grid")

    by_name = {city.name: city for city in grid}
    names_by_id: dict[str, str] = {}
    seen: set[tuple[BorderDirection, str]] = set()
    warnings: list[str] = []

    for entry in entries:
        key = (entry.direction, entry.city_id)
        if key in seen:
            raise ConfigurationError(
                f"{country.value}: {entry.city_name!r} registered twice for {entry.direction.value}"
            )
        seen.add(key)

        known = names_by_id.setdefault(entry.city_id, entry.city_name)
        if known != entry.city_name:
            raise ConfigurationError(
                f"{country.value}: city id {entry.city_id!r} names both {known!r} and {entry.city_name!r}"
            )

        city = by_name.get(entry.city_name)
        if city is None:
            raise ConfigurationError(
                f"{country.value}: border city {entry.city_name!r} is not on the city grid"
            )
        if not is_on_side(city_position(city.x, city.y), entry.direction):
            raise ConfigurationError(
                f"{country.value}: {entry.city_name!r} declared {entry.direction.value} "
                f"but sits at ({city.x}, {city.y})"
            )
        if city.is_capital:
            warnings.append(
                f"{country.value}: capital {city.name!r} is a {entry.direction.value} border city"
            )

    directions = {entry.direction for entry in entries}
    for direction in BorderDirection:
        if direction not in directions:
            continue
        occlusions = frontier_occlusions(country, direction, borders=entries, grid=grid)
        if occlusions:
            first = occlusions[0]
            raise ConfigurationError(
                f"{country.value}: {first.occluding_city!r} stands between a {direction.value} "
                f"attacker and border city {first.border_city!r}"
            )
        overreach = frontier_overreach(country, direction, borders=entries, grid=grid)
        if overreach:
            raise ConfigurationError(
                f"{country.value}: inland {overreach[0]!r} lies further {direction.value} "
                "than every registered border city"
            )
    return warnings


def frontier_occlusions(
    country: Country,
    direction: BorderDirection,
    *,
    borders: tuple[BorderCity, ...] | None = None,
    grid: tuple[CityData, ...] | None = None,
    tolerance: float = FRONTIER_TOLERANCE,
) -> list[FrontierOcclusion]:
    """Cities an attacker from ``direction`` would reach before a declared border city.

    A city counts when it lies within ``tolerance`` of the attack line, is
    closer to the attacker than the border city, and is not itself registered
    for ``direction``.
    """

    borders = BORDER_CITIES.get(country, ()) if borders is None else borders
    grid = COUNTRY_CITIES.get(country, ()) if grid is None else grid
    by_name = {city.name: city for city in grid}
    frontier = [entry for entry in borders if entry.direction == direction]
    frontier_names = {entry.city_name for entry in frontier}
    attacker = attacker_position(direction)

    found: list[FrontierOcclusion] = []
    for entry in frontier:
        border_city = by_name.get(entry.city_name)
        if border_city is None:
            continue
        target = city_position(border_city.x, border_city.y)
        for other in grid:
            if other.name == entry.city_name or other.name in frontier_names:
                continue
            position = city_position(other.x, other.y)
            if not line_passes_near_point(attacker, target, position, tolerance):
                continue
            if attacker.distance_to(position) < attacker.distance_to(target):
                found.append(FrontierOcclusion(country, direction, entry.city_name, other.name))
    return found


def frontier_overreach(
    country: Country,
    direction: BorderDirection,
    *,
    borders: tuple[BorderCity, ...] | None = None,
    grid: tuple[CityData, ...] | None = None,
) -> list[str]:
    """Inland cities lying further towards ``direction`` than its outermost border city."""

    borders = BORDER_CITIES.get(country, ()) if borders is None else borders
    grid = COUNTRY_CITIES.get(country, ()) if grid is None else grid
    frontier_names = {entry.city_name for entry in borders if entry.direction == direction}
    frontier = [city for city in grid if city.name in frontier_names]
    if not frontier:
        return []

    def reach(city: CityData) -> float:
        return outward_extent(city_position(city.x, city.y), direction)

    extreme = max(reach(city) for city in frontier)
    return [
        city.name for city in grid if city.name not in frontier_names and reach(city) > extreme
    ]
