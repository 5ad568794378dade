"""Directional adjacency between countries.

``NEIGHBOR_DIRECTIONS[a]`` lists the neighbours of ``a`` together with the
compass direction in which each neighbour lies, as seen from ``a``.  An
attacker approaches its target from that direction, so the defender's
threatened side is the opposite one.

The table is reproduced as shipped with the game.  Declarations are not
required to be mutually consistent; :func:`asymmetric_neighbor_pairs` reports
where they disagree.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from warmachine.domain.enums import BorderDirection, Country
from warmachine.domain.models import DirectionalNeighbor

logger = logging.getLogger(__name__)

_OPPOSITES: Mapping[BorderDirection, BorderDirection] = MappingProxyType(
    {
        BorderDirection.NORTH: BorderDirection.SOUTH,
        BorderDirection.SOUTH: BorderDirection.NORTH,
        BorderDirection.EAST: BorderDirection.WEST,
        BorderDirection.WEST: BorderDirection.EAST,
    }
)

NEIGHBOR_DIRECTIONS: Mapping[Country, tuple[DirectionalNeighbor, ...]] = MappingProxyType({
    # North America
    Country.USA: (
        DirectionalNeighbor(Country.CANADA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.MEXICO, BorderDirection.SOUTH),
    ),
    Country.CANADA: (
        DirectionalNeighbor(Country.USA, BorderDirection.SOUTH),
    ),
    Country.MEXICO: (
        DirectionalNeighbor(Country.USA, BorderDirection.NORTH),
    ),
    # South America
    Country.BRAZIL: (
        DirectionalNeighbor(Country.ARGENTINA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.VENEZUELA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.COLOMBIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.PERU, BorderDirection.WEST),
    ),
    Country.ARGENTINA: (
        DirectionalNeighbor(Country.BRAZIL, BorderDirection.NORTH),
        DirectionalNeighbor(Country.CHILE, BorderDirection.WEST),
    ),
    Country.VENEZUELA: (
        DirectionalNeighbor(Country.COLOMBIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.BRAZIL, BorderDirection.SOUTH),
    ),
    Country.COLOMBIA: (
        DirectionalNeighbor(Country.VENEZUELA, BorderDirection.EAST),
        DirectionalNeighbor(Country.BRAZIL, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.PERU, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.ECUADOR, BorderDirection.SOUTH),
    ),
    Country.CHILE: (
        DirectionalNeighbor(Country.ARGENTINA, BorderDirection.EAST),
        DirectionalNeighbor(Country.PERU, BorderDirection.NORTH),
    ),
    Country.PERU: (
        DirectionalNeighbor(Country.ECUADOR, BorderDirection.NORTH),
        DirectionalNeighbor(Country.COLOMBIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.BRAZIL, BorderDirection.EAST),
        DirectionalNeighbor(Country.CHILE, BorderDirection.SOUTH),
    ),
    Country.ECUADOR: (
        DirectionalNeighbor(Country.COLOMBIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.PERU, BorderDirection.SOUTH),
    ),
    # Europe
    Country.UK: (
        DirectionalNeighbor(Country.FRANCE, BorderDirection.SOUTH),
    ),
    Country.FRANCE: (
        DirectionalNeighbor(Country.UK, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SPAIN, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.ITALY, BorderDirection.EAST),
        DirectionalNeighbor(Country.GERMANY, BorderDirection.EAST),
        DirectionalNeighbor(Country.SWITZERLAND, BorderDirection.EAST),
        DirectionalNeighbor(Country.BELGIUM, BorderDirection.NORTH),
    ),
    Country.SPAIN: (
        DirectionalNeighbor(Country.FRANCE, BorderDirection.NORTH),
        DirectionalNeighbor(Country.PORTUGAL, BorderDirection.WEST),
    ),
    Country.PORTUGAL: (
        DirectionalNeighbor(Country.SPAIN, BorderDirection.EAST),
    ),
    Country.GERMANY: (
        DirectionalNeighbor(Country.FRANCE, BorderDirection.WEST),
        DirectionalNeighbor(Country.POLAND, BorderDirection.EAST),
        DirectionalNeighbor(Country.CZECH_REPUBLIC, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.AUSTRIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.SWITZERLAND, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.NETHERLANDS, BorderDirection.NORTH),
        DirectionalNeighbor(Country.BELGIUM, BorderDirection.WEST),
        DirectionalNeighbor(Country.DENMARK, BorderDirection.NORTH),
    ),
    Country.ITALY: (
        DirectionalNeighbor(Country.FRANCE, BorderDirection.WEST),
        DirectionalNeighbor(Country.SWITZERLAND, BorderDirection.NORTH),
        DirectionalNeighbor(Country.AUSTRIA, BorderDirection.NORTH),
    ),
    Country.POLAND: (
        DirectionalNeighbor(Country.GERMANY, BorderDirection.WEST),
        DirectionalNeighbor(Country.CZECH_REPUBLIC, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.UKRAINE, BorderDirection.EAST),
        DirectionalNeighbor(Country.LITHUANIA, BorderDirection.NORTH),
    ),
    Country.NORWAY: (
        DirectionalNeighbor(Country.SWEDEN, BorderDirection.EAST),
        DirectionalNeighbor(Country.FINLAND, BorderDirection.EAST),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.EAST),
    ),
    Country.SWEDEN: (
        DirectionalNeighbor(Country.NORWAY, BorderDirection.WEST),
        DirectionalNeighbor(Country.FINLAND, BorderDirection.EAST),
        DirectionalNeighbor(Country.DENMARK, BorderDirection.SOUTH),
    ),
    Country.FINLAND: (
        DirectionalNeighbor(Country.SWEDEN, BorderDirection.WEST),
        DirectionalNeighbor(Country.NORWAY, BorderDirection.WEST),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.ESTONIA, BorderDirection.SOUTH),
    ),
    Country.DENMARK: (
        DirectionalNeighbor(Country.GERMANY, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.SWEDEN, BorderDirection.NORTH),
    ),
    Country.NETHERLANDS: (
        DirectionalNeighbor(Country.GERMANY, BorderDirection.EAST),
        DirectionalNeighbor(Country.BELGIUM, BorderDirection.SOUTH),
    ),
    Country.BELGIUM: (
        DirectionalNeighbor(Country.NETHERLANDS, BorderDirection.NORTH),
        DirectionalNeighbor(Country.GERMANY, BorderDirection.EAST),
        DirectionalNeighbor(Country.FRANCE, BorderDirection.SOUTH),
    ),
    Country.SWITZERLAND: (
        DirectionalNeighbor(Country.FRANCE, BorderDirection.WEST),
        DirectionalNeighbor(Country.GERMANY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.AUSTRIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.ITALY, BorderDirection.SOUTH),
    ),
    Country.AUSTRIA: (
        DirectionalNeighbor(Country.GERMANY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SWITZERLAND, BorderDirection.WEST),
        DirectionalNeighbor(Country.ITALY, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.CZECH_REPUBLIC, BorderDirection.NORTH),
        DirectionalNeighbor(Country.HUNGARY, BorderDirection.EAST),
    ),
    Country.CZECH_REPUBLIC: (
        DirectionalNeighbor(Country.GERMANY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.POLAND, BorderDirection.NORTH),
        DirectionalNeighbor(Country.AUSTRIA, BorderDirection.SOUTH),
    ),
    Country.HUNGARY: (
        DirectionalNeighbor(Country.AUSTRIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.ROMANIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.SERBIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.CROATIA, BorderDirection.SOUTH),
    ),
    Country.ROMANIA: (
        DirectionalNeighbor(Country.HUNGARY, BorderDirection.WEST),
        DirectionalNeighbor(Country.SERBIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.BULGARIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.UKRAINE, BorderDirection.NORTH),
    ),
    Country.BULGARIA: (
        DirectionalNeighbor(Country.ROMANIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SERBIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.GREECE, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.TURKEY, BorderDirection.EAST),
    ),
    Country.GREECE: (
        DirectionalNeighbor(Country.BULGARIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.TURKEY, BorderDirection.EAST),
    ),
    Country.SERBIA: (
        DirectionalNeighbor(Country.HUNGARY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.ROMANIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.BULGARIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.CROATIA, BorderDirection.WEST),
    ),
    Country.CROATIA: (
        DirectionalNeighbor(Country.HUNGARY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SERBIA, BorderDirection.EAST),
    ),
    Country.UKRAINE: (
        DirectionalNeighbor(Country.POLAND, BorderDirection.WEST),
        DirectionalNeighbor(Country.ROMANIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.EAST),
    ),
    Country.ESTONIA: (
        DirectionalNeighbor(Country.LATVIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.FINLAND, BorderDirection.NORTH),
    ),
    Country.LATVIA: (
        DirectionalNeighbor(Country.ESTONIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.LITHUANIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.EAST),
    ),
    # Asia
    Country.RUSSIA: (
        DirectionalNeighbor(Country.NORWAY, BorderDirection.WEST),
        DirectionalNeighbor(Country.FINLAND, BorderDirection.WEST),
        DirectionalNeighbor(Country.ESTONIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.LATVIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.LITHUANIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.UKRAINE, BorderDirection.WEST),
        DirectionalNeighbor(Country.CHINA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.JAPAN, BorderDirection.EAST),
    ),
    Country.CHINA: (
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.INDIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.PAKISTAN, BorderDirection.WEST),
        DirectionalNeighbor(Country.VIETNAM, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.SOUTH_KOREA, BorderDirection.EAST),
        DirectionalNeighbor(Country.JAPAN, BorderDirection.EAST),
    ),
    Country.JAPAN: (
        DirectionalNeighbor(Country.SOUTH_KOREA, BorderDirection.WEST),
        DirectionalNeighbor(Country.CHINA, BorderDirection.WEST),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.WEST),
    ),
    Country.SOUTH_KOREA: (
        DirectionalNeighbor(Country.CHINA, BorderDirection.WEST),
        DirectionalNeighbor(Country.JAPAN, BorderDirection.EAST),
    ),
    Country.INDIA: (
        DirectionalNeighbor(Country.PAKISTAN, BorderDirection.WEST),
        DirectionalNeighbor(Country.CHINA, BorderDirection.NORTH),
    ),
    Country.VIETNAM: (
        DirectionalNeighbor(Country.CHINA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.THAILAND, BorderDirection.WEST),
    ),
    Country.THAILAND: (
        DirectionalNeighbor(Country.VIETNAM, BorderDirection.EAST),
        DirectionalNeighbor(Country.MALAYSIA, BorderDirection.SOUTH),
    ),
    Country.MALAYSIA: (
        DirectionalNeighbor(Country.THAILAND, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SINGAPORE, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.INDONESIA, BorderDirection.SOUTH),
    ),
    Country.SINGAPORE: (
        DirectionalNeighbor(Country.MALAYSIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.INDONESIA, BorderDirection.SOUTH),
    ),
    Country.INDONESIA: (
        DirectionalNeighbor(Country.MALAYSIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SINGAPORE, BorderDirection.NORTH),
        DirectionalNeighbor(Country.PHILIPPINES, BorderDirection.NORTH),
        DirectionalNeighbor(Country.PAPUA_NEW_GUINEA, BorderDirection.EAST),
        DirectionalNeighbor(Country.AUSTRALIA, BorderDirection.SOUTH),
    ),
    Country.PHILIPPINES: (
        DirectionalNeighbor(Country.INDONESIA, BorderDirection.SOUTH),
    ),
    # Middle East
    Country.TURKEY: (
        DirectionalNeighbor(Country.GREECE, BorderDirection.WEST),
        DirectionalNeighbor(Country.BULGARIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.SYRIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.IRAQ, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.IRAN, BorderDirection.EAST),
    ),
    Country.SYRIA: (
        DirectionalNeighbor(Country.TURKEY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.IRAQ, BorderDirection.EAST),
        DirectionalNeighbor(Country.JORDAN, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.LEBANON, BorderDirection.WEST),
        DirectionalNeighbor(Country.ISRAEL, BorderDirection.SOUTH),
    ),
    Country.LEBANON: (
        DirectionalNeighbor(Country.SYRIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.ISRAEL, BorderDirection.SOUTH),
    ),
    Country.ISRAEL: (
        DirectionalNeighbor(Country.LEBANON, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SYRIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.JORDAN, BorderDirection.EAST),
        DirectionalNeighbor(Country.EGYPT, BorderDirection.SOUTH),
    ),
    Country.JORDAN: (
        DirectionalNeighbor(Country.SYRIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.IRAQ, BorderDirection.EAST),
        DirectionalNeighbor(Country.SAUDI_ARABIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.ISRAEL, BorderDirection.WEST),
    ),
    Country.SAUDI_ARABIA: (
        DirectionalNeighbor(Country.JORDAN, BorderDirection.NORTH),
        DirectionalNeighbor(Country.IRAQ, BorderDirection.NORTH),
        DirectionalNeighbor(Country.UAE, BorderDirection.EAST),
    ),
    Country.UAE: (
        DirectionalNeighbor(Country.SAUDI_ARABIA, BorderDirection.WEST),
    ),
    # Africa
    Country.EGYPT: (
        DirectionalNeighbor(Country.ISRAEL, BorderDirection.NORTH),
        DirectionalNeighbor(Country.LIBYA, BorderDirection.WEST),
        DirectionalNeighbor(Country.SUDAN, BorderDirection.SOUTH),
    ),
    Country.LIBYA: (
        DirectionalNeighbor(Country.EGYPT, BorderDirection.EAST),
        DirectionalNeighbor(Country.TUNISIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.ALGERIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.SUDAN, BorderDirection.SOUTH),
    ),
    Country.TUNISIA: (
        DirectionalNeighbor(Country.ALGERIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.LIBYA, BorderDirection.EAST),
    ),
    Country.ALGERIA: (
        DirectionalNeighbor(Country.MOROCCO, BorderDirection.WEST),
        DirectionalNeighbor(Country.TUNISIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.LIBYA, BorderDirection.EAST),
    ),
    Country.MOROCCO: (
        DirectionalNeighbor(Country.ALGERIA, BorderDirection.EAST),
    ),
    Country.ETHIOPIA: (
        DirectionalNeighbor(Country.SUDAN, BorderDirection.WEST),
        DirectionalNeighbor(Country.KENYA, BorderDirection.SOUTH),
    ),
    Country.KENYA: (
        DirectionalNeighbor(Country.ETHIOPIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SUDAN, BorderDirection.NORTH),
        DirectionalNeighbor(Country.TANZANIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.UGANDA, BorderDirection.WEST),
    ),
    Country.TANZANIA: (
        DirectionalNeighbor(Country.KENYA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.UGANDA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.ZAMBIA, BorderDirection.SOUTH),
    ),
    Country.UGANDA: (
        DirectionalNeighbor(Country.KENYA, BorderDirection.EAST),
        DirectionalNeighbor(Country.TANZANIA, BorderDirection.SOUTH),
    ),
    Country.ZAMBIA: (
        DirectionalNeighbor(Country.TANZANIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.ZIMBABWE, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.ANGOLA, BorderDirection.WEST),
    ),
    Country.ZIMBABWE: (
        DirectionalNeighbor(Country.ZAMBIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SOUTH_AFRICA, BorderDirection.SOUTH),
    ),
    Country.ANGOLA: (
        DirectionalNeighbor(Country.ZAMBIA, BorderDirection.EAST),
    ),
    Country.SOUTH_AFRICA: (
        DirectionalNeighbor(Country.ZIMBABWE, BorderDirection.NORTH),
    ),
    Country.NIGERIA: (
        DirectionalNeighbor(Country.GHANA, BorderDirection.WEST),
    ),
    Country.GHANA: (
        DirectionalNeighbor(Country.NIGERIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.SENEGAL, BorderDirection.WEST),
    ),
    Country.SENEGAL: (
        DirectionalNeighbor(Country.GHANA, BorderDirection.EAST),
    ),
    # Oceania
    Country.AUSTRALIA: (
        DirectionalNeighbor(Country.INDONESIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.PAPUA_NEW_GUINEA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.NEW_ZEALAND, BorderDirection.EAST),
    ),
    Country.NEW_ZEALAND: (
        DirectionalNeighbor(Country.AUSTRALIA, BorderDirection.WEST),
    ),
    Country.PAPUA_NEW_GUINEA: (
        DirectionalNeighbor(Country.INDONESIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.AUSTRALIA, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.SOLOMON_ISLANDS, BorderDirection.EAST),
    ),
    Country.FIJI: (
        DirectionalNeighbor(Country.VANUATU, BorderDirection.WEST),
        DirectionalNeighbor(Country.TONGA, BorderDirection.EAST),
    ),
    Country.SOLOMON_ISLANDS: (
        DirectionalNeighbor(Country.PAPUA_NEW_GUINEA, BorderDirection.WEST),
        DirectionalNeighbor(Country.VANUATU, BorderDirection.SOUTH),
    ),
    Country.VANUATU: (
        DirectionalNeighbor(Country.SOLOMON_ISLANDS, BorderDirection.NORTH),
        DirectionalNeighbor(Country.FIJI, BorderDirection.EAST),
    ),
    Country.SAMOA: (
        DirectionalNeighbor(Country.TONGA, BorderDirection.SOUTH),
    ),
    Country.TONGA: (
        DirectionalNeighbor(Country.FIJI, BorderDirection.WEST),
        DirectionalNeighbor(Country.SAMOA, BorderDirection.NORTH),
    ),
    Country.KIRIBATI: (),
    Country.MICRONESIA: (
        DirectionalNeighbor(Country.PALAU, BorderDirection.WEST),
        DirectionalNeighbor(Country.MARSHALL_ISLANDS, BorderDirection.EAST),
    ),
    Country.PALAU: (
        DirectionalNeighbor(Country.MICRONESIA, BorderDirection.EAST),
    ),
    Country.MARSHALL_ISLANDS: (
        DirectionalNeighbor(Country.MICRONESIA, BorderDirection.WEST),
    ),
    # Middle East additions
    Country.IRAN: (
        DirectionalNeighbor(Country.IRAQ, BorderDirection.WEST),
        DirectionalNeighbor(Country.TURKEY, BorderDirection.WEST),
        DirectionalNeighbor(Country.PAKISTAN, BorderDirection.EAST),
        DirectionalNeighbor(Country.SAUDI_ARABIA, BorderDirection.SOUTH),
    ),
    Country.IRAQ: (
        DirectionalNeighbor(Country.IRAN, BorderDirection.EAST),
        DirectionalNeighbor(Country.TURKEY, BorderDirection.NORTH),
        DirectionalNeighbor(Country.SYRIA, BorderDirection.WEST),
        DirectionalNeighbor(Country.SAUDI_ARABIA, BorderDirection.SOUTH),
    ),
    Country.SUDAN: (
        DirectionalNeighbor(Country.EGYPT, BorderDirection.NORTH),
        DirectionalNeighbor(Country.LIBYA, BorderDirection.WEST),
        DirectionalNeighbor(Country.ETHIOPIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.KENYA, BorderDirection.SOUTH),
    ),
    Country.PAKISTAN: (
        DirectionalNeighbor(Country.IRAN, BorderDirection.WEST),
        DirectionalNeighbor(Country.INDIA, BorderDirection.EAST),
        DirectionalNeighbor(Country.CHINA, BorderDirection.NORTH),
    ),
    Country.LITHUANIA: (
        DirectionalNeighbor(Country.LATVIA, BorderDirection.NORTH),
        DirectionalNeighbor(Country.POLAND, BorderDirection.SOUTH),
        DirectionalNeighbor(Country.RUSSIA, BorderDirection.EAST),
    ),
})


def opposite_direction(direction: BorderDirection) -> BorderDirection:
    """NORTH<->SOUTH, EAST<->WEST."""

    return _OPPOSITES[direction]


def directional_neighbors(country: Country) -> tuple[DirectionalNeighbor, ...]:
    return NEIGHBOR_DIRECTIONS.get(country, ())


def neighbors_of(country: Country) -> list[Country]:
    return [entry.country for entry in directional_neighbors(country)]


def direction_to(country: Country, neighbor: Country) -> BorderDirection | None:
    """Direction in which ``neighbor`` lies as declared by ``country``."""

    for entry in directional_neighbors(country):
        if entry.country == neighbor:
            return entry.direction
    return None


def facing_direction(attacker: Country, defender: Country) -> BorderDirection | None:
    """Side of ``defender`` that faces an attack launched by ``attacker``.

    The attacker's own declaration wins; when it does not list the defender,
    the defender's declaration of the attacker is used as is.
    """

    towards_defender = direction_to(attacker, defender)
    if towards_defender is not None:
        return opposite_direction(towards_defender)
    return direction_to(defender, attacker)


def asymmetric_neighbor_pairs() -> list[tuple[Country, Country, BorderDirection, BorderDirection | None]]:
    """Report neighbour declarations whose reverse edge disagrees.

    Each item is ``(country, neighbor, declared, reverse)`` where ``reverse``
    is what ``neighbor`` declares for ``country`` (``None`` when it does not
    list it at all).  Consistent pairs have ``reverse == opposite(declared)``.
    """

    issues = []
    for country, entries in NEIGHBOR_DIRECTIONS.items():
        for entry in entries:
            reverse = direction_to(entry.country, country)
            if reverse != opposite_direction(entry.direction):
                issues.append((country, entry.country, entry.direction, reverse))
    return issues


def log_asymmetries() -> int:
    issues = asymmetric_neighbor_pairs()
    for country, neighbor, declared, reverse in issues:
        logger.debug(
            "Neighbour declaration %s->%s is %s but reverse is %s",
            country.value,
            neighbor.value,
            declared.value,
            reverse.value if reverse is not None else "missing",
        )
    return len(issues)
