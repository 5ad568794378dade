"""Starting country profiles.

Ratings run from 1 to 5.  Corruption follows the Corruption Perceptions
Index: 1 is very clean (CPI 80+), 5 is highly corrupt (CPI below 30).
Branch tuples are ordered army, navy, airforce, special forces, drones.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from warmachine.domain.enums import Country, PoliticalStance
from warmachine.domain.models import BranchRatings, CountryProfile

Ratings = tuple[int, int, int, int, int]


def _profile(
    budget: int,
    standards: int,
    corruption: int,
    strength: Ratings,
    production: Ratings,
    tech: Ratings,
    stance: PoliticalStance,
) -> CountryProfile:
    return CountryProfile(
        budget=budget,
        standards=standards,
        corruption=corruption,
        military_strength=BranchRatings(*strength),
        industrial_production=BranchRatings(*production),
        industrial_tech=BranchRatings(*tech),
        political_stance=stance,
    )


# fmt: off
STARTING_PROFILES: Mapping[Country, CountryProfile] = MappingProxyType({
    Country.USA: _profile(5, 5, 2, (5, 5, 5, 5, 5), (5, 5, 5, 4, 5), (5, 5, 5, 5, 5), PoliticalStance.INTERVENTIONIST),
    Country.CHINA: _profile(5, 3, 3, (5, 4, 4, 3, 4), (5, 4, 4, 2, 4), (4, 4, 4, 3, 4), PoliticalStance.EXPANSIONIST),
    Country.RUSSIA: _profile(4, 2, 5, (4, 3, 4, 3, 4), (4, 3, 4, 2, 4), (3, 3, 3, 2, 3), PoliticalStance.EXPANSIONIST),
    Country.INDIA: _profile(3, 3, 3, (3, 3, 3, 2, 3), (3, 3, 3, 1, 3), (3, 3, 3, 2, 3), PoliticalStance.DEFENSIVE),
    Country.GERMANY: _profile(3, 5, 1, (4, 3, 4, 3, 4), (4, 3, 4, 2, 4), (5, 4, 5, 4, 5), PoliticalStance.COOPERATIVE),
    Country.FRANCE: _profile(3, 4, 2, (3, 3, 4, 2, 3), (3, 3, 4, 1, 3), (4, 4, 4, 3, 4), PoliticalStance.INTERVENTIONIST),
    Country.UK: _profile(3, 5, 2, (3, 4, 3, 2, 3), (3, 4, 3, 1, 3), (4, 4, 4, 3, 4), PoliticalStance.COOPERATIVE),
    Country.JAPAN: _profile(3, 5, 2, (3, 4, 3, 2, 3), (3, 4, 3, 1, 3), (5, 5, 5, 4, 5), PoliticalStance.DEFENSIVE),
    Country.CANADA: _profile(2, 5, 2, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (4, 4, 4, 3, 4), PoliticalStance.COOPERATIVE),
    Country.AUSTRALIA: _profile(2, 5, 2, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (4, 4, 4, 3, 4), PoliticalStance.COOPERATIVE),
    Country.BRAZIL: _profile(2, 3, 4, (3, 2, 2, 1, 2), (3, 2, 2, 1, 2), (3, 3, 3, 2, 3), PoliticalStance.NEUTRAL),
    Country.MEXICO: _profile(2, 3, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.ARGENTINA: _profile(2, 3, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.SOUTH_AFRICA: _profile(2, 3, 3, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (3, 2, 3, 2, 3), PoliticalStance.NEUTRAL),
    Country.NORWAY: _profile(2, 5, 1, (2, 3, 2, 1, 2), (2, 3, 2, 1, 2), (4, 4, 4, 3, 4), PoliticalStance.COOPERATIVE),
    Country.SWEDEN: _profile(2, 5, 1, (2, 2, 3, 1, 2), (2, 2, 3, 1, 2), (4, 4, 4, 3, 4), PoliticalStance.NEUTRAL),
    Country.SPAIN: _profile(2, 4, 2, (2, 3, 2, 1, 2), (2, 3, 2, 1, 2), (3, 3, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.ITALY: _profile(2, 4, 3, (3, 3, 3, 2, 3), (3, 3, 3, 1, 3), (3, 3, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.POLAND: _profile(2, 3, 3, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (3, 2, 3, 2, 3), PoliticalStance.DEFENSIVE),
    Country.SAUDI_ARABIA: _profile(4, 4, 3, (2, 2, 3, 1, 2), (2, 2, 3, 1, 2), (3, 3, 4, 2, 3), PoliticalStance.DEFENSIVE),
    Country.ISRAEL: _profile(3, 5, 2, (3, 3, 4, 2, 3), (3, 3, 4, 1, 3), (5, 4, 5, 4, 5), PoliticalStance.DEFENSIVE),
    Country.TURKEY: _profile(3, 3, 4, (3, 3, 3, 2, 3), (3, 3, 3, 1, 3), (3, 3, 3, 2, 3), PoliticalStance.DEFENSIVE),
    Country.IRAN: _profile(3, 2, 5, (3, 2, 2, 1, 2), (3, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.EXPANSIONIST),
    Country.IRAQ: _profile(2, 2, 5, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.SYRIA: _profile(1, 1, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.JORDAN: _profile(2, 3, 3, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.LEBANON: _profile(1, 2, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.UAE: _profile(3, 4, 2, (2, 2, 3, 1, 2), (2, 2, 3, 1, 2), (3, 3, 4, 2, 3), PoliticalStance.NEUTRAL),
    Country.EGYPT: _profile(2, 2, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.ETHIOPIA: _profile(1, 2, 4, (2, 1, 1, 1, 1), (2, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.KENYA: _profile(1, 2, 4, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 1, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.NIGERIA: _profile(2, 2, 5, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.MOROCCO: _profile(2, 3, 3, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.ALGERIA: _profile(2, 2, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.PAKISTAN: _profile(2, 2, 5, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.INDONESIA: _profile(2, 3, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.SOUTH_KOREA: _profile(3, 4, 2, (3, 4, 3, 2, 3), (3, 4, 3, 1, 3), (4, 4, 4, 3, 4), PoliticalStance.DEFENSIVE),
    Country.VIETNAM: _profile(2, 2, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.THAILAND: _profile(2, 3, 4, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.MALAYSIA: _profile(2, 3, 3, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (3, 2, 3, 2, 3), PoliticalStance.NEUTRAL),
    Country.SINGAPORE: _profile(2, 5, 1, (1, 3, 2, 1, 2), (1, 3, 2, 1, 2), (4, 4, 4, 3, 4), PoliticalStance.NEUTRAL),
    Country.PHILIPPINES: _profile(1, 2, 4, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.NETHERLANDS: _profile(2, 5, 1, (2, 3, 2, 1, 2), (2, 3, 2, 1, 2), (4, 4, 4, 3, 4), PoliticalStance.COOPERATIVE),
    Country.BELGIUM: _profile(2, 4, 2, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (3, 3, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.SWITZERLAND: _profile(2, 5, 1, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (4, 2, 4, 2, 3), PoliticalStance.NEUTRAL),
    Country.AUSTRIA: _profile(1, 4, 2, (1, 1, 2, 1, 1), (1, 1, 2, 1, 1), (3, 2, 3, 2, 3), PoliticalStance.NEUTRAL),
    Country.GREECE: _profile(2, 3, 3, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.PORTUGAL: _profile(1, 3, 2, (1, 2, 1, 1, 1), (1, 2, 1, 1, 1), (3, 3, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.CZECH_REPUBLIC: _profile(1, 3, 3, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (3, 2, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.HUNGARY: _profile(1, 3, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 1, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.ROMANIA: _profile(2, 2, 3, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.COOPERATIVE),
    Country.BULGARIA: _profile(1, 2, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.COOPERATIVE),
    Country.SERBIA: _profile(1, 2, 4, (2, 1, 1, 1, 1), (2, 1, 1, 1, 1), (2, 1, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.CROATIA: _profile(1, 3, 3, (1, 2, 1, 1, 1), (1, 2, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.COOPERATIVE),
    Country.UKRAINE: _profile(2, 2, 4, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.FINLAND: _profile(2, 5, 1, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (4, 3, 4, 3, 4), PoliticalStance.NEUTRAL),
    Country.DENMARK: _profile(2, 5, 1, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (3, 3, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.COLOMBIA: _profile(2, 2, 3, (2, 1, 2, 1, 2), (2, 1, 2, 1, 2), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.VENEZUELA: _profile(1, 1, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.CHILE: _profile(2, 3, 2, (2, 2, 2, 1, 2), (2, 2, 2, 1, 2), (3, 3, 3, 2, 3), PoliticalStance.NEUTRAL),
    Country.PERU: _profile(1, 2, 4, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.ECUADOR: _profile(1, 2, 4, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.NEW_ZEALAND: _profile(1, 5, 1, (1, 2, 1, 1, 1), (1, 2, 1, 1, 1), (3, 3, 3, 2, 3), PoliticalStance.COOPERATIVE),
    Country.TANZANIA: _profile(1, 2, 4, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.SUDAN: _profile(1, 1, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.LIBYA: _profile(2, 2, 5, (2, 1, 1, 1, 1), (2, 1, 1, 1, 1), (2, 1, 1, 1, 1), PoliticalStance.EXPANSIONIST),
    Country.TUNISIA: _profile(1, 2, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 1, 2, 1, 2), PoliticalStance.NEUTRAL),
    Country.GHANA: _profile(1, 2, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.UGANDA: _profile(1, 2, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.ZAMBIA: _profile(1, 2, 4, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.ZIMBABWE: _profile(1, 1, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.SENEGAL: _profile(1, 2, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.ANGOLA: _profile(2, 2, 4, (2, 1, 1, 1, 1), (2, 1, 1, 1, 1), (2, 1, 1, 1, 1), PoliticalStance.DEFENSIVE),
    Country.PAPUA_NEW_GUINEA: _profile(1, 1, 5, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.FIJI: _profile(1, 2, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.SOLOMON_ISLANDS: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.VANUATU: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.SAMOA: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.TONGA: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.KIRIBATI: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.MICRONESIA: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.PALAU: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.MARSHALL_ISLANDS: _profile(1, 1, 3, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), PoliticalStance.NEUTRAL),
    Country.ESTONIA: _profile(1, 4, 2, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (3, 2, 3, 2, 3), PoliticalStance.DEFENSIVE),
    Country.LATVIA: _profile(1, 3, 2, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
    Country.LITHUANIA: _profile(1, 3, 2, (1, 1, 1, 1, 1), (1, 1, 1, 1, 1), (2, 2, 2, 1, 2), PoliticalStance.DEFENSIVE),
})
# fmt: on


def profile_of(country: Country) -> CountryProfile:
    try:
        return STARTING_PROFILES[country]
    except KeyError:
        raise KeyError(f"No starting profile for {country}") from None


def countries_with_stance(
    stance: PoliticalStance,
    profiles: Mapping[Country, CountryProfile] = STARTING_PROFILES,
) -> list[Country]:
    return [country for country, profile in profiles.items() if profile.political_stance == stance]
