"""Enumerations shared by the war-machine domain."""

from __future__ import annotations

from enum import StrEnum


class Country(StrEnum):
    """Closed set of nations known to the simulation."""

    USA = "usa"
    CANADA = "canada"
    MEXICO = "mexico"
    BRAZIL = "brazil"
    ARGENTINA = "argentina"
    VENEZUELA = "venezuela"
    COLOMBIA = "colombia"
    CHILE = "chile"
    PERU = "peru"
    ECUADOR = "ecuador"
    UK = "uk"
    FRANCE = "france"
    SPAIN = "spain"
    PORTUGAL = "portugal"
    GERMANY = "germany"
    ITALY = "italy"
    POLAND = "poland"
    NORWAY = "norway"
    SWEDEN = "sweden"
    FINLAND = "finland"
    DENMARK = "denmark"
    NETHERLANDS = "netherlands"
    BELGIUM = "belgium"
    SWITZERLAND = "switzerland"
    AUSTRIA = "austria"
    CZECH_REPUBLIC = "czech_republic"
    HUNGARY = "hungary"
    ROMANIA = "romania"
    BULGARIA = "bulgaria"
    GREECE = "greece"
    SERBIA = "serbia"
    CROATIA = "croatia"
    UKRAINE = "ukraine"
    ESTONIA = "estonia"
    LATVIA = "latvia"
    RUSSIA = "russia"
    CHINA = "china"
    JAPAN = "japan"
    SOUTH_KOREA = "south_korea"
    INDIA = "india"
    VIETNAM = "vietnam"
    THAILAND = "thailand"
    MALAYSIA = "malaysia"
    SINGAPORE = "singapore"
    INDONESIA = "indonesia"
    PHILIPPINES = "philippines"
    TURKEY = "turkey"
    SYRIA = "syria"
    LEBANON = "lebanon"
    ISRAEL = "israel"
    JORDAN = "jordan"
    SAUDI_ARABIA = "saudi_arabia"
    UAE = "uae"
    EGYPT = "egypt"
    LIBYA = "libya"
    TUNISIA = "tunisia"
    ALGERIA = "algeria"
    MOROCCO = "morocco"
    ETHIOPIA = "ethiopia"
    KENYA = "kenya"
    TANZANIA = "tanzania"
    UGANDA = "uganda"
    ZAMBIA = "zambia"
    ZIMBABWE = "zimbabwe"
    ANGOLA = "angola"
    SOUTH_AFRICA = "south_africa"
    NIGERIA = "nigeria"
    GHANA = "ghana"
    SENEGAL = "senegal"
    AUSTRALIA = "australia"
    NEW_ZEALAND = "new_zealand"
    PAPUA_NEW_GUINEA = "papua_new_guinea"
    FIJI = "fiji"
    SOLOMON_ISLANDS = "solomon_islands"
    VANUATU = "vanuatu"
    SAMOA = "samoa"
    TONGA = "tonga"
    KIRIBATI = "kiribati"
    MICRONESIA = "micronesia"
    PALAU = "palau"
    MARSHALL_ISLANDS = "marshall_islands"
    IRAN = "iran"
    IRAQ = "iraq"
    SUDAN = "sudan"
    PAKISTAN = "pakistan"
    LITHUANIA = "lithuania"


class BorderDirection(StrEnum):
    """Compass side of a country facing a neighbour."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class UnitBranch(StrEnum):
    """Military domain a unit belongs to."""

    ARMY = "army"
    NAVY = "navy"
    AIRFORCE = "airforce"
    SPECIAL_FORCES = "special_forces"
    DRONES = "drones"


class UnitKind(StrEnum):
    REGULAR = "regular"
    ASSAULT = "assault"


class PoliticalStance(StrEnum):
    """Foreign-policy posture of a country's government."""

    ISOLATIONIST = "isolationist"
    INTERVENTIONIST = "interventionist"
    EXPANSIONIST = "expansionist"
    NEUTRAL = "neutral"
    DEFENSIVE = "defensive"
    COOPERATIVE = "cooperative"


class WarStatus(StrEnum):
    ACTIVE = "active"
    CONCLUDED = "concluded"


class WarConclusion(StrEnum):
    """Reason a war moved from ACTIVE to CONCLUDED."""

    CAPITULATION = "capitulation"
    FRONTIER_COLLAPSED = "frontier_collapsed"
    ATTACK_REPELLED = "attack_repelled"
    NEGOTIATED_PEACE = "negotiated_peace"


class BattleWinner(StrEnum):
    AGGRESSOR = "aggressor"
    DEFENDER = "defender"
    DRAW = "draw"
