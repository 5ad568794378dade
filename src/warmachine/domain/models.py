"""Dataclasses describing every war-machine entity.

Units are plain mutable records.  The rules that read or change them live in
:mod:`warmachine.domain.units`, so the garrison and assault variants share one
attribute struct and a single dispatch point for per-turn behaviour.

Static configuration (neighbours, border cities, the city grid, starting
profiles) is frozen and built once at import time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

from warmachine.domain.enums import BorderDirection, Country, PoliticalStance, UnitBranch, UnitKind

# --- Strongly typed identifiers -------------------------------------------------

UnitID = NewType("UnitID", str)
CityID = NewType("CityID", str)
FrontID = NewType("FrontID", str)


# --- Static configuration -------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DirectionalNeighbor:
    """Edge of the adjacency graph: where ``country`` lies as seen from the owner."""

    country: Country
    direction: BorderDirection


@dataclass(frozen=True, slots=True)
class BorderCity:
    """Settlement fronting one compass side of its country."""

    city_id: CityID
    city_name: str
    direction: BorderDirection


@dataclass(frozen=True, slots=True)
class CityData:
    """City placed on its country's 10x10 grid."""

    name: str
    x: int
    y: int
    is_capital: bool = False


@dataclass(frozen=True, slots=True)
class BranchRatings:
    """Per-branch 1-5 ratings."""

    army: int
    navy: int
    airforce: int
    special_forces: int
    drones: int

    def for_branch(self, branch: UnitBranch) -> int:
        return getattr(self, branch.value)

    def average(self, branches: tuple[UnitBranch, ...] = tuple(UnitBranch)) -> float:
        return sum(self.for_branch(b) for b in branches) / len(branches)


@dataclass(frozen=True, slots=True)
class CountryProfile:
    """Starting attributes of a country."""

    budget: int
    standards: int
    corruption: int
    military_strength: BranchRatings
    industrial_production: BranchRatings
    industrial_tech: BranchRatings
    political_stance: PoliticalStance


# --- Units ----------------------------------------------------------------------


@dataclass(slots=True)
class UnitAttributes:
    """Readiness attributes, each kept within 0..100."""

    supplies: float = 80.0
    organization: float = 70.0
    training: float = 60.0


@dataclass(slots=True, kw_only=True)
class UnitCore:
    """Fields shared by both unit variants."""

    id: UnitID
    country: Country
    branch: UnitBranch
    strength: float
    max_strength: float
    equipment: int
    attributes: UnitAttributes = field(default_factory=UnitAttributes)


@dataclass(slots=True, kw_only=True)
class RegularUnit(UnitCore):
    """Garrison stationed in a city."""

    city_id: CityID

    @property
    def kind(self) -> UnitKind:
        return UnitKind.REGULAR

    @property
    def location(self) -> str:
        return self.city_id


@dataclass(slots=True, kw_only=True)
class AssaultUnit(UnitCore):
    """Offensive formation committed to a front."""

    front_id: FrontID
    morale: float = 80.0
    momentum: float = 0.0

    @property
    def kind(self) -> UnitKind:
        return UnitKind.ASSAULT

    @property
    def location(self) -> str:
        return self.front_id


Unit = RegularUnit | AssaultUnit
