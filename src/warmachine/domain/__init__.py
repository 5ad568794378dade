"""Domain model for the war machine.

This package hosts every rule of the war core.  It exposes:

* Dataclasses describing units, country profiles and static geography
  (see :mod:`models`).
* Enumerations and strongly-typed identifiers used across the rules layer.
* Rule configuration objects (see :mod:`rules_config`).
* The static adjacency, border-city and city-grid tables, validated at load.
* Pure rule functions for units, mobilization, battle rounds and turns.

Everything operates in-memory on an explicitly constructed :class:`World`;
persistence and rendering belong to the host application.
"""

from . import (
    battle,
    border_cities,
    cities,
    country,
    enums,
    fronts,
    geometry,
    mobilization,
    models,
    neighbors,
    profiles,
    rules_config,
    turn,
    units,
    validation,
    wars,
    world,
)

__all__ = [
    "battle",
    "border_cities",
    "cities",
    "country",
    "enums",
    "fronts",
    "geometry",
    "mobilization",
    "models",
    "neighbors",
    "profiles",
    "rules_config",
    "turn",
    "units",
    "validation",
    "wars",
    "world",
]
