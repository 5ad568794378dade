"""Deterministic Random Number Generator (RNG) for the war machine.

All randomness is seeded from world state (world seed, turn, context) so that:
- Reproducibility: the same seed always produces the same results
- Fairness: no hidden randomness between turns
- Bug reproduction: a turn can be replayed exactly

Examples:
    >>> seed = generate_seed("war-machine", 3, "battle:russia:ukraine:aggressor")
    >>> result = roll_dice(seed, "2d6")
    >>> result["seed"]
    'war-machine:3:battle:russia:ukraine:aggressor'

    >>> result = random_choice(seed, ["latvia", "estonia"])
    >>> result["choice"] in ("latvia", "estonia")
    True
"""

from __future__ import annotations

import hashlib
import random
import re
from typing import Any


def generate_seed(world_seed: str, turn: int, context: str) -> str:
    """Generate deterministic seed from world state.

    Format: "world_seed:turn:context"

    Args:
        world_seed: Root seed of the world (from settings)
        turn: Current turn number
        context: What the roll is for (e.g., 'initial_war:russia', 'battle:...')

    Returns:
        Seed string for RNG

    Examples:
        >>> generate_seed("alpha", 0, "initial_war:china")
        'alpha:0:initial_war:china'

    Raises:
        ValueError: If turn is negative
    """
    if turn < 0:
        raise ValueError(f"turn must be non-negative, got {turn}")

    return f"{world_seed}:{turn}:{context}"


def _seed_to_int(seed: str) -> int:
    """Stable 64-bit integer for ``random.Random`` (first 8 bytes of SHA-256)."""
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def _parse_dice_notation(notation: str) -> tuple[int, int]:
    """Split ``NdM`` into (dice, sides); battle rounds use the ruleset's ``2d6``."""
    match = re.fullmatch(r"(\d+)d(\d+)", notation.lower())
    if match is None:
        raise ValueError(
            f"Invalid dice notation: '{notation}'. Expected format: NdM (e.g., '2d6', '1d20')"
        )

    num_dice, num_sides = int(match.group(1)), int(match.group(2))
    if num_dice <= 0:
        raise ValueError(f"Number of dice must be positive, got {num_dice}")
    if num_sides <= 0:
        raise ValueError(f"Number of sides must be positive, got {num_sides}")
    return num_dice, num_sides


def roll_dice(seed: str, notation: str = "2d6") -> dict[str, Any]:
    """Roll the dice for one side of a battle round.

    The aggressor and defender of a war each roll under their own seed
    (``battle:<aggressor>:<defender>:aggressor`` and ``...:defender``), so
    replaying a turn of the same world reproduces every round exactly.

    Args:
        seed: Seed string built by :func:`generate_seed`
        notation: Dice notation, ``BattleRules.roll_notation`` in practice

    Returns:
        Dictionary with ``notation``, the individual ``rolls``, their
        ``total`` (what the round uses) and the ``seed``.

    Raises:
        ValueError: If dice notation is invalid
    """
    num_dice, num_sides = _parse_dice_notation(notation)
    rng = random.Random(_seed_to_int(seed))
    rolls = [rng.randint(1, num_sides) for _ in range(num_dice)]
    return {"notation": notation, "rolls": rolls, "total": sum(rolls), "seed": seed}


def random_choice(seed: str, options: list[Any]) -> dict[str, Any]:
    """Pick one of ``options``; used when an expansionist country picks its target.

    The opening-war seed is ``initial_war:<aggressor>`` on the world's turn,
    so a campaign started from the same world seed opens the same wars.

    Returns:
        Dictionary with the ``choice``, its ``index`` and the ``seed``.

    Raises:
        ValueError: If ``options`` is empty (a country with no weaker
            neighbour never gets this far)
    """
    if not options:
        raise ValueError("options list cannot be empty")

    index = random.Random(_seed_to_int(seed)).randrange(len(options))
    return {"choice": options[index], "index": index, "seed": seed}
