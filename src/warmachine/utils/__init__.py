"""Utility functions for the war-machine core."""

from warmachine.utils.rng import generate_seed, random_choice, roll_dice

__all__ = [
    "generate_seed",
    "random_choice",
    "roll_dice",
]
