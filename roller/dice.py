"""Dice rolling primitives.

Every draw takes an optional random source. When omitted, the process-wide
``random`` module is used, so ``random.seed`` makes results reproducible.
"""

import random


def roll_die(size: int, rng: random.Random | None = None) -> int:
    """Roll a single die.

    Args:
        size: Number of sides (at least 1)
        rng: Random source (defaults to the ``random`` module)

    Returns:
        Uniformly distributed value in [1, size]

    Raises:
        ValueError: If size is less than 1
    """
    if size < 1:
        raise ValueError(f"Die must have at least 1 side, got {size}")
    source = rng if rng is not None else random
    return source.randint(1, size)


def roll_dice(num_dice: int, size: int, rng: random.Random | None = None) -> list[int]:
    """Roll several dice and return them sorted ascending.

    Args:
        num_dice: Number of dice to roll (0 yields an empty list)
        size: Number of sides on each die
        rng: Random source (defaults to the ``random`` module)

    Returns:
        Sorted list of individual results
    """
    return sorted(roll_die(size, rng) for _ in range(num_dice))
