"""Weighted random selection and loot tables."""

from typing import Sequence, TypeVar

from outbreak.interface import RandomSource
from outbreak.models.items import ItemId

T = TypeVar("T")

# Items found while searching an area
SEARCH_LOOT: tuple[tuple[ItemId, int], ...] = (
    (ItemId.CANNED_FOOD, 25),
    (ItemId.AMMO_PACK, 25),
    (ItemId.MEDKIT, 18),
    (ItemId.PISTOL, 18),
    (ItemId.SHOTGUN, 6),
    (ItemId.MOLOTOV, 8),
    (ItemId.MACHETE, 10),
)

# Weapons handed out by the "weapon" arrival event
WEAPON_DROPS: tuple[tuple[ItemId, int], ...] = (
    (ItemId.PISTOL, 20),
    (ItemId.SHOTGUN, 6),
    (ItemId.MOLOTOV, 8),
    (ItemId.MACHETE, 10),
)


def weighted_choice(dice: RandomSource, outcomes: Sequence[T], weights: Sequence[int]) -> T:
    """
    Draw one outcome with probability proportional to its weight.

    A single draw in [1, sum(weights)] is made; the first outcome whose
    running weight total reaches the draw is returned.

    Args:
        dice: Random source
        outcomes: Possible outcomes
        weights: Positive integer weight per outcome

    Returns:
        The selected outcome

    Raises:
        ValueError: If the sequences are empty, differ in length, or a weight is not positive
    """
    if not outcomes:
        raise ValueError("No outcomes to choose from")
    if len(outcomes) != len(weights):
        raise ValueError(f"Got {len(outcomes)} outcomes but {len(weights)} weights")
    if any(weight <= 0 for weight in weights):
        raise ValueError(f"Weights must be positive: {list(weights)}")

    draw = dice.randint(1, sum(weights))
    running = 0
    for outcome, weight in zip(outcomes, weights):
        running += weight
        if draw <= running:
            return outcome
    # Unreachable for a draw inside [1, total]
    raise ValueError(f"Draw {draw} exceeds total weight {running}")


def draw_from_table(dice: RandomSource, table: Sequence[tuple[T, int]]) -> T:
    """Weighted draw from a table of (outcome, weight) pairs."""
    outcomes = [outcome for outcome, _ in table]
    weights = [weight for _, weight in table]
    return weighted_choice(dice, outcomes, weights)
