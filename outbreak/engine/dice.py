"""Random source for the simulation."""

import logging
import random
from typing import Optional, Sequence, TypeVar

from outbreak.interface import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DiceRoller:
    """Seedable random source backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize dice roller.

        Args:
            seed: Optional seed for reproducible games
        """
        self.seed = seed
        self._rng = random.Random(seed)
        self._roll_count = 0

    @property
    def roll_count(self) -> int:
        """Number of draws made so far."""
        return self._roll_count

    def randint(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], inclusive."""
        if lo > hi:
            raise ValueError(f"Empty range [{lo}, {hi}]")
        self._roll_count += 1
        result = self._rng.randint(lo, hi)
        logger.debug(f"roll #{self._roll_count}: randint({lo}, {hi}) -> {result}")
        return result

    def choice(self, seq: Sequence[T]) -> T:
        """Uniformly selected element of a non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        self._roll_count += 1
        result = seq[self._rng.randrange(len(seq))]
        logger.debug(f"roll #{self._roll_count}: choice of {len(seq)} -> {result!r}")
        return result


def roll_d100(dice: RandomSource) -> int:
    """Percentile roll in [1, 100]."""
    return dice.randint(1, 100)


def percent_check(dice: RandomSource, chance: int) -> bool:
    """Succeeds when a percentile roll is at or under ``chance``."""
    return roll_d100(dice) <= chance
