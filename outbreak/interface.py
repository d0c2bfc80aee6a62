"""Capabilities the simulation consumes from its host."""

from enum import Enum
from typing import Optional, Protocol, Sequence, TypeVar

from outbreak.models.actions import DecisionPoint
from outbreak.models.events import GameEvent
from outbreak.models.items import ItemId
from outbreak.models.state import StatusSnapshot

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class RandomSource(Protocol):
    """Uniform integer draws and index selection; tests substitute fixed sequences."""

    def randint(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], inclusive."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Uniformly selected element of a non-empty sequence."""
        ...


class GameInterface(Protocol):
    """Presentation and input collaborator."""

    def choose_action(self, point: DecisionPoint, options: Sequence[E]) -> Optional[E]:
        """
        Ask the player to pick one of the options.

        Returns:
            The chosen option, or None if the input was not recognized
        """
        ...

    def choose_slot(self, point: DecisionPoint, items: Sequence[ItemId]) -> Optional[int]:
        """
        Ask the player to pick an inventory slot.

        Returns:
            0-based slot index (not guaranteed to be in range), or None
        """
        ...

    def render(self, snapshot: StatusSnapshot) -> None:
        """Display the current status."""
        ...

    def notify(self, event: GameEvent) -> None:
        """Report an outcome event."""
        ...
