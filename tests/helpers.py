"""Deterministic doubles for the random source and the player interface."""

from collections import deque
from typing import Iterable, Optional

from outbreak.models.events import EventKind


class ScriptedDice:
    """Random source that returns pre-scripted values in order.

    ``randint`` returns the next value (which must lie in the requested
    range); ``choice`` uses the next value as an index.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values = deque(values)
        self.calls: list[tuple] = []

    def push(self, *values: int) -> None:
        self._values.extend(values)

    @property
    def remaining(self) -> int:
        return len(self._values)

    def _next(self, description: str) -> int:
        if not self._values:
            raise AssertionError(f"Unscripted draw: {description}")
        return self._values.popleft()

    def randint(self, lo: int, hi: int) -> int:
        value = self._next(f"randint({lo}, {hi})")
        assert lo <= value <= hi, f"Scripted value {value} outside [{lo}, {hi}]"
        self.calls.append(("randint", lo, hi, value))
        return value

    def choice(self, seq):
        index = self._next(f"choice over {len(seq)}")
        assert 0 <= index < len(seq), f"Scripted index {index} outside sequence of {len(seq)}"
        self.calls.append(("choice", len(seq), index))
        return seq[index]


class ScriptedInterface:
    """Player interface that replays scripted decisions and records output."""

    def __init__(self, actions: Iterable = (), slots: Iterable[Optional[int]] = ()) -> None:
        self.actions = deque(actions)
        self.slots = deque(slots)
        self.decision_points: list = []
        self.snapshots: list = []
        self.events: list = []

    def choose_action(self, point, options):
        self.decision_points.append(point)
        if not self.actions:
            raise AssertionError(f"Unscripted decision at {point.value}")
        action = self.actions.popleft()
        assert action is None or action in options, f"{action!r} not offered at {point.value}"
        return action

    def choose_slot(self, point, items):
        self.decision_points.append(point)
        if not self.slots:
            raise AssertionError(f"Unscripted slot choice at {point.value}")
        return self.slots.popleft()

    def render(self, snapshot) -> None:
        self.snapshots.append(snapshot)

    def notify(self, event) -> None:
        self.events.append(event)

    def kinds(self) -> list[EventKind]:
        return [event.kind for event in self.events]


class RepeatingInterface(ScriptedInterface):
    """Interface that gives the same answer at every decision point."""

    def __init__(self, action) -> None:
        super().__init__()
        self.action = action

    def choose_action(self, point, options):
        self.decision_points.append(point)
        return self.action
