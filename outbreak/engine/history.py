"""Outcome event history."""

import logging
from typing import Any, Callable, Optional

from outbreak.models.events import EventKind, GameEvent

logger = logging.getLogger(__name__)


class EventLog:
    """Records outcome events in order and forwards each one to a listener."""

    def __init__(self, listener: Optional[Callable[[GameEvent], None]] = None) -> None:
        """
        Initialize empty event log.

        Args:
            listener: Optional callback invoked with every recorded event
        """
        self._events: list[GameEvent] = []
        self._listener = listener

    def record(self, kind: EventKind, **data: Any) -> GameEvent:
        """
        Record an event and notify the listener.

        Args:
            kind: Kind of event
            **data: Facts about the event

        Returns:
            Recorded GameEvent
        """
        event = GameEvent(sequence_number=len(self._events), kind=kind, data=data)
        self._events.append(event)
        logger.debug(f"event #{event.sequence_number}: {kind.value} {data}")
        if self._listener is not None:
            self._listener(event)
        return event

    def list_events(self) -> list[GameEvent]:
        """List all events."""
        return self._events.copy()

    def kinds(self) -> list[EventKind]:
        """Kinds of all events, in order."""
        return [event.kind for event in self._events]

    def get_latest(self) -> Optional[GameEvent]:
        """Get the latest event."""
        if self._events:
            return self._events[-1]
        return None

    def __len__(self) -> int:
        return len(self._events)
