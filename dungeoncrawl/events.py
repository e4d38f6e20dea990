"""The queue of running events."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from .event import Event

E = TypeVar("E", bound=Event)


class Events:
    """Runs events frame by frame and starts their follow-up events."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        self._events.append(event)

    def create_event(self, event_type: type[E], *args: Any, **kwargs: Any) -> E:
        """Construct an event, queue it and return it."""
        event = event_type(*args, **kwargs)
        self.add(event)
        return event

    def execute(self, engine: Any) -> None:
        """Run one frame of every current event, then queue follow-ups of finished ones."""
        if not self._events:
            return

        next_events: list[Event] = []
        for event in list(self._events):
            event.execute(engine)
            event.update()
            if event.is_done():
                event.when_done(engine)
                next_events.extend(event.next_events)

        self._events = [event for event in self._events if not event.is_done()]
        self._events.extend(next_events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)