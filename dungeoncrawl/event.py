"""Events: things that happen in the world over one or more frames."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Event(ABC):
    """Processed to completion before entities take more turns.

    Useful for animations, damage and other effects that entities cannot
    perform directly.
    """

    def __init__(self, number_of_frames: int = 1) -> None:
        self.number_of_frames = number_of_frames
        self.frame_count = 0
        self.next_events: list[Event] = []

    def update(self) -> None:
        """Count one more frame as elapsed."""
        self.frame_count += 1

    def is_done(self) -> bool:
        """Whether the event has run for all its frames."""
        return self.frame_count == self.number_of_frames

    @abstractmethod
    def execute(self, engine: Any) -> None:
        """What the event does on each frame."""

    def when_done(self, engine: Any) -> None:
        """Clean-up once the event completes; does nothing by default."""

    def add_next(self, event: Event) -> None:
        """Queue an event to start when this one is done."""
        self.next_events.append(event)