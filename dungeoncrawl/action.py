"""Actions that entities perform on their turn, and their results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Result:
    """Outcome of performing an action; a failed action may name a substitute."""

    succeeded: bool = False
    next_action: Optional[Action] = None


class Action(ABC):
    """Something an entity does when it takes a turn."""

    @abstractmethod
    def perform(self, engine: Any, entity: Any) -> Result:
        """Carry out the action for the entity and report how it went."""


def success() -> Result:
    """The action completed and the entity's turn is over."""
    return Result(True)


def failure() -> Result:
    """The action could not be performed; the entity may try again."""
    return Result(False)


def alternative(action: Action) -> Result:
    """Replace the current action with another one."""
    return Result(False, action)