"""Event that recomputes what the hero can see."""

from __future__ import annotations

from typing import Any

from ..event import Event


class UpdateFOV(Event):
    """Recompute the fog of war from the hero's position."""

    def execute(self, engine: Any) -> None:
        engine.dungeon.update_visibility(engine.hero.position)