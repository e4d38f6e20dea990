"""A monster's bite, held as an item."""

from __future__ import annotations

from typing import Any, Optional

from ..item import Item


class Bite(Item):
    """An invisible weapon carrying an amount of damage."""

    def __init__(self, damage: int) -> None:
        super().__init__("none")
        self.damage = damage

    def use(self, engine: Any, owner: Any, target: Optional[Any] = None) -> None:
        """Biting has no effect yet."""