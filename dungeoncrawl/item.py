"""Items that entities can carry and use."""

from __future__ import annotations

from typing import Any, Optional

from .graphics.sprite import Sprite


class Item:
    """An inventory item; its name is also the name of its sprite."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.sprite = Sprite()

    def use(self, engine: Any, owner: Any, target: Optional[Any] = None) -> None:
        """Use the item on its owner, or on a target if one is given."""

    def interact(self, engine: Any, entity: Any) -> None:
        """React to an entity touching or picking up the item."""