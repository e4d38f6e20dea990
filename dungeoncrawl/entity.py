"""Heroes, monsters and other beings that act in the dungeon."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Optional

from .action import Action
from .graphics.animatedsprite import AnimatedSprite
from .graphics.sprite import Sprite
from .item import Item
from .util.vec import Vec

DEFAULT_SPEED = 8
MAX_INVENTORY = 5


class Team(Enum):
    HERO = auto()
    MONSTER = auto()


Behavior = Callable[[Any, "Entity"], Optional[Action]]
MoveCallback = Callable[[Any, "Entity"], None]


class Entity:
    """A being on a dungeon tile with health, an inventory and a behaviour."""

    def __init__(self, engine: Any, position: Vec, team: Team) -> None:
        tile = engine.dungeon.get_tile(position)
        if tile.entity is not None:
            raise ValueError(f"An entity is already on tile: {position}")

        self.engine = engine
        self._position = position
        self._direction = Vec(1, 0)
        self.team = team

        # called with (engine, entity) after every move
        self.on_move: list[MoveCallback] = []
        # returns the entity's next action, or None to wait
        self.behavior: Optional[Behavior] = None

        self._sprite = AnimatedSprite()
        self._health = 1
        self._max_health = 1
        self._alive = True

        # speed is energy gained per round; enough energy buys a turn
        self.speed = DEFAULT_SPEED
        self.energy = 0

        self._inventory: list[Optional[Item]] = [None] * MAX_INVENTORY
        self._selected = 0

        tile.entity = self

    # movement

    @property
    def position(self) -> Vec:
        return self._position

    @property
    def direction(self) -> Vec:
        return self._direction

    def move_to(self, new_position: Vec) -> None:
        """Move to another tile and notify the on_move callbacks."""
        old_tile = self.engine.dungeon.get_tile(self._position)
        new_tile = self.engine.dungeon.get_tile(new_position)
        old_tile.entity, new_tile.entity = new_tile.entity, old_tile.entity
        self._position = new_position
        for callback in list(self.on_move):
            callback(self.engine, self)

    def change_direction(self, new_direction: Vec) -> None:
        """Face a direction, flipping the sprite when turning left or right."""
        self._direction = new_direction
        if new_direction.x == 1:
            self._sprite.flip(False)
        elif new_direction.x == -1:
            self._sprite.flip(True)
        self._adjust_item_position()

    def is_visible(self) -> bool:
        """An entity is visible when its tile is."""
        return self.engine.dungeon.get_tile(self._position).visible

    # combat

    @property
    def health(self) -> int:
        return self._health

    @property
    def max_health(self) -> int:
        return self._max_health

    @property
    def alive(self) -> bool:
        return self._alive

    def take_damage(self, amount: int) -> None:
        """Lose health, never below zero or above the maximum; zero health is death."""
        self._health = min(max(self._health - amount, 0), self._max_health)
        if self._health == 0:
            self._alive = False

    def set_max_health(self, value: int) -> None:
        """Set both maximum and current health; zero or less means dead."""
        self._max_health = self._health = value
        self._alive = self._health > 0

    # inventory

    @property
    def selected(self) -> int:
        """Index of the inventory slot currently in hand."""
        return self._selected

    def is_inventory_full(self) -> bool:
        return None not in self._inventory

    def add_to_inventory(self, item: Item) -> None:
        """Put the item in the first empty slot; it is dropped if there is none."""
        try:
            slot = self._inventory.index(None)
        except ValueError:
            return
        item.sprite = self.engine.graphics.get_sprite(item.name)
        item.sprite.center = Vec(item.sprite.size.x // 2, item.sprite.size.y)
        self._tilt_item(item, facing_left=False)
        self._inventory[slot] = item

    def current_item(self) -> Item:
        """The item in hand, or an empty item named 'none'."""
        item = self._inventory[self._selected]
        return item if item is not None else Item("none")

    def select_item(self, index: int) -> None:
        """Take the item in a slot in hand; invalid indices are ignored."""
        if 0 <= index < MAX_INVENTORY:
            self._selected = index
            self._adjust_item_position()

    def remove_item(self, item: Item) -> None:
        """Empty the slot holding this very item, if any."""
        for slot, held in enumerate(self._inventory):
            if held is item:
                self._inventory[slot] = None
                return

    def pop_item(self, index: int) -> Optional[Item]:
        """Take the item out of a slot; None for an empty slot or invalid index."""
        if not 0 <= index < MAX_INVENTORY:
            return None
        item, self._inventory[index] = self._inventory[index], None
        return item

    def inventory_list(self) -> tuple[int, list[str]]:
        """The selected slot and the item names of all slots ('' when empty)."""
        return self._selected, [item.name if item else "" for item in self._inventory]

    # turns

    def take_turn(self) -> Optional[Action]:
        """The next action from the behaviour, or None if there is none yet."""
        if self.behavior is None:
            return None
        return self.behavior(self.engine, self)

    # drawing

    def set_sprite(self, name: str) -> None:
        self._sprite = self.engine.graphics.get_animated_sprite(name, 1, True)

    def update(self) -> None:
        """Advance the sprite animation."""
        self._sprite.update()

    def sprites(self) -> list[Sprite]:
        """Sprites to draw, item in hand first."""
        return [self.current_item().sprite, self._sprite.current_sprite()]

    def _tilt_item(self, item: Item, facing_left: bool) -> None:
        width = self._sprite.current_sprite().size.x
        sprite = item.sprite
        sprite.flip = facing_left
        shift_x = -(width // 2) if facing_left else width // 8
        sprite.shift = Vec(shift_x, sprite.shift.y)
        sprite.angle = -20 if facing_left else 20

    def _adjust_item_position(self) -> None:
        item = self.current_item()
        if self._direction.x == 1:
            self._tilt_item(item, facing_left=False)
        elif self._direction.x == -1:
            self._tilt_item(item, facing_left=True)