"""Draws the dungeon, entities and interface from the camera's viewpoint."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .entity import MAX_INVENTORY
from .graphics.sprite import Sprite
from .util.vec import Vec

MAX_ZOOM = 8
MIN_ZOOM = 1


class Camera:
    """Converts world tile positions to screen pixels and draws what is in view."""

    def __init__(self, graphics: Any, tile_size: int, zoom: int = 1) -> None:
        self.graphics = graphics
        self.tile_size = tile_size
        self.zoom = zoom
        self.location = Vec(0, 0)
        self.screen_center = Vec(graphics.screen_width // 2, graphics.screen_height // 2)
        # world coordinates of the lowest and highest tiles in view
        self.visible_min = Vec(0, 0)
        self.visible_max = Vec(0, 0)
        self._overlays: list[tuple[Vec, Sprite]] = []
        self._calculate_visibility_limits()

    # drawing

    def render_sprite(self, position: Vec, sprite: Sprite) -> None:
        """Draw a sprite anchored on a world tile position."""
        self.graphics.draw_sprite(self.world_to_screen(position), sprite, self.zoom)

    def _visible_range(self, dungeon: Any) -> tuple[range, range]:
        x_min = max(0, self.visible_min.x)
        y_min = max(0, self.visible_min.y)
        x_max = min(self.visible_max.x, dungeon.tiles.width - 1)
        y_max = min(self.visible_max.y, dungeon.tiles.height - 1)
        return range(x_min, x_max + 1), range(y_min, y_max + 1)

    def render_dungeon(self, dungeon: Any) -> None:
        """Draw tiles, then decorations, then items, then doors on top."""
        xs, ys = self._visible_range(dungeon)
        door_sprites: list[tuple[Vec, Sprite]] = []
        item_sprites: list[tuple[Vec, Sprite]] = []

        for y in ys:
            for x in xs:
                position = Vec(x, y)
                if not self.within_view(position):
                    continue
                tile = dungeon.tiles[position]
                self.render_sprite(position, tile.sprite)
                if tile.has_door():
                    door_sprites.append((position, tile.door.sprite()))
                if tile.has_item():
                    item_sprites.append((position, tile.item.sprite))

        for position, decoration in dungeon.decorations.items():
            if self.within_view(position):
                self.render_sprite(position, decoration.current_sprite())

        for position, sprite in item_sprites:
            self.render_sprite(position, sprite)
        for position, sprite in door_sprites:
            self.render_sprite(position, sprite)

    def render_entities(self, entities: Iterable[Any]) -> None:
        """Draw every living, visible entity that is in view."""
        for entity in entities:
            position = entity.position
            if self.within_view(position) and entity.alive and entity.is_visible():
                for sprite in entity.sprites():
                    self.render_sprite(position, sprite)

    def render_fog(self, dungeon: Any) -> None:
        """Darken each tile in view according to the fog of war."""
        xs, ys = self._visible_range(dungeon)
        for y in ys:
            for x in xs:
                position = Vec(x, y)
                brightness = dungeon.fog.brightness(position)
                alpha = min(max(int(brightness * 255), 0), 255)
                self.render_rect(position, 0, 0, 0, alpha)

    def render_rect(self, position: Vec, red: int, green: int, blue: int, alpha: int) -> None:
        """Fill the square of a world tile with a colour."""
        scale = self.tile_size * self.zoom
        pixel = self.world_to_screen(position)
        # sprites anchor at the bottom centre, rectangles at the upper left
        corner = Vec(pixel.x - scale // 2, pixel.y - scale)
        self.graphics.draw_rect(corner, Vec(scale, scale), red, green, blue, alpha)

    def render_health_bar(self, current_health: int, max_health: int) -> None:
        """Draw the hero's health bar in the upper-left corner."""
        percentage = current_health / max_health
        length = int(percentage * 300)
        self.graphics.draw_rect(Vec(10, 10), Vec(320, 40), 255, 255, 255, 255)
        self.graphics.draw_rect(Vec(15, 15), Vec(310, 30), 0, 0, 0, 255)
        self.graphics.draw_rect(Vec(20, 20), Vec(length, 20), 50, 255, 50, 255)

    def render_items(self, selected_item: int, sprite_names: Sequence[str]) -> None:
        """Draw the inventory slots in the upper-right corner, the selected one in red."""
        size, gap = Vec(54, 54), Vec(5, 5)
        for i, name in enumerate(sprite_names):
            x = self.graphics.screen_width - (size.x + gap.x) * (MAX_INVENTORY - i) - gap.x
            corner = Vec(x, 10)
            if i == selected_item:
                self.graphics.draw_rect(corner, size, 255, 0, 0, 255)
            else:
                self.graphics.draw_rect(corner, size, 255, 255, 255, 255)
            self.graphics.draw_rect(corner + gap, size - 2 * gap, 150, 150, 150, 255)

            if name:
                sprite = self.graphics.get_sprite(name)
                position = Vec(corner.x + size.x // 2, corner.y + size.y - 2 * gap.y + 2)
                self.graphics.draw_sprite(position, sprite)

    def add_overlay(self, position: Vec, sprite: Sprite) -> None:
        """Draw a sprite over a tile until the next update."""
        self._overlays.append((position, sprite))

    def render_overlays(self) -> None:
        for position, sprite in self._overlays:
            self.render_sprite(position, sprite)

    def update(self) -> None:
        """Forget the overlays of the previous step."""
        self._overlays.clear()

    # positioning

    def world_to_screen(self, position: Vec) -> Vec:
        """Pixel at which a world tile is anchored; world y points up, screen y down."""
        scale = self.zoom * self.tile_size
        pixel = scale * (position - self.location) + self.screen_center
        y = self.graphics.screen_height - pixel.y + scale // 2
        return Vec(pixel.x, y)

    def move_to(self, position: Vec) -> None:
        """Centre the camera over a world position."""
        self.location = position
        self._calculate_visibility_limits()

    def zoom_in(self) -> None:
        if self.zoom < MAX_ZOOM:
            self.zoom += 1
            self._calculate_visibility_limits()

    def zoom_out(self) -> None:
        if self.zoom > MIN_ZOOM:
            self.zoom -= 1
            self._calculate_visibility_limits()

    def within_view(self, position: Vec) -> bool:
        return (
            self.visible_min.x <= position.x <= self.visible_max.x
            and self.visible_min.y <= position.y <= self.visible_max.y
        )

    def _calculate_visibility_limits(self) -> None:
        screen = Vec(self.graphics.screen_width, self.graphics.screen_height)
        num_tiles = screen // (2 * self.zoom * self.tile_size) + Vec(1, 1)
        self.visible_max = self.location + num_tiles
        self.visible_min = self.location - num_tiles