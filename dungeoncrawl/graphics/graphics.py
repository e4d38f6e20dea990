"""Window, sprite sheets and drawing primitives."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pygame

from ..util.randomness import randint, shuffle
from ..util.vec import Vec
from .animatedsprite import AnimatedSprite
from .sprite import Sprite


def _parent_path(filename: str) -> str:
    """Everything up to and including the first '/' of a path, or ''."""
    return filename[: filename.find("/") + 1]


def _sprite_records(tokens: list[str]) -> Iterator[tuple[str, int, int, int, int, int]]:
    """Yield (name, x, y, width, height, frames); frames is optional and defaults to 1."""
    i = 0
    while i + 5 <= len(tokens):
        name = tokens[i]
        try:
            x, y, width, height = (int(token) for token in tokens[i + 1 : i + 5])
        except ValueError:
            return
        i += 5
        frames = 1
        if i < len(tokens):
            try:
                frames = int(tokens[i])
                i += 1
            except ValueError:
                pass
        yield name, x, y, width, height, frames


class Graphics:
    """Owns the game window, loaded textures and named sprites."""

    def __init__(self, title: str, screen_width: int, screen_height: int) -> None:
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((screen_width, screen_height))
        except pygame.error as error:
            raise RuntimeError(f"Unable to initialize SDL Video: {error}") from error
        pygame.display.set_caption(title)
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._textures: list[pygame.Surface] = []
        self._texture_ids: dict[str, int] = {}
        self._sprites: dict[str, list[Sprite]] = {}

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def load_sprite_sheet(self, filename: str | Path) -> None:
        """Read a sheet description: an image name, then 'name x y w h [frames]' records."""
        filename = str(filename)
        try:
            text = Path(filename).read_text()
        except OSError as error:
            raise FileNotFoundError(f"Could not open filename: {filename}") from error

        tokens = text.split()
        if not tokens:
            raise ValueError(f"Could not read any sprites from filename: {filename}")
        texture_id = self._texture_id(_parent_path(filename) + tokens[0])

        for name, x, y, width, height, frames in _sprite_records(tokens[1:]):
            shift = Vec(-(width // 2), -height)  # anchor at bottom centre
            center = Vec(width // 2, height // 2)
            size = Vec(width, height)
            self._sprites.setdefault(name, []).extend(
                Sprite(texture_id, Vec(x + i * width, y), size, shift, center)
                for i in range(frames)
            )

        if not self._sprites:
            raise ValueError(f"Could not read any sprites from filename: {filename}")

    def get_sprite(self, name: str) -> Sprite:
        """The first frame of the named sprite."""
        try:
            frames = self._sprites[name]
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None
        return frames[0].copy()

    def get_animated_sprite(
        self,
        name: str,
        ticks_per_frame: int = 1,
        random_start: bool = False,
        shuffle_order: bool = False,
    ) -> AnimatedSprite:
        """All frames of the named sprite as an animation."""
        try:
            frames = [sprite.copy() for sprite in self._sprites[name]]
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None
        if shuffle_order:
            shuffle(frames)
        if len(frames) > 1 and random_start:
            return AnimatedSprite(frames, ticks_per_frame, randint(0, len(frames) - 1))
        return AnimatedSprite(frames, ticks_per_frame)

    def clear(self) -> None:
        """Fill the screen with black."""
        self.screen.fill((0, 0, 0))

    def draw_rect(self, pixel: Vec, size: Vec, r: int, g: int, b: int, alpha: int) -> None:
        """Blend a filled rectangle onto the screen."""
        if size.x <= 0 or size.y <= 0:
            return
        overlay = pygame.Surface((size.x, size.y), pygame.SRCALPHA)
        overlay.fill((r, g, b, alpha))
        self.screen.blit(overlay, (pixel.x, pixel.y))

    def draw_sprite(self, pixel: Vec, sprite: Sprite, scale: int = 1) -> None:
        """Draw a sprite scaled, flipped and rotated about its centre."""
        if sprite.texture_id < 0:  # sprite without a texture
            return
        texture = self._textures[sprite.texture_id]
        width, height = sprite.size.x * scale, sprite.size.y * scale
        if width <= 0 or height <= 0:
            return
        region = texture.subsurface(
            pygame.Rect(sprite.location.x, sprite.location.y, sprite.size.x, sprite.size.y)
        )
        image = pygame.transform.scale(region, (width, height))
        if sprite.flip:
            image = pygame.transform.flip(image, True, False)

        x = pixel.x + sprite.shift.x * scale
        y = pixel.y + sprite.shift.y * scale
        if not sprite.angle:
            self.screen.blit(image, (x, y))
            return

        # rotate clockwise about the sprite's centre point
        pivot = pygame.Vector2(x + sprite.center.x * scale, y + sprite.center.y * scale)
        offset = pygame.Vector2(x + width / 2, y + height / 2) - pivot
        rotated = pygame.transform.rotate(image, -sprite.angle)
        center = pivot + offset.rotate(sprite.angle)
        self.screen.blit(rotated, rotated.get_rect(center=(round(center.x), round(center.y))))

    def redraw(self) -> None:
        """Show everything drawn since the last clear."""
        pygame.display.flip()

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def _texture_id(self, image_filename: str) -> int:
        if image_filename in self._texture_ids:
            return self._texture_ids[image_filename]
        try:
            texture = pygame.image.load(image_filename).convert_alpha()
        except (pygame.error, OSError) as error:
            raise RuntimeError(f"Unable to load image {image_filename}: {error}") from error
        texture_id = len(self._textures)
        self._texture_ids[image_filename] = texture_id
        self._textures.append(texture)
        return texture_id