"""A sequence of sprites that cycles over time."""

from __future__ import annotations

from typing import Sequence

from .sprite import Sprite


class AnimatedSprite:
    """Frames of a sprite animation; without frames it is an invisible placeholder."""

    def __init__(
        self,
        sprites: Sequence[Sprite] | None = None,
        ticks_per_frame: int = 1,
        starting_frame: int = 0,
    ) -> None:
        if sprites is None:
            self.visible = False
            self._sprites = [Sprite()]
            self._ticks_per_frame = 1
            self._current_frame = 0
        else:
            self.visible = True
            self._sprites = [sprite.copy() for sprite in sprites]
            self._ticks_per_frame = ticks_per_frame
            self._current_frame = starting_frame
        self._time = 0

    def flip(self, flip: bool) -> None:
        """Flip every frame horizontally (or not)."""
        for sprite in self._sprites:
            sprite.flip = flip

    def update(self) -> None:
        """Advance the animation clock by one tick."""
        if not self.visible:
            return
        self._time += 1
        if self._time >= self._ticks_per_frame:
            self._current_frame = (self._current_frame + 1) % len(self._sprites)

    def current_sprite(self) -> Sprite:
        """A copy of the frame currently shown."""
        return self._sprites[self._current_frame].copy()

    def number_of_frames(self) -> int:
        return len(self._sprites)