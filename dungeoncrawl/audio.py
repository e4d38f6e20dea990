"""Sound effects and background music."""

from __future__ import annotations

from pathlib import Path

import pygame


class Audio:
    """Loads named sounds and plays them on a background or effects channel."""

    def __init__(self) -> None:
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=1024)
        except pygame.error as error:
            raise RuntimeError(str(error)) from error
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    def __enter__(self) -> Audio:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def sound_names(self) -> frozenset[str]:
        """Names of the sounds currently loaded."""
        return frozenset(self._sounds)

    def load_sounds(self, filename: str | Path) -> None:
        """Replace all sounds with the 'name file' pairs listed in a file."""
        filename = str(filename)
        for sound in self._sounds.values():
            sound.stop()
        self._sounds = {}

        try:
            text = Path(filename).read_text()
        except OSError as error:
            raise FileNotFoundError(f"Could not open filename: {filename}") from error
        parent_path = filename[: filename.find("/") + 1]

        tokens = text.split()
        for name, file in zip(tokens[::2], tokens[1::2]):
            full_path = parent_path + file
            try:
                self._sounds[name] = pygame.mixer.Sound(full_path)
            except (pygame.error, OSError) as error:
                raise RuntimeError(f"Unable to load sound from {full_path}") from error

    def play_sound(self, sound_name: str, is_background: bool = False) -> None:
        """Play a sound once, or loop it forever as background."""
        try:
            sound = self._sounds[sound_name]
        except KeyError:
            raise KeyError(f"Cannot find sound {sound_name}") from None
        if is_background:
            pygame.mixer.Channel(0).play(sound, loops=-1)
        else:
            pygame.mixer.Channel(1).play(sound)

    def close(self) -> None:
        """Release the sounds and shut down the mixer."""
        for sound in self._sounds.values():
            sound.stop()
        self._sounds = {}
        pygame.mixer.quit()