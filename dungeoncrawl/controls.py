"""Keyboard, mouse and window events."""

from __future__ import annotations

import pygame


class Input:
    """Collects input events and remembers the latest keypress and click."""

    def __init__(self) -> None:
        try:
            if not pygame.display.get_init():
                pygame.display.init()
        except pygame.error as error:
            raise RuntimeError(f"Unable to initialize SDL Events: {error}") from error
        self._last_keypress = ""
        self.last_mouse_click: tuple[int, int] = (-1, -1)

    def record_keypress(self, key: str) -> None:
        """Register a key name as the most recent keypress."""
        self._last_keypress = key

    def pop_last_keypress(self) -> str:
        """The most recent key name (e.g. 'Right', 'A', 'Space'), then forget it."""
        key, self._last_keypress = self._last_keypress, ""
        return key

    def poll_events(self) -> list[str]:
        """Names of all input events since the last call: 'Quit', key names, 'Click'."""
        inputs = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                inputs.append("Quit")
            elif event.type == pygame.KEYDOWN:
                inputs.append(pygame.key.name(event.key, use_compat=False))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
                inputs.append("Click")
                self.last_mouse_click = tuple(event.pos)
        return inputs