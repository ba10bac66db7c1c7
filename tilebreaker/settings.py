"""Game-wide constants, input state and the assertion helper."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilebreaker.shapes import Point

FPS = 60.0
WIDTH = 1920
HEIGHT = 1080
MAX_ELEMENT = 100
GAME_TERMINATE = -1
DEBUG_MODE = True


class GameError(RuntimeError):
    """Raised when a condition the game depends on does not hold."""


def game_assert(condition: object, message: str) -> None:
    """Raise GameError with ``message`` unless ``condition`` is true."""
    if not condition:
        raise GameError(message)


@dataclass
class InputState:
    """Keyboard, mouse-button and mouse-position state."""

    keys: set[int] = field(default_factory=set)
    buttons: set[int] = field(default_factory=set)
    mouse: Point = field(default_factory=Point)

    def press(self, key: int) -> None:
        self.keys.add(key)

    def release(self, key: int) -> None:
        self.keys.discard(key)

    def is_pressed(self, key: int) -> bool:
        return key in self.keys

    def press_button(self, button: int) -> None:
        self.buttons.add(button)

    def release_button(self, button: int) -> None:
        self.buttons.discard(button)

    def is_button_pressed(self, button: int) -> bool:
        return button in self.buttons

    def move_mouse(self, x: float, y: float) -> None:
        self.mouse.x = x
        self.mouse.y = y