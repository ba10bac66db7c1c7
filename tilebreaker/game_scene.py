"""The playing scene: background, ground and character."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from tilebreaker.element import Element
from tilebreaker.scene import Scene

GAME_WINDOW = 1


class GameScene(Scene):
    """A scene drawn over a background image."""

    def __init__(
        self,
        label: int,
        background: pygame.Surface | None = None,
        elements: Iterable[Element] = (),
    ):
        super().__init__(label)
        self.background = background
        self.next_window = GAME_WINDOW
        for element in elements:
            self.register(element)

    def update(self) -> None:
        """Update, then interact, then drop elements marked for deletion."""
        super().update()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        super().draw(surface)

    def destroy(self) -> None:
        self.background = None
        super().destroy()