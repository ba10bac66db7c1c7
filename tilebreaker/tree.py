"""A static decorative tree."""

from __future__ import annotations

import os
from typing import Any

import pygame

from tilebreaker.element import Element
from tilebreaker.shapes import Rectangle

TREE_IMAGE = os.path.join("assets", "image", "tree.png")


class Tree(Element):
    """A tree drawn at the origin, with a hit-box over its middle third."""

    def __init__(self, label: int, image: pygame.Surface | None = None):
        super().__init__(label)
        self.image = image if image is not None else pygame.image.load(TREE_IMAGE)
        self.width, self.height = self.image.get_size()
        self.x = 0
        self.y = 0
        self.hitbox = Rectangle(
            self.x + self.width // 3,
            self.y + self.height // 3,
            self.x + 2 * self.width // 3,
            self.y + 2 * self.height // 3,
        )

    def update(self, scene: Any) -> None:
        """Trees do not change."""

    def interact(self, scene: Any) -> None:
        """Trees do not react to anything."""

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.image, (self.x, self.y))

    def destroy(self) -> None:
        self.image = None