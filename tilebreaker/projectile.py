"""Projectiles that fly horizontally and break ground tiles."""

from __future__ import annotations

import os
from typing import Any

import pygame

from tilebreaker.element import Element, ElementLabel
from tilebreaker.settings import WIDTH
from tilebreaker.shapes import Circle

PROJECTILE_IMAGE = os.path.join("assets", "image", "projectile.png")
DURABILITY = 100


class Projectile(Element):
    """A shot moving at a constant horizontal speed ``v``."""

    def __init__(
        self,
        label: int,
        x: int,
        y: int,
        v: int,
        image: pygame.Surface | None = None,
    ):
        super().__init__(label, interacts_with=[ElementLabel.GROUND])
        self.image = image if image is not None else pygame.image.load(PROJECTILE_IMAGE)
        self.width, self.height = self.image.get_size()
        self.x = x
        self.y = y
        self.v = v
        self.durability = DURABILITY
        self.hitbox = Circle(
            self.x + self.width // 2,
            self.y + self.height // 2,
            min(self.width, self.height) // 2,
        )

    def move(self, dx: int, dy: int) -> None:
        """Shift the projectile and its hit-box."""
        self.x += dx
        self.y += dy
        self.hitbox.move(dx, dy)

    def update(self, scene: Any) -> None:
        self.move(self.v, 0)

    def interact(self, scene: Any) -> None:
        for label in self.interacts_with:
            for target in scene.label_elements(label):
                if label == ElementLabel.GROUND:
                    self.interact_ground(target)

    def interact_ground(self, ground: Any) -> None:
        """Break every solid tile the projectile touches, wearing it down."""
        for i, row in enumerate(ground.active):
            for j, solid in enumerate(row):
                if not solid:
                    continue
                if ground.hitboxes[i][j].overlap(self.hitbox):
                    ground.active[i][j] = False
                    self.durability -= 1
                    if self.durability <= 0:
                        self.to_delete = True
                        return

    def check_bounds(self) -> None:
        """Mark the projectile for deletion once it has left the screen."""
        if self.x < -self.width or self.x > WIDTH + self.width:
            self.to_delete = True

    def draw(self, surface: pygame.Surface) -> None:
        image = self.image
        if self.v > 0:
            image = pygame.transform.flip(image, True, False)
        surface.blit(image, (self.x, self.y))

    def destroy(self) -> None:
        self.image = None