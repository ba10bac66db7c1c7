"""A pad in the bottom-right corner that sends the character back to the left edge."""

from __future__ import annotations

import os
from typing import Any

import pygame

from tilebreaker.element import Element, ElementLabel
from tilebreaker.settings import HEIGHT, WIDTH, InputState

TELEPORT_IMAGE = os.path.join("assets", "image", "teleport.png")


class Teleport(Element):
    """Active while W is held; moves a character standing on it to x = 0."""

    def __init__(
        self,
        label: int,
        input_state: InputState,
        image: pygame.Surface | None = None,
    ):
        super().__init__(label, interacts_with=[ElementLabel.CHARACTER])
        self.input_state = input_state
        self.image = image if image is not None else pygame.image.load(TELEPORT_IMAGE)
        self.width, self.height = self.image.get_size()
        self.x = WIDTH - self.width
        self.y = HEIGHT - self.height
        self.activate = False

    def update(self, scene: Any) -> None:
        self.activate = self.input_state.is_pressed(pygame.K_w)

    def interact(self, scene: Any) -> None:
        for character in scene.label_elements(ElementLabel.CHARACTER):
            self.interact_character(character)

    def interact_character(self, character: Any) -> None:
        """Send ``character`` to the left edge if it stands on the active pad."""
        if self.activate and self.x <= character.x <= self.x + self.width:
            character.move(-character.x, 0)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.image, (self.x, self.y))

    def destroy(self) -> None:
        self.image = None