"""The title menu shown before the game starts."""

from __future__ import annotations

from typing import Any

import pygame

from tilebreaker.scene import Scene
from tilebreaker.settings import HEIGHT, WIDTH, InputState

PROMPT = "Press 'Enter' to start"
MUSIC_VOLUME = 0.1
GAME_WINDOW = 1
MENU_WINDOW = 0
_WHITE = (255, 255, 255)


class Menu(Scene):
    """Shows a start prompt and loops music until Enter is pressed."""

    def __init__(
        self,
        label: int,
        input_state: InputState,
        font: pygame.font.Font | None = None,
        music: Any = None,
    ):
        super().__init__(label)
        self.input_state = input_state
        self.font = font
        self.music = music
        self.title_x = WIDTH // 2
        self.title_y = HEIGHT // 2
        self.next_window = MENU_WINDOW
        if self.music is not None:
            self.music.set_volume(MUSIC_VOLUME)

    def update(self) -> None:
        if self.input_state.is_pressed(pygame.K_RETURN):
            self.scene_end = True
            self.next_window = GAME_WINDOW

    def draw(self, surface: pygame.Surface) -> None:
        if self.font is not None:
            text = self.font.render(PROMPT, True, _WHITE)
            surface.blit(text, text.get_rect(midtop=(self.title_x, self.title_y)))
        box = pygame.Rect(self.title_x - 150, self.title_y - 30, 300, 60)
        pygame.draw.rect(surface, _WHITE, box, 1)
        if self.music is not None and self.music.get_num_channels() == 0:
            self.music.play(loops=-1)

    def destroy(self) -> None:
        if self.music is not None:
            self.music.stop()
        self.music = None
        self.font = None
        super().destroy()