"""The game window, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Iterable
from typing import Any

import pygame

from tilebreaker.scene import Scene
from tilebreaker.scene_manager import SceneType, create_scene
from tilebreaker.settings import (
    FPS,
    GAME_TERMINATE,
    HEIGHT,
    WIDTH,
    GameError,
    InputState,
    game_assert,
)

TITLE = "Final Project 10xxxxxxx"
ICON = os.path.join("assets", "image", "icon.jpg")
BACKGROUND = (100, 100, 100)

SceneFactory = Callable[[int, InputState], Scene]


class Game:
    """Owns the window, the input state and the current scene."""

    def __init__(
        self,
        title: str = TITLE,
        input_state: InputState | None = None,
        scene_factory: SceneFactory = create_scene,
        screen: pygame.Surface | None = None,
        event_source: Callable[[], Iterable[Any]] | None = None,
        clock: Any = None,
    ):
        self.title = title
        self.input_state = input_state if input_state is not None else InputState()
        self.scene_factory = scene_factory
        self.window = int(SceneType.MENU)
        self._owns_display = screen is None
        if screen is None:
            screen = self._open_display()
        self.screen = screen
        self.scene: Scene = self.scene_factory(SceneType.MENU, self.input_state)
        self._event_source = event_source if event_source is not None else pygame.event.get
        self._clock = clock

    def _open_display(self) -> pygame.Surface:
        print("Game Initializing...")
        _, failed = pygame.init()
        game_assert(pygame.display.get_init(), "failed to initialize pygame.")
        if failed:
            print(f"{failed} pygame modules failed to initialize.", file=sys.stderr)
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            raise GameError("failed to create display.") from exc
        pygame.display.set_caption(self.title)
        try:
            pygame.display.set_icon(pygame.image.load(ICON))
        except (pygame.error, FileNotFoundError):
            pass
        return screen

    def handle_event(self, event: Any) -> bool:
        """Apply one input event; return False if the game should stop."""
        kind = event.type
        if kind == pygame.QUIT:
            return False
        if kind == pygame.KEYDOWN:
            self.input_state.press(event.key)
        elif kind == pygame.KEYUP:
            self.input_state.release(event.key)
        elif kind == pygame.MOUSEMOTION:
            x, y = event.pos
            self.input_state.move_mouse(x, y)
        elif kind == pygame.MOUSEBUTTONDOWN:
            self.input_state.press_button(event.button)
        elif kind == pygame.MOUSEBUTTONUP:
            self.input_state.release_button(event.button)
        return True

    def update(self) -> bool:
        """Advance the scene one frame, switching scenes when it ends.

        Returns False when the game is to terminate.
        """
        self.scene.update()
        if self.scene.scene_end:
            self.window = getattr(self.scene, "next_window", self.window)
            self.scene.destroy()
            if self.window == GAME_TERMINATE:
                return False
            if self.window in (SceneType.MENU, SceneType.GAME_SCENE):
                self.scene = self.scene_factory(SceneType(self.window), self.input_state)
        return True

    def draw(self) -> None:
        """Clear the screen, draw the scene and show the result."""
        self.screen.fill(BACKGROUND)
        self.scene.draw(self.screen)
        if self._owns_display:
            pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the window closes or the game terminates."""
        if self._clock is None:
            self._clock = pygame.time.Clock()
        running = True
        while running:
            for event in self._event_source():
                if not self.handle_event(event):
                    running = False
            if not running:
                break
            running = self.update()
            self.draw()
            self._clock.tick(FPS)

    def close(self) -> None:
        """Destroy the current scene and shut down the display if this game opened it."""
        self.scene.destroy()
        if self._owns_display:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="tilebreaker", description="Run the game.")
    parser.parse_args(argv)
    try:
        game = Game()
    except GameError as exc:
        print(f"Error message: {exc}", file=sys.stderr)
        return 1
    try:
        game.run()
    except GameError as exc:
        print(f"Error message: {exc}", file=sys.stderr)
        return 1
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())