"""Creation of the game's scenes."""

from __future__ import annotations

import enum
import os

import pygame

from tilebreaker.character import Character
from tilebreaker.element import ElementLabel
from tilebreaker.game_scene import GameScene
from tilebreaker.ground import Ground
from tilebreaker.menu import Menu
from tilebreaker.scene import Scene
from tilebreaker.settings import GameError, InputState

MENU_FONT = os.path.join("assets", "font", "pirulen.ttf")
MENU_FONT_SIZE = 12
MENU_MUSIC = os.path.join("assets", "sound", "menu.mp3")
GAME_BACKGROUND = os.path.join("assets", "image", "white_house_background.png")
GROUND_IMAGE = os.path.join("assets", "image", "white_house_ground.png")
GROUND_MASK = os.path.join("assets", "map", "white_house_mask.txt")


class SceneType(enum.IntEnum):
    """The scenes the game can show."""

    MENU = 0
    GAME_SCENE = 1


def _new_menu(input_state: InputState) -> Menu:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.Font(MENU_FONT, MENU_FONT_SIZE)
    except (pygame.error, FileNotFoundError, OSError) as exc:
        raise GameError(f"Failed to load font: {MENU_FONT}") from exc
    music = pygame.mixer.Sound(MENU_MUSIC) if pygame.mixer.get_init() else None
    return Menu(SceneType.MENU, input_state, font, music)


def _new_game_scene(input_state: InputState) -> GameScene:
    try:
        background = pygame.image.load(GAME_BACKGROUND)
    except (pygame.error, FileNotFoundError) as exc:
        raise GameError(f"Failed to load image: {GAME_BACKGROUND}") from exc
    ground = Ground.from_files(GROUND_IMAGE, GROUND_MASK, ElementLabel.GROUND)
    character = Character.from_assets(ElementLabel.CHARACTER, input_state)
    return GameScene(SceneType.GAME_SCENE, background, [ground, character])


def create_scene(scene_type: int, input_state: InputState) -> Scene:
    """Build the scene of the given type, loading its assets."""
    try:
        kind = SceneType(scene_type)
    except ValueError as exc:
        raise ValueError(f"unknown scene type {scene_type!r}") from exc
    if kind == SceneType.MENU:
        return _new_menu(input_state)
    return _new_game_scene(input_state)