"""The player character: walking, jumping and firing projectiles."""

from __future__ import annotations

import enum
import os
import time
from collections.abc import Callable, Iterable, Iterator
from typing import Any

import pygame

from tilebreaker.animation import GifAnimation
from tilebreaker.element import Element, ElementLabel
from tilebreaker.ground import TILE_HEIGHT, TILE_WIDTH
from tilebreaker.projectile import Projectile
from tilebreaker.settings import FPS, InputState
from tilebreaker.shapes import Rectangle

GRAVITY = 1000.0
JUMP_VELOCITY = -1000.0
MOVE_SPEED = 5
ATTACK_FRAME = 2
START_X = 300
START_Y = 0

ANIMATION_FILES = tuple(
    os.path.join("assets", "image", f"chara_{name}.gif")
    for name in ("idle", "run", "attack")
)
ATTACK_SOUND = os.path.join("assets", "sound", "atk_sound.wav")


class CharacterState(enum.IntEnum):
    """What the character is doing; also indexes its animations."""

    STOP = 0
    MOVE = 1
    ATK = 2
    JUMP = 3


class Character(Element):
    """The player, moved with A/D, jumping with W and attacking with SPACE."""

    def __init__(
        self,
        label: int,
        input_state: InputState,
        animations: Iterable[GifAnimation],
        attack_sound: Any = None,
        projectile_image: pygame.Surface | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(label)
        self.animations = list(animations)
        if len(self.animations) != 3:
            raise ValueError("a character needs idle, run and attack animations")
        self.input_state = input_state
        self.attack_sound = attack_sound
        self.projectile_image = projectile_image
        self.clock = clock
        self.width = self.animations[0].width
        self.height = self.animations[0].height
        self.x = START_X
        self.y = START_Y
        self.vx = 0.0
        self.vy = 0.0
        self.hitbox = Rectangle(self.x, self.y, self.x + self.width, self.y + self.height)
        self.facing_right = True
        self.state = CharacterState.STOP
        self.is_jumping = False
        self.new_proj = False

    @classmethod
    def from_assets(cls, label: int, input_state: InputState) -> Character:
        """Load the character's animations and attack sound from the assets folder."""
        animations = [GifAnimation.load(path, -1) for path in ANIMATION_FILES]
        sound = pygame.mixer.Sound(ATTACK_SOUND) if pygame.mixer.get_init() else None
        return cls(label, input_state, animations, sound)

    @property
    def attack_animation(self) -> GifAnimation:
        return self.animations[CharacterState.ATK]

    def move(self, dx: int, dy: int) -> None:
        """Shift the character and its hit-box."""
        self.x += dx
        self.y += dy
        self.hitbox.move(dx, dy)

    def update(self, scene: Any) -> None:
        keys = self.input_state

        if keys.is_pressed(pygame.K_w) and self.is_standing_on_ground(scene):
            self.vy = JUMP_VELOCITY
            self.is_jumping = True

        if keys.is_pressed(pygame.K_a):
            self.facing_right = False
            self.move(-MOVE_SPEED, 0)
            if self.state != CharacterState.ATK:
                self.state = CharacterState.MOVE
        elif keys.is_pressed(pygame.K_d):
            self.facing_right = True
            self.move(MOVE_SPEED, 0)
            if self.state != CharacterState.ATK:
                self.state = CharacterState.MOVE
        elif not self.is_jumping and self.state != CharacterState.ATK:
            self.state = CharacterState.STOP

        if self.is_jumping:
            dt = 1.0 / FPS
            self.vy += GRAVITY * dt
            self.move(0, int(self.vy * dt))
            if self.is_standing_on_ground(scene):
                self.vy = 0.0
                self.is_jumping = False
                if self.state != CharacterState.ATK:
                    self.state = CharacterState.STOP

        if keys.is_pressed(pygame.K_SPACE) and self.state != CharacterState.ATK:
            self.state = CharacterState.ATK
            self.new_proj = False
            self.attack_animation.reset()

        if self.state == CharacterState.ATK:
            attack = self.attack_animation
            if attack.display_index == ATTACK_FRAME and not self.new_proj:
                scene.register(self._fire())
                self.new_proj = True
            if attack.done:
                self.state = CharacterState.STOP
                self.new_proj = False

    def _fire(self) -> Projectile:
        if self.facing_right:
            x, v = self.x + self.width - 100, 5
        else:
            x, v = self.x - 50, -5
        return Projectile(
            ElementLabel.PROJECTILE, x, self.y + 10, v, image=self.projectile_image
        )

    @staticmethod
    def _solid_tiles(scene: Any) -> Iterator[Rectangle]:
        for ground in scene.label_elements(ElementLabel.GROUND):
            for row, boxes in zip(ground.active, ground.hitboxes):
                for solid, box in zip(row, boxes):
                    if solid:
                        yield box

    def interact(self, scene: Any) -> None:
        """Push the character out of solid tiles, or let it fall when unsupported."""
        if any(tile.overlap(self.hitbox) for tile in self._solid_tiles(scene)):
            self.move(0, -1)
            return
        if not self.is_standing_on_ground(scene):
            self.move(0, 3)

    def is_standing_on_ground(self, scene: Any) -> bool:
        """True if a solid tile lies directly (within one pixel) under the character."""
        char_bottom = self.y + self.height
        char_left = self.x
        char_right = self.x + self.width
        for tile in self._solid_tiles(scene):
            tile_top = int(tile.top())
            tile_left = int(tile.left())
            tile_right = int(tile.right())
            aligned = not (char_right <= tile_left or char_left >= tile_right)
            above = char_bottom <= tile_top and tile_top - char_bottom <= 1
            if aligned and above:
                return True
        return False

    def is_blocked_by_wall(self, scene: Any) -> bool:
        """True if the tile column just ahead holds two or more solid tiles at body height."""
        check_x = self.x + self.width + 1 if self.facing_right else self.x - 1
        look_col = int(check_x / TILE_WIDTH)
        for ground in scene.label_elements(ElementLabel.GROUND):
            if look_col < 0:
                continue
            solid_count = 0
            for r, row in enumerate(ground.active):
                if look_col >= len(row) or not row[look_col]:
                    continue
                tile_y = r * TILE_HEIGHT
                if tile_y <= self.y + self.height and tile_y + TILE_HEIGHT >= self.y:
                    solid_count += 1
            if solid_count >= 2:
                return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        animation = self.animations[self.state]
        frame = animation.frame_at(self.clock())
        if frame is not None:
            if self.facing_right:
                frame = pygame.transform.flip(frame, True, False)
            surface.blit(frame, (self.x, self.y))
        if (
            self.state == CharacterState.ATK
            and animation.display_index == ATTACK_FRAME
            and self.attack_sound is not None
            and self.attack_sound.get_num_channels() == 0
        ):
            self.attack_sound.play()

    def destroy(self) -> None:
        if self.attack_sound is not None:
            self.attack_sound.stop()
        self.attack_sound = None
        self.animations = []