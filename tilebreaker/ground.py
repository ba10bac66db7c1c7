"""Destructible tile map that the character stands on."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any

import pygame

from tilebreaker.element import Element, ElementLabel
from tilebreaker.settings import HEIGHT, WIDTH, GameError
from tilebreaker.shapes import Rectangle

TILE_WIDTH = 16
TILE_HEIGHT = 16
MAP_COLS = WIDTH // TILE_WIDTH
MAP_ROWS = HEIGHT // TILE_HEIGHT


def load_mask(path: str | os.PathLike[str]) -> list[list[bool]]:
    """Read a MAP_ROWS x MAP_COLS grid of integers; a tile is solid where the value is 1."""
    with open(path, encoding="ascii") as stream:
        tokens = stream.read().split()
    needed = MAP_ROWS * MAP_COLS
    if len(tokens) < needed:
        raise ValueError(f"mask holds {len(tokens)} values, {needed} needed")
    try:
        values = [int(token) for token in tokens[:needed]]
    except ValueError as exc:
        raise ValueError("mask values must be integers") from exc
    rows = zip(*[iter(values)] * MAP_COLS)
    return [[value == 1 for value in row] for row in rows]


class Ground(Element):
    """A grid of square tiles; each solid tile has a rectangular hit-box."""

    def __init__(
        self,
        active: Sequence[Sequence[bool]],
        tileset: pygame.Surface | None = None,
        label: int = ElementLabel.GROUND,
        x: int = 0,
        y: int = 0,
    ):
        super().__init__(label)
        self.x = x
        self.y = y
        self.active = [[bool(cell) for cell in row] for row in active]
        columns = len(self.active[0]) if self.active else 0
        if any(len(row) != columns for row in self.active):
            raise ValueError("tile mask rows must all have the same length")
        self.tileset = tileset
        if tileset is not None:
            self.width, self.height = tileset.get_size()
        else:
            self.width = columns * TILE_WIDTH
            self.height = len(self.active) * TILE_HEIGHT
        self.tiles = [
            [self._slice(i, j) for j in range(columns)]
            for i in range(len(self.active))
        ]
        self.hitboxes: list[list[Rectangle | None]] = [
            [
                self._tile_hitbox(i, j) if solid else None
                for j, solid in enumerate(row)
            ]
            for i, row in enumerate(self.active)
        ]

    @classmethod
    def from_files(
        cls,
        image_path: str | os.PathLike[str],
        mask_path: str | os.PathLike[str],
        label: int,
    ) -> Ground:
        """Build a ground from a tileset image and a tile mask file."""
        try:
            tileset = pygame.image.load(os.fspath(image_path))
        except (pygame.error, FileNotFoundError) as exc:
            raise GameError(f"Failed to load image: {image_path}") from exc
        try:
            mask = load_mask(mask_path)
        except FileNotFoundError as exc:
            raise GameError(f"Failed to load mask file: {mask_path}") from exc
        return cls(mask, tileset, label)

    def _tile_hitbox(self, row: int, col: int) -> Rectangle:
        tx = col * TILE_WIDTH
        ty = row * TILE_HEIGHT
        return Rectangle(
            self.x + tx,
            self.y + ty,
            self.x + tx + TILE_WIDTH,
            self.y + ty + TILE_HEIGHT,
        )

    def _slice(self, row: int, col: int) -> pygame.Surface | None:
        if self.tileset is None:
            return None
        rect = pygame.Rect(col * TILE_WIDTH, row * TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT)
        rect = rect.clip(self.tileset.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return None
        return self.tileset.subsurface(rect)

    def update(self, scene: Any) -> None:
        """The ground has no behaviour of its own."""

    def interact(self, scene: Any) -> None:
        """Interactions with the ground are handled by the other elements."""

    def draw(self, surface: pygame.Surface) -> None:
        for i, row in enumerate(self.active):
            for j, solid in enumerate(row):
                tile = self.tiles[i][j]
                if solid and tile is not None:
                    surface.blit(
                        tile, (self.x + j * TILE_WIDTH, self.y + i * TILE_HEIGHT)
                    )

    def destroy(self) -> None:
        self.tileset = None
        self.tiles = []
        self.hitboxes = []