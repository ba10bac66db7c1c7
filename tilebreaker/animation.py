"""Animated GIFs rendered to surfaces and played back over time."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

import pygame

from tilebreaker.gif import GifFrame, GifImage, read_gif


def _render_rgba(image: GifImage, frame: GifFrame) -> bytes:
    canvas = bytearray(image.width * image.height * 4)
    bitmap = frame.bitmap
    if bitmap is None:
        return bytes(canvas)
    palette = frame.palette or image.palette
    for y in range(bitmap.height):
        ty = frame.yoff + y
        if not 0 <= ty < image.height:
            continue
        row = bitmap.data[y * bitmap.width:(y + 1) * bitmap.width]
        for x, index in enumerate(row):
            tx = frame.xoff + x
            if index == frame.transparent_index or not 0 <= tx < image.width:
                continue
            r, g, b = palette[index] if index < len(palette) else (0, 0, 0)
            offset = (ty * image.width + tx) * 4
            canvas[offset:offset + 4] = bytes((r, g, b, 255))
    return bytes(canvas)


def render_frames(image: GifImage) -> list[pygame.Surface]:
    """Render every frame onto its own transparent canvas of the image's size."""
    size = (image.width, image.height)
    return [
        pygame.image.frombuffer(_render_rgba(image, frame), size, "RGBA").copy()
        for frame in image.frames
    ]


@dataclass(eq=False)
class GifAnimation:
    """Playback state of a rendered GIF."""

    image: GifImage
    frames: list[pygame.Surface]
    loop: int = -1
    start_time: float = 0.0
    done: bool = False
    display_index: int = 0

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("animation has no frames")

    @classmethod
    def load(cls, path: str | os.PathLike[str], loop: int) -> GifAnimation:
        """Load a GIF file; ``loop`` is -1 for once, 0 for forever, n for n times."""
        image = read_gif(path)
        return cls(image, render_frames(image), loop)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def duration(self) -> int:
        """Total duration in hundredths of a second."""
        return sum(frame.duration for frame in self.image.frames)

    def frame_at(self, seconds: float) -> pygame.Surface:
        """Return the frame to show at clock time ``seconds``, advancing playback."""
        if self.done or self.start_time == 0:
            self.start_time = seconds
            self.display_index = 0
            self.done = False
        elapsed = seconds - self.start_time
        total = self.duration / 100.0
        finished = (self.loop == -1 and elapsed > total) or (
            self.loop > 0 and elapsed > total * self.loop
        )
        if finished:
            self.done = True
            self.start_time = 0.0
            self.display_index = 0
            return self.frames[0]
        if total == 0:
            return self.frames[0]
        elapsed = math.fmod(elapsed, total)
        end = 0.0
        for index, (frame, surface) in enumerate(zip(self.image.frames, self.frames)):
            end += frame.duration / 100.0
            if elapsed < end:
                self.display_index = index
                return surface
        return self.frames[0]

    def frame(self, index: int) -> pygame.Surface:
        """Rendered frame number ``index``."""
        return self.frames[index]

    def frame_duration(self, index: int) -> float:
        """Duration of frame ``index`` in seconds."""
        return self.image.frames[index].duration / 100.0

    def reset(self) -> None:
        """Rewind to the first frame and clear the finished flag."""
        self.display_index = 0
        self.done = False