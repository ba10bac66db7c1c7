"""Palette-indexed bitmaps used while decoding GIF images."""

from __future__ import annotations


class IndexedBitmap:
    """A width x height grid of 8-bit palette indices, stored row by row."""

    def __init__(self, width: int, height: int, data: bytes | None = None):
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.width = width
        self.height = height
        if data is None:
            self.data = bytearray(width * height)
        else:
            if len(data) != width * height:
                raise ValueError("data length does not match bitmap size")
            self.data = bytearray(data)

    def pixel(self, x: int, y: int) -> int:
        """Palette index at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("pixel outside bitmap")
        return self.data[x + y * self.width]

    def blit(
        self,
        target: IndexedBitmap,
        xf: int,
        yf: int,
        xt: int,
        yt: int,
        w: int,
        h: int,
    ) -> None:
        """Copy a w x h block from (xf, yf) here to (xt, yt) in ``target``, clipped."""
        if w <= 0 or h <= 0:
            return

        if xf < 0:
            w += xf
            xt -= xf
            xf = 0
        if yf < 0:
            h += yf
            yt -= yf
            yf = 0
        w = min(w, self.width - xf)
        h = min(h, self.height - yf)

        if xt < 0:
            w += xt
            xf -= xt
            xt = 0
        if yt < 0:
            h += yt
            yf -= yt
            yt = 0
        w = min(w, target.width - xt)
        h = min(h, target.height - yt)

        if w <= 0 or h <= 0:
            return

        for row in range(h):
            src = (yf + row) * self.width + xf
            dst = (yt + row) * target.width + xt
            target.data[dst:dst + w] = self.data[src:src + w]