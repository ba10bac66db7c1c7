"""Reading GIF files into palette-indexed frames."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import BinaryIO

from tilebreaker.bitmap import IndexedBitmap
from tilebreaker.lzw import GifFormatError, lzw_decode

Color = tuple[int, int, int]

_IMAGE_DESCRIPTOR = 0x2C
_EXTENSION = 0x21
_TRAILER = 0x3B
_GRAPHIC_CONTROL = 0xF9
_APPLICATION = 0xFF

# (first row, step) of the four interlace passes.
_INTERLACE_PASSES = ((0, 8), (4, 8), (2, 4), (1, 2))


@dataclass
class GifFrame:
    """One image of a GIF, with its placement and timing."""

    bitmap: IndexedBitmap | None = None
    palette: list[Color] = field(default_factory=list)
    xoff: int = 0
    yoff: int = 0
    duration: int = 0
    """Display time in hundredths of a second."""
    disposal_method: int = 0
    """0 = don't care, 1 = keep, 2 = background, 3 = previous."""
    transparent_index: int = -1


@dataclass
class GifImage:
    """A decoded GIF: logical screen size, global palette and frames."""

    width: int
    height: int
    palette: list[Color] = field(default_factory=list)
    background_index: int = 0
    loop: int = 0
    """-1 = no, 0 = forever, 1..65535 = that many times."""
    frames: list[GifFrame] = field(default_factory=list)


def _byte(stream: BinaryIO) -> int:
    data = stream.read(1)
    if not data:
        raise GifFormatError("unexpected end of GIF data")
    return data[0]


def _word(stream: BinaryIO) -> int:
    low = _byte(stream)
    return low | _byte(stream) << 8


def _bytes(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise GifFormatError("unexpected end of GIF data")
    return data


def _palette(stream: BinaryIO, count: int) -> list[Color]:
    return [tuple(_bytes(stream, 3)) for _ in range(count)]


def _palette_size(flags: int) -> int:
    return 1 << ((flags & 7) + 1) if flags & 0x80 else 0


def deinterlace(bitmap: IndexedBitmap) -> None:
    """Reorder the rows of an interlaced image into top-to-bottom order, in place."""
    rows = [
        y
        for start, step in _INTERLACE_PASSES
        for y in range(start, bitmap.height, step)
    ]
    result = IndexedBitmap(bitmap.width, bitmap.height)
    for source_row, y in enumerate(rows):
        bitmap.blit(result, 0, source_row, 0, y, bitmap.width, 1)
    result.blit(bitmap, 0, 0, 0, 0, bitmap.width, bitmap.height)


def _read_image(stream: BinaryIO, frame: GifFrame) -> None:
    frame.xoff = _word(stream)
    frame.yoff = _word(stream)
    width = _word(stream)
    height = _word(stream)
    bitmap = IndexedBitmap(width, height)
    flags = _byte(stream)
    frame.palette = _palette(stream, _palette_size(flags))
    lzw_decode(stream, bitmap)
    if flags & 0x40:
        deinterlace(bitmap)
    frame.bitmap = bitmap


def _read_extension(stream: BinaryIO, image: GifImage, frame: GifFrame) -> None:
    kind = _byte(stream)
    size = _byte(stream)
    if kind == _GRAPHIC_CONTROL:
        if size != 4:
            raise GifFormatError("graphic control extension must be 4 bytes")
        flags = _byte(stream)
        frame.disposal_method = (flags >> 2) & 7
        frame.duration = _word(stream)
        if flags & 1:
            frame.transparent_index = _byte(stream)
        else:
            _bytes(stream, 1)
            frame.transparent_index = -1
        size = _byte(stream)
    elif kind == _APPLICATION and size == 11:
        name = _bytes(stream, 11)
        size = _byte(stream)
        if name == b"NETSCAPE2.0" and size == 3:
            sub_id = _byte(stream)
            loop = _word(stream)
            image.loop = loop if sub_id == 1 else 0
            size = _byte(stream)
    while size:
        _bytes(stream, size)
        size = _byte(stream)


def load_raw(stream: BinaryIO) -> GifImage:
    """Parse a GIF from a binary stream into indexed frames."""
    signature = stream.read(6)
    if (
        len(signature) != 6
        or signature[:4] != b"GIF8"
        or signature[4:5] not in (b"7", b"9")
        or signature[5:6] != b"a"
    ):
        raise GifFormatError("not a GIF file")

    width = _word(stream)
    height = _word(stream)
    flags = _byte(stream)
    background_index = _byte(stream)
    _bytes(stream, 1)  # pixel aspect ratio
    image = GifImage(
        width=width,
        height=height,
        palette=_palette(stream, _palette_size(flags)),
        background_index=background_index,
    )

    frame = GifFrame()
    while True:
        block = _byte(stream)
        if block == _IMAGE_DESCRIPTOR:
            _read_image(stream, frame)
            image.frames.append(frame)
            frame = GifFrame()
        elif block == _EXTENSION:
            _read_extension(stream, image, frame)
        elif block == _TRAILER:
            return image


def read_gif(path: str | os.PathLike[str]) -> GifImage:
    """Read and parse the GIF file at ``path``."""
    with open(path, "rb") as stream:
        return load_raw(stream)