"""LZW decoding of GIF image data into an indexed bitmap."""

from __future__ import annotations

from typing import BinaryIO

from tilebreaker.bitmap import IndexedBitmap

_MAX_CODES = 4096
_MAX_BITS = 12


class GifFormatError(ValueError):
    """Raised when GIF data is malformed or truncated."""


class _CodeReader:
    """Reads variable-width, least-significant-bit-first codes from GIF sub-blocks."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._block = b""
        self._bit = 0

    def _next_block(self) -> None:
        size = self._stream.read(1)
        if not size:
            raise GifFormatError("unexpected end of GIF data")
        length = size[0]
        if length == 0:
            raise GifFormatError("erroneous GIF stream: empty data block")
        block = self._stream.read(length)
        if len(block) != length:
            raise GifFormatError("truncated GIF data block")
        self._block = block
        self._bit = 0

    def read(self, bit_size: int) -> int:
        code = 0
        for shift in range(bit_size):
            if self._bit >> 3 >= len(self._block):
                self._next_block()
            if self._block[self._bit >> 3] >> (self._bit & 7) & 1:
                code |= 1 << shift
            self._bit += 1
        return code


def lzw_decode(stream: BinaryIO, bitmap: IndexedBitmap) -> None:
    """Decode one LZW-compressed image from ``stream`` into ``bitmap``.

    The stream must be positioned at the minimum code size byte. Reading
    stops right after the end-of-information code.
    """
    first = stream.read(1)
    if not first:
        raise GifFormatError("unexpected end of GIF data")
    min_size = first[0]
    if min_size >= _MAX_BITS:
        raise GifFormatError(f"invalid LZW code size {min_size}")

    clear_marker = 1 << min_size
    end_marker = clear_marker + 1
    n = clear_marker + 2
    bit_size = min_size + 1

    prefix = [0] * _MAX_CODES
    suffix = list(range(_MAX_CODES))
    length = [0] * _MAX_CODES

    data = bitmap.data
    size = len(data)
    reader = _CodeReader(stream)
    out_pos = 0

    prev = reader.read(bit_size)
    while True:
        code = reader.read(bit_size)
        if code == clear_marker:
            n = clear_marker + 2
            bit_size = min_size + 1
            prev = code
            continue
        if code == end_marker:
            break

        unknown = code >= n
        c = prev if unknown else code

        out_pos += length[c]
        if out_pos + (1 if unknown else 0) >= size:
            raise GifFormatError("LZW data exceeds image size")
        pos = out_pos
        while True:
            data[pos] = suffix[c] & 0xFF
            if not length[c]:
                break
            c = prefix[c]
            pos -= 1
        out_pos += 1

        if unknown:
            data[out_pos] = suffix[c] & 0xFF
            out_pos += 1

        if prev != clear_marker and n < _MAX_CODES:
            prefix[n] = prev
            length[n] = length[prev] + 1
            suffix[n] = suffix[c]
            n += 1

        if n == 1 << bit_size and bit_size < _MAX_BITS:
            bit_size += 1

        prev = code