import io
import struct

import pytest

from tilebreaker.bitmap import IndexedBitmap
from tilebreaker.gif import GifImage, deinterlace, load_raw, read_gif
from tilebreaker.lzw import GifFormatError

TINY_GIF = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00"
    b"!\xf9\x04\x01\x00\x00\x00\x00"
    b",\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)

PALETTE = [(0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255)]
TRAILER = b"\x3b"


def _lzw(pixels, min_size=2):
    clear = 1 << min_size
    bits = min_size + 1
    codes = []
    for start in range(0, len(pixels), 2):
        codes.append(clear)
        codes.extend(pixels[start:start + 2])
    codes.append(clear + 1)
    value = 0
    for position, code in enumerate(codes):
        value |= code << (position * bits)
    data = value.to_bytes((len(codes) * bits + 7) // 8, "little")
    out = bytes([min_size])
    for start in range(0, len(data), 255):
        chunk = data[start:start + 255]
        out += bytes([len(chunk)]) + chunk
    return out + b"\x00"


def _header(width, height, palette=PALETTE, version=b"9"):
    return (
        b"GIF8" + version + b"a"
        + struct.pack("<HHBBB", width, height, 0x81, 0, 0)
        + b"".join(bytes(color) for color in palette)
    )


def _image(x, y, w, h, pixels, local=None, interlaced=False):
    flags = 0x81 if local else 0
    if interlaced:
        flags |= 0x40
    palette = b"".join(bytes(color) for color in local) if local else b""
    return b"\x2c" + struct.pack("<HHHHB", x, y, w, h, flags) + palette + _lzw(pixels)


def _gce(duration, disposal=0, transparent=None):
    flags = disposal << 2 | (1 if transparent is not None else 0)
    return b"\x21\xf9\x04" + struct.pack("<BHB", flags, duration, transparent or 0) + b"\x00"


def _netscape(loop, sub_id=1):
    return (
        b"\x21\xff\x0bNETSCAPE2.0\x03"
        + bytes([sub_id])
        + struct.pack("<H", loop)
        + b"\x00"
    )


def test_tiny_gif():
    image = load_raw(io.BytesIO(TINY_GIF))
    assert (image.width, image.height) == (1, 1)
    assert image.palette == [(255, 255, 255), (0, 0, 0)]
    assert image.loop == 0
    assert len(image.frames) == 1
    frame = image.frames[0]
    assert frame.transparent_index == 0
    assert frame.disposal_method == 0
    assert frame.bitmap.pixel(0, 0) == 0
    assert frame.palette == []


def test_two_frames_with_timing_and_loop():
    pixels_a = [0, 1, 2, 3]
    pixels_b = [3, 2]
    data = (
        _header(2, 2)
        + _netscape(5)
        + _gce(10, disposal=2, transparent=3)
        + _image(0, 0, 2, 2, pixels_a)
        + _gce(20)
        + _image(1, 0, 1, 2, pixels_b)
        + TRAILER
    )
    image = load_raw(io.BytesIO(data))
    assert image.loop == 5
    assert image.palette == PALETTE
    first, second = image.frames
    assert first.duration == 10
    assert first.disposal_method == 2
    assert first.transparent_index == 3
    assert bytes(first.bitmap.data) == bytes(pixels_a)
    assert second.duration == 20
    assert second.transparent_index == -1
    assert (second.xoff, second.yoff) == (1, 0)
    assert (second.bitmap.width, second.bitmap.height) == (1, 2)
    assert bytes(second.bitmap.data) == bytes(pixels_b)


def test_netscape_with_other_sub_block_means_forever():
    data = _header(1, 1) + _netscape(7, sub_id=2) + _image(0, 0, 1, 1, [1]) + TRAILER
    assert load_raw(io.BytesIO(data)).loop == 0


def test_local_palette():
    local = [(9, 9, 9), (8, 8, 8), (7, 7, 7), (6, 6, 6)]
    data = _header(1, 1) + _image(0, 0, 1, 1, [2], local=local) + TRAILER
    assert load_raw(io.BytesIO(data)).frames[0].palette == local


def test_interlaced_image_is_reordered():
    order = [0, 4, 2, 6, 1, 3, 5, 7]
    rows = [y % 4 for y in range(8)]
    stored = [rows[y] for y in order]
    data = _header(1, 8) + _image(0, 0, 1, 8, stored, interlaced=True) + TRAILER
    bitmap = load_raw(io.BytesIO(data)).frames[0].bitmap
    assert [bitmap.pixel(0, y) for y in range(8)] == rows


def test_deinterlace_row_order():
    bitmap = IndexedBitmap(1, 8, bytes(range(8)))
    deinterlace(bitmap)
    for stored_row, y in enumerate([0, 4, 2, 6, 1, 3, 5, 7]):
        assert bitmap.pixel(0, y) == stored_row


def test_comment_extension_and_stray_bytes_are_skipped():
    comment = b"\x21\xfe\x05hello\x00"
    data = _header(1, 1) + comment + b"\x00" + _image(0, 0, 1, 1, [3]) + TRAILER
    image = load_raw(io.BytesIO(data))
    assert [frame.bitmap.pixel(0, 0) for frame in image.frames] == [3]


@pytest.mark.parametrize("data", [b"PNG89a", b"GIF88a", b"GIF89b", b"GIF"])
def test_bad_signature(data):
    with pytest.raises(GifFormatError):
        load_raw(io.BytesIO(data + b"\x00" * 16))


def test_missing_trailer_raises():
    data = _header(1, 1) + _image(0, 0, 1, 1, [1])
    with pytest.raises(GifFormatError):
        load_raw(io.BytesIO(data))


def test_graphic_control_wrong_size_raises():
    data = _header(1, 1) + b"\x21\xf9\x03\x00\x00\x00\x00" + TRAILER
    with pytest.raises(GifFormatError):
        load_raw(io.BytesIO(data))


def test_read_gif_from_file(tmp_path):
    path = tmp_path / "tiny.gif"
    path.write_bytes(TINY_GIF)
    image = read_gif(path)
    assert isinstance(image, GifImage)
    assert image.palette == [(255, 255, 255), (0, 0, 0)]


def test_read_gif_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_gif(tmp_path / "absent.gif")