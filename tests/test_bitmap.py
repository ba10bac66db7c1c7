import pytest

from tilebreaker.bitmap import IndexedBitmap


def _numbered(width, height):
    return IndexedBitmap(width, height, bytes(range(width * height)))


def test_new_bitmap_is_zeroed():
    bmp = IndexedBitmap(3, 2)
    assert bytes(bmp.data) == bytes(6)


def test_data_length_must_match():
    with pytest.raises(ValueError):
        IndexedBitmap(2, 2, b"\x00\x01\x02")


def test_pixel_is_row_major():
    bmp = _numbered(4, 3)
    assert bmp.pixel(0, 0) == 0
    assert bmp.pixel(3, 0) == 3
    assert bmp.pixel(0, 1) == 4


def test_pixel_out_of_range():
    with pytest.raises(IndexError):
        _numbered(2, 2).pixel(2, 0)


def test_full_blit_copies_everything():
    src = _numbered(4, 3)
    dst = IndexedBitmap(4, 3)
    src.blit(dst, 0, 0, 0, 0, 4, 3)
    assert dst.data == src.data


def test_blit_region_to_offset():
    src = _numbered(4, 4)
    dst = IndexedBitmap(4, 4)
    src.blit(dst, 1, 1, 2, 2, 2, 2)
    assert dst.pixel(2, 2) == src.pixel(1, 1)
    assert dst.pixel(3, 3) == src.pixel(2, 2)
    assert dst.pixel(0, 0) == 0
    assert dst.pixel(1, 2) == 0


def test_blit_clips_at_destination_edge():
    src = _numbered(4, 4)
    dst = IndexedBitmap(3, 3)
    src.blit(dst, 0, 0, 1, 1, 4, 4)
    assert len(dst.data) == 9
    assert dst.pixel(1, 1) == src.pixel(0, 0)
    assert dst.pixel(2, 2) == src.pixel(1, 1)
    assert dst.pixel(0, 0) == 0


def test_blit_negative_source_offset_shifts_destination():
    src = _numbered(3, 3)
    dst = IndexedBitmap(3, 3)
    src.blit(dst, -1, 0, 0, 0, 3, 1)
    assert dst.pixel(0, 0) == 0
    assert dst.pixel(1, 0) == src.pixel(0, 0)
    assert dst.pixel(2, 0) == src.pixel(1, 0)


def test_blit_negative_destination_offset_skips_source():
    src = _numbered(3, 3)
    dst = IndexedBitmap(3, 3)
    src.blit(dst, 0, 0, 0, -1, 3, 3)
    assert dst.pixel(0, 0) == src.pixel(0, 1)
    assert dst.pixel(0, 1) == src.pixel(0, 2)
    assert dst.pixel(0, 2) == 0


@pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-1, 2)])
def test_empty_blit_leaves_target(w, h):
    src = _numbered(3, 3)
    dst = IndexedBitmap(3, 3)
    src.blit(dst, 0, 0, 0, 0, w, h)
    assert bytes(dst.data) == bytes(9)


def test_blit_fully_outside_does_nothing():
    src = _numbered(3, 3)
    dst = IndexedBitmap(3, 3)
    src.blit(dst, 0, 0, 5, 5, 3, 3)
    assert bytes(dst.data) == bytes(9)


def test_blit_onto_itself_moves_rows():
    bmp = _numbered(2, 3)
    row0 = bytes(bmp.data[0:2])
    bmp.blit(bmp, 0, 0, 0, 2, 2, 1)
    assert bytes(bmp.data[4:6]) == row0