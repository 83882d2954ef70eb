"""Test the RGBA pixel buffer.

Tests for pixelbrush.backend.models.pixel_buffer:
    - Size invariant and construction errors
    - Single-pixel writes by index and by (x, y), with clipping
    - Bulk replacement and SizeMismatchError
    - Solid and gradient initialisation

Test cases:
    - test_new_buffer_is_transparent()
    - test_invalid_dimensions_rejected()
    - test_set_xy_writes_only_target_pixel()
    - test_out_of_range_writes_are_ignored()
    - test_set_xy_clips_each_axis()
    - test_get_out_of_range_raises()
    - test_replace_all_size_mismatch_keeps_buffer()
    - test_replace_all_swaps_storage()
    - test_replace_all_accepts_numpy()
    - test_filled()
    - test_from_gradient_samples_rows()
    - test_from_gradient_rejects_out_of_range_color()
    - test_copy_is_independent()

Run:
    pytest tests/test_pixel_buffer.py -v
"""

import numpy as np
import pytest

from pixelbrush.backend.models.color import Color
from pixelbrush.backend.models.pixel_buffer import PixelBuffer, SizeMismatchError

RED = Color(255, 0, 0, 255)


def test_new_buffer_is_transparent():
    buffer = PixelBuffer(3, 2)
    assert buffer.area == 6
    assert buffer.byte_length == 24
    assert buffer.get_all() == bytes(24)


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 3)])
def test_invalid_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        PixelBuffer(width, height)


def test_set_xy_writes_only_target_pixel():
    """Every valid (x, y) maps to index y*width + x and nothing else changes."""
    width, height = 4, 3
    for y in range(height):
        for x in range(width):
            buffer = PixelBuffer(width, height)
            assert buffer.set_xy(x, y, RED)

            index = y * width + x
            assert buffer.get(index) == RED
            data = buffer.get_all()
            assert data[index * 4:index * 4 + 4] == bytes(RED)
            others = data[:index * 4] + data[index * 4 + 4:]
            assert others == bytes(len(others))


@pytest.mark.parametrize("index", [-1, 12, 100])
def test_out_of_range_writes_are_ignored(index):
    buffer = PixelBuffer(4, 3)
    assert buffer.set(index, RED) is False
    assert buffer.get_all() == bytes(48)


def test_set_xy_clips_each_axis():
    """x == width would wrap to the next row as a flat index; it must be dropped."""
    buffer = PixelBuffer(4, 3)
    assert buffer.set_xy(4, 0, RED) is False
    assert buffer.set_xy(-1, 1, RED) is False
    assert buffer.set_xy(0, 3, RED) is False
    assert buffer.get_all() == bytes(48)


def test_get_out_of_range_raises():
    buffer = PixelBuffer(2, 2)
    with pytest.raises(IndexError):
        buffer.get(4)
    with pytest.raises(IndexError):
        buffer.get_xy(2, 0)


def test_replace_all_size_mismatch_keeps_buffer():
    buffer = PixelBuffer.filled(2, 2, RED)
    before = buffer.get_all()

    with pytest.raises(SizeMismatchError) as info:
        buffer.replace_all(bytes(15))

    assert info.value.expected == 16
    assert info.value.actual == 15
    assert isinstance(info.value, ValueError)
    assert buffer.get_all() == before


def test_replace_all_swaps_storage():
    buffer = PixelBuffer(2, 1)
    old_view = buffer.numpy_view
    buffer.replace_all(bytes(range(8)))

    assert buffer.get_all() == bytes(range(8))
    assert buffer.get(1) == Color(4, 5, 6, 7)
    # Views taken before the replacement still see the old content
    assert old_view.sum() == 0


def test_replace_all_accepts_numpy():
    buffer = PixelBuffer(2, 2)
    data = np.full((2, 2, 4), 9, dtype=np.uint8)
    buffer.replace_all(data)
    data[:] = 0
    assert buffer.get_all() == bytes([9] * 16)


def test_filled():
    buffer = PixelBuffer.filled(3, 3, Color(1, 2, 3, 4))
    assert buffer.get_all() == bytes([1, 2, 3, 4] * 9)


def test_from_gradient_samples_rows():
    fractions = []

    def gradient(y):
        fractions.append(y)
        return Color(0, 0, int(255 * y), 255)

    buffer = PixelBuffer.from_gradient(2, 4, gradient)

    assert fractions == [0.0, 0.25, 0.5, 0.75]
    assert buffer.get_xy(1, 0) == Color(0, 0, 0, 255)
    assert buffer.get_xy(0, 2) == Color(0, 0, 127, 255)
    assert buffer.get_xy(1, 3) == Color(0, 0, 191, 255)


def test_from_gradient_rejects_out_of_range_color():
    with pytest.raises(ValueError):
        PixelBuffer.from_gradient(2, 2, lambda y: Color(0, 0, 256, 255))


def test_copy_is_independent():
    buffer = PixelBuffer(2, 2)
    clone = buffer.copy()
    clone.set(0, RED)
    assert buffer.get(0) == Color(0, 0, 0, 0)
    assert clone.get(0) == RED
