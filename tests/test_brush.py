"""Test circular brush stamping.

Tests for pixelbrush.backend.utils.brush:
    - Diameter 1 and 2 stamps
    - Circle membership for larger brushes
    - Out-of-raster cells are not filtered
    - Cached offsets

Test cases:
    - test_diameter_one_is_center_only()
    - test_diameter_two_is_plus_shape()
    - test_diameter_three_matches_two()
    - test_larger_brush_is_filled_circle()
    - test_stamp_near_origin_goes_negative()
    - test_invalid_diameter()
    - test_stamp_offsets_unique_and_cached()

Run:
    pytest tests/test_brush.py -v
"""

import numpy as np
import pytest

from pixelbrush.backend.utils.brush import stamp, stamp_offsets


def test_diameter_one_is_center_only():
    cells = list(stamp((5, 5), 1))
    assert set(cells) == {(5, 5)}
    # Duplicates are allowed
    assert len(cells) == 4


def test_diameter_two_is_plus_shape():
    assert set(stamp((5, 5), 2)) == {(5, 5), (4, 5), (6, 5), (5, 4), (5, 6)}


def test_diameter_three_matches_two():
    # Integer radius: 3 // 2 == 2 // 2
    assert set(stamp((0, 0), 3)) == set(stamp((0, 0), 2))


def test_larger_brush_is_filled_circle():
    radius = 5
    cells = set(stamp((10, 10), 2 * radius))
    expected = {
        (10 + dx, 10 + dy)
        for dx in range(-radius, radius + 1)
        for dy in range(-radius, radius + 1)
        if dx * dx + dy * dy <= radius * radius
    }
    assert cells == expected
    assert (15, 10) in cells
    assert (14, 14) not in cells


def test_stamp_near_origin_goes_negative():
    cells = set(stamp((0, 0), 4))
    assert (-2, 0) in cells
    assert (0, -2) in cells


@pytest.mark.parametrize("diameter", [0, -3])
def test_invalid_diameter(diameter):
    with pytest.raises(ValueError):
        list(stamp((0, 0), diameter))
    with pytest.raises(ValueError):
        stamp_offsets(diameter)


def test_stamp_offsets_unique_and_cached():
    offsets = stamp_offsets(4)
    assert offsets.shape == (13, 2)
    assert len({tuple(o) for o in offsets.tolist()}) == 13
    assert stamp_offsets(4) is offsets
    assert not offsets.flags.writeable
    assert np.array_equal(stamp_offsets(1), np.array([[0, 0]]))
