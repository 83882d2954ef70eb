import numpy as np
from functools import lru_cache
from typing import Iterator
from pixelbrush.backend.models.pixel_buffer import PixelCoordinate


def _check_diameter(diameter: int):
    if diameter < 1:
        raise ValueError(f"Brush diameter must be at least 1, got {diameter}")


def stamp(center: PixelCoordinate, diameter: int) -> Iterator[PixelCoordinate]:
    """
    Cells covered by a filled circular brush.

    Walks one quadrant (i, j in [0, radius] with i*i + j*j <= radius*radius,
    radius = diameter // 2) and mirrors it into all four quadrants. Cells on
    the axes come out more than once; writers must treat them as idempotent.
    Diameter 1 (radius 0) covers only the center.

    Coordinates may fall outside the raster and are not filtered here.

    Raises:
        ValueError: If diameter < 1.
    """
    _check_diameter(diameter)
    cx, cy = center
    radius = diameter // 2
    r2 = radius * radius

    for i in range(radius + 1):
        for j in range(radius + 1):
            if i * i + j * j > r2:
                continue
            yield PixelCoordinate(cx + i, cy + j)
            yield PixelCoordinate(cx - i, cy + j)
            yield PixelCoordinate(cx + i, cy - j)
            yield PixelCoordinate(cx - i, cy - j)


@lru_cache(maxsize=32)
def _offsets(diameter: int) -> np.ndarray:
    cells = sorted(set(stamp(PixelCoordinate(0, 0), diameter)), key=lambda c: (c.y, c.x))
    offsets = np.array(cells, dtype=np.int32).reshape(-1, 2)
    offsets.setflags(write=False)
    return offsets


def stamp_offsets(diameter: int) -> np.ndarray:
    """
    Unique (dx, dy) offsets of a brush relative to its center.

    Returns:
        Read-only int32 array of shape (N, 2), sorted by row then column.
    """
    _check_diameter(diameter)
    return _offsets(int(diameter))
