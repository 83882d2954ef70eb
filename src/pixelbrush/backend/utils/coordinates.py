import math
from pixelbrush.backend.models.pixel_buffer import PixelCoordinate


def to_pixel(pointer_x: float, pointer_y: float,
             viewport_width: float, viewport_height: float,
             grid_width: int, grid_height: int) -> PixelCoordinate:
    """
    Map a pointer position inside a viewport onto the pixel grid.

    Each axis is scaled by grid / viewport and truncated toward zero, so a
    pointer slightly left of or above the viewport still lands on column or
    row 0, while larger excursions give negative or >= grid values. No
    clamping happens here; callers must bounds-check the result.

    Args:
        pointer_x, pointer_y: Pointer position relative to the viewport's
            top-left corner, in display units.
        viewport_width, viewport_height: Current rendered size of the
            viewport. Pass the size at event time, it may change between
            events.
        grid_width, grid_height: Logical raster size in pixels.

    Returns:
        PixelCoordinate of the cell under the pointer.

    Raises:
        ValueError: If the viewport has a non-positive dimension.
    """
    if viewport_width <= 0 or viewport_height <= 0:
        raise ValueError(f"Viewport must have positive size, got {viewport_width}x{viewport_height}")

    x = math.trunc(grid_width * pointer_x / viewport_width)
    y = math.trunc(grid_height * pointer_y / viewport_height)
    return PixelCoordinate(x, y)
