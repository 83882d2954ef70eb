from typing import Iterator, List, Optional
from pixelbrush.backend.models.pixel_buffer import PixelCoordinate


def _step_toward(value: int, target: int) -> int:
    if value < target:
        return value + 1
    if value > target:
        return value - 1
    return value


class DragInterpolator:
    """
    Cells visited between two pointer samples of a drag.

    Every step moves x and y one cell toward the end point independently,
    so the walk is diagonal until one axis is exhausted and then straight.
    For |dx| != |dy| this is not the ideal rasterized line, but it never
    leaves a gap between consecutive cells.

    The start cell is excluded (it was painted by the previous event) and
    the end cell is included. Without a start, only the end cell is visited.
    Iterating again restarts the walk.
    """

    def __init__(self, start: Optional[PixelCoordinate], end: PixelCoordinate):
        self.start = PixelCoordinate(*start) if start is not None else None
        self.end = PixelCoordinate(*end)

    def __iter__(self) -> Iterator[PixelCoordinate]:
        if self.start is None:
            yield self.end
            return

        x, y = self.start
        while (x, y) != self.end:
            x = _step_toward(x, self.end.x)
            y = _step_toward(y, self.end.y)
            yield PixelCoordinate(x, y)

    def __len__(self) -> int:
        if self.start is None:
            return 1
        return max(abs(self.end.x - self.start.x), abs(self.end.y - self.start.y))


def interpolate(start: Optional[PixelCoordinate], end: PixelCoordinate) -> List[PixelCoordinate]:
    """Eager form of DragInterpolator"""
    return list(DragInterpolator(start, end))
