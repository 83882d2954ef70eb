from pixelbrush.backend.controller import PixelEditController, PixelImageValue, PixelTapEvent
from pixelbrush.backend.models import Color, PixelBuffer, PixelCoordinate, PixelPalette, SizeMismatchError
from pixelbrush.backend.utils import DragInterpolator, interpolate, stamp, stamp_offsets, to_pixel

__all__ = [
    "PixelEditController",
    "PixelImageValue",
    "PixelTapEvent",
    "Color",
    "PixelBuffer",
    "PixelCoordinate",
    "PixelPalette",
    "SizeMismatchError",
    "DragInterpolator",
    "interpolate",
    "stamp",
    "stamp_offsets",
    "to_pixel",
]
