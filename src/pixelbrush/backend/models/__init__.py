from pixelbrush.backend.models.color import Color
from pixelbrush.backend.models.palette import PixelPalette
from pixelbrush.backend.models.pixel_buffer import PixelBuffer, PixelCoordinate, SizeMismatchError

__all__ = ["Color", "PixelPalette", "PixelBuffer", "PixelCoordinate", "SizeMismatchError"]
