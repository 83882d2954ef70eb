from pixelbrush.backend.utils.brush import stamp, stamp_offsets
from pixelbrush.backend.utils.coordinates import to_pixel
from pixelbrush.backend.utils.interpolation import DragInterpolator, interpolate

__all__ = ["stamp", "stamp_offsets", "to_pixel", "DragInterpolator", "interpolate"]
