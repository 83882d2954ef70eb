from pixelbrush.frontend.widgets.editable_pixel_image import EditablePixelImage
from pixelbrush.frontend.widgets.pixel_image import PixelImage

__all__ = ["EditablePixelImage", "PixelImage"]
