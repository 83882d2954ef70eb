import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union
from pixelbrush.backend.models.color import Color, TRANSPARENT
from pixelbrush.backend.models.palette import PixelPalette
from pixelbrush.backend.models.pixel_buffer import BytesLike, PixelBuffer, PixelCoordinate
from pixelbrush.backend.utils.brush import stamp
from pixelbrush.backend.utils.coordinates import to_pixel
from pixelbrush.backend.utils.interpolation import DragInterpolator
from pixelbrush.definitions import DEFAULT_BRUSH_COLOR, DEFAULT_BRUSH_SIZE


ColorLike = Union[Color, str, tuple]


@dataclass(frozen=True)
class PixelTapEvent:
    """
    One pixel written by a pointer event.

    Fields:
        x, y: Pixel coordinate of the written cell.
        index: Flat pixel index, y * width + x.
        local_position: Raw pointer position that caused the write, in the
            viewport's display units.
    """
    x: int
    y: int
    index: int
    local_position: Tuple[float, float]


@dataclass(frozen=True)
class PixelImageValue:
    """Immutable snapshot of the image handed to listeners and renderers"""
    width: int
    height: int
    pixels: bytes
    palette: Optional[PixelPalette] = None


class PixelEditController:
    """
    Owns the pixel buffer of an editable image and turns pointer events
    into brush strokes.

    Pointer handling is a two-state machine. While idle, a pointer-down or
    pointer-move stamps the brush once at the mapped cell and starts a
    stroke. While dragging, a pointer-move walks from the last cell to the
    new one and stamps at every visited cell. Pointer-up or drag-end returns
    to idle without writing.

    Every mutation publishes a new PixelImageValue to registered listeners.
    """

    def __init__(self,
                 width: int,
                 height: int,
                 pixels: Optional[BytesLike] = None,
                 palette: Optional[PixelPalette] = None,
                 gradient: Optional[Callable[[float], ColorLike]] = None,
                 bg_color: Optional[ColorLike] = None,
                 brush_size: int = DEFAULT_BRUSH_SIZE,
                 brush_color: ColorLike = DEFAULT_BRUSH_COLOR,
                 on_tapped_pixel: Optional[Callable[[PixelTapEvent], None]] = None):
        """
        Args:
            width, height: Raster size in pixels, both > 0.
            pixels: Initial RGBA bytes, exactly width * height * 4 long.
            palette: Optional palette passed through to renderers.
            gradient: Row colour function of y / height, used when neither
                pixels nor bg_color is given.
            bg_color: Solid initial fill, used when pixels is not given.
            brush_size: Brush diameter in pixels, >= 1.
            brush_color: Brush colour.
            on_tapped_pixel: Called once per pixel written by pointer input.

        Raises:
            ValueError: On invalid dimensions or brush size.
            SizeMismatchError: If pixels has the wrong length.
        """
        self.logger = logging.getLogger(self.__class__.__name__)

        self._palette = palette
        self.on_tapped_pixel = on_tapped_pixel
        self._listeners: List[Callable[[PixelImageValue], None]] = []

        self._brush_size = DEFAULT_BRUSH_SIZE
        self._brush_color = Color.from_string(DEFAULT_BRUSH_COLOR)
        self.set_brush(size=brush_size, color=brush_color)

        self._buffer = self._create_buffer(width, height, pixels, gradient, bg_color)
        self._last_pixel: Optional[PixelCoordinate] = None
        self._value = self._snapshot()

        self.logger.info(f"Created {width}x{height} editable image")

    ############ PROPERTIES ############

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def area(self) -> int:
        return self._buffer.area

    @property
    def palette(self) -> Optional[PixelPalette]:
        return self._palette

    @property
    def value(self) -> PixelImageValue:
        """Latest published snapshot"""
        return self._value

    @property
    def pixels(self) -> bytes:
        return self._value.pixels

    @pixels.setter
    def pixels(self, data: BytesLike):
        self.set_buffer(data)

    @property
    def brush_size(self) -> int:
        return self._brush_size

    @property
    def brush_color(self) -> Color:
        return self._brush_color

    @property
    def last_pixel(self) -> Optional[PixelCoordinate]:
        """Last cell of the stroke in progress, None when idle"""
        return self._last_pixel

    @property
    def is_dragging(self) -> bool:
        return self._last_pixel is not None

    ############ LISTENERS ############

    def add_listener(self, listener: Callable[[PixelImageValue], None]):
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[PixelImageValue], None]):
        """Unregister a listener; unknown listeners are ignored"""
        if listener in self._listeners:
            self._listeners.remove(listener)

    ############ GETTER/SETTER ############

    def get_pixel(self, x: int, y: int) -> Color:
        return self._buffer.get_xy(x, y)

    def set_brush(self, size: Optional[int] = None, color: Optional[ColorLike] = None):
        """
        Update the brush. Arguments left as None keep their current value.

        Raises:
            ValueError: If size < 1 or color cannot be parsed.
        """
        new_size = self._brush_size if size is None else int(size)
        if new_size < 1:
            raise ValueError(f"Brush size must be at least 1, got {size}")
        new_color = self._brush_color if color is None else Color.coerce(color)

        self._brush_size = new_size
        self._brush_color = new_color
        self.logger.debug(f"Brush set to size {self._brush_size}, colour {self._brush_color.to_hex()}")

    def set_pixel(self, x: int, y: int, color: ColorLike):
        """Write one pixel; coordinates outside the raster are ignored"""
        if self._buffer.set_xy(x, y, Color.coerce(color)):
            self._publish()

    def set_pixel_index(self, index: int, color: ColorLike):
        """Write one pixel by flat index; invalid indices are ignored"""
        if self._buffer.set(index, Color.coerce(color)):
            self._publish()

    def set_buffer(self, data: BytesLike):
        """
        Replace the whole image.

        Raises:
            SizeMismatchError: If data is not width * height * 4 bytes. The
                current image is kept.
        """
        self._buffer.replace_all(data)
        self.logger.info(f"Replaced {self.width}x{self.height} pixel buffer")
        self._publish()

    def fill(self, color: ColorLike):
        self._buffer.fill(Color.coerce(color))
        self._publish()

    ############ POINTER EVENTS ############

    def pointer_down(self, x: float, y: float,
                     viewport_width: float, viewport_height: float) -> List[PixelTapEvent]:
        """
        Start a stroke at a pointer position.

        A pointer-down during a stroke abandons it and starts a new one.

        Returns:
            Events for every pixel written.
        """
        self._last_pixel = None
        return self._paint(x, y, viewport_width, viewport_height)

    def pointer_move(self, x: float, y: float,
                     viewport_width: float, viewport_height: float) -> List[PixelTapEvent]:
        """
        Continue the current stroke, or start one when idle.

        Returns:
            Events for every pixel written.
        """
        return self._paint(x, y, viewport_width, viewport_height)

    def pointer_up(self):
        """End the current stroke"""
        if self._last_pixel is not None:
            self.logger.debug(f"Stroke ended at {tuple(self._last_pixel)}")
        self._last_pixel = None

    def drag_end(self):
        """End the current stroke"""
        self.pointer_up()

    ############ PRIVATE METHODS ############

    def _create_buffer(self, width, height, pixels, gradient, bg_color) -> PixelBuffer:
        if pixels is not None:
            return PixelBuffer(width, height, pixels)
        if bg_color is not None:
            return PixelBuffer.filled(width, height, Color.coerce(bg_color))
        if gradient is not None:
            return PixelBuffer.from_gradient(width, height, gradient)
        return PixelBuffer.filled(width, height, TRANSPARENT)

    def _paint(self, x: float, y: float,
               viewport_width: float, viewport_height: float) -> List[PixelTapEvent]:
        target = to_pixel(x, y, viewport_width, viewport_height, self.width, self.height)

        # Ordered de-duplication: a cell is written at most once per event
        cells: Dict[PixelCoordinate, None] = {}
        for visited in DragInterpolator(self._last_pixel, target):
            for cell in stamp(visited, self._brush_size):
                if self._buffer.contains(cell.x, cell.y):
                    cells[cell] = None

        self._last_pixel = target

        events = []
        for cell in cells:
            index = self._buffer.index_of(cell.x, cell.y)
            self._buffer.set(index, self._brush_color)
            events.append(PixelTapEvent(x=cell.x, y=cell.y, index=index, local_position=(x, y)))

        if not events:
            return events

        self.logger.debug(f"Painted {len(events)} pixels toward {tuple(target)}")
        # A failing listener must not hide the writes from the tap callback
        try:
            self._publish()
        finally:
            if self.on_tapped_pixel is not None:
                for event in events:
                    self.on_tapped_pixel(event)

        return events

    def _snapshot(self) -> PixelImageValue:
        return PixelImageValue(
            width=self.width,
            height=self.height,
            pixels=self._buffer.get_all(),
            palette=self._palette,
        )

    def _publish(self):
        self._value = self._snapshot()
        for listener in list(self._listeners):
            listener(self._value)
