import logging
import numpy as np
from typing import Callable, NamedTuple, Optional, Union
from pixelbrush.backend.models.color import Color
from pixelbrush.definitions import CHANNELS


BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


class SizeMismatchError(ValueError):
    """Raised when a bulk pixel replacement has the wrong byte length"""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Pixel data must be exactly {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class PixelCoordinate(NamedTuple):
    """Integer cell position on the pixel grid. May lie outside the buffer."""
    x: int
    y: int


class PixelBuffer:
    """
    Fixed-size RGBA raster stored as a flat uint8 array.

    Layout is row-major, row 0 first, four bytes per pixel in R, G, B, A
    order. The flat length is always width * height * 4.

    Single-pixel writes outside the raster are ignored so brush stamps may
    run past the edges. Bulk replacement is strict and raises
    SizeMismatchError instead.
    """

    def __init__(self, width: int, height: int, data: Optional[BytesLike] = None):
        """
        Initialize PixelBuffer.

        Args:
            width, height: Raster dimensions in pixels, both > 0.
            data: Optional initial RGBA bytes. Transparent black if omitted.

        Raises:
            ValueError: If width or height is not positive.
            SizeMismatchError: If data has the wrong length.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)
        self.logger = logging.getLogger(self.__class__.__name__)

        if data is None:
            self._pixels = np.zeros(self.byte_length, dtype=np.uint8)
        else:
            self._pixels = self._as_array(data)

    ############ CONSTRUCTORS ############

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> 'PixelBuffer':
        """Create a buffer with every pixel set to color"""
        buffer = cls(width, height)
        buffer.numpy_view[:, :] = np.asarray(color, dtype=np.uint8)
        return buffer

    @classmethod
    def from_gradient(cls, width: int, height: int,
                      gradient: Callable[[float], Color]) -> 'PixelBuffer':
        """
        Create a buffer coloured row by row.

        Args:
            gradient: Called once per row with y / height (in [0, 1)) and
                returns the colour of that whole row.
        """
        buffer = cls(width, height)
        view = buffer.numpy_view
        for y in range(buffer.height):
            view[y, :] = np.asarray(Color.coerce(gradient(y / buffer.height)), dtype=np.uint8)
        return buffer

    ############ PROPERTIES ############

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def area(self) -> int:
        """Number of pixels in the raster"""
        return self._width * self._height

    @property
    def byte_length(self) -> int:
        return self.area * CHANNELS

    @property
    def numpy_view(self) -> np.ndarray:
        """
        Writable (height, width, 4) view onto the storage.

        The view is invalidated by replace_all, which swaps the storage.
        """
        return self._pixels.reshape(self._height, self._width, CHANNELS)

    ############ GETTER/SETTER ############

    def get(self, index: int) -> Color:
        """
        Read the pixel at a flat index.

        Raises:
            IndexError: If index is outside [0, area).
        """
        if not 0 <= index < self.area:
            raise IndexError(f"Pixel index {index} out of range for area {self.area}")
        offset = index * CHANNELS
        return Color(*(int(v) for v in self._pixels[offset:offset + CHANNELS]))

    def set(self, index: int, color: Color) -> bool:
        """
        Write the pixel at a flat index.

        Returns:
            True if the pixel was written, False if index was out of range.
        """
        if not 0 <= index < self.area:
            return False
        offset = index * CHANNELS
        self._pixels[offset:offset + CHANNELS] = color
        return True

    def get_xy(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height}")
        return self.get(self.index_of(x, y))

    def set_xy(self, x: int, y: int, color: Color) -> bool:
        """Write the pixel at (x, y); both axes are clipped independently"""
        if not self.contains(x, y):
            return False
        return self.set(self.index_of(x, y), color)

    def get_all(self) -> bytes:
        """Copy of the whole RGBA storage"""
        return self._pixels.tobytes()

    def replace_all(self, data: BytesLike):
        """
        Replace the storage with new RGBA bytes.

        The previous storage array is not modified, so views handed out
        before the call keep their old content.

        Raises:
            SizeMismatchError: If data is not exactly width * height * 4 bytes.
        """
        self._pixels = self._as_array(data)

    ############ PUBLIC METHODS ############

    def index_of(self, x: int, y: int) -> int:
        return y * self._width + x

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def fill(self, color: Color):
        self.numpy_view[:, :] = np.asarray(color, dtype=np.uint8)

    def copy(self) -> 'PixelBuffer':
        """Create a deep copy of this buffer."""
        return PixelBuffer(self._width, self._height, self._pixels.copy())

    ############ PRIVATE METHODS ############

    def _as_array(self, data: BytesLike) -> np.ndarray:
        """Validate length and return an owned flat uint8 copy of data"""
        if isinstance(data, np.ndarray):
            array = np.ascontiguousarray(data, dtype=np.uint8).reshape(-1)
        else:
            array = np.frombuffer(bytes(data), dtype=np.uint8)

        if array.size != self.byte_length:
            self.logger.error(f"Rejected pixel data of {array.size} bytes for "
                              f"{self._width}x{self._height} buffer")
            raise SizeMismatchError(self.byte_length, array.size)

        return array.copy()
