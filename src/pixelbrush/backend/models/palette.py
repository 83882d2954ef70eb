import numpy as np
from typing import Iterable, List, Union
from pixelbrush.backend.models.color import Color

# 2017 r/place colours
R_PLACE_COLORS = (
    "#ffffff", "#e4e4e4", "#888888", "#222222",
    "#ffa7d1", "#e50000", "#e59500", "#a06a42",
    "#e5d900", "#94e044", "#02be01", "#00d3dd",
    "#0083c7", "#0000ea", "#cf6ee4", "#820080",
)


class PixelPalette:
    """
    Ordered set of candidate colours with nearest-colour quantization.

    Only the renderer consumes a palette; the editing core writes whatever
    colour the brush holds.
    """

    def __init__(self, colors: Iterable[Union[Color, str, tuple]]):
        """
        Args:
            colors: Palette entries, in index order. Must not be empty.

        Raises:
            ValueError: If no colours are given.
        """
        self._colors: List[Color] = [Color.coerce(c) for c in colors]
        if not self._colors:
            raise ValueError("A palette needs at least one colour")
        # (P, 3) int32 so squared distances do not overflow
        self._rgb = np.array([c[:3] for c in self._colors], dtype=np.int32)

    @classmethod
    def r_place(cls) -> 'PixelPalette':
        return cls(R_PLACE_COLORS)

    ############ PROPERTIES ############

    @property
    def colors(self) -> List[Color]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    ############ PUBLIC METHODS ############

    def nearest_index(self, color: Color) -> int:
        """
        Index of the palette entry closest to color in RGB space.

        Alpha is ignored. Ties resolve to the lowest index.
        """
        diff = self._rgb - np.array(color[:3], dtype=np.int32)
        return int(np.argmin(np.sum(diff * diff, axis=1)))

    def nearest(self, color: Color) -> Color:
        return self._colors[self.nearest_index(color)]

    def quantize(self, rgba: np.ndarray) -> np.ndarray:
        """
        Map every pixel of an RGBA array onto its nearest palette colour.

        Args:
            rgba: uint8 array of shape (..., 4).

        Returns:
            New uint8 array of the same shape; alpha is copied from the source.
        """
        flat = rgba.reshape(-1, 4)
        rgb = flat[:, :3].astype(np.int32)

        # (N, P) squared distances; argmin picks the first minimum on ties
        diff = rgb[:, None, :] - self._rgb[None, :, :]
        indices = np.argmin(np.sum(diff * diff, axis=2), axis=1)

        out = np.empty_like(flat)
        out[:, :3] = self._rgb[indices].astype(np.uint8)
        out[:, 3] = flat[:, 3]
        return out.reshape(rgba.shape)
