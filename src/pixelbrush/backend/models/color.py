from typing import NamedTuple, Union
from PIL import ImageColor


class Color(NamedTuple):
    """
    Straight (non-premultiplied) RGBA colour with one byte per channel.

    Channel order matches the pixel buffer layout: R, G, B, A.
    """

    r: int
    g: int
    b: int
    a: int = 255

    ############ CONSTRUCTORS ############

    @classmethod
    def of(cls, r: int, g: int, b: int, a: int = 255) -> 'Color':
        """
        Build a colour, validating every channel.

        Raises:
            ValueError: If any channel is outside 0..255.
        """
        for name, value in zip("rgba", (r, g, b, a)):
            if not 0 <= int(value) <= 255:
                raise ValueError(f"Channel {name} out of range 0..255: {value}")
        return cls(int(r), int(g), int(b), int(a))

    @classmethod
    def from_string(cls, value: str) -> 'Color':
        """
        Parse a colour string such as '#ff0000', '#ff000064' or 'grey'.

        Any format understood by Pillow's ImageColor is accepted.

        Raises:
            ValueError: If the string is not a known colour.
        """
        r, g, b, a = ImageColor.getcolor(value, "RGBA")
        return cls(r, g, b, a)

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> 'Color':
        """Build a colour from channels in [0, 1], clamped and truncated to bytes"""
        channels = [int(255 * max(0.0, min(1.0, v))) for v in (r, g, b, a)]
        return cls(*channels)

    @classmethod
    def coerce(cls, value: Union['Color', str, tuple]) -> 'Color':
        """Accept a Color, a colour string or a 3/4-tuple of ints, validating channels"""
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.of(*value)

    ############ PUBLIC METHODS ############

    def with_alpha(self, alpha: int) -> 'Color':
        return Color.of(self.r, self.g, self.b, alpha)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}{:02x}".format(*self)


TRANSPARENT = Color(0, 0, 0, 0)
