"""Clamped RGB color model.

Every Color channel lies in [0, 1]. Channels are clamped at construction, so
each arithmetic step (addition, scaling, channel product) yields an already
clamped result. Light accumulation therefore saturates step by step rather
than only at final output.

Example:
    >>> from src.raytracer.materials.color import Color
    >>> Color(10.0, -3.0, 0.5)
    Color(red=1.0, green=0.0, blue=0.5)
    >>> Color.RED + Color.GREEN
    Color(red=1.0, green=1.0, blue=0.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from src.raytracer.core.vector import unit_interval_clamp


@dataclass(frozen=True, init=False)
class Color:
    """An immutable RGB color with channels clamped to [0, 1].

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]

    def __init__(self, red: float = 0.0, green: float = 0.0, blue: float = 0.0) -> None:
        object.__setattr__(self, "red", unit_interval_clamp(float(red)))
        object.__setattr__(self, "green", unit_interval_clamp(float(green)))
        object.__setattr__(self, "blue", unit_interval_clamp(float(blue)))

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Look up a named color ("black", "white", "red", ...).

        Raises:
            ValueError: If the name is unknown.
        """
        try:
            return _NAMED_COLORS[name.strip().lower()]
        except KeyError:
            raise ValueError(
                f"Unknown color name {name!r}, expected one of {sorted(_NAMED_COLORS)}"
            ) from None

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_rgb8(self) -> tuple[int, int, int]:
        """Convert to 8-bit channels (truncating, as framebuffers expect)."""
        return (int(self.red * 255.0), int(self.green * 255.0), int(self.blue * 255.0))


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)

_NAMED_COLORS = {
    "black": Color.BLACK,
    "white": Color.WHITE,
    "red": Color.RED,
    "green": Color.GREEN,
    "blue": Color.BLUE,
    "yellow": Color.YELLOW,
}
