"""Textures mapping surface (u, v) coordinates to colors.

Textures are looked up with the (u, v) parameterization a shape computes at
a surface point, both in [0, 1].

Available textures:
    PlainColorTexture: A single constant color.
    CheckedPattern: A checkerboard alternating two colors.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from src.raytracer.core.vector import f64_gt, f64_lt
from src.raytracer.materials.color import Color


class Texture(ABC):
    """Capability mapping surface coordinates to a color."""

    @abstractmethod
    def color_at(self, u: float, v: float) -> Color:
        """Return the color at surface coordinates (u, v) in [0, 1] x [0, 1]."""


@dataclass(frozen=True)
class PlainColorTexture(Texture):
    """A texture returning the same color everywhere."""

    color: Color

    def color_at(self, u: float, v: float) -> Color:
        return self.color


@dataclass(frozen=True)
class CheckedPattern(Texture):
    """A checkerboard texture.

    The unit square is divided into count x count cells. A cell is painted
    with the primary color when floor(u * count) + floor(v * count) is even,
    with the secondary color otherwise.

    Attributes:
        primary_color: Color of even cells.
        secondary_color: Color of odd cells.
        count: Number of cells along each axis.
    """

    primary_color: Color = field(default_factory=lambda: Color(0.95, 0.95, 0.95))
    secondary_color: Color = field(default_factory=lambda: Color(0.05, 0.05, 0.05))
    count: float = 10.0

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"Checker count must be positive, got {self.count}")

    def color_at(self, u: float, v: float) -> Color:
        if not (f64_gt(u, 0.0) and f64_lt(u, 1.0)):
            raise ValueError(f"u coordinate out of [0, 1]: {u}")
        if not (f64_gt(v, 0.0) and f64_lt(v, 1.0)):
            raise ValueError(f"v coordinate out of [0, 1]: {v}")
        selection = int(math.floor(u * self.count) + math.floor(v * self.count)) % 2
        return self.primary_color if selection == 0 else self.secondary_color
