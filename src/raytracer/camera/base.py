"""Ray emitter contract implemented by cameras.

Canvas coordinates are normalized: canvas_x in (0, 1) goes left to right and
canvas_y in (0, 1) goes top to bottom, so (0, 0) is the top-left corner of
the image.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import f64_gt, f64_lt


class RayEmitter(ABC):
    """Capability producing world-space rays for canvas coordinates."""

    @property
    @abstractmethod
    def width(self) -> float:
        """Width of the screen in world units."""

    @property
    @abstractmethod
    def height(self) -> float:
        """Height of the screen in world units."""

    def size_ratio(self) -> float:
        """Return the aspect ratio width / height."""
        return self.width / self.height

    @abstractmethod
    def generate_ray(self, canvas_x: float, canvas_y: float) -> Ray:
        """Return the ray going through the given canvas position."""


def check_canvas_coords(canvas_x: float, canvas_y: float) -> None:
    """Validate normalized canvas coordinates.

    Raises:
        ValueError: If a coordinate lies outside [0, 1].
    """
    if not (f64_gt(canvas_x, 0.0) and f64_lt(canvas_x, 1.0)):
        raise ValueError(f"canvas_x is out of [0, 1]: {canvas_x}")
    if not (f64_gt(canvas_y, 0.0) and f64_lt(canvas_y, 1.0)):
        raise ValueError(f"canvas_y is out of [0, 1]: {canvas_y}")
