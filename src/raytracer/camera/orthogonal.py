"""Orthogonal (parallel projection) camera.

All primary rays share the view direction; only their source moves across
the screen rectangle centered on the eye.
"""

from __future__ import annotations

from src.raytracer.camera.base import RayEmitter, check_canvas_coords
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Mat3, Vec3


class OrthogonalCamera(RayEmitter):
    """A camera casting parallel rays from a screen rectangle."""

    def __init__(
        self,
        eye: Vec3 = Vec3(0.0, 0.0, -10.0),
        look_at: Vec3 = Vec3(0.0, 0.0, 0.0),
        width: float = 16.0,
        height: float = 9.0,
    ) -> None:
        if width <= 0.0 or height <= 0.0:
            raise ValueError(f"Screen size must be positive, got {width}x{height}")
        self.screen_center = eye
        self.axis_z = Vec3.between_points(eye, look_at).normalize()
        transform = Mat3.transformation_between(Vec3(0.0, 0.0, 1.0), self.axis_z)
        self.axis_y = transform @ Vec3(0.0, 1.0, 0.0)
        self.axis_x = self.axis_y.cross(self.axis_z)
        self._width = width
        self._height = height

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def generate_ray(self, canvas_x: float, canvas_y: float) -> Ray:
        check_canvas_coords(canvas_x, canvas_y)
        ray_source = (
            self.screen_center
            - (self._width / 2.0) * self.axis_x
            + (self._height / 2.0) * self.axis_y
            + (canvas_x * self._width) * self.axis_x
            - (canvas_y * self._height) * self.axis_y
        )
        return Ray(ray_source, self.axis_z)

    def __repr__(self) -> str:
        return (
            f"OrthogonalCamera(eye={self.screen_center}, direction={self.axis_z}, "
            f"width={self._width}, height={self._height})"
        )
