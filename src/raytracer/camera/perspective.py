"""Perspective camera.

The camera is described by its screen: a rectangle of width x height world
units centered on screen_center, facing look_at. The eye sits behind the
screen at the distance giving the requested half vertical angle:

    distance = height / (2 * tan(angle))

Every primary ray starts at the eye and goes through a point of the screen.

The screen basis is built like the plane frames: the rotation mapping +Z
onto the view direction is applied to +Y to obtain the screen up axis, and
the right axis is up x forward.

Example:
    >>> import math
    >>> from src.raytracer.camera.perspective import PerspectiveCamera
    >>> from src.raytracer.core.vector import Vec3
    >>> camera = PerspectiveCamera(
    ...     screen_center=Vec3(0.0, 10.0, -10.0),
    ...     look_at=Vec3(0.0, 0.0, 30.0),
    ...     width=32.0,
    ...     height=18.0,
    ...     angle=math.pi / 8.0,
    ... )
    >>> ray = camera.generate_ray(0.5, 0.5)  # Ray through the screen center
"""

from __future__ import annotations

import math

from src.raytracer.camera.base import RayEmitter, check_canvas_coords
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Mat3, Vec3


class PerspectiveCamera(RayEmitter):
    """A pinhole camera with rays diverging from an eye point.

    Attributes:
        screen_center: Center of the screen rectangle in world space.
        eye: The point every ray starts from.
        axis_x: Screen right direction (unit).
        axis_y: Screen up direction (unit).
        axis_z: View direction (unit).
    """

    def __init__(
        self,
        screen_center: Vec3 = Vec3(0.0, 0.0, -50.0),
        look_at: Vec3 = Vec3(0.0, 0.0, 50.0),
        width: float = 16.0,
        height: float = 9.0,
        angle: float = math.pi / 4.0,
    ) -> None:
        if width <= 0.0 or height <= 0.0:
            raise ValueError(f"Screen size must be positive, got {width}x{height}")
        if not 0.0 < angle < math.pi / 2.0:
            raise ValueError(f"Camera angle must be in (0, pi/2), got {angle}")
        eye_direction = Vec3.between_points(screen_center, look_at).normalize()
        transform = Mat3.transformation_between(Vec3(0.0, 0.0, 1.0), eye_direction)
        distance_eye_center = height / (2.0 * math.tan(angle))

        self.screen_center = screen_center
        self.eye = screen_center - distance_eye_center * eye_direction
        self.axis_z = Vec3.between_points(self.eye, screen_center).normalize()
        self.axis_y = (transform @ Vec3(0.0, 1.0, 0.0)).normalize()
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
        ray_destination = (
            self.screen_center
            - (self._width / 2.0) * self.axis_x
            + (self._height / 2.0) * self.axis_y
            + (canvas_x * self._width) * self.axis_x
            - (canvas_y * self._height) * self.axis_y
        )
        return Ray.from_to(self.eye, ray_destination)

    def __repr__(self) -> str:
        return (
            f"PerspectiveCamera(eye={self.eye}, screen_center={self.screen_center}, "
            f"width={self._width}, height={self._height})"
        )
