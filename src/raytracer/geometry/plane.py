"""Plane primitives: infinite plane and bounded square plane.

Both planes carry a local frame (u_vec, v_vec) lying in the plane. The frame
is obtained by rotating the X and Z axes with the rotation that maps the Y
axis onto the plane normal, so a horizontal plane with normal +Y keeps the
world X/Z axes as texture axes.

Example:
    >>> from src.raytracer.core.vector import Vec3
    >>> from src.raytracer.geometry.plane import InfinitePlane, SquarePlane
    >>> floor = InfinitePlane(Vec3(0.0, -5.0, 0.0), Vec3(0.0, 1.0, 0.0))
    >>> tile = SquarePlane(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), width=2.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Mat3, Vec3
from src.raytracer.geometry.shape import PARALLEL_EPSILON, Shape

_Y_AXIS = Vec3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class _PlaneBase(Shape):
    """Shared plane math: normalized normal, local frame and ray/plane hit."""

    center: Vec3
    normal: Vec3
    normal_normalized: Vec3 = field(init=False, repr=False)
    u_vec: Vec3 = field(init=False, repr=False)
    v_vec: Vec3 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        normal_normalized = self.normal.normalize()
        transform = Mat3.transformation_between(_Y_AXIS, normal_normalized)
        object.__setattr__(self, "normal_normalized", normal_normalized)
        object.__setattr__(self, "u_vec", transform @ Vec3(1.0, 0.0, 0.0))
        object.__setattr__(self, "v_vec", transform @ Vec3(0.0, 0.0, 1.0))

    def _hit_plane(self, ray: Ray) -> Vec3 | None:
        denom = self.normal_normalized.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None
        t = (self.center - ray.source).dot(self.normal_normalized) / denom
        if t > 0.0:
            return ray.source + t * ray.direction
        return None

    def _local_coords(self, point: Vec3) -> tuple[float, float]:
        local = Vec3.between_points(self.center, point)
        return local.dot(self.u_vec), local.dot(self.v_vec)

    def normal_at(self, point: Vec3) -> Vec3 | None:
        return self.normal_normalized


def _wrap_unit(value: float) -> float:
    return value if value >= 0.0 else 1.0 + value


@dataclass(frozen=True)
class InfinitePlane(_PlaneBase):
    """An unbounded plane through center with the given normal.

    Attributes:
        center: A point of the plane, origin of the texture mapping.
        normal: The plane normal (normalized internally).
        uv_mapping_width: World distance covered by one texture repetition.
    """

    uv_mapping_width: float = 50.0

    def __post_init__(self) -> None:
        if self.uv_mapping_width <= 0.0:
            raise ValueError(f"uv_mapping_width must be positive, got {self.uv_mapping_width}")
        super().__post_init__()

    def intersect(self, ray: Ray) -> Vec3 | None:
        return self._hit_plane(ray)

    def uv_at(self, point: Vec3) -> tuple[float, float] | None:
        local_x, local_y = self._local_coords(point)
        u = _wrap_unit(math.fmod(local_x, self.uv_mapping_width) / self.uv_mapping_width)
        v = _wrap_unit(math.fmod(local_y, self.uv_mapping_width) / self.uv_mapping_width)
        return (u, v)


@dataclass(frozen=True)
class SquarePlane(_PlaneBase):
    """A square of side width centered on center, lying in the plane.

    Attributes:
        center: Center of the square.
        normal: The plane normal (normalized internally).
        width: Side length of the square.
    """

    width: float = 1.0

    def __post_init__(self) -> None:
        if self.width <= 0.0:
            raise ValueError(f"Square width must be positive, got {self.width}")
        super().__post_init__()

    def _to_plane_coords(self, point: Vec3) -> tuple[float, float] | None:
        local_x, local_y = self._local_coords(point)
        radius = self.width / 2.0
        if local_x < -radius or local_x > radius or local_y < -radius or local_y > radius:
            return None
        return local_x, local_y

    def intersect(self, ray: Ray) -> Vec3 | None:
        point = self._hit_plane(ray)
        if point is not None and self._to_plane_coords(point) is not None:
            return point
        return None

    def uv_at(self, point: Vec3) -> tuple[float, float] | None:
        coords = self._to_plane_coords(point)
        if coords is None:
            return None
        radius = self.width / 2.0
        return ((coords[0] + radius) / self.width, (coords[1] + radius) / self.width)
