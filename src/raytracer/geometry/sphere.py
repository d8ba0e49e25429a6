"""Sphere primitive with geometric ray-sphere intersection.

The intersection uses the geometric (rather than algebraic) formulation:

    L  = center - origin
    d  = L . u                (projection of L on the ray direction u)
    m2 = |L|^2 - d^2          (squared distance from center to the ray line)
    q  = sqrt(r^2 - m2)       (half chord length)

A ray starting outside the sphere hits it at t = d - q, provided the sphere
lies in front of it (d >= 0). A ray starting inside always exits at t = d + q.

Example:
    >>> from src.raytracer.core.ray import Ray
    >>> from src.raytracer.core.vector import Vec3
    >>> from src.raytracer.geometry.sphere import Sphere
    >>> sphere = Sphere()
    >>> sphere.intersect(Ray(Vec3(0.0, 0.0, -2.0), Vec3(0.0, 0.0, 1.0)))
    Vec3(x=0.0, y=0.0, z=-1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vec3
from src.raytracer.geometry.shape import Shape


@dataclass(frozen=True)
class Sphere(Shape):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
    """

    center: Vec3 = field(default_factory=Vec3)
    radius: float = 1.0

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def intersect(self, ray: Ray) -> Vec3 | None:
        r_square = self.radius * self.radius
        u = ray.direction
        to_center = self.center - ray.source
        d = to_center.dot(u)
        l_square = to_center.dot(to_center)
        outside = l_square > r_square
        if d < 0.0 and outside:
            return None
        m_square = l_square - d * d
        if m_square > r_square:
            return None
        q = math.sqrt(r_square - m_square)
        t = d - q if outside else d + q
        return ray.source + t * u

    def normal_at(self, point: Vec3) -> Vec3 | None:
        return Vec3.between_points(self.center, point).normalize()

    def uv_at(self, point: Vec3) -> tuple[float, float] | None:
        unit_point = Vec3.between_points(self.center, point).normalize()
        # Clamp guards asin against rounding just past +/-1
        y = max(-1.0, min(1.0, unit_point.y))
        u = 0.5 + math.atan2(unit_point.z, unit_point.x) / (2.0 * math.pi)
        v = 0.5 - math.asin(y) / math.pi
        return (u, v)
