"""Ray data structure.

A ray is a source point plus a unit direction. Both constructors normalize the
direction, so every ray handed to a shape has a unit-length direction.

Example:
    >>> from src.raytracer.core.ray import Ray
    >>> from src.raytracer.core.vector import Vec3
    >>> ray = Ray.from_to(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 10.0))
    >>> ray.point_at(5.0)
    Vec3(x=0.0, y=0.0, z=5.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.raytracer.core.vector import Vec3

# Distance under which an intersection is treated as contact with the surface
# the ray starts from. Also the distance a bounced ray is pushed forward.
SELF_INTERSECTION_EPSILON = 1e-12


@dataclass(frozen=True, init=False)
class Ray:
    """A ray with a source point and a normalized direction.

    Attributes:
        source: The starting point of the ray.
        direction: The unit direction of the ray.
    """

    source: Vec3
    direction: Vec3

    def __init__(self, source: Vec3, direction: Vec3) -> None:
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "direction", direction.normalize())

    @classmethod
    def from_to(cls, source: Vec3, destination: Vec3) -> Ray:
        """Create a ray starting at source and heading toward destination."""
        return cls(source, destination - source)

    def point_at(self, t: float) -> Vec3:
        """Return source + t * direction."""
        return self.source + t * self.direction

    def shift_source(self) -> Ray:
        """Return the same ray with its source nudged along the direction.

        Used after a bounce so the new ray does not immediately hit the
        surface it leaves.
        """
        return Ray(self.source + SELF_INTERSECTION_EPSILON * self.direction, self.direction)
