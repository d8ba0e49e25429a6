"""Shape contract shared by all geometric primitives.

A shape answers three questions about its surface:

- Where does a ray first hit it (intersect)?
- What is the outward unit normal at a surface point (normal_at)?
- Which (u, v) texture coordinates map to a surface point (uv_at)?

Shapes do not filter out contacts at the ray source. Callers searching for
the nearest hit discard intersections closer than
SELF_INTERSECTION_EPSILON themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vec3

# Rays closer than this to parallel with a plane are treated as missing it
PARALLEL_EPSILON = 1e-6


class Shape(ABC):
    """Geometric surface capability."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Vec3 | None:
        """Return the nearest forward intersection point, or None."""

    @abstractmethod
    def normal_at(self, point: Vec3) -> Vec3 | None:
        """Return the outward unit normal at a surface point, or None."""

    @abstractmethod
    def uv_at(self, point: Vec3) -> tuple[float, float] | None:
        """Return texture coordinates in [0, 1] x [0, 1] at a surface point, or None."""
