"""Geometry module for shape primitives.

Components:
    shape: Abstract Shape contract (intersect, normal_at, uv_at)
    sphere: Analytic sphere
    plane: Infinite plane and bounded square plane
"""

from .plane import InfinitePlane, SquarePlane
from .shape import PARALLEL_EPSILON, Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "PARALLEL_EPSILON",
    "Sphere",
    "InfinitePlane",
    "SquarePlane",
]
