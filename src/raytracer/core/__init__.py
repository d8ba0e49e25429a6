"""Core rendering module.

This module contains the fundamental building blocks of the renderer:

Components:
    vector: Vec3 and Mat3 algebra, tolerant float comparisons
    ray: Ray data structure with a unit direction
    errors: Exception hierarchy
    log: Package logging setup
    integrator: Recursive Whitted-style light transport (trace)
    strategy: Pixel sampling strategies (standard, random anti-aliasing)
    renderer: Sequential and parallel pixel producers, render entry points
    progressive: Progressive wrapper with a completion callback
"""

from .errors import CanvasError, NormalNotFoundError, RaytracerError, SceneConfigurationError
from .log import setup_logging
from .ray import SELF_INTERSECTION_EPSILON, Ray
from .vector import FLOAT_EPSILON, Mat3, Vec3, f64_eq, f64_gt, f64_lt, unit_interval_clamp

# Note: integrator, strategy, renderer and progressive are NOT imported here to
# avoid circular imports (they depend on the scene package, which depends on
# core). Import them directly, for instance:
#   from src.raytracer.core.renderer import RenderConfiguration, render_scene

__all__ = [
    # Algebra
    "Vec3",
    "Mat3",
    "FLOAT_EPSILON",
    "f64_eq",
    "f64_lt",
    "f64_gt",
    "unit_interval_clamp",
    # Rays
    "Ray",
    "SELF_INTERSECTION_EPSILON",
    # Errors
    "RaytracerError",
    "SceneConfigurationError",
    "NormalNotFoundError",
    "CanvasError",
    # Logging
    "setup_logging",
]
