"""Scene-level ray intersection testing.

This module scans the scene objects linearly (no acceleration structure) to
find the nearest hit of a ray, and to decide whether something stands between
a surface point and a light.

Intersections closer than SELF_INTERSECTION_EPSILON to the ray source are
ignored: they are the surface the ray was cast from.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from src.raytracer.core.ray import SELF_INTERSECTION_EPSILON, Ray
from src.raytracer.core.vector import Vec3
from src.raytracer.scene.scene import SceneObject


@dataclass(frozen=True)
class CollisionContext:
    """The nearest object hit by a ray.

    Attributes:
        object: The scene object that was hit.
        collision_point: The hit point in world space.
        array_index: Index of the object in the scene object list.
    """

    object: SceneObject
    collision_point: Vec3
    array_index: int


def search_object_collision(ray: Ray, objects: Sequence[SceneObject]) -> CollisionContext | None:
    """Find the nearest object hit by a ray.

    When several objects are hit at exactly the same distance, the first one
    in the list wins. This tie-break is an implementation detail.

    Args:
        ray: The ray to trace.
        objects: Candidate scene objects.

    Returns:
        The collision context of the nearest hit, or None if nothing is hit.
    """
    shortest_distance = math.inf
    nearest: CollisionContext | None = None
    for index, candidate in enumerate(objects):
        point = candidate.intersect(ray)
        if point is None:
            continue
        distance = point.distance(ray.source)
        if distance <= SELF_INTERSECTION_EPSILON:
            continue
        if distance < shortest_distance:
            shortest_distance = distance
            nearest = CollisionContext(candidate, point, index)
    return nearest


def ray_encounter_obstacle(ray: Ray, destination: Vec3, objects: Sequence[SceneObject]) -> bool:
    """Check whether any object lies on the ray before destination.

    Args:
        ray: Ray cast from a surface point toward destination.
        destination: Point the ray is heading to (a light source).
        objects: Candidate occluders.

    Returns:
        True if an object is hit beyond the self-intersection epsilon and
        strictly closer than destination.
    """
    source = ray.source
    light_distance = Vec3.between_points(source, destination).norm()
    for candidate in objects:
        point = candidate.intersect(ray)
        if point is None:
            continue
        object_distance = Vec3.between_points(source, point).norm()
        if object_distance >= light_distance:
            continue
        if object_distance <= SELF_INTERSECTION_EPSILON:
            continue
        return True
    return False
