"""Whitted-style recursive light transport.

This module implements trace(), which turns a ray into a color by:

1. Finding the nearest object hit by the ray
2. Summing the direct light of every unoccluded light source
   (Lambert diffuse term plus optional Phong highlight)
3. Following a refracted ray through transparent objects
4. Following a reflected ray off mirror objects
5. Adding the ambient term

Reflection and refraction recurse with depth + 1 and stop once the depth
exceeds the scene maximum_light_recursion, returning the background color.

Colors are clamped to [0, 1] at each accumulation step.

Example:
    >>> from src.raytracer.core.integrator import trace
    >>> from src.raytracer.scene.samples import generate_test_scene
    >>> scene = generate_test_scene()
    >>> color = trace(scene.camera.generate_ray(0.5, 0.5), scene)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.raytracer.core.errors import NormalNotFoundError
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vec3
from src.raytracer.materials.color import Color
from src.raytracer.scene.intersection import (
    CollisionContext,
    ray_encounter_obstacle,
    search_object_collision,
)
from src.raytracer.scene.lights import Light
from src.raytracer.scene.scene import Scene, SceneObject


def trace(ray: Ray, scene: Scene, depth: int = 0) -> Color:
    """Compute the color seen along a ray.

    Args:
        ray: The ray to follow (camera ray at depth 0, bounce ray otherwise).
        scene: The read-only scene.
        depth: Current recursion depth.

    Returns:
        The clamped color carried back along the ray.

    Raises:
        NormalNotFoundError: If a hit object cannot provide a normal at the
            hit point.
    """
    config = scene.config
    if depth > config.maximum_light_recursion:
        return config.world_color

    collision = search_object_collision(ray, scene.objects)
    if collision is None:
        return config.world_color

    nearest_object = collision.object
    collision_point = collision.collision_point
    effects = nearest_object.effects

    total_color = Color.BLACK
    total_color += illumination_from_lights(collision, scene.lights, scene.objects, ray)

    if effects.transparency is not None:
        surface_normal = _surface_normal(collision)
        refraction_direction = refract(
            ray.direction,
            surface_normal,
            config.world_refractive_index / effects.transparency.refractive_index,
        )
        if refraction_direction is not None:
            refraction_ray = Ray(collision_point, refraction_direction).shift_source()
            # Exit is approximated by the next hit of any object
            exit_context = search_object_collision(refraction_ray, scene.objects)
            if exit_context is not None:
                new_ray = Ray(exit_context.collision_point, ray.direction).shift_source()
                total_color += effects.transparency.alpha * trace(new_ray, scene, depth + 1)

    if effects.mirror is not None:
        surface_normal = _surface_normal(collision)
        reflection_ray = Ray(
            collision_point, ray.direction.reflect(surface_normal).normalize()
        ).shift_source()
        total_color += effects.mirror.coeff * trace(reflection_ray, scene, depth + 1)

    if config.ambient_light is not None:
        total_color += config.ambient_light * nearest_object.color_at(collision_point)

    return total_color


def illumination_from_lights(
    collision: CollisionContext,
    lights: Sequence[Light],
    objects: Sequence[SceneObject],
    camera_ray: Ray,
) -> Color:
    """Sum the direct contribution of every light reaching the hit point.

    A light hidden by an object between the hit point and the light source
    contributes nothing. Otherwise it adds a Lambert diffuse term and, for
    objects with a Phong effect, a specular highlight.

    Args:
        collision: The hit being shaded.
        lights: Scene light sources.
        objects: Scene objects, used as potential occluders.
        camera_ray: The ray that produced the hit.

    Returns:
        The clamped direct illumination.
    """
    total_color = Color.BLACK
    surface_point = collision.collision_point
    scene_object = collision.object
    phong = scene_object.effects.phong

    for light in lights:
        light_source = light.source()
        light_ray = Ray.from_to(surface_point, light_source)
        if ray_encounter_obstacle(light_ray, light_source, objects):
            continue

        light_direction = light_ray.direction
        light_color = light.light_color_at(surface_point)
        surface_normal = _surface_normal(collision, normalize=False)

        # Diffuse reflection
        reflection_angle = light_direction.dot(surface_normal)
        if reflection_angle > 0.0:
            total_color += reflection_angle * (light_color * scene_object.color_at(surface_point))

        # Specular highlight
        if phong is not None:
            ray_reflection = camera_ray.direction.reflect(surface_normal).normalize()
            specular_angle = light_direction.dot(ray_reflection)
            if specular_angle > 0.0:
                total_color += light_color * (specular_angle**phong.size) * phong.lum_coeff

    return total_color


def refract(direction: Vec3, normal: Vec3, n_ratio: float) -> Vec3 | None:
    """Compute a refracted direction with Snell's law.

    Args:
        direction: Incoming unit direction.
        normal: Unit surface normal at the hit point.
        n_ratio: Ratio n_incident / n_transmitted.

    Returns:
        The refracted direction (not normalized), or None on total internal
        reflection.
    """
    cos_refraction = direction.dot(normal)
    sin_square_refraction = n_ratio * n_ratio * (1.0 - cos_refraction * cos_refraction)
    if sin_square_refraction > 1.0:
        return None
    return n_ratio * direction - (
        n_ratio * cos_refraction + math.sqrt(1.0 - sin_square_refraction)
    ) * normal


def _surface_normal(collision: CollisionContext, normalize: bool = True) -> Vec3:
    normal = collision.object.normal_at(collision.collision_point)
    if normal is None:
        raise NormalNotFoundError(collision.array_index)
    return normal.normalize() if normalize else normal
