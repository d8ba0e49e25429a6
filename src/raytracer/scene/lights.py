"""Light sources.

A light exposes a world-space source position, used to cast shadow rays, and
the color it contributes at a given surface point.

Available lights:
    LightPoint: Omnidirectional light of constant color.
    SpotLight: Cone light with a linear falloff between two angles.
    DirectionalLight: Very distant light shining along a fixed direction.

Example:
    >>> from src.raytracer.core.vector import Vec3
    >>> from src.raytracer.materials.color import Color
    >>> from src.raytracer.scene.lights import LightPoint
    >>> light = LightPoint(Vec3(50.0, 100.0, -50.0), Color(0.8, 0.8, 0.8))
    >>> light.light_color_at(Vec3(0.0, 0.0, 0.0))
    Color(red=0.8, green=0.8, blue=0.8)
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from src.raytracer.core.vector import Vec3
from src.raytracer.materials.color import Color


class Light(ABC):
    """Light source capability."""

    @abstractmethod
    def source(self) -> Vec3:
        """Return the world-space position shadow rays are cast toward."""

    @abstractmethod
    def light_color_at(self, point: Vec3) -> Color:
        """Return the color this light contributes at a surface point."""


@dataclass(frozen=True)
class LightPoint(Light):
    """A point light of constant color."""

    position: Vec3
    color: Color = Color.WHITE

    def source(self) -> Vec3:
        return self.position

    def light_color_at(self, point: Vec3) -> Color:
        return self.color


@dataclass(frozen=True, init=False)
class SpotLight(Light):
    """A cone light.

    Points within inner_angle of the spot axis get the full color, points
    beyond outer_angle get nothing, and the luminosity falls off linearly in
    between. Angles are stored in radians.
    """

    position: Vec3
    direction: Vec3
    inner_angle: float
    outer_angle: float
    color: Color

    def __init__(
        self,
        position: Vec3,
        direction: Vec3,
        inner_angle_degree: float,
        outer_angle_degree: float,
        color: Color = Color.WHITE,
    ) -> None:
        if not 0.0 <= inner_angle_degree <= outer_angle_degree:
            raise ValueError(
                "Spot angles must satisfy 0 <= inner <= outer, "
                f"got inner={inner_angle_degree}, outer={outer_angle_degree}"
            )
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "direction", direction.normalize())
        object.__setattr__(self, "inner_angle", math.radians(inner_angle_degree))
        object.__setattr__(self, "outer_angle", math.radians(outer_angle_degree))
        object.__setattr__(self, "color", color)

    def source(self) -> Vec3:
        return self.position

    def light_color_at(self, point: Vec3) -> Color:
        to_point = Vec3.between_points(self.position, point).normalize()
        cosine = max(-1.0, min(1.0, self.direction.dot(to_point)))
        angle = math.acos(cosine)
        if angle <= self.inner_angle:
            return self.color
        if angle >= self.outer_angle:
            return Color.BLACK
        luminosity = 1.0 - (angle - self.inner_angle) / (self.outer_angle - self.inner_angle)
        return luminosity * self.color


@dataclass(frozen=True)
class DirectionalLight(Light):
    """A light infinitely far away shining along direction.

    The shadow-ray target is placed distance units against the direction,
    far enough that every scene object lies between it and the lit surface.
    """

    direction: Vec3
    color: Color = Color.WHITE
    distance: float = 1e6
    _source: Vec3 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normalize())
        object.__setattr__(self, "_source", -self.distance * self.direction)

    def source(self) -> Vec3:
        return self._source

    def light_color_at(self, point: Vec3) -> Color:
        return self.color
