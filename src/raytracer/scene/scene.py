"""Scene aggregate: camera, lights, objects and global configuration.

A Scene is built once (by a loader or a sample generator) and handed to the
renderer, which only reads it. Every type in this module is frozen and the
light and object lists are stored as tuples, so a Scene can be shared by
worker threads without locking.

Example:
    >>> from src.raytracer.camera.perspective import PerspectiveCamera
    >>> from src.raytracer.core.vector import Vec3
    >>> from src.raytracer.geometry.sphere import Sphere
    >>> from src.raytracer.materials.texture import CheckedPattern
    >>> from src.raytracer.scene.lights import LightPoint
    >>> from src.raytracer.scene.scene import Scene, SceneObject
    >>> scene = Scene(
    ...     camera=PerspectiveCamera(),
    ...     lights=[LightPoint(Vec3(50.0, 100.0, -50.0))],
    ...     objects=[SceneObject(Sphere(Vec3(0.0, 0.0, 0.0), 5.0), CheckedPattern())],
    ... )
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from src.raytracer.camera.base import RayEmitter
from src.raytracer.core.errors import SceneConfigurationError
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vec3
from src.raytracer.geometry.shape import Shape
from src.raytracer.materials.color import Color
from src.raytracer.materials.effects import TextureEffects
from src.raytracer.materials.texture import Texture
from src.raytracer.scene.lights import Light


@dataclass(frozen=True)
class SceneConfiguration:
    """Global rendering parameters of a scene.

    Attributes:
        world_color: Background color returned by rays hitting nothing.
        world_refractive_index: Refractive index of the medium between objects.
        ambient_light: Ambient light color, or None to disable ambient lighting.
        maximum_light_recursion: Maximum depth of reflection/refraction rays.
    """

    world_color: Color = Color.BLACK
    world_refractive_index: float = 1.0
    ambient_light: Color | None = Color(0.2, 0.2, 0.2)
    maximum_light_recursion: int = 2

    def __post_init__(self) -> None:
        if self.world_refractive_index <= 0.0:
            raise SceneConfigurationError(
                f"World refractive index must be positive, got {self.world_refractive_index}"
            )
        if self.maximum_light_recursion < 0:
            raise SceneConfigurationError(
                f"Maximum light recursion must be >= 0, got {self.maximum_light_recursion}"
            )


@dataclass(frozen=True)
class SceneObject:
    """A shape dressed with a texture and optional optical effects."""

    shape: Shape
    texture: Texture
    effects: TextureEffects = field(default_factory=TextureEffects)

    def color_at(self, point: Vec3) -> Color:
        """Return the texture color at a surface point.

        Points the shape cannot map to texture coordinates are black.
        """
        uv = self.shape.uv_at(point)
        if uv is None:
            return Color.BLACK
        return self.texture.color_at(*uv)

    def intersect(self, ray: Ray) -> Vec3 | None:
        return self.shape.intersect(ray)

    def normal_at(self, point: Vec3) -> Vec3 | None:
        return self.shape.normal_at(point)


@dataclass(frozen=True, init=False)
class Scene:
    """Everything needed to render an image.

    Attributes:
        camera: The ray emitter producing primary rays.
        lights: Light sources (tuple).
        objects: Scene objects (tuple). Order only matters to break ties
            between objects hit at exactly the same distance.
        config: Global scene configuration.
    """

    camera: RayEmitter
    lights: tuple[Light, ...]
    objects: tuple[SceneObject, ...]
    config: SceneConfiguration

    def __init__(
        self,
        camera: RayEmitter,
        lights: Iterable[Light],
        objects: Iterable[SceneObject],
        config: SceneConfiguration | None = None,
    ) -> None:
        object.__setattr__(self, "camera", camera)
        object.__setattr__(self, "lights", tuple(lights))
        object.__setattr__(self, "objects", tuple(objects))
        object.__setattr__(self, "config", config if config is not None else SceneConfiguration())

    def replace(self, **changes: object) -> Scene:
        """Return a copy of the scene with some attributes replaced."""
        values = {
            "camera": self.camera,
            "lights": self.lights,
            "objects": self.objects,
            "config": self.config,
        }
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f"Unknown scene attributes: {sorted(unknown)}")
        values.update(changes)
        return Scene(**values)  # type: ignore[arg-type]
