"""Sample scenes.

generate_test_scene() builds the showcase scene used by the example script:

- A checkered sphere with a Phong highlight at the origin
- A red mirror sphere on the left
- A green transparent sphere on the right
- A large yellow transparent sphere in the back
- A mirrored checkered floor
- A white-ish light and a red light
- Dark blue ambient light, two levels of recursion

generate_simple_scene() is a single checkered sphere under one light, cheap
enough for tests.

Example:
    >>> from src.raytracer.scene.samples import generate_test_scene
    >>> scene = generate_test_scene()
    >>> len(scene.objects), len(scene.lights)
    (5, 2)
"""

from __future__ import annotations

import math

from src.raytracer.camera.perspective import PerspectiveCamera
from src.raytracer.core.vector import Vec3
from src.raytracer.geometry.plane import InfinitePlane
from src.raytracer.geometry.sphere import Sphere
from src.raytracer.materials.color import Color
from src.raytracer.materials.effects import Mirror, Phong, TextureEffects, Transparency
from src.raytracer.materials.texture import CheckedPattern, PlainColorTexture
from src.raytracer.scene.lights import LightPoint
from src.raytracer.scene.scene import Scene, SceneConfiguration, SceneObject

# Camera shared by the sample scenes: 16:9 screen looking slightly downward
SCREEN_CENTER = Vec3(0.0, 10.0, -10.0)
LOOK_AT = Vec3(0.0, 0.0, 30.0)
SCREEN_WIDTH = 16.0 * 2.0
SCREEN_HEIGHT = 9.0 * 2.0
CAMERA_ANGLE = math.pi / 8.0


def sample_camera() -> PerspectiveCamera:
    return PerspectiveCamera(SCREEN_CENTER, LOOK_AT, SCREEN_WIDTH, SCREEN_HEIGHT, CAMERA_ANGLE)


def generate_test_scene() -> Scene:
    """Create the five-object showcase scene."""
    light_1 = LightPoint(Vec3(50.0, 100.0, -50.0), Color(0.8, 0.8, 0.8))
    light_2 = LightPoint(Vec3(-50.0, 20.0, -20.0), Color(0.8, 0.0, 0.0))

    checkered_sphere = SceneObject(
        shape=Sphere(Vec3(0.0, 0.0, 0.0), 5.0),
        texture=CheckedPattern(),
        effects=TextureEffects(phong=Phong()),
    )
    mirror_sphere = SceneObject(
        shape=Sphere(Vec3(-10.0, 3.0, 10.0), 8.0),
        texture=PlainColorTexture(Color.RED),
        effects=TextureEffects(phong=Phong(), mirror=Mirror(coeff=1.0)),
    )
    glass_sphere = SceneObject(
        shape=Sphere(Vec3(10.0, 3.0, 10.0), 8.0),
        texture=PlainColorTexture(Color.GREEN),
        effects=TextureEffects(phong=Phong(), transparency=Transparency(refractive_index=1.3)),
    )
    back_sphere = SceneObject(
        shape=Sphere(Vec3(0.0, 10.0, 35.0), 15.0),
        texture=PlainColorTexture(Color.YELLOW),
        effects=TextureEffects(phong=Phong(), transparency=Transparency(refractive_index=1.3)),
    )
    floor = SceneObject(
        shape=InfinitePlane(Vec3(0.0, -5.0, 0.0), Vec3(0.0, 1.0, 0.0)),
        texture=CheckedPattern(),
        effects=TextureEffects(mirror=Mirror(coeff=0.8)),
    )

    return Scene(
        camera=sample_camera(),
        lights=[light_1, light_2],
        objects=[checkered_sphere, mirror_sphere, glass_sphere, back_sphere, floor],
        config=SceneConfiguration(
            ambient_light=Color(0.0, 0.0, 0.2),
            maximum_light_recursion=2,
        ),
    )


def generate_simple_scene() -> Scene:
    """Create a one-sphere, one-light scene with default configuration."""
    return Scene(
        camera=sample_camera(),
        lights=[LightPoint(Vec3(50.0, 100.0, -50.0), Color(0.8, 0.8, 0.8))],
        objects=[SceneObject(Sphere(Vec3(0.0, 0.0, 0.0), 5.0), CheckedPattern())],
    )
