"""Pytest configuration for raytracer tests.

This module provides shared fixtures and small helpers: tiny scenes and
render configurations that keep renders fast, plus a shape that reports hits
but no normal, used to exercise per-pixel failures.
"""

import logging

import pytest

from src.raytracer.camera.orthogonal import OrthogonalCamera
from src.raytracer.core.log import PACKAGE_LOGGER
from src.raytracer.core.renderer import RenderConfiguration
from src.raytracer.core.vector import Vec3
from src.raytracer.geometry.sphere import Sphere
from src.raytracer.materials.color import Color
from src.raytracer.materials.texture import PlainColorTexture
from src.raytracer.scene.lights import LightPoint
from src.raytracer.scene.samples import generate_simple_scene, generate_test_scene
from src.raytracer.scene.scene import Scene, SceneConfiguration, SceneObject


class NormalLessSphere(Sphere):
    """A sphere that intersects normally but never provides a normal."""

    def normal_at(self, point):
        return None


def white_object(shape, **kwargs):
    return SceneObject(shape, PlainColorTexture(Color.WHITE), **kwargs)


@pytest.fixture
def tiny_config():
    """An 8x6 canvas with the standard strategy."""
    return RenderConfiguration(canvas_width=8, canvas_height=6)


@pytest.fixture
def simple_scene():
    """One checkered sphere under one light."""
    return generate_simple_scene()


@pytest.fixture
def test_scene():
    """The five-object showcase scene."""
    return generate_test_scene()


@pytest.fixture
def failing_scene():
    """A scene whose central object has no normal.

    Pixels hitting the central sphere fail while the border pixels, which
    see only the background, succeed.
    """
    camera = OrthogonalCamera(Vec3(0.0, 0.0, -10.0), Vec3(0.0, 0.0, 0.0), 16.0, 12.0)
    return Scene(
        camera=camera,
        lights=[LightPoint(Vec3(0.0, 0.0, -20.0))],
        objects=[white_object(NormalLessSphere(Vec3(0.0, 0.0, 0.0), 3.0))],
        config=SceneConfiguration(world_color=Color.BLUE),
    )


@pytest.fixture
def restore_logging():
    """Undo handler and level changes made by setup_logging()."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
