"""Scene module for scene description and ray-scene queries.

Components:
    lights: Point, spot and directional light sources
    scene: Scene configuration, scene objects and the Scene aggregate
    intersection: Nearest-hit search and shadow occlusion test
    samples: Ready-made scenes for examples and tests

A Scene is immutable once built and is shared read-only by all render
workers.
"""

from .intersection import CollisionContext, ray_encounter_obstacle, search_object_collision
from .lights import DirectionalLight, Light, LightPoint, SpotLight
from .samples import generate_simple_scene, generate_test_scene
from .scene import Scene, SceneConfiguration, SceneObject

__all__ = [
    # Lights
    "Light",
    "LightPoint",
    "SpotLight",
    "DirectionalLight",
    # Scene aggregate
    "Scene",
    "SceneConfiguration",
    "SceneObject",
    # Intersection
    "CollisionContext",
    "search_object_collision",
    "ray_encounter_obstacle",
    # Samples
    "generate_test_scene",
    "generate_simple_scene",
]
