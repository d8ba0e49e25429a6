"""Recursive Whitted-style ray tracer.

This package renders scenes made of analytic shapes lit by point, spot and
directional lights, with support for:
- Diffuse shading and hard shadows
- Phong specular highlights
- Mirror reflection and refraction with bounded recursion
- Sequential or thread-parallel pixel production
- Progressive rendering with a completion callback

Subpackages:
    core: Vector algebra, rays, errors, light transport, pixel schedulers
    geometry: Shape contract and primitives (sphere, planes)
    materials: Clamped colors, textures and optical effects
    camera: Ray emitters (perspective, orthogonal)
    scene: Lights, scene aggregate, collision search, sample scenes
    preview: Canvas sinks and PNG export
"""

__version__ = "0.1.0"
