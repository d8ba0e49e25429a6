"""Preview module for pixel sinks and image output.

Components:
    canvas: DrawCanvas contract and sinks (no-op, callback, framebuffer)
    export: Gamma correction and PNG export

Example:
    >>> from src.raytracer.core.renderer import RenderConfiguration, simple_render_to_canvas
    >>> from src.raytracer.preview import FramebufferCanvas, save_png
    >>> from src.raytracer.scene.samples import generate_test_scene
    >>>
    >>> config = RenderConfiguration(canvas_width=320, canvas_height=180)
    >>> canvas = FramebufferCanvas(320, 180)
    >>> simple_render_to_canvas(generate_test_scene(), canvas, config, parallel=True)
    >>> save_png(canvas, "output.png")
"""

from src.raytracer.preview.canvas import CallbackCanvas, DrawCanvas, FramebufferCanvas, NoCanvas
from src.raytracer.preview.export import (
    apply_gamma,
    image_to_uint8,
    save_png,
    save_png_from_array,
)

__all__ = [
    # Canvases
    "DrawCanvas",
    "NoCanvas",
    "CallbackCanvas",
    "FramebufferCanvas",
    # Export functions
    "apply_gamma",
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
]
