"""Pixel sampling strategies.

A render strategy turns a pixel footprint into one or more camera rays and
combines the traced colors. Footprints are given in normalized canvas space:
(canvas_x, canvas_y) is the top-left corner of the pixel and
(pixel_width, pixel_height) its size, i.e. 1 / canvas_width and
1 / canvas_height.

Strategies:
    StandardRenderStrategy: One ray through the pixel center. Deterministic.
    RandomAntiAliasingRenderStrategy: N uniformly jittered rays averaged with
        weight 1/N each (Monte Carlo box filter).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from src.raytracer.core.integrator import trace
from src.raytracer.materials.color import Color
from src.raytracer.scene.scene import Scene


class RenderStrategy(ABC):
    """Policy mapping a pixel footprint to a color."""

    @abstractmethod
    def render_pixel(
        self,
        scene: Scene,
        canvas_x: float,
        canvas_y: float,
        pixel_width: float,
        pixel_height: float,
    ) -> Color:
        """Compute the color of one pixel.

        Args:
            scene: The read-only scene.
            canvas_x: Left edge of the pixel in [0, 1).
            canvas_y: Top edge of the pixel in [0, 1).
            pixel_width: Width of the pixel in canvas units.
            pixel_height: Height of the pixel in canvas units.

        Returns:
            The pixel color.

        Raises:
            RaytracerError: If tracing a ray fails.
        """


class StandardRenderStrategy(RenderStrategy):
    """Trace a single ray through the center of the pixel."""

    def render_pixel(
        self,
        scene: Scene,
        canvas_x: float,
        canvas_y: float,
        pixel_width: float,
        pixel_height: float,
    ) -> Color:
        x_unit = pixel_width / 2.0 + canvas_x
        y_unit = pixel_height / 2.0 + canvas_y
        return trace(scene.camera.generate_ray(x_unit, y_unit), scene, 0)

    def __repr__(self) -> str:
        return "StandardRenderStrategy()"


class RandomAntiAliasingRenderStrategy(RenderStrategy):
    """Average several randomly jittered rays per pixel.

    The random generator is a NumPy Generator, which serializes concurrent
    draws internally, so one strategy can be shared by worker threads.

    Attributes:
        rays_per_pixel: Number of rays traced per pixel.
    """

    def __init__(self, rays_per_pixel: int, seed: int | None = None) -> None:
        """Initialize the strategy.

        Args:
            rays_per_pixel: Number of rays per pixel (at least 1).
            seed: Optional seed for reproducible jitter.

        Raises:
            ValueError: If rays_per_pixel is lower than 1.
        """
        if rays_per_pixel < 1:
            raise ValueError(f"rays_per_pixel must be >= 1, got {rays_per_pixel}")
        self.rays_per_pixel = rays_per_pixel
        self._rng = np.random.default_rng(seed)

    def render_pixel(
        self,
        scene: Scene,
        canvas_x: float,
        canvas_y: float,
        pixel_width: float,
        pixel_height: float,
    ) -> Color:
        weight = 1.0 / self.rays_per_pixel
        jitter = self._rng.random((self.rays_per_pixel, 2))
        result_color = Color.BLACK
        for jitter_x, jitter_y in jitter:
            x_unit = float(jitter_x) * pixel_width + canvas_x
            y_unit = float(jitter_y) * pixel_height + canvas_y
            camera_ray = scene.camera.generate_ray(x_unit, y_unit)
            result_color += weight * trace(camera_ray, scene, 0)
        return result_color

    def __repr__(self) -> str:
        return f"RandomAntiAliasingRenderStrategy(rays_per_pixel={self.rays_per_pixel})"
