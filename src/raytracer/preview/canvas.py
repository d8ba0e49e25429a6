"""Pixel sinks.

A canvas consumes pixels one at a time through draw(). The renderer assumes
nothing else about it. Canvases signal failures with CanvasError.

Canvases:
    NoCanvas: Headless sink discarding every pixel.
    FramebufferCanvas: In-memory NumPy framebuffer of shape (H, W, 3).
    CallbackCanvas: Adapter forwarding pixels to a function.

Example:
    >>> from src.raytracer.core.renderer import Pixel
    >>> from src.raytracer.materials.color import Color
    >>> from src.raytracer.preview.canvas import FramebufferCanvas
    >>> canvas = FramebufferCanvas(4, 2)
    >>> canvas.draw(Pixel(1, 0, Color.RED))
    >>> canvas.image[0, 1].tolist()
    [1.0, 0.0, 0.0]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from src.raytracer.core.errors import CanvasError
from src.raytracer.core.renderer import Pixel


class DrawCanvas(ABC):
    """Sink capability receiving computed pixels."""

    @abstractmethod
    def draw(self, pixel: Pixel) -> None:
        """Draw one pixel.

        Raises:
            CanvasError: If the pixel cannot be drawn.
        """


class NoCanvas(DrawCanvas):
    """A canvas ignoring every pixel (headless rendering, benchmarks)."""

    def draw(self, pixel: Pixel) -> None:
        return None


class CallbackCanvas(DrawCanvas):
    """A canvas forwarding each pixel to a function."""

    def __init__(self, function: Callable[[Pixel], None]) -> None:
        self._function = function

    def draw(self, pixel: Pixel) -> None:
        self._function(pixel)


class FramebufferCanvas(DrawCanvas):
    """An in-memory float32 framebuffer.

    Pixels may arrive in any order; each one is stored at its coordinates.

    Attributes:
        width: Framebuffer width in pixels.
        height: Framebuffer height in pixels.
        image: Float32 array of shape (height, width, 3), linear [0, 1].
        drawn: Number of draw() calls accepted.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: tuple[float, float, float] = (0.0, 0.0, 0.0),
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Framebuffer dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.image: npt.NDArray[np.float32] = np.empty((height, width, 3), dtype=np.float32)
        self.image[:] = background
        self.drawn = 0

    def draw(self, pixel: Pixel) -> None:
        if not (0 <= pixel.x < self.width and 0 <= pixel.y < self.height):
            raise CanvasError(
                f"Pixel ({pixel.x}, {pixel.y}) is outside the {self.width}x{self.height} canvas"
            )
        self.image[pixel.y, pixel.x] = pixel.color.to_tuple()
        self.drawn += 1

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Return the framebuffer as 8-bit RGB, shape (height, width, 3)."""
        return (np.clip(self.image, 0.0, 1.0) * 255.0).astype(np.uint8)

    def to_rgba_bytes(self) -> bytes:
        """Return the framebuffer as packed RGBA bytes with opaque alpha.

        This is the row-major layout expected by HTML canvas ImageData.
        """
        rgba = np.full((self.height, self.width, 4), 0xFF, dtype=np.uint8)
        rgba[..., :3] = self.to_uint8()
        return rgba.tobytes()

    def __repr__(self) -> str:
        return f"FramebufferCanvas(width={self.width}, height={self.height}, drawn={self.drawn})"
