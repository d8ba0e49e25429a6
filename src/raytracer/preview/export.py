"""Image export utilities for rendered images.

Supported formats:
    - PNG (8-bit via Pillow)

Renderer colors are already clamped to [0, 1], so no tone mapping is
needed; an optional gamma encoding can be applied before quantization.

Example:
    >>> from src.raytracer.preview.canvas import FramebufferCanvas
    >>> from src.raytracer.preview.export import save_png
    >>>
    >>> canvas = FramebufferCanvas(64, 36)
    >>> # ... render into canvas ...
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from src.raytracer.preview.canvas import FramebufferCanvas

logger = logging.getLogger(__name__)


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Apply gamma encoding: out = in^(1/gamma).

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value; 1.0 leaves the image unchanged.

    Returns:
        Gamma encoded image clamped to [0, 1].
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    # Clamp before the power to avoid NaN from negative values
    image = np.clip(image, 0.0, 1.0)
    if gamma == 1.0:
        return image.astype(np.float32)
    return np.power(image, 1.0 / gamma).astype(np.float32)


def image_to_uint8(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a float image in [0, 1] to 8-bit.

    Args:
        image: Image array of shape (H, W, 3).
        gamma: Gamma value applied before quantization.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    return (apply_gamma(image, gamma) * 255.0).astype(np.uint8)


def save_png_from_array(
    image: npt.NDArray[np.float32],
    filepath: str | Path,
    gamma: float = 1.0,
) -> None:
    """Save a float image array as an 8-bit RGB PNG file."""
    pil_image = PILImage.fromarray(image_to_uint8(image, gamma))
    pil_image.save(filepath)
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], filepath)


def save_png(
    canvas: FramebufferCanvas,
    filepath: str | Path,
    gamma: float = 1.0,
) -> None:
    """Save the content of a framebuffer canvas as a PNG file."""
    save_png_from_array(canvas.image, filepath, gamma=gamma)
