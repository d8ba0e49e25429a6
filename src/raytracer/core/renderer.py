"""Pixel scheduling: sequential and parallel pixel producers.

Both producers are lazy, finite, non-restartable iterators of Pixel or
FailedPixel elements, one per canvas coordinate:

- AreaRenderIterator computes pixels on demand, in strict row-major order,
  on the consumer thread.
- ParallelRenderIterator fans one task per pixel out to a thread pool and
  yields results in completion order, which is not row-major. Consumers that
  need ordering must place pixels by their coordinates.

A pixel whose computation raises a RaytracerError is delivered as a
FailedPixel; sibling pixels are unaffected. render_scene() wraps the chosen
producer in a ProgressiveRenderIterator after checking that the scene is
renderable at all.

Example:
    >>> from src.raytracer.core.renderer import RenderConfiguration, render_scene
    >>> from src.raytracer.preview.canvas import FramebufferCanvas
    >>> from src.raytracer.scene.samples import generate_test_scene
    >>>
    >>> config = RenderConfiguration(canvas_width=64, canvas_height=36)
    >>> canvas = FramebufferCanvas(64, 36)
    >>> for pixel in render_scene(generate_test_scene(), config, parallel=True):
    ...     canvas.draw(pixel.unwrap())
"""

from __future__ import annotations

import logging
import os
import queue
import threading
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from src.raytracer.core.errors import RaytracerError, SceneConfigurationError
from src.raytracer.core.progressive import FinallyCallback, ProgressiveRenderIterator
from src.raytracer.core.strategy import RenderStrategy, StandardRenderStrategy
from src.raytracer.materials.color import Color
from src.raytracer.scene.scene import Scene

if TYPE_CHECKING:
    from src.raytracer.camera.base import RayEmitter
    from src.raytracer.preview.canvas import DrawCanvas

logger = logging.getLogger(__name__)

# Default canvas size (16:9)
DEFAULT_CANVAS_WIDTH = 1024
DEFAULT_CANVAS_HEIGHT = 576


# =============================================================================
# Output Units
# =============================================================================


@dataclass(frozen=True)
class Pixel:
    """A computed pixel.

    Attributes:
        x: Column, 0 at the left.
        y: Row, 0 at the top.
        color: The pixel color.
    """

    x: int
    y: int
    color: Color

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Pixel:
        return self


@dataclass(frozen=True)
class FailedPixel:
    """A pixel whose computation failed.

    Attributes:
        x: Column, 0 at the left.
        y: Row, 0 at the top.
        error: The exception raised while computing the pixel.
    """

    x: int
    y: int
    error: BaseException

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Pixel:
        """Re-raise the pixel error."""
        raise self.error


PixelResult = Union[Pixel, FailedPixel]


# =============================================================================
# Render Configuration
# =============================================================================


@dataclass(frozen=True)
class RenderConfiguration:
    """Output canvas size and sampling strategy.

    Attributes:
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        render_strategy: Strategy computing each pixel color.
    """

    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    render_strategy: RenderStrategy = field(default_factory=StandardRenderStrategy)

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise SceneConfigurationError(
                f"Canvas dimensions must be positive, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )

    @classmethod
    def from_camera(
        cls,
        camera: RayEmitter,
        width: int | None = None,
        height: int | None = None,
        render_strategy: RenderStrategy | None = None,
    ) -> RenderConfiguration:
        """Derive a canvas size matching the camera aspect ratio.

        Give at most one of width and height; the other one follows the
        camera ratio. Without either, the default width is used.

        Raises:
            ValueError: If both width and height are given.
        """
        if width is not None and height is not None:
            raise ValueError("Give either width or height, not both")
        ratio = camera.size_ratio()
        if height is not None:
            width = int(height * ratio)
        else:
            width = width if width is not None else DEFAULT_CANVAS_WIDTH
            height = int(width / ratio)
        return cls(
            canvas_width=width,
            canvas_height=height,
            render_strategy=render_strategy or StandardRenderStrategy(),
        )

    @property
    def total_pixels(self) -> int:
        return self.canvas_width * self.canvas_height

    @property
    def pixel_width(self) -> float:
        return 1.0 / self.canvas_width

    @property
    def pixel_height(self) -> float:
        return 1.0 / self.canvas_height


def require_light(scene: Scene) -> None:
    """Reject a scene that nothing can illuminate.

    Raises:
        SceneConfigurationError: If the scene has no light.
    """
    if not scene.lights:
        raise SceneConfigurationError("There is no light in the scene")


def render_single_pixel(scene: Scene, config: RenderConfiguration, x: int, y: int) -> Pixel:
    """Compute the pixel at canvas coordinates (x, y).

    Raises:
        RaytracerError: If the light transport fails for this pixel.
    """
    canvas_x = x / config.canvas_width
    canvas_y = y / config.canvas_height
    color = config.render_strategy.render_pixel(
        scene, canvas_x, canvas_y, config.pixel_width, config.pixel_height
    )
    return Pixel(x, y, color)


# =============================================================================
# Sequential Producer
# =============================================================================


class AreaRenderIterator:
    """Row-major pixel producer over a rectangular canvas area.

    Pixels are computed lazily, one per next() call, on the calling thread.
    The cursor always advances, so a failed pixel does not block the rest of
    the area.
    """

    def __init__(
        self,
        scene: Scene,
        config: RenderConfiguration,
        area_x: int = 0,
        area_y: int = 0,
        area_width: int | None = None,
        area_height: int | None = None,
    ) -> None:
        """Initialize the iterator.

        Args:
            scene: The read-only scene.
            config: Canvas size and strategy.
            area_x: Left column of the area.
            area_y: Top row of the area.
            area_width: Width of the area; defaults to the rest of the canvas.
            area_height: Height of the area; defaults to the rest of the canvas.

        Raises:
            SceneConfigurationError: If the scene has no light.
            ValueError: If the area does not fit in the canvas.
        """
        require_light(scene)
        if area_width is None:
            area_width = config.canvas_width - area_x
        if area_height is None:
            area_height = config.canvas_height - area_y
        if (
            area_x < 0
            or area_y < 0
            or area_width < 0
            or area_height < 0
            or area_x + area_width > config.canvas_width
            or area_y + area_height > config.canvas_height
        ):
            raise ValueError(
                f"Area ({area_x}, {area_y}, {area_width}x{area_height}) does not fit "
                f"in canvas {config.canvas_width}x{config.canvas_height}"
            )
        self._scene = scene
        self._config = config
        self._area_x_origin = area_x
        self._area_x_end = area_x + area_width
        self._area_y_end = area_y + area_height
        self._area_width = area_width
        self._area_height = area_height
        self._x_current = area_x
        self._y_current = area_y if area_width > 0 else self._area_y_end

    @classmethod
    def with_full_area(cls, scene: Scene, config: RenderConfiguration) -> AreaRenderIterator:
        return cls(scene, config, 0, 0, config.canvas_width, config.canvas_height)

    def total_pixels(self) -> int:
        return self._area_width * self._area_height

    def __len__(self) -> int:
        return self.total_pixels()

    def __iter__(self) -> AreaRenderIterator:
        return self

    def __next__(self) -> PixelResult:
        if self._y_current >= self._area_y_end:
            raise StopIteration
        x, y = self._x_current, self._y_current
        self._x_current += 1
        if self._x_current >= self._area_x_end:
            self._x_current = self._area_x_origin
            self._y_current += 1
        try:
            return render_single_pixel(self._scene, self._config, x, y)
        except RaytracerError as error:
            return FailedPixel(x, y, error)


# =============================================================================
# Parallel Producer
# =============================================================================


class ParallelRenderIterator:
    """Thread-pool pixel producer yielding pixels in completion order.

    On the first next() call a coordinating thread starts, owns a
    ThreadPoolExecutor and submits one task per pixel. Each task pushes its
    Pixel or FailedPixel onto a single queue, and next() pops from that queue,
    blocking until some worker completes. Exactly canvas_width x
    canvas_height elements are produced.

    The scene is shared read-only by all tasks. Workers keep running if the
    consumer stops iterating early.
    """

    def __init__(
        self,
        scene: Scene,
        config: RenderConfiguration,
        max_workers: int | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        require_light(scene)
        self._scene = scene
        self._config = config
        self._max_workers = max_workers or (os.cpu_count() or 1)
        self._results: queue.Queue[PixelResult] = queue.Queue()
        self._total = config.total_pixels
        self._received = 0
        self._coordinator: threading.Thread | None = None

    def total_pixels(self) -> int:
        return self._total

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> ParallelRenderIterator:
        return self

    def __next__(self) -> PixelResult:
        if self._received >= self._total:
            raise StopIteration
        if self._coordinator is None:
            self._start()
        result = self._results.get()
        self._received += 1
        return result

    def _start(self) -> None:
        logger.debug("render: %d worker threads", self._max_workers)
        self._coordinator = threading.Thread(
            target=self._spawn_tasks, name="raytracer-coordinator", daemon=True
        )
        self._coordinator.start()

    def _spawn_tasks(self) -> None:
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="raytracer-worker"
        ) as executor:
            for y in range(self._config.canvas_height):
                for x in range(self._config.canvas_width):
                    executor.submit(self._render_task, x, y)

    def _render_task(self, x: int, y: int) -> None:
        try:
            result: PixelResult = render_single_pixel(self._scene, self._config, x, y)
        except RaytracerError as error:
            result = FailedPixel(x, y, error)
        except Exception as error:
            # The reader waits for exactly one result per pixel
            logger.exception("render: unexpected failure on pixel (%d, %d)", x, y)
            result = FailedPixel(x, y, error)
        self._results.put(result)


# =============================================================================
# Entry Points
# =============================================================================


def render_scene(
    scene: Scene,
    config: RenderConfiguration,
    parallel: bool = True,
    finally_callback: FinallyCallback | None = None,
    max_workers: int | None = None,
) -> ProgressiveRenderIterator[PixelResult]:
    """Start rendering a scene.

    Args:
        scene: The scene to render; not modified.
        config: Canvas size and sampling strategy.
        parallel: Use the thread-pool producer (unordered) instead of the
            sequential row-major one.
        finally_callback: Called once after the last pixel is produced.
        max_workers: Worker thread count for parallel rendering.

    Returns:
        A lazy iterator of Pixel or FailedPixel, one per canvas coordinate.

    Raises:
        SceneConfigurationError: If the scene has no light.
    """
    logger.debug("render: %d objects to process", len(scene.objects))
    logger.debug("render: %d lights to process", len(scene.lights))
    require_light(scene)

    logger.info("Canvas size: %dx%d", config.canvas_width, config.canvas_height)
    producer: Iterator[PixelResult]
    if parallel:
        producer = ParallelRenderIterator(scene, config, max_workers=max_workers)
    else:
        producer = AreaRenderIterator.with_full_area(scene, config)
    return ProgressiveRenderIterator(producer, finally_callback, total_pixels=config.total_pixels)


class ProgressiveRenderer:
    """Callback-driven rendering loop.

    Pushes every computed pixel to a callback and stops at the first error,
    whether it comes from a pixel or from the callback itself.
    """

    def __init__(self, scene: Scene, config: RenderConfiguration) -> None:
        self._scene = scene
        self._config = config

    @property
    def total_pixels(self) -> int:
        return self._config.total_pixels

    def render(
        self,
        callback: Callable[[Pixel], None],
        finally_callback: FinallyCallback | None = None,
        parallel: bool = False,
        max_workers: int | None = None,
    ) -> None:
        """Render the whole canvas.

        Args:
            callback: Receives each computed pixel.
            finally_callback: Called once after the last pixel.
            parallel: Use the thread-pool producer.
            max_workers: Worker thread count for parallel rendering.

        Raises:
            SceneConfigurationError: If the scene has no light.
            RaytracerError: The first pixel error or callback error.
        """
        for result in render_scene(
            self._scene, self._config, parallel, finally_callback, max_workers
        ):
            callback(result.unwrap())

    def __repr__(self) -> str:
        return (
            f"ProgressiveRenderer(width={self._config.canvas_width}, "
            f"height={self._config.canvas_height}, strategy={self._config.render_strategy!r})"
        )


def simple_render_to_canvas(
    scene: Scene,
    canvas: DrawCanvas,
    config: RenderConfiguration,
    parallel: bool = False,
    max_workers: int | None = None,
) -> None:
    """Render a scene straight into a canvas.

    Raises:
        SceneConfigurationError: If the scene has no light.
        RaytracerError: The first pixel error.
        CanvasError: If the canvas refuses a pixel.
    """
    ProgressiveRenderer(scene, config).render(
        canvas.draw, parallel=parallel, max_workers=max_workers
    )
