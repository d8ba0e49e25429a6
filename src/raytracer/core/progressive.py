"""Progressive wrapper around pixel producers.

Progressive rendering streams pixels to the consumer while the image is still
being computed. The wrapper in this module forwards every element of an
inner pixel sequence and, exactly once, after the last element and before
signaling exhaustion, runs a finalization step: it logs the elapsed
wall-clock time and calls an optional user callback (for instance to stop a
progress indicator).

Example:
    >>> from src.raytracer.core.progressive import ProgressiveRenderIterator
    >>> done = []
    >>> wrapped = ProgressiveRenderIterator(iter([1, 2, 3]), lambda: done.append(True))
    >>> list(wrapped)
    [1, 2, 3]
    >>> done
    [True]
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Callback run once the whole pixel sequence has been produced
FinallyCallback = Callable[[], None]


class ProgressiveRenderIterator(Generic[T]):
    """Iterator forwarding an inner sequence and finalizing exactly once.

    The sequence is expected to be drained by the consumer; abandoning it
    early skips the finalization.

    Attributes:
        produced: Number of elements forwarded so far.
        finished: Whether the finalization already ran.
    """

    def __init__(
        self,
        inner: Iterator[T],
        finally_callback: FinallyCallback | None = None,
        total_pixels: int | None = None,
    ) -> None:
        self._inner = inner
        self._finally_callback = finally_callback
        self._total_pixels = total_pixels
        self._start: float | None = None
        self._elapsed: float | None = None
        self.produced = 0
        self.finished = False

    def __iter__(self) -> ProgressiveRenderIterator[T]:
        return self

    def __len__(self) -> int:
        if self._total_pixels is None:
            raise TypeError("Total pixel count is unknown for this iterator")
        return self._total_pixels

    def __next__(self) -> T:
        if self.finished:
            raise StopIteration
        if self._start is None:
            self._start = time.perf_counter()
            logger.info("render: start process...")
        try:
            item = next(self._inner)
        except StopIteration:
            self._finalize()
            raise
        self.produced += 1
        return item

    @property
    def elapsed(self) -> float | None:
        """Render duration in seconds, available once finished."""
        return self._elapsed

    @property
    def progress(self) -> float | None:
        """Fraction of pixels produced, if the total is known."""
        if not self._total_pixels:
            return None
        return self.produced / self._total_pixels

    def _finalize(self) -> None:
        self.finished = True
        start = self._start if self._start is not None else time.perf_counter()
        self._elapsed = time.perf_counter() - start
        if self._finally_callback is not None:
            self._finally_callback()
        logger.info("render: done!")
        logger.info("render: duration: %.3f seconds", self._elapsed)
