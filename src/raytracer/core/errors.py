"""Exception hierarchy for the renderer.

Three kinds of failure exist:

- SceneConfigurationError: the scene or render configuration cannot be
  rendered at all (for instance a scene without lights). Raised before any
  pixel is produced.
- NormalNotFoundError: a shape reported an intersection but could not give a
  normal at that point. Surfaces as an error for that single pixel.
- CanvasError: the pixel sink refused a pixel. Propagates to whoever drives
  the consumption loop.
"""


class RaytracerError(Exception):
    """Base class for all renderer errors."""


class SceneConfigurationError(RaytracerError, ValueError):
    """The scene or render configuration is not renderable."""


class NormalNotFoundError(RaytracerError):
    """A shape reported a hit but has no normal at the hit point.

    Attributes:
        object_index: Index of the offending object in the scene object list.
    """

    def __init__(self, object_index: int) -> None:
        super().__init__(f"No normal found for scene object #{object_index}")
        self.object_index = object_index


class CanvasError(RaytracerError):
    """A canvas could not draw a pixel."""
