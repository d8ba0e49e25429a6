"""Camera models mapping normalized canvas coordinates to primary rays."""

from .base import RayEmitter, check_canvas_coords
from .orthogonal import OrthogonalCamera
from .perspective import PerspectiveCamera

__all__ = [
    "RayEmitter",
    "check_canvas_coords",
    "PerspectiveCamera",
    "OrthogonalCamera",
]
