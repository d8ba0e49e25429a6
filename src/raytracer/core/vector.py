"""3D vector and 3x3 matrix algebra.

This module provides the immutable Vec3 value type used for points and
directions everywhere in the renderer, and the Mat3 matrix used to build
local frames for planes and cameras.

Vec3 arithmetic is plain Python on three floats. Mat3 is backed by a
read-only NumPy array and is built once per shape or camera.

Example:
    >>> from src.raytracer.core.vector import Mat3, Vec3
    >>> a = Vec3(1.0, 0.0, 0.0)
    >>> b = Vec3(0.0, 1.0, 0.0)
    >>> a.cross(b)
    Vec3(x=0.0, y=0.0, z=1.0)
    >>> Mat3.transformation_between(a, b) @ a  # doctest: +SKIP
    Vec3(x=0.0, y=1.0, z=0.0)
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Machine epsilon used by the tolerant float comparisons
FLOAT_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class Vec3:
    """An immutable (x, y, z) triple of doubles.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def between_points(cls, start: Vec3, end: Vec3) -> Vec3:
        """Return the vector going from start to end."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vec3:
        """Build a vector from any 3-element sequence or array."""
        x, y, z = (float(v) for v in np.asarray(values, dtype=np.float64).reshape(3))
        return cls(x, y, z)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return the components as a NumPy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vec3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Compute the cross product self x other."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Return a unit vector with the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        norm = self.norm()
        return Vec3(self.x / norm, self.y / norm, self.z / norm)

    def distance(self, other: Vec3) -> float:
        """Return the distance between two points."""
        return (other - self).norm()

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected vector: v - 2 (v . n) n.
        """
        return self - (2.0 * self.dot(normal)) * normal


class Mat3:
    """An immutable 3x3 matrix backed by a NumPy array."""

    __slots__ = ("_data",)

    def __init__(self, rows: npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.shape != (3, 3):
            raise ValueError(f"Mat3 requires a 3x3 array, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def zeros(cls) -> Mat3:
        return cls(np.zeros((3, 3)))

    @classmethod
    def identity(cls) -> Mat3:
        return cls(np.eye(3))

    @classmethod
    def skew(cls, v: Vec3) -> Mat3:
        """Return the cross-product matrix [v]x such that [v]x @ w == v x w."""
        return cls(
            [
                [0.0, -v.z, v.y],
                [v.z, 0.0, -v.x],
                [-v.y, v.x, 0.0],
            ]
        )

    @classmethod
    def transformation_between(cls, source: Vec3, destination: Vec3) -> Mat3:
        """Build the rotation matrix that maps one direction onto another.

        Uses Rodrigues' rotation formula:
            R = I + [v]x + [v]x^2 * 1 / (1 + c)
        with v = a x b and c = a . b for the normalized inputs a and b.

        Args:
            source: Direction to rotate from (need not be normalized).
            destination: Direction to rotate to (need not be normalized).

        Returns:
            A rotation matrix R with R @ normalize(source) == normalize(destination).
            Parallel inputs give the identity; anti-parallel inputs give a
            half-turn around an axis orthogonal to source.
        """
        a = source.normalize()
        b = destination.normalize()
        c = a.dot(b)
        if c >= 1.0 - 1e-12:
            return cls.identity()
        if c <= -1.0 + 1e-12:
            # Half-turn: R = 2 k k^T - I for any unit k orthogonal to a
            helper = Vec3(1.0, 0.0, 0.0) if abs(a.x) < 0.9 else Vec3(0.0, 1.0, 0.0)
            k = a.cross(helper).normalize().to_array()
            return cls(2.0 * np.outer(k, k) - np.eye(3))
        vx = cls.skew(a.cross(b)).array
        return cls(np.eye(3) + vx + (vx @ vx) / (1.0 + c))

    @property
    def array(self) -> npt.NDArray[np.float64]:
        """Read-only view of the underlying array."""
        return self._data

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def __add__(self, other: Mat3) -> Mat3:
        return Mat3(self._data + other._data)

    def __mul__(self, other: float | Vec3) -> Mat3 | Vec3:
        if isinstance(other, Vec3):
            return self @ other
        return Mat3(self._data * other)

    def __rmul__(self, scalar: float) -> Mat3:
        return Mat3(self._data * scalar)

    def __matmul__(self, other: Mat3 | Vec3) -> Mat3 | Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data @ other.to_array())
        return Mat3(self._data @ other._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=FLOAT_EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat3({self._data.tolist()})"


# =============================================================================
# Tolerant float comparisons
# =============================================================================


def f64_eq(a: float, b: float) -> bool:
    return abs(a - b) <= FLOAT_EPSILON


def f64_lt(a: float, b: float) -> bool:
    """Return True if a <= b within machine epsilon."""
    return a <= b + FLOAT_EPSILON


def f64_gt(a: float, b: float) -> bool:
    """Return True if a >= b within machine epsilon."""
    return a >= b - FLOAT_EPSILON


def unit_interval_clamp(value: float) -> float:
    """Clamp a value into [0, 1]."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value
