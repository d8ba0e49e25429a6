"""Optical effects attached to scene objects.

A TextureEffects bundle holds up to three optional effects. A missing effect
means the matching physical behavior is skipped entirely by the light
transport code, not evaluated with a zero coefficient.

Effects:
    Mirror: Adds coeff x the color seen along the reflected ray.
    Transparency: Adds alpha x the color seen through the object.
    Phong: Specular highlight of exponent size scaled by lum_coeff.
"""

from __future__ import annotations

from dataclasses import dataclass


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


@dataclass(frozen=True)
class Mirror:
    """Mirror reflection.

    Attributes:
        coeff: Weight of the reflected color, in [0, 1].
    """

    coeff: float = 1.0

    def __post_init__(self) -> None:
        _check_unit_interval("Mirror coeff", self.coeff)


@dataclass(frozen=True)
class Transparency:
    """Refraction through the object.

    Attributes:
        refractive_index: Index of refraction of the object material.
        alpha: Weight of the color seen through the object, in [0, 1].
    """

    refractive_index: float = 1.3
    alpha: float = 0.5

    def __post_init__(self) -> None:
        if self.refractive_index <= 0.0:
            raise ValueError(f"Refractive index must be positive, got {self.refractive_index}")
        _check_unit_interval("Transparency alpha", self.alpha)


@dataclass(frozen=True)
class Phong:
    """Phong specular highlight.

    Attributes:
        size: Specular exponent; larger values give smaller highlights.
        lum_coeff: Luminance coefficient of the highlight, in [0, 1].
    """

    size: int = 50
    lum_coeff: float = 0.5

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"Phong size must be non-negative, got {self.size}")
        _check_unit_interval("Phong lum_coeff", self.lum_coeff)


@dataclass(frozen=True)
class TextureEffects:
    """Optional set of optical effects for a scene object."""

    mirror: Mirror | None = None
    transparency: Transparency | None = None
    phong: Phong | None = None
