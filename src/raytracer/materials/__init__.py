"""Materials module: colors, textures and optical effects.

Components:
    color: Clamped RGB color
    texture: Surface color lookup by UV (plain color, checkerboard)
    effects: Mirror, transparency and Phong highlight parameters
"""

from .color import Color
from .effects import Mirror, Phong, TextureEffects, Transparency
from .texture import CheckedPattern, PlainColorTexture, Texture

__all__ = [
    "Color",
    "Texture",
    "PlainColorTexture",
    "CheckedPattern",
    "Mirror",
    "Transparency",
    "Phong",
    "TextureEffects",
]
