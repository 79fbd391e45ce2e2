from __future__ import annotations

from .convert import (
    hsv_to_rgb,
    hsv_to_hsl,
    rgb_to_hex,
    hex_to_rgb,
)
from .dictionary import (
    HueCategory,
    ColorDictionary,
    UnknownHueError,
    DEFAULT_DICTIONARY,
)
from .generator import RandomColor, SampledColor
from .options import GAMUTS, LUMINOSITIES, Gamut, Luminosity
from .seeded import SeededRandom

__all__ = [
    # Generation
    "RandomColor",
    "SampledColor",
    "SeededRandom",
    # Dictionary
    "HueCategory",
    "ColorDictionary",
    "UnknownHueError",
    "DEFAULT_DICTIONARY",
    # Options
    "Gamut",
    "Luminosity",
    "GAMUTS",
    "LUMINOSITIES",
    # Conversion
    "hsv_to_rgb",
    "hsv_to_hsl",
    "rgb_to_hex",
    "hex_to_rgb",
]
