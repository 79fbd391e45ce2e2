from __future__ import annotations

import math
import re
from typing import Final, Tuple

RGB = Tuple[int, int, int]
HSL = Tuple[int, int, int]

_HEX_RE: Final = re.compile(r"^#?([0-9a-fA-F]{6})$")


def hsv_to_rgb(hue: int, saturation: int, brightness: int) -> RGB:
    """Convert HSV (0-360, 0-100, 0-100) to an RGB tuple (0-255).

    Hue 0 is treated as 1 and 360 as 359 so the red seam never lands exactly on a
    sector boundary. Channels are floored, not rounded.
    """
    if hue == 0:
        hue = 1
    if hue == 360:
        hue = 359

    h = hue / 360
    s = saturation / 100
    v = brightness / 100

    h_i = math.floor(h * 6)
    f = h * 6 - h_i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if h_i == 0:
        r, g, b = v, t, p
    elif h_i == 1:
        r, g, b = q, v, p
    elif h_i == 2:
        r, g, b = p, v, t
    elif h_i == 3:
        r, g, b = p, q, v
    elif h_i == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return math.floor(r * 255), math.floor(g * 255), math.floor(b * 255)


def hsv_to_hsl(hue: int, saturation: int, brightness: int) -> HSL:
    """Convert HSV (0-360, 0-100, 0-100) to integer HSL percentages.

    Lightness is taken after the k > 1 reflection, matching the published outputs
    of this generator. Saturation of pure black is 0.
    """
    s = saturation / 100
    v = brightness / 100
    k = (2 - s) * v
    if k > 1:
        k = 2 - k

    hsl_saturation = int(s * v / k * 100) if k > 0 else 0
    return hue, hsl_saturation, int(k / 2 * 100)


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(value: str) -> RGB:
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_alpha(alpha: float) -> str:
    return f"{alpha:g}"


def format_rgb(rgb: RGB) -> str:
    return "rgb({}, {}, {})".format(*rgb)


def format_rgba(rgb: RGB, alpha: float) -> str:
    return "rgba({}, {}, {}, {})".format(*rgb, format_alpha(alpha))


def format_hsl(hsl: HSL) -> str:
    return "hsl({}, {}%, {}%)".format(*hsl)


def format_hsla(hsl: HSL, alpha: float) -> str:
    return "hsla({}, {}%, {}%, {})".format(*hsl, format_alpha(alpha))


__all__ = [
    "hsv_to_rgb",
    "hsv_to_hsl",
    "rgb_to_hex",
    "hex_to_rgb",
    "format_alpha",
    "format_rgb",
    "format_rgba",
    "format_hsl",
    "format_hsla",
]
