from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from random_color.config import GeneratorSettings
from random_color.convert import (
    HSL,
    RGB,
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
    hsv_to_hsl,
    hsv_to_rgb,
    rgb_to_hex,
)
from random_color.dictionary import DEFAULT_DICTIONARY, ColorDictionary
from random_color.logging import get_logger
from random_color.options import Gamut, Luminosity, Seed, parse_gamut, parse_luminosity
from random_color.seeded import SeededRandom

log = get_logger(__name__)

MAX_BRIGHTNESS = 100


@dataclass(frozen=True, slots=True)
class SampledColor:
    """One generated color as an integer HSV triple."""
    hue: int
    saturation: int
    brightness: int

    def hsv(self) -> Tuple[int, int, int]:
        return self.hue, self.saturation, self.brightness

    def rgb(self) -> RGB:
        return hsv_to_rgb(self.hue, self.saturation, self.brightness)

    def hsl(self) -> HSL:
        return hsv_to_hsl(self.hue, self.saturation, self.brightness)

    def hex(self) -> str:
        return rgb_to_hex(self.rgb())


class RandomColor:
    """
    Generator of attractive random colors.

    Options are set through the fluent ``with_*`` methods, each returning the
    generator itself::

        RandomColor().with_hue("blue").with_luminosity("light").with_seed(42).to_hex()

    Every output accessor runs a full generation (hue, then saturation, then
    brightness). With an explicit seed the instance produces a reproducible
    sequence of colors. An instance owns a stateful random source and should not
    be shared between threads.
    """

    def __init__(
        self,
        hue: Optional[Gamut] = None,
        luminosity: Optional[Luminosity] = None,
        seed: Optional[Seed] = None,
        alpha: Optional[float] = 1.0,
        dictionary: ColorDictionary = DEFAULT_DICTIONARY,
    ) -> None:
        self.hue: Optional[Gamut] = parse_gamut(hue) if hue is not None else None
        self.luminosity: Optional[Luminosity] = (
            parse_luminosity(luminosity) if luminosity is not None else None
        )
        if alpha is not None and not (0.0 <= alpha <= 1.0):
            raise ValueError("alpha must be in [0, 1]")
        self.alpha: Optional[float] = alpha
        self.dictionary = dictionary
        self.rng = SeededRandom(seed)

    @classmethod
    def from_settings(
        cls,
        settings: GeneratorSettings,
        dictionary: ColorDictionary = DEFAULT_DICTIONARY,
    ) -> "RandomColor":
        return cls(
            hue=settings.hue,
            luminosity=settings.luminosity,
            seed=settings.seed,
            alpha=settings.alpha,
            dictionary=dictionary,
        )

    def __repr__(self) -> str:
        return (
            f"RandomColor(hue={self.hue!r}, luminosity={self.luminosity!r}, "
            f"seed={self.rng.seed!r}, alpha={self.alpha!r})"
        )

    # ---- Options -----------------------------------------------------------

    def with_hue(self, hue: Gamut) -> "RandomColor":
        self.hue = parse_gamut(hue)
        return self

    def with_luminosity(self, luminosity: Luminosity) -> "RandomColor":
        self.luminosity = parse_luminosity(luminosity)
        return self

    def with_seed(self, seed: Seed) -> "RandomColor":
        self.rng.reseed(seed)
        return self

    def with_alpha(self, alpha: float) -> "RandomColor":
        """Set a fixed alpha. Only values below 1.0 are stored."""
        if alpha < 0:
            raise ValueError("alpha must be >= 0")
        if alpha < 1.0:
            self.alpha = alpha
        return self

    def with_random_alpha(self) -> "RandomColor":
        self.alpha = None
        return self

    def with_dictionary(self, dictionary: ColorDictionary) -> "RandomColor":
        self.dictionary = dictionary
        return self

    # ---- Sampling ----------------------------------------------------------

    def generate(self) -> SampledColor:
        hue = self._pick_hue()
        saturation = self._pick_saturation(hue)
        brightness = self._pick_brightness(hue, saturation)
        log.debug("Sampled hsv(%d, %d, %d)", hue, saturation, brightness)
        return SampledColor(hue % 360, saturation, brightness)

    def _pick_hue(self) -> int:
        # Unfolded: 360 is a valid draw and red may go negative, both fold on output
        if self.hue is None:
            return self.rng.within(0, 361)
        lo, hi = self.dictionary.category(self.hue).angle_range
        return self.rng.within(lo, hi + 1)

    def _pick_saturation(self, hue: int) -> int:
        s_min, s_max = self.dictionary.saturation_range(hue)

        if self.luminosity == "random":
            return self.rng.within(0, 100)
        if self.luminosity == "bright":
            return self.rng.within(55, s_max)
        if self.luminosity == "dark":
            return self.rng.within(s_max - 10, s_max)
        if self.luminosity == "light":
            return self.rng.within(s_min, 55)
        return self.rng.within(s_min, s_max)

    def _pick_brightness(self, hue: int, saturation: int) -> int:
        b_min = self.dictionary.minimum_brightness(hue, saturation)
        b_max = MAX_BRIGHTNESS

        if self.luminosity == "random":
            return self.rng.within(0, 100)
        if self.luminosity == "light":
            return self.rng.within((b_max + b_min) // 2, b_max)
        if self.luminosity == "dark":
            return self.rng.within(b_min, min(b_min + 20, b_max))
        return self.rng.within(b_min, b_max)

    def pick_alpha(self) -> float:
        # Drawn outside the seeded sequence, never reproducible
        return self.alpha if self.alpha is not None else random.random()

    # ---- Outputs -----------------------------------------------------------

    def to_hsv_array(self) -> List[int]:
        return list(self.generate().hsv())

    def to_rgb_array(self) -> List[int]:
        return list(self.generate().rgb())

    def to_rgba_array(self) -> List[int]:
        rgb = self.generate().rgb()
        return [*rgb, round(self.pick_alpha() * 255)]

    def to_f32_rgb_array(self) -> List[float]:
        return [c / 255 for c in self.generate().rgb()]

    def to_f32_rgba_array(self) -> List[float]:
        rgb = self.generate().rgb()
        return [*(c / 255 for c in rgb), self.pick_alpha()]

    def to_rgb_string(self) -> str:
        return format_rgb(self.generate().rgb())

    def to_rgba_string(self) -> str:
        rgb = self.generate().rgb()
        return format_rgba(rgb, self.pick_alpha())

    def to_hsl_array(self) -> List[int]:
        return list(self.generate().hsl())

    def to_hsl_string(self) -> str:
        return format_hsl(self.generate().hsl())

    def to_hsla_string(self) -> str:
        hsl = self.generate().hsl()
        return format_hsla(hsl, self.pick_alpha())

    def to_hex(self) -> str:
        return self.generate().hex()


__all__ = ["RandomColor", "SampledColor"]
