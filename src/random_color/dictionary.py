from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Final, Iterable, Iterator, Mapping, Sequence, Tuple

from random_color.logging import get_logger
from random_color.options import GAMUTS, Gamut

log = get_logger(__name__)

Point = Tuple[int, int]


class UnknownHueError(LookupError):
    """Raised when a hue falls outside every category of a dictionary."""


@dataclass(frozen=True, slots=True)
class HueCategory:
    """
    A named slice of the hue circle with its brightness floor curve.

    - angle_range: inclusive (min, max) in degrees. Red uses a negative min to wrap through 0.
    - lower_bounds: (saturation, minimum brightness) points, strictly increasing in saturation.
                    The curve is linear between consecutive points.
    """
    name: Gamut
    angle_range: Point
    lower_bounds: Tuple[Point, ...]
    saturation_range: Point = field(init=False)
    brightness_range: Point = field(init=False)

    def __post_init__(self) -> None:
        lo, hi = self.angle_range
        if lo > hi:
            raise ValueError(f"{self.name}: angle range {self.angle_range} is inverted")
        points = tuple((int(s), int(v)) for s, v in self.lower_bounds)
        if len(points) < 2:
            raise ValueError(f"{self.name}: lower bounds need at least two points")
        for (s1, _), (s2, _) in zip(points, points[1:]):
            if s2 <= s1:
                raise ValueError(f"{self.name}: lower bound saturations must strictly increase")
        object.__setattr__(self, "angle_range", (int(lo), int(hi)))
        object.__setattr__(self, "lower_bounds", points)
        # Ranges come from the endpoints, the curve is not monotonic in brightness
        object.__setattr__(self, "saturation_range", (points[0][0], points[-1][0]))
        object.__setattr__(self, "brightness_range", (points[-1][1], points[0][1]))

    def has_between_range(self, hue: int) -> bool:
        return self.angle_range[0] <= hue <= self.angle_range[1]

    def minimum_brightness(self, saturation: int) -> int:
        points = self.lower_bounds
        for (s1, v1), (s2, v2) in zip(points, points[1:]):
            if s1 <= saturation <= s2:
                return math.floor(v1 + (v2 - v1) * (saturation - s1) / (s2 - s1))
        if saturation < points[0][0]:
            return points[0][1]
        return points[-1][1]


@dataclass(frozen=True, slots=True)
class ColorDictionary:
    """Immutable table of hue categories, one per gamut, kept in lookup order."""
    categories: Tuple[HueCategory, ...]

    def __post_init__(self) -> None:
        by_name = {}
        for category in self.categories:
            if category.name not in GAMUTS:
                raise ValueError(f"Unknown hue category: {category.name!r}")
            if category.name in by_name:
                raise ValueError(f"Duplicate hue category: {category.name!r}")
            by_name[category.name] = category
        missing = [name for name in GAMUTS if name not in by_name]
        if missing:
            raise ValueError(f"Missing hue categories: {', '.join(missing)}")
        object.__setattr__(self, "categories", tuple(by_name[name] for name in GAMUTS))

    @classmethod
    def from_table(cls, table: Mapping[Gamut, Tuple[Point, Sequence[Point]]]) -> "ColorDictionary":
        """Build from {name: (angle_range, lower_bounds)}."""
        return cls(tuple(
            HueCategory(name=name, angle_range=tuple(rng), lower_bounds=tuple(tuple(p) for p in bounds))
            for name, (rng, bounds) in table.items()
        ))

    def __iter__(self) -> Iterator[HueCategory]:
        return iter(self.categories)

    def category(self, name: Gamut) -> HueCategory:
        for category in self.categories:
            if category.name == name:
                return category
        raise KeyError(name)

    def category_for_hue(self, hue: int) -> HueCategory:
        """
        Find the category containing `hue`.

        The raw value is tried first, so a hue sampled from red's negative range stays red
        even though -26 and pink's 334 coincide on the circle. After that the hue is folded
        into [0, 360) and, failing that, into [-360, 0).
        """
        h = hue % 360
        for candidate in (hue, h, h - 360):
            for category in self.categories:
                if category.has_between_range(candidate):
                    return category
        raise UnknownHueError(f"Hue {hue} is not covered by any hue category")

    def saturation_range(self, hue: int) -> Point:
        return self.category_for_hue(hue).saturation_range

    def minimum_brightness(self, hue: int, saturation: int) -> int:
        return self.category_for_hue(hue).minimum_brightness(saturation)


DEFAULT_TABLE: Final[dict[Gamut, Tuple[Point, Tuple[Point, ...]]]] = {
    "monochrome": ((0, 0), ((0, 0), (100, 0))),
    "red": ((-26, 18), (
        (20, 100), (30, 92), (40, 89), (50, 85), (60, 78), (70, 70), (80, 60), (90, 55), (100, 50),
    )),
    "orange": ((19, 46), (
        (20, 100), (30, 93), (40, 88), (50, 86), (60, 85), (70, 70), (100, 70),
    )),
    "yellow": ((47, 62), (
        (25, 100), (40, 94), (50, 89), (60, 86), (70, 84), (80, 82), (90, 80), (100, 75),
    )),
    "green": ((63, 178), (
        (30, 100), (40, 90), (50, 85), (60, 81), (70, 74), (80, 64), (90, 50), (100, 40),
    )),
    "blue": ((179, 257), (
        (20, 100), (30, 86), (40, 80), (50, 74), (60, 60), (70, 52), (80, 44), (90, 39), (100, 35),
    )),
    "purple": ((258, 282), (
        (20, 100), (30, 87), (40, 79), (50, 70), (60, 65), (70, 59), (80, 52), (90, 45), (100, 42),
    )),
    "pink": ((283, 334), (
        (20, 100), (30, 90), (40, 86), (60, 84), (80, 80), (90, 75), (100, 73),
    )),
}

DEFAULT_DICTIONARY: Final[ColorDictionary] = ColorDictionary.from_table(DEFAULT_TABLE)


def build_dictionary(categories: Iterable[HueCategory]) -> ColorDictionary:
    dictionary = ColorDictionary(tuple(categories))
    log.debug("Loaded custom color dictionary: %s", ", ".join(c.name for c in dictionary))
    return dictionary


__all__ = [
    "HueCategory",
    "ColorDictionary",
    "UnknownHueError",
    "DEFAULT_TABLE",
    "DEFAULT_DICTIONARY",
    "build_dictionary",
]
