from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field

from random_color.dictionary import ColorDictionary, HueCategory, build_dictionary
from random_color.options import Gamut, Luminosity


class GeneratorSettings(BaseModel):
    hue: Gamut | None = None
    luminosity: Luminosity | None = None
    # None means a fresh random alpha on every call
    alpha: float | None = Field(default=1.0, ge=0.0, le=1.0)
    seed: int | str | None = None


class HueCategorySettings(BaseModel):
    angle_range: Tuple[int, int]
    lower_bounds: List[Tuple[int, int]] = Field(min_length=2)


class DictionarySettings(BaseModel):
    categories: Dict[Gamut, HueCategorySettings]

    @classmethod
    def from_dictionary(cls, dictionary: ColorDictionary) -> "DictionarySettings":
        return cls(categories={
            category.name: HueCategorySettings(
                angle_range=category.angle_range,
                lower_bounds=list(category.lower_bounds),
            )
            for category in dictionary
        })

    def to_dictionary(self) -> ColorDictionary:
        return build_dictionary(
            HueCategory(
                name=name,
                angle_range=settings.angle_range,
                lower_bounds=tuple(settings.lower_bounds),
            )
            for name, settings in self.categories.items()
        )


def load_dictionary(path: Path) -> ColorDictionary:
    """Load a calibration table from a JSON file shaped like DictionarySettings."""
    settings = DictionarySettings.model_validate_json(Path(path).read_text(encoding="utf-8"))
    return settings.to_dictionary()
