from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from rich import box
from rich.color import Color
from rich.table import Table
from rich.text import Text

from .dictionary import ColorDictionary
from .generator import SampledColor
from .logging import console


def print_data(data: Any, renderable: Any, as_json: bool) -> None:
    if as_json:
        console().print_json(data=data)
    else:
        console().print(renderable)


def to_rich_color(color: SampledColor) -> Color:
    r, g, b = color.rgb()
    return Color.from_rgb(r, g, b)


def build_swatch_render(
    colors: Sequence[SampledColor],
    labels: Optional[Sequence[str]] = None,
) -> Table:
    table = Table(title="Colors", box=box.SIMPLE_HEAVY, show_lines=False)
    for col in ("Swatch", "Value", "HSV"):
        table.add_column(col)
    if labels is None:
        labels = [c.hex() for c in colors]
    for color, label in zip(colors, labels):
        block = Text("      ", style=f"on {to_rich_color(color).name}")
        table.add_row(block, label, "{}, {}, {}".format(*color.hsv()))
    return table


def _curve(points: Iterable[tuple[int, int]]) -> str:
    return " ".join(f"{s}:{v}" for s, v in points)


def build_dictionary_render(dictionary: ColorDictionary) -> Table:
    table = Table(title="Hue Categories", box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("Name", no_wrap=True)
    for col in ("Hue range", "Saturation", "Brightness", "Lower bounds (s:v)"):
        table.add_column(col)
    for category in dictionary:
        lo, hi = category.angle_range
        s_min, s_max = category.saturation_range
        v_min, v_max = category.brightness_range
        table.add_row(
            f"[bold]{category.name}[/]",
            f"{lo}..{hi}",
            f"{s_min}..{s_max}",
            f"{v_min}..{v_max}",
            _curve(category.lower_bounds),
        )
    return table
