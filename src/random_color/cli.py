from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from random_color.config import DictionarySettings, GeneratorSettings, load_dictionary
from random_color.convert import format_hsl, format_hsla, format_rgb, format_rgba
from random_color.dictionary import DEFAULT_DICTIONARY, ColorDictionary
from random_color.display import build_dictionary_render, build_swatch_render, print_data
from random_color.generator import RandomColor, SampledColor
from random_color.logging import console, get_logger
from random_color.options import GAMUTS, LUMINOSITIES, Seed

app = typer.Typer(
    name="random-color",
    add_completion=True,
    no_args_is_help=True,
    help="Generate attractive random colors.",
)

log = get_logger("random_color")

FORMATS = ("hex", "rgb", "rgba", "hsl", "hsla", "hsv")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
) -> None:
    if verbose:
        import logging
        get_logger("random_color").setLevel(logging.DEBUG)


def _coerce_seed(value: Optional[str]) -> Optional[Seed]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return value


def _active_dictionary(path: Optional[Path]) -> ColorDictionary:
    if path is None:
        return DEFAULT_DICTIONARY
    return load_dictionary(path)


def _render(color: SampledColor, fmt: str, alpha: float) -> str:
    if fmt == "hex":
        return color.hex()
    if fmt == "rgb":
        return format_rgb(color.rgb())
    if fmt == "rgba":
        return format_rgba(color.rgb(), alpha)
    if fmt == "hsl":
        return format_hsl(color.hsl())
    if fmt == "hsla":
        return format_hsla(color.hsl(), alpha)
    return "hsv({}, {}%, {}%)".format(*color.hsv())


@app.command("generate")
def generate_cmd(
    hue: Optional[str] = typer.Option(None, "--hue", help=f"Hue: {'|'.join(GAMUTS)}."),
    luminosity: Optional[str] = typer.Option(
        None, "--luminosity", "-l", help=f"Luminosity: {'|'.join(LUMINOSITIES)}."
    ),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Integer or text seed."),
    alpha: float = typer.Option(1.0, "--alpha", "-a", help="Alpha value in [0, 1]."),
    random_alpha: bool = typer.Option(False, "--random-alpha", help="Draw a random alpha per color."),
    fmt: str = typer.Option("hex", "--format", "-f", help=f"Output format: {'|'.join(FORMATS)}."),
    count: int = typer.Option(1, "--count", "-n", help="Number of colors to generate."),
    dictionary: Optional[Path] = typer.Option(
        None, "--dictionary", "-d", exists=True, readable=True, help="JSON calibration file."
    ),
    as_json: bool = typer.Option(False, "--json", help="Output JSON."),
    swatch: bool = typer.Option(False, "--swatch", help="Render color swatches."),
) -> None:
    """Generate one or more random colors."""
    try:
        if fmt not in FORMATS:
            console().print(f"[red]Error:[/red] Unknown format '{fmt}'")
            console().print(f"Available formats: {', '.join(FORMATS)}")
            raise typer.Exit(1)

        settings = GeneratorSettings(
            hue=hue.lower() if hue else None,
            luminosity=luminosity.lower() if luminosity else None,
            alpha=None if random_alpha else alpha,
            seed=_coerce_seed(seed),
        )
        generator = RandomColor.from_settings(settings, _active_dictionary(dictionary))
        log.debug("Generating %d color(s) with %r", count, generator)

        colors = [generator.generate() for _ in range(count)]
        values = [_render(c, fmt, generator.pick_alpha()) for c in colors]

        renderable = build_swatch_render(colors, values) if swatch else "\n".join(values)
        print_data(values if count > 1 else values[0], renderable, as_json)
    except typer.Exit:
        raise
    except Exception as e:
        console().print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("categories")
def categories_cmd(
    dictionary: Optional[Path] = typer.Option(
        None, "--dictionary", "-d", exists=True, readable=True, help="JSON calibration file."
    ),
    as_json: bool = typer.Option(False, "--json", help="Output JSON."),
) -> None:
    """Show the hue categories and their brightness curves."""
    try:
        active = _active_dictionary(dictionary)
        data = DictionarySettings.from_dictionary(active).model_dump(mode="json")
        print_data(data, build_dictionary_render(active), as_json)
    except Exception as e:
        console().print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
