from __future__ import annotations

import hashlib
from typing import Final, Literal, Union

# Named slices of the hue circle, in dictionary lookup order
Gamut = Literal["monochrome", "red", "orange", "yellow", "green", "blue", "purple", "pink"]
GAMUTS: Final[tuple[Gamut, ...]] = (
    "monochrome", "red", "orange", "yellow", "green", "blue", "purple", "pink",
)

Luminosity = Literal["random", "bright", "light", "dark"]
LUMINOSITIES: Final[tuple[Luminosity, ...]] = ("random", "bright", "light", "dark")

Seed = Union[int, str]

_U64_MASK: Final[int] = (1 << 64) - 1


def parse_gamut(value: str) -> Gamut:
    name = value.strip().lower()
    if name not in GAMUTS:
        raise ValueError(f"Unknown hue {value!r}; expected one of: {', '.join(GAMUTS)}")
    return name  # type: ignore[return-value]


def parse_luminosity(value: str) -> Luminosity:
    name = value.strip().lower()
    if name not in LUMINOSITIES:
        raise ValueError(
            f"Unknown luminosity {value!r}; expected one of: {', '.join(LUMINOSITIES)}"
        )
    return name  # type: ignore[return-value]


def seed_to_value(seed: Seed) -> int:
    """
    Normalize a seed to an unsigned 64-bit integer.

    - int: reduced modulo 2**64, so negative seeds stay distinct from their absolute value.
    - str: the first 8 bytes of its SHA-256 digest. Stable across processes,
           unlike the builtin hash().
    """
    if isinstance(seed, bool):
        raise TypeError("seed must be an int or str, not bool")
    if isinstance(seed, int):
        return seed & _U64_MASK
    if isinstance(seed, str):
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")
    raise TypeError(f"seed must be an int or str, not {type(seed).__name__}")
