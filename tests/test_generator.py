from __future__ import annotations

import random
from collections import Counter

import pytest
from pydantic import ValidationError

from random_color import DEFAULT_DICTIONARY, GAMUTS, LUMINOSITIES, RandomColor, SampledColor
from random_color.config import GeneratorSettings
from random_color.dictionary import DEFAULT_TABLE, ColorDictionary
from random_color.seeded import SeededRandom


class ScriptedRandom(random.Random):
    """Returns pre-recorded draws and remembers the ranges asked for."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop=None, step=1):
        self.calls.append((start, stop))
        value = self.values.pop(0)
        assert start <= value < stop
        return value


def scripted(generator: RandomColor, *values: int) -> ScriptedRandom:
    source = ScriptedRandom(values)
    generator.rng._random = source
    return source


@pytest.fixture
def light_blue() -> RandomColor:
    return RandomColor().with_hue("blue").with_luminosity("light").with_seed(42).with_alpha(1.0)


def test_pipeline_stages_and_bounds(light_blue):
    source = scripted(light_blue, 191, 30, 98)
    assert light_blue.to_hsv_array() == [191, 30, 98]
    # hue inclusive over blue, light saturation up to 55, light brightness from (86 + 100) // 2
    assert source.calls == [(179, 258), (20, 55), (93, 100)]


@pytest.mark.parametrize(
    "accessor, expected",
    [
        ("to_rgb_array", [174, 236, 249]),
        ("to_rgba_array", [174, 236, 249, 255]),
        ("to_rgb_string", "rgb(174, 236, 249)"),
        ("to_rgba_string", "rgba(174, 236, 249, 1)"),
        ("to_hex", "#aeecf9"),
        ("to_hsl_array", [191, 88, 16]),
        ("to_hsl_string", "hsl(191, 88%, 16%)"),
        ("to_hsla_string", "hsla(191, 88%, 16%, 1)"),
    ],
)
def test_outputs_for_known_draw(light_blue, accessor, expected):
    scripted(light_blue, 191, 30, 98)
    assert getattr(light_blue, accessor)() == expected


def test_float_outputs_for_known_draw(light_blue):
    scripted(light_blue, 191, 30, 98)
    assert light_blue.to_f32_rgb_array() == pytest.approx([174 / 255, 236 / 255, 249 / 255])
    scripted(light_blue, 191, 30, 98)
    assert light_blue.to_f32_rgba_array() == pytest.approx([174 / 255, 236 / 255, 249 / 255, 1.0])


def test_unconstrained_hue_360_folds_to_zero():
    generator = RandomColor()
    source = scripted(generator, 360, 50, 60)
    color = generator.generate()
    assert color == SampledColor(0, 50, 60)
    # 360 looks up monochrome, whose saturation spans the whole axis
    assert source.calls == [(0, 361), (0, 100), (0, 100)]


def test_red_negative_hue_folds_and_stays_red():
    generator = RandomColor(hue="red")
    source = scripted(generator, -26, 20, 100)
    color = generator.generate()
    assert color.hue == 334
    # red curve, not pink: saturation 20..100 and floor 100 at saturation 20
    assert source.calls == [(-26, 19), (20, 100), (100, 101)]


def test_dark_allows_twenty_above_floor():
    generator = RandomColor(luminosity="dark")
    source = scripted(generator, 100, 95, 50)
    assert generator.to_hsv_array() == [100, 95, 50]
    # green: saturation 90..100, floor 45 at saturation 95
    assert source.calls == [(0, 361), (90, 100), (45, 65)]


def test_dark_brightness_never_exceeds_100():
    table = dict(DEFAULT_TABLE)
    table["green"] = ((63, 178), ((30, 100), (100, 95)))
    generator = RandomColor(luminosity="dark", dictionary=ColorDictionary.from_table(table))
    source = scripted(generator, 100, 95, 99)
    generator.generate()
    assert source.calls[-1] == (95, 100)


def test_same_seed_same_sequence():
    first = RandomColor(seed=42)
    second = RandomColor().with_seed(42)
    assert [first.to_hex() for _ in range(20)] == [second.to_hex() for _ in range(20)]


def test_text_seed_is_reproducible():
    first = RandomColor(hue="green").with_seed("A random seed")
    second = RandomColor(hue="green").with_seed("A random seed")
    assert [first.to_hsv_array() for _ in range(10)] == [second.to_hsv_array() for _ in range(10)]


def test_seeded_generator_advances():
    generator = RandomColor(seed=7)
    assert len({generator.to_hex() for _ in range(20)}) > 1


def test_reseeding_restarts_sequence():
    generator = RandomColor()
    generator.with_seed(7)
    first = [generator.to_hex() for _ in range(5)]
    generator.with_seed(7)
    assert [generator.to_hex() for _ in range(5)] == first


def test_different_seeds_differ():
    a = RandomColor(seed=1)
    b = RandomColor(seed=2)
    assert [a.to_hex() for _ in range(10)] != [b.to_hex() for _ in range(10)]


def test_unseeded_instances_vary():
    generator = RandomColor()
    assert len({generator.to_rgb_string() for _ in range(20)}) > 1


@pytest.mark.parametrize("gamut", GAMUTS)
@pytest.mark.parametrize("luminosity", [None, *LUMINOSITIES])
def test_samples_stay_in_range(gamut, luminosity):
    generator = RandomColor(hue=gamut, luminosity=luminosity, seed=f"{gamut}-{luminosity}")
    category = DEFAULT_DICTIONARY.category(gamut)
    for _ in range(200):
        color = generator.generate()
        assert 0 <= color.hue < 360
        assert 0 <= color.saturation <= 100
        assert 0 <= color.brightness <= 100
        assert category.has_between_range(color.hue) or category.has_between_range(color.hue - 360)


def test_luminosity_narrows_blue_ranges():
    blue = DEFAULT_DICTIONARY.category("blue")

    dark = RandomColor(hue="blue", luminosity="dark", seed=3)
    for _ in range(200):
        color = dark.generate()
        assert 90 <= color.saturation < 100
        floor = blue.minimum_brightness(color.saturation)
        assert floor <= color.brightness < floor + 20

    light = RandomColor(hue="blue", luminosity="light", seed=3)
    for _ in range(200):
        color = light.generate()
        assert 20 <= color.saturation < 55
        assert color.brightness >= (blue.minimum_brightness(color.saturation) + 100) // 2

    bright = RandomColor(hue="blue", luminosity="bright", seed=3)
    for _ in range(200):
        color = bright.generate()
        assert 55 <= color.saturation < 100
        assert color.brightness >= blue.minimum_brightness(color.saturation)


def test_unconstrained_hue_is_roughly_uniform():
    generator = RandomColor(seed=2024)
    counts = Counter(generator.generate().hue // 10 for _ in range(36000))
    assert set(counts) == set(range(36))
    # ~1000 per bucket; bucket 0 also receives draws of 360
    assert all(800 <= n <= 1250 for n in counts.values()), counts


def test_alpha_threshold():
    generator = RandomColor()
    assert generator.alpha == 1.0
    generator.with_alpha(0.2)
    assert generator.alpha == 0.2
    generator.with_alpha(1.0)
    assert generator.alpha == 0.2
    with pytest.raises(ValueError):
        generator.with_alpha(-0.1)


def test_fixed_alpha_in_outputs():
    generator = RandomColor(seed=5).with_alpha(0.2)
    assert generator.to_rgba_array()[3] == 51
    assert generator.to_rgba_string().endswith(", 0.2)")
    assert generator.to_f32_rgba_array()[3] == 0.2


def test_random_alpha_does_not_disturb_seeded_sequence():
    first = RandomColor(seed=11).with_random_alpha()
    second = RandomColor(seed=11).with_random_alpha()
    for _ in range(10):
        a, b = first.to_f32_rgba_array(), second.to_f32_rgba_array()
        assert a[:3] == b[:3]
        assert 0.0 <= a[3] < 1.0


def test_fluent_setters_return_generator():
    generator = RandomColor()
    assert generator.with_hue("pink") is generator
    assert generator.with_luminosity("bright") is generator
    assert generator.with_seed(1) is generator
    assert generator.with_alpha(0.3) is generator
    assert generator.with_random_alpha() is generator
    assert generator.with_dictionary(DEFAULT_DICTIONARY) is generator


def test_invalid_options_raise():
    with pytest.raises(ValueError):
        RandomColor().with_hue("teal")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        RandomColor(luminosity="pastel")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        RandomColor(alpha=1.5)


def test_from_settings_matches_keyword_construction():
    settings = GeneratorSettings(hue="purple", luminosity="dark", seed=99, alpha=0.5)
    from_settings = RandomColor.from_settings(settings)
    direct = RandomColor(hue="purple", luminosity="dark", seed=99, alpha=0.5)
    assert [from_settings.to_rgba_string() for _ in range(5)] == [direct.to_rgba_string() for _ in range(5)]


def test_settings_validation():
    with pytest.raises(ValidationError):
        GeneratorSettings(alpha=1.5)
    with pytest.raises(ValidationError):
        GeneratorSettings(hue="teal")


def test_seeded_random_normalizes_bounds():
    rng = SeededRandom(seed=1)
    assert all(3 <= rng.within(10, 3) < 10 for _ in range(100))
    assert all(rng.within(4, 4) == 4 for _ in range(10))


def test_seeded_random_negative_seed_is_distinct():
    assert SeededRandom(seed=-5).seed != SeededRandom(seed=5).seed
