"""Tests for building the full set of ladders from a seed."""

import dataclasses

import pytest

import wallpaper_colors
from core_palette import CorePalette, HueChroma, core_palette
from monet import FAMILIES, TRANSPARENT, build_result, result_from_wallpaper
from score import GOOGLE_BLUE
from shades import MAX_CHROMA, SHADE_NAMES, synthesize_ladder

SEED = 0xFF6750A4


def test_transparent_seed_uses_google_blue():
    result = build_result(TRANSPARENT)
    palette = core_palette(GOOGLE_BLUE)
    assert result.seed == GOOGLE_BLUE
    assert result.accent1_shades == synthesize_ladder(palette.a1.hue, palette.a1.chroma)
    assert result == build_result(GOOGLE_BLUE)


def test_zero_alpha_seed_is_transparent():
    assert build_result(0x00FF0000).seed == GOOGLE_BLUE


def test_groupings_concatenate_in_order():
    result = build_result(SEED)
    assert len(result.all_accent_shades) == 39
    assert len(result.all_neutral_shades) == 26
    assert result.all_accent_shades == (
        result.accent1_shades + result.accent2_shades + result.accent3_shades
    )
    assert result.all_neutral_shades == result.neutral1_shades + result.neutral2_shades


def test_every_ladder_has_thirteen_shades():
    result = build_result(SEED)
    for family in FAMILIES:
        assert len(result.ladder(family)) == 13


def test_result_is_deterministic_and_immutable():
    first = build_result(SEED)
    assert first == build_result(SEED)
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.seed = 0


def test_palette_policy_is_pluggable(fake):
    palette = CorePalette(
        a1=HueChroma(10.0, 80.0),
        a2=HueChroma(20.0, 16.0),
        a3=HueChroma(30.0, 32.0),
        n1=HueChroma(40.0, 0.0),
        n2=HueChroma(50.0, 8.0),
    )
    seeds = []

    def policy(argb, model):
        seeds.append(argb)
        return palette

    result = build_result(SEED, fake.model, policy)
    assert seeds == [SEED]
    assert len(fake.calls) == 5 * 13
    hues = [hue for hue, _, _ in fake.calls]
    assert hues == [10.0] * 13 + [20.0] * 13 + [30.0] * 13 + [40.0] * 13 + [50.0] * 13
    # Accent1 asked for 80, the ladder caps it
    assert {chroma for _, chroma, _ in fake.calls[:13]} == {MAX_CHROMA}
    assert result.accent1_shades == synthesize_ladder(10.0, 80.0, fake.model)


def test_core_palette_families(make_fake):
    fake = make_fake({SEED: (330.0, 20.0, 40.0)})
    palette = core_palette(SEED, fake.model)
    assert palette.a1 == HueChroma(330.0, 48.0)
    assert palette.a2 == HueChroma(330.0, 16.0)
    assert palette.a3 == HueChroma(30.0, 32.0)
    assert palette.n1 == HueChroma(330.0, 4.0)
    assert palette.n2 == HueChroma(330.0, 8.0)


def test_core_palette_keeps_high_chroma(make_fake):
    fake = make_fake({SEED: (100.0, 70.0, 40.0)})
    assert core_palette(SEED, fake.model).a1 == HueChroma(100.0, 70.0)


def test_to_dict():
    data = build_result(SEED).to_dict()
    assert list(data) == ['seed', *FAMILIES]
    assert data['seed'] == '#6750a4'
    for family in FAMILIES:
        assert list(data[family]) == list(SHADE_NAMES)
        assert all(value.startswith('#') and len(value) == 7 for value in data[family].values())


def test_result_from_live_wallpaper_without_usable_colors():
    colors = wallpaper_colors.from_colors([0xFF808080])
    assert result_from_wallpaper(colors) == build_result(GOOGLE_BLUE)
