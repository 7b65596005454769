"""Tests for the RGB/HSL conversions."""

from __future__ import annotations

import pytest

from custom_components.helialux.color import (
    clamp_percent,
    hsl_to_rgb,
    rgb_to_hsl,
    round_half_up,
)


@pytest.mark.parametrize(
    ("rgb", "hsl"),
    [
        ((0, 0, 0), (0, 0, 0)),
        ((100, 100, 100), (0, 0, 100)),
        ((50, 50, 50), (0, 0, 50)),
        ((100, 0, 0), (0, 100, 50)),
        ((0, 100, 0), (120, 100, 50)),
        ((0, 0, 100), (240, 100, 50)),
        ((100, 100, 0), (60, 100, 50)),
        ((100, 0, 100), (300, 100, 50)),
        ((100, 50, 50), (0, 100, 75)),
        ((20, 40, 80), (220, 60, 50)),
    ],
)
def test_rgb_to_hsl_known_values(rgb, hsl) -> None:
    """Primary, secondary and gray inputs convert to their textbook values."""

    assert rgb_to_hsl(*rgb) == hsl


def test_rgb_to_hsl_negative_hue_wraps() -> None:
    """A red-dominant color leaning to blue wraps just below 360 degrees."""

    hue, saturation, _ = rgb_to_hsl(100, 0, 1)

    assert hue == 359
    assert saturation == 100


def test_rgb_to_hsl_hue_rounding_is_capped_at_360() -> None:
    """Rounding a hue of 359.7 degrees must not overflow past 360."""

    assert rgb_to_hsl(100, 0, 0.5) == (360, 100, 50)


@pytest.mark.parametrize(
    ("hsl", "rgb"),
    [
        ((0, 0, 50), (50, 50, 50)),
        ((123, 0, 80), (80, 80, 80)),
        ((0, 0, 100), (100, 100, 100)),
        ((0, 100, 50), (100, 0, 0)),
        ((360, 100, 50), (100, 0, 0)),
        ((120, 100, 50), (0, 100, 0)),
        ((240, 100, 50), (0, 0, 100)),
        ((60, 100, 50), (100, 100, 0)),
        ((0, 100, 25), (50, 0, 0)),
        ((220, 60, 50), (20, 40, 80)),
    ],
)
def test_hsl_to_rgb_known_values(hsl, rgb) -> None:
    """HSL inputs map back onto channel percentages."""

    assert hsl_to_rgb(*hsl) == rgb


def test_rgb_round_trip_known_two_unit_drift() -> None:
    """Lightness 34.5 rounds up to 35, lifting green and blue."""

    assert rgb_to_hsl(0, 65, 69) == (183, 100, 35)
    assert hsl_to_rgb(183, 100, 35) == (0, 67, 70)


@pytest.mark.parametrize("red", range(0, 101))
def test_rgb_round_trip_drifts_at_most_two_units(red) -> None:
    """Every channel triple survives RGB -> HSL -> RGB within two units."""

    for green in range(0, 101):
        for blue in range(0, 101):
            result = hsl_to_rgb(*rgb_to_hsl(red, green, blue))
            drift = max(abs(a - b) for a, b in zip(result, (red, green, blue)))
            assert drift <= 2, ((red, green, blue), result)


@pytest.mark.parametrize("lightness", range(0, 101))
def test_hsl_round_trip_keeps_lightness_within_one(lightness) -> None:
    """Lightness survives HSL -> RGB -> HSL within one percent."""

    for hue in range(0, 361, 3):
        for saturation in range(0, 101, 5):
            _, _, result = rgb_to_hsl(*hsl_to_rgb(hue, saturation, lightness))
            assert abs(result - lightness) <= 1, (hue, saturation, lightness)


def test_hsl_round_trip_exact_for_representable_color() -> None:
    """A color whose channels are whole percentages survives both directions."""

    assert rgb_to_hsl(*hsl_to_rgb(220, 60, 50)) == (220, 60, 50)


def test_rounding_helpers() -> None:
    """Halves round up and channel values are clamped to 0-100."""

    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert clamp_percent(-4) == 0
    assert clamp_percent(100.4) == 100
    assert clamp_percent(250) == 100
    assert clamp_percent(49.5) == 50
