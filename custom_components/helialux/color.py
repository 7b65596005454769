"""Conversions between channel percentages and HSL colors.

Channel values are percentages (0-100). Hue is expressed in degrees
(0-360), saturation and lightness in percent. Every conversion rounds
half-up to whole numbers, so an RGB -> HSL -> RGB round trip may drift
by up to two units per channel: a half-percent lightness rounding error
counts twice in the brightest and darkest channels.
"""

from __future__ import annotations

import math

HUE_MAX = 360
PERCENT_MAX = 100


def round_half_up(value: float) -> int:
    """Round ``value`` to the nearest integer, halves away from negative."""

    return int(math.floor(value + 0.5))


def clamp_percent(value: float) -> int:
    """Round ``value`` and clamp it into the 0-100 channel range."""

    return max(0, min(PERCENT_MAX, round_half_up(value)))


def rgb_to_hsl(red: float, green: float, blue: float) -> tuple[int, int, int]:
    """Convert red/green/blue percentages into (hue, saturation, lightness)."""

    r = red / PERCENT_MAX
    g = green / PERCENT_MAX
    b = blue / PERCENT_MAX

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        hue = 0.0
        saturation = 0.0
    else:
        if high == r:
            hue = (g - b) / delta
        elif high == g:
            hue = 2 + (b - r) / delta
        else:
            hue = 4 + (r - g) / delta
        if lightness <= 0.5:
            saturation = delta / (high + low)
        else:
            saturation = delta / (2 - high - low)

    hue *= 60
    if hue < 0:
        hue += HUE_MAX

    return (
        min(round_half_up(hue), HUE_MAX),
        clamp_percent(saturation * PERCENT_MAX),
        clamp_percent(lightness * PERCENT_MAX),
    )


def _hue_to_channel(t1: float, t2: float, t3: float) -> float:
    """Evaluate one channel of the piecewise HSL curve."""

    if t3 < 0:
        t3 += 1
    if t3 > 1:
        t3 -= 1

    if t3 * 6 < 1:
        return t1 + (t2 - t1) * 6 * t3
    if t3 * 2 < 1:
        return t2
    if t3 * 3 < 2:
        return t1 + (t2 - t1) * (2 / 3 - t3) * 6
    return t1


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """Convert (hue, saturation, lightness) into red/green/blue percentages."""

    h = (hue % HUE_MAX) / HUE_MAX
    s = max(0.0, min(1.0, saturation / PERCENT_MAX))
    l = max(0.0, min(1.0, lightness / PERCENT_MAX))  # noqa: E741

    if s == 0:
        gray = clamp_percent(l * PERCENT_MAX)
        return gray, gray, gray

    t2 = l * (1 + s) if l < 0.5 else l + s - l * s
    t1 = 2 * l - t2

    channels = []
    for index in range(3):
        t3 = h + 1 / 3 - index / 3
        value = _hue_to_channel(t1, t2, t3)
        # The curve yields a 0-255 byte on the device side; report percent.
        byte_value = value * 255
        channels.append(clamp_percent(byte_value * PERCENT_MAX / 255))
    return channels[0], channels[1], channels[2]
