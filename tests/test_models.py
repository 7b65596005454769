"""Tests for the shared data structures."""

from __future__ import annotations

from datetime import timedelta

import pytest

from custom_components.helialux.exceptions import ParseError
from custom_components.helialux.models import ChannelReading, DeviceEndpoint, LightState


@pytest.mark.parametrize(
    ("channels", "expected"),
    [
        ((0, 0, 0, 0), False),
        ((1, 0, 0, 0), True),
        ((0, 1, 0, 0), True),
        ((0, 0, 1, 0), True),
        ((0, 0, 0, 1), True),
        ((100, 0, 0, 0), True),
        ((0, 0, 0, 100), True),
        ((100, 100, 100, 100), True),
    ],
)
def test_on_is_derived_from_channel_sum(channels, expected) -> None:
    """The lamp is on exactly when the channel sum is positive."""

    state = LightState(channels=ChannelReading.from_values(channels))

    assert state.on is expected
    assert state.on == (sum(channels) > 0)


def test_initial_state_is_off_and_stale() -> None:
    """A fresh state has every channel off and no refresh timestamp."""

    state = LightState.initial()

    assert state.channels.as_tuple() == (0, 0, 0, 0)
    assert state.last_refreshed_at == 0
    assert state.on is False


def test_channel_values_are_clamped_on_construction() -> None:
    """Out-of-range channel values are pulled into 0-100."""

    reading = ChannelReading(white=-10, blue=101, green=50, red=250)

    assert reading.as_tuple() == (0, 100, 50, 100)


def test_from_values_rejects_wrong_length_and_booleans() -> None:
    """Only four numeric values form a reading."""

    with pytest.raises(ParseError):
        ChannelReading.from_values([1, 2, 3])
    with pytest.raises(ParseError):
        ChannelReading.from_values([True, 0, 0, 0])


def test_rgb_helpers_and_hsl_view() -> None:
    """Colored channels are exposed in RGB order and as an HSL view."""

    reading = ChannelReading(white=70, blue=0, green=0, red=100)

    assert reading.rgb == (100, 0, 0)
    assert reading.with_rgb(0, 100, 0).as_dict() == {
        "white": 70,
        "blue": 0,
        "green": 100,
        "red": 0,
    }
    assert LightState(channels=reading).hsl == (0, 100, 50)


def test_endpoint_urls_and_timeout() -> None:
    """The endpoint renders its base URL and timeout in seconds."""

    endpoint = DeviceEndpoint("10.0.0.5", 8080, timedelta(milliseconds=1500))

    assert endpoint.base_url == "http://10.0.0.5:8080"
    assert endpoint.timeout_seconds == pytest.approx(1.5)
    assert DeviceEndpoint("lamp").base_url == "http://lamp:80"
