"""Data structures shared by the HeliaLux core modules."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import timedelta
from numbers import Real
from typing import Any

from .color import clamp_percent, rgb_to_hsl
from .exceptions import ParseError

CHANNEL_NAMES: tuple[str, ...] = ("white", "blue", "green", "red")
DEFAULT_PORT = 80
DEFAULT_REQUEST_TIMEOUT = timedelta(milliseconds=1000)


@dataclass(frozen=True, slots=True)
class DeviceEndpoint:
    """Network location of a single SmartControl unit."""

    host: str
    port: int = DEFAULT_PORT
    request_timeout: timedelta = DEFAULT_REQUEST_TIMEOUT

    @property
    def base_url(self) -> str:
        """Return the URL prefix used for every device request."""

        return f"http://{self.host}:{self.port}"

    @property
    def timeout_seconds(self) -> float:
        """Return the request timeout as seconds for httpx."""

        return self.request_timeout.total_seconds()


def _coerce_channel(value: Any) -> int:
    """Convert a raw channel value into a clamped percentage."""

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError as exc:
            raise ParseError(f"Channel value {value!r} is not numeric") from exc
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParseError(f"Channel value {value!r} is not numeric")
    if not math.isfinite(value):
        raise ParseError(f"Channel value {value!r} is not finite")
    return clamp_percent(float(value))


@dataclass(frozen=True, slots=True)
class ChannelReading:
    """Intensity of the four physical channels, in percent."""

    white: int = 0
    blue: int = 0
    green: int = 0
    red: int = 0

    def __post_init__(self) -> None:
        """Clamp every channel into the 0-100 range."""

        for name in CHANNEL_NAMES:
            object.__setattr__(self, name, clamp_percent(getattr(self, name)))

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> ChannelReading:
        """Build a reading from exactly four values in white/blue/green/red order."""

        items = list(values)
        if len(items) != len(CHANNEL_NAMES):
            raise ParseError(
                f"Expected {len(CHANNEL_NAMES)} channel values, got {len(items)}"
            )
        white, blue, green, red = (_coerce_channel(item) for item in items)
        return cls(white=white, blue=blue, green=green, red=red)

    @classmethod
    def uniform(cls, percent: int) -> ChannelReading:
        """Return a reading with every channel set to ``percent``."""

        return cls(white=percent, blue=percent, green=percent, red=percent)

    @property
    def total(self) -> int:
        """Return the sum of all four channels."""

        return self.white + self.blue + self.green + self.red

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the colored channels in red/green/blue order."""

        return self.red, self.green, self.blue

    def with_rgb(self, red: int, green: int, blue: int) -> ChannelReading:
        """Return a copy with the colored channels replaced."""

        return replace(self, red=red, green=green, blue=blue)

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return the channels in device order (white, blue, green, red)."""

        return self.white, self.blue, self.green, self.red

    def as_dict(self) -> dict[str, int]:
        """Return the channels keyed by name."""

        return dict(zip(CHANNEL_NAMES, self.as_tuple()))


@dataclass(frozen=True, slots=True)
class LightState:
    """Cached view of the lamp; replaced as a whole, never mutated in place."""

    channels: ChannelReading = field(default_factory=ChannelReading)
    last_refreshed_at: float = 0.0

    @classmethod
    def initial(cls) -> LightState:
        """Return the all-off, immediately stale state used at startup."""

        return cls()

    @property
    def on(self) -> bool:
        """Return True when any channel is lit."""

        return self.channels.total > 0

    @property
    def hsl(self) -> tuple[int, int, int]:
        """Return the colored channels as (hue, saturation, lightness)."""

        return rgb_to_hsl(*self.channels.rgb)
