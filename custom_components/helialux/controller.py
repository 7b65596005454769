"""Characteristic-level get/set operations for one HeliaLux lamp."""

from __future__ import annotations

import logging

from .color import HUE_MAX, PERCENT_MAX, clamp_percent, hsl_to_rgb
from .dispatcher import ManualOverrideDispatcher
from .models import ChannelReading, LightState
from .resolver import StateResolver

_LOGGER = logging.getLogger(__name__)

FULL_POWER = ChannelReading.uniform(PERCENT_MAX)
OFF = ChannelReading()
DEFAULT_COLOR_LIGHTNESS = 50


class LightController:
    """Map power, brightness and color requests onto channel writes.

    Reads go through the resolver cache. Writes resolve the current
    channels first so unchanged axes keep their values, then hand the new
    channel set to the dispatcher.
    """

    def __init__(
        self,
        resolver: StateResolver,
        dispatcher: ManualOverrideDispatcher,
        *,
        color_mode: bool = False,
    ) -> None:
        """Bind the resolver and dispatcher serving a single lamp."""

        self._resolver = resolver
        self._dispatcher = dispatcher
        self.color_mode = color_mode

    @property
    def state(self) -> LightState:
        """Return the cached snapshot without touching the device."""

        return self._resolver.state

    async def refresh(self) -> LightState:
        """Query the device regardless of cache freshness."""

        return await self._resolver.resolve(force=True)

    async def set_channels(self, channels: ChannelReading) -> LightState:
        """Write an explicit channel set."""

        return await self._dispatcher.apply_channels(channels)

    async def is_on(self) -> bool:
        """Return True when any channel is lit."""

        state = await self._resolver.resolve()
        return state.on

    async def set_on(self, value: bool) -> LightState:
        """Switch the lamp fully on or off.

        Turning on drives every channel to 100 % for the override period,
        after which the controller resumes its programmed profile.
        """

        state = await self._resolver.resolve()
        if state.on == value:
            _LOGGER.debug("Lamp already %s", "on" if value else "off")
            return state
        return await self._dispatcher.apply_channels(FULL_POWER if value else OFF)

    async def brightness(self) -> int:
        """Return the brightness in percent."""

        state = await self._resolver.resolve()
        if self.color_mode:
            return state.hsl[2]
        return max(state.channels.as_tuple())

    async def set_brightness(self, percent: float) -> LightState:
        """Set the brightness in percent."""

        value = clamp_percent(percent)
        state = await self._resolver.resolve()
        if not self.color_mode:
            return await self._dispatcher.apply_channels(ChannelReading.uniform(value))
        hue, saturation, _ = state.hsl
        return await self._apply_hsl(state, hue, saturation, value)

    async def hue(self) -> int:
        """Return the hue of the colored channels in degrees."""

        self._require_color_mode()
        state = await self._resolver.resolve()
        return state.hsl[0]

    async def set_hue(self, hue: float) -> LightState:
        """Change the hue while keeping saturation and lightness."""

        self._require_color_mode()
        state, (_, saturation, lightness) = await self._resolve_color()
        return await self._apply_hsl(state, hue % HUE_MAX, saturation, lightness)

    async def saturation(self) -> int:
        """Return the saturation of the colored channels in percent."""

        self._require_color_mode()
        state = await self._resolver.resolve()
        return state.hsl[1]

    async def set_saturation(self, saturation: float) -> LightState:
        """Change the saturation while keeping hue and lightness."""

        self._require_color_mode()
        state, (hue, _, lightness) = await self._resolve_color()
        return await self._apply_hsl(state, hue, clamp_percent(saturation), lightness)

    async def set_color(
        self,
        *,
        hue: float | None = None,
        saturation: float | None = None,
        brightness: float | None = None,
    ) -> LightState:
        """Change any combination of hue, saturation and brightness in one write."""

        if not self.color_mode:
            if hue is not None or saturation is not None:
                self._require_color_mode()
            if brightness is None:
                return await self.set_on(True)
            return await self.set_brightness(brightness)

        state, (current_hue, current_saturation, current_lightness) = (
            await self._resolve_color()
        )
        return await self._apply_hsl(
            state,
            current_hue if hue is None else hue % HUE_MAX,
            current_saturation if saturation is None else clamp_percent(saturation),
            current_lightness if brightness is None else clamp_percent(brightness),
        )

    async def _resolve_color(self) -> tuple[LightState, tuple[int, int, int]]:
        """Return the state and its HSL, lifting a dark lamp to a visible lightness."""

        state = await self._resolver.resolve()
        hue, saturation, lightness = state.hsl
        if lightness == 0:
            lightness = DEFAULT_COLOR_LIGHTNESS
        return state, (hue, saturation, lightness)

    async def _apply_hsl(
        self, state: LightState, hue: float, saturation: float, lightness: float
    ) -> LightState:
        red, green, blue = hsl_to_rgb(hue, saturation, lightness)
        channels = state.channels.with_rgb(red, green, blue)
        _LOGGER.debug(
            "HSL %s/%s/%s -> RGB %s/%s/%s", hue, saturation, lightness, red, green, blue
        )
        return await self._dispatcher.apply_channels(channels)

    def _require_color_mode(self) -> None:
        if not self.color_mode:
            raise RuntimeError("Color control requires color mode")
