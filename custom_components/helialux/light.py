"""Light platform for the HeliaLux integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.light import (
    ATTR_BRIGHTNESS,
    ATTR_HS_COLOR,
    ColorMode,
    LightEntity,
)
from homeassistant.exceptions import HomeAssistantError

from .const import DOMAIN
from .controller import LightController
from .exceptions import HeliaLuxError

_LOGGER = logging.getLogger(__name__)


class HeliaLuxLight(LightEntity):
    """A HeliaLux lamp exposed as a dimmable or HS-colored light."""

    _attr_should_poll = True
    _attr_has_entity_name = True
    _attr_name = None

    def __init__(self, controller: LightController, name: str, unique_id: str) -> None:
        """Bind the controller and derive static attributes."""

        self._controller = controller
        self._attr_unique_id = unique_id
        self._attr_device_info = {
            "identifiers": {(DOMAIN, unique_id)},
            "name": name,
            "manufacturer": "Juwel",
            "model": "HeliaLux SmartControl",
        }
        mode = ColorMode.HS if controller.color_mode else ColorMode.BRIGHTNESS
        self._attr_color_mode = mode
        self._attr_supported_color_modes = {mode}
        self._outage_logged = False

    @staticmethod
    def _percent_to_brightness(percent: int) -> int:
        """Convert a device brightness percentage to Home Assistant scale."""

        return round(percent * 255 / 100)

    @staticmethod
    def _brightness_to_percent(value: float | int) -> int:
        """Convert Home Assistant brightness to a device percentage."""

        return max(0, min(100, round(value * 100 / 255)))

    @property
    def is_on(self) -> bool:
        """Return True when any channel is lit."""

        return self._controller.state.on

    @property
    def brightness(self) -> int:
        """Return the Home Assistant brightness derived from the channels."""

        state = self._controller.state
        if self._controller.color_mode:
            percent = state.hsl[2]
        else:
            percent = max(state.channels.as_tuple())
        return self._percent_to_brightness(percent)

    @property
    def hs_color(self) -> tuple[float, float] | None:
        """Return hue and saturation of the colored channels."""

        if not self._controller.color_mode:
            return None
        hue, saturation, _ = self._controller.state.hsl
        return float(hue), float(saturation)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose the raw channel percentages."""

        return self._controller.state.channels.as_dict()

    async def async_update(self) -> None:
        """Refresh the cached state from the device."""

        try:
            await self._controller.refresh()
        except HeliaLuxError as err:
            if not self._outage_logged:
                _LOGGER.warning("Unable to refresh %s: %s", self.entity_id, err)
                self._outage_logged = True
            else:
                _LOGGER.debug("Unable to refresh %s: %s", self.entity_id, err)
            self._attr_available = False
            return
        if self._outage_logged:
            _LOGGER.info("%s is reachable again", self.entity_id)
            self._outage_logged = False
        self._attr_available = True

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn the light on, optionally with a brightness or color."""

        hue = saturation = percent = None
        if ATTR_HS_COLOR in kwargs and self._controller.color_mode:
            hue, saturation = kwargs[ATTR_HS_COLOR]
        if ATTR_BRIGHTNESS in kwargs:
            percent = self._brightness_to_percent(kwargs[ATTR_BRIGHTNESS])
        try:
            if hue is None and percent is None:
                await self._controller.set_on(True)
            else:
                await self._controller.set_color(
                    hue=hue, saturation=saturation, brightness=percent
                )
        except HeliaLuxError as err:
            raise HomeAssistantError(f"Unable to turn on {self.entity_id}: {err}") from err

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the light off."""

        try:
            await self._controller.set_on(False)
        except HeliaLuxError as err:
            raise HomeAssistantError(
                f"Unable to turn off {self.entity_id}: {err}"
            ) from err


async def async_setup_entry(hass: Any, entry: Any, async_add_entities: Any) -> None:
    """Set up the light platform for a config entry."""

    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            HeliaLuxLight(
                entry_data["controller"],
                entry.title,
                entry.unique_id or entry.entry_id,
            )
        ],
        True,
    )
