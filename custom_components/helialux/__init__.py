"""Integration entry point for the HeliaLux SmartControl custom component."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from .const import (
    CONF_COLOR_MODE,
    CONF_FRESHNESS,
    DEFAULT_FRESHNESS_WINDOW,
    DEFAULT_FRESHNESS_SECONDS,
    DOMAIN,
    PLATFORMS,
)
from .controller import LightController
from .device_client import HeliaLuxClient
from .dispatcher import ManualOverrideDispatcher
from .models import DeviceEndpoint
from .resolver import StateResolver

__all__ = [
    "DOMAIN",
    "PLATFORMS",
    "async_setup_entry",
    "async_unload_entry",
    "build_controller",
]


def build_controller(
    http_client: Any,
    endpoint: DeviceEndpoint,
    *,
    color_mode: bool = False,
    freshness_window: timedelta = DEFAULT_FRESHNESS_WINDOW,
) -> LightController:
    """Wire the client, resolver and dispatcher serving one lamp."""

    client = HeliaLuxClient(http_client, endpoint)
    resolver = StateResolver(client, freshness_window=freshness_window)
    dispatcher = ManualOverrideDispatcher(client, resolver)
    return LightController(resolver, dispatcher, color_mode=color_mode)


async def async_setup_entry(hass: Any, entry: Any) -> bool:
    """Set up a config entry for the integration."""

    # Home Assistant helpers are imported here so the core modules stay
    # importable without Home Assistant installed.
    from homeassistant.helpers.httpx_client import get_async_client

    from .config_flow import endpoint_from_config

    data = dict(entry.data)
    controller = build_controller(
        get_async_client(hass),
        endpoint_from_config(data),
        color_mode=data.get(CONF_COLOR_MODE, False),
        freshness_window=timedelta(
            seconds=data.get(CONF_FRESHNESS, DEFAULT_FRESHNESS_SECONDS)
        ),
    )
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {"controller": controller}
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: Any, entry: Any) -> bool:
    """Handle unloading of a config entry."""

    unload_success = await hass.config_entries.async_unload_platforms(
        entry, PLATFORMS
    )
    if unload_success:
        domain_data = hass.data.get(DOMAIN, {})
        domain_data.pop(entry.entry_id, None)
        if not domain_data:
            hass.data.pop(DOMAIN, None)
    return unload_success
