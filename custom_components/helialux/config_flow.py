"""Configuration flow for the HeliaLux integration."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

import voluptuous as vol
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_HOST, CONF_NAME, CONF_PORT
from homeassistant.helpers.httpx_client import get_async_client

from .const import (
    CONF_COLOR_MODE,
    CONF_FRESHNESS,
    CONF_TIMEOUT,
    DEFAULT_FRESHNESS_SECONDS,
    DEFAULT_NAME,
    DEFAULT_TIMEOUT_MS,
    DOMAIN,
)
from .device_client import HeliaLuxClient
from .exceptions import ParseError, TransportError
from .models import DEFAULT_PORT, DeviceEndpoint
from .normalizer import normalize

_LOGGER = logging.getLogger(__name__)

USER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOST): str,
        vol.Optional(CONF_PORT, default=DEFAULT_PORT): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=65535)
        ),
        vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT_MS): vol.All(
            vol.Coerce(int), vol.Range(min=100, max=10000)
        ),
        vol.Optional(CONF_COLOR_MODE, default=False): bool,
        vol.Optional(CONF_FRESHNESS, default=DEFAULT_FRESHNESS_SECONDS): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=300)
        ),
    }
)


def endpoint_from_config(data: dict[str, Any]) -> DeviceEndpoint:
    """Build the device endpoint described by config entry data."""

    return DeviceEndpoint(
        host=data[CONF_HOST],
        port=data.get(CONF_PORT, DEFAULT_PORT),
        request_timeout=timedelta(
            milliseconds=data.get(CONF_TIMEOUT, DEFAULT_TIMEOUT_MS)
        ),
    )


class HeliaLuxConfigFlow(ConfigFlow, domain=DOMAIN):
    """Collect the controller address and probe it once."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the form submitted by the user."""

        if user_input is None:
            return self.async_show_form(step_id="user", data_schema=USER_SCHEMA)

        data = dict(USER_SCHEMA(user_input))
        endpoint = endpoint_from_config(data)
        await self.async_set_unique_id(f"{endpoint.host}:{endpoint.port}")
        self._abort_if_unique_id_configured()

        errors: dict[str, str] = {}
        client = HeliaLuxClient(get_async_client(self.hass), endpoint)
        try:
            normalize(await client.query_state())
        except TransportError as err:
            _LOGGER.debug("Probe of %s failed: %s", endpoint.base_url, err)
            errors["base"] = "cannot_connect"
        except ParseError as err:
            _LOGGER.debug("Probe of %s returned garbage: %s", endpoint.base_url, err)
            errors["base"] = "invalid_response"

        if errors:
            return self.async_show_form(
                step_id="user", data_schema=USER_SCHEMA, errors=errors
            )

        return self.async_create_entry(title=data[CONF_NAME], data=data)
