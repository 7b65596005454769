"""HTTP client for the HeliaLux SmartControl web interface."""

from __future__ import annotations

import json
import logging
from datetime import timedelta
from typing import Any

import httpx

from .const import (
    ACTION_MANUAL_OVERRIDE,
    ACTION_SET_COLOR,
    COLOR_PATH,
    MANUAL_OVERRIDE_DURATION,
    OVERRIDE_PATH,
    STATUS_PATH,
    USER_AGENT,
)
from .exceptions import ParseError, TransportError
from .models import ChannelReading, DeviceEndpoint

_LOGGER = logging.getLogger(__name__)

_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "*/*",
    "Content-type": "application/x-www-form-urlencoded",
}
_MIN_OVERRIDE = timedelta(minutes=1)
_MAX_OVERRIDE = timedelta(hours=23, minutes=59)

Payload = dict[str, Any] | str


def format_override_time(duration: timedelta) -> str:
    """Render ``duration`` as the ``HH:MM`` string the controller expects."""

    bounded = max(_MIN_OVERRIDE, min(_MAX_OVERRIDE, duration))
    minutes = int(bounded.total_seconds() // 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class HeliaLuxClient:
    """Issue single, unretried requests against one SmartControl unit."""

    def __init__(self, client: httpx.AsyncClient, endpoint: DeviceEndpoint) -> None:
        """Bind the shared HTTP client to the device endpoint."""

        self._client = client
        self._endpoint = endpoint

    @property
    def endpoint(self) -> DeviceEndpoint:
        """Return the endpoint this client talks to."""

        return self._endpoint

    async def query_state(self) -> Payload:
        """Fetch the raw status payload (JSON object or ``key=value;`` text)."""

        response = await self._request("GET", STATUS_PATH)
        return self._decode(response)

    async def enable_manual_override(
        self, duration: timedelta = MANUAL_OVERRIDE_DURATION
    ) -> Payload:
        """Suspend the programmed profile so direct channel writes stick."""

        form = {
            "action": ACTION_MANUAL_OVERRIDE,
            "cswi": "true",
            "ctime": format_override_time(duration),
        }
        response = await self._request("POST", OVERRIDE_PATH, data=form)
        return self._decode(response)

    async def set_channels(self, channels: ChannelReading) -> Payload:
        """Push the four channel values to the color endpoint."""

        form = {"action": ACTION_SET_COLOR}
        for index, value in enumerate(channels.as_tuple(), start=1):
            form[f"ch{index}"] = str(value)
        response = await self._request("POST", COLOR_PATH, data=form)
        return self._decode(response)

    async def _request(
        self, method: str, path: str, *, data: dict[str, str] | None = None
    ) -> httpx.Response:
        url = f"{self._endpoint.base_url}{path}"
        _LOGGER.debug("%s %s %s", method, url, data or "")
        try:
            response = await self._client.request(
                method,
                url,
                data=data,
                headers=_HEADERS,
                timeout=self._endpoint.timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            _LOGGER.debug("%s %s returned %s", method, url, err.response.status_code)
            raise TransportError(
                f"{method} {path} returned HTTP {err.response.status_code}",
                status_code=err.response.status_code,
            ) from err
        except httpx.HTTPError as err:
            _LOGGER.debug("%s %s failed: %r", method, url, err)
            raise TransportError(f"{method} {path} failed: {err!r}") from err
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Payload:
        text = response.text.strip()
        if not text:
            raise ParseError(f"Empty response from {response.request.url.path}")
        try:
            payload = json.loads(text)
        except ValueError:
            return text
        if isinstance(payload, dict | str):
            return payload
        raise ParseError(
            f"Unexpected {type(payload).__name__} from {response.request.url.path}"
        )
