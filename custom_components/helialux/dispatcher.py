"""Two-step write protocol: manual override, then channel values."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from enum import Enum
from typing import Any, Protocol

from .const import MANUAL_OVERRIDE_DURATION
from .exceptions import CommunicationError, HeliaLuxError
from .models import ChannelReading, LightState
from .resolver import StateResolver

_LOGGER = logging.getLogger(__name__)


class WriteStage(Enum):
    """Progress of a single channel write."""

    IDLE = "idle"
    OVERRIDE_REQUESTED = "override_requested"
    OVERRIDE_CONFIRMED = "override_confirmed"
    CHANNELS_REQUESTED = "channels_requested"
    APPLIED = "applied"
    FAILED = "failed"


class ChannelWriter(Protocol):
    """Device operations needed to apply a channel set."""

    async def enable_manual_override(self, duration: timedelta) -> Any:
        """Suspend the programmed lighting profile."""

    async def set_channels(self, channels: ChannelReading) -> Any:
        """Push the four channel values."""


class ManualOverrideDispatcher:
    """Apply channel values and keep the resolver cache in step."""

    def __init__(
        self,
        client: ChannelWriter,
        resolver: StateResolver,
        *,
        override_duration: timedelta = MANUAL_OVERRIDE_DURATION,
    ) -> None:
        """Bind the device client and the resolver whose cache is updated."""

        self._client = client
        self._resolver = resolver
        self._override_duration = override_duration
        self._write_lock = asyncio.Lock()
        self.last_stage = WriteStage.IDLE

    async def apply_channels(self, channels: ChannelReading) -> LightState:
        """Write ``channels`` to the lamp.

        The cache is only touched once both requests succeed; it then holds
        the written values but is marked stale so the next read confirms
        them with the device.
        """

        async with self._write_lock:
            self.last_stage = WriteStage.OVERRIDE_REQUESTED
            try:
                await self._client.enable_manual_override(self._override_duration)
            except HeliaLuxError as err:
                raise self._fail("Unable to enable manual override", err) from err
            self.last_stage = WriteStage.OVERRIDE_CONFIRMED

            self.last_stage = WriteStage.CHANNELS_REQUESTED
            try:
                await self._client.set_channels(channels)
            except HeliaLuxError as err:
                raise self._fail("Unable to set channel values", err) from err

            self.last_stage = WriteStage.APPLIED
            _LOGGER.debug("Applied channels %s", channels)
            return self._resolver.commit(channels)

    def _fail(self, message: str, err: HeliaLuxError) -> CommunicationError:
        stage = self.last_stage
        self.last_stage = WriteStage.FAILED
        _LOGGER.error("%s: %s", message, err)
        return CommunicationError(f"{message}: {err}", stage=stage)
