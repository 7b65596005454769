"""Cache-aware resolution of the lamp state."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, Protocol

from .const import DEFAULT_FRESHNESS_WINDOW
from .exceptions import HeliaLuxError
from .models import ChannelReading, LightState
from .normalizer import normalize

_LOGGER = logging.getLogger(__name__)

STALE = 0.0


class StatusSource(Protocol):
    """Anything able to fetch a raw status payload."""

    async def query_state(self) -> Any:
        """Return the raw status payload."""


class StateResolver:
    """Own the cached light state and refresh it from the device on demand.

    At most one status query is outstanding at a time. Callers arriving
    while a query is in flight, or while the cache is still fresh, receive
    the cached snapshot without any I/O.
    """

    def __init__(
        self,
        client: StatusSource,
        *,
        freshness_window: timedelta = DEFAULT_FRESHNESS_WINDOW,
        normalizer: Callable[[Any], ChannelReading] = normalize,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Start with an all-off state that is already stale."""

        self._client = client
        self._normalize = normalizer
        self._window = freshness_window.total_seconds()
        self._clock = clock
        self._state = LightState.initial()
        self._refresh_lock = asyncio.Lock()
        self._generation = 0

    @property
    def state(self) -> LightState:
        """Return the current cached snapshot."""

        return self._state

    @property
    def refresh_in_flight(self) -> bool:
        """Return True while a status query is outstanding."""

        return self._refresh_lock.locked()

    @property
    def is_fresh(self) -> bool:
        """Return True when the cache is younger than the freshness window."""

        refreshed = self._state.last_refreshed_at
        if refreshed == STALE:
            return False
        return self._clock() - refreshed < self._window

    def invalidate(self) -> None:
        """Force the next :meth:`resolve` to query the device."""

        self._state = LightState(channels=self._state.channels, last_refreshed_at=STALE)

    def commit(self, channels: ChannelReading, *, fresh: bool = False) -> LightState:
        """Replace all four channels in one step and return the new snapshot.

        A commit supersedes any status query still in flight; that query's
        answer predates it and is not stored.
        """

        self._generation += 1
        return self._store(channels, fresh=fresh)

    def _store(self, channels: ChannelReading, *, fresh: bool) -> LightState:
        refreshed = self._clock() if fresh else STALE
        self._state = LightState(channels=channels, last_refreshed_at=refreshed)
        return self._state

    async def resolve(self, *, force: bool = False) -> LightState:
        """Return the lamp state, querying the device when the cache is stale."""

        # locked() and the acquire below run without yielding to the loop,
        # so no second query can start in between.
        if self._refresh_lock.locked():
            _LOGGER.debug("Refresh in flight; serving cached state")
            return self._state
        if not force and self.is_fresh:
            return self._state

        async with self._refresh_lock:
            generation = self._generation
            try:
                payload = await self._client.query_state()
                channels = self._normalize(payload)
            except HeliaLuxError as err:
                _LOGGER.debug("State refresh failed: %s", err)
                if generation == self._generation:
                    self._store(ChannelReading(), fresh=False)
                else:
                    self.invalidate()
                raise
            if generation != self._generation:
                _LOGGER.debug("Discarding status %s superseded by a write", channels)
                return self._state
            state = self._store(channels, fresh=True)
            _LOGGER.debug("Refreshed state: %s", channels)
            return state
