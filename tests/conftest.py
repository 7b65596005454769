"""Pytest fixtures for the HeliaLux integration tests."""

from __future__ import annotations

from datetime import timedelta

import httpx
import pytest
from mock_device import SmartControlSimulator

from custom_components.helialux.controller import LightController
from custom_components.helialux.device_client import HeliaLuxClient
from custom_components.helialux.dispatcher import ManualOverrideDispatcher
from custom_components.helialux.models import DeviceEndpoint
from custom_components.helialux.resolver import StateResolver


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        """Start the clock at ``start`` seconds."""

        self.now = start

    def __call__(self) -> float:
        """Return the current reading."""

        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""

        self.now += seconds


@pytest.fixture
def device() -> SmartControlSimulator:
    """Return a simulated controller with every channel off."""

    return SmartControlSimulator()


@pytest.fixture
def clock() -> FakeClock:
    """Return a controllable clock."""

    return FakeClock()


@pytest.fixture
def endpoint() -> DeviceEndpoint:
    """Return the endpoint used by all tests."""

    return DeviceEndpoint(
        host="helialux.local", port=8888, request_timeout=timedelta(seconds=1)
    )


@pytest.fixture
def http_client(device: SmartControlSimulator) -> httpx.AsyncClient:
    """Return an httpx client routed to the simulator."""

    return httpx.AsyncClient(transport=device.transport())


@pytest.fixture
def client(http_client: httpx.AsyncClient, endpoint: DeviceEndpoint) -> HeliaLuxClient:
    """Return a device client bound to the simulator."""

    return HeliaLuxClient(http_client, endpoint)


@pytest.fixture
def resolver(client: HeliaLuxClient, clock: FakeClock) -> StateResolver:
    """Return a resolver using the fake clock."""

    return StateResolver(client, freshness_window=timedelta(seconds=5), clock=clock)


@pytest.fixture
def dispatcher(
    client: HeliaLuxClient, resolver: StateResolver
) -> ManualOverrideDispatcher:
    """Return a dispatcher sharing the resolver cache."""

    return ManualOverrideDispatcher(client, resolver)


@pytest.fixture
def controller(
    resolver: StateResolver, dispatcher: ManualOverrideDispatcher
) -> LightController:
    """Return a controller in plain brightness mode."""

    return LightController(resolver, dispatcher)


@pytest.fixture
def color_controller(
    resolver: StateResolver, dispatcher: ManualOverrideDispatcher
) -> LightController:
    """Return a controller with color control enabled."""

    return LightController(resolver, dispatcher, color_mode=True)
