"""Query a HeliaLux controller and optionally drive its channels."""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import timedelta

import httpx

from custom_components.helialux import build_controller
from custom_components.helialux.exceptions import HeliaLuxError
from custom_components.helialux.models import ChannelReading, DeviceEndpoint


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("host", help="controller host name or address")
    parser.add_argument("--port", type=int, default=80)
    parser.add_argument("--timeout", type=int, default=1000, help="milliseconds")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--on", action="store_true", help="switch fully on")
    action.add_argument("--off", action="store_true", help="switch off")
    action.add_argument(
        "--channels",
        type=int,
        nargs=4,
        metavar=("WHITE", "BLUE", "GREEN", "RED"),
        help="write four channel percentages",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    """Run the probe and print the resulting state."""

    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    endpoint = DeviceEndpoint(
        host=args.host,
        port=args.port,
        request_timeout=timedelta(milliseconds=args.timeout),
    )
    async with httpx.AsyncClient() as client:
        controller = build_controller(client, endpoint, color_mode=True)
        try:
            if args.on or args.off:
                await controller.set_on(args.on)
            elif args.channels:
                await controller.set_channels(
                    ChannelReading.from_values(args.channels)
                )
            state = await controller.refresh()
        except HeliaLuxError as err:
            print(f"error: {err}")
            return 1

    hue, saturation, lightness = state.hsl
    print(f"on: {state.on}")
    for name, value in state.channels.as_dict().items():
        print(f"{name}: {value}%")
    print(f"hsl: {hue} / {saturation}% / {lightness}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
