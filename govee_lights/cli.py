"""Command-line client for Govee lights on the legacy and OpenAPI backends."""

from __future__ import annotations

import argparse
import asyncio
import logging
import math
import sys
from collections.abc import Awaitable, Callable, Sequence
from typing import NoReturn

from rich.console import Console
from rich.table import Table

from .api import GoveeApiClient
from .config import load_log_level, load_settings
from .const import DEFAULT_DEVICE_INDEX, PROG_NAME
from .controller import (
    set_brightness,
    set_color,
    set_color_temperature,
    turn_off,
    turn_on,
)
from .directory import list_all_devices
from .models.color import round_half_up
from .models.device import Device
from .protocols import IApiClient
from .sunrise import SunriseConfig, SunriseStep, run_sunrise, step_count

_LOGGER = logging.getLogger(__name__)

EXAMPLES = f"""\
examples:
  {PROG_NAME} list
  {PROG_NAME} on 0
  {PROG_NAME} brightness 35 0
  {PROG_NAME} color 255 120 10 0
  {PROG_NAME} temp 4000 0
  {PROG_NAME} sunrise 0
"""

Handler = Callable[[IApiClient, Device, argparse.Namespace, Console], Awaitable[int]]


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _parse_number(text: str | None) -> int | float | None:
    """Parse a finite number, keeping integral values as int."""
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def _parse_index(text: str | None) -> int | None:
    if text is None:
        return DEFAULT_DEVICE_INDEX
    value = _parse_number(text)
    if not isinstance(value, int) or value < 0:
        return None
    return value


def _add_index_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "index",
        nargs="?",
        help=f"Device position in `{PROG_NAME} list` (default {DEFAULT_DEVICE_INDEX})",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG_NAME,
        description=(
            "Control Govee lights through the legacy and OpenAPI cloud backends. "
            "Reads GOVEE_API_KEY from the environment or a .env file."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging (overrides GOVEE_LOG_LEVEL)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file (default: nearest .env found from the working directory)",
    )

    subparsers = parser.add_subparsers(
        dest="command", required=False, parser_class=_ArgumentParser
    )

    subparsers.add_parser("help", help="Show this help")

    list_cmd = subparsers.add_parser("list", help="List devices from both backends")
    list_cmd.set_defaults(func=None)

    on_cmd = subparsers.add_parser("on", help="Turn a device on")
    _add_index_arg(on_cmd)
    on_cmd.set_defaults(func=_cmd_on)

    off_cmd = subparsers.add_parser("off", help="Turn a device off")
    _add_index_arg(off_cmd)
    off_cmd.set_defaults(func=_cmd_off)

    brightness = subparsers.add_parser(
        "brightness", help="Set brightness (1-100, out-of-range values are clamped)"
    )
    brightness.add_argument("value", help="Brightness 1-100")
    _add_index_arg(brightness)
    brightness.set_defaults(func=_cmd_brightness)

    color = subparsers.add_parser("color", help="Set RGB color")
    color.add_argument("r", help="Red 0-255")
    color.add_argument("g", help="Green 0-255")
    color.add_argument("b", help="Blue 0-255")
    _add_index_arg(color)
    color.set_defaults(func=_cmd_color)

    temp = subparsers.add_parser(
        "temp", help="Set color temperature in Kelvin (clamped to the device range)"
    )
    temp.add_argument("kelvin", help="Color temperature in Kelvin")
    _add_index_arg(temp)
    temp.set_defaults(func=_cmd_temp)

    sunrise = subparsers.add_parser(
        "sunrise", help="Run a 5 minute sunrise animation (amber to warm daylight)"
    )
    _add_index_arg(sunrise)
    sunrise.set_defaults(func=_cmd_sunrise)

    return parser


def _print_devices(console: Console, devices: Sequence[Device]) -> None:
    if not devices:
        console.print("No devices found.")
        return

    table = Table(title="Found devices")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Protocol")
    table.add_column("Device")
    table.add_column("Model/SKU")
    table.add_column("RGB")
    table.add_column("Color temp")

    for index, device in enumerate(devices):
        minimum, maximum = device.color_temp_range()
        table.add_row(
            str(index),
            device.display_name,
            device.protocol,
            device.device_id or "",
            device.model_or_sku or "",
            "yes" if device.supports_rgb else "no",
            f"{minimum}-{maximum}K" if device.supports_color_temp else "no",
        )

    console.print(table)


async def _cmd_on(
    client: IApiClient, device: Device, args: argparse.Namespace, console: Console
) -> int:
    await turn_on(client, device)
    console.print("OK: on")
    return 0


async def _cmd_off(
    client: IApiClient, device: Device, args: argparse.Namespace, console: Console
) -> int:
    await turn_off(client, device)
    console.print("OK: off")
    return 0


async def _cmd_brightness(
    client: IApiClient, device: Device, args: argparse.Namespace, console: Console
) -> int:
    value = _parse_number(args.value)
    if value is None:
        console.print(f"Invalid brightness {args.value!r}: expected a number 1-100.")
        return 0
    await set_brightness(client, device, value)
    console.print(f"OK: brightness {value}")
    return 0


async def _cmd_color(
    client: IApiClient, device: Device, args: argparse.Namespace, console: Console
) -> int:
    channels = [_parse_number(text) for text in (args.r, args.g, args.b)]
    if any(channel is None for channel in channels):
        console.print("Invalid color: expected three numbers 0-255 (r g b).")
        return 0
    r, g, b = channels
    await set_color(client, device, r, g, b)
    console.print(f"OK: color rgb({r},{g},{b})")
    return 0


async def _cmd_temp(
    client: IApiClient, device: Device, args: argparse.Namespace, console: Console
) -> int:
    kelvin = _parse_number(args.kelvin)
    if kelvin is None:
        console.print(f"Invalid color temperature {args.kelvin!r}: expected Kelvin.")
        return 0
    if not device.supports_color_temp:
        _LOGGER.warning(
            "%s does not list color temperature support", device.display_name
        )
    await set_color_temperature(client, device, kelvin)
    console.print(f"OK: color temperature {kelvin}K")
    return 0


async def _cmd_sunrise(
    client: IApiClient, device: Device, args: argparse.Namespace, console: Console
) -> int:
    config = SunriseConfig()
    console.print(
        f"Starting sunrise on {device.display_name} | "
        f"model/sku={device.model_or_sku} | device={device.device_id}"
    )
    console.print(
        f"Duration: {config.duration / 60:g} minutes | Steps: {step_count(config)} | "
        f"Step interval: {config.step_interval:g}s"
    )

    def _report(step: SunriseStep) -> None:
        console.print(
            f"Sunrise {step.percent}% | ~{round_half_up(step.kelvin)}K | "
            f"{round_half_up(step.brightness)}%"
        )

    await run_sunrise(client, device, config, on_step=_report)
    console.print("Sunrise complete.")
    return 0


async def _run(
    client: IApiClient, args: argparse.Namespace, console: Console
) -> int:
    devices = await list_all_devices(client)

    if args.command == "list":
        _print_devices(console, devices)
        return 0

    if not devices:
        console.print(f"No devices returned. Run: {PROG_NAME} list")
        return 0

    index = _parse_index(args.index)
    if index is None:
        console.print(f"Invalid device index. Run: {PROG_NAME} list")
        return 0
    if index >= len(devices):
        console.print(f"Device index {index} not found. Run: {PROG_NAME} list")
        return 0

    handler: Handler = args.func
    return await handler(client, devices[index], args, console)


async def _async_main(args: argparse.Namespace, console: Console) -> int:
    settings = load_settings(args.env_file)
    async with GoveeApiClient(settings.api_key) as client:
        return await _run(client, args, console)


def _configure_logging(args: argparse.Namespace) -> None:
    level = "DEBUG" if args.verbose else load_log_level(args.env_file)
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as err:
        print(f"{PROG_NAME}: {err}")
        parser.print_usage()
        print(f"Run: {PROG_NAME} help")
        return 0

    if args.command in (None, "help"):
        parser.print_help()
        return 0

    console = Console(highlight=False)

    try:
        _configure_logging(args)
        return asyncio.run(_async_main(args, console))
    except Exception as err:  # surfaced to the user, exit 1
        _LOGGER.debug("Command failed", exc_info=True)
        print(f"Error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
