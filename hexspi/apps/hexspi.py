#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Console script for the hex-encoded SPI-over-serial bridge."""

import logging
import sys
from typing import Optional

import click

from hexspi.apps.utils import hexspi_logger
from hexspi.apps.utils.common_cli_options import (
    bridge_connection_options,
    hexspi_apps_common_options,
)
from hexspi.apps.utils.utils import (
    INT,
    HexSpiAppError,
    catch_hexspi_error,
    format_raw_data,
    parse_hex_data,
)
from hexspi.bridge import SerialLink, SerialSpiBridge
from hexspi.utils.config import BridgeSettings, Config

logger = logging.getLogger(__name__)


def get_settings(
    port: Optional[str],
    baudrate: Optional[str],
    config: Optional[str],
    release_on_error: bool,
) -> BridgeSettings:
    """Merge the connection settings from the configuration file and the command line.

    Options given on the command line take precedence over the configuration file.

    :param port: Serial port from the command line.
    :param baudrate: Baud rate from the command line.
    :param config: Path to the configuration file.
    :param release_on_error: Release flag from the command line.
    :return: Connection settings.
    """
    settings = BridgeSettings.load(Config.create_from_file(config)) if config else BridgeSettings()
    if port:
        settings.port = port
    if baudrate:
        settings.baudrate = int(baudrate)
    if release_on_error:
        settings.release_on_error = True
    logger.debug(f"Bridge settings: {settings}")
    return settings


def open_bridge(ctx: click.Context) -> SerialSpiBridge:
    """Open the bridge described by the settings of the command group."""
    settings: BridgeSettings = ctx.obj["settings"]
    return SerialSpiBridge.from_port(
        settings.port, settings.baudrate, release_on_error=settings.release_on_error
    )


@click.group(name="hexspi", no_args_is_help=True)
@bridge_connection_options
@hexspi_apps_common_options
@click.pass_context
def main(
    ctx: click.Context,
    port: Optional[str],
    baudrate: Optional[str],
    config: Optional[str],
    release_on_error: bool,
    log_level: int,
) -> int:
    """Utility driving an SPI peripheral through a hex-encoded serial bridge."""
    log_level = log_level or logging.WARNING
    hexspi_logger.install(level=log_level)
    ctx.obj = {"settings": get_settings(port, baudrate, config, release_on_error)}
    return 0


@main.command()
def scan() -> None:
    """List the serial ports available on this host."""
    ports = SerialLink.scan()
    if not ports:
        click.echo("No serial port found")
    for port in ports:
        click.echo(port)


@main.command(name="cs-toggle")
@click.pass_context
def cs_toggle(ctx: click.Context) -> None:
    """Toggle the chip-select line once.

    Useful to bring the line back to idle after a transaction was aborted.
    """
    with open_bridge(ctx) as bridge:
        bridge.chip_select.toggle()
    click.echo("Chip select toggled")


@main.command(no_args_is_help=True)
@click.argument("hex_data", metavar="HEXDATA")
@click.option("-x", "--hexdump", "use_hexdump", is_flag=True, help="Print the response as hexdump.")
@click.pass_context
def transfer(ctx: click.Context, hex_data: str, use_hexdump: bool) -> None:
    """Send data in one transaction and print the data clocked in.

    \b
    HEXDATA     - data to send, e.g. "0102" or "01 02"; longer payloads are sent in several frames
    """
    data = parse_hex_data(hex_data)
    with open_bridge(ctx) as bridge:
        response = bridge.exchange(data)
    click.echo(format_raw_data(response, use_hexdump=use_hexdump))


@main.command()
@click.option("-s", "--size", type=INT(), default=16, show_default=True, help="Payload size.")
@click.option("--value", type=INT(), default=0x06, show_default=True, help="Byte to fill the payload.")
@click.pass_context
def ping(ctx: click.Context, size: int, value: int) -> None:
    """Send a filled payload and report how much of it came back.

    With MISO wired to MOSI the payload comes back unchanged.
    """
    if size <= 0:
        raise HexSpiAppError(f"Size must be positive, got {size}")
    if not 0 <= value <= 0xFF:
        raise HexSpiAppError(f"Value must fit into one byte, got {value:#x}")
    data = bytes([value]) * size
    with open_bridge(ctx) as bridge:
        response = bridge.exchange(data)
    matched = sum(1 for sent, received in zip(data, response) if sent == received)
    click.echo(f"Sent {size} bytes, {matched} bytes echoed back unchanged")
    if matched != size:
        raise HexSpiAppError(error_code=1)


@catch_hexspi_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
