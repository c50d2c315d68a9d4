#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, TypeVar, Union

import click

from hexspi import __version__ as hexspi_version
from hexspi.utils.config import SUPPORTED_BAUDRATES

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def hexspi_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(hexspi_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def bridge_connection_options(options: FC) -> FC:
    """Click options describing the connection to the bridge dongle.

    Provides: `port: str`, `baudrate: str`, `config: str` and `release_on_error: bool`.
    Values not given on the command line come from the configuration file, then
    from the defaults.

    :return: click decorator
    """
    options = click.option(
        "--release-on-error",
        is_flag=True,
        default=False,
        help="Toggle chip select back when a transaction fails midway.",
    )(options)
    options = click.option(
        "-c",
        "--config",
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
        help="YAML or JSON file with the bridge connection settings.",
    )(options)
    options = click.option(
        "-b",
        "--baudrate",
        type=click.Choice([str(rate) for rate in SUPPORTED_BAUDRATES]),
        help="Speed of the serial line. The default is 115200.",
    )(options)
    options = click.option(
        "-p",
        "--port",
        metavar="PORT",
        help="Serial port of the bridge dongle. The default is /dev/ttyACM0.",
    )(options)
    return options
