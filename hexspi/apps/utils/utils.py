#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Common utilities for hexspi command-line applications."""

import logging
import re
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click
import hexdump

from hexspi import HEXSPI_DEBUG_LOG_FILE, HEXSPI_DEBUG_LOGGING_DISABLED
from hexspi.exceptions import HexSpiError

logger = logging.getLogger(__name__)


class HexSpiAppError(HexSpiError):
    """Non-fatal error of a hexspi application.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter type for integers in binary, octal, decimal or hex notation."""

    name = "integer"

    def __init__(self, base: int = 0) -> None:
        """Initialize custom INT param class.

        :param base: requested base for the number, defaults to 0
        """
        super().__init__()
        self.base = base

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        if isinstance(value, int):
            return value
        try:
            return int(value, self.base)
        except TypeError:
            self.fail(
                "expected string for int() conversion, got "
                f"{value!r} of type {type(value).__name__}",
                param,
                ctx,
            )
        except ValueError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def _split_string(string: str, length: int) -> list:
    """Split the string into chunks of same length."""
    return [string[i : i + length] for i in range(0, len(string), length)]


def format_raw_data(data: bytes, use_hexdump: bool = False, line_length: int = 16) -> str:
    """Format bytes data into human-readable form.

    :param data: Data to format
    :param use_hexdump: Use hexdump with addresses and ASCII, defaults to False
    :param line_length: bytes per line, defaults to 16
    :return: formatted string (multilined if necessary)
    """
    if use_hexdump:
        return hexdump.hexdump(data, result="return")
    data_string = data.hex()
    parts = [_split_string(line, 2) for line in _split_string(data_string, line_length * 2)]
    result = "\n".join(" ".join(line) for line in parts)
    return result


def parse_hex_data(hex_data: str) -> bytes:
    """Parse hex string into bytes.

    Spaces and an optional '0x' prefix are ignored, e.g. '0x0102', '01 02 03'.

    :param hex_data: input hex string
    :raises HexSpiAppError: Failure to parse given input
    :return: data parsed from input
    """
    hex_data = hex_data.replace(" ", "")
    if hex_data.lower().startswith("0x"):
        hex_data = hex_data[2:]
    if not re.fullmatch(r"([0-9a-fA-F]{2})+", hex_data):
        raise HexSpiAppError(f"Incorrect hex-data: '{hex_data}' is not a valid hex string")
    return bytes.fromhex(hex_data)


def catch_hexspi_error(function: Callable) -> Callable:
    """Catch and handle HexSpiError and other exceptions.

    - HexSpiAppError: print the message and exit with its error code,
    - HexSpiError and AssertionError: print the message and exit with 2,
    - anything else: print a general error and exit with 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except HexSpiAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, HexSpiError) as hexspi_exc:
            click.echo(f"{hexspi_exc.__class__.__name__}: {hexspi_exc}", err=True)
            logger.debug(str(hexspi_exc), exc_info=True)
            if not HEXSPI_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {HEXSPI_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not HEXSPI_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {HEXSPI_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
