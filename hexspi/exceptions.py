#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""hexspi exception classes.

This module defines the base of the exception hierarchy used across the
package. Every error raised by hexspi derives from :class:`HexSpiError`.
"""

from typing import Optional


class HexSpiError(Exception):
    """hexspi Base Exception.

    Base class of all hexspi errors, providing consistent error formatting.

    :cvar fmt: Default error message format template.
    """

    fmt = "hexspi: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base hexspi Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message, "Unknown Error" without description.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class HexSpiValueError(HexSpiError, ValueError):
    """hexspi standard value error."""


class HexSpiKeyError(HexSpiError, KeyError):
    """hexspi Key Error exception for missing or invalid configuration keys."""


class HexSpiConnectionError(HexSpiError, ConnectionError):
    """hexspi Connection Error exception class.

    Raised when communication with the bridge fails, e.g. the serial port
    cannot be opened or an I/O call on it fails.
    """


class HexSpiTimeoutError(HexSpiError, TimeoutError):
    """hexspi timeout exception for operations that exceed time limits."""
