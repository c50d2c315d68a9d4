#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""hexspi - SPI over a hex-encoded serial bridge.

The package lets a host drive an SPI peripheral (typically a secure element)
sitting behind a USB-to-UART dongle. Every SPI transfer is carried as an ASCII
frame of uppercase hex digits and every transaction is bracketed by a
chip-select command understood by the bridge firmware.

MULTIPLE INTERFACES:
    - Python library exposing a synchronous SPI device
    - `hexspi` command line tool for quick checks of the bridge
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_hexspi_version() -> Version:
    """Get hexspi version information.

    :return: Parsed version object.
    """
    from .__version__ import __version__ as hexspi_version

    return parse(hexspi_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_hexspi_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)
__release__ = "beta"


# The hexspi behavior settings
HEXSPI_VERSION_BASE = version.base_version
HEXSPI_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="hexspi",
    version=HEXSPI_VERSION_BASE,
)

HEXSPI_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("HEXSPI_DEBUG_LOGGING_DISABLED"))
HEXSPI_DEBUG_LOG_FILE = os.environ.get(
    "HEXSPI_DEBUG_LOG_FILE", os.path.join(HEXSPI_PLATFORM_DIRS.user_log_dir, "debug.log")
)
