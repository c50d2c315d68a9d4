#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Hex-encoded SPI-over-serial bridge."""

from hexspi.bridge.error_mapper import to_bridge_error
from hexspi.bridge.exceptions import (
    BridgeDataTooLongError,
    BridgeDeviceError,
    BridgeError,
    BridgeInvalidBufferLengthError,
    BridgeInvalidHexDigitError,
    BridgeInvalidResponseError,
    BridgeIOError,
    BridgeNonUtf8HexError,
    BridgePermissionError,
    BridgeTimeoutError,
    SpiErrorKind,
)
from hexspi.bridge.frame import HexFrame
from hexspi.bridge.link import LinkBase, SerialLink
from hexspi.bridge.spi import (
    Delay,
    Read,
    SerialSpiBridge,
    SpiDevice,
    SpiOperation,
    Transfer,
    TransferInPlace,
    Write,
)

__all__ = [
    # Exceptions
    "BridgeDataTooLongError",
    "BridgeDeviceError",
    "BridgeError",
    "BridgeInvalidBufferLengthError",
    "BridgeInvalidHexDigitError",
    "BridgeInvalidResponseError",
    "BridgeIOError",
    "BridgeNonUtf8HexError",
    "BridgePermissionError",
    "BridgeTimeoutError",
    "SpiErrorKind",
    # Transport
    "HexFrame",
    "LinkBase",
    "SerialLink",
    "SerialSpiBridge",
    "SpiDevice",
    # Operations
    "Delay",
    "Read",
    "SpiOperation",
    "Transfer",
    "TransferInPlace",
    "Write",
    # Errors conversion
    "to_bridge_error",
]
