#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Exceptions of the hex-encoded SPI-over-serial bridge.

Every failure of the transport is reported by one of the classes below, all
derived from :class:`BridgeError`. The set is closed: the serial link, the
chip-select controller, the frame codec, the transfer engine and the
transaction dispatcher raise nothing else.
"""

from enum import Enum
from typing import Optional

from hexspi.device.exceptions import DeviceError
from hexspi.exceptions import HexSpiConnectionError, HexSpiError, HexSpiTimeoutError


class SpiErrorKind(Enum):
    """Classification of SPI errors as seen by the device-protocol layer."""

    OVERRUN = "overrun"
    MODE_FAULT = "mode_fault"
    FRAME_FORMAT = "frame_format"
    CHIP_SELECT_FAULT = "chip_select_fault"
    OTHER = "other"


########################################################################################################################
# SPI bridge Exceptions
########################################################################################################################
class BridgeError(HexSpiError):
    """Base exception class of the SPI bridge transport.

    :cvar fmt: Format string template for bridge error messages.
    :cvar default_description: Description used when none is provided.
    """

    fmt = "Bridge: {description}"
    default_description: Optional[str] = None

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the bridge exception.

        :param desc: Description of the error, defaults to the class description.
        """
        super().__init__(desc or self.default_description)

    @property
    def kind(self) -> SpiErrorKind:
        """SPI error kind of this error.

        The bridge has no way to tell the SPI-level cause of a failure, so all
        errors are reported as ``OTHER``.
        """
        return SpiErrorKind.OTHER


class BridgeIOError(HexSpiConnectionError, BridgeError):
    """I/O error on the serial link (port missing, busy, disconnected, ...)."""

    fmt = "Bridge: USB/Serial I/O error -> {description}"


class BridgePermissionError(BridgeIOError):
    """Access to the serial port has been denied."""


class BridgeTimeoutError(BridgeIOError, HexSpiTimeoutError):
    """The serial link did not deliver the data within its timeout."""

    fmt = "Bridge: Timeout -> {description}"


class BridgeInvalidResponseError(BridgeError):
    """Unexpected acknowledgement or malformed frame received from the bridge."""

    default_description = "Invalid response from device"


class BridgeDataTooLongError(BridgeError):
    """Payload does not fit into a single bridge frame."""

    default_description = "Data too long for transport"


class BridgeNonUtf8HexError(BridgeError):
    """Echoed hex region contains bytes that are not valid UTF-8."""

    default_description = "Non-UTF8 hex characters in response"


class BridgeInvalidHexDigitError(BridgeError):
    """Echoed hex region contains a character that is not a hex digit."""

    default_description = "Invalid hex digit in response"


class BridgeInvalidBufferLengthError(BridgeError):
    """Read and write buffers of a transfer differ in length."""

    default_description = "Invalid buffer length"


class BridgeDeviceError(BridgeError):
    """Device-protocol error carried in the transport error domain.

    The wrapped :class:`DeviceError` may itself hold a transport error (its
    bus-error payload), which is kept by reference.
    """

    def __init__(self, error: DeviceError) -> None:
        """Initialize the exception.

        :param error: Device-protocol error to carry.
        """
        super().__init__(str(error))
        self.error = error
