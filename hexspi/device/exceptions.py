#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Errors reported by the secure-element device-protocol layer.

The device-protocol layer sits on top of an SPI transport. One of its error
kinds, the bus error, carries the transport error that caused it; all other
kinds carry at most a plain payload (a status code, a parser message, ...).
"""

from enum import Enum
from typing import Any, Optional

from hexspi.exceptions import HexSpiError


class DeviceErrorKind(Enum):
    """Kinds of errors raised by the device-protocol layer."""

    ALARM_MODE = "Chip is in alarm mode"
    BUS_ERROR = "Bus error"
    CHIP_BUSY = "Chip is busy"
    DECRYPTION = "Decryption failed"
    ENCRYPTION = "Encryption failed"
    GPIO_ERROR = "GPIO error"
    HANDSHAKE_FAILED = "Handshake failed"
    INVALID_CHIP_STATUS = "Invalid chip status"
    INVALID_CRC = "Invalid CRC"
    INVALID_KEY = "Invalid key"
    INVALID_L2_RESPONSE = "Invalid L2 response"
    INVALID_L3_CMD = "Invalid L3 command"
    INVALID_PUBLIC_KEY = "Invalid public key"
    L2_RESPONSE_ERROR = "L2 response error"
    L3_CMD_FAILED = "L3 command failed"
    L3_RESPONSE_BUFFER_OVERFLOW = "L3 response buffer overflow"
    NO_SESSION = "No secure session"
    PARSING_ERROR = "Parsing error"
    REQUEST_EXCEEDS_SIZE = "Request exceeds size"
    UNAUTHORIZED = "Unauthorized"
    UNEXPECTED_RESPONSE_STATUS = "Unexpected response status"

    @property
    def description(self) -> str:
        """Human readable description of the error kind."""
        return self.value


class DeviceError(HexSpiError):
    """Device-protocol error.

    :cvar fmt: Format string template for device error messages.
    """

    fmt = "Device: {description}"

    def __init__(self, kind: DeviceErrorKind, payload: Optional[Any] = None) -> None:
        """Initialize the device-protocol error.

        :param kind: Kind of the error.
        :param payload: Value attached to the error; the transport error for
            ``DeviceErrorKind.BUS_ERROR``.
        """
        description = kind.description
        if payload is not None:
            description += f": {payload}"
        super().__init__(description)
        self.kind = kind
        self.payload = payload
