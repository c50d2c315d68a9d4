#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Serial link to the SPI bridge.

This module provides the abstract link capability used by the protocol layers
and its implementation on top of an OS serial port.
"""

import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from serial import (
    EIGHTBITS,
    PARITY_NONE,
    STOPBITS_ONE,
    Serial,
    SerialException,
    SerialTimeoutException,
)
from serial.tools.list_ports import comports
from typing_extensions import Self

from hexspi.bridge.exceptions import BridgeIOError, BridgePermissionError, BridgeTimeoutError

logger = logging.getLogger(__name__)


class LinkBase(ABC):
    """Abstract byte link to the bridge.

    The protocol layers only rely on this contract, which lets tests replace the
    serial port by a scripted link.
    """

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exception_type: Optional[Type[BaseException]] = None,
        exception_value: Optional[BaseException] = None,
        traceback: Optional[TracebackType] = None,
    ) -> None:
        self.close()

    @property
    @abstractmethod
    def is_opened(self) -> bool:
        """Indicates whether the link is open."""

    @abstractmethod
    def close(self) -> None:
        """Close the link and release the underlying handle."""

    @abstractmethod
    def write_all(self, data: bytes) -> None:
        """Write the whole buffer to the link.

        :param data: Data to be written.
        :raises BridgeIOError: When the data cannot be written.
        """

    @abstractmethod
    def read_exact(self, length: int) -> bytes:
        """Read exactly `length` bytes from the link.

        :param length: Number of bytes to read.
        :return: Data read from the link.
        :raises BridgeIOError: When the data cannot be read.
        """

    @abstractmethod
    def flush(self) -> None:
        """Flush pending output of the link."""

    @abstractmethod
    def __str__(self) -> str:
        """Return string describing the link."""


class SerialLink(LinkBase):
    """Serial link to the bridge dongle.

    The line is always configured as 8 data bits, no parity, 1 stop bit and no
    flow control. Every read and write call blocks for at most ``TIMEOUT``
    milliseconds.

    :cvar DEFAULT_BAUDRATE: Default serial communication speed (115200 bps).
    :cvar TIMEOUT: Read/write timeout in milliseconds.
    """

    DEFAULT_BAUDRATE = 115200
    TIMEOUT = 500

    def __init__(self, port: str, baudrate: Optional[int] = None) -> None:
        """Open and configure the serial port, then flush it.

        :param port: Name of the serial port, e.g. '/dev/ttyACM0' or 'COM3'.
        :param baudrate: Speed of the serial line, defaults to 115200.
        :raises BridgePermissionError: When the permission is denied.
        :raises BridgeIOError: When the port cannot be opened.
        """
        self.baudrate = baudrate or self.DEFAULT_BAUDRATE
        timeout_s = self.TIMEOUT / 1000
        try:
            self._device = Serial(
                port=port,
                baudrate=self.baudrate,
                bytesize=EIGHTBITS,
                parity=PARITY_NONE,
                stopbits=STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
                timeout=timeout_s,
                write_timeout=timeout_s,
            )
        except (SerialException, OSError, ValueError) as e:
            if isinstance(e, PermissionError) or any(
                msg in str(e) for msg in ("PermissionError", "Permission denied")
            ):
                raise BridgePermissionError(f"Could not open port '{port}'. Access denied.") from e
            raise BridgeIOError(str(e)) from e
        logger.debug(f"Opened serial link {port} @ {self.baudrate} baud")
        self.flush()

    @property
    def is_opened(self) -> bool:
        """Check if the serial port is currently open.

        :return: True if the port is open, False otherwise.
        """
        return self._device.is_open

    def close(self) -> None:
        """Close the serial port.

        :raises BridgeIOError: When closing the port fails.
        """
        if self.is_opened:
            try:
                self._device.close()
            except (SerialException, OSError) as e:
                raise BridgeIOError(str(e)) from e

    def flush(self) -> None:
        """Wait until all pending output has been transmitted.

        :raises BridgeIOError: When the port is closed or flushing fails.
        """
        if not self.is_opened:
            raise BridgeIOError("Link is not opened")
        try:
            self._device.flush()
        except (SerialException, OSError) as e:
            raise BridgeIOError(str(e)) from e

    def write_all(self, data: bytes) -> None:
        """Send the whole buffer to the bridge.

        :param data: Data bytes to send.
        :raises BridgeTimeoutError: When sending of data times out.
        :raises BridgeIOError: When the port is closed or sending fails.
        """
        if not self.is_opened:
            raise BridgeIOError("Link is not opened for writing")
        logger.debug(f"[{' '.join(f'{b:02x}' for b in data)}]")
        try:
            self._device.write(data)
            self._device.flush()
        except SerialTimeoutException as e:
            raise BridgeTimeoutError(
                f"Write timeout error. The timeout is set to {self.TIMEOUT} ms."
            ) from e
        except (SerialException, OSError) as e:
            raise BridgeIOError(str(e)) from e

    def read_exact(self, length: int) -> bytes:
        """Read exactly `length` bytes from the bridge.

        The serial port returns what it has received once its timeout expires,
        so the read is repeated until all data arrived or nothing more comes.

        :param length: Number of bytes to read.
        :return: Data read from the bridge.
        :raises BridgeTimeoutError: When fewer bytes arrive within the timeout.
        :raises BridgeIOError: When the port is closed or reading fails.
        """
        if not self.is_opened:
            raise BridgeIOError("Link is not opened for reading")
        data = bytearray()
        try:
            while len(data) < length:
                chunk = self._device.read(length - len(data))
                if not chunk:
                    break
                data.extend(chunk)
        except (SerialException, OSError) as e:
            raise BridgeIOError(str(e)) from e
        if len(data) < length:
            raise BridgeTimeoutError(
                f"Received {len(data)} of {length} bytes within {self.TIMEOUT} ms"
            )
        logger.debug(f"<{' '.join(f'{b:02x}' for b in data)}>")
        return bytes(data)

    def __str__(self) -> str:
        return f"{self._device.port} @ {self.baudrate} baud"

    @staticmethod
    def scan() -> list[str]:
        """List serial ports present on the host.

        :return: Names of the serial ports.
        """
        return [comport.device for comport in comports(include_links=True)]
