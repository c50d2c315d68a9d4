#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPI device emulated over the hex-encoded serial bridge.

This module defines the SPI operations accepted in a transaction, the abstract
SPI device consumed by the device-protocol layer and its implementation on top
of the serial bridge.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import TracebackType
from typing import Generator, Optional, Sequence, Type, Union

from typing_extensions import Self

from hexspi.bridge.commands import ChipSelect, CommandChannel
from hexspi.bridge.exceptions import BridgeError, BridgeInvalidBufferLengthError
from hexspi.bridge.frame import HexFrame
from hexspi.bridge.link import LinkBase, SerialLink
from hexspi.bridge.transfer import TransferEngine, WritableBuffer
from hexspi.exceptions import HexSpiValueError

logger = logging.getLogger(__name__)


@dataclass
class Write:
    """Write data to the peripheral, discarding the data clocked in."""

    data: bytes


@dataclass
class Read:
    """Read data from the peripheral into the buffer, sending zeros."""

    buffer: WritableBuffer


@dataclass
class Transfer:
    """Send `write` and store the data clocked in into `read`.

    Both buffers must have the same length.
    """

    read: WritableBuffer
    write: bytes


@dataclass
class TransferInPlace:
    """Send the buffer and replace its content by the data clocked in."""

    buffer: WritableBuffer


@dataclass
class Delay:
    """Pause between operations, in nanoseconds."""

    ns: int


SpiOperation = Union[Write, Read, Transfer, TransferInPlace, Delay]


def split_data(data: bytes, size: int) -> Generator[bytes, None, None]:
    """Split data into chunks of specified size.

    :param data: Array of bytes to be split into chunks.
    :param size: Size of each chunk in bytes.
    :return: Generator yielding byte chunks of the specified size.
    """
    for i in range(0, len(data), size):
        yield data[i : i + size]


class SpiDevice(ABC):
    """SPI device with exclusive access to its bus.

    A transaction asserts chip select, runs the operations in order and
    deasserts chip select.
    """

    @abstractmethod
    def transaction(self, operations: Sequence[SpiOperation]) -> None:
        """Run a sequence of operations as one transaction.

        :param operations: Operations executed in order.
        """

    def write(self, data: bytes) -> None:
        """Write data to the peripheral in a transaction of its own."""
        self.transaction([Write(data)])

    def read(self, buffer: WritableBuffer) -> None:
        """Read data into the buffer in a transaction of its own."""
        self.transaction([Read(buffer)])

    def transfer(self, read: WritableBuffer, write: bytes) -> None:
        """Full-duplex transfer in a transaction of its own."""
        self.transaction([Transfer(read, write)])

    def transfer_in_place(self, buffer: WritableBuffer) -> None:
        """In-place full-duplex transfer in a transaction of its own."""
        self.transaction([TransferInPlace(buffer)])


class SerialSpiBridge(SpiDevice):
    """SPI device behind a USB-to-UART bridge speaking the hex frame protocol.

    Transactions are not reentrant and the bridge does no locking; callers
    sharing one instance between threads have to serialize access themselves.

    :cvar DELAY_SLEEP: Time slept for every delay operation, in seconds. The
        requested delay is not honoured, the serial round trip of the
        surrounding frames is always longer.
    """

    DELAY_SLEEP = 1e-9

    def __init__(self, link: LinkBase, release_on_error: bool = False) -> None:
        """Initialize the SPI bridge.

        :param link: Link to the bridge.
        :param release_on_error: Toggle chip select back when a transaction
            fails midway. Without it the chip-select line stays as the failing
            operation left it.
        """
        self.link = link
        self.release_on_error = release_on_error
        channel = CommandChannel(link)
        self.chip_select = ChipSelect(channel)
        self.engine = TransferEngine(channel)

    @classmethod
    def from_port(
        cls, port: str, baudrate: Optional[int] = None, release_on_error: bool = False
    ) -> Self:
        """Open the serial port of the bridge.

        :param port: Name of the serial port.
        :param baudrate: Speed of the serial line.
        :param release_on_error: Toggle chip select back when a transaction fails.
        :return: SPI bridge owning the opened port.
        """
        return cls(SerialLink(port, baudrate), release_on_error=release_on_error)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exception_type: Optional[Type[BaseException]] = None,
        exception_value: Optional[BaseException] = None,
        traceback: Optional[TracebackType] = None,
    ) -> None:
        self.close()

    def __str__(self) -> str:
        return f"SPI bridge on {self.link}"

    def close(self) -> None:
        """Close the link to the bridge."""
        self.link.close()

    def transaction(self, operations: Sequence[SpiOperation]) -> None:
        """Run operations between two chip-select toggles.

        The first failing operation aborts the transaction and its error is
        raised. The closing toggle then only happens with ``release_on_error``.

        :param operations: Operations executed in order.
        :raises BridgeError: Any failure of the bridge.
        """
        self.chip_select.toggle()
        try:
            for operation in operations:
                self._execute(operation)
        except Exception:
            if self.release_on_error:
                self._release()
            raise
        self.chip_select.toggle()

    def exchange(self, data: bytes, chunk_size: int = HexFrame.MAX_DATA_SIZE) -> bytes:
        """Transfer a payload of any length within one transaction.

        The payload is split into in-place transfers of at most `chunk_size`
        bytes, as a single frame cannot carry more than ``HexFrame.MAX_DATA_SIZE``.

        :param data: Data to send.
        :param chunk_size: Maximal payload of one frame.
        :return: Data received from the peripheral.
        :raises HexSpiValueError: Invalid chunk size.
        """
        if not 0 < chunk_size <= HexFrame.MAX_DATA_SIZE:
            raise HexSpiValueError(
                f"Chunk size must be between 1 and {HexFrame.MAX_DATA_SIZE}, got {chunk_size}"
            )
        buffers = [bytearray(chunk) for chunk in split_data(data, chunk_size)]
        logger.debug(f"Exchanging {len(data)} bytes in {len(buffers)} frame(s)")
        self.transaction([TransferInPlace(buffer) for buffer in buffers])
        return b"".join(buffers)

    def _execute(self, operation: SpiOperation) -> None:
        if isinstance(operation, Write):
            self.engine.transfer(bytearray(operation.data))
        elif isinstance(operation, Transfer):
            if len(operation.read) != len(operation.write):
                raise BridgeInvalidBufferLengthError(
                    f"Read buffer has {len(operation.read)} bytes, "
                    f"write buffer has {len(operation.write)} bytes"
                )
            operation.read[:] = operation.write
            self.engine.transfer(operation.read)
        elif isinstance(operation, TransferInPlace):
            self.engine.transfer(operation.buffer)
        elif isinstance(operation, Read):
            operation.buffer[:] = bytes(len(operation.buffer))
            self.engine.transfer(operation.buffer)
        elif isinstance(operation, Delay):
            time.sleep(self.DELAY_SLEEP)
        else:
            raise HexSpiValueError(f"Unsupported SPI operation: {operation!r}")

    def _release(self) -> None:
        try:
            self.chip_select.toggle()
        except BridgeError as exc:
            logger.warning(f"Failed to release chip select after error: {exc}")
