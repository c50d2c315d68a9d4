#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Serial proxy emulating the bridge firmware.

The proxy replaces ``serial.Serial`` so the whole stack, down to the serial
link, can run without a dongle. It answers chip-select commands and echoes hex
frames, optionally passing the payload through a responder that plays the
role of the SPI peripheral.
"""

import logging
from typing import Any, Callable, Optional, Type

logger = logging.getLogger(__name__)

Responder = Callable[[bytes], bytes]


class BridgeSerialProxy:
    """Serial communication proxy behaving like the bridge firmware.

    :cvar responder: Maps the payload clocked out to the payload clocked in;
        the default returns the payload unchanged.
    :cvar ack: Acknowledgement of the chip-select command.
    :cvar echo_terminator: Terminator of the echoed frames.
    """

    CS_COMMAND = b"CS=0\n"
    FRAME_TERMINATOR = b"x\n"

    responder: Optional[Responder] = None
    ack: bytes = b"OK\r\n"
    echo_terminator: bytes = b"x\n"

    @classmethod
    def init_proxy(
        cls,
        responder: Optional[Responder] = None,
        ack: bytes = b"OK\r\n",
        echo_terminator: bytes = b"x\n",
    ) -> "Type[BridgeSerialProxy]":
        """Configure the behavior of proxies created afterwards.

        :param responder: Payload responder, defaults to echoing the payload.
        :param ack: Acknowledgement of the chip-select command.
        :param echo_terminator: Terminator of the echoed frames.
        :return: BridgeSerialProxy class with the configuration applied.
        """
        cls.responder = responder
        cls.ack = ack
        cls.echo_terminator = echo_terminator
        return cls

    def __init__(self, port: str, baudrate: int = 115200, **kwargs: Any) -> None:
        """Initialize the proxy with the arguments of ``serial.Serial``.

        The port is open right away, as ``serial.Serial`` does when given a port.

        :param port: Serial port name.
        :param baudrate: Serial communication speed (stored, not used).
        :param kwargs: Remaining line settings (stored, not used).
        """
        self.port = port
        self.baudrate = baudrate
        self.settings = kwargs
        self.is_open = True
        self.buffer = bytes()
        self.written: list[bytes] = []
        self.chip_selected = False
        self.cs_toggles = 0

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def write(self, data: bytes) -> int:
        """Process a command or a frame and queue the answer.

        :param data: Bytes written by the host.
        :return: Number of bytes written.
        """
        data = bytes(data)
        logger.debug(f"I got: {data!r}")
        self.written.append(data)
        if data == self.CS_COMMAND:
            self.chip_selected = not self.chip_selected
            self.cs_toggles += 1
            self.buffer += self.ack
        elif data.endswith(self.FRAME_TERMINATOR):
            payload = bytes.fromhex(data[: -len(self.FRAME_TERMINATOR)].decode("ascii"))
            responder = type(self).responder
            if responder:
                payload = responder(payload)
            self.buffer += payload.hex().upper().encode("ascii") + self.echo_terminator
        return len(data)

    def read(self, length: int) -> bytes:
        """Read portion of the queued answers.

        :param length: Amount of data to read in bytes.
        :return: Data segment, shorter than requested when the queue runs dry.
        """
        segment = self.buffer[:length]
        self.buffer = self.buffer[length:]
        logger.debug(f"I responded with: '{segment!r}'")
        return segment

    def flush(self) -> None:
        """Simulates flushing the output buffer."""

    def reset_input_buffer(self) -> None:
        self.buffer = bytes()

    def __str__(self) -> str:
        return self.__class__.__name__
