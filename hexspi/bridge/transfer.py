#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Transfer engine of the SPI bridge.

One call of :meth:`TransferEngine.transfer` is one full-duplex SPI exchange:
the buffer is sent as a hex frame, the bridge clocks it out to the peripheral
and echoes a frame of the same size carrying the bytes clocked in.
"""

import logging
import time
from typing import Union

from hexspi.bridge.commands import CommandChannel
from hexspi.bridge.exceptions import BridgeDataTooLongError, BridgeInvalidResponseError
from hexspi.bridge.frame import HexFrame

logger = logging.getLogger(__name__)

WritableBuffer = Union[bytearray, memoryview]


class TransferEngine:
    """Round-trip exchange of one frame with the bridge.

    :cvar SETTLE_DELAY: Pause between writing a frame and reading the echo, in
        seconds. There is no flow control on the link, the bridge firmware
        needs this time to process the frame.
    """

    SETTLE_DELAY = 0.01

    def __init__(self, channel: CommandChannel) -> None:
        """Initialize the transfer engine.

        :param channel: Command channel of the bridge.
        """
        self.channel = channel

    def transfer(self, buffer: WritableBuffer) -> None:
        """Exchange the buffer with the peripheral, in place.

        An empty buffer is a no-op.

        :param buffer: Data to send; replaced by the data received.
        :raises BridgeDataTooLongError: Buffer does not fit into one frame.
        :raises BridgeInvalidResponseError: Echoed frame has a wrong terminator.
        :raises BridgeNonUtf8HexError: Echoed frame is not valid UTF-8.
        :raises BridgeInvalidHexDigitError: Echoed frame contains a non-hex character.
        """
        length = len(buffer)
        if length == 0:
            return
        if length > HexFrame.MAX_DATA_SIZE:
            raise BridgeDataTooLongError(
                f"Data too long for transport: {length} bytes, maximum is {HexFrame.MAX_DATA_SIZE}"
            )

        frame = HexFrame(bytes(buffer)).export()
        self.channel.link.write_all(frame)
        time.sleep(self.SETTLE_DELAY)

        echo = self.channel.link.read_exact(len(frame))
        if not HexFrame.has_valid_terminator(echo):
            raise BridgeInvalidResponseError(f"Invalid frame terminator {echo[-2:]!r}")
        buffer[:] = HexFrame.parse(echo, length).data
        logger.debug(f"Transferred {length} bytes")
