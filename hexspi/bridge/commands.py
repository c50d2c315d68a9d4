#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Command channel and chip-select control of the SPI bridge."""

import logging

from hexspi.bridge.exceptions import BridgeInvalidResponseError
from hexspi.bridge.link import LinkBase

logger = logging.getLogger(__name__)


class CommandChannel:
    """Short ASCII commands with fixed-length acknowledgements."""

    def __init__(self, link: LinkBase) -> None:
        """Initialize the command channel.

        :param link: Link to the bridge.
        """
        self.link = link

    def send_command_check_response(self, command: bytes, response: bytes) -> None:
        """Send a command and check if expected response is received.

        :param command: Command to send.
        :param response: Expected response.
        :raises BridgeInvalidResponseError: The bridge answered something else.
        """
        self.link.write_all(command)
        data_recvd = self.link.read_exact(len(response))
        if data_recvd != response:
            raise BridgeInvalidResponseError(
                f"Received data {data_recvd!r} but expected {response!r}"
            )


class ChipSelect:
    """Chip-select line of the bridge.

    There is a single command for both edges of a transaction; the bridge
    firmware alternates the physical line on every call.

    :cvar COMMAND: Chip-select toggle command.
    :cvar RESPONSE: Acknowledgement of the command.
    """

    COMMAND = b"CS=0\n"
    RESPONSE = b"OK\r\n"

    def __init__(self, channel: CommandChannel) -> None:
        self.channel = channel

    def toggle(self) -> None:
        """Toggle the chip-select line.

        :raises BridgeInvalidResponseError: The acknowledgement does not match.
        """
        logger.debug("Toggle chip select")
        self.channel.send_command_check_response(self.COMMAND, self.RESPONSE)
