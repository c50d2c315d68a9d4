#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Hex frame codec of the SPI bridge.

A payload of N bytes travels over the serial line as 2N uppercase hex digits
followed by a two byte terminator. The bridge answers with a frame of the same
size whose terminator is either the original one or CR LF.
"""

import logging
import string

from typing_extensions import Self

from hexspi.bridge.exceptions import (
    BridgeDataTooLongError,
    BridgeInvalidHexDigitError,
    BridgeInvalidResponseError,
    BridgeNonUtf8HexError,
)

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)


class HexFrame:
    """Hex-encoded frame carrying one SPI transfer.

    :cvar TERMINATOR: Terminator appended to every outgoing frame.
    :cvar ECHO_TERMINATORS: Terminators accepted at the end of an echoed frame.
    :cvar MAX_DATA_SIZE: Maximal payload size of a single frame in bytes.
    """

    TERMINATOR = b"x\n"
    ECHO_TERMINATORS = (b"x\n", b"\r\n")
    MAX_DATA_SIZE = 2048

    def __init__(self, data: bytes) -> None:
        """Initialize the frame.

        :param data: Payload of the frame.
        :raises BridgeDataTooLongError: Payload exceeds ``MAX_DATA_SIZE``.
        """
        if len(data) > self.MAX_DATA_SIZE:
            raise BridgeDataTooLongError(
                f"Data too long for transport: {len(data)} bytes, maximum is {self.MAX_DATA_SIZE}"
            )
        self.data = bytes(data)

    def __len__(self) -> int:
        return self.frame_size(len(self.data))

    def __repr__(self) -> str:
        return f"HexFrame({len(self.data)} bytes)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HexFrame) and self.data == other.data

    @staticmethod
    def frame_size(data_size: int) -> int:
        """Size of the frame carrying `data_size` bytes of payload."""
        return 2 * data_size + len(HexFrame.TERMINATOR)

    def export(self) -> bytes:
        """Encode the payload as uppercase hex digits followed by the terminator.

        :return: Frame ready to be written to the serial line.
        """
        return self.data.hex().upper().encode("ascii") + self.TERMINATOR

    @classmethod
    def has_valid_terminator(cls, frame: bytes) -> bool:
        """Check whether an echoed frame ends with an accepted terminator.

        :param frame: Frame received from the bridge.
        :return: True if the terminator is accepted.
        """
        return bytes(frame).endswith(cls.ECHO_TERMINATORS)

    @classmethod
    def parse(cls, frame: bytes, length: int) -> Self:
        """Decode `length` bytes of payload from the leading hex digits of a frame.

        Each pair of characters is decoded on its own, so the first malformed
        pair determines the reported error.

        :param frame: Frame received from the bridge.
        :param length: Number of payload bytes to decode.
        :return: Frame holding the decoded payload.
        :raises BridgeInvalidResponseError: The frame is too short.
        :raises BridgeNonUtf8HexError: A pair of characters is not valid UTF-8.
        :raises BridgeInvalidHexDigitError: A pair of characters is not a hex number.
        """
        hex_part = bytes(frame[: 2 * length])
        if len(hex_part) < 2 * length:
            raise BridgeInvalidResponseError(
                f"Frame too short: expected {2 * length} hex characters, got {len(hex_part)}"
            )
        data = bytearray(length)
        for i in range(length):
            chunk = hex_part[2 * i : 2 * i + 2]
            try:
                text = chunk.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise BridgeNonUtf8HexError() from exc
            # signs and whitespace are not hex digits, "+A" is rejected
            if not all(char in HEX_DIGITS for char in text):
                raise BridgeInvalidHexDigitError(f"Invalid hex digit in response: {text!r}")
            data[i] = int(text, 16)
        return cls(bytes(data))
