#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the hex frame codec."""

import pytest

from hexspi.bridge.exceptions import (
    BridgeDataTooLongError,
    BridgeInvalidHexDigitError,
    BridgeInvalidResponseError,
    BridgeNonUtf8HexError,
)
from hexspi.bridge.frame import HexFrame


@pytest.mark.parametrize(
    "data, frame",
    [
        (b"", b"x\n"),
        (b"\x06", b"06x\n"),
        (b"\xab\xcd\x01", b"ABCD01x\n"),
        (b"\x00\xff", b"00FFx\n"),
    ],
)
def test_export(data: bytes, frame: bytes) -> None:
    assert HexFrame(data).export() == frame
    assert len(HexFrame(data)) == len(frame)


@pytest.mark.parametrize("size", [0, 1, 2048])
def test_export_parse(size: int) -> None:
    data = bytes(i % 256 for i in range(size))
    frame = HexFrame(data).export()
    assert len(frame) == HexFrame.frame_size(size) == 2 * size + 2
    assert HexFrame.parse(frame, size).data == data


def test_data_too_long() -> None:
    with pytest.raises(BridgeDataTooLongError):
        HexFrame(bytes(HexFrame.MAX_DATA_SIZE + 1))


def test_parse_lower_case() -> None:
    assert HexFrame.parse(b"abcdx\n", 2).data == b"\xab\xcd"


def test_parse_ignores_terminator() -> None:
    assert HexFrame.parse(b"0102\r\n", 2) == HexFrame(b"\x01\x02")


@pytest.mark.parametrize("frame", [b"0Gx\n", b"G0x\n", b" 1x\n", b"+1x\n", b"+Ax\n"])
def test_parse_invalid_hex_digit(frame: bytes) -> None:
    with pytest.raises(BridgeInvalidHexDigitError):
        HexFrame.parse(frame, 1)


def test_parse_non_utf8() -> None:
    with pytest.raises(BridgeNonUtf8HexError):
        HexFrame.parse(b"01\xff\xfex\n", 2)


def test_parse_first_error_wins() -> None:
    with pytest.raises(BridgeInvalidHexDigitError):
        HexFrame.parse(b"zz\xff\xfex\n", 2)


def test_parse_short_frame() -> None:
    with pytest.raises(BridgeInvalidResponseError):
        HexFrame.parse(b"01", 2)


@pytest.mark.parametrize(
    "frame, valid",
    [
        (b"06x\n", True),
        (b"06\r\n", True),
        (b"06zz", False),
        (b"06\n", False),
        (b"", False),
    ],
)
def test_terminator(frame: bytes, valid: bool) -> None:
    assert HexFrame.has_valid_terminator(frame) is valid
