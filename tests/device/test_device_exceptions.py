#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the device-protocol errors."""

from hexspi.device.exceptions import DeviceError, DeviceErrorKind
from hexspi.exceptions import HexSpiError


def test_kinds() -> None:
    assert len(DeviceErrorKind) == 21
    assert DeviceErrorKind.BUS_ERROR.description == "Bus error"


def test_message() -> None:
    assert str(DeviceError(DeviceErrorKind.ALARM_MODE)) == "Device: Chip is in alarm mode"
    assert str(DeviceError(DeviceErrorKind.L3_CMD_FAILED, 0x3C)) == "Device: L3 command failed: 60"


def test_base() -> None:
    error = DeviceError(DeviceErrorKind.INVALID_CRC, "crc mismatch")
    assert isinstance(error, HexSpiError)
    assert error.kind is DeviceErrorKind.INVALID_CRC
    assert error.payload == "crc mismatch"
