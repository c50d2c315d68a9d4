#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the conversion of device-protocol errors into bridge errors."""

import pytest

from hexspi.bridge.error_mapper import to_bridge_error
from hexspi.bridge.exceptions import (
    BridgeDeviceError,
    BridgeInvalidResponseError,
    BridgeTimeoutError,
)
from hexspi.device.exceptions import DeviceError, DeviceErrorKind


def test_bus_error_keeps_inner_error() -> None:
    inner = BridgeTimeoutError("Received 0 of 4 bytes")
    result = to_bridge_error(DeviceError(DeviceErrorKind.BUS_ERROR, inner))
    assert isinstance(result, BridgeDeviceError)
    assert result.error.kind is DeviceErrorKind.BUS_ERROR
    assert result.error.payload is inner
    assert result.__cause__ is inner


def test_gpio_error() -> None:
    result = to_bridge_error(DeviceError(DeviceErrorKind.GPIO_ERROR))
    assert isinstance(result, BridgeInvalidResponseError)
    assert str(result) == "Bridge: Invalid response from device"


@pytest.mark.parametrize(
    "kind",
    [
        kind
        for kind in DeviceErrorKind
        if kind not in (DeviceErrorKind.BUS_ERROR, DeviceErrorKind.GPIO_ERROR)
    ],
)
def test_other_kinds_carried(kind: DeviceErrorKind) -> None:
    result = to_bridge_error(DeviceError(kind, 0x79))
    assert isinstance(result, BridgeDeviceError)
    assert result.error.kind is kind
    assert result.error.payload == 0x79
    assert kind.description in str(result)


def test_no_payload() -> None:
    result = to_bridge_error(DeviceError(DeviceErrorKind.CHIP_BUSY))
    assert isinstance(result, BridgeDeviceError)
    assert result.error.payload is None
    assert str(result) == "Bridge: Device: Chip is busy"
