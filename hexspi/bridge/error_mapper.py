#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Conversion of device-protocol errors into the bridge error domain.

The device-protocol layer reports transport failures as a bus error holding
the bridge error, and the bridge reports device-protocol failures as a
:class:`BridgeDeviceError` holding the device error. The nesting is kept by
reference, one level deep.
"""

import logging

from hexspi.bridge.exceptions import BridgeDeviceError, BridgeError, BridgeInvalidResponseError
from hexspi.device.exceptions import DeviceError, DeviceErrorKind

logger = logging.getLogger(__name__)


def to_bridge_error(error: DeviceError) -> BridgeError:
    """Convert a device-protocol error into a bridge error.

    - a bus error is re-wrapped around the same inner bridge error,
    - a GPIO error maps to :class:`BridgeInvalidResponseError`; the bridge has
      no chip-select pin that could fail, so it never occurs in practice,
    - any other kind is carried unchanged with its payload.

    :param error: Error raised by the device-protocol layer.
    :return: Equivalent bridge error.
    """
    if error.kind is DeviceErrorKind.BUS_ERROR:
        inner = error.payload
        result: BridgeError = BridgeDeviceError(DeviceError(DeviceErrorKind.BUS_ERROR, inner))
        if isinstance(inner, BaseException):
            result.__cause__ = inner
        return result
    if error.kind is DeviceErrorKind.GPIO_ERROR:
        logger.debug(f"GPIO error reported by device layer: {error}")
        return BridgeInvalidResponseError()
    return BridgeDeviceError(DeviceError(error.kind, error.payload))
