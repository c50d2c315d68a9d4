#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the command channel and chip-select control."""

import pytest

from hexspi.bridge.commands import ChipSelect, CommandChannel
from hexspi.bridge.exceptions import BridgeInvalidResponseError, BridgeTimeoutError
from tests.bridge.scripted_link import ACK, ScriptedLink


def test_toggle() -> None:
    link = ScriptedLink(ACK)
    ChipSelect(CommandChannel(link)).toggle()
    assert link.writes == [b"CS=0\n"]
    assert link.reads == [4]


def test_toggle_twice_sends_same_command() -> None:
    link = ScriptedLink(ACK * 2)
    chip_select = ChipSelect(CommandChannel(link))
    chip_select.toggle()
    chip_select.toggle()
    assert link.writes == [b"CS=0\n", b"CS=0\n"]


@pytest.mark.parametrize("ack", [b"NO\r\n", b"ok\r\n", b"OK\n\r"])
def test_toggle_wrong_ack(ack: bytes) -> None:
    link = ScriptedLink(ack)
    with pytest.raises(BridgeInvalidResponseError) as exc_info:
        ChipSelect(CommandChannel(link)).toggle()
    assert "but expected b'OK\\r\\n'" in str(exc_info.value)


def test_toggle_missing_ack() -> None:
    link = ScriptedLink(b"OK")
    with pytest.raises(BridgeTimeoutError):
        ChipSelect(CommandChannel(link)).toggle()


def test_send_command_check_response() -> None:
    link = ScriptedLink(b"PONG")
    CommandChannel(link).send_command_check_response(b"PING\n", b"PONG")
    assert link.writes == [b"PING\n"]
