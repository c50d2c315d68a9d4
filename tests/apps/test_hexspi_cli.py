#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the hexspi command line tool."""

import os
from unittest.mock import MagicMock, patch

import pytest

from hexspi import __version__ as hexspi_version
from hexspi.apps.hexspi import get_settings, main
from hexspi.bridge.exceptions import BridgeInvalidResponseError
from hexspi.utils.config import BridgeSettings
from hexspi.utils.serial_proxy import BridgeSerialProxy
from tests.cli_runner import CliRunner


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(main, ["--version"])
    assert hexspi_version in result.output


def test_no_arguments_prints_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(main, [], expected_code=cli_runner.get_help_error_code(False))
    assert "Usage:" in result.output


def test_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(main, ["--help"])
    for command in ["scan", "cs-toggle", "transfer", "ping"]:
        assert command in result.output


def test_scan(cli_runner: CliRunner) -> None:
    ports = [MagicMock(device="/dev/ttyACM0")]
    with patch("hexspi.bridge.link.comports", MagicMock(return_value=ports)):
        result = cli_runner.invoke(main, ["scan"])
    assert "/dev/ttyACM0" in result.output


def test_scan_nothing(cli_runner: CliRunner) -> None:
    with patch("hexspi.bridge.link.comports", MagicMock(return_value=[])):
        result = cli_runner.invoke(main, ["scan"])
    assert "No serial port found" in result.output


def test_transfer(cli_runner: CliRunner) -> None:
    with patch("hexspi.bridge.link.Serial", BridgeSerialProxy.init_proxy()):
        result = cli_runner.invoke(main, ["-p", "/dev/ttyACM0", "transfer", "01 02 ab"])
    assert "01 02 ab" in result.output


def test_transfer_hexdump(cli_runner: CliRunner) -> None:
    proxy = BridgeSerialProxy.init_proxy(responder=lambda data: b"AB" * (len(data) // 2))
    with patch("hexspi.bridge.link.Serial", proxy):
        result = cli_runner.invoke(main, ["transfer", "0102", "--hexdump"])
    assert "00000000: 41 42" in result.output


def test_transfer_invalid_hex(cli_runner: CliRunner) -> None:
    with patch("hexspi.bridge.link.Serial", BridgeSerialProxy.init_proxy()):
        cli_runner.invoke(main, ["transfer", "0G"], expected_code=1)


def test_cs_toggle(cli_runner: CliRunner) -> None:
    with patch("hexspi.bridge.link.Serial", BridgeSerialProxy.init_proxy()):
        result = cli_runner.invoke(main, ["cs-toggle"])
    assert "Chip select toggled" in result.output


def test_cs_toggle_wrong_ack(cli_runner: CliRunner) -> None:
    with patch("hexspi.bridge.link.Serial", BridgeSerialProxy.init_proxy(ack=b"NO\r\n")):
        result = cli_runner.invoke(main, ["cs-toggle"], expected_code=1)
    assert isinstance(result.exception, BridgeInvalidResponseError)


def test_ping(cli_runner: CliRunner) -> None:
    with patch("hexspi.bridge.link.Serial", BridgeSerialProxy.init_proxy()):
        result = cli_runner.invoke(main, ["-b", "9600", "ping", "--size", "4096"])
    assert "Sent 4096 bytes, 4096 bytes echoed back unchanged" in result.output


def test_ping_corrupted(cli_runner: CliRunner) -> None:
    proxy = BridgeSerialProxy.init_proxy(responder=lambda data: bytes(len(data)))
    with patch("hexspi.bridge.link.Serial", proxy):
        result = cli_runner.invoke(main, ["ping", "--size", "8"], expected_code=1)
    assert "Sent 8 bytes, 0 bytes echoed back unchanged" in result.output


@pytest.mark.parametrize("args", [["--size", "0"], ["--value", "0x100"]])
def test_ping_invalid_args(cli_runner: CliRunner, args: list) -> None:
    with patch("hexspi.bridge.link.Serial", BridgeSerialProxy.init_proxy()):
        cli_runner.invoke(main, ["ping", *args], expected_code=1)


def test_unsupported_baudrate(cli_runner: CliRunner) -> None:
    cli_runner.invoke(main, ["-b", "1234", "cs-toggle"], expected_code=2)


def test_config_file(cli_runner: CliRunner, tmpdir: str) -> None:
    config = os.path.join(tmpdir, "bridge.yaml")
    with open(config, "w", encoding="utf-8") as f:
        f.write("port: /dev/ttyUSB3\nbaudrate: 19200\n")
    with patch("hexspi.apps.hexspi.SerialSpiBridge.from_port") as from_port:
        bridge = from_port.return_value.__enter__.return_value
        bridge.exchange.return_value = b"\x01"
        result = cli_runner.invoke(main, ["-c", config, "transfer", "01"])
    assert "01" in result.output
    from_port.assert_called_once_with("/dev/ttyUSB3", 19200, release_on_error=False)


def test_get_settings_defaults() -> None:
    assert get_settings(None, None, None, False) == BridgeSettings()


def test_get_settings_override(tmpdir: str) -> None:
    config = os.path.join(tmpdir, "bridge.json")
    with open(config, "w", encoding="utf-8") as f:
        f.write('{"port": "COM1", "baudrate": 4800, "release_on_error": true}')
    settings = get_settings("COM9", "38400", config, False)
    assert settings == BridgeSettings("COM9", 38400, True)
    assert get_settings(None, None, None, True).release_on_error is True
