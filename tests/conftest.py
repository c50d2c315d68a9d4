#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""hexspi pytest configuration and shared test fixtures."""

import os

import pytest

from tests.cli_runner import CliRunner

os.environ["HEXSPI_DEBUG_LOGGING_DISABLED"] = "True"

# pylint: disable=wrong-import-position
from hexspi.bridge.transfer import TransferEngine  # noqa: E402


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(autouse=True)
def no_settle_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    """Skip the settle delay to keep the tests fast."""
    monkeypatch.setattr(TransferEngine, "SETTLE_DELAY", 0)
