#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Configuration of the SPI bridge.

The bridge connection can be described in a JSON or YAML file::

    port: /dev/ttyACM0
    baudrate: 115200
    release_on_error: false

The file is validated against :data:`BRIDGE_SCHEMA` before use.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import fastjsonschema
import yaml
from typing_extensions import Self

from hexspi.exceptions import HexSpiError, HexSpiKeyError

logger = logging.getLogger(__name__)

DEFAULT_PORT = "/dev/ttyACM0"
DEFAULT_BAUDRATE = 115200
SUPPORTED_BAUDRATES = [4800, 9600, 19200, 38400, 115200]

BRIDGE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "title": "SPI bridge connection",
    "properties": {
        "port": {
            "type": "string",
            "title": "Serial port",
            "description": "Name of the serial port of the bridge dongle.",
            "minLength": 1,
        },
        "baudrate": {
            "type": "integer",
            "title": "Baud rate",
            "description": "Speed of the serial line.",
            "enum": SUPPORTED_BAUDRATES,
        },
        "release_on_error": {
            "type": "boolean",
            "title": "Release chip select on error",
            "description": "Toggle chip select back when a transaction fails midway.",
        },
    },
    "additionalProperties": False,
}


def load_configuration(path: str) -> dict:
    """Load configuration from YAML or JSON file.

    :param path: Path to configuration file.
    :raises HexSpiError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        with open(path, encoding="utf-8") as config_file:
            config = config_file.read()
    except OSError as exc:
        raise HexSpiError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[Any] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except yaml.YAMLError:
            pass

    if not config_data:
        raise HexSpiError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise HexSpiError(f"Invalid configuration file: {path}")

    return config_data


def check_config(config: dict[str, Any], schema: dict[str, Any]) -> None:
    """Check the configuration against a validation schema.

    :param config: Configuration dictionary to validate.
    :param schema: JSON schema of the configuration.
    :raises HexSpiError: Invalid validation schema or configuration validation failed.
    """
    try:
        validator = fastjsonschema.compile(schema)
    except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
        raise HexSpiError(f"Invalid validation schema to check config: {str(exc)}") from exc
    try:
        validator(config)
    except fastjsonschema.JsonSchemaValueException as exc:
        raise HexSpiError(f"Configuration validation failed: {exc.message}") from exc


class Config(dict):
    """hexspi Configuration Manager.

    Dictionary with typed getters that remembers where it was loaded from.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.config_dir = os.getcwd()
        self.config_name = ""

    @classmethod
    def create_from_file(cls, file_path: str) -> Self:
        """Create configuration object from file.

        :param file_path: Path to the configuration file to load.
        :return: Configuration object with loaded data.
        """
        cfg_abs_path = os.path.abspath(file_path).replace("\\", "/")
        cfg = cls(load_configuration(cfg_abs_path))
        cfg.config_dir = os.path.dirname(cfg_abs_path)
        cfg.config_name = os.path.basename(cfg_abs_path)
        logger.debug(f"Loaded configuration {cfg.config_name} from {cfg.config_dir}")
        return cfg

    def __getitem__(self, key: str) -> Any:
        try:
            return super().__getitem__(key)
        except KeyError as exc:
            raise HexSpiKeyError(f"The {key} doesn't exist in configuration") from exc

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        """Get the key value as integer.

        :param key: Key name of the configuration entry.
        :param default: Default value if configuration doesn't contain it.
        :raises HexSpiError: The value is not integer at specified key.
        :return: Integer loaded from configuration.
        """
        ret = self.get(key, default)
        if isinstance(ret, bool) or not isinstance(ret, int):
            raise HexSpiError(f"The value is not integer at key: {key}")
        return ret

    def get_str(self, key: str, default: Optional[str] = None) -> str:
        """Get the key value as string.

        :param key: Key name of the configuration entry.
        :param default: Default value if configuration doesn't contain it.
        :raises HexSpiError: The value is not string at specified key.
        :return: Configuration value as string.
        """
        ret = self.get(key, default)
        if not isinstance(ret, str):
            raise HexSpiError(f"The value is not string at key: {key}")
        return ret

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        """Get the key value as boolean.

        :param key: Key name of the configuration entry.
        :param default: Default value if configuration doesn't contain it.
        :raises HexSpiError: The value is not boolean at specified key.
        :return: Boolean value from configuration.
        """
        ret = self.get(key, default)
        if not isinstance(ret, bool):
            raise HexSpiError(f"The value is not boolean at key: {key}")
        return ret

    def check(self, schema: dict[str, Any]) -> None:
        """Validate the configuration.

        :param schema: JSON schema of the configuration.
        """
        check_config(self, schema)


@dataclass
class BridgeSettings:
    """Connection settings of the SPI bridge."""

    port: str = DEFAULT_PORT
    baudrate: int = DEFAULT_BAUDRATE
    release_on_error: bool = False

    @classmethod
    def load(cls, config: Config) -> Self:
        """Create settings from a validated configuration.

        :param config: Bridge configuration.
        :return: Settings, missing entries use the defaults.
        """
        config.check(BRIDGE_SCHEMA)
        return cls(
            port=config.get_str("port", DEFAULT_PORT),
            baudrate=config.get_int("baudrate", DEFAULT_BAUDRATE),
            release_on_error=config.get_bool("release_on_error", False),
        )
