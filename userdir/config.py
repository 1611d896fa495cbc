"""Configuration management for the user directory service.

This module provides utilities for loading and validating configuration
from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

LOGGER = logging.getLogger(__name__)

_PORT_UPPER_BOUND = 65536
_DEFAULT_SERVER_PORT = 8080
_DEFAULT_SERVER_HOST = "0.0.0.0"  # noqa: S104


def configure_logging(app_config: AppConfig) -> None:
    """Configure logging based on the application configuration.

    :param app_config: The application configuration instance
    """
    if not app_config.logging_level:
        logging.basicConfig(level=logging.INFO, force=True)
        return

    numeric_level = getattr(logging, app_config.logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        LOGGER.warning("Invalid log level: %s, using INFO", app_config.logging_level)
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, force=True)


@dataclass
class AppConfig:
    """Holds application configuration loaded from environment variables."""

    server_port: int
    server_host: str
    logging_level: str | None
    root_path: str


def get_env_str(
    var_name: str,
    default: str | None,
    value_checker: Callable[[str], bool] | None = None,
) -> str:
    """Get an environment variable as a string with optional constraints.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set
    :param value_checker: Optional function to validate the value
    :return: The environment variable value
    :raises ValueError: If the value does not meet the constraints
    """
    value = os.getenv(var_name, default)
    if value is None:
        msg = f"Environment variable {var_name} is required"
        raise ValueError(msg)

    if value_checker and not value_checker(value):
        msg = f"Environment variable {var_name} has invalid value: {value}"
        raise ValueError(msg)

    return value


def get_env_int(
    var_name: str,
    default: int,
    value_checker: Callable[[int], bool] | None = None,
) -> int:
    """Get an environment variable as an integer with optional constraints.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set or empty
    :param value_checker: Optional function to validate the value
    :return: The environment variable value as an integer
    :raises ValueError: If the value does not meet the constraints or is not an integer
    """
    value_str = os.getenv(var_name)
    if value_str is None or value_str == "":
        return default

    if not value_str.isnumeric():
        msg = f"Environment variable {var_name} must be an integer, got: {value_str}"
        raise ValueError(msg)

    value = int(value_str)

    if value_checker and not value_checker(value):
        msg = f"Environment variable {var_name} has invalid value: {value}"
        raise ValueError(msg)

    return value


def valid_port(port: int) -> bool:
    """Return True if ``port`` is a usable TCP port number."""
    return 0 < port < _PORT_UPPER_BOUND


def load_config_from_env(env_file: str | Path | None = None) -> AppConfig:
    """Load application configuration from environment variables.

    :param env_file: Optional ``.env`` file read before the environment is queried;
        variables already set in the environment take precedence
    :return: An AppConfig instance populated with environment variable values
    :raises ValueError: If a variable holds an invalid value
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)

    return AppConfig(
        server_port=get_env_int("SERVER_PORT", _DEFAULT_SERVER_PORT, valid_port),
        server_host=get_env_str("SERVER_HOST", _DEFAULT_SERVER_HOST),
        logging_level=get_env_str("LOGGING_LEVEL", "INFO"),
        root_path=get_env_str("ROOT_PATH", ""),
    )
