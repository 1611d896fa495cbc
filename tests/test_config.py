"""Tests for configuration loading."""

import logging
import os
from pathlib import Path

import pytest

from userdir.config import (
    AppConfig,
    configure_logging,
    get_env_int,
    get_env_str,
    load_config_from_env,
)

CONFIG_VARS = ("SERVER_PORT", "SERVER_HOST", "LOGGING_LEVEL", "ROOT_PATH")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables inherited from the environment."""
    for var in CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults() -> None:
    config = load_config_from_env(None)

    assert config == AppConfig(
        server_port=8080,
        server_host="0.0.0.0",  # noqa: S104
        logging_level="INFO",
        root_path="",
    )


def test_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVER_PORT", "9090")

    assert load_config_from_env(None).server_port == 9090


def test_empty_port_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVER_PORT", "")

    assert load_config_from_env(None).server_port == 8080


@pytest.mark.parametrize("port", ["abc", "-1", "0", "65536", "80.5"])
def test_invalid_port_is_fatal(monkeypatch: pytest.MonkeyPatch, port: str) -> None:
    monkeypatch.setenv("SERVER_PORT", port)

    with pytest.raises(ValueError, match="SERVER_PORT"):
        load_config_from_env(None)


def test_env_file_is_loaded(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SERVER_PORT=9191\nROOT_PATH=/directory\n")

    try:
        config = load_config_from_env(env_file)
    finally:
        for var in CONFIG_VARS:
            os.environ.pop(var, None)

    assert config.server_port == 9191
    assert config.root_path == "/directory"


def test_get_env_str_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USERDIR_TEST_VALUE", raising=False)

    with pytest.raises(ValueError, match="is required"):
        get_env_str("USERDIR_TEST_VALUE", None)


def test_get_env_str_checker(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USERDIR_TEST_VALUE", "abc")

    assert get_env_str("USERDIR_TEST_VALUE", None, lambda value: value == "abc")
    with pytest.raises(ValueError, match="invalid value"):
        get_env_str("USERDIR_TEST_VALUE", None, lambda value: value == "xyz")


def test_get_env_int_checker(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USERDIR_TEST_VALUE", "5")

    assert get_env_int("USERDIR_TEST_VALUE", 1, lambda value: value > 0) == 5
    with pytest.raises(ValueError, match="invalid value"):
        get_env_int("USERDIR_TEST_VALUE", 1, lambda value: value > 10)


def test_configure_logging_invalid_level_falls_back_to_info() -> None:
    config = AppConfig(
        server_port=8080,
        server_host="127.0.0.1",
        logging_level="NOT_A_LEVEL",
        root_path="",
    )

    configure_logging(config)

    assert logging.getLogger().level == logging.INFO


def test_configure_logging_level() -> None:
    config = AppConfig(
        server_port=8080,
        server_host="127.0.0.1",
        logging_level="warning",
        root_path="",
    )

    configure_logging(config)

    assert logging.getLogger().level == logging.WARNING
