# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc
"""Test scrypt_password_hasher.config.settings.*."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from scrypt_password_hasher.config import ENV_PREFIX, Settings, SettingsManager
from scrypt_password_hasher.hashing import CostConfig


def test_default_settings() -> None:
    """Ensure default settings are loaded properly."""
    settings = Settings()
    assert settings.iteration_count == 16384
    assert settings.block_size == 8
    assert settings.thread_count == 1
    assert settings.hash_prefix == 0xC8
    assert settings.log_level == "INFO"


@patch.dict(
    os.environ,
    {
        f"{ENV_PREFIX}ITERATION_COUNT": "32768",
        f"{ENV_PREFIX}BLOCK_SIZE": "16",
        f"{ENV_PREFIX}THREAD_COUNT": "2",
    },
)
def test_env_override() -> None:
    """Ensure environment variables override default settings."""
    settings = Settings()
    assert settings.iteration_count == 32768
    assert settings.block_size == 16
    assert settings.thread_count == 2


@pytest.mark.parametrize(
    "value,expected",
    [("0xC8", 0xC8), ("0x01", 1), ("7", 7), ("255", 255)],
)
def test_hash_prefix_from_env(value: str, expected: int) -> None:
    """Test hash prefix parsing from decimal and hex strings."""
    with patch.dict(os.environ, {f"{ENV_PREFIX}HASH_PREFIX": value}):
        assert Settings().hash_prefix == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"iteration_count": 1},
        {"iteration_count": 10000},
        {"block_size": 0},
        {"block_size": 256},
        {"thread_count": 0},
        {"iteration_count": 2**21},
        {"iteration_count": 2**20, "block_size": 16},
        {"iteration_count": 16384, "block_size": 255, "thread_count": 3},
        {"hash_prefix": 256},
        {"hash_prefix": "not a number"},
        {"key_length": 8},
        {"salt_length": 4},
    ],
)
def test_invalid_values(kwargs: dict[str, object]) -> None:
    """Test that invalid values are rejected."""
    with pytest.raises(ValidationError):
        Settings(**kwargs)  # type: ignore[arg-type]


@patch.dict(os.environ, {f"{ENV_PREFIX}ITERATION_COUNT": "1000"})
def test_invalid_env_value() -> None:
    """Test that an invalid environment value is rejected."""
    with pytest.raises(ValidationError):
        Settings()


def test_log_level_validator() -> None:
    """Test log level is converted to uppercase if provided as a string."""
    settings = Settings(log_level="debug")
    assert settings.log_level == "DEBUG"


def test_cost_config() -> None:
    """Test the cost configuration snapshot."""
    settings = Settings(
        iteration_count=1024,
        block_size=4,
        thread_count=2,
        hash_prefix=3,
        key_length=32,
        salt_length=24,
    )
    assert settings.cost_config() == CostConfig(
        iteration_count=1024,
        block_size=4,
        thread_count=2,
        hash_prefix=3,
        key_length=32,
        salt_length=24,
    )


def test_settings_are_frozen() -> None:
    """Test that settings cannot change under a running call."""
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.iteration_count = 32768  # type: ignore[misc]


def test_settings_manager() -> None:
    """Test loading, caching and resetting the settings."""
    first = SettingsManager.get_settings()
    assert SettingsManager.get_settings() is first

    os.environ[f"{ENV_PREFIX}ITERATION_COUNT"] = "32768"
    assert SettingsManager.get_cost_config().iteration_count == 16384
    reloaded = SettingsManager.load_settings(force_reload=True)
    assert reloaded is not first
    assert SettingsManager.get_cost_config().iteration_count == 32768

    SettingsManager.reset_settings()
    os.environ.pop(f"{ENV_PREFIX}ITERATION_COUNT")
    assert SettingsManager.get_settings().iteration_count == 16384


def test_settings_manager_set_settings() -> None:
    """Test replacing the settings instance."""
    settings = Settings(iteration_count=64)
    SettingsManager.set_settings(settings)
    assert SettingsManager.get_settings() is settings
    assert SettingsManager.get_cost_config().iteration_count == 64
