# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator

import pytest

from scrypt_password_hasher.config import SettingsManager
from scrypt_password_hasher.hashing import CostConfig

ENV_KEY_PREFIX = "SCRYPT_HASHER_"


@pytest.fixture(scope="function", autouse=True)
def reset_settings_and_env() -> Generator[None, None, None]:
    """Automatically reset SettingsManager and env before each test."""
    SettingsManager.reset_settings()
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
    original_argv = sys.argv[:]
    yield
    sys.argv = original_argv
    SettingsManager.reset_settings()


@pytest.fixture(name="fast_config")
def fast_config_fixture() -> CostConfig:
    """Cheap cost parameters to keep the tests fast."""
    return CostConfig(iteration_count=16, block_size=2, thread_count=1)
