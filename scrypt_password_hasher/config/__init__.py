# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for the scrypt hasher."""

from ._common import DOT_ENV_PATH, ENV_PREFIX, ROOT_DIR
from .settings import Settings
from .settings_manager import SettingsManager

__all__ = [
    "Settings",
    "SettingsManager",
    "DOT_ENV_PATH",
    "ENV_PREFIX",
    "ROOT_DIR",
]
