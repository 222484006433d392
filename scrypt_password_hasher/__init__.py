# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt password hashing with rehash detection."""

from ._version import __version__
from .config import SettingsManager
from .hashing import (
    CorruptHashError,
    CostConfig,
    HashingError,
    InvalidInputError,
    PasswordHasher,
    PasswordVerificationResult,
    ScryptPasswordHasher,
    needs_rehash,
    parse_hash_header,
)

password_hasher: PasswordHasher = ScryptPasswordHasher(
    SettingsManager.get_cost_config
)

__all__ = [
    "__version__",
    "password_hasher",
    "CorruptHashError",
    "CostConfig",
    "HashingError",
    "InvalidInputError",
    "PasswordHasher",
    "PasswordVerificationResult",
    "ScryptPasswordHasher",
    "SettingsManager",
    "needs_rehash",
    "parse_hash_header",
]
