# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing and verification."""

from ._format import (
    HashHeader,
    LegacyHashHeader,
    ModernHashHeader,
    format_hash_header,
    pack_cost_parameters,
    parse_hash_header,
    unpack_cost_parameters,
)
from ._policy import needs_rehash
from ._scrypt_encoder import ScryptEncoder
from .errors import CorruptHashError, HashingError, InvalidInputError
from .hasher import CostConfigProvider, ScryptPasswordHasher
from .models import CostConfig, PasswordVerificationResult
from .protocol import PasswordHasher

__all__ = [
    "CorruptHashError",
    "CostConfig",
    "CostConfigProvider",
    "HashHeader",
    "HashingError",
    "InvalidInputError",
    "LegacyHashHeader",
    "ModernHashHeader",
    "PasswordHasher",
    "PasswordVerificationResult",
    "ScryptEncoder",
    "ScryptPasswordHasher",
    "format_hash_header",
    "needs_rehash",
    "pack_cost_parameters",
    "parse_hash_header",
    "unpack_cost_parameters",
]
