# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing errors."""


class HashingError(Exception):
    """Base class for password hashing errors."""


class InvalidInputError(HashingError, ValueError):
    """Raised when a password or a stored hash is empty or not a string."""


class CorruptHashError(HashingError, ValueError):
    """Raised when an inner scrypt string cannot be parsed."""


__all__ = ["HashingError", "InvalidInputError", "CorruptHashError"]
