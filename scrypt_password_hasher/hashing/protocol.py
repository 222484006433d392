# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Protocol, runtime_checkable

from .models import PasswordVerificationResult


@runtime_checkable
class PasswordHasher(Protocol):  # pragma: no cover
    """Protocol for password hashing implementations."""

    def hash_password(self, plain: str) -> str:
        """Hash a plain text password.

        Parameters
        ----------
        plain : str
            The plain text password
        """
        ...

    def verify_hashed_password(
        self, stored: str, plain: str
    ) -> PasswordVerificationResult:
        """Verify a plain text password against a stored hash.

        Parameters
        ----------
        stored : str
            The stored hash
        plain : str
            The plain text password
        """
        ...


__all__ = ["PasswordHasher"]
