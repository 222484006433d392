# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=line-too-long,too-many-try-statements
# flake8: noqa: E501,C901

"""Scrypt key derivation and constant-time comparison (stdlib)."""

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field

from ._format import (
    MODERN_VERSION,
    ModernHashHeader,
    format_hash_header,
    parse_hash_header,
)
from .errors import CorruptHashError
from .models import CostConfig

# OpenSSL rejects maxmem values that do not fit in a C int
_MAX_MEMORY = 2**31 - 1
_MEMORY_HEADROOM = 1024 * 1024


def required_memory(iteration_count: int, block_size: int, thread_count: int) -> int:
    """Get the maxmem value scrypt needs for the given parameters.

    Parameters
    ----------
    iteration_count : int
        The scrypt N.
    block_size : int
        The scrypt r.
    thread_count : int
        The scrypt p.

    Returns
    -------
    int
        The memory limit in bytes to pass to ``hashlib.scrypt``.
    """
    needed = 128 * block_size * (iteration_count + thread_count + 2)
    return min(needed + _MEMORY_HEADROOM, _MAX_MEMORY)


@dataclass(frozen=True)
class ScryptEncoder:
    """Scrypt encoder producing and checking inner hash strings."""

    config: CostConfig = field(default_factory=CostConfig)

    @staticmethod
    def _derive(
        plain: str, salt: bytes, n: int, r: int, p: int, dklen: int
    ) -> bytes:
        return hashlib.scrypt(
            plain.encode("utf-8"),
            salt=salt,
            n=n,
            r=r,
            p=p,
            dklen=dklen,
            maxmem=required_memory(n, r, p),
        )

    def encode(self, plain: str) -> str:
        """Hash a password using scrypt.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The inner encoded string, always in the modern layout.
        """
        cfg = self.config
        salt = secrets.token_bytes(cfg.salt_length)
        key = self._derive(
            plain,
            salt,
            cfg.iteration_count,
            cfg.block_size,
            cfg.thread_count,
            cfg.key_length,
        )
        return format_hash_header(
            ModernHashHeader(
                version=MODERN_VERSION,
                iteration_count=cfg.iteration_count,
                block_size=cfg.block_size,
                thread_count=cfg.thread_count,
                salt=salt,
                digest=key,
            )
        )

    def compare(self, plain: str, encoded: str) -> bool:
        """Check a password against an inner encoded string.

        Both the legacy and the modern layouts are accepted, the stored
        parameters and digest length are used for the derivation.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        encoded : str
            The inner encoded string.

        Returns
        -------
        bool
            True if the password matches, False otherwise.
        """
        try:
            header = parse_hash_header(encoded)
        except CorruptHashError:
            return False
        try:
            key = self._derive(
                plain,
                header.salt,
                header.iteration_count,
                header.block_size,
                header.thread_count,
                len(header.digest),
            )
        except (ValueError, MemoryError, OverflowError):
            # unsupported parameters (e.g. N not a power of two)
            return False
        return hmac.compare_digest(key, header.digest)


__all__ = ["ScryptEncoder", "required_memory"]
