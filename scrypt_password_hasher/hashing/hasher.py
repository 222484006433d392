# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=too-many-try-statements,too-many-return-statements
"""Scrypt password hasher with a versioned outer envelope."""

import base64
import binascii
import logging
from typing import Callable

from ._format import parse_hash_header
from ._policy import needs_rehash
from ._scrypt_encoder import ScryptEncoder
from .errors import CorruptHashError, InvalidInputError
from .models import CostConfig, PasswordVerificationResult
from .protocol import PasswordHasher

LOG = logging.getLogger(__name__)

CostConfigProvider = Callable[[], CostConfig]


def _ensure_not_blank(value: str, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{name} must be a non-empty string")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as error:
        raise InvalidInputError(f"{name} is not valid unicode text") from error


class ScryptPasswordHasher(PasswordHasher):
    """Hash passwords with scrypt and flag hashes with outdated costs.

    The stored value is ``base64(prefix_byte + inner)`` where ``inner``
    is the scrypt encoded string. The prefix byte is never checked on
    verification.
    """

    def __init__(
        self, config: CostConfig | CostConfigProvider | None = None
    ) -> None:
        """Initialize the hasher.

        Parameters
        ----------
        config : CostConfig | Callable[[], CostConfig] | None
            A fixed cost configuration, or a callable returning the
            current one. It is read once per call. Defaults to
            ``CostConfig()``.
        """
        if config is None:
            config = CostConfig()
        if isinstance(config, CostConfig):
            fixed = config
            self._get_config: CostConfigProvider = lambda: fixed
        else:
            self._get_config = config

    @property
    def config(self) -> CostConfig:
        """The current cost configuration."""
        return self._get_config()

    def hash_password(self, plain: str) -> str:
        """Hash a password with the current cost configuration.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The base64 encoded hash to store.

        Raises
        ------
        InvalidInputError
            If the password is empty, whitespace only or not encodable
            as utf-8.
        """
        _ensure_not_blank(plain, "Password")
        config = self._get_config()
        LOG.debug(
            "Hashing password with N=%d r=%d p=%d",
            config.iteration_count,
            config.block_size,
            config.thread_count,
        )
        inner = ScryptEncoder(config).encode(plain)
        payload = bytes([config.hash_prefix]) + inner.encode("utf-8")
        return base64.b64encode(payload).decode("ascii")

    def verify_hashed_password(
        self, stored: str, plain: str
    ) -> PasswordVerificationResult:
        """Verify a password against a stored hash.

        Parameters
        ----------
        stored : str
            The stored hash, as returned by ``hash_password``.
        plain : str
            The plain secret to check.

        Returns
        -------
        PasswordVerificationResult
            ``FAILED`` if the password does not match or the stored value
            cannot be decoded, ``SUCCESS_REHASH_NEEDED`` if it matches but
            was hashed with other cost parameters, ``SUCCESS`` otherwise.

        Raises
        ------
        InvalidInputError
            If the stored hash or the password is empty, or either is
            not encodable as utf-8.
        """
        _ensure_not_blank(stored, "Stored hash")
        _ensure_not_blank(plain, "Password")
        config = self._get_config()
        try:
            payload = base64.b64decode(
                stored.strip().encode("ascii"), validate=True
            )
        except (binascii.Error, UnicodeEncodeError):
            LOG.debug("Stored hash is not valid base64")
            return PasswordVerificationResult.FAILED
        if len(payload) < 2:
            LOG.debug("Stored hash has no scrypt payload")
            return PasswordVerificationResult.FAILED
        try:
            inner = payload[1:].decode("utf-8")
        except UnicodeDecodeError:
            LOG.debug("Stored hash payload is not valid utf-8")
            return PasswordVerificationResult.FAILED
        if not ScryptEncoder(config).compare(plain, inner):
            return PasswordVerificationResult.FAILED
        try:
            header = parse_hash_header(inner)
        except CorruptHashError as error:
            LOG.error("Verified hash has a corrupt header: %s", error)
            return PasswordVerificationResult.FAILED
        if needs_rehash(header, config):
            LOG.debug(
                "Hash parameters N=%d r=%d p=%d are outdated",
                header.iteration_count,
                header.block_size,
                header.thread_count,
            )
            return PasswordVerificationResult.SUCCESS_REHASH_NEEDED
        return PasswordVerificationResult.SUCCESS


__all__ = ["ScryptPasswordHasher", "CostConfigProvider"]
