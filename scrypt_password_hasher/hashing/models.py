# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Cost configuration and verification result types."""

from dataclasses import dataclass
from enum import Enum

DEFAULT_ITERATION_COUNT = 16384  # 2^14
DEFAULT_BLOCK_SIZE = 8
DEFAULT_THREAD_COUNT = 1
DEFAULT_HASH_PREFIX = 0xC8
DEFAULT_KEY_LENGTH = 64
DEFAULT_SALT_LENGTH = 16

# upper bounds for hashes we produce and for stored hashes we accept
MAX_ITERATION_COUNT = 2**20
MAX_BLOCK_SIZE = 0xFF
MAX_THREAD_COUNT = 0xFF
# N * r * p, 64 times the default cost
MAX_TOTAL_COST = 2**23


class PasswordVerificationResult(str, Enum):
    """The outcome of a password verification."""

    FAILED = "failed"
    SUCCESS = "success"
    SUCCESS_REHASH_NEEDED = "success_rehash_needed"

    @property
    def succeeded(self) -> bool:
        """Whether the password matched the stored hash.

        Returns
        -------
        bool
            True for both success results.
        """
        return self is not PasswordVerificationResult.FAILED


@dataclass(frozen=True)
class CostConfig:
    """Snapshot of the scrypt cost parameters used for a single call.

    Attributes
    ----------
    iteration_count : int
        The CPU/memory cost (scrypt ``N``).
    block_size : int
        The block size (scrypt ``r``).
    thread_count : int
        The parallelization factor (scrypt ``p``).
    hash_prefix : int
        The outer tag byte prepended to new hashes.
    key_length : int
        The derived key length in bytes.
    salt_length : int
        The random salt length in bytes.
    """

    iteration_count: int = DEFAULT_ITERATION_COUNT
    block_size: int = DEFAULT_BLOCK_SIZE
    thread_count: int = DEFAULT_THREAD_COUNT
    hash_prefix: int = DEFAULT_HASH_PREFIX
    key_length: int = DEFAULT_KEY_LENGTH
    salt_length: int = DEFAULT_SALT_LENGTH

    def __post_init__(self) -> None:
        """Validate the parameters.

        Raises
        ------
        ValueError
            If any parameter is out of range.
        """
        n = self.iteration_count
        if n < 2 or n & (n - 1):
            raise ValueError(
                f"iteration_count must be a power of two > 1, got {n}"
            )
        if n > MAX_ITERATION_COUNT:
            raise ValueError(
                f"iteration_count must be at most {MAX_ITERATION_COUNT}, got {n}"
            )
        if not 1 <= self.block_size <= MAX_BLOCK_SIZE:
            raise ValueError(f"Invalid block_size: {self.block_size}")
        if not 1 <= self.thread_count <= MAX_THREAD_COUNT:
            raise ValueError(f"Invalid thread_count: {self.thread_count}")
        if n * self.block_size * self.thread_count > MAX_TOTAL_COST:
            raise ValueError(
                f"Total cost N*r*p must be at most {MAX_TOTAL_COST}"
            )
        if not 0 <= self.hash_prefix <= 0xFF:
            raise ValueError(f"Invalid hash_prefix: {self.hash_prefix}")
        if self.key_length < 1 or self.salt_length < 1:
            raise ValueError("key_length and salt_length must be positive")

    @property
    def cost_parameters(self) -> tuple[int, int, int]:
        """The parameters compared against stored hashes.

        Returns
        -------
        tuple[int, int, int]
            (iteration_count, block_size, thread_count)
        """
        return (self.iteration_count, self.block_size, self.thread_count)


__all__ = [
    "CostConfig",
    "PasswordVerificationResult",
    "DEFAULT_ITERATION_COUNT",
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_THREAD_COUNT",
    "DEFAULT_HASH_PREFIX",
    "DEFAULT_KEY_LENGTH",
    "DEFAULT_SALT_LENGTH",
    "MAX_BLOCK_SIZE",
    "MAX_ITERATION_COUNT",
    "MAX_THREAD_COUNT",
    "MAX_TOTAL_COST",
]
