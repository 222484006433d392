# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Scrypt cost related configuration.

Environment variables (with prefix SCRYPT_HASHER_)
--------------------------------------------------
ITERATION_COUNT (int) # default: 16384
BLOCK_SIZE (int) # default: 8
THREAD_COUNT (int) # default: 1
HASH_PREFIX (int, decimal or 0x..) # default: 0xC8
KEY_LENGTH (int) # default: 64
SALT_LENGTH (int) # default: 16

Command line arguments (no prefix)
----------------------------------
--iteration-count (int)
--block-size (int)
--thread-count (int)
--hash-prefix (int)
--key-length (int)
--salt-length (int)
"""

from ..hashing.models import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_HASH_PREFIX,
    DEFAULT_ITERATION_COUNT,
    DEFAULT_KEY_LENGTH,
    DEFAULT_SALT_LENGTH,
    DEFAULT_THREAD_COUNT,
)
from ._common import get_value, to_int


def get_iteration_count() -> int:
    """Get the scrypt iteration count (N).

    Returns
    -------
    int
        The iteration count
    """
    return get_value(
        "--iteration-count", "ITERATION_COUNT", int, DEFAULT_ITERATION_COUNT
    )


def get_block_size() -> int:
    """Get the scrypt block size (r).

    Returns
    -------
    int
        The block size
    """
    return get_value("--block-size", "BLOCK_SIZE", int, DEFAULT_BLOCK_SIZE)


def get_thread_count() -> int:
    """Get the scrypt parallelization factor (p).

    Returns
    -------
    int
        The thread count
    """
    return get_value(
        "--thread-count", "THREAD_COUNT", int, DEFAULT_THREAD_COUNT
    )


def get_hash_prefix() -> int:
    """Get the tag byte prepended to new hashes.

    Returns
    -------
    int
        The hash prefix
    """
    return get_value("--hash-prefix", "HASH_PREFIX", to_int, DEFAULT_HASH_PREFIX)


def get_key_length() -> int:
    """Get the derived key length in bytes.

    Returns
    -------
    int
        The key length
    """
    return get_value("--key-length", "KEY_LENGTH", int, DEFAULT_KEY_LENGTH)


def get_salt_length() -> int:
    """Get the salt length in bytes.

    Returns
    -------
    int
        The salt length
    """
    return get_value("--salt-length", "SALT_LENGTH", int, DEFAULT_SALT_LENGTH)
