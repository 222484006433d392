# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-param-doc

"""Tests for the rehash policy."""

import pytest

from scrypt_password_hasher.hashing import (
    CostConfig,
    LegacyHashHeader,
    ModernHashHeader,
    needs_rehash,
)

CURRENT = CostConfig(iteration_count=16384, block_size=8, thread_count=1)


def _modern(n: int, r: int, p: int) -> ModernHashHeader:
    return ModernHashHeader(
        version=2,
        iteration_count=n,
        block_size=r,
        thread_count=p,
        salt=b"salt",
        digest=b"digest",
    )


def test_same_parameters() -> None:
    """Test that equal parameters do not need a rehash."""
    assert not needs_rehash(_modern(16384, 8, 1), CURRENT)


def test_legacy_header_with_same_parameters() -> None:
    """Test that the layout version does not matter, only the costs."""
    header = LegacyHashHeader(
        version=1,
        iteration_count=16384,
        block_size=8,
        thread_count=1,
        salt=b"salt",
        digest=b"digest",
    )
    assert not needs_rehash(header, CURRENT)


@pytest.mark.parametrize(
    "params",
    [
        (32768, 8, 1),
        (8192, 8, 1),
        (16384, 16, 1),
        (16384, 4, 1),
        (16384, 8, 2),
    ],
)
def test_any_difference(params: tuple[int, int, int]) -> None:
    """Test that both higher and lower stored costs need a rehash."""
    assert needs_rehash(_modern(*params), CURRENT)


def test_ignores_lengths_and_prefix() -> None:
    """Test that key length, salt length and prefix are not compared."""
    current = CostConfig(hash_prefix=0x01, key_length=32, salt_length=32)
    assert not needs_rehash(_modern(16384, 8, 1), current)
