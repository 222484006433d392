# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-param-doc

"""Tests for the hashing models."""

import dataclasses

import pytest

from scrypt_password_hasher.hashing import (
    CostConfig,
    PasswordVerificationResult,
)


def test_default_cost_config() -> None:
    """Test the default cost configuration."""
    config = CostConfig()
    assert config.iteration_count == 16384
    assert config.block_size == 8
    assert config.thread_count == 1
    assert config.hash_prefix == 0xC8
    assert config.cost_parameters == (16384, 8, 1)


def test_cost_config_is_frozen() -> None:
    """Test that a snapshot cannot be modified."""
    config = CostConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.iteration_count = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"iteration_count": 1},
        {"iteration_count": 1000},
        {"block_size": 0},
        {"block_size": 256},
        {"thread_count": 0},
        {"thread_count": 256},
        {"iteration_count": 2**21},
        {"iteration_count": 2**20, "block_size": 16},
        {"iteration_count": 16384, "block_size": 255, "thread_count": 3},
        {"hash_prefix": -1},
        {"hash_prefix": 256},
        {"key_length": 0},
        {"salt_length": 0},
    ],
)
def test_invalid_cost_config(kwargs: dict[str, int]) -> None:
    """Test that out of range parameters are rejected."""
    with pytest.raises(ValueError):
        CostConfig(**kwargs)


def test_cost_config_at_the_limits() -> None:
    """Test the largest accepted cost parameters."""
    config = CostConfig(iteration_count=2**20, block_size=8, thread_count=1)
    assert config.cost_parameters == (2**20, 8, 1)


def test_verification_result() -> None:
    """Test the verification result values."""
    assert not PasswordVerificationResult.FAILED.succeeded
    assert PasswordVerificationResult.SUCCESS.succeeded
    assert PasswordVerificationResult.SUCCESS_REHASH_NEEDED.succeeded
    assert PasswordVerificationResult("success") is (
        PasswordVerificationResult.SUCCESS
    )
