# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Rehash policy for successfully verified hashes."""

from ._format import HashHeader
from .models import CostConfig


def needs_rehash(header: HashHeader, config: CostConfig) -> bool:
    """Check if a verified hash was produced with other cost parameters.

    Any difference counts, so lowering the configured costs also
    triggers a rehash.

    Parameters
    ----------
    header : HashHeader
        The parsed header of a hash that already passed comparison.
    config : CostConfig
        The current cost configuration.

    Returns
    -------
    bool
        True if the hash should be re-created, False otherwise.
    """
    return (
        (header.iteration_count != config.iteration_count)
        or (header.block_size != config.block_size)
        or (header.thread_count != config.thread_count)
    )


__all__ = ["needs_rehash"]
