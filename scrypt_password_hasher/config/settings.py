# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt hasher settings module."""

import logging
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated, Self

from ..hashing.models import (
    MAX_BLOCK_SIZE,
    MAX_ITERATION_COUNT,
    MAX_THREAD_COUNT,
    MAX_TOTAL_COST,
    CostConfig,
)
from ._common import DOT_ENV_PATH, ENV_PREFIX, to_int
from ._cost import (
    get_block_size,
    get_hash_prefix,
    get_iteration_count,
    get_key_length,
    get_salt_length,
    get_thread_count,
)

LOG = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings class."""

    iteration_count: Annotated[
        int, Field(gt=1, le=MAX_ITERATION_COUNT)
    ] = get_iteration_count()
    block_size: Annotated[
        int, Field(ge=1, le=MAX_BLOCK_SIZE)
    ] = get_block_size()
    thread_count: Annotated[
        int, Field(ge=1, le=MAX_THREAD_COUNT)
    ] = get_thread_count()
    hash_prefix: Annotated[int, Field(ge=0, le=255)] = get_hash_prefix()
    key_length: Annotated[int, Field(ge=16, le=1024)] = get_key_length()
    salt_length: Annotated[int, Field(ge=8, le=1024)] = get_salt_length()
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        return cls()

    def cost_config(self) -> CostConfig:
        """Get an immutable snapshot of the cost parameters.

        Returns
        -------
        CostConfig
            The cost configuration
        """
        return CostConfig(
            iteration_count=self.iteration_count,
            block_size=self.block_size,
            thread_count=self.thread_count,
            hash_prefix=self.hash_prefix,
            key_length=self.key_length,
            salt_length=self.salt_length,
        )

    # pylint: disable=unused-argument
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        str
            The upper-cased log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @field_validator("hash_prefix", mode="before")
    @classmethod
    def parse_hash_prefix(cls, value: Any, info: ValidationInfo) -> Any:
        """Accept hex (0x..) strings for the hash prefix.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        Any
            The parsed integer, or the value unchanged
        """
        if isinstance(value, str):
            try:
                return to_int(value)
            except ValueError:
                return value
        return value

    @field_validator("iteration_count")
    @classmethod
    def validate_iteration_count(cls, value: int, info: ValidationInfo) -> int:
        """Ensure the iteration count is a power of two.

        Parameters
        ----------
        value : int
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        int
            The validated value

        Raises
        ------
        ValueError
            If the value is not a power of two
        """
        if value & (value - 1):
            raise ValueError(
                f"iteration_count must be a power of two, got {value}"
            )
        if value > 0xFFFF:
            LOG.warning(
                "iteration_count %d does not fit the legacy packed layout",
                value,
            )
        return value

    @model_validator(mode="after")
    def validate_total_cost(self) -> Self:
        """Limit the combined cost so stored hashes stay verifiable.

        Returns
        -------
        Settings
            The settings instance after validation

        Raises
        ------
        ValueError
            If N * r * p is above the supported limit
        """
        total = self.iteration_count * self.block_size * self.thread_count
        if total > MAX_TOTAL_COST:
            raise ValueError(
                f"iteration_count * block_size * thread_count must be at "
                f"most {MAX_TOTAL_COST}, got {total}"
            )
        return self
