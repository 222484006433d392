# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: skip-file
import logging
import logging.config

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from scrypt_password_hasher._logging import (
    LogLevel,
    get_log_level,
    get_logging_config,
)
from scrypt_password_hasher._version import __version__
from scrypt_password_hasher.config import Settings
from scrypt_password_hasher.hashing import (
    InvalidInputError,
    PasswordVerificationResult,
    ScryptPasswordHasher,
)

APP_NAME = "scrypt-hasher"
APP_HELP = "Scrypt password hasher"

load_dotenv(override=False)

DEFAULT_SETTINGS = Settings.load()

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_short=True,
)

IterationCountOption = typer.Option(
    DEFAULT_SETTINGS.iteration_count,
    "--iteration-count",
    help="The scrypt CPU/memory cost (N), a power of two",
)
BlockSizeOption = typer.Option(
    DEFAULT_SETTINGS.block_size,
    "--block-size",
    help="The scrypt block size (r)",
)
ThreadCountOption = typer.Option(
    DEFAULT_SETTINGS.thread_count,
    "--thread-count",
    help="The scrypt parallelization factor (p)",
)
LogLevelOption = typer.Option(
    get_log_level(),
    "--log-level",
    help="The log level",
    case_sensitive=False,
)


def _configure_logging(log_level: LogLevel) -> logging.Logger:
    logging.config.dictConfig(get_logging_config(log_level.value))
    return logging.getLogger(__name__)


def _make_hasher(
    iteration_count: int,
    block_size: int,
    thread_count: int,
    hash_prefix: int | None = None,
) -> ScryptPasswordHasher:
    """Build a hasher from the defaults and the command line overrides."""
    overrides = {
        "iteration_count": iteration_count,
        "block_size": block_size,
        "thread_count": thread_count,
    }
    if hash_prefix is not None:
        overrides["hash_prefix"] = hash_prefix
    try:
        settings = Settings(
            **{**DEFAULT_SETTINGS.model_dump(), **overrides}
        )
    except ValidationError as error:
        raise typer.BadParameter(str(error)) from error
    return ScryptPasswordHasher(settings.cost_config())


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Scrypt password hasher command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("hash")
def hash_command(
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="The password to hash",
    ),
    iteration_count: int = IterationCountOption,
    block_size: int = BlockSizeOption,
    thread_count: int = ThreadCountOption,
    hash_prefix: int = typer.Option(
        DEFAULT_SETTINGS.hash_prefix,
        "--hash-prefix",
        help="The tag byte prepended to the hash (0-255)",
    ),
    log_level: LogLevel = LogLevelOption,
) -> None:
    """Hash a password and print the value to store."""
    logger = _configure_logging(log_level)
    hasher = _make_hasher(iteration_count, block_size, thread_count, hash_prefix)
    try:
        stored = hasher.hash_password(password)
    except InvalidInputError as error:
        raise typer.BadParameter(str(error), param_hint="--password") from error
    logger.debug("Password hashed")
    typer.echo(stored)


@app.command("verify")
def verify_command(
    stored: str = typer.Argument(..., help="The stored hash"),
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        help="The password to check",
    ),
    iteration_count: int = IterationCountOption,
    block_size: int = BlockSizeOption,
    thread_count: int = ThreadCountOption,
    log_level: LogLevel = LogLevelOption,
) -> None:
    """Verify a password against a stored hash.

    Exits with 0 if the password matches and 1 otherwise.
    """
    logger = _configure_logging(log_level)
    hasher = _make_hasher(iteration_count, block_size, thread_count)
    try:
        result = hasher.verify_hashed_password(stored, password)
    except InvalidInputError as error:
        raise typer.BadParameter(str(error)) from error
    logger.debug("Verification result: %s", result.value)
    typer.echo(result.value)
    if result is PasswordVerificationResult.FAILED:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
