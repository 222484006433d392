# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-try-statements
# flake8: noqa: E501

"""Parsing and rendering of the inner scrypt hash layouts.

Two layouts exist, selected by the version marker in the first field:

- legacy (version < 2): ``$s1$<packed-hex>$<salt>$<digest>`` where the
  packed value holds ``N << 16 | r << 8 | p``.
- modern (version >= 2): ``$s2$<N>$<r>$<p>$<salt>$<digest>``.

Cost parameters above the limits in ``models`` are treated as corrupt.
"""

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import CorruptHashError
from .models import (
    MAX_BLOCK_SIZE,
    MAX_ITERATION_COUNT,
    MAX_THREAD_COUNT,
    MAX_TOTAL_COST,
)

SEPARATOR = "$"
MODERN_VERSION = 2
LEGACY_VERSION = 1

_MARKER_RE = re.compile(r"s([0-9])")
_DECIMAL_RE = re.compile(r"[0-9]{1,10}")
_HEX_RE = re.compile(r"[0-9a-fA-F]{1,16}")


@dataclass(frozen=True)
class LegacyHashHeader:
    """Header of a hash whose cost parameters are packed in one hex field."""

    version: int
    iteration_count: int
    block_size: int
    thread_count: int
    salt: bytes
    digest: bytes

    @property
    def packed(self) -> int:
        """The packed cost parameters."""
        return pack_cost_parameters(
            self.iteration_count, self.block_size, self.thread_count
        )


@dataclass(frozen=True)
class ModernHashHeader:
    """Header of a hash with one decimal field per cost parameter."""

    version: int
    iteration_count: int
    block_size: int
    thread_count: int
    salt: bytes
    digest: bytes


HashHeader = Union[LegacyHashHeader, ModernHashHeader]


def pack_cost_parameters(
    iteration_count: int, block_size: int, thread_count: int
) -> int:
    """Pack the cost parameters into a single integer.

    Parameters
    ----------
    iteration_count : int
        The scrypt N (16 bits).
    block_size : int
        The scrypt r (8 bits).
    thread_count : int
        The scrypt p (8 bits).

    Returns
    -------
    int
        The packed value.

    Raises
    ------
    ValueError
        If a parameter does not fit in its bit range.
    """
    if not 0 < iteration_count <= 0xFFFF:
        raise ValueError(f"iteration_count out of range: {iteration_count}")
    if not 0 < block_size <= 0xFF:
        raise ValueError(f"block_size out of range: {block_size}")
    if not 0 < thread_count <= 0xFF:
        raise ValueError(f"thread_count out of range: {thread_count}")
    return iteration_count << 16 | block_size << 8 | thread_count


def unpack_cost_parameters(packed: int) -> Tuple[int, int, int]:
    """Unpack the cost parameters from a packed integer.

    Parameters
    ----------
    packed : int
        The packed value.

    Returns
    -------
    Tuple[int, int, int]
        (iteration_count, block_size, thread_count)
    """
    iteration_count = packed >> 16 & 0xFFFF
    block_size = packed >> 8 & 0xFF
    thread_count = packed & 0xFF
    return iteration_count, block_size, thread_count


def _b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _b64decode(value: str, name: str) -> bytes:
    try:
        decoded = base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as error:
        raise CorruptHashError(f"Invalid base64 {name} field") from error
    if not decoded:
        raise CorruptHashError(f"Empty {name} field")
    return decoded


def _decimal(value: str, name: str) -> int:
    if not _DECIMAL_RE.fullmatch(value):
        raise CorruptHashError(f"Invalid {name} field")
    number = int(value, 10)
    if number < 1:
        raise CorruptHashError(f"Invalid {name}: {number}")
    return number


def _check_costs(
    iteration_count: int, block_size: int, thread_count: int
) -> None:
    if iteration_count > MAX_ITERATION_COUNT:
        raise CorruptHashError(f"Iteration count too large: {iteration_count}")
    if block_size > MAX_BLOCK_SIZE:
        raise CorruptHashError(f"Block size too large: {block_size}")
    if thread_count > MAX_THREAD_COUNT:
        raise CorruptHashError(f"Thread count too large: {thread_count}")
    if iteration_count * block_size * thread_count > MAX_TOTAL_COST:
        raise CorruptHashError("Cost parameters exceed the supported limit")


def _get_version(fields: list[str]) -> int:
    if len(fields) < 2 or fields[0] != "":
        raise CorruptHashError("Missing version field")
    match = _MARKER_RE.fullmatch(fields[1])
    if not match:
        raise CorruptHashError("Invalid version field")
    return int(match.group(1))


def _parse_modern(version: int, fields: list[str]) -> ModernHashHeader:
    if len(fields) != 7:
        raise CorruptHashError(
            f"Expected 6 fields for version {version}, got {len(fields) - 1}"
        )
    iteration_count = _decimal(fields[2], "iteration count")
    block_size = _decimal(fields[3], "block size")
    thread_count = _decimal(fields[4], "thread count")
    _check_costs(iteration_count, block_size, thread_count)
    return ModernHashHeader(
        version=version,
        iteration_count=iteration_count,
        block_size=block_size,
        thread_count=thread_count,
        salt=_b64decode(fields[5], "salt"),
        digest=_b64decode(fields[6], "digest"),
    )


def _parse_legacy(version: int, fields: list[str]) -> LegacyHashHeader:
    if len(fields) != 5:
        raise CorruptHashError(
            f"Expected 4 fields for version {version}, got {len(fields) - 1}"
        )
    if not _HEX_RE.fullmatch(fields[2]):
        raise CorruptHashError("Invalid packed parameters field")
    iteration_count, block_size, thread_count = unpack_cost_parameters(
        int(fields[2], 16)
    )
    if not (iteration_count and block_size and thread_count):
        raise CorruptHashError("Packed parameters contain a zero cost")
    _check_costs(iteration_count, block_size, thread_count)
    return LegacyHashHeader(
        version=version,
        iteration_count=iteration_count,
        block_size=block_size,
        thread_count=thread_count,
        salt=_b64decode(fields[3], "salt"),
        digest=_b64decode(fields[4], "digest"),
    )


def parse_hash_header(encoded: str) -> HashHeader:
    """Parse an inner scrypt string.

    Parameters
    ----------
    encoded : str
        The inner encoded string (without the outer tag byte).

    Returns
    -------
    HashHeader
        The legacy or modern header, depending on the version marker.

    Raises
    ------
    CorruptHashError
        If the string does not follow either layout.
    """
    fields = encoded.split(SEPARATOR)
    version = _get_version(fields)
    if version >= MODERN_VERSION:
        return _parse_modern(version, fields)
    return _parse_legacy(version, fields)


def format_hash_header(header: HashHeader) -> str:
    """Render a header back to its inner string.

    Parameters
    ----------
    header : HashHeader
        The header to render.

    Returns
    -------
    str
        The inner encoded string.
    """
    if isinstance(header, LegacyHashHeader):
        fields = [
            "",
            f"s{header.version}",
            format(header.packed, "x"),
            _b64encode(header.salt),
            _b64encode(header.digest),
        ]
    else:
        fields = [
            "",
            f"s{header.version}",
            str(header.iteration_count),
            str(header.block_size),
            str(header.thread_count),
            _b64encode(header.salt),
            _b64encode(header.digest),
        ]
    return SEPARATOR.join(fields)


__all__ = [
    "HashHeader",
    "LegacyHashHeader",
    "ModernHashHeader",
    "LEGACY_VERSION",
    "MODERN_VERSION",
    "SEPARATOR",
    "format_hash_header",
    "pack_cost_parameters",
    "parse_hash_header",
    "unpack_cost_parameters",
]
