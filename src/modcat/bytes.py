# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Byte-count values rendered in the notation module parameters expect."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

BYTES: Final[int] = 1
KILOBYTES: Final[int] = 1024 * BYTES
MEGABYTES: Final[int] = 1024 * KILOBYTES
GIGABYTES: Final[int] = 1024 * MEGABYTES
TERABYTES: Final[int] = 1024 * GIGABYTES

_UNITS: Final[dict[str, int]] = {
    "B": BYTES,
    "KB": KILOBYTES,
    "MB": MEGABYTES,
    "GB": GIGABYTES,
    "TB": TERABYTES,
}
_BYTES_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMGT]?B)\s*$", re.IGNORECASE)


@dataclass(frozen=True, slots=True, order=True)
class Bytes:
    """Non-negative quantity of bytes."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"byte count must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return format_bytes(self)


def kilobytes(count: int) -> Bytes:
    """Return ``count`` kilobytes."""

    return Bytes(count * KILOBYTES)


def megabytes(count: int) -> Bytes:
    """Return ``count`` megabytes."""

    return Bytes(count * MEGABYTES)


def gigabytes(count: int) -> Bytes:
    """Return ``count`` gigabytes."""

    return Bytes(count * GIGABYTES)


def terabytes(count: int) -> Bytes:
    """Return ``count`` terabytes."""

    return Bytes(count * TERABYTES)


def format_bytes(size: Bytes | int) -> str:
    """Render ``size`` using the largest unit that loses no information.

    Args:
        size: Byte quantity to render.

    Returns:
        str: Text such as ``"0B"``, ``"1023B"``, ``"1536KB"`` or ``"2MB"``.
    """

    value = size.value if isinstance(size, Bytes) else Bytes(size).value
    if value == 0:
        return "0B"
    for suffix, unit, next_unit in (
        ("B", BYTES, KILOBYTES),
        ("KB", KILOBYTES, MEGABYTES),
        ("MB", MEGABYTES, GIGABYTES),
        ("GB", GIGABYTES, TERABYTES),
    ):
        if value % next_unit != 0:
            return f"{value // unit}{suffix}"
    return f"{value // TERABYTES}TB"


def parse_bytes(text: str) -> Bytes:
    """Parse byte-count notation such as ``"2MB"`` or ``"1.5GB"``.

    Args:
        text: Quantity followed by one of ``B``, ``KB``, ``MB``, ``GB``, ``TB``.

    Returns:
        Bytes: Parsed quantity; fractional results are truncated to whole bytes.

    Raises:
        ValueError: If ``text`` is not in byte-count notation.
    """

    match = _BYTES_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid byte count '{text}'")
    number, unit = match.groups()
    return Bytes(int(float(number) * _UNITS[unit.upper()]))


__all__ = [
    "Bytes",
    "format_bytes",
    "gigabytes",
    "kilobytes",
    "megabytes",
    "parse_bytes",
    "terabytes",
]
