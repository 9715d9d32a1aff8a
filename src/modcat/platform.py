# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform-specific shared library naming."""

from __future__ import annotations

import platform
from typing import Final

_LIBRARY_PATTERNS: Final[dict[str, tuple[str, str]]] = {
    "darwin": ("lib", ".dylib"),
    "windows": ("", ".dll"),
}
_DEFAULT_PATTERN: Final[tuple[str, str]] = ("lib", ".so")


def expand_library_name(name: str, *, system: str | None = None) -> str:
    """Return the platform-specific filename for the logical library ``name``.

    Args:
        name: Logical library name such as ``"testisolator"``.
        system: Optional override of :func:`platform.system` for the target host.

    Returns:
        str: Filename such as ``libtestisolator.so`` on Linux,
        ``libtestisolator.dylib`` on macOS, or ``testisolator.dll`` on Windows.
    """

    host = (system or platform.system()).lower()
    prefix, suffix = _LIBRARY_PATTERNS.get(host, _DEFAULT_PATTERN)
    return f"{prefix}{name}{suffix}"


__all__ = ["expand_library_name"]
