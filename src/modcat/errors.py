# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by module catalog operations."""

from __future__ import annotations

from enum import Enum


class ModcatError(Exception):
    """Base class for errors raised by :mod:`modcat`."""


class UnknownModuleError(ModcatError, KeyError):
    """Raise when a module identifier has not been registered."""

    def __init__(self, module_id: Enum | str) -> None:
        """Record the unresolved ``module_id``.

        Args:
            module_id: Identifier that was looked up without a registration.
        """

        super().__init__(module_id)
        self.module_id = module_id

    def __str__(self) -> str:
        """Return the human-readable lookup failure message."""

        identifier = self.module_id.value if isinstance(self.module_id, Enum) else self.module_id
        return f"Module '{identifier}' not found"


class ModuleLoadError(ModcatError, RuntimeError):
    """Raised by module loaders when an assembled catalog is rejected."""


class ConfigError(ModcatError):
    """Raised when configuration input is invalid."""


class CatalogDocumentError(ModcatError, ValueError):
    """Raised when a catalog document cannot be parsed or validated."""


__all__ = (
    "CatalogDocumentError",
    "ConfigError",
    "ModcatError",
    "ModuleLoadError",
    "UnknownModuleError",
)
