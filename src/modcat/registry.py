# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registry mapping module identifiers to the names the loader resolves."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .errors import UnknownModuleError
from .identifiers import ModuleID

_LOGGER = logging.getLogger(__name__)


class ModuleNameRegistry:
    """Record the display name each module identifier was registered under.

    Entries are never removed during assembly; registering an identifier a
    second time replaces the earlier name (last write wins).
    """

    def __init__(self) -> None:
        """Initialise an empty registry."""

        self._names: dict[ModuleID, str] = {}

    def register(self, module_id: ModuleID, name: str) -> None:
        """Bind ``module_id`` to ``name``, replacing any earlier binding.

        Args:
            module_id: Identifier of the module entry point.
            name: Display name the dynamic loader looks the module up under.
        """

        previous = self._names.get(module_id)
        if previous is not None and previous != name:
            _LOGGER.warning(
                "module '%s' re-registered as '%s' (was '%s')",
                module_id.value,
                name,
                previous,
            )
        self._names[module_id] = name

    def lookup(self, module_id: ModuleID) -> str:
        """Return the display name registered for ``module_id``.

        Args:
            module_id: Identifier to resolve.

        Returns:
            str: Name recorded by the most recent registration.

        Raises:
            UnknownModuleError: If ``module_id`` was never registered.
        """

        try:
            return self._names[module_id]
        except KeyError as exc:
            raise UnknownModuleError(module_id) from exc

    def items(self) -> tuple[tuple[ModuleID, str], ...]:
        """Return a snapshot of registrations in insertion order."""

        return tuple(self._names.items())

    def clear(self) -> None:
        """Drop every registration; intended for test isolation."""

        self._names.clear()

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._names

    def __iter__(self) -> Iterator[ModuleID]:
        return iter(tuple(self._names))

    def __len__(self) -> int:
        return len(self._names)


__all__ = ["ModuleNameRegistry"]
