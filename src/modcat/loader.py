# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Module loader protocol and entry-point based loader discovery.

The dynamic loader that actually opens shared libraries lives outside this
package.  Packages provide one by exposing a zero-argument factory under the
``modcat.loaders`` entry-point group; :func:`resolve_module_loader` returns the
first factory that imports cleanly and falls back to an in-memory
:class:`RecordingModuleLoader` otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import Protocol, TypeAlias, cast, runtime_checkable

from .catalog.models import ModuleCatalog

LOADER_PLUGIN_GROUP = "modcat.loaders"

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class ModuleLoader(Protocol):
    """Consume an assembled catalog and load the modules it describes."""

    def load(self, catalog: ModuleCatalog) -> None:
        """Load every library and module described by ``catalog``.

        Args:
            catalog: Fully assembled catalog.

        Raises:
            ModuleLoadError: If the loader rejects the catalog.
        """
        ...


LoaderFactory: TypeAlias = Callable[[], ModuleLoader]
_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]


class RecordingModuleLoader:
    """Loader that accepts every catalog and keeps it for later inspection."""

    def __init__(self) -> None:
        """Initialise the loader with no recorded catalogs."""

        self.loaded: list[ModuleCatalog] = []

    def load(self, catalog: ModuleCatalog) -> None:
        """Record ``catalog`` without touching the filesystem."""

        self.loaded.append(catalog)

    @property
    def last(self) -> ModuleCatalog | None:
        """Return the most recently loaded catalog, if any."""

        return self.loaded[-1] if self.loaded else None


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``.

    Args:
        entries: Raw entry-point container returned by :func:`metadata.entry_points`.
        group: Name of the entry-point group to extract.

    Returns:
        Iterable[EntryPoint]: Entry points belonging to ``group``.
    """

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    if hasattr(entries, "select"):
        return entries.select(group=group)
    return ()


def load_loader_factories() -> tuple[LoaderFactory, ...]:
    """Return loader factories discovered via entry points.

    Entries that fail to import are logged and skipped.

    Returns:
        tuple[LoaderFactory, ...]: Loader factories in discovery order.
    """

    entries_raw = metadata.entry_points()
    selected = _select_entry_points(cast(_EntryPointSource, entries_raw), LOADER_PLUGIN_GROUP)

    factories: list[LoaderFactory] = []
    for entry in selected:
        try:
            factory = cast(LoaderFactory, entry.load())
        except (AttributeError, ImportError, ValueError, RuntimeError) as exc:
            _LOGGER.warning("skipping module loader plugin %r: %s", getattr(entry, "name", entry), exc)
            continue
        factories.append(factory)
    return tuple(factories)


def resolve_module_loader() -> ModuleLoader:
    """Return the first discovered module loader or a recording fallback.

    Returns:
        ModuleLoader: Loader instance ready to receive catalogs.
    """

    for factory in load_loader_factories():
        return factory()
    _LOGGER.debug("no '%s' plugins installed; using RecordingModuleLoader", LOADER_PLUGIN_GROUP)
    return RecordingModuleLoader()


__all__ = [
    "LOADER_PLUGIN_GROUP",
    "LoaderFactory",
    "ModuleLoader",
    "RecordingModuleLoader",
    "load_loader_factories",
    "resolve_module_loader",
]
