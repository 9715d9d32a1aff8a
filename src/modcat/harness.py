# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Assemble the test module catalog and hand it to a module loader."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .builders import DEFAULT_CATEGORIES, CategoryDefinition, add_all_categories
from .catalog.models import ModuleCatalog
from .config import BuildConfig
from .identifiers import ModuleID
from .loader import ModuleLoader, resolve_module_loader
from .registry import ModuleNameRegistry

_LOGGER = logging.getLogger(__name__)


def build_catalog(
    modules: ModuleCatalog | None = None,
    *,
    config: BuildConfig,
    registry: ModuleNameRegistry,
    categories: Sequence[CategoryDefinition] = DEFAULT_CATEGORIES,
) -> ModuleCatalog:
    """Return ``modules`` merged with the built-in test module catalog.

    The caller's catalog is copied, never mutated; its libraries keep their
    position ahead of the built-in ones.

    Args:
        modules: Optional caller-supplied catalog.
        config: Build configuration locating the compiled test libraries.
        registry: Registry receiving identifier to name bindings.
        categories: Category table applied in order.

    Returns:
        ModuleCatalog: Freshly assembled catalog.
    """

    merged = modules.model_copy(deep=True) if modules is not None else ModuleCatalog()
    add_all_categories(merged, config=config, registry=registry, categories=categories)
    return merged


def init_modules(
    modules: ModuleCatalog | None = None,
    *,
    config: BuildConfig,
    registry: ModuleNameRegistry,
    loader: ModuleLoader,
) -> ModuleCatalog:
    """Assemble the catalog and load it with ``loader``.

    The registry is populated before loading starts, so it stays populated
    even when the loader fails.

    Args:
        modules: Optional caller-supplied catalog.
        config: Build configuration locating the compiled test libraries.
        registry: Registry receiving identifier to name bindings.
        loader: Loader consuming the merged catalog.

    Returns:
        ModuleCatalog: The catalog handed to ``loader``.

    Raises:
        ModuleLoadError: Propagated unchanged from ``loader``.
    """

    catalog = build_catalog(modules, config=config, registry=registry)
    _LOGGER.debug(
        "loading %d module libraries from %s",
        len(catalog.libraries),
        config.library_dir,
    )
    loader.load(catalog)
    return catalog


def get_module_name(module_id: ModuleID, registry: ModuleNameRegistry) -> str:
    """Return the display name ``module_id`` was registered under.

    Raises:
        UnknownModuleError: If ``module_id`` has not been registered.
    """

    return registry.lookup(module_id)


@dataclass(slots=True)
class ModuleHarness:
    """Own the registry, configuration, and loader for one test session."""

    config: BuildConfig
    registry: ModuleNameRegistry = field(default_factory=ModuleNameRegistry)
    loader: ModuleLoader | None = None

    def init_modules(self, modules: ModuleCatalog | None = None) -> ModuleCatalog:
        """Assemble and load the catalog using the harness collaborators.

        Args:
            modules: Optional caller-supplied catalog merged ahead of the built-ins.

        Returns:
            ModuleCatalog: The catalog handed to the loader.

        Raises:
            ModuleLoadError: Propagated unchanged from the loader.
        """

        if self.loader is None:
            self.loader = resolve_module_loader()
        return init_modules(modules, config=self.config, registry=self.registry, loader=self.loader)

    def get_module_name(self, module_id: ModuleID) -> str:
        """Return the display name registered for ``module_id``.

        Raises:
            UnknownModuleError: If ``module_id`` has not been registered.
        """

        return get_module_name(module_id, self.registry)


__all__ = ["ModuleHarness", "build_catalog", "get_module_name", "init_modules"]
