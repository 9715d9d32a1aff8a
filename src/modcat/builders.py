# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Declarative table of test module categories and the builder that applies it.

Each category lists the libraries it contributes, the entry points those
libraries expose, and any parameters the entry points need.  The builder
appends the libraries to a catalog and records the identifier of every entry
point in a :class:`~modcat.registry.ModuleNameRegistry`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Final, TypeAlias

from .bytes import format_bytes, megabytes
from .catalog.models import LibraryEntry, ModuleCatalog, ModuleRecord
from .config import BuildConfig
from .identifiers import ModuleID
from .platform import expand_library_name
from .registry import ModuleNameRegistry

ParameterValue: TypeAlias = Callable[[BuildConfig], str]


@dataclass(frozen=True, slots=True)
class EntryPointDefinition:
    """Entry point exposed by a library together with its parameters."""

    module_id: ModuleID
    parameters: tuple[tuple[str, ParameterValue], ...] = ()

    @property
    def entry_point(self) -> str:
        """Return the symbol suffix the library exports for this module."""

        return self.module_id.value

    def display_name(self, namespace: str) -> str:
        """Return the name the loader resolves, e.g. ``org_apache_mesos_TestHook``."""

        return f"{namespace}_{self.entry_point}"


@dataclass(frozen=True, slots=True)
class LibraryDefinition:
    """Logical shared library and the entry points it provides."""

    library_name: str
    entry_points: tuple[EntryPointDefinition, ...]

    def resolve_path(self, config: BuildConfig) -> str:
        """Return the platform-specific path of the library under ``config``."""

        return str(config.library_dir / expand_library_name(self.library_name))


@dataclass(frozen=True, slots=True)
class CategoryDefinition:
    """Functional module category, e.g. isolators or container loggers."""

    category: str
    libraries: tuple[LibraryDefinition, ...] = field(default_factory=tuple)

    @property
    def module_ids(self) -> tuple[ModuleID, ...]:
        """Return the identifiers registered by this category in order."""

        return tuple(entry.module_id for library in self.libraries for entry in library.entry_points)


def _launcher_dir(config: BuildConfig) -> str:
    return str(config.source_dir)


def _max_stdout_size(config: BuildConfig) -> str:
    del config
    return format_bytes(megabytes(2))


def _logrotate_stdout_options(config: BuildConfig) -> str:
    del config
    # logrotate directive: rotate the file 4 times before removal.
    return "rotate 4"


def _library(library_name: str, *entry_points: EntryPointDefinition) -> LibraryDefinition:
    return LibraryDefinition(library_name=library_name, entry_points=entry_points)


def _entry(module_id: ModuleID, *parameters: tuple[str, ParameterValue]) -> EntryPointDefinition:
    return EntryPointDefinition(module_id=module_id, parameters=parameters)


DEFAULT_CATEGORIES: Final[tuple[CategoryDefinition, ...]] = (
    CategoryDefinition(
        "isolator",
        (
            _library(
                "testisolator",
                _entry(ModuleID.TEST_CPU_ISOLATOR),
                _entry(ModuleID.TEST_MEM_ISOLATOR),
            ),
        ),
    ),
    CategoryDefinition(
        "authentication",
        (
            _library(
                "testauthentication",
                _entry(ModuleID.TEST_CRAM_MD5_AUTHENTICATEE),
                _entry(ModuleID.TEST_CRAM_MD5_AUTHENTICATOR),
            ),
        ),
    ),
    CategoryDefinition(
        "container-logger",
        (
            _library("testcontainer_logger", _entry(ModuleID.TEST_SANDBOX_CONTAINER_LOGGER)),
            _library(
                "logrotate_container_logger",
                _entry(
                    ModuleID.LOGROTATE_CONTAINER_LOGGER,
                    ("launcher_dir", _launcher_dir),
                    ("max_stdout_size", _max_stdout_size),
                    ("logrotate_stdout_options", _logrotate_stdout_options),
                ),
            ),
        ),
    ),
    CategoryDefinition("hook", (_library("testhook", _entry(ModuleID.TEST_HOOK)),)),
    CategoryDefinition("anonymous", (_library("testanonymous", _entry(ModuleID.TEST_ANONYMOUS)),)),
    CategoryDefinition("allocator", (_library("testallocator", _entry(ModuleID.TEST_DRF_ALLOCATOR)),)),
    CategoryDefinition(
        "resource-estimator",
        (_library("testresource_estimator", _entry(ModuleID.TEST_NOOP_RESOURCE_ESTIMATOR)),),
    ),
    CategoryDefinition("authorizer", (_library("testauthorizer", _entry(ModuleID.TEST_LOCAL_AUTHORIZER)),)),
    CategoryDefinition(
        "http-authenticator",
        (_library("testhttpauthenticator", _entry(ModuleID.TEST_HTTP_BASIC_AUTHENTICATOR)),),
    ),
    CategoryDefinition(
        "fetcher-plugin",
        (_library("testfetcher_plugin", _entry(ModuleID.TEST_CURL_FETCHER_PLUGIN)),),
    ),
)


def add_module(
    library: LibraryEntry,
    entry: EntryPointDefinition,
    *,
    config: BuildConfig,
    registry: ModuleNameRegistry,
) -> ModuleRecord:
    """Append ``entry`` to ``library``, register it, and attach its parameters.

    Args:
        library: Library entry receiving the module record.
        entry: Entry point definition to materialise.
        config: Build configuration used for naming and parameter values.
        registry: Registry recording the identifier's display name.

    Returns:
        ModuleRecord: Handle to the module record appended to ``library``.
    """

    name = entry.display_name(config.namespace)
    registry.register(entry.module_id, name)
    module = library.add_module(name)
    for key, value in entry.parameters:
        module.add_parameter(key, value(config))
    return module


def add_category_modules(
    catalog: ModuleCatalog,
    definition: CategoryDefinition,
    *,
    config: BuildConfig,
    registry: ModuleNameRegistry,
) -> tuple[LibraryEntry, ...]:
    """Append every library of ``definition`` to ``catalog``.

    The catalog is never inspected; calling the builder twice appends the
    libraries twice.

    Args:
        catalog: Catalog receiving the category's library entries.
        definition: Category to materialise.
        config: Build configuration locating the compiled libraries.
        registry: Registry recording identifier to name bindings.

    Returns:
        tuple[LibraryEntry, ...]: Library entries appended to ``catalog``.
    """

    appended: list[LibraryEntry] = []
    for library_definition in definition.libraries:
        library = catalog.add_library(file=library_definition.resolve_path(config))
        for entry in library_definition.entry_points:
            add_module(library, entry, config=config, registry=registry)
        appended.append(library)
    return tuple(appended)


def add_all_categories(
    catalog: ModuleCatalog,
    *,
    config: BuildConfig,
    registry: ModuleNameRegistry,
    categories: Sequence[CategoryDefinition] = DEFAULT_CATEGORIES,
) -> tuple[LibraryEntry, ...]:
    """Apply each category in ``categories`` to ``catalog`` in order."""

    appended: list[LibraryEntry] = []
    for definition in categories:
        appended.extend(add_category_modules(catalog, definition, config=config, registry=registry))
    return tuple(appended)


__all__ = [
    "CategoryDefinition",
    "DEFAULT_CATEGORIES",
    "EntryPointDefinition",
    "LibraryDefinition",
    "ParameterValue",
    "add_all_categories",
    "add_category_modules",
    "add_module",
]
