# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog builder and identifier registry for loadable test modules."""

from __future__ import annotations

from .builders import DEFAULT_CATEGORIES, CategoryDefinition, add_category_modules
from .catalog import LibraryEntry, ModuleCatalog, ModuleRecord, Parameter
from .config import BuildConfig
from .errors import ConfigError, ModcatError, ModuleLoadError, UnknownModuleError
from .harness import ModuleHarness, build_catalog, get_module_name, init_modules
from .identifiers import ModuleID
from .loader import ModuleLoader, RecordingModuleLoader
from .registry import ModuleNameRegistry

__all__ = [
    "BuildConfig",
    "CategoryDefinition",
    "ConfigError",
    "DEFAULT_CATEGORIES",
    "LibraryEntry",
    "ModcatError",
    "ModuleCatalog",
    "ModuleHarness",
    "ModuleID",
    "ModuleLoadError",
    "ModuleLoader",
    "ModuleNameRegistry",
    "ModuleRecord",
    "Parameter",
    "RecordingModuleLoader",
    "UnknownModuleError",
    "add_category_modules",
    "build_catalog",
    "get_module_name",
    "init_modules",
]
