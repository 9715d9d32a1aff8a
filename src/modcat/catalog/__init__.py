# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the module catalog wire models."""

from __future__ import annotations

from typing import Final

from .io import dump_catalog, load_catalog
from .models import LibraryEntry, ModuleCatalog, ModuleRecord, Parameter

__all__: Final[tuple[str, ...]] = (
    "LibraryEntry",
    "ModuleCatalog",
    "ModuleRecord",
    "Parameter",
    "dump_catalog",
    "load_catalog",
)
