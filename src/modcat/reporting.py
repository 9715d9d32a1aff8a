# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering for the ``modcat`` CLI."""

from __future__ import annotations

from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .catalog import ModuleCatalog
from .errors import UnknownModuleError


class CatalogReporter:
    """Print catalogs and lookup outcomes to a single Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        """Bind the reporter to ``console`` or a fresh stdout console."""

        self.console = console or Console(soft_wrap=True, highlight=False)

    def catalog_table(self, catalog: ModuleCatalog) -> None:
        """Render one row per module, grouped by the library it lives in."""

        table = Table(title="Module catalog", box=box.SIMPLE, expand=True)
        table.add_column("Library", overflow="fold")
        table.add_column("Module", style="bold", overflow="fold")
        table.add_column("Parameters", overflow="fold")
        for library in catalog.libraries:
            location = library.file or library.name or "-"
            if not library.modules:
                table.add_row(location, "-", "")
            for module in library.modules:
                parameters = ", ".join(f"{parameter.key}={parameter.value}" for parameter in module.parameters)
                table.add_row(location, module.name or "-", parameters)
        self.console.print(table)

    def summary(self, catalog: ModuleCatalog) -> None:
        """Print the library and module totals of ``catalog``."""

        module_count = sum(len(library.modules) for library in catalog.libraries)
        self.console.print(Text(f"{len(catalog.libraries)} libraries, {module_count} modules", style="green"))

    def written(self, catalog: ModuleCatalog, path: Path) -> None:
        """Confirm that ``catalog`` was dumped to ``path``."""

        self.console.print(Text(f"wrote {len(catalog.libraries)} libraries to {path}", style="cyan"))

    def lookup_failed(self, error: UnknownModuleError) -> None:
        """Report an identifier that has no registered module name."""

        self.console.print(Text(str(error), style="red"))


__all__ = ["CatalogReporter"]
