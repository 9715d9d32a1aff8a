# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Wire models describing libraries, modules, and their parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    """Key/value configuration passed to a module at load time."""

    model_config = ConfigDict(validate_assignment=True)

    key: str
    value: str


class ModuleRecord(BaseModel):
    """Entry point exposed by a shared library.

    Built-in modules always carry a name; caller catalogs may omit it and
    leave the loader to reject the record.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str | None = None
    parameters: list[Parameter] = Field(default_factory=list)

    def add_parameter(self, key: str, value: str) -> Parameter:
        """Append a parameter to the module and return it.

        Args:
            key: Parameter key understood by the module.
            value: Parameter value rendered as a string.

        Returns:
            Parameter: The parameter appended to :attr:`parameters`.
        """

        parameter = Parameter(key=key, value=value)
        self.parameters.append(parameter)
        return parameter

    def parameter_map(self) -> dict[str, str]:
        """Return parameters keyed by name; later duplicates win."""

        return {parameter.key: parameter.value for parameter in self.parameters}


class LibraryEntry(BaseModel):
    """Shared library and the module entry points it provides.

    ``file`` holds the resolved library path; ``name`` is the optional
    logical library name callers may supply instead.
    """

    model_config = ConfigDict(validate_assignment=True)

    file: str | None = None
    name: str | None = None
    modules: list[ModuleRecord] = Field(default_factory=list)

    def add_module(self, name: str) -> ModuleRecord:
        """Append a module record named ``name`` and return its handle."""

        module = ModuleRecord(name=name)
        self.modules.append(module)
        return module


class ModuleCatalog(BaseModel):
    """Top-level catalog handed to the module loader."""

    model_config = ConfigDict(validate_assignment=True)

    libraries: list[LibraryEntry] = Field(default_factory=list)

    def add_library(self, *, file: str | None = None, name: str | None = None) -> LibraryEntry:
        """Append a library entry and return its handle.

        Args:
            file: Resolved filesystem path of the shared library.
            name: Optional logical library name.

        Returns:
            LibraryEntry: The entry appended to :attr:`libraries`.
        """

        library = LibraryEntry(file=file, name=name)
        self.libraries.append(library)
        return library

    def module_names(self) -> tuple[str, ...]:
        """Return every module name in catalog order, duplicates included."""

        return tuple(
            module.name for library in self.libraries for module in library.modules if module.name is not None
        )

    def find_module(self, name: str) -> ModuleRecord | None:
        """Return the first module named ``name`` or ``None`` when absent."""

        for library in self.libraries:
            for module in library.modules:
                if module.name == name:
                    return module
        return None


__all__ = ["LibraryEntry", "ModuleCatalog", "ModuleRecord", "Parameter"]
