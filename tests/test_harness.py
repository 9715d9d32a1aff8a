# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import pytest

from modcat.builders import DEFAULT_CATEGORIES
from modcat.catalog.models import ModuleCatalog
from modcat.config import BuildConfig
from modcat.errors import ModuleLoadError, UnknownModuleError
from modcat.harness import ModuleHarness, build_catalog, get_module_name, init_modules
from modcat.identifiers import ModuleID
from modcat.loader import RecordingModuleLoader
from modcat.registry import ModuleNameRegistry

BUILTIN_LIBRARY_COUNT = 11


class _FailingLoader:
    def __init__(self) -> None:
        self.error = ModuleLoadError("Error opening library: 'libtestisolator.so'")

    def load(self, catalog: ModuleCatalog) -> None:
        raise self.error


def _caller_catalog() -> ModuleCatalog:
    catalog = ModuleCatalog()
    catalog.add_library(file="/opt/modules/libcustom.so").add_module("com_example_Custom")
    return catalog


def test_lookup_cram_md5_authenticator_after_assembly(harness: ModuleHarness) -> None:
    harness.init_modules()
    assert (
        harness.get_module_name(ModuleID.TEST_CRAM_MD5_AUTHENTICATOR)
        == "org_apache_mesos_TestCRAMMD5Authenticator"
    )


def test_lookup_before_assembly_fails(harness: ModuleHarness) -> None:
    with pytest.raises(UnknownModuleError):
        harness.get_module_name(ModuleID.TEST_CRAM_MD5_AUTHENTICATOR)


def test_every_identifier_resolves_to_builder_name(harness: ModuleHarness) -> None:
    catalog = harness.init_modules()
    names = catalog.module_names()
    for module_id in ModuleID:
        name = harness.get_module_name(module_id)
        assert name == f"org_apache_mesos_{module_id.value}"
        assert name in names


def test_empty_caller_catalog_adds_builtin_libraries(harness: ModuleHarness) -> None:
    catalog = harness.init_modules(ModuleCatalog())
    assert len(catalog.libraries) == BUILTIN_LIBRARY_COUNT
    assert BUILTIN_LIBRARY_COUNT == sum(len(definition.libraries) for definition in DEFAULT_CATEGORIES)


def test_caller_catalog_is_kept_first_and_not_mutated(harness: ModuleHarness) -> None:
    caller = _caller_catalog()
    catalog = harness.init_modules(caller)

    assert len(caller.libraries) == 1
    assert len(catalog.libraries) == 1 + BUILTIN_LIBRARY_COUNT
    assert catalog.libraries[0].file == "/opt/modules/libcustom.so"
    assert catalog.libraries[0].modules[0].name == "com_example_Custom"


def test_catalog_is_handed_to_loader(
    harness: ModuleHarness,
    recording_loader: RecordingModuleLoader,
) -> None:
    catalog = harness.init_modules()
    assert recording_loader.last is catalog
    assert len(recording_loader.loaded) == 1


def test_repeated_assembly_is_additive_but_registry_is_stable(
    build_config: BuildConfig,
    registry: ModuleNameRegistry,
    recording_loader: RecordingModuleLoader,
) -> None:
    first = init_modules(config=build_config, registry=registry, loader=recording_loader)
    registered = len(registry)
    second = init_modules(first, config=build_config, registry=registry, loader=recording_loader)

    assert len(second.libraries) == 2 * BUILTIN_LIBRARY_COUNT
    assert len(registry) == registered == len(ModuleID)


def test_load_error_propagates_verbatim_and_registry_stays_populated(
    build_config: BuildConfig,
    registry: ModuleNameRegistry,
) -> None:
    loader = _FailingLoader()
    with pytest.raises(ModuleLoadError) as excinfo:
        init_modules(config=build_config, registry=registry, loader=loader)

    assert excinfo.value is loader.error
    assert get_module_name(ModuleID.TEST_HOOK, registry) == "org_apache_mesos_TestHook"


def test_build_catalog_does_not_load(build_config: BuildConfig, registry: ModuleNameRegistry) -> None:
    catalog = build_catalog(config=build_config, registry=registry)
    logrotate = catalog.find_module("org_apache_mesos_LogrotateContainerLogger")

    assert logrotate is not None
    assert logrotate.parameter_map()["max_stdout_size"] == "2MB"
    assert catalog.find_module("org_apache_mesos_Missing") is None


def test_harness_resolves_loader_lazily(
    build_config: BuildConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    resolved = RecordingModuleLoader()
    monkeypatch.setattr("modcat.harness.resolve_module_loader", lambda: resolved)
    harness = ModuleHarness(config=build_config)

    catalog = harness.init_modules()

    assert harness.loader is resolved
    assert resolved.last is catalog
