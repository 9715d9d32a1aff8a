# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from modcat.config import BuildConfig
from modcat.harness import ModuleHarness
from modcat.loader import RecordingModuleLoader
from modcat.registry import ModuleNameRegistry


@pytest.fixture
def build_config(tmp_path: Path) -> BuildConfig:
    """Return a configuration rooted at a temporary build directory."""
    return BuildConfig(build_dir=tmp_path / "build")


@pytest.fixture
def registry() -> ModuleNameRegistry:
    """Return an empty identifier registry."""
    return ModuleNameRegistry()


@pytest.fixture
def recording_loader() -> RecordingModuleLoader:
    """Return a loader that records every catalog it receives."""
    return RecordingModuleLoader()


@pytest.fixture
def harness(
    build_config: BuildConfig,
    registry: ModuleNameRegistry,
    recording_loader: RecordingModuleLoader,
) -> ModuleHarness:
    """Return a harness wired to the recording loader."""
    return ModuleHarness(config=build_config, registry=registry, loader=recording_loader)
