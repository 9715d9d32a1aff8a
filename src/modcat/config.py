# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build configuration consumed while assembling the module catalog."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import ConfigError

BUILD_DIR_ENV: Final[str] = "MODCAT_BUILD_DIR"
NAMESPACE_ENV: Final[str] = "MODCAT_NAMESPACE"
DEFAULT_NAMESPACE: Final[str] = "org_apache_mesos"


class BuildConfig(BaseModel):
    """Locations of compiled test libraries and the module naming namespace."""

    model_config = ConfigDict(validate_assignment=True, frozen=True)

    build_dir: Path
    source_subdir: str = "src"
    library_subdir: str = ".libs"
    namespace: str = DEFAULT_NAMESPACE

    @field_validator("namespace")
    @classmethod
    def _require_namespace(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("namespace must not be empty")
        return value

    @property
    def source_dir(self) -> Path:
        """Return the directory holding built binaries such as module launchers."""

        return self.build_dir / self.source_subdir

    @property
    def library_dir(self) -> Path:
        """Return the directory holding the compiled test libraries."""

        return self.source_dir / self.library_subdir

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuildConfig:
        """Build a configuration from ``MODCAT_BUILD_DIR`` and ``MODCAT_NAMESPACE``.

        Args:
            environ: Mapping consulted instead of :data:`os.environ` when provided.

        Returns:
            BuildConfig: Configuration describing the build tree.

        Raises:
            ConfigError: If the build directory is unset or the namespace is invalid.
        """

        env = os.environ if environ is None else environ
        build_dir = env.get(BUILD_DIR_ENV)
        if not build_dir:
            raise ConfigError(f"{BUILD_DIR_ENV} must point at the build directory")
        namespace = env.get(NAMESPACE_ENV) or DEFAULT_NAMESPACE
        try:
            return cls(build_dir=Path(build_dir).expanduser(), namespace=namespace)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc


__all__ = ["BUILD_DIR_ENV", "BuildConfig", "DEFAULT_NAMESPACE", "NAMESPACE_ENV"]
