# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI for inspecting the assembled test module catalog."""

from __future__ import annotations

from pathlib import Path

import typer

from .catalog import ModuleCatalog, dump_catalog, load_catalog
from .config import DEFAULT_NAMESPACE, BuildConfig
from .errors import CatalogDocumentError, ConfigError, UnknownModuleError
from .harness import build_catalog
from .identifiers import ModuleID
from .registry import ModuleNameRegistry
from .reporting import CatalogReporter

app = typer.Typer(
    name="modcat",
    help="Inspect the catalog of test modules handed to the module loader.",
    no_args_is_help=True,
    add_completion=False,
)

_BUILD_DIR_HELP = "Build directory containing src/.libs (defaults to $MODCAT_BUILD_DIR)."


def _resolve_config(build_dir: Path | None, namespace: str | None) -> BuildConfig:
    """Return the build configuration from CLI options or the environment."""

    try:
        if build_dir is None:
            config = BuildConfig.from_env()
            if namespace is None:
                return config
            return BuildConfig.model_validate({**config.model_dump(), "namespace": namespace})
        return BuildConfig(
            build_dir=build_dir.expanduser(),
            namespace=DEFAULT_NAMESPACE if namespace is None else namespace,
        )
    except (ConfigError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--build-dir") from exc


def _read_caller_catalog(catalog_file: Path | None) -> ModuleCatalog | None:
    if catalog_file is None:
        return None
    try:
        return load_catalog(catalog_file)
    except (FileNotFoundError, CatalogDocumentError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--catalog") from exc


@app.command("show")
def show_command(
    build_dir: Path | None = typer.Option(None, "--build-dir", "-b", help=_BUILD_DIR_HELP),
    catalog_file: Path | None = typer.Option(None, "--catalog", "-c", help="Caller catalog JSON to merge."),
    namespace: str | None = typer.Option(None, "--namespace", help="Module name namespace prefix."),
) -> None:
    """Render the merged catalog without loading it."""

    config = _resolve_config(build_dir, namespace)
    catalog = build_catalog(_read_caller_catalog(catalog_file), config=config, registry=ModuleNameRegistry())
    reporter = CatalogReporter()
    reporter.catalog_table(catalog)
    reporter.summary(catalog)


@app.command("dump")
def dump_command(
    build_dir: Path | None = typer.Option(None, "--build-dir", "-b", help=_BUILD_DIR_HELP),
    catalog_file: Path | None = typer.Option(None, "--catalog", "-c", help="Caller catalog JSON to merge."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout."),
    namespace: str | None = typer.Option(None, "--namespace", help="Module name namespace prefix."),
) -> None:
    """Write the merged catalog as JSON."""

    config = _resolve_config(build_dir, namespace)
    catalog = build_catalog(_read_caller_catalog(catalog_file), config=config, registry=ModuleNameRegistry())
    text = dump_catalog(catalog, output)
    if output is None:
        typer.echo(text, nl=False)
    else:
        CatalogReporter().written(catalog, output)


@app.command("lookup")
def lookup_command(
    module_id: str = typer.Argument(..., help="Module identifier, e.g. TestCRAMMD5Authenticator."),
    build_dir: Path | None = typer.Option(None, "--build-dir", "-b", help=_BUILD_DIR_HELP),
    namespace: str | None = typer.Option(None, "--namespace", help="Module name namespace prefix."),
) -> None:
    """Print the name the loader resolves ``MODULE_ID`` under."""

    config = _resolve_config(build_dir, namespace)
    registry = ModuleNameRegistry()
    build_catalog(config=config, registry=registry)
    resolved = ModuleID.from_raw(module_id)
    try:
        if resolved is None:
            raise UnknownModuleError(module_id)
        name = registry.lookup(resolved)
    except UnknownModuleError as exc:
        CatalogReporter().lookup_failed(exc)
        raise typer.Exit(code=1) from exc
    typer.echo(name)


def main() -> None:
    """Run the ``modcat`` console script."""

    app()


__all__ = ["app", "main"]
