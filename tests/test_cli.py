# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from modcat.cli import app
from modcat.config import BUILD_DIR_ENV


def test_lookup_prints_module_name(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["lookup", "TestCRAMMD5Authenticator", "--build-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "org_apache_mesos_TestCRAMMD5Authenticator"


def test_lookup_unknown_module_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["lookup", "NoSuchModule", "--build-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "Module 'NoSuchModule' not found" in result.stdout


def test_dump_merges_caller_catalog(tmp_path: Path) -> None:
    caller = tmp_path / "caller.json"
    caller.write_text(
        json.dumps({"libraries": [{"file": "/opt/libcustom.so", "modules": [{"name": "com_example_Custom"}]}]}),
        encoding="utf-8",
    )
    output = tmp_path / "merged.json"
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["dump", "--build-dir", str(tmp_path), "--catalog", str(caller), "--output", str(output)],
    )

    assert result.exit_code == 0
    assert "wrote 12 libraries" in result.stdout
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert len(payload["libraries"]) == 12
    assert payload["libraries"][0]["file"] == "/opt/libcustom.so"


def test_dump_reads_build_dir_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BUILD_DIR_ENV, str(tmp_path))
    runner = CliRunner()

    result = runner.invoke(app, ["dump", "--namespace", "com_example"])

    assert result.exit_code == 0
    names = [
        module["name"] for library in json.loads(result.stdout)["libraries"] for module in library["modules"]
    ]
    assert "com_example_TestHook" in names


def test_dump_requires_build_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(BUILD_DIR_ENV, raising=False)
    runner = CliRunner()

    result = runner.invoke(app, ["dump"])

    assert result.exit_code == 2


def test_show_summarises_catalog(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", "--build-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "11 libraries, 13 modules" in result.stdout


@pytest.mark.parametrize("namespace", ["", "  "])
def test_blank_namespace_rejected_with_build_dir(tmp_path: Path, namespace: str) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["dump", "--build-dir", str(tmp_path), "--namespace", namespace])

    assert result.exit_code == 2


@pytest.mark.parametrize("namespace", ["", "  "])
def test_blank_namespace_rejected_with_environment_build_dir(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    namespace: str,
) -> None:
    monkeypatch.setenv(BUILD_DIR_ENV, str(tmp_path))
    runner = CliRunner()

    result = runner.invoke(app, ["dump", "--namespace", namespace])

    assert result.exit_code == 2
    assert "_TestCpuIsolator" not in result.stdout


def test_show_lists_unnamed_caller_module(tmp_path: Path) -> None:
    caller = tmp_path / "caller.json"
    caller.write_text(json.dumps({"libraries": [{"name": "anon", "modules": [{}]}]}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--build-dir", str(tmp_path), "--catalog", str(caller)])

    assert result.exit_code == 0
    assert "12 libraries, 14 modules" in result.stdout
