# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading and writing catalog JSON documents."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..errors import CatalogDocumentError
from .models import ModuleCatalog


def load_catalog(path: Path) -> ModuleCatalog:
    """Load a caller-supplied catalog from a JSON document.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        ModuleCatalog: Catalog parsed from the document.

    Raises:
        FileNotFoundError: If the document does not exist.
        CatalogDocumentError: If the document is not valid JSON or does not
            describe a catalog.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = json.load(stream)
        except json.JSONDecodeError as exc:
            raise CatalogDocumentError(f"{path}: failed to parse catalog JSON") from exc
    if not isinstance(payload, dict):
        raise CatalogDocumentError(f"{path}: expected a JSON object")
    try:
        return ModuleCatalog.model_validate(payload)
    except ValidationError as exc:
        raise CatalogDocumentError(f"{path}: invalid catalog document: {exc}") from exc


def dump_catalog(catalog: ModuleCatalog, path: Path | None = None) -> str:
    """Serialise ``catalog`` to indented JSON, writing it to ``path`` when given.

    Args:
        catalog: Catalog to serialise.
        path: Optional destination file.

    Returns:
        str: JSON text representing the catalog.
    """

    text = json.dumps(catalog.model_dump(mode="json", exclude_none=True), indent=2) + "\n"
    if path is not None:
        path.write_text(text, encoding="utf-8")
    return text


__all__ = ["dump_catalog", "load_catalog"]
