# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of API models from JSON or YAML schema documents.

A schema document is a mapping with two optional keys, ``types`` (type name →
type node) and ``endpoints`` (endpoint name → endpoint descriptor). Type nodes
are mappings discriminated by ``kind``::

    types:
      Tree:
        kind: object
        fields:
          children: {kind: array, element: {kind: reference, name: Tree}}

Mapping order in the document is declaration order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError

from guardgen.model.api import ApiModel

# ###############
# Public Interface
# ###############

SchemaFormat = Literal["json", "yaml"]

SCHEMA_SUFFIXES: dict[str, SchemaFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class SchemaError(Exception):
    """Raised when a schema document cannot be read or does not describe an API model."""


def load_api_model(path: Path) -> ApiModel:
    """Load an API model from a schema file.

    The format is chosen from the file suffix (``.json``, ``.yaml``, ``.yml``).

    Raises:
        SchemaError: If the file is missing, unreadable, has an unknown suffix
            or does not contain a valid API model.
    """
    fmt = SCHEMA_SUFFIXES.get(path.suffix.lower())
    if fmt is None:
        known = ", ".join(SCHEMA_SUFFIXES)
        raise SchemaError(f"{path}: unsupported schema file suffix '{path.suffix}' (expected one of: {known})")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SchemaError(f"Schema file not found: {path}") from None
    except OSError as exc:
        raise SchemaError(f"Cannot read schema file: {exc}") from exc

    return parse_api_model(text, fmt=fmt, source_label=str(path))


def parse_api_model(text: str, *, fmt: SchemaFormat = "yaml", source_label: str = "<string>") -> ApiModel:
    """Parse schema document text into an API model.

    Args:
        text: Raw document content.
        fmt: ``"json"`` or ``"yaml"``.
        source_label: Human-readable label used in error messages.

    Raises:
        SchemaError: If the text is not valid JSON/YAML, is not a mapping, or
            fails model validation.
    """
    data = _load_document(text, fmt, source_label)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaError(f"{source_label}: schema document must be a mapping")

    try:
        return ApiModel.model_validate(data)
    except ValidationError as exc:
        raise SchemaError(f"{source_label}: invalid schema document:\n{exc}") from exc


# ################
# Implementation
# ################


def _load_document(text: str, fmt: SchemaFormat, source_label: str) -> Any:
    if fmt == "json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Invalid JSON in {source_label}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid YAML in {source_label}: {exc}") from exc
