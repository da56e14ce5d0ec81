# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the Guardgen project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from guardgen.targets import TARGETS

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "guardgen.yaml"


class WorkspaceConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class OutputSpec:
    """One generated validator document.

    Attributes:
        target: Name of a registered target (e.g. ``typescript``).
        path: Output file path, relative to the project directory.
    """

    target: str
    path: str


@dataclass
class WorkspaceConfig:
    """The parsed configuration of a Guardgen project.

    Attributes:
        schema: Path of the schema document, relative to the project directory.
        outputs: Documents to generate, in the order they are listed.
    """

    schema: str
    outputs: list[OutputSpec] = field(default_factory=list)


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a Guardgen project configuration file.

    Args:
        path: Path to the `guardgen.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read project config file: {exc}") from exc

    return parse_workspace_config(text, source_label=str(path))


def parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse project config YAML text into a WorkspaceConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        WorkspaceConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: project config must be a YAML mapping")

    schema = _require_string(data, "schema", source_label)

    if "outputs" not in data:
        raise WorkspaceConfigError(f"{source_label}: missing required field 'outputs'")
    raw_outputs = data["outputs"]
    if not isinstance(raw_outputs, list) or not raw_outputs:
        raise WorkspaceConfigError(f"{source_label}: 'outputs' must be a non-empty list")

    outputs = [_parse_output(entry, index, source_label) for index, entry in enumerate(raw_outputs)]
    return WorkspaceConfig(schema=schema, outputs=outputs)


# ################
# Implementation
# ################


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising WorkspaceConfigError if missing."""
    if key not in mapping:
        raise WorkspaceConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _parse_output(entry: object, index: int, source_label: str) -> OutputSpec:
    """Parse a single output entry from the YAML list."""
    location = f"{source_label}: outputs[{index}]"

    if not isinstance(entry, dict):
        raise WorkspaceConfigError(f"{location} must be a YAML mapping")

    target = _require_string(entry, "target", location)
    if target not in TARGETS:
        known = ", ".join(sorted(TARGETS))
        raise WorkspaceConfigError(f"{location}: unknown target '{target}' (expected one of: {known})")

    path = _require_string(entry, "path", location)
    return OutputSpec(target=target, path=path)
