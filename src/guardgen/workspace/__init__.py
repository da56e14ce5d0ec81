# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for Guardgen."""

from guardgen.workspace.config import (
    CONFIG_FILE_NAME,
    OutputSpec,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    parse_workspace_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "OutputSpec",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "load_workspace_config",
    "parse_workspace_config",
]
