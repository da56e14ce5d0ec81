# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output languages for generated validators."""

from __future__ import annotations

from guardgen.targets.base import Expr, Precedence, Target, join_expressions
from guardgen.targets.python import PythonTarget
from guardgen.targets.typescript import TypeScriptTarget

# ###############
# Public Interface
# ###############

DEFAULT_TARGET = "typescript"

TARGETS: dict[str, Target] = {
    TypeScriptTarget.name: TypeScriptTarget(),
    PythonTarget.name: PythonTarget(),
}


def get_target(target: str | Target) -> Target:
    """Return the registered target called *target*, or *target* itself if it is one.

    Raises:
        ValueError: If no target of that name is registered.
    """
    if not isinstance(target, str):
        return target
    try:
        return TARGETS[target]
    except KeyError:
        known = ", ".join(sorted(TARGETS))
        raise ValueError(f"Unknown target '{target}' (expected one of: {known})") from None


__all__ = [
    "DEFAULT_TARGET",
    "TARGETS",
    "Expr",
    "Precedence",
    "PythonTarget",
    "Target",
    "TypeScriptTarget",
    "get_target",
    "join_expressions",
]
