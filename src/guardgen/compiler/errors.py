# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised when an API model cannot be compiled into validators.

All of them describe structural problems of the input model. None is
recoverable inside the compiler: generation of the whole document stops.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Base class for every error that aborts validator generation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnresolvedReferenceError(CompilerError):
    """A type reference names a type that is not in the registry.

    Attributes:
        name: The missing type name.
        origin: Human-readable path to the reference, e.g.
            ``type 'Tree' > field 'children' > array element``.
    """

    def __init__(self, name: str, origin: str) -> None:
        super().__init__(f"Unresolved type reference '{name}' at {origin}")
        self.name = name
        self.origin = origin


class NameCollisionError(CompilerError):
    """Distinct logical names map to the same generated validator name.

    Attributes:
        identifier: The generated function name claimed more than once.
        logical_names: Descriptions of every type or endpoint facet claiming it.
    """

    def __init__(self, identifier: str, logical_names: list[str]) -> None:
        claimants = ", ".join(logical_names)
        super().__init__(f"Validator name '{identifier}' is generated by more than one definition: {claimants}")
        self.identifier = identifier
        self.logical_names = list(logical_names)


class MalformedStatusCodeError(CompilerError):
    """A custom error status code cannot be rendered as an integer suffix.

    Attributes:
        endpoint: Name of the endpoint declaring the status code.
        status_code: The offending key as it appears in the model.
    """

    def __init__(self, endpoint: str, status_code: object) -> None:
        super().__init__(
            f"endpoint '{endpoint}': custom error status code {status_code!r} is not a non-negative integer"
        )
        self.endpoint = endpoint
        self.status_code = status_code
