# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deterministic names of generated validator functions.

Names are built by plain concatenation, without sanitization:

* named type ``T`` → ``validate<T>``
* endpoint ``E`` → ``validate<E>_request``, ``validate<E>_response``,
  ``validate<E>_defaultError`` and ``validate<E>_customError<S>`` for each
  custom error status code ``S``.

The first character of the logical name is upper-cased, so endpoint
``getUser`` yields ``validateGetUser_request``. Because concatenation can map
distinct logical names onto the same identifier (type ``Foo_request`` and the
request facet of endpoint ``foo``), collisions are detected explicitly.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from guardgen.compiler.errors import MalformedStatusCodeError, NameCollisionError

# ###############
# Public Interface
# ###############

VALIDATOR_PREFIX = "validate"


class Facet(enum.Enum):
    """The fixed facets of an endpoint, in emission order."""

    REQUEST = "request"
    RESPONSE = "response"
    DEFAULT_ERROR = "defaultError"


@dataclass(frozen=True)
class ValidatorName:
    """A generated identifier together with the logical name it was derived from.

    Attributes:
        identifier: The generated function name.
        description: Human-readable logical name, e.g. ``type 'User'`` or
            ``endpoint 'getUser' customError 404``.
    """

    identifier: str
    description: str


def type_validator_name(type_name: str) -> str:
    """Return the validator name for a named type."""
    return VALIDATOR_PREFIX + _upper_first(type_name)


def facet_validator_name(endpoint_name: str, facet: Facet) -> str:
    """Return the validator name for a fixed endpoint facet."""
    return f"{VALIDATOR_PREFIX}{_upper_first(endpoint_name)}_{facet.value}"


def custom_error_validator_name(endpoint_name: str, status_code: object) -> str:
    """Return the validator name for the custom error of *status_code*.

    Raises:
        MalformedStatusCodeError: If *status_code* cannot be rendered as a
            non-negative integer.
    """
    suffix = status_code_suffix(endpoint_name, status_code)
    return f"{VALIDATOR_PREFIX}{_upper_first(endpoint_name)}_customError{suffix}"


def status_code_suffix(endpoint_name: str, status_code: object) -> str:
    """Render a custom error key as the decimal digits of a non-negative integer.

    Integers (but not booleans) and strings of ASCII digits are accepted.

    Raises:
        MalformedStatusCodeError: For any other key.
    """
    if isinstance(status_code, bool):
        raise MalformedStatusCodeError(endpoint_name, status_code)
    if isinstance(status_code, int):
        if status_code < 0:
            raise MalformedStatusCodeError(endpoint_name, status_code)
        return str(status_code)
    if isinstance(status_code, str) and status_code.isascii() and status_code.isdigit():
        return str(int(status_code))
    raise MalformedStatusCodeError(endpoint_name, status_code)


def find_collisions(names: Iterable[ValidatorName]) -> list[NameCollisionError]:
    """Return one NameCollisionError per identifier claimed more than once.

    Errors are ordered by the first appearance of each colliding identifier.
    """
    claimants: dict[str, list[str]] = {}
    for name in names:
        claimants.setdefault(name.identifier, []).append(name.description)
    return [
        NameCollisionError(identifier, descriptions)
        for identifier, descriptions in claimants.items()
        if len(descriptions) > 1
    ]


# ################
# Implementation
# ################


def _upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]
