# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis of an API model before validators are generated.

Checks the structural problems that make generation impossible: unresolved
type references, custom error status codes that cannot be rendered into a
function name, and distinct definitions whose validator names collide. All
problems are collected so that callers can report them together; the
generator refuses to emit anything while the list is non-empty.
"""

from __future__ import annotations

from guardgen.compiler.errors import CompilerError, MalformedStatusCodeError, UnresolvedReferenceError
from guardgen.compiler.naming import (
    Facet,
    ValidatorName,
    custom_error_validator_name,
    facet_validator_name,
    find_collisions,
    type_validator_name,
)
from guardgen.model.api import ApiModel, EndpointDescriptor
from guardgen.model.types import (
    ArrayType,
    ObjectType,
    OptionalType,
    ReferenceType,
    TypeNode,
    UnionType,
)

# ###############
# Public Interface
# ###############


def analyze(api: ApiModel) -> list[CompilerError]:
    """Perform semantic analysis on an API model.

    Checks performed:
    - Every type reference reachable from a named type or an endpoint facet
      resolves to an entry of the type registry.
    - Every custom error status code renders as a non-negative integer.
    - No two named types or endpoint facets share a validator name.

    Args:
        api: The model to analyze.

    Returns:
        A list of :class:`~guardgen.compiler.errors.CompilerError` instances in
        declaration order, collisions last. An empty list means validators can
        be generated.
    """
    return _SemanticAnalyzer(api).analyze()


# ################
# Implementation
# ################


class _SemanticAnalyzer:
    """Performs semantic analysis on a single ApiModel."""

    def __init__(self, api: ApiModel) -> None:
        self._api = api

    def analyze(self) -> list[CompilerError]:
        """Run all semantic checks and return collected errors."""
        errors: list[CompilerError] = []
        names: list[ValidatorName] = []

        # 1. Named types.
        for type_name, definition in self._api.types.items():
            names.append(ValidatorName(type_validator_name(type_name), f"type '{type_name}'"))
            errors.extend(self._check_references(definition, f"type '{type_name}'"))

        # 2. Endpoint facets, including custom errors.
        for endpoint_name, endpoint in self._api.endpoints.items():
            names.extend(_facet_names(endpoint_name))
            errors.extend(self._check_endpoint(endpoint_name, endpoint, names))

        # 3. Validator name collisions.
        errors.extend(find_collisions(names))

        return errors

    def _check_endpoint(
        self,
        endpoint_name: str,
        endpoint: EndpointDescriptor,
        names: list[ValidatorName],
    ) -> list[CompilerError]:
        errors: list[CompilerError] = []
        ctx = f"endpoint '{endpoint_name}'"

        fixed_facets = (
            (Facet.REQUEST, endpoint.request_type),
            (Facet.RESPONSE, endpoint.response_type),
            (Facet.DEFAULT_ERROR, endpoint.default_error_type),
        )
        for facet, facet_type in fixed_facets:
            errors.extend(self._check_references(facet_type, f"{ctx} {facet.value}"))

        for status_code, error_type in endpoint.custom_error_types.items():
            try:
                identifier = custom_error_validator_name(endpoint_name, status_code)
            except MalformedStatusCodeError as exc:
                errors.append(exc)
            else:
                names.append(ValidatorName(identifier, f"{ctx} customError {status_code}"))
            errors.extend(self._check_references(error_type, f"{ctx} customError {status_code}"))

        return errors

    def _check_references(self, node: TypeNode, ctx: str) -> list[CompilerError]:
        """Check that every reference inside *node* resolves to a registered type."""
        errors: list[CompilerError] = []
        for name, path in _collect_references(node, (ctx,)):
            if self._api.lookup(name) is None:
                errors.append(UnresolvedReferenceError(name, " > ".join(path)))
        return errors


# ------------------------------------------------------------------
# Module-level helper functions
# ------------------------------------------------------------------


def _facet_names(endpoint_name: str) -> list[ValidatorName]:
    return [
        ValidatorName(
            facet_validator_name(endpoint_name, facet),
            f"endpoint '{endpoint_name}' {facet.value}",
        )
        for facet in Facet
    ]


def _collect_references(node: TypeNode, path: tuple[str, ...]) -> list[tuple[str, tuple[str, ...]]]:
    """Recursively collect (name, path) pairs for every reference below *node*."""
    if isinstance(node, ReferenceType):
        return [(node.name, path)]
    if isinstance(node, ObjectType):
        refs: list[tuple[str, tuple[str, ...]]] = []
        for field_name, field_type in node.fields.items():
            refs.extend(_collect_references(field_type, (*path, f"field '{field_name}'")))
        return refs
    if isinstance(node, ArrayType):
        return _collect_references(node.element, (*path, "array element"))
    if isinstance(node, OptionalType):
        return _collect_references(node.inner, (*path, "optional value"))
    if isinstance(node, UnionType):
        refs = []
        for index, member in enumerate(node.members, start=1):
            refs.extend(_collect_references(member, (*path, f"union member {index}")))
        return refs
    return []
