# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive compilation of type nodes into boolean validation expressions.

Given a type node and an accessor expression for the value under test, the
compiler produces an expression that holds exactly when the value conforms to
the node. Checks appear in declaration order: object fields left to right,
union members left to right.

A reference is compiled into a call to the referenced type's own validator and
is never inlined. Every named type therefore yields exactly one function, which
keeps the output finite for self-referential and mutually recursive types.
"""

from __future__ import annotations

from guardgen.compiler.errors import UnresolvedReferenceError
from guardgen.compiler.naming import type_validator_name
from guardgen.model.api import ApiModel
from guardgen.model.types import (
    ArrayType,
    BooleanConstantType,
    BooleanType,
    IntegerConstantType,
    NullType,
    NumberType,
    ObjectType,
    OptionalType,
    ReferenceType,
    StringConstantType,
    StringType,
    TypeNode,
    UnionType,
    VoidType,
)
from guardgen.targets.base import Expr, Target

# ###############
# Public Interface
# ###############

VALUE_PARAMETER = "value"


def compile_type_node(
    node: TypeNode,
    accessor: str,
    *,
    api: ApiModel,
    target: Target,
    origin: str = "<root>",
) -> Expr:
    """Compile *node* into a boolean expression over *accessor*.

    Args:
        node: The type to check against.
        accessor: Target-language expression denoting the value under test.
        api: The model whose registry resolves reference nodes.
        target: The output language.
        origin: Description of where *node* sits, used in error messages.

    Returns:
        The compiled :class:`~guardgen.targets.base.Expr`.

    Raises:
        UnresolvedReferenceError: If a reference inside *node* names a type
            missing from the registry of *api*.
    """
    return _ValidatorCompiler(api, target).compile(node, accessor, (origin,))


def compile_predicate(
    identifier: str,
    node: TypeNode,
    narrowed_type: str,
    *,
    api: ApiModel,
    target: Target,
    origin: str,
) -> str:
    """Compile a complete validator function named *identifier*.

    The function takes one untyped ``value`` parameter and returns the
    expression compiled from *node*. A true result narrows ``value`` to
    *narrowed_type* in targets that support type guards.
    """
    body = compile_type_node(node, VALUE_PARAMETER, api=api, target=target, origin=origin)
    return target.define_predicate(identifier, narrowed_type, body)


# ################
# Implementation
# ################


class _ValidatorCompiler:
    """Compiles type nodes against one API model for one target."""

    def __init__(self, api: ApiModel, target: Target) -> None:
        self._api = api
        self._target = target

    def compile(self, node: TypeNode, accessor: str, origin: tuple[str, ...]) -> Expr:
        target = self._target

        if isinstance(node, VoidType):
            return target.is_absent(accessor)
        if isinstance(node, NullType):
            return target.is_null(accessor)
        if isinstance(node, BooleanType):
            return target.is_boolean(accessor)
        if isinstance(node, BooleanConstantType):
            return target.equals_boolean(accessor, node.value)
        if isinstance(node, StringType):
            return target.is_string(accessor)
        if isinstance(node, StringConstantType):
            return target.equals_string(accessor, node.value)
        if isinstance(node, NumberType):
            return target.is_number(accessor)
        if isinstance(node, IntegerConstantType):
            return target.equals_integer(accessor, node.value)
        if isinstance(node, ObjectType):
            return self._compile_object(node, accessor, origin)
        if isinstance(node, ArrayType):
            element_origin = (*origin, "array element")
            return target.conjunction(
                [
                    target.is_sequence(accessor),
                    target.every_element(
                        accessor,
                        lambda element: self.compile(node.element, element, element_origin),
                    ),
                ]
            )
        if isinstance(node, OptionalType):
            return target.disjunction(
                [
                    target.is_absent(accessor),
                    self.compile(node.inner, accessor, (*origin, "optional value")),
                ]
            )
        if isinstance(node, UnionType):
            return target.disjunction(
                [
                    self.compile(member, accessor, (*origin, f"union member {index}"))
                    for index, member in enumerate(node.members, start=1)
                ]
            )
        if isinstance(node, ReferenceType):
            if self._api.lookup(node.name) is None:
                raise UnresolvedReferenceError(node.name, " > ".join(origin))
            return target.call(type_validator_name(node.name), accessor)
        raise TypeError(f"Unsupported type node: {node!r}")

    def _compile_object(self, node: ObjectType, accessor: str, origin: tuple[str, ...]) -> Expr:
        target = self._target
        checks = [target.is_not_null(accessor), target.is_object_category(accessor)]
        for field_name, field_type in node.fields.items():
            checks.append(
                self.compile(
                    field_type,
                    target.field_accessor(accessor, field_name),
                    (*origin, f"field '{field_name}'"),
                )
            )
        return target.conjunction(checks)
