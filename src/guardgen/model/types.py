# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type nodes of the language-agnostic type model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class VoidType(_Node):
    """The absence of a value."""

    kind: Literal["void"] = "void"


class NullType(_Node):
    """The explicit null value."""

    kind: Literal["null"] = "null"


class BooleanType(_Node):
    """Any boolean value."""

    kind: Literal["boolean"] = "boolean"


class StringType(_Node):
    """Any string value."""

    kind: Literal["string"] = "string"


class NumberType(_Node):
    """Any numeric value."""

    kind: Literal["number"] = "number"


class BooleanConstantType(_Node):
    """Exactly one boolean literal."""

    kind: Literal["boolean-constant"] = "boolean-constant"
    value: StrictBool


class StringConstantType(_Node):
    """Exactly one string literal."""

    kind: Literal["string-constant"] = "string-constant"
    value: StrictStr


class IntegerConstantType(_Node):
    """Exactly one integer literal."""

    kind: Literal["integer-constant"] = "integer-constant"
    value: StrictInt


class ObjectType(_Node):
    """A record of named fields.

    Field order is significant: generated validators check the fields in the
    order they are declared here.
    """

    kind: Literal["object"] = "object"
    fields: dict[str, TypeNode] = _Field(default_factory=dict)


class ArrayType(_Node):
    """A homogeneous ordered sequence."""

    kind: Literal["array"] = "array"
    element: TypeNode


class OptionalType(_Node):
    """Either absent or a value of the inner type."""

    kind: Literal["optional"] = "optional"
    inner: TypeNode


class UnionType(_Node):
    """Any one of the member types, tried in declaration order."""

    kind: Literal["union"] = "union"
    members: list[TypeNode] = _Field(min_length=1)


class ReferenceType(_Node):
    """Indirection to a named type in the registry."""

    kind: Literal["reference"] = "reference"
    name: str


# A node of the type model. The `kind` discriminator keeps deserialization of
# schema documents unambiguous.
TypeNode = Annotated[
    VoidType
    | NullType
    | BooleanType
    | StringType
    | NumberType
    | BooleanConstantType
    | StringConstantType
    | IntegerConstantType
    | ObjectType
    | ArrayType
    | OptionalType
    | UnionType
    | ReferenceType,
    _Field(discriminator="kind"),
]

VOID = VoidType()
NULL = NullType()
BOOLEAN = BooleanType()
STRING = StringType()
NUMBER = NumberType()


def boolean_constant(value: bool) -> BooleanConstantType:
    return BooleanConstantType(value=value)


def string_constant(value: str) -> StringConstantType:
    return StringConstantType(value=value)


def integer_constant(value: int) -> IntegerConstantType:
    return IntegerConstantType(value=value)


def object_type(fields: dict[str, TypeNode]) -> ObjectType:
    """Build an object node; *fields* keeps its insertion order."""
    return ObjectType(fields=fields)


def array_type(element: TypeNode) -> ArrayType:
    return ArrayType(element=element)


def optional_type(inner: TypeNode) -> OptionalType:
    return OptionalType(inner=inner)


def union_type(*members: TypeNode) -> UnionType:
    """Build a union node from one or more members, in evaluation order."""
    return UnionType(members=list(members))


def type_reference(name: str) -> ReferenceType:
    return ReferenceType(name=name)


# Resolve forward references for models that use TypeNode.
ObjectType.model_rebuild()
ArrayType.model_rebuild()
OptionalType.model_rebuild()
UnionType.model_rebuild()
