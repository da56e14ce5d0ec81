# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model for Guardgen (type nodes, endpoints and the API model)."""

from guardgen.model.api import ApiModel, EndpointDescriptor, StatusCode
from guardgen.model.types import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    VOID,
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
    array_type,
    boolean_constant,
    integer_constant,
    object_type,
    optional_type,
    string_constant,
    type_reference,
    union_type,
)

__all__ = [
    # Type nodes
    "VoidType",
    "NullType",
    "BooleanType",
    "StringType",
    "NumberType",
    "BooleanConstantType",
    "StringConstantType",
    "IntegerConstantType",
    "ObjectType",
    "ArrayType",
    "OptionalType",
    "UnionType",
    "ReferenceType",
    "TypeNode",
    # Constants and constructors
    "VOID",
    "NULL",
    "BOOLEAN",
    "STRING",
    "NUMBER",
    "boolean_constant",
    "string_constant",
    "integer_constant",
    "object_type",
    "array_type",
    "optional_type",
    "union_type",
    "type_reference",
    # API
    "StatusCode",
    "EndpointDescriptor",
    "ApiModel",
]
