# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript spelling of validator checks.

Each validator is an exported type guard::

    export function validateUser(value: any): value is User {
        return !(value === null) && typeof value === "object" && ...;
    }
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence

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
from guardgen.targets.base import Expr, Precedence, join_expressions

# ###############
# Public Interface
# ###############


class TypeScriptTarget:
    """Emits TypeScript type guards."""

    name = "typescript"
    file_suffix = ".ts"

    def prelude(self) -> str | None:
        return None

    def is_absent(self, accessor: str) -> Expr:
        return Expr(f"{accessor} === undefined")

    def is_null(self, accessor: str) -> Expr:
        return Expr(f"{accessor} === null")

    def is_not_null(self, accessor: str) -> Expr:
        return Expr(f"!({accessor} === null)")

    def is_object_category(self, accessor: str) -> Expr:
        return Expr(f'typeof {accessor} === "object"')

    def is_boolean(self, accessor: str) -> Expr:
        return Expr(f'typeof {accessor} === "boolean"')

    def is_string(self, accessor: str) -> Expr:
        return Expr(f'typeof {accessor} === "string"')

    def is_number(self, accessor: str) -> Expr:
        return Expr(f'typeof {accessor} === "number"')

    def equals_boolean(self, accessor: str, value: bool) -> Expr:
        return Expr(f"{accessor} === {'true' if value else 'false'}")

    def equals_string(self, accessor: str, value: str) -> Expr:
        return Expr(f"{accessor} === {_string_literal(value)}")

    def equals_integer(self, accessor: str, value: int) -> Expr:
        return Expr(f"{accessor} === {value}")

    def field_accessor(self, accessor: str, field_name: str) -> str:
        return f"{accessor}[{_string_literal(field_name)}]"

    def is_sequence(self, accessor: str) -> Expr:
        return Expr(f"{accessor} instanceof Array")

    def every_element(self, accessor: str, element_check: Callable[[str], Expr]) -> Expr:
        check = element_check("curr").operand(Precedence.AND)
        return Expr(f"{accessor}.reduce((acc, curr) => acc && {check}, true)")

    def call(self, identifier: str, accessor: str) -> Expr:
        return Expr(f"{identifier}({accessor})")

    def conjunction(self, parts: Sequence[Expr]) -> Expr:
        return join_expressions(parts, "&&", Precedence.AND)

    def disjunction(self, parts: Sequence[Expr]) -> Expr:
        return join_expressions(parts, "||", Precedence.OR)

    def type_expression(self, node: TypeNode) -> str:
        if isinstance(node, VoidType):
            return "void"
        if isinstance(node, NullType):
            return "null"
        if isinstance(node, BooleanType):
            return "boolean"
        if isinstance(node, StringType):
            return "string"
        if isinstance(node, NumberType):
            return "number"
        if isinstance(node, BooleanConstantType):
            return "true" if node.value else "false"
        if isinstance(node, StringConstantType):
            return _string_literal(node.value)
        if isinstance(node, IntegerConstantType):
            return str(node.value)
        if isinstance(node, ObjectType):
            if not node.fields:
                return "{}"
            members = "; ".join(
                f"{_string_literal(name)}: {self.type_expression(field_type)}"
                for name, field_type in node.fields.items()
            )
            return "{ " + members + " }"
        if isinstance(node, ArrayType):
            element = self.type_expression(node.element)
            if _is_type_union(node.element):
                element = f"({element})"
            return f"{element}[]"
        if isinstance(node, OptionalType):
            return f"{self.type_expression(node.inner)} | undefined"
        if isinstance(node, UnionType):
            return " | ".join(self.type_expression(member) for member in node.members)
        if isinstance(node, ReferenceType):
            return node.name
        raise TypeError(f"Unsupported type node: {node!r}")

    def define_predicate(self, identifier: str, narrowed_type: str, body: Expr) -> str:
        return (
            f"export function {identifier}(value: any): value is {narrowed_type} {{\n"
            f"    return {body.text};\n"
            "}"
        )


# ################
# Implementation
# ################


def _string_literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _is_type_union(node: TypeNode) -> bool:
    """Return True if the type expression of *node* is a top-level `|` union."""
    if isinstance(node, OptionalType):
        return True
    if isinstance(node, UnionType):
        return len(node.members) > 1 or _is_type_union(node.members[0])
    return False
