# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Python spelling of validator checks.

The generated module defines an ``ABSENT`` sentinel of type ``Absent`` standing
for "no value" (a missing object field, an empty request body). Type guards for
``void`` and ``optional`` narrow to ``Absent``. Object fields are read with
``dict.get(name, ABSENT)``, so a missing field and a field holding ``None``
stay distinguishable. Each validator returns a ``TypeGuard``::

    def validateUser(value: Any) -> TypeGuard[User]:
        return value is not None and isinstance(value, dict) and ...
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

ABSENT_NAME = "ABSENT"
ABSENT_TYPE_NAME = "Absent"

PRELUDE = f"""\
# Generated by guardgen. Do not edit.

from __future__ import annotations

from typing import Any, Literal, TypeGuard


class {ABSENT_TYPE_NAME}:
    __slots__ = ()


{ABSENT_NAME} = {ABSENT_TYPE_NAME}()"""


class PythonTarget:
    """Emits Python type-guard functions."""

    name = "python"
    file_suffix = ".py"

    def prelude(self) -> str | None:
        return PRELUDE

    def is_absent(self, accessor: str) -> Expr:
        return Expr(f"{accessor} is {ABSENT_NAME}")

    def is_null(self, accessor: str) -> Expr:
        return Expr(f"{accessor} is None")

    def is_not_null(self, accessor: str) -> Expr:
        return Expr(f"{accessor} is not None")

    def is_object_category(self, accessor: str) -> Expr:
        return Expr(f"isinstance({accessor}, dict)")

    def is_boolean(self, accessor: str) -> Expr:
        return Expr(f"isinstance({accessor}, bool)")

    def is_string(self, accessor: str) -> Expr:
        return Expr(f"isinstance({accessor}, str)")

    def is_number(self, accessor: str) -> Expr:
        # bool is a subclass of int but is not a number here.
        return self.conjunction(
            [
                Expr(f"isinstance({accessor}, (int, float))"),
                Expr(f"not isinstance({accessor}, bool)"),
            ]
        )

    def equals_boolean(self, accessor: str, value: bool) -> Expr:
        return Expr(f"{accessor} is {value!r}")

    def equals_string(self, accessor: str, value: str) -> Expr:
        return Expr(f"{accessor} == {_string_literal(value)}")

    def equals_integer(self, accessor: str, value: int) -> Expr:
        # True == 1 in Python; strict equality must reject booleans.
        return self.conjunction(
            [
                Expr(f"not isinstance({accessor}, bool)"),
                Expr(f"{accessor} == {value}"),
            ]
        )

    def field_accessor(self, accessor: str, field_name: str) -> str:
        return f"{accessor}.get({_string_literal(field_name)}, {ABSENT_NAME})"

    def is_sequence(self, accessor: str) -> Expr:
        return Expr(f"isinstance({accessor}, list)")

    def every_element(self, accessor: str, element_check: Callable[[str], Expr]) -> Expr:
        return Expr(f"all({element_check('curr').text} for curr in {accessor})")

    def call(self, identifier: str, accessor: str) -> Expr:
        return Expr(f"{identifier}({accessor})")

    def conjunction(self, parts: Sequence[Expr]) -> Expr:
        return join_expressions(parts, "and", Precedence.AND)

    def disjunction(self, parts: Sequence[Expr]) -> Expr:
        return join_expressions(parts, "or", Precedence.OR)

    def type_expression(self, node: TypeNode) -> str:
        if isinstance(node, VoidType):
            return ABSENT_TYPE_NAME
        if isinstance(node, NullType):
            return "None"
        if isinstance(node, BooleanType):
            return "bool"
        if isinstance(node, StringType):
            return "str"
        if isinstance(node, NumberType):
            return "float"
        if isinstance(node, BooleanConstantType):
            return f"Literal[{node.value!r}]"
        if isinstance(node, StringConstantType):
            return f"Literal[{_string_literal(node.value)}]"
        if isinstance(node, IntegerConstantType):
            return f"Literal[{node.value}]"
        if isinstance(node, ObjectType):
            return "dict[str, Any]"
        if isinstance(node, ArrayType):
            return f"list[{self.type_expression(node.element)}]"
        if isinstance(node, OptionalType):
            return f"{self.type_expression(node.inner)} | {ABSENT_TYPE_NAME}"
        if isinstance(node, UnionType):
            return " | ".join(self.type_expression(member) for member in node.members)
        if isinstance(node, ReferenceType):
            return node.name
        raise TypeError(f"Unsupported type node: {node!r}")

    def define_predicate(self, identifier: str, narrowed_type: str, body: Expr) -> str:
        return f"def {identifier}(value: Any) -> TypeGuard[{narrowed_type}]:\n    return {body.text}"


# ################
# Implementation
# ################


def _string_literal(value: str) -> str:
    # JSON string syntax is a subset of Python's double-quoted literals.
    return json.dumps(value, ensure_ascii=False)
