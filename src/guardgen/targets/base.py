# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Contract between the validator compiler and an output language.

The compiler decides *what* is checked and in which order; a target decides
how each check is spelled. Targets are stateless and deterministic.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from guardgen.model.types import TypeNode

# ###############
# Public Interface
# ###############


class Precedence(enum.IntEnum):
    """Binding strength of a boolean expression, loosest first."""

    OR = 1
    AND = 2
    ATOM = 3


@dataclass(frozen=True)
class Expr:
    """A boolean expression in the target language.

    Attributes:
        text: Source text of the expression.
        precedence: How tightly the outermost operator of *text* binds.
    """

    text: str
    precedence: Precedence = Precedence.ATOM

    def operand(self, context: Precedence) -> str:
        """Return the text, parenthesized if it binds looser than *context*."""
        if self.precedence < context:
            return f"({self.text})"
        return self.text


def join_expressions(parts: Sequence[Expr], operator: str, precedence: Precedence) -> Expr:
    """Join *parts* with a binary *operator* of the given *precedence*.

    A single part is returned unchanged; order is kept as given.
    """
    if not parts:
        raise ValueError("cannot join an empty sequence of expressions")
    if len(parts) == 1:
        return parts[0]
    text = f" {operator} ".join(part.operand(precedence) for part in parts)
    return Expr(text, precedence)


@runtime_checkable
class Target(Protocol):
    """Spelling of validator checks for one output language."""

    name: str
    file_suffix: str

    def prelude(self) -> str | None:
        """Return text emitted before the first validator, or None."""
        ...

    def is_absent(self, accessor: str) -> Expr: ...

    def is_null(self, accessor: str) -> Expr: ...

    def is_not_null(self, accessor: str) -> Expr: ...

    def is_object_category(self, accessor: str) -> Expr: ...

    def is_boolean(self, accessor: str) -> Expr: ...

    def is_string(self, accessor: str) -> Expr: ...

    def is_number(self, accessor: str) -> Expr: ...

    def equals_boolean(self, accessor: str, value: bool) -> Expr: ...

    def equals_string(self, accessor: str, value: str) -> Expr: ...

    def equals_integer(self, accessor: str, value: int) -> Expr: ...

    def field_accessor(self, accessor: str, field_name: str) -> str:
        """Return an expression reading *field_name* of the object at *accessor*.

        Only evaluated after the object checks succeeded.
        """
        ...

    def is_sequence(self, accessor: str) -> Expr: ...

    def every_element(self, accessor: str, element_check: Callable[[str], Expr]) -> Expr:
        """Return a check that holds when every element satisfies *element_check*.

        *element_check* receives the accessor of a single element.
        """
        ...

    def call(self, identifier: str, accessor: str) -> Expr: ...

    def conjunction(self, parts: Sequence[Expr]) -> Expr: ...

    def disjunction(self, parts: Sequence[Expr]) -> Expr: ...

    def type_expression(self, node: TypeNode) -> str:
        """Return the static type of *node*, used for the narrowing annotation."""
        ...

    def define_predicate(self, identifier: str, narrowed_type: str, body: Expr) -> str:
        """Return a complete validator function definition."""
        ...
