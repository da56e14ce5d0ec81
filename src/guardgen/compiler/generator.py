# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation of a validator document from an API model.

The document contains one validator per named type, in registry order,
followed by the validators of every endpoint in endpoint order: request,
response, default error, then one per custom error status code in the order
the codes were declared. Generation is deterministic and all-or-nothing: any
structural problem raises before a single validator is compiled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from guardgen.compiler.emitter import emit_document
from guardgen.compiler.naming import (
    Facet,
    custom_error_validator_name,
    facet_validator_name,
    type_validator_name,
)
from guardgen.compiler.semantic_analysis import analyze
from guardgen.compiler.validators import compile_predicate
from guardgen.model.api import ApiModel
from guardgen.model.types import TypeNode
from guardgen.targets import DEFAULT_TARGET, Target, get_target

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class PlannedValidator:
    """One validator function scheduled for emission.

    Attributes:
        identifier: Name of the generated function.
        node: The type the function checks.
        narrowed_type: Name of the named type the function narrows to, or None
            for endpoint facets, which narrow to the target's type expression
            of *node*.
        origin: Description of the definition, used in error messages.
    """

    identifier: str
    node: TypeNode
    narrowed_type: str | None
    origin: str


def plan_validators(api: ApiModel) -> list[PlannedValidator]:
    """List every validator of *api* in emission order.

    Raises:
        MalformedStatusCodeError: If a custom error status code cannot be
            rendered into a function name.
    """
    plan = [
        PlannedValidator(type_validator_name(name), node, name, f"type '{name}'")
        for name, node in api.types.items()
    ]
    for endpoint_name, endpoint in api.endpoints.items():
        ctx = f"endpoint '{endpoint_name}'"
        fixed_facets = (
            (Facet.REQUEST, endpoint.request_type),
            (Facet.RESPONSE, endpoint.response_type),
            (Facet.DEFAULT_ERROR, endpoint.default_error_type),
        )
        for facet, node in fixed_facets:
            plan.append(
                PlannedValidator(facet_validator_name(endpoint_name, facet), node, None, f"{ctx} {facet.value}")
            )
        for status_code, node in endpoint.custom_error_types.items():
            plan.append(
                PlannedValidator(
                    custom_error_validator_name(endpoint_name, status_code),
                    node,
                    None,
                    f"{ctx} customError {status_code}",
                )
            )
    return plan


def generate_validators_source(api: ApiModel, target: str | Target = DEFAULT_TARGET) -> str:
    """Generate the validator document for *api*.

    Args:
        api: The model to compile. It is not modified.
        target: A registered target name (``"typescript"``, ``"python"``) or a
            :class:`~guardgen.targets.base.Target` instance.

    Returns:
        The complete source text.

    Raises:
        CompilerError: The first problem reported by
            :func:`~guardgen.compiler.semantic_analysis.analyze`. Any further
            problems are attached to it as exception notes.
        ValueError: If *target* names no registered target.
    """
    resolved_target = get_target(target)

    errors = analyze(api)
    if errors:
        first = errors[0]
        for other in errors[1:]:
            first.add_note(other.message)
        raise first

    plan = plan_validators(api)
    logger.debug(
        "Compiling %d validator(s) for %d type(s) and %d endpoint(s) to %s",
        len(plan),
        len(api.types),
        len(api.endpoints),
        resolved_target.name,
    )
    definitions = [
        compile_predicate(
            planned.identifier,
            planned.node,
            _narrowed_type(planned, resolved_target),
            api=api,
            target=resolved_target,
            origin=planned.origin,
        )
        for planned in plan
    ]
    return emit_document(resolved_target, definitions)


# ################
# Implementation
# ################


def _narrowed_type(planned: PlannedValidator, target: Target) -> str:
    if planned.narrowed_type is not None:
        return planned.narrowed_type
    return target.type_expression(planned.node)
