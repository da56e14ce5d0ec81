# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline: semantic analysis, validator compilation and emission."""

from guardgen.compiler.emitter import emit_document
from guardgen.compiler.errors import (
    CompilerError,
    MalformedStatusCodeError,
    NameCollisionError,
    UnresolvedReferenceError,
)
from guardgen.compiler.generator import PlannedValidator, generate_validators_source, plan_validators
from guardgen.compiler.naming import (
    Facet,
    ValidatorName,
    custom_error_validator_name,
    facet_validator_name,
    type_validator_name,
)
from guardgen.compiler.semantic_analysis import analyze
from guardgen.compiler.validators import compile_predicate, compile_type_node

__all__ = [
    "analyze",
    "compile_type_node",
    "compile_predicate",
    "emit_document",
    "generate_validators_source",
    "plan_validators",
    "PlannedValidator",
    "Facet",
    "ValidatorName",
    "type_validator_name",
    "facet_validator_name",
    "custom_error_validator_name",
    "CompilerError",
    "UnresolvedReferenceError",
    "NameCollisionError",
    "MalformedStatusCodeError",
]
