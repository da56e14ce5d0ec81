# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Endpoint descriptors and the top-level API model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic import Field as _Field
from pydantic.alias_generators import to_camel

from guardgen.model.types import TypeNode

# ###############
# Public Interface
# ###############

# HTTP status code key of a custom error type. Schema documents loaded from JSON
# can only carry string keys, so digit strings are accepted alongside integers.
# Keys are stored as written; semantic analysis rejects the ones that do not
# render as a non-negative integer, such as booleans and floats.
StatusCode = StrictBool | StrictInt | StrictFloat | StrictStr


class EndpointDescriptor(BaseModel):
    """The request, response and error shapes of one API operation."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    method: str
    path: list[str] = _Field(default_factory=list)
    request_type: TypeNode
    response_type: TypeNode
    default_error_type: TypeNode
    custom_error_types: dict[StatusCode, TypeNode] = _Field(default_factory=dict)


class ApiModel(BaseModel):
    """Endpoints plus the registry of named types, both in declaration order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    endpoints: dict[str, EndpointDescriptor] = _Field(default_factory=dict)
    types: dict[str, TypeNode] = _Field(default_factory=dict)

    def lookup(self, name: str) -> TypeNode | None:
        """Return the definition of the named type, or None if it is not registered."""
        return self.types.get(name)
