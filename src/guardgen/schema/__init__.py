# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema documents describing API models."""

from guardgen.schema.loader import SCHEMA_SUFFIXES, SchemaError, load_api_model, parse_api_model

__all__ = [
    "SCHEMA_SUFFIXES",
    "SchemaError",
    "load_api_model",
    "parse_api_model",
]
