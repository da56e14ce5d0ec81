# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading API models from schema documents."""

import json
from pathlib import Path

import pytest

from guardgen.compiler.errors import MalformedStatusCodeError
from guardgen.compiler.generator import generate_validators_source
from guardgen.compiler.semantic_analysis import analyze
from guardgen.model import (
    NULL,
    STRING,
    VOID,
    ArrayType,
    IntegerConstantType,
    ObjectType,
    ReferenceType,
    StringConstantType,
)
from guardgen.schema import SchemaError, load_api_model, parse_api_model

# ###############
# Helpers
# ###############

_TREE_SCHEMA = """\
types:
  Tree:
    kind: object
    fields:
      label: {kind: string}
      children: {kind: array, element: {kind: reference, name: Tree}}
  Status:
    kind: union
    members:
      - {kind: string-constant, value: active}
      - {kind: integer-constant, value: -1}
endpoints:
  getTree:
    method: GET
    path: [trees, id]
    request_type: {kind: void}
    response_type: {kind: reference, name: Tree}
    default_error_type: {kind: string}
    custom_error_types:
      404: {kind: "null"}
      403: {kind: string}
"""


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Normal Cases
# ###############


def test_parse_yaml_schema() -> None:
    api = parse_api_model(_TREE_SCHEMA)

    assert list(api.types) == ["Tree", "Status"]
    tree = api.types["Tree"]
    assert isinstance(tree, ObjectType)
    assert list(tree.fields) == ["label", "children"]
    children = tree.fields["children"]
    assert isinstance(children, ArrayType)
    assert children.element == ReferenceType(name="Tree")

    status = api.types["Status"]
    assert isinstance(status.members[0], StringConstantType)
    assert isinstance(status.members[1], IntegerConstantType)
    assert status.members[1].value == -1

    endpoint = api.endpoints["getTree"]
    assert endpoint.method == "GET"
    assert endpoint.path == ["trees", "id"]
    assert endpoint.request_type == VOID
    assert list(endpoint.custom_error_types.values()) == [NULL, STRING]


def test_yaml_schema_generates_validators() -> None:
    source = generate_validators_source(parse_api_model(_TREE_SCHEMA))
    assert "export function validateGetTree_customError404(value: any): value is null {" in source
    assert source.index("validateGetTree_customError404") < source.index("validateGetTree_customError403")


def test_load_json_schema_with_camel_case_keys(tmp_path: Path) -> None:
    document = {
        "types": {"Id": {"kind": "number"}},
        "endpoints": {
            "remove": {
                "method": "DELETE",
                "path": ["items"],
                "requestType": {"kind": "reference", "name": "Id"},
                "responseType": {"kind": "void"},
                "defaultErrorType": {"kind": "string"},
                "customErrorTypes": {"409": {"kind": "string"}},
            }
        },
    }
    api = load_api_model(_write(tmp_path, "api.json", json.dumps(document)))
    assert api.endpoints["remove"].request_type == ReferenceType(name="Id")
    source = generate_validators_source(api)
    assert "validateRemove_customError409" in source


def test_yml_suffix(tmp_path: Path) -> None:
    api = load_api_model(_write(tmp_path, "api.yml", "types:\n  Flag: {kind: boolean}\n"))
    assert list(api.types) == ["Flag"]


def test_status_code_keys_keep_their_yaml_types() -> None:
    schema = """\
endpoints:
  e:
    method: GET
    request_type: {kind: void}
    response_type: {kind: void}
    default_error_type: {kind: void}
    custom_error_types:
      true: {kind: string}
      404.0: {kind: string}
      "409": {kind: string}
      410: {kind: string}
"""
    api = parse_api_model(schema)
    keys = list(api.endpoints["e"].custom_error_types)
    assert keys == [True, 404.0, "409", 410]
    assert [type(key) for key in keys] == [bool, float, str, int]

    errors = analyze(api)
    assert [type(e) for e in errors] == [MalformedStatusCodeError, MalformedStatusCodeError]
    assert [e.status_code for e in errors] == [True, 404.0]
    with pytest.raises(MalformedStatusCodeError):
        generate_validators_source(api)


def test_empty_document_is_empty_model() -> None:
    api = parse_api_model("")
    assert api.types == {}
    assert api.endpoints == {}


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SchemaError, match="not found"):
        load_api_model(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path: Path) -> None:
    with pytest.raises(SchemaError, match="unsupported schema file suffix"):
        load_api_model(_write(tmp_path, "api.toml", ""))


def test_invalid_yaml() -> None:
    with pytest.raises(SchemaError, match="Invalid YAML"):
        parse_api_model("types: [unclosed", source_label="api.yaml")


def test_invalid_json() -> None:
    with pytest.raises(SchemaError, match="Invalid JSON in api.json"):
        parse_api_model("{", fmt="json", source_label="api.json")


def test_document_must_be_mapping() -> None:
    with pytest.raises(SchemaError, match="must be a mapping"):
        parse_api_model("- a\n- b\n")


def test_unknown_kind() -> None:
    with pytest.raises(SchemaError, match="invalid schema document"):
        parse_api_model("types:\n  T: {kind: date}\n")


def test_unquoted_null_kind_is_rejected() -> None:
    # YAML reads a bare `null` as the null value, not the string "null".
    with pytest.raises(SchemaError):
        parse_api_model("types:\n  T: {kind: null}\n")


def test_unknown_top_level_key() -> None:
    with pytest.raises(SchemaError):
        parse_api_model("models: {}\n")


def test_empty_union() -> None:
    with pytest.raises(SchemaError):
        parse_api_model("types:\n  T: {kind: union, members: []}\n")
