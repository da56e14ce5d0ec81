# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for TypeScript validator generation."""

from guardgen.compiler.generator import generate_validators_source
from guardgen.model import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    VOID,
    ApiModel,
    EndpointDescriptor,
    array_type,
    boolean_constant,
    integer_constant,
    object_type,
    optional_type,
    string_constant,
    type_reference,
    union_type,
)
from guardgen.model.types import TypeNode

# ###############
# Helpers
# ###############


def _generate_type(node: TypeNode) -> str:
    """Generate TypeScript validators for a registry holding only `Example`."""
    return generate_validators_source(ApiModel(types={"Example": node}), "typescript")


def _expected(body: str, name: str = "validateExample", narrowed: str = "Example") -> str:
    return f"export function {name}(value: any): value is {narrowed} {{\n    return {body};\n}}"


# ###############
# Endpoints
# ###############


def test_generates_validators_for_endpoint_facets() -> None:
    api = ApiModel(
        endpoints={
            "example": EndpointDescriptor(
                method="POST",
                path=[],
                request_type=VOID,
                response_type=VOID,
                default_error_type=VOID,
                custom_error_types={403: VOID, 404: VOID},
            )
        },
    )
    assert generate_validators_source(api, "typescript") == (
        "export function validateExample_request(value: any): value is void {\n"
        "    return value === undefined;\n"
        "}\n"
        "\n"
        "export function validateExample_response(value: any): value is void {\n"
        "    return value === undefined;\n"
        "}\n"
        "\n"
        "export function validateExample_defaultError(value: any): value is void {\n"
        "    return value === undefined;\n"
        "}\n"
        "\n"
        "export function validateExample_customError403(value: any): value is void {\n"
        "    return value === undefined;\n"
        "}\n"
        "\n"
        "export function validateExample_customError404(value: any): value is void {\n"
        "    return value === undefined;\n"
        "}"
    )


def test_endpoint_facets_narrow_to_type_expressions() -> None:
    api = ApiModel(
        types={"User": object_type({"id": NUMBER})},
        endpoints={
            "listUsers": EndpointDescriptor(
                method="GET",
                path=["users"],
                request_type=object_type({"limit": optional_type(NUMBER)}),
                response_type=array_type(type_reference("User")),
                default_error_type=array_type(union_type(STRING, NULL)),
            )
        },
    )
    source = generate_validators_source(api, "typescript")
    assert 'validateListUsers_request(value: any): value is { "limit": number | undefined } {' in source
    assert "validateListUsers_response(value: any): value is User[] {" in source
    assert "validateListUsers_defaultError(value: any): value is (string | null)[] {" in source


# ###############
# Primitive and constant types
# ###############


def test_void() -> None:
    assert _generate_type(VOID) == _expected("value === undefined")


def test_null() -> None:
    assert _generate_type(NULL) == _expected("value === null")


def test_boolean() -> None:
    assert _generate_type(BOOLEAN) == _expected('typeof value === "boolean"')


def test_boolean_constant() -> None:
    assert _generate_type(boolean_constant(True)) == _expected("value === true")
    assert _generate_type(boolean_constant(False)) == _expected("value === false")


def test_string() -> None:
    assert _generate_type(STRING) == _expected('typeof value === "string"')


def test_string_constant() -> None:
    assert _generate_type(string_constant("some constant")) == _expected('value === "some constant"')


def test_string_constant_is_escaped() -> None:
    assert _generate_type(string_constant('say "hi"\n')) == _expected('value === "say \\"hi\\"\\n"')


def test_number() -> None:
    assert _generate_type(NUMBER) == _expected('typeof value === "number"')


def test_integer_constant() -> None:
    assert _generate_type(integer_constant(0)) == _expected("value === 0")
    assert _generate_type(integer_constant(123)) == _expected("value === 123")
    assert _generate_type(integer_constant(-1000)) == _expected("value === -1000")


# ###############
# Composite types
# ###############


def test_empty_object() -> None:
    assert _generate_type(object_type({})) == _expected('!(value === null) && typeof value === "object"')


def test_object_with_single_field() -> None:
    assert _generate_type(object_type({"singleField": NUMBER})) == _expected(
        '!(value === null) && typeof value === "object" && typeof value["singleField"] === "number"'
    )


def test_object_fields_checked_in_declaration_order() -> None:
    node = object_type({"field1": NUMBER, "field2": STRING, "field3": BOOLEAN})
    assert _generate_type(node) == _expected(
        '!(value === null) && typeof value === "object" && typeof value["field1"] === "number"'
        ' && typeof value["field2"] === "string" && typeof value["field3"] === "boolean"'
    )


def test_array() -> None:
    assert _generate_type(array_type(STRING)) == _expected(
        'value instanceof Array && value.reduce((acc, curr) => acc && typeof curr === "string", true)'
    )


def test_optional() -> None:
    assert _generate_type(optional_type(STRING)) == _expected('value === undefined || typeof value === "string"')


def test_union_members_in_declaration_order() -> None:
    assert _generate_type(union_type(STRING, NUMBER, BOOLEAN)) == _expected(
        'typeof value === "string" || typeof value === "number" || typeof value === "boolean"'
    )


def test_single_member_union_is_the_member() -> None:
    assert _generate_type(union_type(NULL)) == _expected("value === null")


def test_type_reference_calls_referenced_validator() -> None:
    api = ApiModel(types={"Example": type_reference("OtherType"), "OtherType": STRING})
    assert generate_validators_source(api, "typescript") == (
        _expected("validateOtherType(value)")
        + "\n\n"
        + _expected('typeof value === "string"', name="validateOtherType", narrowed="OtherType")
    )


# ###############
# Nesting
# ###############


def test_optional_field_is_parenthesized() -> None:
    assert _generate_type(object_type({"a": optional_type(STRING)})) == _expected(
        '!(value === null) && typeof value === "object"'
        ' && (value["a"] === undefined || typeof value["a"] === "string")'
    )


def test_union_element_is_parenthesized() -> None:
    assert _generate_type(array_type(union_type(STRING, NUMBER))) == _expected(
        "value instanceof Array && value.reduce((acc, curr) => acc"
        ' && (typeof curr === "string" || typeof curr === "number"), true)'
    )


def test_object_inside_union_is_not_parenthesized() -> None:
    assert _generate_type(union_type(NULL, object_type({"a": STRING}))) == _expected(
        'value === null || !(value === null) && typeof value === "object" && typeof value["a"] === "string"'
    )


def test_nested_object_field_accessors() -> None:
    assert _generate_type(object_type({"outer": object_type({"inner": NULL})})) == _expected(
        '!(value === null) && typeof value === "object"'
        ' && !(value["outer"] === null) && typeof value["outer"] === "object"'
        ' && value["outer"]["inner"] === null'
    )


def test_self_referential_type_calls_itself() -> None:
    api = ApiModel(types={"Tree": object_type({"children": array_type(type_reference("Tree"))})})
    assert generate_validators_source(api, "typescript") == _expected(
        '!(value === null) && typeof value === "object" && value["children"] instanceof Array'
        ' && value["children"].reduce((acc, curr) => acc && validateTree(curr), true)',
        name="validateTree",
        narrowed="Tree",
    )
