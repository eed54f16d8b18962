"""Unit tests for enum, interface and alias declarations."""

from __future__ import annotations

from openapi_to_typescript_generator.declarations import generate_enum, generate_type
from openapi_to_typescript_generator.typescript import render_declaration

_ROLE_SCHEMA = {
    "type": "string",
    "x-enum-varnames": ["ADMIN", "USER", "GUEST"],
    "x-enum-comments": {"ADMIN": "Administrator with full access"},
}


def test_enum_arms_keep_order_and_only_commented_arm_has_doc() -> None:
    """Three arms in source order; only the commented variant carries a doc comment."""
    declaration = generate_enum("userRole", _ROLE_SCHEMA)
    assert declaration is not None
    assert declaration.name == "UserRole"
    assert declaration.kind == "enum"

    rendered = render_declaration(declaration)
    assert rendered == (
        "export type UserRole = /** Administrator with full access */\n"
        "  | 'ADMIN'\n"
        "  | 'USER'\n"
        "  | 'GUEST';"
    )
    assert rendered.count("| '") == 3
    assert rendered.count("/**") == 1


def test_enum_generation_skips_non_enum_schemas() -> None:
    """Schemas without variant names produce no declaration."""
    assert generate_enum("Role", {"type": "string", "enum": ["a", "b"]}) is None
    assert generate_enum("Role", {"type": "object", "properties": {}}) is None
    assert generate_enum("Role", "not a schema") is None


def test_interface_fields_follow_required_list_and_descriptions() -> None:
    """Fields keep declared order, ``?`` for optional, doc comments from descriptions."""
    definition = {
        "type": "object",
        "description": "User information",
        "required": ["id", "role"],
        "properties": {
            "id": {"type": "string", "description": "Unique identifier"},
            "role": {"$ref": "#/components/schemas/entities.UserRole"},
            "tags": {"type": "array", "items": {"type": "string"}},
        },
    }
    declaration = generate_type("entities.user", definition, "Api.")
    assert declaration is not None
    assert declaration.kind == "interface"
    assert render_declaration(declaration) == (
        "/** User information */\n"
        "export interface User {\n"
        "  /** Unique identifier */\n"
        "  id: string;\n"
        "  role: Api.UserRole;\n"
        "  tags?: string[];\n"
        "}"
    )


def test_empty_properties_still_declares_interface() -> None:
    """An explicit empty ``properties`` mapping yields an empty interface."""
    declaration = generate_type("Empty", {"type": "object", "properties": {}})
    assert declaration is not None
    assert render_declaration(declaration) == "export interface Empty {\n\n}"


def test_all_of_becomes_intersection_alias() -> None:
    """``allOf`` members are joined with ``&`` in order."""
    definition = {
        "allOf": [
            {"$ref": "#/components/schemas/Base"},
            {"type": "object", "properties": {"extra": {"type": "string"}}},
        ],
    }
    declaration = generate_type("extended", definition)
    assert declaration is not None
    assert declaration.kind == "alias"
    assert render_declaration(declaration) == (
        "export type Extended = Base & {\n  extra?: string\n};"
    )


def test_one_of_and_any_of_become_union_aliases() -> None:
    """``oneOf`` and ``anyOf`` both render as ``|`` unions."""
    one_of = generate_type(
        "Pet",
        {
            "description": "A pet",
            "oneOf": [
                {"$ref": "#/components/schemas/Cat"},
                {"$ref": "#/components/schemas/Dog"},
            ],
        },
    )
    any_of = generate_type("Id", {"anyOf": [{"type": "string"}, {"type": "integer"}]})
    assert one_of is not None and any_of is not None
    assert render_declaration(one_of) == "/** A pet */\nexport type Pet = Cat | Dog;"
    assert render_declaration(any_of) == "export type Id = string | number;"


def test_composite_precedence_is_all_of_then_one_of() -> None:
    """``allOf`` wins over ``oneOf``, which wins over ``anyOf`` and ``properties``."""
    definition = {
        "oneOf": [{"type": "string"}],
        "anyOf": [{"type": "integer"}],
        "properties": {"a": {"type": "string"}},
    }
    declaration = generate_type("Mixed", definition)
    assert declaration is not None
    assert declaration.body == "string"

    definition["allOf"] = [{"type": "boolean"}]
    declaration = generate_type("Mixed", definition)
    assert declaration is not None
    assert declaration.body == "boolean"


def test_unstructured_definitions_are_skipped() -> None:
    """Schemas that are neither objects with properties nor composites yield nothing."""
    assert generate_type("Timestamp", {"type": "string", "format": "date-time"}) is None
    assert generate_type("Bag", {"type": "object"}) is None
    assert generate_type("Nothing", {"allOf": []}) is None
    assert generate_type("Broken", None) is None
