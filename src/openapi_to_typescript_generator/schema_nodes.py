"""Decode raw JSON schema fragments into ``SchemaNode`` values.

Two entry points share the same node types but differ in which facet of a
schema wins when several are present:

- ``decode_schema`` is used wherever a schema becomes a type expression
  (property types, array items, parameters, request bodies, composite members).
- ``decode_definition`` is used for ``components.schemas`` entries, where enum
  and composite keywords take precedence over ``type``.
"""

from __future__ import annotations

from typing import Optional, TypeGuard, Union

from .json_types import JSONObject, JSONValue
from .model_types import (
    ArrayType,
    CompositeOperator,
    CompositeType,
    EnumType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    Reference,
    SchemaNode,
    UnstructuredType,
)

_PRIMITIVE_KINDS: dict[str, PrimitiveKind] = {
    "string": "string",
    "integer": "integer",
    "number": "number",
    "boolean": "boolean",
}
_COMPOSITE_OPERATORS: tuple[CompositeOperator, ...] = ("allOf", "oneOf", "anyOf")

ENUM_VARNAMES_KEY = "x-enum-varnames"
ENUM_COMMENTS_KEY = "x-enum-comments"


def decode_schema(raw: JSONValue) -> SchemaNode:
    """Decode a schema fragment for use in a type expression.

    Args:
        raw (JSONValue): Raw schema fragment.

    Returns:
        SchemaNode: Decoded node; unknown shapes become ``UnstructuredType``.
    """
    if not isinstance(raw, dict):
        return UnstructuredType()
    description = _description(raw)

    reference = _reference(raw)
    if reference is not None:
        return reference

    if raw.get("type") == "array" and _has_items(raw.get("items")):
        return ArrayType(items=decode_schema(raw["items"]), description=description)

    enum_node = _enum(raw)
    if enum_node is not None:
        return enum_node

    schema_type = raw.get("type")
    if isinstance(schema_type, str) and schema_type in _PRIMITIVE_KINDS:
        return PrimitiveType(kind=_PRIMITIVE_KINDS[schema_type], description=description)

    if schema_type == "object":
        return _object(raw)

    composite = _composite(raw)
    if composite is not None:
        return composite

    return UnstructuredType(description=description)


def decode_definition(raw: JSONValue) -> SchemaNode:
    """Decode a ``components.schemas`` entry for declaration generation.

    Args:
        raw (JSONValue): Raw schema definition.

    Returns:
        SchemaNode: ``EnumType``, ``CompositeType`` or ``ObjectType`` when the
        definition yields a declaration, otherwise ``UnstructuredType``.
    """
    if not isinstance(raw, dict):
        return UnstructuredType()

    enum_node = _enum(raw)
    if enum_node is not None:
        return enum_node

    composite = _composite(raw)
    if composite is not None:
        return composite

    if isinstance(raw.get("properties"), dict):
        return _object(raw)

    return UnstructuredType(description=_description(raw))


def _reference(raw: JSONObject) -> Optional[Reference]:
    ref = raw.get("$ref")
    if isinstance(ref, str) and ref:
        return Reference(ref=ref, description=_description(raw))
    return None


def _enum(raw: JSONObject) -> Optional[EnumType]:
    varnames = raw.get(ENUM_VARNAMES_KEY)
    if not isinstance(varnames, list) or not varnames:
        return None

    comments: list[tuple[str, str]] = []
    raw_comments = raw.get(ENUM_COMMENTS_KEY)
    if isinstance(raw_comments, dict):
        for key, value in raw_comments.items():
            if isinstance(value, str) and value:
                comments.append((str(key), value))

    return EnumType(
        varnames=tuple(str(name) for name in varnames),
        comments=tuple(comments),
        description=_description(raw),
    )


def _object(raw: JSONObject) -> ObjectType:
    raw_properties = raw.get("properties")
    properties: Optional[tuple[tuple[str, SchemaNode], ...]] = None
    if isinstance(raw_properties, dict):
        properties = tuple(
            (str(name), decode_schema(value)) for name, value in raw_properties.items()
        )

    raw_required = raw.get("required")
    required: frozenset[str] = frozenset()
    if isinstance(raw_required, list):
        required = frozenset(name for name in raw_required if isinstance(name, str))

    return ObjectType(
        properties=properties,
        required=required,
        description=_description(raw),
    )


def _composite(raw: JSONObject) -> Optional[CompositeType]:
    for operator in _COMPOSITE_OPERATORS:
        members = raw.get(operator)
        if isinstance(members, list) and members:
            return CompositeType(
                op=operator,
                members=tuple(decode_schema(member) for member in members),
                description=_description(raw),
            )
    return None


def _has_items(items: JSONValue) -> bool:
    if isinstance(items, (dict, list)):
        return True
    return items is not None and items is not False and items != 0 and items != ""


def _description(raw: JSONObject) -> Optional[str]:
    description = raw.get("description")
    if isinstance(description, str) and description:
        return description
    return None


def is_schema_node(value: Union[SchemaNode, JSONValue]) -> TypeGuard[SchemaNode]:
    """Return whether a value is already a decoded schema node."""
    return isinstance(
        value,
        (
            Reference,
            ArrayType,
            EnumType,
            ObjectType,
            PrimitiveType,
            CompositeType,
            UnstructuredType,
        ),
    )
