"""Map decoded schema nodes to TypeScript type expressions."""

from __future__ import annotations

from typing import Union

from . import typescript
from .json_types import JSONValue
from .model_types import (
    ArrayType,
    CompositeType,
    EnumType,
    MemberDef,
    ObjectType,
    PrimitiveType,
    Reference,
    SchemaNode,
    UnstructuredType,
)
from .naming import clean_name, ref_name
from .schema_nodes import decode_schema, is_schema_node

_PRIMITIVE_TYPES: dict[str, str] = {
    "string": typescript.STRING_TYPE,
    "integer": typescript.NUMBER_TYPE,
    "number": typescript.NUMBER_TYPE,
    "boolean": typescript.BOOLEAN_TYPE,
}


def reference_type(ref: str, prefix: str = "") -> str:
    """Return the declaration name a ``$ref`` points at, qualified by ``prefix``."""
    return f"{prefix}{clean_name(ref_name(ref))}"


def map_type(node: Union[SchemaNode, JSONValue], prefix: str = "") -> str:
    """Map a schema node to a TypeScript type expression.

    Never fails: shapes without a TypeScript counterpart map to ``any``.

    Args:
        node (Union[SchemaNode, JSONValue]): Decoded node, or a raw schema
            fragment which is decoded first.
        prefix (str): Qualifier prepended to every referenced declaration name.

    Returns:
        str: TypeScript type expression.
    """
    if not is_schema_node(node):
        node = decode_schema(node)

    match node:
        case Reference(ref=ref):
            return reference_type(ref, prefix)
        case ArrayType(items=items):
            compound = isinstance(items, EnumType) and len(items.varnames) > 1
            return typescript.array_of(map_type(items, prefix), compound=compound)
        case EnumType(varnames=varnames):
            return typescript.union(typescript.string_literal(name) for name in varnames)
        case PrimitiveType(kind=kind):
            return _PRIMITIVE_TYPES[kind]
        case ObjectType(properties=None):
            return typescript.OPEN_RECORD_TYPE
        case ObjectType():
            return typescript.inline_object(object_members(node, prefix))
        case CompositeType() | UnstructuredType():
            return typescript.ANY_TYPE
    return typescript.ANY_TYPE


def object_members(node: ObjectType, prefix: str = "") -> list[MemberDef]:
    """Build member definitions for an object node's properties in declared order.

    A property is required exactly when ``node.required`` names it; nested
    objects are judged against their own ``required`` list.
    """
    return [
        MemberDef(
            name=name,
            annotation=map_type(property_node, prefix),
            required=node.is_required(name),
            description=property_node.description,
        )
        for name, property_node in node.properties or ()
    ]
