"""Build enum, interface and alias declarations from schema definitions."""

from __future__ import annotations

from typing import Optional, Union

from . import typescript
from .json_types import JSONValue
from .model_types import (
    CompositeType,
    Declaration,
    EnumArm,
    EnumType,
    ObjectType,
    SchemaNode,
)
from .naming import clean_name
from .schema_nodes import decode_definition, is_schema_node
from .type_mapping import map_type, object_members


def generate_enum(name: str, schema: Union[SchemaNode, JSONValue]) -> Optional[Declaration]:
    """Build a string-literal union declaration from an enum schema.

    Args:
        name (str): Raw schema name.
        schema (Union[SchemaNode, JSONValue]): Enum schema, decoded or raw.

    Returns:
        Optional[Declaration]: The declaration, or ``None`` when the schema
        carries no enum variant names.
    """
    node = _as_definition(schema)
    if not isinstance(node, EnumType):
        return None

    arms = [EnumArm(value=varname, comment=node.comment_for(varname)) for varname in node.varnames]
    return Declaration(
        name=clean_name(name),
        kind="enum",
        body=typescript.enum_body(arms),
    )


def generate_type(
    name: str,
    definition: Union[SchemaNode, JSONValue],
    prefix: str = "",
) -> Optional[Declaration]:
    """Build an alias or interface declaration from a schema definition.

    ``allOf`` becomes an intersection alias, ``oneOf``/``anyOf`` a union alias
    and a schema with ``properties`` an interface. Anything else yields
    ``None`` and is skipped by the caller.

    Args:
        name (str): Raw schema name.
        definition (Union[SchemaNode, JSONValue]): Schema definition, decoded or raw.
        prefix (str): Qualifier prepended to referenced declaration names.

    Returns:
        Optional[Declaration]: The declaration, or ``None``.
    """
    node = _as_definition(definition)

    if isinstance(node, CompositeType):
        member_types = [map_type(member, prefix) for member in node.members]
        body = (
            typescript.intersection(member_types)
            if node.op == "allOf"
            else typescript.union(member_types)
        )
        return Declaration(
            name=clean_name(name),
            kind="alias",
            body=body,
            leading_comment=typescript.doc_comment(node.description),
        )

    if isinstance(node, ObjectType) and node.properties is not None:
        return Declaration(
            name=clean_name(name),
            kind="interface",
            body=typescript.interface_body(object_members(node, prefix)),
            leading_comment=typescript.doc_comment(node.description),
        )

    return None


def _as_definition(value: Union[SchemaNode, JSONValue]) -> SchemaNode:
    if is_schema_node(value):
        return value
    return decode_definition(value)
