"""Internal datatypes for schema decoding and declaration generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, TypeAlias, Union

from .json_types import JSONObject

PrimitiveKind: TypeAlias = Literal["string", "integer", "number", "boolean"]
CompositeOperator: TypeAlias = Literal["allOf", "oneOf", "anyOf"]
DeclarationKind: TypeAlias = Literal["enum", "interface", "alias"]


@dataclass(frozen=True)
class Reference:
    """A ``$ref`` pointer, resolved by name only."""

    ref: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ArrayType:
    """An ``array`` schema with an ``items`` node."""

    items: SchemaNode
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumType:
    """A schema listing its variants in ``x-enum-varnames``."""

    varnames: tuple[str, ...]
    comments: tuple[tuple[str, str], ...] = ()
    description: Optional[str] = None

    def comment_for(self, varname: str) -> Optional[str]:
        """Return the per-variant comment keyed by the raw variant name."""
        for name, comment in self.comments:
            if name == varname:
                return comment
        return None


@dataclass(frozen=True)
class ObjectType:
    """An object schema; ``properties`` is ``None`` for open maps."""

    properties: Optional[tuple[tuple[str, SchemaNode], ...]]
    required: frozenset[str] = frozenset()
    description: Optional[str] = None

    def is_required(self, property_name: str) -> bool:
        """Return whether this object's own ``required`` list names the property."""
        return property_name in self.required


@dataclass(frozen=True)
class PrimitiveType:
    """A scalar ``string``, ``integer``, ``number`` or ``boolean`` schema."""

    kind: PrimitiveKind
    description: Optional[str] = None


@dataclass(frozen=True)
class CompositeType:
    """An ``allOf``/``oneOf``/``anyOf`` combination of member schemas."""

    op: CompositeOperator
    members: tuple[SchemaNode, ...]
    description: Optional[str] = None


@dataclass(frozen=True)
class UnstructuredType:
    """A node matching no known shape."""

    description: Optional[str] = None


SchemaNode: TypeAlias = Union[
    Reference,
    ArrayType,
    EnumType,
    ObjectType,
    PrimitiveType,
    CompositeType,
    UnstructuredType,
]


@dataclass(frozen=True)
class Parameter:
    """One operation parameter."""

    name: str
    location: str
    required: bool
    schema: Optional[SchemaNode]
    description: Optional[str]


@dataclass(frozen=True)
class Operation:
    """One HTTP method entry under one path."""

    path: str
    method: str
    summary: Optional[str]
    parameters: tuple[Parameter, ...]
    request_body: Optional[SchemaNode]
    response_schemas: tuple[SchemaNode, ...]


@dataclass(frozen=True)
class SchemaDocument:
    """Decoded API-schema document."""

    schemas: JSONObject
    operations: tuple[Operation, ...]


@dataclass(frozen=True)
class MemberDef:
    """A field of a structural declaration."""

    name: str
    annotation: str
    required: bool
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumArm:
    """One string-literal arm of an enum union."""

    value: str
    comment: Optional[str] = None


@dataclass(frozen=True)
class Declaration:
    """A rendered top-level type declaration."""

    name: str
    kind: DeclarationKind
    body: str
    leading_comment: str = ""


@dataclass(frozen=True)
class GeneratedTypes:
    """Declarations produced by one pipeline run, with skipped-entry warnings."""

    declarations: tuple[Declaration, ...]
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class GenerationResult:
    """File-level generation output metadata."""

    output_path: str
    declaration_count: int
    warnings: tuple[str, ...]
