"""High-level generator orchestration."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from . import typescript
from .declarations import generate_enum, generate_type
from .document import InvalidDocumentError, decode_document
from .endpoints import find_endpoints_for_schema, generate_endpoint_comment
from .json_types import JSONValue
from .loader import DocumentLoadError, load_document, validate_openapi_document
from .model_types import (
    CompositeType,
    Declaration,
    EnumType,
    GeneratedTypes,
    GenerationResult,
    ObjectType,
    Operation,
    SchemaNode,
)
from .naming import NameRegistry
from .request_types import generate_request_types
from .schema_nodes import decode_definition
from .writer import WriteError, write_output

logger = logging.getLogger(__name__)

DECLARATION_SEPARATOR = "\n\n"


def generate_declarations(document: JSONValue, *, prefix: str = "") -> GeneratedTypes:
    """Build every declaration for a document in output order.

    Enum schemas come first, then object and composite schemas, both in the
    document's key order, then request declarations per operation. Schema
    declarations are preceded by a ``Used in:`` comment listing the operations
    that reference them.

    Args:
        document (JSONValue): Parsed API-schema document.
        prefix (str): Qualifier prepended to referenced declaration names.

    Returns:
        GeneratedTypes: Declarations and warnings for skipped schema entries.

    Raises:
        InvalidDocumentError: If ``components.schemas`` is missing.
    """
    decoded = decode_document(document)
    registry = NameRegistry()
    definitions = [(str(name), decode_definition(raw)) for name, raw in decoded.schemas.items()]

    declarations: list[Declaration] = []
    for name, node in definitions:
        if isinstance(node, EnumType):
            _append_schema_declaration(
                declarations,
                generate_enum(name, node),
                operations=decoded.operations,
                schema_name=name,
                registry=registry,
            )

    warnings: list[str] = []
    for name, node in definitions:
        if isinstance(node, (ObjectType, CompositeType)):
            _append_schema_declaration(
                declarations,
                generate_type(name, node, prefix),
                operations=decoded.operations,
                schema_name=name,
                registry=registry,
            )
        elif not isinstance(node, EnumType):
            warnings.append(_skipped_schema_warning(name, node))

    schema_count = len(declarations)
    declarations.extend(generate_request_types(decoded, prefix, registry))
    logger.debug(
        "Generated %d schema declarations and %d request declarations",
        schema_count,
        len(declarations) - schema_count,
    )
    return GeneratedTypes(declarations=tuple(declarations), warnings=tuple(warnings))


def generate_types(document: JSONValue, prefix: str = "") -> str:
    """Convert a document into TypeScript declarations separated by blank lines.

    Args:
        document (JSONValue): Parsed API-schema document.
        prefix (str): Qualifier prepended to referenced declaration names.

    Returns:
        str: TypeScript source; empty when nothing is declared.
    """
    return render_types(generate_declarations(document, prefix=prefix))


def render_types(generated: GeneratedTypes) -> str:
    """Render generated declarations as one TypeScript source text."""
    return DECLARATION_SEPARATOR.join(
        typescript.render_declaration(declaration) for declaration in generated.declarations
    )


def run_generation(
    *,
    input_path: Path,
    output_path: Path,
    prefix: str = "",
    validate: bool = False,
) -> GenerationResult:
    """Generate TypeScript declarations from a document file.

    Args:
        input_path (Path): Path to the JSON or YAML document.
        output_path (Path): File the declarations are written to. Missing
            parent directories are created.
        prefix (str): Qualifier prepended to referenced declaration names.
        validate (bool): Whether to validate the document as OpenAPI first.

    Returns:
        GenerationResult: Output location, declaration count and warnings.
    """
    document = load_document(input_path)
    if validate:
        validate_openapi_document(document, source=input_path)

    generated = generate_declarations(document, prefix=prefix)
    write_output(output_path, render_types(generated))
    return GenerationResult(
        output_path=str(output_path),
        declaration_count=len(generated.declarations),
        warnings=generated.warnings,
    )


def _append_schema_declaration(
    declarations: list[Declaration],
    declaration: Optional[Declaration],
    *,
    operations: tuple[Operation, ...],
    schema_name: str,
    registry: NameRegistry,
) -> None:
    if declaration is None:
        return
    endpoint_comment = generate_endpoint_comment(find_endpoints_for_schema(operations, schema_name))
    registry.reserve(declaration.name)
    declarations.append(
        replace(
            declaration,
            leading_comment=f"{endpoint_comment}{declaration.leading_comment}",
        )
    )


def _skipped_schema_warning(name: str, node: SchemaNode) -> str:
    logger.debug("Skipping schema %r decoded as %s", name, type(node).__name__)
    return f"Skipped schema '{name}': not an enum, object or composite schema"


__all__ = [
    "DocumentLoadError",
    "InvalidDocumentError",
    "WriteError",
    "generate_declarations",
    "generate_types",
    "render_types",
    "run_generation",
]
