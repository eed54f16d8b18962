"""Cross-reference component schemas with the operations that use them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from . import typescript
from .model_types import Operation, Reference, SchemaNode

SCHEMA_REF_PREFIX = "#/components/schemas/"


def find_endpoints_for_schema(operations: Iterable[Operation], schema_name: str) -> list[str]:
    """List the operations whose JSON response or request body is ``$ref`` to a schema.

    Every match is recorded as ``"<METHOD> <path> - <summary>"``; an operation
    referencing the schema from several places is listed once per place.

    Args:
        operations (Iterable[Operation]): Operations in document order.
        schema_name (str): Raw ``components.schemas`` key.

    Returns:
        list[str]: Endpoint descriptions in document order.
    """
    search_ref = f"{SCHEMA_REF_PREFIX}{schema_name}"
    endpoints: list[str] = []
    for operation in operations:
        entry = f"{operation.method.upper()} {operation.path} - {operation.summary or ''}"
        for schema in operation.response_schemas:
            if _is_ref_to(schema, search_ref):
                endpoints.append(entry)
        if operation.request_body is not None and _is_ref_to(operation.request_body, search_ref):
            endpoints.append(entry)
    return endpoints


def generate_endpoint_comment(endpoints: Sequence[str]) -> str:
    """Render a ``Used in:`` doc comment block, or an empty string for no endpoints."""
    if not endpoints:
        return ""
    return typescript.block_comment(["Used in:", *endpoints])


def _is_ref_to(schema: SchemaNode, search_ref: str) -> bool:
    return isinstance(schema, Reference) and schema.ref == search_ref
