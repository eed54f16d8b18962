"""Decode a raw API-schema document into a ``SchemaDocument``."""

from __future__ import annotations

from typing import Optional

from .json_types import JSONObject, JSONValue
from .model_types import Operation, Parameter, SchemaDocument, SchemaNode
from .schema_nodes import decode_schema

JSON_MEDIA_TYPE = "application/json"

_HTTP_METHODS: frozenset[str] = frozenset(
    {
        "get",
        "put",
        "post",
        "delete",
        "patch",
        "head",
        "options",
        "trace",
    }
)


class InvalidDocumentError(RuntimeError):
    """Raised when a document lacks ``components.schemas``."""


def decode_document(document: JSONValue) -> SchemaDocument:
    """Decode schemas and operations from a raw document.

    Args:
        document (JSONValue): Parsed JSON document.

    Returns:
        SchemaDocument: Schema definitions in key order and operations in
        path-then-method order.
    """
    if not isinstance(document, dict):
        raise InvalidDocumentError("Invalid schema: Missing components.schemas")
    components = document.get("components")
    schemas = components.get("schemas") if isinstance(components, dict) else None
    if not isinstance(schemas, dict):
        raise InvalidDocumentError("Invalid schema: Missing components.schemas")

    return SchemaDocument(
        schemas=schemas,
        operations=tuple(decode_operations(document.get("paths"))),
    )


def decode_operations(raw_paths: JSONValue) -> list[Operation]:
    """Decode the HTTP operations of a raw ``paths`` mapping in document order."""
    if not isinstance(raw_paths, dict):
        return []

    operations: list[Operation] = []
    for path, path_item in raw_paths.items():
        if not isinstance(path, str) or not isinstance(path_item, dict):
            continue
        for method, raw_operation in path_item.items():
            if not isinstance(method, str) or method.lower() not in _HTTP_METHODS:
                continue
            if not isinstance(raw_operation, dict):
                continue
            operations.append(_operation(path, method, raw_operation))
    return operations


def _operation(path: str, method: str, raw: JSONObject) -> Operation:
    raw_parameters = raw.get("parameters")
    parameters: list[Parameter] = []
    if isinstance(raw_parameters, list):
        for raw_parameter in raw_parameters:
            parameter = _parameter(raw_parameter)
            if parameter is not None:
                parameters.append(parameter)

    response_schemas: list[SchemaNode] = []
    raw_responses = raw.get("responses")
    if isinstance(raw_responses, dict):
        for response in raw_responses.values():
            schema = _json_content_schema(response)
            if schema is not None:
                response_schemas.append(schema)

    summary = raw.get("summary")
    return Operation(
        path=path,
        method=method,
        summary=summary if isinstance(summary, str) and summary else None,
        parameters=tuple(parameters),
        request_body=_json_content_schema(raw.get("requestBody")),
        response_schemas=tuple(response_schemas),
    )


def _parameter(raw: JSONValue) -> Optional[Parameter]:
    if not isinstance(raw, dict):
        return None
    name = raw.get("name")
    location = raw.get("in")
    if not isinstance(name, str) or not isinstance(location, str):
        return None

    description = raw.get("description")
    return Parameter(
        name=name,
        location=location,
        required=bool(raw.get("required")),
        schema=decode_schema(raw["schema"]) if isinstance(raw.get("schema"), dict) else None,
        description=description if isinstance(description, str) and description else None,
    )


def _json_content_schema(raw: JSONValue) -> Optional[SchemaNode]:
    if not isinstance(raw, dict):
        return None
    content = raw.get("content")
    if not isinstance(content, dict):
        return None
    media = content.get(JSON_MEDIA_TYPE)
    if not isinstance(media, dict) or not isinstance(media.get("schema"), dict):
        return None
    return decode_schema(media["schema"])
