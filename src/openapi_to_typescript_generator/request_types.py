"""Derive per-operation query, path and request-body declarations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Union

from . import typescript
from .document import decode_operations
from .json_types import JSONValue
from .model_types import Declaration, MemberDef, Operation, Parameter, SchemaDocument
from .naming import NameRegistry, path_to_type_name, to_upper_camel_case
from .type_mapping import map_type

_QUERY_SUFFIX = "QueryParams"
_PATH_SUFFIX = "PathParams"
_BODY_SUFFIX = "RequestBody"


def generate_request_types(
    document: Union[SchemaDocument, JSONValue],
    prefix: str = "",
    registry: Optional[NameRegistry] = None,
) -> list[Declaration]:
    """Build request declarations for every operation of a document.

    For each operation, in order: an interface of its query parameters, an
    interface of its path parameters and an alias of its JSON request body,
    each only when present. Names are ``<Method><PathTypeName><Suffix>`` and are
    claimed from ``registry`` so that repeated names get a numeric suffix.

    Args:
        document (Union[SchemaDocument, JSONValue]): Decoded document, or a raw
            document whose ``paths`` are decoded.
        prefix (str): Qualifier prepended to referenced declaration names.
        registry (Optional[NameRegistry]): Names already used in this run. A
            fresh registry is used when omitted.

    Returns:
        list[Declaration]: Request declarations in operation order.
    """
    if registry is None:
        registry = NameRegistry()
    if isinstance(document, SchemaDocument):
        operations = list(document.operations)
    elif isinstance(document, dict):
        operations = decode_operations(document.get("paths"))
    else:
        operations = []

    declarations: list[Declaration] = []
    for operation in operations:
        declarations.extend(_operation_declarations(operation, prefix, registry))
    return declarations


def _operation_declarations(
    operation: Operation,
    prefix: str,
    registry: NameRegistry,
) -> list[Declaration]:
    base_name = f"{to_upper_camel_case(operation.method)}{path_to_type_name(operation.path)}"
    declarations: list[Declaration] = []

    query_params = [param for param in operation.parameters if param.location == "query"]
    if query_params:
        declarations.append(
            _parameters_declaration(
                name=registry.claim(f"{base_name}{_QUERY_SUFFIX}"),
                operation=operation,
                parameters=query_params,
                always_required=False,
                section="Query Parameters",
                prefix=prefix,
            )
        )

    path_params = [param for param in operation.parameters if param.location == "path"]
    if path_params:
        declarations.append(
            _parameters_declaration(
                name=registry.claim(f"{base_name}{_PATH_SUFFIX}"),
                operation=operation,
                parameters=path_params,
                always_required=True,
                section="Path Parameters",
                prefix=prefix,
            )
        )

    if operation.request_body is not None:
        declarations.append(
            Declaration(
                name=registry.claim(f"{base_name}{_BODY_SUFFIX}"),
                kind="alias",
                body=map_type(operation.request_body, prefix),
                leading_comment=_operation_comment(operation, "Request Body"),
            )
        )

    return declarations


def _parameters_declaration(
    *,
    name: str,
    operation: Operation,
    parameters: Sequence[Parameter],
    always_required: bool,
    section: str,
    prefix: str,
) -> Declaration:
    members = [
        MemberDef(
            name=param.name,
            annotation=(
                map_type(param.schema, prefix) if param.schema is not None else typescript.ANY_TYPE
            ),
            required=always_required or param.required,
            description=param.description,
        )
        for param in parameters
    ]
    return Declaration(
        name=name,
        kind="interface",
        body=typescript.interface_body(members),
        leading_comment=_operation_comment(operation, section),
    )


def _operation_comment(operation: Operation, section: str) -> str:
    return typescript.operation_comment(
        method=operation.method,
        path=operation.path,
        summary=operation.summary,
        section=section,
    )
