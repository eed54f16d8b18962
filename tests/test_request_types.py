"""Unit tests for per-operation request declarations."""

from __future__ import annotations

from typing import Any

from openapi_to_typescript_generator.naming import NameRegistry
from openapi_to_typescript_generator.request_types import generate_request_types
from openapi_to_typescript_generator.typescript import render_declaration


def _query_operation(name: str = "page") -> dict[str, Any]:
    return {
        "parameters": [{"in": "query", "name": name, "schema": {"type": "integer"}}],
        "responses": {},
    }


def test_colliding_candidate_names_get_numeric_suffix() -> None:
    """The first operation keeps the name, later ones get ``1``, ``2``..."""
    document = {
        "paths": {
            "/users": {"get": _query_operation()},
            "/users/": {"get": _query_operation()},
            "users": {"get": _query_operation()},
        }
    }
    names = [declaration.name for declaration in generate_request_types(document)]
    assert names == ["GetUsersQueryParams", "GetUsersQueryParams1", "GetUsersQueryParams2"]


def test_registry_is_shared_with_the_caller() -> None:
    """Names already in the registry are avoided and new names are recorded."""
    registry = NameRegistry()
    registry.reserve("GetUsersQueryParams")
    declarations = generate_request_types(
        {"paths": {"/users": {"get": _query_operation()}}},
        registry=registry,
    )
    assert [declaration.name for declaration in declarations] == ["GetUsersQueryParams1"]
    assert "GetUsersQueryParams1" in registry


def test_query_parameters_interface() -> None:
    """Query fields are optional unless required; missing schemas become ``any``."""
    document = {
        "paths": {
            "/users": {
                "get": {
                    "summary": "List users",
                    "parameters": [
                        {
                            "in": "query",
                            "name": "role",
                            "required": True,
                            "description": "Role filter",
                            "schema": {"$ref": "#/components/schemas/entities.Role"},
                        },
                        {"in": "query", "name": "cursor"},
                        {"in": "header", "name": "X-Trace", "schema": {"type": "string"}},
                    ],
                }
            }
        }
    }
    (declaration,) = generate_request_types(document, "Api.")
    assert render_declaration(declaration) == (
        "/** GET /users\n"
        " * List users\n"
        " * Query Parameters\n"
        " */\n"
        "export interface GetUsersQueryParams {\n"
        "  /** Role filter */\n"
        "  role: Api.Role;\n"
        "  cursor?: any;\n"
        "}"
    )


def test_path_parameters_are_always_required() -> None:
    """Path fields ignore the parameter's own ``required`` flag."""
    document = {
        "paths": {
            "/users/:userId/posts/{postId}": {
                "delete": {
                    "parameters": [
                        {"in": "path", "name": "userId", "schema": {"type": "string"}},
                        {
                            "in": "path",
                            "name": "postId",
                            "required": False,
                            "schema": {"type": "integer"},
                        },
                    ],
                }
            }
        }
    }
    (declaration,) = generate_request_types(document)
    assert render_declaration(declaration) == (
        "/** DELETE /users/:userId/posts/{postId}\n"
        " * Path Parameters\n"
        " */\n"
        "export interface DeleteUsersByUserIdPostsByPostIdPathParams {\n"
        "  userId: string;\n"
        "  postId: number;\n"
        "}"
    )


def test_request_body_alias() -> None:
    """JSON request bodies become aliases; other media types are ignored."""
    document = {
        "paths": {
            "/users": {
                "post": {
                    "summary": "Create user",
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/common.UserInput"}
                            }
                        }
                    },
                },
                "put": {
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "required": ["name"],
                                    "properties": {"name": {"type": "string"}},
                                }
                            }
                        }
                    },
                },
                "patch": {
                    "requestBody": {
                        "content": {"text/plain": {"schema": {"type": "string"}}},
                    },
                },
            }
        }
    }
    rendered = [render_declaration(item) for item in generate_request_types(document)]
    assert rendered == [
        "/** POST /users\n * Create user\n * Request Body\n */\n"
        "export type PostUsersRequestBody = UserInput;",
        "/** PUT /users\n * Request Body\n */\n"
        "export type PutUsersRequestBody = {\n  name: string\n};",
    ]


def test_declarations_per_operation_are_query_path_body() -> None:
    """Each operation emits query, then path, then body declarations."""
    document = {
        "paths": {
            "/items/{id}": {
                "put": {
                    "parameters": [
                        {"in": "path", "name": "id", "schema": {"type": "string"}},
                        {"in": "query", "name": "dryRun", "schema": {"type": "boolean"}},
                    ],
                    "requestBody": {
                        "content": {"application/json": {"schema": {"type": "object"}}}
                    },
                }
            }
        }
    }
    names = [declaration.name for declaration in generate_request_types(document)]
    assert names == [
        "PutItemsByIdQueryParams",
        "PutItemsByIdPathParams",
        "PutItemsByIdRequestBody",
    ]


def test_non_operation_path_item_keys_are_ignored() -> None:
    """Path-level ``parameters``, ``summary`` and extensions are not operations."""
    document = {
        "paths": {
            "/users": {
                "summary": "Users",
                "parameters": [{"in": "query", "name": "q"}],
                "x-internal": {"parameters": [{"in": "query", "name": "q"}]},
            }
        }
    }
    assert generate_request_types(document) == []
    assert generate_request_types({}) == []
