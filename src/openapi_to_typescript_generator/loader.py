"""API-schema document loading and optional OpenAPI validation."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from openapi_python_client.schema import OpenAPI
from pydantic import ValidationError

from .json_types import JSONObject, JSONValue

_YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


class DocumentLoadError(RuntimeError):
    """Raised when a source document cannot be loaded."""


def load_document(path: Path) -> JSONObject:
    """Load a JSON document, or a YAML one for ``.yaml``/``.yml`` files.

    Args:
        path (Path): Path to the document.

    Returns:
        JSONObject: Parsed top-level mapping.
    """
    if not path.is_file():
        raise DocumentLoadError(f"Input file '{path}' does not exist")

    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in _YAML_SUFFIXES:
                payload = yaml.safe_load(handle)
            else:
                payload = json.load(handle)
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(f"Failed to decode document {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Failed to parse JSON in {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Failed to parse YAML in {path}: {exc}") from exc

    payload_value: JSONValue = payload
    if not isinstance(payload_value, dict):
        raise DocumentLoadError(
            f"Document must deserialize to a mapping, got {type(payload_value)!r}"
        )
    return payload_value


def validate_openapi_document(document: JSONObject, *, source: Path) -> None:
    """Validate a document against the OpenAPI 3 object model.

    Args:
        document (JSONObject): Parsed document.
        source (Path): Path the document came from, used in error messages.
    """
    try:
        OpenAPI.model_validate(document)
    except ValidationError as exc:
        raise DocumentLoadError(f"OpenAPI schema validation failed for {source}: {exc}") from exc
