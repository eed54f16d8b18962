"""JSON-compatible typing aliases for raw API-schema documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias, Union

JSONPrimitive: TypeAlias = Union[str, int, float, bool, None]
JSONValue: TypeAlias = Union[JSONPrimitive, list["JSONValue"], Mapping[str, "JSONValue"]]
JSONObject: TypeAlias = Mapping[str, JSONValue]
