"""Naming helpers for schema names, URL paths and declaration names."""

from __future__ import annotations

import re
from collections.abc import Iterator

_LOWERCASE_INITIAL_RE = re.compile(r"^[a-z]")
_NAMESPACE_PREFIX_RE = re.compile(r"^(common\.|entities\.|responses\.)")
_BRACED_PARAM_RE = re.compile(r"^\{(?P<name>.*)\}$")


def to_upper_camel_case(text: str) -> str:
    """Uppercase a leading ASCII lowercase letter and leave the rest untouched."""
    return _LOWERCASE_INITIAL_RE.sub(lambda match: match.group(0).upper(), text, count=1)


def clean_name(name: str) -> str:
    """Convert a schema name into a declaration name.

    One leading ``common.``, ``entities.`` or ``responses.`` namespace is
    removed, remaining dots become underscores and the first letter is
    uppercased.

    Args:
        name (str): Raw schema name, e.g. ``entities.user``.

    Returns:
        str: Declaration name, e.g. ``User``.
    """
    cleaned = _NAMESPACE_PREFIX_RE.sub("", name, count=1).replace(".", "_")
    return to_upper_camel_case(cleaned)


def ref_name(ref: str) -> str:
    """Return the trailing path segment of a ``$ref`` string."""
    return ref.rsplit("/", maxsplit=1)[-1]


def path_to_type_name(path: str) -> str:
    """Create a type-name fragment from a URL path.

    ``/users/{id}/posts`` and ``/users/:id/posts`` both become
    ``UsersByIdPosts``.
    """
    segments = [segment for segment in path.split("/") if segment]
    parts: list[str] = []
    for segment in segments:
        if segment.startswith(":"):
            parts.append(f"By{to_upper_camel_case(segment[1:])}")
            continue
        match = _BRACED_PARAM_RE.match(segment)
        if match:
            parts.append(f"By{to_upper_camel_case(match.group('name'))}")
            continue
        parts.append(to_upper_camel_case(segment))
    return "".join(parts)


class NameRegistry:
    """Declaration names already used within one generation run."""

    def __init__(self) -> None:
        self._names: set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def reserve(self, name: str) -> None:
        """Mark a name as used without renaming it."""
        self._names.add(name)

    def claim(self, candidate: str) -> str:
        """Return the first free name among ``candidate``, ``candidate1``, ``candidate2``...

        The returned name is recorded as used.
        """
        name = candidate
        counter = 1
        while name in self._names:
            name = f"{candidate}{counter}"
            counter += 1
        self._names.add(name)
        return name
