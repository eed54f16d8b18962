"""TypeScript syntax for type expressions, doc comments and declarations.

Only formatting lives here. Which members are optional, how names are chosen
and which declarations exist is decided by the callers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from .model_types import Declaration, EnumArm, MemberDef

ANY_TYPE = "any"
OPEN_RECORD_TYPE = "Record<string, any>"
STRING_TYPE = "string"
NUMBER_TYPE = "number"
BOOLEAN_TYPE = "boolean"

_INDENT = "  "


def string_literal(value: str) -> str:
    """Render a single-quoted string literal type."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def union(types: Iterable[str]) -> str:
    """Render ``A | B | C``."""
    return " | ".join(types)


def intersection(types: Iterable[str]) -> str:
    """Render ``A & B & C``."""
    return " & ".join(types)


def array_of(item_type: str, *, compound: bool = False) -> str:
    """Render an array type, parenthesizing compound item types."""
    if compound:
        return f"({item_type})[]"
    return f"{item_type}[]"


def inline_object(members: Sequence[MemberDef]) -> str:
    """Render an anonymous object type used inside another type expression."""
    body = f";\n{_INDENT}".join(_member_signature(member) for member in members)
    return f"{{\n{_INDENT}{body}\n}}"


def doc_comment(text: Optional[str], *, indent: str = "") -> str:
    """Render ``/** text */`` followed by a newline, or nothing for empty text."""
    if not text:
        return ""
    return f"{indent}/** {text} */\n"


def block_comment(lines: Sequence[str]) -> str:
    """Render a multi-line ``/** ... */`` block, or nothing when empty."""
    if not lines:
        return ""
    body = "\n".join(f" * {line}" for line in lines)
    return f"/**\n{body}\n */\n"


def operation_comment(
    *,
    method: str,
    path: str,
    summary: Optional[str],
    section: str,
) -> str:
    """Render the leading comment of a per-operation request declaration."""
    lines = [f"{method.upper()} {path}"]
    if summary:
        lines.append(summary)
    lines.append(section)
    return "/** " + "\n * ".join(lines) + "\n */\n"


def interface_body(members: Sequence[MemberDef]) -> str:
    """Render the member lines of an interface declaration."""
    return "\n".join(
        f"{doc_comment(member.description, indent=_INDENT)}{_INDENT}{_member_signature(member)};"
        for member in members
    )


def enum_body(arms: Sequence[EnumArm]) -> str:
    """Render the arms of a string-literal union, each on its own line.

    A variant comment is placed at the end of the line before its arm.
    """
    parts: list[str] = []
    for arm in arms:
        comment = f" /** {arm.comment} */" if arm.comment else ""
        parts.append(f"{comment}\n{_INDENT}| {string_literal(arm.value)}")
    return "".join(parts)


def render_declaration(declaration: Declaration) -> str:
    """Render a declaration together with its leading comment."""
    name = declaration.name
    if declaration.kind == "enum":
        source = f"export type {name} ={declaration.body};"
    elif declaration.kind == "interface":
        source = f"export interface {name} {{\n{declaration.body}\n}}"
    else:
        source = f"export type {name} = {declaration.body};"
    return f"{declaration.leading_comment}{source}"


def _member_signature(member: MemberDef) -> str:
    marker = "" if member.required else "?"
    return f"{member.name}{marker}: {member.annotation}"
