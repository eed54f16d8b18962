"""Filesystem writer for generated TypeScript declarations."""

from __future__ import annotations

from pathlib import Path


class WriteError(RuntimeError):
    """Raised when the output file cannot be written."""


def write_output(output_path: Path, content: str) -> None:
    """Write generated source, creating missing parent directories.

    Args:
        output_path (Path): Destination file.
        content (str): Generated TypeScript source.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"Failed to create output directory {output_path.parent}: {exc}") from exc

    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {output_path}: {exc}") from exc
