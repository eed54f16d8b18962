"""OpenAPI to TypeScript declaration generator package."""

from __future__ import annotations

__version__ = "1.0.0"

from .cli import main  # noqa: E402
from .generator import generate_declarations, generate_types, run_generation  # noqa: E402

__all__ = ["__version__", "generate_declarations", "generate_types", "main", "run_generation"]
