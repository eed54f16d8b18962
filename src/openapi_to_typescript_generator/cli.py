"""Command line interface for OpenAPI to TypeScript generation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .generator import (
    DocumentLoadError,
    InvalidDocumentError,
    WriteError,
    run_generation,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="openapi-to-typescript-generator",
        description="Convert OpenAPI schema definitions to TypeScript type definitions",
    )
    parser.add_argument("input_file", help="Path to the OpenAPI schema JSON file")
    parser.add_argument(
        "output_file",
        help="Path where the TypeScript definitions will be written",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default="",
        help="Prefix to add to all referenced type names",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the input against the OpenAPI 3 object model before generating",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    output_path = Path(args.output_file)
    try:
        result = run_generation(
            input_path=Path(args.input_file),
            output_path=output_path,
            prefix=args.prefix,
            validate=bool(args.validate),
        )
    except (DocumentLoadError, InvalidDocumentError, WriteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(f"Warning: {warning}")
    print(f"TypeScript types written to {result.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
