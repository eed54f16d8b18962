"""Fixture-based OpenAPI validation and golden output tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from openapi_python_client.schema import OpenAPI
from pydantic import ValidationError

from openapi_to_typescript_generator.generator import generate_types

from .fixture_helpers import (
    expected_output_path,
    fixture_dir,
    load_fixture,
    parametrize_fixtures,
    read_expected_output,
)


def test_fixture_directory_exists() -> None:
    """Ensure the fixtures directory is present."""
    assert fixture_dir().is_dir(), f"Fixture directory not found: {fixture_dir()}"


@parametrize_fixtures()
def test_fixture_is_valid_openapi(fixture_path: Path) -> None:
    """Validate each fixture using openapi-python-client's OpenAPI schema model."""
    data = load_fixture(fixture_path)
    try:
        OpenAPI.model_validate(data)
    except ValidationError as exc:
        pytest.fail(f"OpenAPI validation failed for {fixture_path}:\n{exc}")


@parametrize_fixtures()
def test_fixture_matches_golden_output(fixture_path: Path) -> None:
    """Generated declarations must equal the fixture's golden TypeScript file."""
    assert expected_output_path(fixture_path).is_file(), fixture_path
    generated = generate_types(load_fixture(fixture_path))
    assert generated == read_expected_output(fixture_path)
