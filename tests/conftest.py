"""Shared fixtures for the TypeScript generator tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from typegen.loader import get_schemas, load_spec

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def petstore_spec() -> dict[str, Any]:
    """The parsed petstore.yaml document."""
    return load_spec(FIXTURES_DIR / "petstore.yaml")


@pytest.fixture(scope="session")
def petstore_schemas(petstore_spec) -> dict[str, Any]:
    return get_schemas(petstore_spec)


@pytest.fixture(scope="session")
def petstore_expected() -> str:
    """Expected declarations for petstore.yaml with default options."""
    return (FIXTURES_DIR / "petstore.ts").read_text(encoding="utf-8").rstrip("\n")
