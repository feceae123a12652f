"""Shared pytest fixtures for schemalang tests."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def canonical_schema(fixtures_dir: Path) -> str:
    """Return the text of the canonically formatted example schema."""
    return (fixtures_dir / "schema.schema").read_text(encoding="utf-8")
