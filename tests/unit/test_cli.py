"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from schemalang._version import get_version
from schemalang.cli import app

MESSY = "model User{id Int @id\nname String?}"
FORMATTED = "model User {\n  id    Int @id\n  name  String?\n}\n"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def messy_file(tmp_path: Path) -> Path:
    path = tmp_path / "messy.schema"
    path.write_text(MESSY)
    return path


@pytest.fixture
def canonical_file(tmp_path: Path, canonical_schema: str) -> Path:
    path = tmp_path / "schema.schema"
    path.write_text(canonical_schema)
    return path


@pytest.fixture
def broken_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.schema"
    path.write_text("model Foo {\n  name\n}\n")
    return path


class TestCheck:
    def test_valid_file(self, cli_runner: CliRunner, canonical_file: Path) -> None:
        result = cli_runner.invoke(app, ["check", str(canonical_file)])
        assert result.exit_code == 0
        assert "OK: 1 file(s) parsed" in result.output

    def test_syntax_error(self, cli_runner: CliRunner, broken_file: Path) -> None:
        result = cli_runner.invoke(app, ["check", str(broken_file)])
        assert result.exit_code == 1
        assert "Expected field type" in result.output
        assert f"{broken_file}:3:1" in result.output

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["check", str(tmp_path / "nope.schema")])
        assert result.exit_code == 2


class TestFormat:
    def test_rewrites_file(self, cli_runner: CliRunner, messy_file: Path) -> None:
        result = cli_runner.invoke(app, ["format", str(messy_file)])
        assert result.exit_code == 0
        assert "reformatted" in result.output
        assert messy_file.read_text() == FORMATTED

    def test_check_reports_without_writing(self, cli_runner: CliRunner, messy_file: Path) -> None:
        result = cli_runner.invoke(app, ["format", "--check", str(messy_file)])
        assert result.exit_code == 1
        assert "would reformat" in result.output
        assert messy_file.read_text() == MESSY

    def test_check_passes_on_canonical_file(
        self, cli_runner: CliRunner, canonical_file: Path, canonical_schema: str
    ) -> None:
        result = cli_runner.invoke(app, ["format", "--check", str(canonical_file)])
        assert result.exit_code == 0
        assert "already formatted" in result.output
        assert canonical_file.read_text() == canonical_schema

    def test_parse_error_fails(
        self, cli_runner: CliRunner, broken_file: Path, messy_file: Path
    ) -> None:
        result = cli_runner.invoke(app, ["format", str(broken_file), str(messy_file)])
        assert result.exit_code == 1
        assert "Expected field type" in result.output
        # other files are still processed
        assert messy_file.read_text() == FORMATTED


class TestParse:
    def test_prints_json(self, cli_runner: CliRunner, messy_file: Path) -> None:
        result = cli_runner.invoke(app, ["parse", str(messy_file)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["kind"] == "Document"
        [model] = data["definitions"]
        assert model["kind"] == "ModelDefinition"
        assert model["name"]["name"] == "User"
        assert [f["type"]["modifier"] for f in model["fields"]] == ["none", "optional"]
        assert model["span"]["start"] == {"offset": 0, "line": 1, "column": 1}

    def test_parse_error(self, cli_runner: CliRunner, broken_file: Path) -> None:
        result = cli_runner.invoke(app, ["parse", str(broken_file)])
        assert result.exit_code == 1


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "schemalang version" in result.output
        assert get_version() in result.output

    def test_verbose_flag(self, cli_runner: CliRunner, canonical_file: Path) -> None:
        result = cli_runner.invoke(app, ["--verbose", "check", str(canonical_file)])
        assert result.exit_code == 0
