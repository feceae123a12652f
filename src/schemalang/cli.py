"""
schemalang command-line interface.

Commands:
- format: rewrite schema files in canonical form
- check:  report syntax errors without rewriting
- parse:  print the AST of a schema file as JSON
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console

from schemalang._version import get_version
from schemalang.core.errors import SchemaParseError
from schemalang.core.ir import Document
from schemalang.core.parser import parse
from schemalang.core.printer import print_document

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Parse, check and format schema files.",
    no_args_is_help=True,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"schemalang version {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """schemalang CLI main callback for global options."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def _report_parse_error(path: Path, error: SchemaParseError) -> None:
    err_console.print(f"{path}:{error.position.line}:{error.position.column}", style="bold red")
    err_console.print(error.render(), markup=False, highlight=False)


def _load(path: Path) -> tuple[str, Document]:
    """Read and parse one file; raises SchemaParseError on bad syntax."""
    logger.debug("Parsing %s", path)
    source = path.read_text(encoding="utf-8")
    return source, parse(source)


@app.command(name="format")
def format_command(
    paths: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Schema files"),
    check: bool = typer.Option(
        False, "--check", help="Only report files that are not canonically formatted"
    ),
) -> None:
    """
    Rewrite schema files in canonical form.

    With --check nothing is written; the command exits with code 1 if any
    file would change.
    """
    failed = False
    changed: list[Path] = []

    for path in paths:
        try:
            source, document = _load(path)
        except SchemaParseError as e:
            _report_parse_error(path, e)
            failed = True
            continue

        formatted = print_document(document)
        if formatted == source:
            logger.debug("%s already formatted", path)
            continue

        changed.append(path)
        if check:
            console.print(f"would reformat {path}")
        else:
            path.write_text(formatted, encoding="utf-8")
            console.print(f"reformatted {path}")

    if not changed and not failed:
        console.print(f"{len(paths)} file(s) already formatted")

    if failed or (check and changed):
        raise typer.Exit(code=1)


@app.command(name="check")
def check_command(
    paths: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Schema files"),
) -> None:
    """Parse schema files and report syntax errors."""
    errors = 0
    for path in paths:
        try:
            _load(path)
        except SchemaParseError as e:
            _report_parse_error(path, e)
            errors += 1

    if errors:
        err_console.print(f"{errors} of {len(paths)} file(s) failed to parse", style="red")
        raise typer.Exit(code=1)
    console.print(f"OK: {len(paths)} file(s) parsed")


@app.command(name="parse")
def parse_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Schema file"),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Print the syntax tree of a schema file as JSON."""
    try:
        _, document = _load(path)
    except SchemaParseError as e:
        _report_parse_error(path, e)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(document.model_dump(mode="json"), indent=indent))


def main() -> None:
    """Console script entry point."""
    app()
