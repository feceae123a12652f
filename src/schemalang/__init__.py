"""
schemalang - parser and canonical printer for a small declarative schema language.

Usage:
    from schemalang import parse, print_document

    document = parse(source)
    text = print_document(document)
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    PrinterError,
    SchemaError,
    SchemaParseError,
    SchemaSyntaxError,
    UnexpectedTokenError,
)
from .core.parser import parse
from .core.printer import print_document

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse",
    "print_document",
    "PrinterError",
    "SchemaError",
    "SchemaParseError",
    "SchemaSyntaxError",
    "UnexpectedTokenError",
]
