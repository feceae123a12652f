"""
Error types for schema parsing and printing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemalang.core.ir.location import Position

# Lines of source shown above and below the error line
FRAME_CONTEXT_LINES = 2


class SchemaError(Exception):
    """Base exception for all schemalang errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaParseError(SchemaError):
    """
    Raised when schema source cannot be parsed.

    Carries the source text and the position of the failure so the
    error can be rendered with a code frame.
    """

    name = "SchemaParseError"

    def __init__(self, message: str, source: str, position: Position):
        self.source = source
        self.position = position
        super().__init__(message)

    def render(self) -> str:
        """
        Format the error with a source excerpt around its position.

        Returns:
            String like "SchemaSyntaxError: Expected field type (3:9)"
            followed by a blank line and the code frame.
        """
        # positions are 1-based, the frame helper works with 0-based lines/columns
        frame = code_frame(self.source, self.position.line - 1, self.position.column - 1)
        header = f"{self.name}: {self.message} ({self.position.line}:{self.position.column})"
        return f"{header}\n\n{frame}"

    def __str__(self) -> str:
        return self.render()


class UnexpectedTokenError(SchemaParseError):
    """
    Raised by the tokenizer when the input at the current offset matches
    no token pattern.
    """

    name = "UnexpectedTokenError"


class SchemaSyntaxError(SchemaParseError):
    """
    A grammar rule did not match.

    Examples:
    - Missing model name
    - Missing field type
    - Unterminated block
    """

    name = "SchemaSyntaxError"


class PrinterError(SchemaError):
    """Raised when the printer is driven into an inconsistent state."""

    pass


def code_frame(source: str, line: int, column: int, context: int = FRAME_CONTEXT_LINES) -> str:
    """
    Render a few lines of ``source`` around a zero-based ``line``/``column``.

    Line numbers in the gutter are 1-based; a marker is placed under the
    error column.
    """
    lines = source.split("\n")
    line = min(max(line, 0), len(lines) - 1)
    start_line = max(0, line - context)
    end_line = min(len(lines), line + context + 1)

    formatted = []
    for index in range(start_line, end_line):
        prefix = f"{index + 1:4d} | "
        formatted.append(prefix + lines[index])
        if index == line:
            marker_pos = len(prefix) + max(column, 0)
            formatted.append(" " * marker_pos + "^")

    return "\n".join(formatted)
