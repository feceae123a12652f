"""Source positions and spans for tokens and AST nodes.

Positions are recorded by the tokenizer and copied onto every node the
parser builds, enabling code-frame error messages and editor navigation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """A point in source text.

    Attributes:
        offset: 0-indexed character offset
        line: 1-indexed line number
        column: 1-indexed column number
    """

    offset: int
    line: int
    column: int

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def advanced_by(self, text: str) -> Position:
        """Position reached after consuming ``text`` from this position."""
        newlines = text.count("\n")
        if newlines == 0:
            return Position(
                offset=self.offset + len(text),
                line=self.line,
                column=self.column + len(text),
            )
        return Position(
            offset=self.offset + len(text),
            line=self.line + newlines,
            column=len(text) - text.rfind("\n"),
        )


START = Position(offset=0, line=1, column=1)


class Span(BaseModel):
    """Half-open ``[start, end)`` range of source a node was parsed from."""

    start: Position
    end: Position

    model_config = ConfigDict(frozen=True)

    def contains(self, other: Span) -> bool:
        return self.start.offset <= other.start.offset and other.end.offset <= self.end.offset
