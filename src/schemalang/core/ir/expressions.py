"""
Expression types for schema values.

Expressions appear as config option values and as attribute arguments:
- String literals: "postgresql://localhost"
- Boolean literals: true, false
- Function calls: env("DATABASE_URL"), default(now()), nested to any depth
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import Field

from .base import Node

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


class Identifier(Node):
    """A bare name: model, field, type, config, option or function name."""

    kind: Literal["Identifier"] = "Identifier"
    name: str = Field(description="Identifier text")


# ---------------------------------------------------------------------------
# Expression node types
# ---------------------------------------------------------------------------


class StringLiteral(Node):
    """
    A double-quoted string.

    ``value`` holds the unescaped content: the source text ``"a \\"b\\""``
    has value ``a "b"``.
    """

    kind: Literal["StringLiteral"] = "StringLiteral"
    value: str


class BooleanLiteral(Node):
    kind: Literal["BooleanLiteral"] = "BooleanLiteral"
    value: bool


class FunctionCall(Node):
    """
    Function call: name(arg1, arg2, ...).

    Arguments are expressions themselves, so calls nest:
    ``default(dbgenerated(env("SEQ")))``.
    """

    kind: Literal["FunctionCall"] = "FunctionCall"
    name: Identifier
    arguments: list[Expression] = Field(default_factory=list, description="Call arguments")


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expression = Annotated[
    StringLiteral | BooleanLiteral | FunctionCall,
    Field(discriminator="kind"),
]

FunctionCall.model_rebuild()


# ---------------------------------------------------------------------------
# String escaping
# ---------------------------------------------------------------------------

_ESCAPE_RE = re.compile(r'\\(["\\])')


def escape_string(value: str) -> str:
    """Escape a string literal's content for output between double quotes."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def unescape_string(body: str) -> str:
    """
    Resolve escapes in the content of a string token.

    ``\\"`` and ``\\\\`` stand for a quote and a backslash; a backslash
    before any other character is kept as written.
    """
    return _ESCAPE_RE.sub(r"\1", body)
