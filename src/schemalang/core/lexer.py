"""
Lexer/Tokenizer for schema source.

Tokens are produced lazily: the parser asks for them through a
``TokenList`` cursor, and every token computed so far is cached by its
ordinal so that backtracking never re-lexes.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .errors import UnexpectedTokenError
from .ir.location import START, Position


class TokenType(Enum):
    """Token types in schema source."""

    IDENTIFIER = "identifier"
    ATTRIBUTE = "attribute"
    STRING = "string"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    QUESTION = "?"
    EQUALS = "="
    BRACKETS = "[]"

    EOF = "eof"

    def describe(self) -> str:
        """Human-readable name used in error messages."""
        if self in (TokenType.IDENTIFIER, TokenType.ATTRIBUTE, TokenType.STRING):
            return self.value
        if self == TokenType.EOF:
            return "end of input"
        return f"'{self.value}'"


@dataclass(frozen=True)
class Token:
    """
    A single token of schema source.

    Attributes:
        type: Type of token
        text: Source text of the token, quotes included for strings
        start: Position of the first character
        end: Position just past the last character
    """

    type: TokenType
    text: str
    start: Position
    end: Position

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.text!r}, {self.start})"


# Order encodes precedence: the first pattern matching at the offset wins.
TOKEN_PATTERNS: list[tuple[TokenType, re.Pattern[str]]] = [
    (TokenType.IDENTIFIER, re.compile(r"[A-Za-z_][A-Za-z0-9_]*")),
    (TokenType.ATTRIBUTE, re.compile(r"@[A-Za-z_][A-Za-z0-9_]*")),
    # a backslash escapes the next character, so \" never closes the string
    (TokenType.STRING, re.compile(r'"(?:\\.|[^"\\\n])*"')),
    (TokenType.LBRACE, re.compile(r"\{")),
    (TokenType.RBRACE, re.compile(r"\}")),
    (TokenType.LPAREN, re.compile(r"\(")),
    (TokenType.RPAREN, re.compile(r"\)")),
    (TokenType.COMMA, re.compile(r",")),
    (TokenType.QUESTION, re.compile(r"\?")),
    (TokenType.EQUALS, re.compile(r"=")),
    (TokenType.BRACKETS, re.compile(r"\[\]")),
]

WHITESPACE_RE = re.compile(r"\s+")


class Lexer:
    """
    Lexer for schema source.

    Each call to ``next_token`` skips whitespace and returns the next
    token; once the input is exhausted it keeps returning EOF.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = START

    def _consume(self, length: int) -> tuple[Position, Position]:
        """Move past ``length`` characters, updating line/column."""
        start = self.position
        consumed = self.text[start.offset : start.offset + length]
        self.position = start.advanced_by(consumed)
        return start, self.position

    def skip_whitespace(self) -> None:
        match = WHITESPACE_RE.match(self.text, self.position.offset)
        if match:
            self._consume(len(match.group(0)))

    def next_token(self) -> Token:
        self.skip_whitespace()

        if self.position.offset >= len(self.text):
            return Token(TokenType.EOF, "", self.position, self.position)

        for token_type, pattern in TOKEN_PATTERNS:
            match = pattern.match(self.text, self.position.offset)
            if not match:
                continue
            text = match.group(0)
            start, end = self._consume(len(text))
            return Token(token_type, text, start, end)

        char = self.text[self.position.offset]
        raise UnexpectedTokenError(f"Unexpected character {char!r}", self.text, self.position)


class TokenList:
    """
    Cursor over lazily computed tokens.

    ``get_pointer``/``restore_pointer`` save and rewind the cursor; a
    pointer may not run ahead of the tokens computed so far.
    """

    def __init__(self, text: str):
        self._compute_next: Callable[[], Token] = Lexer(text).next_token
        self._tokens: list[Token] = []
        self._pointer = 0

    def get_pointer(self) -> int:
        return self._pointer

    def restore_pointer(self, pointer: int) -> None:
        if pointer > len(self._tokens):
            raise ValueError("Attempt to set position to a not yet computed token")
        self._pointer = pointer

    def peek(self) -> Token:
        """Current token, without moving the cursor."""
        if self._pointer == len(self._tokens):
            self._tokens.append(self._compute_next())
        return self._tokens[self._pointer]

    def advance(self) -> Token:
        """Return the current token and move the cursor past it."""
        token = self.peek()
        self._pointer += 1
        return token


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize the whole input.

    Args:
        text: Source text

    Returns:
        List of tokens, ending with a single EOF token
    """
    lexer = Lexer(text)
    tokens = [lexer.next_token()]
    while tokens[-1].type != TokenType.EOF:
        tokens.append(lexer.next_token())
    return tokens
