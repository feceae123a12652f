"""Core schemalang functionality: tokenizer, combinators, AST, parser, printer."""

from . import ir
from .errors import (
    PrinterError,
    SchemaError,
    SchemaParseError,
    SchemaSyntaxError,
    UnexpectedTokenError,
    code_frame,
)
from .lexer import Token, TokenList, TokenType, tokenize
from .parser import parse
from .printer import print_document

__all__ = [
    "ir",
    "PrinterError",
    "SchemaError",
    "SchemaParseError",
    "SchemaSyntaxError",
    "UnexpectedTokenError",
    "code_frame",
    "Token",
    "TokenList",
    "TokenType",
    "tokenize",
    "parse",
    "print_document",
]
