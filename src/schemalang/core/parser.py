"""
Grammar rules for schema source.

Grammar:
    document      → definition* EOF
    definition    → model_def | config_def
    model_def     → "model" IDENT "{" field_def* "}"
    field_def     → IDENT type attribute*
    type          → IDENT ("?" | "[]")?
    attribute     → ATTRIBUTE arguments?
    config_def    → ("datasource" | "generator") IDENT "{" config_option* "}"
    config_option → IDENT "=" expression
    expression    → function_call | STRING | "true" | "false"
    function_call → IDENT arguments
    arguments     → "(" (expression ("," expression)*)? ")"

Keywords are only matched where the grammar asks for them, so ``model``
is a valid field name. ``expression`` tries ``function_call`` first so
that ``name(`` is never taken for a literal.
"""

from __future__ import annotations

import logging

from .combinators import (
    ParserState,
    change_error_message,
    choice,
    keyword,
    map_rule,
    optional,
    sequence,
    take_until,
    token,
    zero_or_more,
    zero_or_more_separated,
)
from .errors import SchemaSyntaxError
from .ir import (
    Attribute,
    BooleanLiteral,
    ConfigDefinition,
    ConfigOption,
    ConfigType,
    Document,
    Expression,
    FieldDefinition,
    FieldType,
    FunctionCall,
    Identifier,
    ModelDefinition,
    Node,
    Span,
    StringLiteral,
    TypeModifier,
    unescape_string,
)
from .lexer import Token, TokenType

logger = logging.getLogger(__name__)


def parse(source: str) -> Document:
    """
    Parse schema source into a Document.

    Args:
        source: Schema text

    Returns:
        Parsed document

    Raises:
        SchemaSyntaxError: If the source does not match the grammar, or nests
            function calls deeper than the interpreter stack allows.
        UnexpectedTokenError: If the source contains a character no token starts with.
    """
    state = ParserState(source)
    try:
        result = _document(state)
    except RecursionError:
        logger.debug("Recursion limit reached at token %d", state.get_pointer())
        raise SchemaSyntaxError(
            "Expression nested too deeply", source, state.peek().start
        ) from None
    document = result.unwrap()
    logger.debug("Parsed %d definitions", len(document.definitions))
    return document


def _span(start: Token | Node, end: Token | Node) -> Span:
    """Span from the start of ``start`` to the end of ``end``."""
    start_pos = start.start if isinstance(start, Token) else start.span.start
    end_pos = end.end if isinstance(end, Token) else end.span.end
    return Span(start=start_pos, end=end_pos)


# =============================================================================
# Terminals
# =============================================================================


@map_rule(lambda: token(TokenType.IDENTIFIER))
def identifier(tok: Token) -> Identifier:
    return Identifier(name=tok.text, span=_span(tok, tok))


@map_rule(lambda: token(TokenType.STRING))
def string_literal(tok: Token) -> StringLiteral:
    return StringLiteral(value=unescape_string(tok.text[1:-1]), span=_span(tok, tok))


@map_rule(lambda: choice("Expected boolean value", keyword("true"), keyword("false")))
def boolean_literal(tok: Token) -> BooleanLiteral:
    return BooleanLiteral(value=tok.text == "true", span=_span(tok, tok))


# =============================================================================
# Expressions
# =============================================================================


@map_rule(
    lambda: sequence(
        token(TokenType.LPAREN),
        zero_or_more_separated(expression, token(TokenType.COMMA)),
        token(TokenType.RPAREN),
    )
)
def arguments(values: tuple[Token, list[Expression], Token]) -> tuple[list[Expression], Token]:
    """Argument list and the closing parenthesis that ends it."""
    _, args, close_paren = values
    return args, close_paren


@map_rule(lambda: sequence(identifier, arguments))
def function_call(values: tuple[Identifier, tuple[list[Expression], Token]]) -> FunctionCall:
    name, (args, close_paren) = values
    return FunctionCall(name=name, arguments=args, span=_span(name, close_paren))


expression = choice("Expected expression", function_call, string_literal, boolean_literal)


# =============================================================================
# Models
# =============================================================================


@map_rule(
    lambda: optional(
        choice("Expected type modifier", token(TokenType.QUESTION), token(TokenType.BRACKETS))
    )
)
def type_modifier(tok: Token | None) -> tuple[TypeModifier, Token | None]:
    if tok is None:
        return TypeModifier.NONE, None
    if tok.type == TokenType.QUESTION:
        return TypeModifier.OPTIONAL, tok
    return TypeModifier.ARRAY, tok


@map_rule(lambda: sequence(change_error_message(identifier, "Expected field type"), type_modifier))
def field_type(values: tuple[Identifier, tuple[TypeModifier, Token | None]]) -> FieldType:
    name, (modifier, modifier_token) = values
    return FieldType(
        name=name,
        modifier=modifier,
        span=_span(name, modifier_token or name),
    )


@map_rule(lambda: sequence(token(TokenType.ATTRIBUTE), optional(arguments)))
def attribute(values: tuple[Token, tuple[list[Expression], Token] | None]) -> Attribute:
    name_token, argument_list = values
    args, end = argument_list if argument_list is not None else ([], name_token)
    return Attribute(name=name_token.text, arguments=args, span=_span(name_token, end))


@map_rule(
    lambda: sequence(
        change_error_message(identifier, "Expected field name"),
        field_type,
        zero_or_more(attribute),
    )
)
def field_definition(values: tuple[Identifier, FieldType, list[Attribute]]) -> FieldDefinition:
    name, type_, attributes = values
    end = attributes[-1] if attributes else type_
    return FieldDefinition(
        name=name,
        type=type_,
        attributes=attributes,
        span=_span(name, end),
    )


@map_rule(
    lambda: sequence(
        keyword("model"),
        change_error_message(identifier, "Expected model name"),
        token(TokenType.LBRACE),
        take_until(field_definition, TokenType.RBRACE, "Expected field definition or '}'"),
    )
)
def model_definition(
    values: tuple[Token, Identifier, Token, tuple[list[FieldDefinition], Token]],
) -> ModelDefinition:
    model_keyword, name, _, (fields, close_brace) = values
    return ModelDefinition(name=name, fields=fields, span=_span(model_keyword, close_brace))


# =============================================================================
# Config blocks
# =============================================================================


config_type = choice(
    "Expected generator or datasource keyword",
    keyword(ConfigType.DATASOURCE.value),
    keyword(ConfigType.GENERATOR.value),
)


@map_rule(lambda: sequence(identifier, token(TokenType.EQUALS), expression))
def config_option(values: tuple[Identifier, Token, Expression]) -> ConfigOption:
    key, _, value = values
    return ConfigOption(key=key, value=value, span=_span(key, value))


@map_rule(
    lambda: sequence(
        config_type,
        change_error_message(identifier, "Expected config name"),
        token(TokenType.LBRACE),
        take_until(config_option, TokenType.RBRACE, "Expected config option or '}'"),
    )
)
def config_definition(
    values: tuple[Token, Identifier, Token, tuple[list[ConfigOption], Token]],
) -> ConfigDefinition:
    type_token, name, _, (options, close_brace) = values
    return ConfigDefinition(
        config_type=ConfigType(type_token.text),
        name=name,
        options=options,
        span=_span(type_token, close_brace),
    )


# =============================================================================
# Document
# =============================================================================


definition = choice("Expected config or model definition", model_definition, config_definition)


@map_rule(lambda: take_until(definition, TokenType.EOF))
def _document(values: tuple[list[ModelDefinition | ConfigDefinition], Token]) -> Document:
    definitions, eof = values
    start = definitions[0].span.start if definitions else eof.start
    return Document(definitions=definitions, span=Span(start=start, end=eof.end))
