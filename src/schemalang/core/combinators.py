"""
Parser combinators for the schema grammar.

A rule is a callable taking the ``ParserState`` of one parse and
returning ``Ok(value)`` or ``Err(SchemaSyntaxError)``. Rules built here
share two properties:

- On failure the token cursor is restored to where the rule started, so
  any rule can be tried as one alternative of a ``choice``.
- The rule body is built on first use, so rules may refer to rules that
  are defined later in the module (``expression`` -> ``function_call`` ->
  ``expression``).

Only the most advanced failure survives alternation: ``choice`` reports
the error of the alternative that got furthest before failing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .errors import SchemaSyntaxError
from .ir.location import Position
from .lexer import Token, TokenList, TokenType
from .result import Err, Result, err, ok

T = TypeVar("T")
U = TypeVar("U")


class ParserState:
    """Per-parse state: the token cursor and the source for error reporting."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens = TokenList(source)

    def advance(self) -> Token:
        return self.tokens.advance()

    def peek(self) -> Token:
        return self.tokens.peek()

    def get_pointer(self) -> int:
        return self.tokens.get_pointer()

    def restore_pointer(self, pointer: int) -> None:
        self.tokens.restore_pointer(pointer)

    def error(self, message: str, position: Position) -> Err[Any, SchemaSyntaxError]:
        return err(SchemaSyntaxError(message, self.source, position))


Rule = Callable[[ParserState], Result[T, SchemaSyntaxError]]


# =============================================================================
# Rule definition
# =============================================================================


def define_rule(factory: Callable[[], Rule[T]]) -> Rule[T]:
    """
    Wrap a rule factory into a lazily built, backtracking rule.

    ``factory`` is called once, on the first invocation of the rule.
    """
    built: Rule[T] | None = None

    def rule(state: ParserState) -> Result[T, SchemaSyntaxError]:
        nonlocal built
        if built is None:
            built = factory()
        pointer = state.get_pointer()
        result = built(state)
        if result.is_error():
            state.restore_pointer(pointer)
        return result

    return rule


def map_rule(factory: Callable[[], Rule[T]]) -> Callable[[Callable[[T], U]], Rule[U]]:
    """
    Decorator turning a mapper function into a rule.

    Usage:
        @map_rule(lambda: sequence(keyword("model"), identifier))
        def model_header(values):
            ...

    The decorated name is bound to a rule producing the mapper's return
    value from the value of the rule built by ``factory``.
    """

    def decorator(mapper: Callable[[T], U]) -> Rule[U]:
        def build() -> Rule[U]:
            inner = factory()
            return lambda state: inner(state).map(mapper)

        return define_rule(build)

    return decorator


# =============================================================================
# Token rules
# =============================================================================


def token(token_type: TokenType) -> Rule[Token]:
    """Consume one token of ``token_type``."""

    def build() -> Rule[Token]:
        def rule(state: ParserState) -> Result[Token, SchemaSyntaxError]:
            tok = state.advance()
            if tok.type == token_type:
                return ok(tok)
            return state.error(f"Expected {token_type.describe()}", tok.start)

        return rule

    return define_rule(build)


_identifier_token = token(TokenType.IDENTIFIER)


def keyword(name: str) -> Rule[Token]:
    """Consume an identifier token whose text is exactly ``name``."""

    def build() -> Rule[Token]:
        def rule(state: ParserState) -> Result[Token, SchemaSyntaxError]:
            message = f"Expected keyword {name}"
            result = _identifier_token(state)
            if result.is_error():
                return state.error(message, result.error.position)
            tok = result.unwrap()
            if tok.text != name:
                return state.error(message, tok.start)
            return ok(tok)

        return rule

    return define_rule(build)


# =============================================================================
# Composition
# =============================================================================


def sequence(*rules: Rule[Any]) -> Rule[tuple[Any, ...]]:
    """Run ``rules`` in order and collect their values into a tuple."""

    def build() -> Rule[tuple[Any, ...]]:
        def rule(state: ParserState) -> Result[tuple[Any, ...], SchemaSyntaxError]:
            values: list[Any] = []
            for element in rules:
                result = element(state)
                if result.is_error():
                    return result
                values.append(result.unwrap())
            return ok(tuple(values))

        return rule

    return define_rule(build)


def choice(default_message: str, *rules: Rule[Any]) -> Rule[Any]:
    """
    Try ``rules`` in order from the same position; first success wins.

    When every alternative fails, the error positioned furthest into the
    input is reported. Ties keep the earlier error, and the default
    error (at the next token) counts as the earliest of all.
    """

    def build() -> Rule[Any]:
        def rule(state: ParserState) -> Result[Any, SchemaSyntaxError]:
            furthest = SchemaSyntaxError(default_message, state.source, state.peek().start)
            for alternative in rules:
                result = alternative(state)
                if result.is_ok():
                    return result
                if result.error.position.offset > furthest.position.offset:
                    furthest = result.error
            return err(furthest)

        return rule

    return define_rule(build)


def optional(element: Rule[T]) -> Rule[T | None]:
    """Value of ``element``, or ``None`` if it does not match."""

    def build() -> Rule[T | None]:
        return lambda state: element(state).or_else(lambda _: ok(None))

    return define_rule(build)


def zero_or_more(element: Rule[T]) -> Rule[list[T]]:
    """Apply ``element`` until it fails; the failed attempt consumes nothing."""

    def build() -> Rule[list[T]]:
        def rule(state: ParserState) -> Result[list[T], SchemaSyntaxError]:
            values: list[T] = []
            while True:
                pointer = state.get_pointer()
                result = element(state)
                if result.is_error():
                    state.restore_pointer(pointer)
                    break
                values.append(result.unwrap())
                # an element matching empty input would repeat forever
                if state.get_pointer() == pointer:
                    break
            return ok(values)

        return rule

    return define_rule(build)


def zero_or_more_separated(element: Rule[T], separator: Rule[Any]) -> Rule[list[T]]:
    """
    ``element (separator element)*``, or nothing.

    A trailing separator is left unconsumed.
    """

    def build() -> Rule[list[T]]:
        def rule(state: ParserState) -> Result[list[T], SchemaSyntaxError]:
            first = element(state)
            if first.is_error():
                return ok([])
            values = [first.unwrap()]
            while True:
                pointer = state.get_pointer()
                result = separator(state).flat_map(lambda _: element(state))
                if result.is_error():
                    state.restore_pointer(pointer)
                    break
                values.append(result.unwrap())
            return ok(values)

        return rule

    return define_rule(build)


def take_until(
    element: Rule[T],
    stop_type: TokenType,
    message: str | None = None,
) -> Rule[tuple[list[T], Token]]:
    """
    Apply ``element`` until the next token is ``stop_type``, then consume it.

    Returns the elements and the stop token. A failing element fails the
    whole rule. If ``message`` is given and the element failed without
    getting past the token where the stop token could have been, the
    error is reported as ``message`` at that token.
    """

    def build() -> Rule[tuple[list[T], Token]]:
        def rule(state: ParserState) -> Result[tuple[list[T], Token], SchemaSyntaxError]:
            values: list[T] = []
            while state.peek().type != stop_type:
                expected_at = state.peek().start
                result = element(state)
                if result.is_error():
                    if message is not None and result.error.position.offset <= expected_at.offset:
                        return state.error(message, expected_at)
                    return result
                values.append(result.unwrap())
            return ok((values, state.advance()))

        return rule

    return define_rule(build)


def change_error_message(element: Rule[T], message: str) -> Rule[T]:
    """Replace the message of ``element``'s error, keeping its position."""

    def rule(state: ParserState) -> Result[T, SchemaSyntaxError]:
        return element(state).or_else(lambda error: state.error(message, error.position))

    return rule
