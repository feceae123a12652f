"""
Printer: renders a Document as canonical schema source.

Canonical form:
- definitions separated by one blank line, output ends with a newline
- block bodies indented by two spaces, one element per line
- field types aligned two columns past the longest field name
- config options as ``key = value``
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from .errors import PrinterError
from .ir import (
    Attribute,
    BooleanLiteral,
    ConfigDefinition,
    ConfigOption,
    Document,
    Expression,
    FieldDefinition,
    FieldType,
    FunctionCall,
    ModelDefinition,
    StringLiteral,
    TypeModifier,
    escape_string,
)

logger = logging.getLogger(__name__)

INDENT_WIDTH = 2
# Minimum gap between the longest field name and the type column
TYPE_GAP = 2

N = TypeVar("N")


class PrinterState:
    """Accumulates output lines; the current line is indented when flushed."""

    def __init__(self) -> None:
        self.indentation_level = 0
        self.lines: list[str] = []
        self.current_line = ""

    def indent(self) -> PrinterState:
        self.indentation_level += 1
        return self

    def unindent(self) -> PrinterState:
        if self.indentation_level == 0:
            raise PrinterError("Can not unindent beyond 0")
        self.indentation_level -= 1
        return self

    def write(self, text: str) -> PrinterState:
        self.current_line += text
        return self

    def write_aligned(self, text: str, column: int) -> PrinterState:
        """Write ``text`` starting at ``column`` of the current line (indent not counted)."""
        padding = max(column - len(self.current_line), 0)
        return self.write(" " * padding + text)

    def new_line(self) -> PrinterState:
        indentation = " " * (self.indentation_level * INDENT_WIDTH) if self.current_line else ""
        self.lines.append(indentation + self.current_line)
        self.current_line = ""
        return self

    def write_separated(
        self,
        nodes: Sequence[N],
        separator: str,
        print_node: Callable[[N, PrinterState], None],
    ) -> PrinterState:
        """Print ``nodes`` with ``separator`` between them; ``"\\n"`` starts new lines."""
        for index, node in enumerate(nodes):
            if index > 0:
                if separator == "\n":
                    self.new_line()
                else:
                    self.write(separator)
            print_node(node, self)
        return self

    def get_text(self) -> str:
        if self.current_line:
            self.new_line()
        return "\n".join(self.lines)


def print_document(document: Document) -> str:
    """
    Render a document as canonical schema source.

    Args:
        document: Document to print (spans are ignored)

    Returns:
        Schema text; empty for a document without definitions
    """
    state = PrinterState()
    print_definitions(document, state)
    text = state.get_text()
    logger.debug("Printed %d definitions as %d lines", len(document.definitions), len(state.lines))
    return text


def print_definitions(document: Document, state: PrinterState) -> None:
    state.write_separated(document.definitions, "\n", print_definition)
    state.new_line()


def print_definition(definition: ModelDefinition | ConfigDefinition, state: PrinterState) -> None:
    match definition:
        case ModelDefinition():
            print_model_definition(definition, state)
        case ConfigDefinition():
            print_config_definition(definition, state)
        case _:
            raise PrinterError(f"Unexpected definition type: {type(definition).__name__}")


def _print_block(
    header: str,
    elements: Sequence[N],
    print_element: Callable[[N, PrinterState], None],
    state: PrinterState,
) -> None:
    state.write(header).write(" {").new_line().indent()
    if elements:
        state.write_separated(elements, "\n", print_element).new_line()
    state.unindent().write("}").new_line()


# =============================================================================
# Models
# =============================================================================


def print_model_definition(definition: ModelDefinition, state: PrinterState) -> None:
    type_column = type_alignment_column(definition.fields)
    _print_block(
        f"model {definition.name.name}",
        definition.fields,
        lambda field, st: print_field(field, type_column, st),
        state,
    )


def type_alignment_column(fields: Sequence[FieldDefinition]) -> int:
    """Column (relative to the block indent) where every field type starts."""
    if not fields:
        return 0
    return max(len(field.name.name) for field in fields) + TYPE_GAP


def print_field(field: FieldDefinition, type_column: int, state: PrinterState) -> None:
    state.write(field.name.name)
    print_type(field.type, type_column, state)
    for attribute in field.attributes:
        state.write(" ")
        print_attribute(attribute, state)


def print_type(field_type: FieldType, type_column: int, state: PrinterState) -> None:
    state.write_aligned(field_type.name.name, type_column)
    match field_type.modifier:
        case TypeModifier.ARRAY:
            state.write("[]")
        case TypeModifier.OPTIONAL:
            state.write("?")
        case TypeModifier.NONE:
            pass


def print_attribute(attribute: Attribute, state: PrinterState) -> None:
    state.write(attribute.name)
    if attribute.arguments:
        print_arguments(attribute.arguments, state)


# =============================================================================
# Config blocks
# =============================================================================


def print_config_definition(definition: ConfigDefinition, state: PrinterState) -> None:
    _print_block(
        f"{definition.config_type.value} {definition.name.name}",
        definition.options,
        print_config_option,
        state,
    )


def print_config_option(option: ConfigOption, state: PrinterState) -> None:
    state.write(option.key.name).write(" = ")
    print_expression(option.value, state)


# =============================================================================
# Expressions
# =============================================================================


def print_expression(expression: Expression, state: PrinterState) -> None:
    match expression:
        case BooleanLiteral(value=value):
            state.write("true" if value else "false")
        case StringLiteral(value=value):
            state.write('"').write(escape_string(value)).write('"')
        case FunctionCall():
            state.write(expression.name.name)
            print_arguments(expression.arguments, state)
        case _:
            raise PrinterError(f"Unexpected expression type: {type(expression).__name__}")


def print_arguments(arguments: Sequence[Expression], state: PrinterState) -> None:
    state.write("(").write_separated(arguments, ", ", print_expression).write(")")
