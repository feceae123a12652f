"""
Schema AST types.

All node types are frozen pydantic models carrying an optional source
span. They are re-exported from this package.
"""

from .base import Node
from .definitions import (
    Attribute,
    ConfigDefinition,
    ConfigOption,
    ConfigType,
    Definition,
    Document,
    FieldDefinition,
    FieldType,
    ModelDefinition,
    TypeModifier,
)
from .expressions import (
    BooleanLiteral,
    Expression,
    FunctionCall,
    Identifier,
    StringLiteral,
    escape_string,
    unescape_string,
)
from .location import START, Position, Span

__all__ = [
    "Attribute",
    "BooleanLiteral",
    "ConfigDefinition",
    "ConfigOption",
    "ConfigType",
    "Definition",
    "Document",
    "Expression",
    "FieldDefinition",
    "FieldType",
    "FunctionCall",
    "Identifier",
    "ModelDefinition",
    "Node",
    "Position",
    "START",
    "Span",
    "StringLiteral",
    "TypeModifier",
    "escape_string",
    "unescape_string",
]
