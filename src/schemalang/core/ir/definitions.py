"""
Definition types: documents, models, fields and config blocks.

A document is an ordered list of definitions:

    datasource db {
      provider = "postgresql"
      url = env("DATABASE_URL")
    }

    model User {
      id     Int @id @default(autoincrement())
      email  String @unique
      posts  Post[]
    }
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from .base import Node
from .expressions import Expression, Identifier

# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


class TypeModifier(StrEnum):
    """Optional trailing marker on a field type."""

    NONE = "none"
    ARRAY = "array"  # Int[]
    OPTIONAL = "optional"  # Int?


class FieldType(Node):
    """Type reference of a field, e.g. ``String``, ``Post[]``, ``DateTime?``."""

    kind: Literal["Type"] = "Type"
    name: Identifier
    modifier: TypeModifier = TypeModifier.NONE


class Attribute(Node):
    """
    Field attribute such as ``@id`` or ``@default(now())``.

    ``name`` keeps the leading ``@``.
    """

    kind: Literal["Attribute"] = "Attribute"
    name: str
    arguments: list[Expression] = Field(default_factory=list)


class FieldDefinition(Node):
    kind: Literal["FieldDefinition"] = "FieldDefinition"
    name: Identifier
    type: FieldType
    attributes: list[Attribute] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


class ModelDefinition(Node):
    """``model Name { fields }``"""

    kind: Literal["ModelDefinition"] = "ModelDefinition"
    name: Identifier
    fields: list[FieldDefinition] = Field(default_factory=list)


class ConfigType(StrEnum):
    """Keyword that opens a config block."""

    DATASOURCE = "datasource"
    GENERATOR = "generator"


class ConfigOption(Node):
    """``key = value`` line inside a config block."""

    kind: Literal["ConfigOption"] = "ConfigOption"
    key: Identifier
    value: Expression


class ConfigDefinition(Node):
    """``datasource name { options }`` or ``generator name { options }``"""

    kind: Literal["ConfigDefinition"] = "ConfigDefinition"
    config_type: ConfigType
    name: Identifier
    options: list[ConfigOption] = Field(default_factory=list)


Definition = Annotated[
    ModelDefinition | ConfigDefinition,
    Field(discriminator="kind"),
]


class Document(Node):
    """Root node holding all definitions in source order."""

    kind: Literal["Document"] = "Document"
    definitions: list[Definition] = Field(default_factory=list)

    @property
    def models(self) -> list[ModelDefinition]:
        return [d for d in self.definitions if isinstance(d, ModelDefinition)]

    @property
    def configs(self) -> list[ConfigDefinition]:
        return [d for d in self.definitions if isinstance(d, ConfigDefinition)]
