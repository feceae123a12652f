"""Tests for the canonical printer."""

from __future__ import annotations

import pytest

from schemalang.core.errors import PrinterError
from schemalang.core.ir import (
    Attribute,
    BooleanLiteral,
    ConfigDefinition,
    ConfigOption,
    ConfigType,
    Document,
    FieldDefinition,
    FieldType,
    FunctionCall,
    Identifier,
    ModelDefinition,
    StringLiteral,
    TypeModifier,
)
from schemalang.core.parser import parse
from schemalang.core.printer import PrinterState, print_document


def ident(name: str) -> Identifier:
    return Identifier(name=name)


def field(
    name: str,
    type_name: str = "Int",
    modifier: TypeModifier = TypeModifier.NONE,
    attributes: list[Attribute] | None = None,
) -> FieldDefinition:
    return FieldDefinition(
        name=ident(name),
        type=FieldType(name=ident(type_name), modifier=modifier),
        attributes=attributes or [],
    )


def model(name: str, *fields: FieldDefinition) -> Document:
    return Document(definitions=[ModelDefinition(name=ident(name), fields=list(fields))])


class TestDocuments:
    def test_empty_document(self) -> None:
        assert print_document(Document()) == ""

    def test_empty_model(self) -> None:
        assert print_document(model("Foo")) == "model Foo {\n}\n"

    def test_definitions_separated_by_blank_line(self) -> None:
        doc = Document(
            definitions=[
                ModelDefinition(name=ident("A")),
                ModelDefinition(name=ident("B"), fields=[field("id")]),
            ]
        )
        assert print_document(doc) == "model A {\n}\n\nmodel B {\n  id  Int\n}\n"


class TestFields:
    def test_field(self) -> None:
        assert print_document(model("Model", field("field"))) == "model Model {\n  field  Int\n}\n"

    def test_array_type(self) -> None:
        text = print_document(model("Model", field("array", modifier=TypeModifier.ARRAY)))
        assert text == "model Model {\n  array  Int[]\n}\n"

    def test_optional_type(self) -> None:
        text = print_document(model("Model", field("maybe", modifier=TypeModifier.OPTIONAL)))
        assert text == "model Model {\n  maybe  Int?\n}\n"

    def test_aligns_types(self) -> None:
        text = print_document(model("Model", field("short"), field("loooong", "String")))
        lines = text.splitlines()
        assert lines[1] == "  short    Int"
        assert lines[2] == "  loooong  String"
        assert lines[1].index("Int") == lines[2].index("String")

    def test_alignment_is_per_model(self) -> None:
        doc = Document(
            definitions=[
                ModelDefinition(name=ident("A"), fields=[field("a"), field("veryLongName")]),
                ModelDefinition(name=ident("B"), fields=[field("b")]),
            ]
        )
        assert "\n  b  Int\n" in print_document(doc)


class TestAttributes:
    def test_attribute(self) -> None:
        doc = model("Model", field("id", attributes=[Attribute(name="@id")]))
        assert print_document(doc) == "model Model {\n  id  Int @id\n}\n"

    def test_multiple_attributes(self) -> None:
        doc = model(
            "Model",
            field("field", attributes=[Attribute(name="@first"), Attribute(name="@second")]),
        )
        assert print_document(doc) == "model Model {\n  field  Int @first @second\n}\n"

    def test_attribute_with_arguments(self) -> None:
        attribute = Attribute(
            name="@id",
            arguments=[
                BooleanLiteral(value=True),
                StringLiteral(value="foo"),
                FunctionCall(name=ident("func")),
            ],
        )
        doc = model("Model", field("id", attributes=[attribute]))
        assert print_document(doc) == 'model Model {\n  id  Int @id(true, "foo", func())\n}\n'

    def test_escapes_backslashes_in_arguments(self) -> None:
        attribute = Attribute(
            name="@x",
            arguments=[StringLiteral(value="a\\"), StringLiteral(value="b")],
        )
        doc = model("Model", field("f", attributes=[attribute]))
        text = print_document(doc)
        assert r'@x("a\\", "b")' in text
        assert parse(text).without_spans() == doc


class TestConfigDefinitions:
    def config(self, *options: ConfigOption) -> Document:
        return Document(
            definitions=[
                ConfigDefinition(
                    config_type=ConfigType.DATASOURCE,
                    name=ident("db"),
                    options=list(options),
                )
            ]
        )

    def test_empty_config(self) -> None:
        assert print_document(self.config()) == "datasource db {\n}\n"

    def test_generator_keyword(self) -> None:
        doc = Document(
            definitions=[ConfigDefinition(config_type=ConfigType.GENERATOR, name=ident("client"))]
        )
        assert print_document(doc) == "generator client {\n}\n"

    def test_options(self) -> None:
        doc = self.config(
            ConfigOption(key=ident("provider"), value=StringLiteral(value="postgresql")),
            ConfigOption(key=ident("enabled"), value=BooleanLiteral(value=False)),
        )
        assert print_document(doc) == (
            'datasource db {\n  provider = "postgresql"\n  enabled = false\n}\n'
        )

    def test_escapes_quotes(self) -> None:
        doc = self.config(ConfigOption(key=ident("a"), value=StringLiteral(value='say "hi"')))
        assert 'a = "say \\"hi\\""' in print_document(doc)

    def test_nested_function_calls(self) -> None:
        call = FunctionCall(
            name=ident("outer"),
            arguments=[
                FunctionCall(name=ident("inner"), arguments=[BooleanLiteral(value=True)]),
                StringLiteral(value="x"),
            ],
        )
        doc = self.config(ConfigOption(key=ident("a"), value=call))
        assert '  a = outer(inner(true), "x")\n' in print_document(doc)


class TestPrinterState:
    def test_unindent_below_zero_raises(self) -> None:
        with pytest.raises(PrinterError):
            PrinterState().unindent()

    def test_write_aligned_pads_to_column(self) -> None:
        state = PrinterState().write("ab").write_aligned("x", 5)
        assert state.current_line == "ab   x"

    def test_write_aligned_never_truncates(self) -> None:
        state = PrinterState().write("abcdef").write_aligned("x", 2)
        assert state.current_line == "abcdefx"

    def test_new_line_applies_indentation(self) -> None:
        state = PrinterState().indent().write("a").new_line()
        assert state.lines == ["  a"]

    def test_blank_lines_are_not_indented(self) -> None:
        state = PrinterState().indent().new_line()
        assert state.lines == [""]

    def test_get_text_flushes_current_line(self) -> None:
        assert PrinterState().write("a").new_line().write("b").get_text() == "a\nb"


class TestRenderingEntryPoint:
    @pytest.mark.parametrize(
        "node_type",
        [Identifier, StringLiteral, BooleanLiteral, FunctionCall, FieldType, Attribute],
    )
    def test_nodes_define_no_text_form(self, node_type: type) -> None:
        """Source text is produced by print_document only."""
        assert "__str__" not in vars(node_type)
