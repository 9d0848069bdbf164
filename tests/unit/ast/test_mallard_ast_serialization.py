#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST JSON serialization."""
import json

import pytest

from mallardoc.ast import (
    DescriptionList,
    DescriptionListEntry,
    Document,
    InlineKbd,
    InlineQuoted,
    ListItem,
    Paragraph,
    Section,
    SourceLocation,
    Table,
    TableCell,
    TableRows,
    ast_to_dict,
    ast_to_json,
    dict_to_ast,
    json_to_ast,
)
from mallardoc.exceptions import ParsingError


def sample_tree() -> Document:
    return Document(
        title="Guide",
        has_header=True,
        attributes={"toc": "", "toclevels": 2},
        blocks=[
            Section(
                id="intro",
                title="Intro",
                source_location=SourceLocation(path="guide.adoc", line=3),
                blocks=[
                    Paragraph(text=["Press ", InlineKbd(keys=["Ctrl", "C"]), " to ", InlineQuoted(text="copy")]),
                    DescriptionList(
                        items=[DescriptionListEntry(terms=[ListItem(text="t")], description=ListItem(text="d"))]
                    ),
                    Table(rows=TableRows(head=[[TableCell(text="H")]], body=[[TableCell(text="B", colspan=2)]])),
                ],
            )
        ],
    )


@pytest.mark.unit
class TestAstToDict:
    """Test conversion of nodes to dictionaries."""

    def test_discriminator(self) -> None:
        data = ast_to_dict(Paragraph(text="Hi"))
        assert data["node_type"] == "Paragraph"
        assert data["text"] == "Hi"

    def test_nested_records(self) -> None:
        data = ast_to_dict(Table(rows=TableRows(body=[[TableCell(text="a")]])))
        assert data["rows"]["node_type"] == "TableRows"
        assert data["rows"]["body"][0][0]["node_type"] == "TableCell"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError):
            ast_to_dict(object())


@pytest.mark.unit
class TestRoundTrip:
    """Test that serialized trees load back unchanged."""

    def test_dict_round_trip(self) -> None:
        tree = sample_tree()
        assert dict_to_ast(ast_to_dict(tree)) == tree

    def test_json_round_trip(self) -> None:
        tree = sample_tree()
        assert json_to_ast(ast_to_json(tree, indent=2)) == tree

    def test_missing_fields_use_defaults(self) -> None:
        node = json_to_ast('{"node_type": "OrderedList", "items": [{"node_type": "ListItem", "text": "a"}]}')
        assert node.start is None
        assert node.items[0].text == "a"


@pytest.mark.unit
class TestLoadErrors:
    """Test errors raised for malformed input."""

    def test_invalid_json(self) -> None:
        with pytest.raises(ParsingError) as exc_info:
            json_to_ast("{not json")
        assert exc_info.value.parsing_stage == "json"

    def test_unknown_node_type(self) -> None:
        with pytest.raises(ParsingError, match="Unknown node type"):
            json_to_ast(json.dumps({"node_type": "Blink"}))

    def test_missing_node_type(self) -> None:
        with pytest.raises(ParsingError):
            dict_to_ast({"text": "x"})

    def test_unknown_field(self) -> None:
        with pytest.raises(ParsingError, match="Unknown field 'colour'"):
            dict_to_ast({"node_type": "Paragraph", "colour": "red"})

    def test_non_object(self) -> None:
        with pytest.raises(ParsingError):
            dict_to_ast(["Paragraph"])  # type: ignore[arg-type]
