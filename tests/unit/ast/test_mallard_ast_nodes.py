#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for document AST node helpers."""
import pytest

from mallardoc.ast import (
    Document,
    DocumentTitle,
    InlineQuoted,
    ListItem,
    Paragraph,
    Section,
    Table,
    TableCell,
    TableRows,
    UnorderedList,
)


@pytest.mark.unit
class TestNodeAttributes:
    """Test attribute and content helpers shared by all nodes."""

    def test_attr_default(self) -> None:
        node = Paragraph(attributes={"role": "lead"})
        assert node.attr("role") == "lead"
        assert node.attr("missing", "fallback") == "fallback"

    def test_none_valued_attribute_is_absent(self) -> None:
        node = Paragraph(attributes={"toc": None, "notitle": ""})
        assert not node.has_attr("toc")
        assert node.has_attr("notitle")

    def test_has_title(self) -> None:
        assert Paragraph(title="T").has_title()
        assert not Paragraph(title="").has_title()
        assert Paragraph(title=["a ", InlineQuoted(text="b")]).has_title()

    def test_has_blocks(self) -> None:
        assert Section(blocks=[Paragraph(text="x")]).has_blocks()
        assert not Section().has_blocks()
        assert not Paragraph(text="x").has_blocks()

    def test_list_item_has_text(self) -> None:
        assert ListItem(text="x").has_text()
        assert not ListItem().has_text()


@pytest.mark.unit
class TestDocumentTitle:
    """Test document title lookup and partitioning."""

    def test_header_title(self) -> None:
        assert Document(title="Guide").doctitle() == "Guide"

    def test_title_attribute_fallback(self) -> None:
        assert Document(attributes={"title": "From attr"}).doctitle() == "From attr"

    def test_first_section_fallback(self) -> None:
        doc = Document(blocks=[Paragraph(text="x"), Section(title="First"), Section(title="Second")])
        assert doc.doctitle() == "First"

    def test_no_fallback(self) -> None:
        doc = Document(blocks=[Section(title="First")])
        assert doc.doctitle(use_fallback=False) is None

    def test_untitled(self) -> None:
        assert Document().doctitle() is None

    def test_partition_on_last_separator(self) -> None:
        title = DocumentTitle.partition("A: B: C")
        assert title.main == "A: B"
        assert title.subtitle == "C"
        assert title.has_subtitle()

    def test_partition_without_separator(self) -> None:
        title = DocumentTitle.partition("Plain")
        assert title == DocumentTitle(main="Plain")
        assert not title.has_subtitle()
        assert str(title) == "Plain"

    @pytest.mark.parametrize("text", ["Chapter: ", "A: B: ", "Chapter:   "])
    def test_trailing_separator_stays_in_title(self, text) -> None:
        title = DocumentTitle.partition(text)
        assert title == DocumentTitle(main=text)
        assert not title.has_subtitle()


@pytest.mark.unit
class TestListsAndTables:
    """Test list and table helpers."""

    def test_checklist_by_style(self) -> None:
        assert UnorderedList(style="checklist").is_checklist()
        assert not UnorderedList().is_checklist()

    def test_checklist_by_option(self) -> None:
        assert UnorderedList(attributes={"checklist-option": ""}).is_checklist()

    def test_column_count_uses_widest_row(self) -> None:
        rows = TableRows(
            head=[[TableCell(text="a")]],
            body=[[TableCell(text="a"), TableCell(text="b", colspan=2)]],
        )
        assert Table(rows=rows).column_count() == 3

    def test_declared_column_count_wins(self) -> None:
        assert Table(columns=5).column_count() == 5

    def test_empty_table_has_no_columns(self) -> None:
        assert Table().column_count() == 0

    def test_rows_by_section(self) -> None:
        head = [TableCell(text="h")]
        body = [TableCell(text="b")]
        foot = [TableCell(text="f")]
        rows = TableRows(head=[head], body=[body], foot=[foot])
        assert rows.section("foot") == [foot]
        assert rows.all_rows() == [head, body, foot]
