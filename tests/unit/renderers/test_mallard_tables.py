#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_mallard_tables.py
"""Unit tests for table rendering and the style lookup tables."""

import logging
from types import MappingProxyType

import pytest

from mallardoc.ast import Document, Paragraph, Table, TableCell, TableRows
from mallardoc.options import MallardRendererOptions
from mallardoc.renderers.mallard import MallardRenderer
from mallardoc.renderers.mallard_tables import (
    ADMONITION_STYLES,
    DLIST_TAGS,
    OLIST_STYLES,
    QUOTE_TAGS,
    TABLE_SECTIONS,
    DlistTags,
    QuoteTags,
    lookup,
)


def body_table(*rows, **kwargs):
    return Table(rows=TableRows(body=[list(row) for row in rows]), **kwargs)


@pytest.mark.unit
class TestLookupTables:
    """Tests for style-keyed lookup tables."""

    def test_olist_known_and_default(self):
        assert lookup(OLIST_STYLES, "loweralpha") == "lower-alpha"
        assert lookup(OLIST_STYLES, "arabic") == "numbered"
        assert lookup(OLIST_STYLES, "bogus") == "numbered"
        assert lookup(OLIST_STYLES, None) == "numbered"

    def test_dlist_entries(self):
        assert lookup(DLIST_TAGS, "qanda") == DlistTags(list="list", entry="item", term="p")
        assert lookup(DLIST_TAGS, None) == DlistTags(list="terms", entry="item", term="title")

    def test_quote_tags_default_is_empty(self):
        assert tuple(lookup(QUOTE_TAGS, "bogus")) == ("", "")
        assert lookup(QUOTE_TAGS, "emphasis") == QuoteTags("<em>", "</em>")

    def test_admonition_default_is_none(self):
        assert lookup(ADMONITION_STYLES, "caution") == "caution"
        assert lookup(ADMONITION_STYLES, "danger") is None

    def test_tables_are_read_only(self):
        assert isinstance(OLIST_STYLES.entries, MappingProxyType)
        with pytest.raises(TypeError):
            OLIST_STYLES.entries["new"] = "value"  # type: ignore[index]

    def test_membership_and_keys(self):
        assert "upperalpha" in OLIST_STYLES
        assert "bogus" not in OLIST_STYLES
        assert "labeled" in DLIST_TAGS.keys()

    def test_section_order(self):
        assert TABLE_SECTIONS == ("head", "foot", "body")


@pytest.mark.unit
class TestTableRendering:
    """Tests for the table layout."""

    def test_default_table(self, renderer):
        table = body_table([TableCell(text="a"), TableCell(text="b")])
        assert renderer.convert(table) == (
            '<table frame="all" rules="none">\n'
            "<colgroup>\n<col/>\n<col/>\n</colgroup>\n"
            "<tbody>\n<tr>\n<td><p>a</p></td>\n<td><p>b</p></td>\n</tr>\n</tbody>\n"
            "</table>"
        )

    def test_grid_table_with_head_only(self, renderer):
        table = Table(attributes={"grid": "all"}, rows=TableRows(head=[[TableCell(text="H")]]))
        result = renderer.render_to_result(table)

        assert 'rules="all"' in result.content
        assert "<thead>" in result.content
        assert "<tbody>" not in result.content
        assert [d.code for d in result.diagnostics] == ["table-no-body"]
        assert result.diagnostics[0].message == "tables must have at least one body row"
        assert result.has_warnings

    def test_missing_body_is_logged(self, renderer, caplog):
        table = Table(id="t9", rows=TableRows(head=[[TableCell(text="H")]]))
        with caplog.at_level(logging.WARNING, logger="mallardoc"):
            renderer.convert(table)
        assert "tables must have at least one body row" in caplog.text

    def test_grid_none_disables_rules(self, renderer):
        table = body_table([TableCell(text="a")], attributes={"grid": "none"})
        assert 'rules="none"' in renderer.convert(table)

    def test_frame_attribute(self, renderer):
        table = body_table([TableCell(text="a")], attributes={"frame": "topbot"})
        assert renderer.convert(table).startswith('<table frame="topbot" rules="none">')

    def test_title_and_id(self, renderer):
        table = body_table([TableCell(text="a")], id="t1", title="Data")
        assert renderer.convert(table).startswith('<table xml:id="t1" frame="all" rules="none">\n<title>Data</title>\n')

    def test_width_processing_instructions(self, renderer):
        table = body_table([TableCell(text="a")], attributes={"width": "50%"})
        result = renderer.convert(table)
        assert '<?dbhtml table-width="50%"?>\n<?dbfo table-width="50%"?>\n<?dblatex table-width="50%"?>' in result

    def test_width_processing_instruction_names_are_configurable(self):
        renderer = MallardRenderer(MallardRendererOptions(standalone=False, table_pi_names=("dbhtml",)))
        table = body_table([TableCell(text="a")], attributes={"width": "50%"})
        result = renderer.convert(table)
        assert '<?dbhtml table-width="50%"?>' in result
        assert "dbfo" not in result

    def test_no_width_no_processing_instructions(self, renderer):
        assert "table-width" not in renderer.convert(body_table([TableCell(text="a")]))

    def test_section_order_head_foot_body(self, renderer):
        rows = TableRows(
            head=[[TableCell(text="H")]],
            body=[[TableCell(text="B")]],
            foot=[[TableCell(text="F")]],
        )
        result = renderer.convert(Table(rows=rows))
        assert result.index("<thead>") < result.index("<tfoot>") < result.index("<tbody>")

    def test_colspan_counts_towards_columns(self, renderer):
        table = body_table([TableCell(text="a", colspan=2), TableCell(text="b")])
        result = renderer.convert(table)
        assert result.count("<col/>") == 3
        assert '<td colspan="2"><p>a</p></td>' in result

    def test_spans_of_one_are_omitted(self, renderer):
        table = body_table([TableCell(text="a", colspan=1, rowspan=1)])
        assert "<td><p>a</p></td>" in renderer.convert(table)

    def test_rowspan(self, renderer):
        table = body_table([TableCell(text="a", rowspan=2)], [TableCell(text="b")])
        assert '<td rowspan="2"><p>a</p></td>' in renderer.convert(table)

    def test_declared_columns(self, renderer):
        table = body_table([TableCell(text="a")], columns=4)
        assert renderer.convert(table).count("<col/>") == 4

    def test_cell_background_from_document(self, renderer):
        doc = Document(attributes={"cellbgcolor": "#eee"}, blocks=[body_table([TableCell(text="a")])])
        assert '<td><p>a</p><?dbfo bgcolor="#eee"?></td>' in renderer.render_to_string(doc)


@pytest.mark.unit
class TestTableCellStyles:
    """Tests for cell content by section and style."""

    def _cell(self, renderer, cell):
        return renderer.convert(body_table([cell])).split("\n")[6]

    def test_default_paragraphs(self, renderer):
        assert self._cell(renderer, TableCell(text="one\n\ntwo")) == "<td><p>one</p><p>two</p></td>"

    def test_header_style(self, renderer):
        cell = TableCell(text="a\n\nb", style="header")
        assert self._cell(renderer, cell) == '<td><p><em style="strong">a</em></p><p><em style="strong">b</em></p></td>'

    def test_literal_style(self, renderer):
        assert self._cell(renderer, TableCell(text="x", style="literal")) == (
            "<td><listing><code>x</code></listing></td>"
        )

    def test_verse_style(self, renderer):
        assert self._cell(renderer, TableCell(text="v", style="verse")) == "<td><quote><p>v</p></quote></td>"

    def test_asciidoc_style_renders_blocks(self, renderer):
        cell = TableCell(style="asciidoc", blocks=[Paragraph(text="inner")])
        assert self._cell(renderer, cell) == "<td><p>inner</p></td>"

    def test_empty_cell(self, renderer):
        assert self._cell(renderer, TableCell(text="")) == "<td></td>"

    def test_head_cells_ignore_style(self, renderer):
        table = Table(
            rows=TableRows(head=[[TableCell(text="H\n\nI", style="header")]], body=[[TableCell(text="b")]])
        )
        assert "<thead>\n<tr>\n<td><p>H\n\nI</p></td>" in renderer.convert(table)

    def test_foot_cells_use_style(self, renderer):
        table = Table(
            rows=TableRows(body=[[TableCell(text="b")]], foot=[[TableCell(text="total", style="header")]])
        )
        assert '<td><p><em style="strong">total</em></p></td>' in renderer.convert(table)

    def test_visit_table_cell_renders_body_cell(self, renderer):
        assert renderer.convert(TableCell(text="x", style="literal")) == "<td><listing><code>x</code></listing></td>"
