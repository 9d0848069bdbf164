#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_mallard_inline.py
"""Unit tests for MallardRenderer inline rendering."""

import pytest

from mallardoc.ast import (
    InlineAnchor,
    InlineBreak,
    InlineButton,
    InlineCallout,
    InlineFootnote,
    InlineImage,
    InlineIndexTerm,
    InlineKbd,
    InlineMenu,
    InlineQuoted,
    Paragraph,
)


@pytest.mark.unit
class TestQuotedText:
    """Tests for formatted inline text."""

    def test_strong_with_role(self, renderer):
        node = InlineQuoted(text="Danger", quote_type="strong", role="warning")
        assert renderer.convert(node) == '<em style="strong"><phrase style="warning">Danger</phrase></em>'

    @pytest.mark.parametrize(
        "quote_type,expected",
        [
            ("emphasis", "<em>x</em>"),
            ("strong", '<em style="strong">x</em>'),
            ("monospaced", "<code>x</code>"),
            ("double", "&#8220;x&#8221;"),
            ("single", "&#8216;x&#8217;"),
            ("mark", '<em style="marked">x</em>'),
            ("unquoted", "x"),
            ("superscript", "x"),
        ],
    )
    def test_quote_types(self, renderer, quote_type, expected):
        assert renderer.convert(InlineQuoted(text="x", quote_type=quote_type)) == expected

    @pytest.mark.parametrize("quote_type", ["math", "latexmath", "asciimath"])
    def test_math_is_cdata(self, renderer, quote_type):
        assert renderer.convert(InlineQuoted(text="a<b", quote_type=quote_type)) == "<![CDATA[a<b]]>"

    def test_id_adds_anchor_span(self, renderer):
        node = InlineQuoted(id="a1", text="x", quote_type="emphasis")
        assert renderer.convert(node) == '<span xml:id="a1"/><em>x</em>'

    def test_role_on_unquoted_text(self, renderer):
        node = InlineQuoted(text="x", role="big")
        assert renderer.convert(node) == '<phrase style="big">x</phrase>'

    def test_nested_formatting(self, renderer):
        inner = InlineQuoted(text="b", quote_type="emphasis")
        node = InlineQuoted(text=["a ", inner], quote_type="strong")
        assert renderer.convert(node) == '<em style="strong">a <em>b</em></em>'

    def test_inline_in_paragraph(self, renderer):
        paragraph = Paragraph(text=["Press ", InlineKbd(keys=["Enter"]), " now"])
        assert renderer.convert(paragraph) == "<p>Press <key>Enter</key> now</p>"


@pytest.mark.unit
class TestGuiElements:
    """Tests for keyboard, menu and button macros."""

    def test_single_key(self, renderer):
        assert renderer.convert(InlineKbd(keys=["F11"])) == "<key>F11</key>"

    def test_key_sequence(self, renderer):
        assert renderer.convert(InlineKbd(keys=["Ctrl", "Alt", "T"])) == (
            "<keyseq><keycap>Ctrl</keycap><keycap>Alt</keycap><keycap>T</keycap></keyseq>"
        )

    def test_menu_with_submenus(self, renderer):
        node = InlineMenu(menu="File", submenus=["Export"], menuitem="PDF")
        assert renderer.convert(node) == (
            '<guiseq><gui style="menu">File</gui> <gui style="menu">Export</gui> '
            '<gui style="menuitem">PDF</gui></guiseq>'
        )

    def test_menu_with_item(self, renderer):
        node = InlineMenu(menu="File", menuitem="Save")
        assert renderer.convert(node) == '<guiseq><gui style="menu">File</gui> <gui style="menuitem">Save</gui></guiseq>'

    def test_bare_menu(self, renderer):
        assert renderer.convert(InlineMenu(menu="File")) == '<gui style="menu">File</gui>'

    def test_button(self, renderer):
        assert renderer.convert(InlineButton(text="OK")) == '<gui style="button">OK</gui>'


@pytest.mark.unit
class TestOtherInlines:
    """Tests for footnotes, breaks, index terms, images and skipped inlines."""

    def test_footnote(self, renderer):
        assert renderer.convert(InlineFootnote(text="See notes")) == "[<em>See notes</em>]"

    def test_xref_footnote(self, renderer):
        node = InlineFootnote(text="See notes", kind="xref", target="intro")
        assert renderer.convert(node) == '[&#x2192; <em style="strong">intro</em> <em>See notes</em>]'

    def test_line_break(self, renderer):
        assert renderer.convert(InlineBreak(text="line")) == "line<?asciidoc-br?>"

    def test_visible_index_term(self, renderer):
        assert renderer.convert(InlineIndexTerm(text="term")) == "term"

    def test_concealed_index_term(self, renderer):
        assert renderer.convert(InlineIndexTerm(text="term", visible=False)) == ""

    def test_inline_image(self, renderer):
        assert renderer.convert(InlineImage(target="i.png", alt="icon")) == (
            '<media type="image" src="i.png">\nicon\n</media>'
        )

    def test_anchor_and_callout_are_skipped(self, renderer):
        assert renderer.convert(InlineAnchor(text="link", target="http://example.com")) == ""
        assert renderer.convert(InlineCallout(text="1")) == ""
