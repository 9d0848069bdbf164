#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/renderers/mallard.py
"""Mallard rendering from AST.

This module provides the MallardRenderer class which converts document AST
nodes to Mallard, the topic-oriented XML help format used by Yelp. Every
``visit_*`` method returns the markup fragment for its node; compound nodes
join the fragments of their children with newlines.

Nodes Mallard cannot represent (audio, video, callout lists, tables of
contents, preambles, floating titles, inline anchors and callouts) render as
the empty string.

"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Union

from mallardoc.ast.nodes import (
    Admonition,
    Audio,
    CalloutList,
    DescriptionList,
    Document,
    DocumentTitle,
    Example,
    FloatingTitle,
    Image,
    InlineAnchor,
    InlineBreak,
    InlineButton,
    InlineCallout,
    InlineContent,
    InlineFootnote,
    InlineImage,
    InlineIndexTerm,
    InlineKbd,
    InlineMenu,
    InlineQuoted,
    ListItem,
    Listing,
    LiteralBlock,
    Node,
    OpenBlock,
    OrderedList,
    PageBreak,
    Paragraph,
    Preamble,
    Quote,
    Section,
    Sidebar,
    Stem,
    Table,
    TableCell,
    TableOfContents,
    ThematicBreak,
    UnorderedList,
    Verse,
    Video,
)
from mallardoc.ast.visitors import NodeVisitor
from mallardoc.constants import (
    CELL_BGCOLOR_PI_NAME,
    CHECKED_MARKER,
    DEFAULT_TABLE_FRAME,
    DEFAULT_UNTITLED_LABEL,
    EOL,
    LINE_BREAK_PI,
    MATH_QUOTE_TYPES,
    PAGE_BREAK_PI,
    TABLE_NO_BODY_CODE,
    TABLE_NO_BODY_MESSAGE,
    THEMATIC_BREAK_PI,
    TOC_PI_NAME,
    UNCHECKED_MARKER,
    XML_DECLARATION,
    XREF_ARROW,
    TableSection,
)
from mallardoc.diagnostics import DiagnosticCollector, RenderResult
from mallardoc.options.mallard import MallardRendererOptions
from mallardoc.renderers.base import BaseRenderer
from mallardoc.renderers.mallard_attrs import (
    cdata,
    colspan_attribute,
    escape_attribute_value,
    height_attribute,
    id_attribute,
    lang_attribute,
    processing_instruction,
    rowspan_attribute,
    start_attribute,
    width_attribute,
    xml_attr,
)
from mallardoc.renderers.mallard_info import document_info_element, document_ns_attributes
from mallardoc.renderers.mallard_tables import (
    ADMONITION_STYLES,
    DLIST_TAGS,
    OLIST_STYLES,
    QUOTE_TAGS,
    TABLE_SECTIONS,
    lookup,
)

logger = logging.getLogger(__name__)

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")
_URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


class MallardRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to Mallard XML.

    This class implements the visitor pattern to traverse an AST and
    generate Mallard markup. A complete ``<page>`` is produced for a
    document unless ``options.standalone`` is False, in which case only the
    body content is returned.

    Parameters
    ----------
    options : MallardRendererOptions or None, default = None
        Mallard rendering options

    Examples
    --------
    Basic usage:

        >>> from mallardoc.ast import Document, Paragraph
        >>> from mallardoc.options import MallardRendererOptions
        >>> from mallardoc.renderers.mallard import MallardRenderer
        >>> doc = Document(blocks=[Paragraph(text="Hello")])
        >>> renderer = MallardRenderer(MallardRendererOptions(standalone=False))
        >>> renderer.render_to_string(doc)
        '<p>Hello</p>'

    Notes
    -----
    The instance a caller holds is never mutated by rendering. Each
    ``render_to_result`` call visits the tree with a fresh worker instance
    that carries the owning document and that call's diagnostics, so one
    renderer can be shared between threads.

    """

    def __init__(self, options: MallardRendererOptions | None = None):
        """Initialize the Mallard renderer with options."""
        BaseRenderer._validate_options_type(options, MallardRendererOptions, "mallard")
        options = options or MallardRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MallardRendererOptions = options
        self._document: Optional[Document] = None
        self._diagnostics: DiagnosticCollector = DiagnosticCollector()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a Mallard string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Mallard markup

        """
        return self.render_to_result(document).content

    def render_to_result(self, node: Node, document: Optional[Document] = None) -> RenderResult:
        """Render a node and collect the diagnostics it produces.

        Parameters
        ----------
        node : Node
            Node to render; usually a Document
        document : Document, optional
            Owning document, consulted for document-level attributes such as
            ``imagesdir`` and ``cellbgcolor`` when ``node`` is not itself the
            document

        Returns
        -------
        RenderResult
            Markup and diagnostics

        """
        worker = self._worker(node if isinstance(node, Document) else document)
        content = node.accept(worker)
        return RenderResult(content=content, diagnostics=worker._diagnostics.diagnostics)

    def convert(self, node: Node, document: Optional[Document] = None) -> str:
        """Render any single node to its Mallard fragment."""
        return self.render_to_result(node, document).content

    def _worker(self, document: Optional[Document]) -> MallardRenderer:
        worker = type(self)(self.options)
        worker._document = document
        return worker

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _inline(self, content: Optional[InlineContent]) -> str:
        """Render inline content: strings pass through, inline nodes are visited."""
        if not content:
            return ""
        if isinstance(content, str):
            return content
        return "".join(part if isinstance(part, str) else part.accept(self) for part in content)

    def _blocks(self, blocks: Iterable[Node]) -> str:
        # Skipped nodes render as "" and must not leave blank lines behind
        return EOL.join(fragment for fragment in (block.accept(self) for block in blocks) if fragment)

    def _resolve_content(self, node: Node) -> str:
        """Render nested blocks when present, else the node text as a paragraph."""
        if node.has_blocks():
            return self._blocks(node.blocks)  # type: ignore[attr-defined]
        return f"<p>{self._inline(getattr(node, 'text', ''))}</p>"

    def _title_lines(self, node: Node) -> list[str]:
        if not node.has_title():
            return []
        return [f"<title>{self._inline(node.title)}</title>"]

    def _document_attr(self, name: str) -> Optional[str]:
        if self._document is None:
            return None
        return self._document.attr(name)

    def _image_uri(self, target: str) -> str:
        """Resolve an image target against the document ``imagesdir``."""
        imagesdir = self._document_attr("imagesdir")
        if not imagesdir or not target or _URI_SCHEME.match(target) or target.startswith("/"):
            return target
        return f"{str(imagesdir).rstrip('/')}/{target}"

    def _page_title(self, node: Document) -> Optional[DocumentTitle]:
        if node.notitle:
            return None
        raw = node.doctitle(use_fallback=True)
        text = self._inline(raw) if raw else str(node.attr("untitled-label", DEFAULT_UNTITLED_LABEL))
        return DocumentTitle.partition(text)

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render a Document node.

        Parameters
        ----------
        node : Document
            Document to render

        Returns
        -------
        str
            A full ``<page>`` when standalone, otherwise the body content

        """
        if not self.options.standalone:
            return self._blocks(node.blocks)

        lines: list[str] = []
        if self.options.xml_declaration:
            lines.append(XML_DECLARATION)
        if node.has_attr("toc"):
            lines.append(processing_instruction(TOC_PI_NAME, maxdepth=node.attr("toclevels")))

        lang = "" if node.has_attr("nolang") else lang_attribute(node.attr("lang", self.options.default_lang))
        lines.append(f"<page{id_attribute(node, native=True)}{document_ns_attributes()}{lang}>")
        lines.append(document_info_element(node, self._page_title(node)))

        body = self._blocks(node.blocks)
        if body:
            lines.append(body)
        if node.footer_docinfo:
            lines.append(node.footer_docinfo)
        lines.append("</page>")
        return EOL.join(lines)

    def visit_section(self, node: Section) -> str:
        """Render a Section node as a Mallard ``<section>``."""
        lines = [f"<section{id_attribute(node, native=True)}>", f"<title>{self._inline(node.title)}</title>"]
        body = self._blocks(node.blocks)
        if body:
            lines.append(body)
        lines.append("</section>")
        return EOL.join(lines)

    def visit_preamble(self, node: Preamble) -> str:
        logger.debug("Skipping preamble: not representable in Mallard")
        return ""

    def visit_floating_title(self, node: FloatingTitle) -> str:
        logger.debug("Skipping floating title: not representable in Mallard")
        return ""

    def visit_table_of_contents(self, node: TableOfContents) -> str:
        logger.debug("Skipping table of contents block; use the toc attribute instead")
        return ""

    # ------------------------------------------------------------------
    # Paragraph-like blocks
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node.

        A titled paragraph becomes a ``<listing>`` so the title has a home.
        """
        text = self._inline(node.text)
        if node.has_title():
            return EOL.join(
                [f"<listing{id_attribute(node)}>", *self._title_lines(node), f"<p>{text}</p>", "</listing>"]
            )
        return f"<p{id_attribute(node)}>{text}</p>"

    def visit_admonition(self, node: Admonition) -> str:
        """Render an Admonition node as a styled ``<note>``."""
        name = (node.name or "note").lower()
        style = lookup(ADMONITION_STYLES, name) or name
        return EOL.join(
            [
                f"<note{xml_attr('style', style)}{id_attribute(node)}>",
                *self._title_lines(node),
                self._resolve_content(node),
                "</note>",
            ]
        )

    def visit_example(self, node: Example) -> str:
        """Render an Example node."""
        return EOL.join([f"<example{id_attribute(node)}>", self._resolve_content(node), "</example>"])

    def visit_sidebar(self, node: Sidebar) -> str:
        """Render a Sidebar node as a sidebar-styled ``<note>``."""
        return EOL.join(
            [
                f'<note style="sidebar"{id_attribute(node)}>',
                *self._title_lines(node),
                self._resolve_content(node),
                "</note>",
            ]
        )

    def _quote(self, node: Node) -> str:
        lines = [f"<quote{id_attribute(node)}>", *self._title_lines(node)]
        if node.has_attr("attribution"):
            lines.append(f"<cite>{node.attr('attribution')}</cite>")
        lines.append(self._resolve_content(node))
        if node.has_attr("citetitle"):
            lines.append(f"<p><em>{node.attr('citetitle')}</em></p>")
        lines.append("</quote>")
        return EOL.join(lines)

    def visit_quote(self, node: Quote) -> str:
        """Render a Quote node with its attribution and cited title."""
        return self._quote(node)

    def visit_verse(self, node: Verse) -> str:
        """Render a Verse node; verses share the quote layout."""
        return self._quote(node)

    def visit_open_block(self, node: OpenBlock) -> str:
        """Render an OpenBlock node according to its style.

        ``abstract`` blocks are rendered as quotes, ``partintro`` blocks as
        titled listings; any other open block contributes its content as is.
        """
        if node.style == "abstract":
            return self._quote(node)
        if node.style == "partintro":
            return EOL.join(
                [f"<listing{id_attribute(node)}>", *self._title_lines(node), self._resolve_content(node), "</listing>"]
            )
        if node.has_blocks():
            return self._blocks(node.blocks)
        return self._inline(node.text)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _list_item_lines(self, item: ListItem, marker: str = "") -> list[str]:
        lines = ["<item>", f"<p>{marker}{self._inline(item.text)}</p>"]
        if item.has_blocks():
            nested = self._blocks(item.blocks)
            if nested:
                lines.append(nested)
        lines.append("</item>")
        return lines

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node with its numbering style and start."""
        list_type = lookup(OLIST_STYLES, node.style)
        lines = [f"<list{id_attribute(node)}{xml_attr('type', list_type)}{start_attribute(node.start)}>"]
        lines.extend(self._title_lines(node))
        for item in node.items:
            lines.extend(self._list_item_lines(item))
        lines.append("</list>")
        return EOL.join(lines)

    def _checklist_marker(self, node: UnorderedList, item: ListItem) -> str:
        if not (self.options.checklist_markers and node.is_checklist()) or item.task_status is None:
            return ""
        return CHECKED_MARKER if item.task_status == "checked" else UNCHECKED_MARKER

    def visit_unordered_list(self, node: UnorderedList) -> str:
        """Render an UnorderedList node, adding task markers to checklists."""
        lines = [f"<list{id_attribute(node)}>"]
        lines.extend(self._title_lines(node))
        for item in node.items:
            lines.extend(self._list_item_lines(item, self._checklist_marker(node, item)))
        lines.append("</list>")
        return EOL.join(lines)

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem node outside of its list."""
        return EOL.join(self._list_item_lines(node))

    def visit_description_list(self, node: DescriptionList) -> str:
        """Render a DescriptionList node.

        The element names come from ``DLIST_TAGS`` keyed by the list style;
        wrapper elements missing from the entry are not emitted.

        Parameters
        ----------
        node : DescriptionList
            Description list to render

        Returns
        -------
        str
            Mallard markup for the list

        """
        tags = lookup(DLIST_TAGS, node.style)
        lines: list[str] = []
        if tags.list:
            lines.append(f"<{tags.list}{id_attribute(node)}>")
            lines.extend(self._title_lines(node))

        for entry in node.items:
            if tags.entry:
                lines.append(f"<{tags.entry}>")
            if tags.label:
                lines.append(f"<{tags.label}>")
            for term in entry.terms:
                lines.append(f"<{tags.term}>{self._inline(term.text)}</{tags.term}>")
            if tags.label:
                lines.append(f"</{tags.label}>")

            description = entry.description
            if description is not None:
                if description.has_text():
                    lines.append(f"<p>{self._inline(description.text)}</p>")
                if description.has_blocks():
                    nested = self._blocks(description.blocks)
                    if nested:
                        lines.append(nested)
            if tags.entry:
                lines.append(f"</{tags.entry}>")

        if tags.list:
            lines.append(f"</{tags.list}>")
        return EOL.join(lines)

    def visit_callout_list(self, node: CalloutList) -> str:
        logger.debug("Skipping callout list: not representable in Mallard")
        return ""

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table) -> str:
        """Render a Table node.

        Sections are emitted head, foot, body, each only when it has rows.
        A table without body rows still renders, and a ``table-no-body``
        warning is recorded.

        Parameters
        ----------
        node : Table
            Table to render

        Returns
        -------
        str
            Mallard markup for the table

        """
        frame = node.attr("frame", DEFAULT_TABLE_FRAME)
        grid = node.attr("grid")
        rules = "all" if grid is not None and grid != "none" else "none"

        lines = [f'<table{id_attribute(node)} frame="{escape_attribute_value(frame)}" rules="{rules}">']
        lines.extend(self._title_lines(node))

        if node.has_attr("width"):
            width = node.attr("width")
            lines.extend(processing_instruction(name, table_width=width) for name in self.options.table_pi_names)

        lines.append("<colgroup>")
        lines.extend("<col/>" for _ in range(node.column_count()))
        lines.append("</colgroup>")

        for section in TABLE_SECTIONS:
            rows = node.rows.section(section)
            if not rows:
                continue
            lines.append(f"<t{section}>")
            for row in rows:
                lines.append("<tr>")
                lines.extend(self._table_cell(cell, section) for cell in row)
                lines.append("</tr>")
            lines.append(f"</t{section}>")

        lines.append("</table>")

        if not node.rows.body:
            self._diagnostics.warn(TABLE_NO_BODY_CODE, TABLE_NO_BODY_MESSAGE, node)

        return EOL.join(lines)

    def _cell_paragraphs(self, cell: TableCell) -> list[str]:
        text = self._inline(cell.text)
        return [para for para in _PARAGRAPH_BREAK.split(text) if para.strip()]

    def _cell_content(self, cell: TableCell, section: TableSection) -> str:
        if section == "head":
            return f"<p>{self._inline(cell.text)}</p>"

        style = cell.style or "default"
        if style == "asciidoc":
            return self._resolve_content(cell)
        if style == "verse":
            return f"<quote><p>{self._inline(cell.text)}</p></quote>"
        if style == "literal":
            return f"<listing><code>{self._inline(cell.text)}</code></listing>"
        if style == "header":
            return "".join(f'<p><em style="strong">{para}</em></p>' for para in self._cell_paragraphs(cell))
        return "".join(f"<p>{para}</p>" for para in self._cell_paragraphs(cell))

    def _table_cell(self, cell: TableCell, section: TableSection) -> str:
        bgcolor = self._document_attr("cellbgcolor")
        background = processing_instruction(CELL_BGCOLOR_PI_NAME, bgcolor=bgcolor) if bgcolor else ""
        return (
            f"<td{colspan_attribute(cell.colspan)}{rowspan_attribute(cell.rowspan)}>"
            f"{self._cell_content(cell, section)}{background}</td>"
        )

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a TableCell node as a body cell."""
        return self._table_cell(node, "body")

    # ------------------------------------------------------------------
    # Media and literal content
    # ------------------------------------------------------------------

    def _media(self, node: Union[Image, InlineImage], block: bool) -> str:
        src = escape_attribute_value(self._image_uri(node.target))
        alt = f"<p>{node.alt}</p>" if block else node.alt
        return EOL.join(
            [
                f'<media type="image" src="{src}"{width_attribute(node.width)}{height_attribute(node.height)}>',
                alt,
                "</media>",
            ]
        )

    def visit_image(self, node: Image) -> str:
        """Render a block Image node, wrapped in a ``<figure>`` when titled."""
        media = self._media(node, block=True)
        if not node.has_title():
            return media
        return EOL.join([f"<figure{id_attribute(node)}>", *self._title_lines(node), media, "</figure>"])

    def visit_inline_image(self, node: InlineImage) -> str:
        return self._media(node, block=False)

    def _code_listing(self, node: Node, code: str) -> str:
        return EOL.join(
            [f"<listing{id_attribute(node)}>", *self._title_lines(node), f"<code>{code}</code>", "</listing>"]
        )

    def visit_listing(self, node: Listing) -> str:
        """Render a Listing node.

        Source listings and titled listings become ``<listing>`` with a
        ``<code>`` body; anything else is a ``<screen>``.
        """
        if node.style == "source" or node.has_title():
            return self._code_listing(node, node.source)
        return f"<screen{id_attribute(node)}>{node.source}</screen>"

    def visit_literal(self, node: LiteralBlock) -> str:
        """Render a LiteralBlock node."""
        return self._code_listing(node, node.source)

    def visit_stem(self, node: Stem) -> str:
        """Render a Stem node; the math source is kept verbatim in CDATA."""
        return self._code_listing(node, cdata(node.source))

    def visit_thematic_break(self, node: ThematicBreak) -> str:
        return f"<p>{THEMATIC_BREAK_PI}</p>"

    def visit_page_break(self, node: PageBreak) -> str:
        return f"<p>{PAGE_BREAK_PI}</p>"

    def visit_audio(self, node: Audio) -> str:
        logger.debug("Skipping audio block '%s': not representable in Mallard", node.target)
        return ""

    def visit_video(self, node: Video) -> str:
        logger.debug("Skipping video block '%s': not representable in Mallard", node.target)
        return ""

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_inline_quoted(self, node: InlineQuoted) -> str:
        """Render formatted inline text.

        Math is wrapped in CDATA. Other quote types are wrapped in the tags
        from ``QUOTE_TAGS``; a role adds a styled ``<phrase>`` inside them and
        an id adds a ``<span>`` anchor before them.
        """
        text = self._inline(node.text)
        if node.quote_type in MATH_QUOTE_TYPES:
            return cdata(text)

        open_tag, close_tag = lookup(QUOTE_TAGS, node.quote_type)
        if node.role:
            quoted = f"{open_tag}<phrase{xml_attr('style', node.role)}>{text}</phrase>{close_tag}"
        else:
            quoted = f"{open_tag}{text}{close_tag}"

        if node.id:
            return f"<span{id_attribute(node)}/>{quoted}"
        return quoted

    def visit_inline_kbd(self, node: InlineKbd) -> str:
        """Render a keyboard shortcut as a key or a key sequence."""
        if len(node.keys) == 1:
            return f"<key>{node.keys[0]}</key>"
        return "<keyseq>" + "".join(f"<keycap>{key}</keycap>" for key in node.keys) + "</keyseq>"

    def visit_inline_menu(self, node: InlineMenu) -> str:
        """Render a menu selection as a GUI sequence."""
        segments = [f'<gui style="menu">{node.menu}</gui>']
        segments.extend(f'<gui style="menu">{submenu}</gui>' for submenu in node.submenus)
        if node.menuitem:
            segments.append(f'<gui style="menuitem">{node.menuitem}</gui>')
        if len(segments) == 1:
            return segments[0]
        return f"<guiseq>{' '.join(segments)}</guiseq>"

    def visit_inline_button(self, node: InlineButton) -> str:
        return f'<gui style="button">{self._inline(node.text)}</gui>'

    def visit_inline_footnote(self, node: InlineFootnote) -> str:
        """Render a footnote inline, in brackets."""
        text = self._inline(node.text)
        if node.kind == "xref":
            return f'[{XREF_ARROW} <em style="strong">{node.target or ""}</em> <em>{text}</em>]'
        return f"[<em>{text}</em>]"

    def visit_inline_break(self, node: InlineBreak) -> str:
        return f"{self._inline(node.text)}{LINE_BREAK_PI}"

    def visit_inline_index_term(self, node: InlineIndexTerm) -> str:
        return self._inline(node.text) if node.visible else ""

    def visit_inline_anchor(self, node: InlineAnchor) -> str:
        return ""

    def visit_inline_callout(self, node: InlineCallout) -> str:
        return ""
