#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/ast/nodes.py
"""AST node classes for structured document representation.

This module defines the closed set of node variants the Mallard renderer
understands. The tree is produced by an external parser; the renderer only
reads it. Every node supports the visitor pattern through ``accept``.

Text-bearing fields hold *inline content*: either a string that has already
been through the external substitution engine (so it is valid markup as-is),
or a list mixing such strings with inline nodes that the renderer converts in
place.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Section, Paragraph, Admonition, Example, Sidebar
    - Quote, Verse, OpenBlock
    - OrderedList, UnorderedList, ListItem, DescriptionList
    - Table, TableCell
    - Image, Listing, LiteralBlock, Stem
    - ThematicBreak, PageBreak
    - Audio, Video, CalloutList, TableOfContents, Preamble, FloatingTitle
      (accepted but produce no output)

Inline nodes:
    - InlineQuoted, InlineKbd, InlineMenu, InlineButton
    - InlineFootnote, InlineBreak, InlineIndexTerm, InlineImage
    - InlineAnchor, InlineCallout (accepted but produce no output)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from mallardoc.constants import CellStyle, FootnoteKind, TaskStatus


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    path : str or None, default = None
        Source file the node was parsed from
    line : int or None, default = None
        Line number in the source document
    column : int or None, default = None
        Column number in the source document

    """

    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass
class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    id : str or None, default = None
        Stable identifier (anchor) of the node
    title : InlineContent or None, default = None
        Block title, already substituted
    style : str or None, default = None
        Declared style (e.g. ``"source"``, ``"qanda"``, ``"abstract"``)
    role : str or None, default = None
        Semantic role
    attributes : dict, default = empty dict
        Remaining resolved attributes of the node
    source_location : SourceLocation or None, default = None
        Where this node came from in the source

    """

    id: Optional[str] = None
    title: Optional[InlineContent] = None
    style: Optional[str] = None
    role: Optional[str] = None
    attributes: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass

    def has_title(self) -> bool:
        """Return True when the node carries a non-empty title."""
        return bool(self.title)

    def has_attr(self, name: str) -> bool:
        """Return True when attribute ``name`` is present and not None."""
        return self.attributes.get(name) is not None

    def attr(self, name: str, default: Any = None) -> Any:
        """Look up attribute ``name``, returning ``default`` when it is absent."""
        value = self.attributes.get(name)
        return default if value is None else value

    def has_blocks(self) -> bool:
        """Return True when the node's content is built of nested blocks."""
        return bool(getattr(self, "blocks", None))


@dataclass
class InlineNode(Node):
    """Marker base class for inline nodes."""


Inline = Union[str, InlineNode]
InlineContent = Union[str, list[Inline]]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    blocks : list of Node, default = empty list
        Top-level blocks of the document body
    has_header : bool, default = False
        Whether the source declared a document header (title/author lines)
    notitle : bool, default = False
        Suppress the page title
    header_docinfo : str, default = ""
        Externally supplied markup appended to the info block
    footer_docinfo : str, default = ""
        Externally supplied markup appended before the page closes

    Notes
    -----
    Document-level attributes (``author``, ``revdate``, ``toc``, ``lang`` ...)
    live in ``attributes``; the header title lives in ``title``.

    """

    blocks: list[Node] = field(default_factory=list)
    has_header: bool = False
    notitle: bool = False
    header_docinfo: str = ""
    footer_docinfo: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    def doctitle(self, use_fallback: bool = True) -> Optional[InlineContent]:
        """Return the document title.

        Parameters
        ----------
        use_fallback : bool, default = True
            Fall back to the ``title`` attribute and then to the title of the
            first section when the header has no title.

        Returns
        -------
        InlineContent or None
            The title, or None when none can be found

        """
        if self.title:
            return self.title
        if not use_fallback:
            return None
        if self.has_attr("title"):
            return str(self.attr("title"))
        for block in self.blocks:
            if isinstance(block, Section) and block.title:
                return block.title
        return None


@dataclass
class DocumentTitle:
    """A document title split into main title and optional subtitle.

    Parameters
    ----------
    main : str
        Main title text
    subtitle : str or None, default = None
        Subtitle text

    """

    main: str
    subtitle: Optional[str] = None

    @classmethod
    def partition(cls, text: str, separator: str = ": ") -> DocumentTitle:
        """Split ``text`` on the last occurrence of ``separator``.

        Examples
        --------
        >>> DocumentTitle.partition("User Guide: Getting Started")
        DocumentTitle(main='User Guide', subtitle='Getting Started')
        >>> DocumentTitle.partition("Chapter: ")
        DocumentTitle(main='Chapter: ', subtitle=None)

        """
        main, found, subtitle = text.rpartition(separator)
        # A trailing separator is part of the title, not an empty subtitle
        if found and subtitle.strip():
            return cls(main=main, subtitle=subtitle)
        return cls(main=text)

    def has_subtitle(self) -> bool:
        """Return True when a subtitle is present."""
        return bool(self.subtitle)

    def __str__(self) -> str:
        return self.main


@dataclass
class Section(Node):
    """Section with a title and nested blocks."""

    level: int = 1
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this section."""
        return visitor.visit_section(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    text: InlineContent = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Admonition(Node):
    """Admonition block (NOTE, TIP, WARNING ...).

    Parameters
    ----------
    name : str, default = "note"
        Admonition kind, lowercase
    text : InlineContent, default = ""
        Content for paragraph-form admonitions
    blocks : list of Node, default = empty list
        Content for delimited admonitions

    """

    name: str = "note"
    text: InlineContent = ""
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this admonition."""
        return visitor.visit_admonition(self)


@dataclass
class Example(Node):
    """Example block."""

    text: InlineContent = ""
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this example."""
        return visitor.visit_example(self)


@dataclass
class Sidebar(Node):
    """Sidebar block."""

    text: InlineContent = ""
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this sidebar."""
        return visitor.visit_sidebar(self)


@dataclass
class Quote(Node):
    """Quotation block.

    The ``attribution`` and ``citetitle`` attributes name the quoted author
    and the cited work.
    """

    text: InlineContent = ""
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this quote."""
        return visitor.visit_quote(self)


@dataclass
class Verse(Quote):
    """Verse block; rendered like a quote with line-preserving content."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this verse."""
        return visitor.visit_verse(self)


@dataclass
class OpenBlock(Node):
    """Open block; its style (abstract, partintro) selects the rendering."""

    text: InlineContent = ""
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this open block."""
        return visitor.visit_open_block(self)


@dataclass
class ListItem(Node):
    """Item of an ordered, unordered or description list.

    Parameters
    ----------
    text : InlineContent, default = ""
        Lead text of the item
    blocks : list of Node, default = empty list
        Blocks attached to the item
    task_status : {"checked", "unchecked"} or None, default = None
        Checkbox state for checklist items

    """

    text: InlineContent = ""
    blocks: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)

    def has_text(self) -> bool:
        """Return True when the item has lead text."""
        return bool(self.text)


@dataclass
class OrderedList(Node):
    """Ordered list; ``style`` selects the numbering (loweralpha, upperroman ...)."""

    items: list[ListItem] = field(default_factory=list)
    start: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this ordered list."""
        return visitor.visit_ordered_list(self)


@dataclass
class UnorderedList(Node):
    """Unordered list, optionally a checklist."""

    items: list[ListItem] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this unordered list."""
        return visitor.visit_unordered_list(self)

    def is_checklist(self) -> bool:
        """Return True for checklists (``checklist`` style or option)."""
        return self.style == "checklist" or self.has_attr("checklist-option")


@dataclass
class DescriptionListEntry:
    """One entry of a description list: one or more terms and a description."""

    terms: list[ListItem] = field(default_factory=list)
    description: Optional[ListItem] = None


@dataclass
class DescriptionList(Node):
    """Description list; ``style`` selects labeled, qanda, glossary or horizontal."""

    items: list[DescriptionListEntry] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description list."""
        return visitor.visit_description_list(self)


@dataclass
class TableCell(Node):
    """Table cell.

    Parameters
    ----------
    text : InlineContent, default = ""
        Cell text; blank lines separate paragraphs
    style : CellStyle, default = "default"
        Content style of body and foot cells
    colspan : int or None, default = None
        Number of columns spanned
    rowspan : int or None, default = None
        Number of rows spanned
    blocks : list of Node, default = empty list
        Nested blocks of ``asciidoc`` style cells

    """

    text: InlineContent = ""
    style: CellStyle = "default"  # type: ignore[assignment]
    colspan: Optional[int] = None
    rowspan: Optional[int] = None
    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRows:
    """Rows of a table partitioned into head, body and foot sections."""

    head: list[list[TableCell]] = field(default_factory=list)
    body: list[list[TableCell]] = field(default_factory=list)
    foot: list[list[TableCell]] = field(default_factory=list)

    def section(self, name: str) -> list[list[TableCell]]:
        """Return the rows of section ``name`` ("head", "body" or "foot")."""
        return getattr(self, name)

    def all_rows(self) -> list[list[TableCell]]:
        """Return every row, head first and foot last."""
        return [*self.head, *self.body, *self.foot]


@dataclass
class Table(Node):
    """Table block.

    Parameters
    ----------
    rows : TableRows
        Rows partitioned by section
    columns : int or None, default = None
        Declared column count; computed from the widest row when None

    Notes
    -----
    The ``frame``, ``grid`` and ``width`` attributes control the table frame,
    rule visibility and width.

    """

    rows: TableRows = field(default_factory=TableRows)
    columns: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)

    def column_count(self) -> int:
        """Return the number of columns, accounting for colspans."""
        if self.columns is not None:
            return self.columns
        max_cols = 0
        for row in self.rows.all_rows():
            max_cols = max(max_cols, sum(cell.colspan or 1 for cell in row))
        return max_cols


@dataclass
class Image(Node):
    """Block image.

    Parameters
    ----------
    target : str
        Image path or URI
    alt : str, default = ""
        Alternative text
    width : str or None, default = None
        Display width
    height : str or None, default = None
        Display height

    """

    target: str = ""
    alt: str = ""
    width: Optional[str] = None
    height: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class Listing(Node):
    """Listing block; ``style == "source"`` marks source code."""

    source: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this listing."""
        return visitor.visit_listing(self)


@dataclass
class LiteralBlock(Node):
    """Literal (preformatted) block."""

    source: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this literal block."""
        return visitor.visit_literal(self)


@dataclass
class Stem(Node):
    """Math (STEM) block holding raw math source."""

    source: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this stem block."""
        return visitor.visit_stem(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class PageBreak(Node):
    """Page break."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this page break."""
        return visitor.visit_page_break(self)


@dataclass
class Audio(Node):
    """Audio block (no Mallard representation)."""

    target: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this audio block."""
        return visitor.visit_audio(self)


@dataclass
class Video(Node):
    """Video block (no Mallard representation)."""

    target: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this video block."""
        return visitor.visit_video(self)


@dataclass
class CalloutList(Node):
    """Callout list (no Mallard representation)."""

    items: list[ListItem] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this callout list."""
        return visitor.visit_callout_list(self)


@dataclass
class TableOfContents(Node):
    """Table-of-contents macro (no Mallard representation)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table-of-contents marker."""
        return visitor.visit_table_of_contents(self)


@dataclass
class Preamble(Node):
    """Preamble wrapper (no Mallard representation)."""

    blocks: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this preamble."""
        return visitor.visit_preamble(self)


@dataclass
class FloatingTitle(Node):
    """Discrete heading outside the section hierarchy (no Mallard representation)."""

    level: int = 1

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this floating title."""
        return visitor.visit_floating_title(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class InlineQuoted(InlineNode):
    """Quoted (formatted) text span.

    Parameters
    ----------
    text : InlineContent, default = ""
        Enclosed text
    quote_type : str, default = "unquoted"
        Formatting kind: emphasis, strong, monospaced, double, single, mark,
        latexmath, asciimath; any other value passes the text through

    """

    text: InlineContent = ""
    quote_type: str = "unquoted"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this quoted span."""
        return visitor.visit_inline_quoted(self)


@dataclass
class InlineKbd(InlineNode):
    """Keyboard shortcut; ``keys`` are in press order."""

    keys: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this keyboard shortcut."""
        return visitor.visit_inline_kbd(self)


@dataclass
class InlineMenu(InlineNode):
    """Menu selection path: a menu, optional submenus and an optional final item."""

    menu: str = ""
    submenus: list[str] = field(default_factory=list)
    menuitem: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this menu reference."""
        return visitor.visit_inline_menu(self)


@dataclass
class InlineButton(InlineNode):
    """UI button label."""

    text: InlineContent = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this button."""
        return visitor.visit_inline_button(self)


@dataclass
class InlineFootnote(InlineNode):
    """Footnote or internal cross-reference note.

    Parameters
    ----------
    text : InlineContent, default = ""
        Footnote text
    kind : {"footnote", "xref"}, default = "footnote"
        ``"xref"`` marks a reference to another footnote
    target : str or None, default = None
        Referenced footnote for ``"xref"`` notes

    """

    text: InlineContent = ""
    kind: FootnoteKind = "footnote"
    target: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote."""
        return visitor.visit_inline_footnote(self)


@dataclass
class InlineBreak(InlineNode):
    """Hard line break following ``text``."""

    text: InlineContent = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_inline_break(self)


@dataclass
class InlineIndexTerm(InlineNode):
    """Index term; only visible terms produce text."""

    text: InlineContent = ""
    visible: bool = True

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this index term."""
        return visitor.visit_inline_index_term(self)


@dataclass
class InlineImage(InlineNode):
    """Inline image; same properties as the block ``Image``."""

    target: str = ""
    alt: str = ""
    width: Optional[str] = None
    height: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline image."""
        return visitor.visit_inline_image(self)


@dataclass
class InlineAnchor(InlineNode):
    """Link, cross-reference or anchor (no Mallard representation)."""

    text: InlineContent = ""
    target: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this anchor."""
        return visitor.visit_inline_anchor(self)


@dataclass
class InlineCallout(InlineNode):
    """Callout number inside a listing (no Mallard representation)."""

    text: InlineContent = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this callout."""
        return visitor.visit_inline_callout(self)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Document,
    Section,
    Paragraph,
    Admonition,
    Example,
    Sidebar,
    Quote,
    Verse,
    OpenBlock,
    ListItem,
    OrderedList,
    UnorderedList,
    DescriptionList,
    Table,
    TableCell,
    Image,
    Listing,
    LiteralBlock,
    Stem,
    ThematicBreak,
    PageBreak,
    Audio,
    Video,
    CalloutList,
    TableOfContents,
    Preamble,
    FloatingTitle,
)

INLINE_NODE_TYPES: tuple[type[InlineNode], ...] = (
    InlineQuoted,
    InlineKbd,
    InlineMenu,
    InlineButton,
    InlineFootnote,
    InlineBreak,
    InlineIndexTerm,
    InlineImage,
    InlineAnchor,
    InlineCallout,
)
