#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/ast/visitors.py
"""Visitor pattern base class for AST traversal.

Renderers implement one ``visit_*`` method per node variant. Because the
variant set is closed, every method is abstract: a visitor that forgets a
variant cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mallardoc.ast.nodes import (
    Admonition,
    Audio,
    CalloutList,
    DescriptionList,
    Document,
    Example,
    FloatingTitle,
    Image,
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
    Listing,
    ListItem,
    LiteralBlock,
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Each node's ``accept`` calls the matching ``visit_*`` method, so
    ``node.accept(visitor)`` dispatches on the node variant without any
    ``isinstance`` chains.

    Examples
    --------
    A visitor that collects section titles:

        >>> class TitleCollector(NodeVisitor):
        ...     def visit_section(self, node):
        ...         return [node.title] + [t for b in node.blocks for t in (b.accept(self) or [])]
        ...     # ... remaining visit_* methods ...

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_section(self, node: Section) -> Any:
        """Visit a Section node.

        Parameters
        ----------
        node : Section
            The section node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_admonition(self, node: Admonition) -> Any:
        """Visit a Admonition node."""
        pass

    @abstractmethod
    def visit_example(self, node: Example) -> Any:
        """Visit a Example node."""
        pass

    @abstractmethod
    def visit_sidebar(self, node: Sidebar) -> Any:
        """Visit a Sidebar node."""
        pass

    @abstractmethod
    def visit_quote(self, node: Quote) -> Any:
        """Visit a Quote node."""
        pass

    @abstractmethod
    def visit_verse(self, node: Verse) -> Any:
        """Visit a Verse node."""
        pass

    @abstractmethod
    def visit_open_block(self, node: OpenBlock) -> Any:
        """Visit a OpenBlock node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit a OrderedList node."""
        pass

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit a UnorderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_description_list(self, node: DescriptionList) -> Any:
        """Visit a DescriptionList node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node."""
        pass

    @abstractmethod
    def visit_listing(self, node: Listing) -> Any:
        """Visit a Listing node."""
        pass

    @abstractmethod
    def visit_literal(self, node: LiteralBlock) -> Any:
        """Visit a LiteralBlock node."""
        pass

    @abstractmethod
    def visit_stem(self, node: Stem) -> Any:
        """Visit a Stem node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_page_break(self, node: PageBreak) -> Any:
        """Visit a PageBreak node."""
        pass

    @abstractmethod
    def visit_audio(self, node: Audio) -> Any:
        """Visit a Audio node."""
        pass

    @abstractmethod
    def visit_video(self, node: Video) -> Any:
        """Visit a Video node."""
        pass

    @abstractmethod
    def visit_callout_list(self, node: CalloutList) -> Any:
        """Visit a CalloutList node."""
        pass

    @abstractmethod
    def visit_table_of_contents(self, node: TableOfContents) -> Any:
        """Visit a TableOfContents node."""
        pass

    @abstractmethod
    def visit_preamble(self, node: Preamble) -> Any:
        """Visit a Preamble node."""
        pass

    @abstractmethod
    def visit_floating_title(self, node: FloatingTitle) -> Any:
        """Visit a FloatingTitle node."""
        pass

    @abstractmethod
    def visit_inline_quoted(self, node: InlineQuoted) -> Any:
        """Visit a InlineQuoted node."""
        pass

    @abstractmethod
    def visit_inline_kbd(self, node: InlineKbd) -> Any:
        """Visit a InlineKbd node."""
        pass

    @abstractmethod
    def visit_inline_menu(self, node: InlineMenu) -> Any:
        """Visit a InlineMenu node."""
        pass

    @abstractmethod
    def visit_inline_button(self, node: InlineButton) -> Any:
        """Visit a InlineButton node."""
        pass

    @abstractmethod
    def visit_inline_footnote(self, node: InlineFootnote) -> Any:
        """Visit a InlineFootnote node."""
        pass

    @abstractmethod
    def visit_inline_break(self, node: InlineBreak) -> Any:
        """Visit a InlineBreak node."""
        pass

    @abstractmethod
    def visit_inline_index_term(self, node: InlineIndexTerm) -> Any:
        """Visit a InlineIndexTerm node."""
        pass

    @abstractmethod
    def visit_inline_image(self, node: InlineImage) -> Any:
        """Visit a InlineImage node."""
        pass

    @abstractmethod
    def visit_inline_anchor(self, node: InlineAnchor) -> Any:
        """Visit a InlineAnchor node."""
        pass

    @abstractmethod
    def visit_inline_callout(self, node: InlineCallout) -> Any:
        """Visit a InlineCallout node."""
        pass
