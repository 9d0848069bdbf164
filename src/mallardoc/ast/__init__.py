#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/ast/__init__.py
"""Document AST consumed by the Mallard renderer.

The AST is the interface between the external document parser and this
library: the parser builds the tree, the renderer reads it.

Examples
--------
    >>> from mallardoc.ast import Document, Section, Paragraph
    >>> doc = Document(blocks=[Section(title="Intro", blocks=[Paragraph(text="Hi")])])

"""

from mallardoc.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    Admonition,
    Audio,
    CalloutList,
    DescriptionList,
    DescriptionListEntry,
    Document,
    DocumentTitle,
    Example,
    FloatingTitle,
    Image,
    Inline,
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
    InlineNode,
    InlineQuoted,
    Listing,
    ListItem,
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
    SourceLocation,
    Stem,
    Table,
    TableCell,
    TableOfContents,
    TableRows,
    ThematicBreak,
    UnorderedList,
    Verse,
    Video,
)
from mallardoc.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from mallardoc.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "Admonition",
    "Audio",
    "CalloutList",
    "DescriptionList",
    "DescriptionListEntry",
    "Document",
    "DocumentTitle",
    "Example",
    "FloatingTitle",
    "Image",
    "Inline",
    "InlineAnchor",
    "InlineBreak",
    "InlineButton",
    "InlineCallout",
    "InlineContent",
    "InlineFootnote",
    "InlineImage",
    "InlineIndexTerm",
    "InlineKbd",
    "InlineMenu",
    "InlineNode",
    "InlineQuoted",
    "Listing",
    "ListItem",
    "LiteralBlock",
    "Node",
    "OpenBlock",
    "OrderedList",
    "PageBreak",
    "Paragraph",
    "Preamble",
    "Quote",
    "Section",
    "Sidebar",
    "SourceLocation",
    "Stem",
    "Table",
    "TableCell",
    "TableOfContents",
    "TableRows",
    "ThematicBreak",
    "UnorderedList",
    "Verse",
    "Video",
    "NodeVisitor",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
]
