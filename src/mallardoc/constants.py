#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mallardoc.

This module centralizes the fixed vocabulary of the Mallard page dialect and
the default configuration values used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Mallard Vocabulary - namespaces, processing instruction names, glyphs
3. Renderer Defaults - default option values
4. CLI - configuration file names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableSection = Literal["head", "foot", "body"]
CellStyle = Literal["default", "asciidoc", "verse", "literal", "header", "emphasis", "strong", "monospaced"]
FootnoteKind = Literal["footnote", "xref"]
TaskStatus = Literal["checked", "unchecked"]
IndexTermKind = Literal["visible", "concealed"]
DiagnosticSeverity = Literal["warning", "error"]

# =============================================================================
# Mallard Vocabulary
# =============================================================================

EOL = "\n"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
MALLARD_NAMESPACE = "http://projectmallard.org/1.0/"
ITS_NAMESPACE = "http://www.w3.org/2005/11/its"
LANG_ATTRIBUTE_NAME = "xml:lang"

# Processing instructions that stand in for constructs Mallard cannot express
TOC_PI_NAME = "asciidoc-toc"
THEMATIC_BREAK_PI = "<?asciidoc-hr?>"
PAGE_BREAK_PI = "<?asciidoc-pagebreak?>"
LINE_BREAK_PI = "<?asciidoc-br?>"
CELL_BGCOLOR_PI_NAME = "dbfo"

CHECKED_MARKER = "&#10003; "
UNCHECKED_MARKER = "&#10007; "
XREF_ARROW = "&#x2192;"

MATH_QUOTE_TYPES = frozenset({"math", "latexmath", "asciimath"})

TABLE_NO_BODY_CODE = "table-no-body"
TABLE_NO_BODY_MESSAGE = "tables must have at least one body row"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_LANG = "en"
DEFAULT_STANDALONE = True
DEFAULT_XML_DECLARATION = True
DEFAULT_CHECKLIST_MARKERS = True
DEFAULT_TABLE_PI_NAMES: tuple[str, ...] = ("dbhtml", "dbfo", "dblatex")
DEFAULT_TABLE_FRAME = "all"
DEFAULT_AUTHOR_COUNT = 1
DEFAULT_UNTITLED_LABEL = "Untitled"

# =============================================================================
# CLI
# =============================================================================

CONFIG_FILENAMES = [".mallardoc.toml", ".mallardoc.yaml", ".mallardoc.yml", ".mallardoc.json"]
PYPROJECT_TOOL_SECTION = "mallardoc"
DEFAULT_OUTPUT_EXTENSION = ".page"
