#  Copyright (c) 2025 Tom Villani, Ph.D.

# mallardoc/options/mallard.py
"""Configuration options for Mallard rendering.

This module defines the options class for rendering the document AST as a
Mallard page.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mallardoc.constants import (
    DEFAULT_CHECKLIST_MARKERS,
    DEFAULT_LANG,
    DEFAULT_TABLE_PI_NAMES,
    DEFAULT_XML_DECLARATION,
)
from mallardoc.options.base import BaseRendererOptions

_PI_TARGET_PATTERN = re.compile(r"^[A-Za-z_][\w.-]*$")


@dataclass(frozen=True)
class MallardRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Mallard rendering.

    Parameters
    ----------
    xml_declaration : bool, default True
        Begin standalone output with an XML declaration.
    default_lang : str, default "en"
        Page language used when the document has no ``lang`` attribute.
        Setting the ``nolang`` document attribute suppresses the language
        attribute entirely.
    checklist_markers : bool, default True
        Prefix checklist items with a check or cross glyph.
    table_pi_names : tuple of str, default ("dbhtml", "dbfo", "dblatex")
        Processing instruction targets that receive a ``table-width`` hint
        when a table declares a width.

    """

    xml_declaration: bool = field(
        default=DEFAULT_XML_DECLARATION,
        metadata={
            "help": "Begin standalone output with an XML declaration",
            "cli_name": "no-xml-declaration",
            "importance": "advanced",
        },
    )
    default_lang: str = field(
        default=DEFAULT_LANG,
        metadata={"help": "Page language when the document does not set one", "cli_name": "lang", "importance": "core"},
    )
    checklist_markers: bool = field(
        default=DEFAULT_CHECKLIST_MARKERS,
        metadata={
            "help": "Prefix checklist items with a check or cross glyph",
            "cli_name": "no-checklist-markers",
            "importance": "core",
        },
    )
    table_pi_names: tuple[str, ...] = field(
        default=DEFAULT_TABLE_PI_NAMES,
        metadata={
            "help": "Processing instruction targets that receive table-width hints",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate Mallard renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        super().__post_init__()

        if not self.default_lang or not self.default_lang.strip():
            raise ValueError("default_lang must be a non-empty language tag")

        # Lists from config files are accepted and frozen
        object.__setattr__(self, "table_pi_names", tuple(self.table_pi_names))
        for name in self.table_pi_names:
            if not _PI_TARGET_PATTERN.match(name) or name.lower().startswith("xml"):
                raise ValueError(f"table_pi_names contains an invalid processing instruction target: {name!r}")
