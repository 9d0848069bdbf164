#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/renderers/mallard_attrs.py
"""Attribute projection helpers for Mallard markup.

Each helper turns one optional node property into a markup attribute
fragment. A fragment starts with a space (``' width="50%"'``) so it can be
interpolated directly after an element name, and is the empty string when the
property is absent, so no empty attribute is ever emitted.

"""

from __future__ import annotations

from typing import Any, Optional

from mallardoc.ast.nodes import Node
from mallardoc.constants import LANG_ATTRIBUTE_NAME


def escape_attribute_value(value: Any) -> str:
    """Escape a value for use inside a double-quoted attribute.

    Values arrive already substituted, so only the characters that would
    break the quoting are escaped.
    """
    return str(value).replace('"', "&quot;").replace("<", "&lt;")


def xml_attr(name: str, value: Any) -> str:
    """Return ``' name="value"'`` or ``""`` when ``value`` is None or empty."""
    if value is None or value == "":
        return ""
    return f' {name}="{escape_attribute_value(value)}"'


def id_attribute(node: Node, native: bool = False) -> str:
    """Project the node identifier.

    Parameters
    ----------
    node : Node
        Node whose ``id`` is projected
    native : bool, default False
        Use Mallard's own ``id`` attribute (sections and pages). Other
        elements only accept the foreign ``xml:id``.

    """
    return xml_attr("id" if native else "xml:id", node.id)


def width_attribute(width: Optional[Any]) -> str:
    """Project an image or media width."""
    return xml_attr("width", width)


def height_attribute(height: Optional[Any]) -> str:
    """Project an image or media height."""
    return xml_attr("height", height)


def _span_attribute(name: str, span: Optional[int]) -> str:
    if span is None or int(span) <= 1:
        return ""
    return xml_attr(name, int(span))


def colspan_attribute(colspan: Optional[int]) -> str:
    """Project a cell column span; spans of one column are omitted."""
    return _span_attribute("colspan", colspan)


def rowspan_attribute(rowspan: Optional[int]) -> str:
    """Project a cell row span; spans of one row are omitted."""
    return _span_attribute("rowspan", rowspan)


def start_attribute(start: Optional[Any]) -> str:
    """Project the starting number of an ordered list."""
    return xml_attr("startingnumber", start)


def lang_attribute(lang: Optional[str]) -> str:
    """Project the page language."""
    return xml_attr(LANG_ATTRIBUTE_NAME, lang)


def cdata(text: str) -> str:
    """Wrap ``text`` in a CDATA section.

    An embedded ``]]>`` would end the section early, so it is split across
    two adjacent sections.

    Examples
    --------
    >>> cdata("a < b")
    '<![CDATA[a < b]]>'
    >>> cdata("x]]>y")
    '<![CDATA[x]]]]><![CDATA[>y]]>'

    """
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def processing_instruction(target: str, **pseudo_attributes: Any) -> str:
    """Build a processing instruction such as ``<?dbfo bgcolor="#eee"?>``.

    Pseudo-attributes whose value is None are dropped; names use ``-`` in
    place of ``_``.
    """
    attrs = "".join(
        xml_attr(name.replace("_", "-"), value) for name, value in pseudo_attributes.items() if value is not None
    )
    return f"<?{target}{attrs}?>"
