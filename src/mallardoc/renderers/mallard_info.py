#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/renderers/mallard_info.py
"""Page metadata assembly for Mallard output.

Builds the ``<info>`` block (date, authors, revision, organization) and the
page title elements from document attributes. The attribute names follow the
document header conventions: ``author``, ``authorcount``, ``firstname``,
``middlename``, ``lastname``, ``email`` (suffixed with ``_N`` for the Nth
author when there are several), ``revnumber``, ``revdate``, ``docdate`` and
``orgname``.

"""

from __future__ import annotations

import logging
from typing import Optional

from mallardoc.ast.nodes import Document, DocumentTitle
from mallardoc.constants import DEFAULT_AUTHOR_COUNT, EOL, ITS_NAMESPACE, MALLARD_NAMESPACE
from mallardoc.renderers.mallard_attrs import xml_attr

logger = logging.getLogger(__name__)


def document_ns_attributes() -> str:
    """Return the namespace declarations of the ``<page>`` root."""
    return f' xmlns="{MALLARD_NAMESPACE}" xmlns:its="{ITS_NAMESPACE}"'


def author_count(doc: Document) -> int:
    """Return the declared number of authors, defaulting to one."""
    raw = doc.attr("authorcount", DEFAULT_AUTHOR_COUNT)
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric authorcount %r", raw)
        return DEFAULT_AUTHOR_COUNT


def author_element(doc: Document, index: Optional[int] = None) -> str:
    """Build a ``<credit type="author">`` block.

    Parameters
    ----------
    doc : Document
        Document holding the author attributes
    index : int, optional
        1-based author number; selects the ``_N`` suffixed attributes

    """
    suffix = f"_{index}" if index else ""
    name = " ".join(
        str(doc.attr(key + suffix)) for key in ("firstname", "middlename", "lastname") if doc.has_attr(key + suffix)
    )

    lines = ['<credit type="author">', f"<name>{name}</name>"]
    if doc.has_attr("email" + suffix):
        lines.append(f"<email>{doc.attr('email' + suffix)}</email>")
    lines.append("</credit>")
    return EOL.join(lines)


def revision_element(doc: Document) -> Optional[str]:
    """Build the ``<revision/>`` element, or None without revision data."""
    if not (doc.has_attr("revnumber") or doc.has_attr("revdate")):
        return None
    return f"<revision{xml_attr('version', doc.attr('revnumber'))}{xml_attr('date', doc.attr('revdate'))}/>"


def document_title_tags(title: DocumentTitle) -> str:
    """Render the page title and optional subtitle."""
    if title.has_subtitle():
        return f"<title>{title.main}</title>{EOL}<subtitle>{title.subtitle}</subtitle>"
    return f"<title>{title.main}</title>"


def document_info_element(doc: Document, title: Optional[DocumentTitle] = None) -> str:
    """Build the ``<info>`` block followed by the page title.

    Parameters
    ----------
    doc : Document
        Document whose attributes are projected
    title : DocumentTitle, optional
        Rendered page title; omitted when None (e.g. ``notitle`` documents)

    Returns
    -------
    str
        The info block and title elements

    """
    date = doc.attr("revdate") if doc.has_attr("revdate") else doc.attr("docdate", "")
    lines = ["<info>", f"<date>{date}</date>"]

    if doc.has_header:
        if doc.has_attr("author"):
            count = author_count(doc)
            if count < 2:
                lines.append(author_element(doc))
            else:
                lines.extend(author_element(doc, index) for index in range(1, count + 1))

        revision = revision_element(doc)
        if revision:
            lines.append(revision)

        if doc.header_docinfo:
            lines.append(doc.header_docinfo)

        if doc.has_attr("orgname"):
            lines.append(f"<orgname>{doc.attr('orgname')}</orgname>")

    lines.append("</info>")

    if title is not None:
        lines.append(document_title_tags(title))

    return EOL.join(lines)
