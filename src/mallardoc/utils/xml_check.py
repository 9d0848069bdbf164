#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/utils/xml_check.py
"""Well-formedness checking for rendered markup.

This is a structural check only (every element closed, in nesting order,
attributes quoted); it does not validate against the Mallard schema.
Parsing goes through ``defusedxml`` so untrusted documents cannot trigger
entity expansion attacks.

"""

from __future__ import annotations

import logging
import re

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from mallardoc.exceptions import RenderingError

logger = logging.getLogger(__name__)

_XML_DECLARATION_PATTERN = re.compile(r"^\s*<\?xml[^>]*\?>")


def _wrap_fragment(markup: str) -> str:
    # Fragments may have several roots and processing instructions
    body = _XML_DECLARATION_PATTERN.sub("", markup, count=1)
    return f"<fragment>{body}</fragment>"


def check_well_formed(markup: str) -> None:
    """Raise RenderingError unless ``markup`` is well-formed XML.

    Parameters
    ----------
    markup : str
        A complete page or a fragment with any number of top-level elements.

    Raises
    ------
    RenderingError
        If the markup cannot be parsed

    """
    try:
        ET.fromstring(_wrap_fragment(markup))
    except (ET.ParseError, DefusedXmlException) as e:
        logger.debug("Well-formedness check failed: %s", e)
        raise RenderingError(f"Output is not well-formed XML: {e}", rendering_stage="check", original_error=e) from e


def is_well_formed(markup: str) -> bool:
    """Return True when ``markup`` is well-formed XML."""
    try:
        check_well_formed(markup)
    except RenderingError:
        return False
    return True
