#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mallardoc - render document ASTs to Mallard, the topic-oriented help format.

A parser upstream produces a tree of document nodes (sections, paragraphs,
lists, tables, admonitions, inline formatting ...). mallardoc walks that tree
and emits a Mallard ``<page>`` ready for help viewers such as Yelp, or an
embeddable body fragment.

Examples
--------
Render a document to a string:

    >>> from mallardoc import render_document
    >>> from mallardoc.ast import Document, Section, Paragraph
    >>> doc = Document(title="User Guide", blocks=[Section(title="Intro", blocks=[Paragraph(text="Hi")])])
    >>> page = render_document(doc)

Embed the body only, collecting diagnostics:

    >>> from mallardoc import MallardRenderer, MallardRendererOptions
    >>> renderer = MallardRenderer(MallardRendererOptions(standalone=False))
    >>> result = renderer.render_to_result(doc)
    >>> print(result.content)
    <section>
    <title>Intro</title>
    <p>Hi</p>
    </section>

See Also
--------
mallardoc.ast : Node definitions and JSON serialization
mallardoc.cli : The ``mallardoc`` command

"""

from __future__ import annotations

from typing import Optional

from mallardoc.ast.nodes import Document
from mallardoc.diagnostics import Diagnostic, RenderResult
from mallardoc.exceptions import MallardocError
from mallardoc.options.mallard import MallardRendererOptions
from mallardoc.renderers.mallard import MallardRenderer

__version__ = "0.1.0"


def render_document(doc: Document, options: Optional[MallardRendererOptions] = None) -> str:
    """Render ``doc`` to Mallard with the given options.

    Parameters
    ----------
    doc : Document
        Document AST to render
    options : MallardRendererOptions, optional
        Rendering options; defaults produce a standalone page

    Returns
    -------
    str
        Mallard markup

    """
    return MallardRenderer(options).render_to_string(doc)


__all__ = [
    "Diagnostic",
    "MallardRenderer",
    "MallardRendererOptions",
    "MallardocError",
    "RenderResult",
    "__version__",
    "render_document",
]
