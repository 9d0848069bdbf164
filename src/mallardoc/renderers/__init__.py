#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mallardoc/renderers/__init__.py
"""AST renderers producing Mallard markup.

Available renderers:
- MallardRenderer: Render a document AST to a Mallard page or fragment

Examples
--------
Render a document:

    >>> from mallardoc.ast import Document, Section, Paragraph
    >>> from mallardoc.renderers import MallardRenderer
    >>> doc = Document(title="Guide", blocks=[Section(title="Intro", blocks=[Paragraph(text="Hi")])])
    >>> page = MallardRenderer().render_to_string(doc)

"""

from mallardoc.renderers.base import BaseRenderer
from mallardoc.renderers.mallard import MallardRenderer

__all__ = ["BaseRenderer", "MallardRenderer"]
