#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/orgexport/renderers/__init__.py
"""Renderers that turn the document model back into Org text.

Available renderers:
- AttributedTextRenderer: Render inline parts (text, links, cookies, timestamps)
- DisplayTextRenderer: Render inline parts as Org displays them (for widths)
- ListRenderer: Render plain lists, owned by an AttributedTextRenderer
- TableRenderer: Render pipe tables, owned by an AttributedTextRenderer
- HeaderRenderer: Render one heading with its drawers and body
- DocumentRenderer: Render a complete file

Examples
--------
Render a heading's body parts:

    >>> from orgexport.ast import Text
    >>> from orgexport.renderers import AttributedTextRenderer
    >>> AttributedTextRenderer().render([Text(content="hello")])
    'hello'

"""

from orgexport.renderers.attributed_text import AttributedTextRenderer, DisplayTextRenderer
from orgexport.renderers.base import BaseRenderer
from orgexport.renderers.document import DocumentRenderer
from orgexport.renderers.header import HeaderRenderer, generate_title_line, normalize_description
from orgexport.renderers.lists import ListRenderer
from orgexport.renderers.table import TableRenderer

__all__ = [
    "AttributedTextRenderer",
    "BaseRenderer",
    "DisplayTextRenderer",
    "DocumentRenderer",
    "HeaderRenderer",
    "ListRenderer",
    "TableRenderer",
    "generate_title_line",
    "normalize_description",
]
