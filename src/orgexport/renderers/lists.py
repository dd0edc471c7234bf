#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/renderers/lists.py
"""Plain list rendering.

Ordered items are numbered from 1. A ``[@N]`` cookie on an item sets the
counter to N, and numbering continues from there. The counter lives inside a
single ``render()`` call.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

from orgexport.ast.nodes import List, ListItem
from orgexport.constants import (
    CHECKBOX_GLYPHS,
    LIST_CONTENT_INDENT,
    STAR_BULLET,
    STAR_BULLET_EXTRA_INDENT,
)
from orgexport.renderers.base import BaseRenderer

if TYPE_CHECKING:
    from orgexport.renderers.attributed_text import AttributedTextRenderer


def _numbered_items(items: Sequence[ListItem]) -> Iterator[tuple[int, ListItem]]:
    number = 0
    for item in items:
        number = item.force_number if item.force_number is not None else number + 1
        yield number, item


class ListRenderer(BaseRenderer):
    """Render a List node to indented Org lines.

    Parameters
    ----------
    text_renderer : AttributedTextRenderer
        Renderer for item titles and contents; options and diagnostics are
        shared with it

    Examples
    --------
        >>> from orgexport.ast import List, ListItem, Text
        >>> from orgexport.renderers import AttributedTextRenderer
        >>> shopping = List(items=[
        ...     ListItem(title_line=[Text(content="milk")], is_checkbox=True, checkbox_state="checked"),
        ...     ListItem(title_line=[Text(content="eggs")], is_checkbox=True),
        ... ])
        >>> print(AttributedTextRenderer().list_renderer.render(shopping))
        - [X] milk
        - [ ] eggs

    """

    def __init__(self, text_renderer: AttributedTextRenderer):
        """Initialize the list renderer."""
        BaseRenderer.__init__(self, text_renderer.options, text_renderer.diagnostic_callback)
        self.text_renderer = text_renderer

    def render(self, node: List) -> str:
        """Render a list.

        Parameters
        ----------
        node : List
            List to render

        Returns
        -------
        str
            Items joined by single newlines, with no leading or trailing newline

        """
        # Star bullets in column 0 would be headings
        leading_space = STAR_BULLET_EXTRA_INDENT if not node.is_ordered and node.bullet_character == STAR_BULLET else ""

        item_texts = []
        for number, item in _numbered_items(node.items):
            if node.is_ordered:
                prefix = f"{number}{node.number_terminator_character}"
                if item.force_number is not None:
                    prefix += f" [@{item.force_number}]"
            else:
                prefix = f"{leading_space}{node.bullet_character}"

            if item.is_checkbox:
                prefix += f" {CHECKBOX_GLYPHS[item.checkbox_state]}"

            item_text = f"{prefix} {self.text_renderer.render(item.title_line)}"

            contents = self.text_renderer.render(item.contents)
            if contents:
                item_text += "\n" + self._indent_contents(contents, leading_space)

            item_texts.append(item_text)

        return "\n".join(item_texts)

    @staticmethod
    def _indent_contents(contents: str, leading_space: str) -> str:
        """Indent non-blank lines under the bullet; blank lines become empty."""
        return "\n".join(
            f"{leading_space}{LIST_CONTENT_INDENT}{line}" if line.strip() else "" for line in contents.split("\n")
        )


__all__ = ["ListRenderer"]
