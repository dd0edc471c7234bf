#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/renderers/table.py
"""Pipe table rendering.

Cells are written from their raw text but aligned by their displayed width,
because Org aligns a column by what it shows: ``[[http://example.com][short]]``
occupies five columns, not thirty. A cell may span several lines; each line
of a row is written as its own ``| ... |`` line.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgexport.ast.nodes import Table, TableCell, TableRow
from orgexport.constants import (
    TABLE_CELL_SEPARATOR,
    TABLE_ROW_PREFIX,
    TABLE_ROW_SUFFIX,
    TABLE_SEPARATOR_EDGE,
    TABLE_SEPARATOR_FILL,
    TABLE_SEPARATOR_JOIN,
)
from orgexport.renderers.base import BaseRenderer

if TYPE_CHECKING:
    from orgexport.renderers.attributed_text import AttributedTextRenderer, DisplayTextRenderer

logger = logging.getLogger(__name__)


class TableRenderer(BaseRenderer):
    """Render a Table node to aligned Org text.

    Parameters
    ----------
    text_renderer : AttributedTextRenderer
        Owning renderer; options and diagnostics are shared with it
    display_renderer : DisplayTextRenderer
        Renderer used to measure the displayed width of cell content

    Examples
    --------
        >>> from orgexport.ast import Table, TableCell, TableRow, Text
        >>> from orgexport.renderers import AttributedTextRenderer
        >>> table = Table(rows=[
        ...     TableRow(cells=[TableCell(content=[Text(content="a")], raw_content="a"),
        ...                     TableCell(content=[Text(content="bcd")], raw_content="bcd")]),
        ...     TableRow(cells=[TableCell(content=[Text(content="ef")], raw_content="ef"),
        ...                     TableCell(content=[Text(content="g")], raw_content="g")]),
        ... ])
        >>> print(AttributedTextRenderer().table_renderer.render(table))
        | a  | bcd |
        |----+-----|
        | ef | g   |

    """

    def __init__(self, text_renderer: AttributedTextRenderer, display_renderer: DisplayTextRenderer):
        """Initialize the table renderer."""
        BaseRenderer.__init__(self, text_renderer.options, text_renderer.diagnostic_callback)
        self.text_renderer = text_renderer
        self.display_renderer = display_renderer

    def render(self, node: Table) -> str:
        """Render a table.

        Parameters
        ----------
        node : Table
            Table to render

        Returns
        -------
        str
            Table lines joined by newlines, with a separator line between
            rows and none after the last row. A table without rows renders
            as "".

        """
        if not node.rows:
            return ""

        row_heights = [self._row_height(row) for row in node.rows]
        display_widths = [[self._display_line_widths(cell) for cell in row.cells] for row in node.rows]
        column_widths = [
            max(max(row_widths[column_index]) for row_widths in display_widths)
            for column_index in range(node.column_count)
        ]
        logger.debug("Rendering table: %d rows, column widths %s", len(node.rows), column_widths)

        separator = (
            TABLE_SEPARATOR_EDGE
            + TABLE_SEPARATOR_JOIN.join(TABLE_SEPARATOR_FILL * (width + 2) for width in column_widths)
            + TABLE_SEPARATOR_EDGE
        )

        lines: list[str] = []
        for row_index, row in enumerate(node.rows):
            if row_index > 0:
                lines.append(separator)
            for line_index in range(row_heights[row_index]):
                cell_texts = [
                    self._cell_line(cell, line_index, column_widths[column_index], display_widths[row_index][column_index])
                    for column_index, cell in enumerate(row.cells)
                ]
                lines.append(TABLE_ROW_PREFIX + TABLE_CELL_SEPARATOR.join(cell_texts) + TABLE_ROW_SUFFIX)

        return "\n".join(lines)

    @staticmethod
    def _row_height(row: TableRow) -> int:
        """Number of text lines in a row, set by its tallest raw cell."""
        return 1 + max((cell.raw_content.count("\n") for cell in row.cells), default=0)

    def _display_line_widths(self, cell: TableCell) -> list[int]:
        """Trimmed length of each displayed line of a cell."""
        display_text = self.display_renderer.render(cell.content)
        return [len(line.strip()) for line in display_text.split("\n")]

    @staticmethod
    def _cell_line(cell: TableCell, line_index: int, column_width: int, display_widths: list[int]) -> str:
        """One line of raw cell text, padded by the displayed width."""
        raw_lines = cell.raw_content.split("\n")
        line = raw_lines[line_index].strip() if line_index < len(raw_lines) else ""
        display_width = display_widths[line_index] if line_index < len(display_widths) else 0
        return line + " " * (column_width - display_width)


__all__ = ["TableRenderer"]
