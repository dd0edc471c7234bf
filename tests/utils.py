"""Test utilities for the orgexport test suite.

This module provides builders for model records that tests construct over
and over, and a diagnostic collector.
"""

from orgexport.ast import List, ListItem, Table, TableCell, TableRow, Text
from orgexport.diagnostics import DiagnosticEvent


def text_cell(text: str) -> TableCell:
    """Build a table cell whose raw and displayed text are the same."""
    return TableCell(content=[Text(content=text)], raw_content=text)


def text_table(*rows: list[str]) -> Table:
    """Build a table of plain-text cells, one argument per row."""
    return Table(rows=[TableRow(cells=[text_cell(text) for text in row]) for row in rows])


def text_list(*titles: str, **list_fields) -> List:
    """Build a list whose items have plain-text titles and no contents."""
    return List(items=[ListItem(title_line=[Text(content=title)]) for title in titles], **list_fields)


class DiagnosticCollector:
    """Callable diagnostic sink that records every event it receives."""

    def __init__(self):
        self.events: list[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[str]:
        return [event.event_type for event in self.events]
