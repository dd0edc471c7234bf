#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/ast/__init__.py
"""Document model, visitor and serialization for Org files.

Examples
--------
Build a heading with a checklist in its body:

    >>> from orgexport.ast import Header, List, ListItem, Text, TitleLine
    >>> header = Header(
    ...     nesting_level=1,
    ...     title_line=TitleLine(raw_title="Groceries", todo_keyword="TODO"),
    ...     raw_description="- [ ] milk\\n",
    ... )

"""

from orgexport.ast.nodes import (
    PART_TYPES,
    AttributedString,
    BareLink,
    ClockEntry,
    Document,
    FractionCookie,
    Header,
    InlineTimestamp,
    Link,
    List,
    ListItem,
    LogBookEntry,
    Node,
    PercentageCookie,
    PlanningItem,
    PropertyListItem,
    RawLogBookEntry,
    Table,
    TableCell,
    TableRow,
    Text,
    Timestamp,
    TitleLine,
    TodoKeywordSet,
    UnrecognizedPart,
)
from orgexport.ast.visitors import NodeVisitor

__all__ = [
    "AttributedString",
    "BareLink",
    "ClockEntry",
    "Document",
    "FractionCookie",
    "Header",
    "InlineTimestamp",
    "Link",
    "List",
    "ListItem",
    "LogBookEntry",
    "Node",
    "NodeVisitor",
    "PART_TYPES",
    "PercentageCookie",
    "PlanningItem",
    "PropertyListItem",
    "RawLogBookEntry",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "Timestamp",
    "TitleLine",
    "TodoKeywordSet",
    "UnrecognizedPart",
]
