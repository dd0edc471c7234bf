#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/ast/nodes.py
"""Document model for Org-Mode files.

This module defines the records an Org parser hands to the serializer. The
model is a snapshot: every record is a frozen dataclass and renderers only
read from it.

Model Hierarchy
---------------
File-level records:
    - Document, TodoKeywordSet

Heading records:
    - Header, TitleLine, PlanningItem, PropertyListItem
    - RawLogBookEntry, ClockEntry

Attributed-string parts (inline content, visitor pattern):
    - Text, Link, FractionCookie, PercentageCookie
    - Table, List, InlineTimestamp, BareLink
    - UnrecognizedPart (explicit arm for part types this library does not know)

Structures owned by parts:
    - ListItem, TableRow, TableCell, Timestamp

An attributed string is a plain ``list`` of parts. Structural checks (heading
level, table shape, closed value sets) run when a record is constructed.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from orgexport.constants import (
    BARE_LINK_KINDS,
    CHECKBOX_STATES,
    DEFAULT_BULLET_CHARACTER,
    DEFAULT_NUMBER_TERMINATOR,
    BareLinkKind,
    CheckboxState,
)
from orgexport.exceptions import ValidationError


@dataclass(frozen=True)
class Timestamp:
    """An Org timestamp such as ``<2019-08-02 Fri 10:00-11:30 +1w>``.

    Date and time fields keep the text they were parsed from, so zero
    padding survives a round trip (``month="08"``).

    Parameters
    ----------
    year, month, day : str
        Date components
    is_active : bool, default = True
        Active timestamps use angle brackets, inactive ones square brackets
    day_name : str or None, default = None
        Abbreviated weekday (``"Fri"``)
    start_hour, start_minute : str or None, default = None
        Start time
    end_hour, end_minute : str or None, default = None
        End time of a same-day range (``10:00-11:30``)
    repeater_type, repeater_value, repeater_unit : str or None, default = None
        Repeater cookie, e.g. ``"+"``, ``"1"``, ``"w"``
    delay_type, delay_value, delay_unit : str or None, default = None
        Warning delay cookie, e.g. ``"-"``, ``"2"``, ``"d"``

    """

    year: str
    month: str
    day: str
    is_active: bool = True
    day_name: Optional[str] = None
    start_hour: Optional[str] = None
    start_minute: Optional[str] = None
    end_hour: Optional[str] = None
    end_minute: Optional[str] = None
    repeater_type: Optional[str] = None
    repeater_value: Optional[str] = None
    repeater_unit: Optional[str] = None
    delay_type: Optional[str] = None
    delay_value: Optional[str] = None
    delay_unit: Optional[str] = None


class Node(ABC):
    """Base class for attributed-string parts.

    Every part supports the visitor pattern; the set of concrete subclasses
    is closed and mirrored one-to-one by the visit_* methods of
    :class:`orgexport.ast.visitors.NodeVisitor`.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


AttributedString = list[Node]


# ============================================================================
# Attributed-string parts
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text part.

    Parameters
    ----------
    content : str
        Literal text, including any inline markup characters

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text part."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Link(Node):
    """Bracket link part (``[[uri]]`` or ``[[uri][title]]``).

    Parameters
    ----------
    uri : str
        Link target
    title : str or None, default = None
        Link description

    """

    uri: str
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass(frozen=True)
class FractionCookie(Node):
    """Statistics cookie of the form ``[2/5]``; either side may be empty."""

    numerator: Union[int, str, None] = None
    denominator: Union[int, str, None] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_fraction_cookie(self)


@dataclass(frozen=True)
class PercentageCookie(Node):
    """Statistics cookie of the form ``[40%]``; the number may be empty."""

    percentage: Union[int, str, None] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_percentage_cookie(self)


@dataclass(frozen=True)
class InlineTimestamp(Node):
    """Timestamp or timestamp range appearing inside text.

    Parameters
    ----------
    first_timestamp : Timestamp
        The timestamp, or the start of the range
    second_timestamp : Timestamp or None, default = None
        End of a ``<...>--<...>`` range

    """

    first_timestamp: Timestamp
    second_timestamp: Optional[Timestamp] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this timestamp."""
        return visitor.visit_inline_timestamp(self)


@dataclass(frozen=True)
class BareLink(Node):
    """A URL, www address, e-mail address or phone number written as plain text.

    Parameters
    ----------
    kind : {"url", "www-url", "e-mail", "phone-number"}
        Which recognizer matched the text
    content : str
        The literal text as it appeared in the source

    Raises
    ------
    ValidationError
        If ``kind`` is not one of the supported kinds

    """

    kind: BareLinkKind
    content: str

    def __post_init__(self) -> None:
        if self.kind not in BARE_LINK_KINDS:
            raise ValidationError(
                f"Unsupported bare link kind: {self.kind!r}", parameter_name="kind", parameter_value=self.kind
            )

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bare link."""
        return visitor.visit_bare_link(self)


@dataclass(frozen=True)
class UnrecognizedPart(Node):
    """Part whose type this library does not know how to render.

    Produced when loading a model from a newer or foreign parser. Renderers
    replace it with empty text and report a diagnostic.

    Parameters
    ----------
    part_type : str
        The type name found in the source data
    data : dict, default = empty dict
        The raw payload, kept for inspection

    """

    part_type: str
    data: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Route this part to the visitor's fallback handler."""
        return visitor.generic_visit(self)


@dataclass(frozen=True)
class ListItem:
    """One item of a plain list.

    Parameters
    ----------
    title_line : list of Node, default = empty list
        Text on the bullet line
    contents : list of Node, default = empty list
        Continuation lines below the bullet (rendered indented)
    is_checkbox : bool, default = False
        Whether the item carries a checkbox
    checkbox_state : {"checked", "unchecked", "partial"}, default = "unchecked"
        Checkbox state when ``is_checkbox`` is set
    force_number : int or None, default = None
        Counter value set with a ``[@N]`` cookie (ordered lists only)

    """

    title_line: list[Node] = field(default_factory=list)
    contents: list[Node] = field(default_factory=list)
    is_checkbox: bool = False
    checkbox_state: CheckboxState = "unchecked"
    force_number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.checkbox_state not in CHECKBOX_STATES:
            raise ValidationError(
                f"Unsupported checkbox state: {self.checkbox_state!r}",
                parameter_name="checkbox_state",
                parameter_value=self.checkbox_state,
            )


@dataclass(frozen=True)
class List(Node):
    """Plain list node (ordered or unordered).

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items in order
    bullet_character : str, default = "-"
        Bullet for unordered lists (``-``, ``+`` or ``*``)
    is_ordered : bool, default = False
        True for numbered lists
    number_terminator_character : str, default = "."
        ``.`` or ``)`` after the number of ordered items

    """

    items: list[ListItem] = field(default_factory=list)
    bullet_character: str = DEFAULT_BULLET_CHARACTER
    is_ordered: bool = False
    number_terminator_character: str = DEFAULT_NUMBER_TERMINATOR

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list method

        Returns
        -------
        Any
            Result from visitor.visit_list(self)

        """
        return visitor.visit_list(self)


@dataclass(frozen=True)
class TableCell:
    """Table cell.

    Parameters
    ----------
    content : list of Node, default = empty list
        Parsed cell content, used to compute the displayed width
    raw_content : str, default = ""
        Cell text exactly as written between the pipes

    """

    content: list[Node] = field(default_factory=list)
    raw_content: str = ""


@dataclass(frozen=True)
class TableRow:
    """Table row containing cells."""

    cells: list[TableCell] = field(default_factory=list)


@dataclass(frozen=True)
class Table(Node):
    """Pipe table node.

    Row 0 fixes the column count; every other row must match it.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table rows in order

    Raises
    ------
    ValidationError
        If any row has a different number of cells than the first row

    """

    rows: list[TableRow] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.rows:
            return
        expected = len(self.rows[0].cells)
        for index, row in enumerate(self.rows):
            if len(row.cells) != expected:
                raise ValidationError(
                    f"Table row {index} has {len(row.cells)} cells, expected {expected}",
                    parameter_name="rows",
                    parameter_value=index,
                )

    @property
    def column_count(self) -> int:
        """Number of columns, taken from the first row."""
        return len(self.rows[0].cells) if self.rows else 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_table method

        Returns
        -------
        Any
            Result from visitor.visit_table(self)

        """
        return visitor.visit_table(self)


# ============================================================================
# Heading records
# ============================================================================


@dataclass(frozen=True)
class TitleLine:
    """The parsed pieces of a heading line.

    Parameters
    ----------
    raw_title : str
        Title text as written, including any whitespace before the tags
    todo_keyword : str or None, default = None
        TODO keyword such as ``"TODO"`` or ``"DONE"``
    tags : list of str, default = empty list
        Heading tags in order

    """

    raw_title: str
    todo_keyword: Optional[str] = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PlanningItem:
    """A ``KIND: <timestamp>`` entry of a heading's planning line.

    Parameters
    ----------
    kind : str
        ``"SCHEDULED"``, ``"DEADLINE"``, ``"CLOSED"`` or ``"TIMESTAMP"`` (a plain
        active timestamp the parser attached to the heading)
    timestamp : Timestamp
        The planning timestamp

    """

    kind: str
    timestamp: Timestamp


@dataclass(frozen=True)
class PropertyListItem:
    """One ``:NAME: value`` line of a PROPERTIES drawer."""

    name: str
    value: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class RawLogBookEntry:
    """A LOGBOOK line kept verbatim (state changes, notes, blank lines)."""

    raw: str


@dataclass(frozen=True)
class ClockEntry:
    """A ``CLOCK:`` line of a LOGBOOK drawer.

    Parameters
    ----------
    start : Timestamp
        Clock-in time
    end : Timestamp or None, default = None
        Clock-out time; None for a running clock

    """

    start: Timestamp
    end: Optional[Timestamp] = None


LogBookEntry = Union[RawLogBookEntry, ClockEntry]


@dataclass(frozen=True)
class Header:
    """A heading with everything up to the next heading.

    Parameters
    ----------
    nesting_level : int
        Number of leading stars (>= 1)
    title_line : TitleLine
        Parsed heading line
    planning_items : list of PlanningItem, default = empty list
        Items of the planning line
    property_list_items : list of PropertyListItem, default = empty list
        Contents of the PROPERTIES drawer
    log_book_entries : list of LogBookEntry, default = empty list
        Contents of the LOGBOOK drawer
    raw_description : str, default = ""
        Body text exactly as written
    description : list of Node, default = empty list
        Parsed body; never used to produce output text

    Raises
    ------
    ValidationError
        If ``nesting_level`` is smaller than 1

    """

    nesting_level: int
    title_line: TitleLine
    planning_items: list[PlanningItem] = field(default_factory=list)
    property_list_items: list[PropertyListItem] = field(default_factory=list)
    log_book_entries: list[LogBookEntry] = field(default_factory=list)
    raw_description: str = ""
    description: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.nesting_level < 1:
            raise ValidationError(
                f"nesting_level must be at least 1, got {self.nesting_level}",
                parameter_name="nesting_level",
                parameter_value=self.nesting_level,
            )


# ============================================================================
# File-level records
# ============================================================================


@dataclass(frozen=True)
class TodoKeywordSet:
    """A set of TODO keywords.

    Parameters
    ----------
    keywords : list of str, default = empty list
        Keywords in the set
    config_line : str, default = ""
        The ``#+TODO:`` line that declared the set
    default : bool, default = False
        True for the built-in set that was not declared in the file

    """

    keywords: list[str] = field(default_factory=list)
    config_line: str = ""
    default: bool = False


@dataclass(frozen=True)
class Document:
    """A whole Org file.

    Parameters
    ----------
    headers : list of Header, default = empty list
        Headings in document order
    todo_keyword_sets : list of TodoKeywordSet, default = empty list
        Keyword sets; the first one is flagged ``default`` unless the file
        declares its own
    file_config_lines : list of str, default = empty list
        Raw ``#+...`` configuration lines
    lines_before_headings : list of str, default = empty list
        Remaining raw lines before the first heading

    """

    headers: list[Header] = field(default_factory=list)
    todo_keyword_sets: list[TodoKeywordSet] = field(default_factory=list)
    file_config_lines: list[str] = field(default_factory=list)
    lines_before_headings: list[str] = field(default_factory=list)


PART_TYPES: tuple[type[Node], ...] = (
    Text,
    Link,
    FractionCookie,
    PercentageCookie,
    Table,
    List,
    InlineTimestamp,
    BareLink,
)


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
