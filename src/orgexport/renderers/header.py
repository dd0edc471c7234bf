#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/renderers/header.py
"""Heading rendering.

This module renders one heading and everything it owns, in the fixed order
Org writes them:

1. Title line (``** TODO Title:tag1:tag2:``)
2. Planning line (``SCHEDULED: <...> DEADLINE: <...>``)
3. Property drawer
4. Logbook drawer
5. Body text

Planning, property and logbook lines are indented by one space more than
the heading's star count. The ``dont_indent`` flag removes the indentation
of the two drawers only; the planning line keeps it.

"""

from __future__ import annotations

from typing import Optional

from orgexport.ast.nodes import ClockEntry, Header, LogBookEntry, PlanningItem, PropertyListItem
from orgexport.constants import (
    CLOCK_DURATION_SEPARATOR,
    CLOCK_PREFIX,
    DRAWER_END,
    HEADING_MARKER,
    LOGBOOK_DRAWER_START,
    PROPERTIES_DRAWER_START,
    TAG_SEPARATOR,
    TIMESTAMP_RANGE_SEPARATOR,
)
from orgexport.diagnostics import DiagnosticCallback
from orgexport.options.org import OrgRendererOptions
from orgexport.renderers.attributed_text import AttributedTextRenderer
from orgexport.renderers.base import BaseRenderer
from orgexport.timestamps import (
    DurationFormatter,
    PlanningFilter,
    TimestampFormatter,
    render_timestamp,
    should_render_planning_item,
    timestamp_duration,
)


def generate_title_line(header: Header, include_stars: bool = True) -> str:
    """Build the title text of a heading, without a trailing newline.

    Parameters
    ----------
    header : Header
        Heading to describe
    include_stars : bool, default = True
        Whether to start with the heading stars. Without them the separator
        space in front of the keyword or title is dropped as well.

    Returns
    -------
    str
        Title text, e.g. ``"** TODO Write report:work:"`` or
        ``"TODO Write report:work:"``

    Examples
    --------
        >>> from orgexport.ast import Header, TitleLine
        >>> header = Header(nesting_level=2, title_line=TitleLine(raw_title="Plan", todo_keyword="TODO"))
        >>> generate_title_line(header)
        '** TODO Plan'
        >>> generate_title_line(header, include_stars=False)
        'TODO Plan'

    """
    title_line = header.title_line
    text = HEADING_MARKER * header.nesting_level if include_stars else ""
    if title_line.todo_keyword:
        text += f" {title_line.todo_keyword}"
    text += f" {title_line.raw_title}"
    if title_line.tags:
        text += TAG_SEPARATOR + TAG_SEPARATOR.join(tag for tag in title_line.tags if tag) + TAG_SEPARATOR

    if not include_stars:
        text = text[1:]
    return text


def normalize_description(raw_description: str) -> str:
    """Ensure a non-empty body ends with a newline.

    A newline belongs to the line it ends, so a body that stops mid-line is
    given one. An empty body stays empty.

    Parameters
    ----------
    raw_description : str
        Body text as stored on the heading

    Returns
    -------
    str
        ``""`` for an empty body, otherwise text ending in ``"\\n"``

    """
    if raw_description and not raw_description.endswith("\n"):
        return raw_description + "\n"
    return raw_description


class HeaderRenderer(BaseRenderer):
    """Render a heading with its planning line, drawers and body.

    Parameters
    ----------
    options : OrgRendererOptions or None, default = None
        Rendering options; ``dont_indent`` sets the default drawer indentation
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives diagnostics raised while rendering property values
    timestamp_formatter : TimestampFormatter, default = render_timestamp
        Renders planning and clock timestamps
    duration_formatter : DurationFormatter, default = timestamp_duration
        Renders the ``=> H:MM`` part of closed CLOCK lines
    planning_filter : PlanningFilter, default = should_render_planning_item
        Decides which planning items appear on the planning line
    text_renderer : AttributedTextRenderer or None, default = None
        Renderer for property values. Built from the other arguments when
        omitted.

    Examples
    --------
        >>> from orgexport.ast import Header, PropertyListItem, Text, TitleLine
        >>> header = Header(
        ...     nesting_level=1,
        ...     title_line=TitleLine(raw_title="Project"),
        ...     property_list_items=[PropertyListItem(name="ID", value=[Text(content="42")])],
        ...     raw_description="Notes",
        ... )
        >>> print(HeaderRenderer().render(header), end="")
        * Project
          :PROPERTIES:
          :ID: 42
          :END:
        Notes

    """

    def __init__(
        self,
        options: OrgRendererOptions | None = None,
        diagnostic_callback: Optional[DiagnosticCallback] = None,
        timestamp_formatter: TimestampFormatter = render_timestamp,
        duration_formatter: DurationFormatter = timestamp_duration,
        planning_filter: PlanningFilter = should_render_planning_item,
        text_renderer: AttributedTextRenderer | None = None,
    ):
        """Initialize the header renderer."""
        BaseRenderer._validate_options_type(options, OrgRendererOptions, "HeaderRenderer")
        options = options or OrgRendererOptions()
        BaseRenderer.__init__(self, options, diagnostic_callback)
        self.options: OrgRendererOptions = options
        self.timestamp_formatter = timestamp_formatter
        self.duration_formatter = duration_formatter
        self.planning_filter = planning_filter
        self.text_renderer = text_renderer or AttributedTextRenderer(
            options,
            diagnostic_callback=diagnostic_callback,
            timestamp_formatter=timestamp_formatter,
        )

    def render(self, header: Header, include_title: bool = True, dont_indent: bool | None = None) -> str:
        """Render a heading and its contents.

        Parameters
        ----------
        header : Header
            Heading to render
        include_title : bool, default = True
            Whether to start with the title line
        dont_indent : bool or None, default = None
            Write drawer lines without indentation. None uses
            ``options.dont_indent``.

        Returns
        -------
        str
            Org text; every emitted line ends with a newline

        """
        if dont_indent is None:
            dont_indent = self.options.dont_indent

        indentation = " " * (header.nesting_level + 1)
        drawer_indentation = "" if dont_indent else indentation

        contents = ""
        if include_title:
            contents += generate_title_line(header) + "\n"

        contents += self._render_planning(header.planning_items, indentation)
        contents += self._render_properties(header.property_list_items, drawer_indentation)
        contents += self._render_logbook(header.log_book_entries, drawer_indentation)
        contents += normalize_description(header.raw_description)
        return contents

    def _render_planning(self, planning_items: list[PlanningItem], indentation: str) -> str:
        items = [item for item in planning_items if self.planning_filter(item)]
        if not items:
            return ""

        planning_text = " ".join(f"{item.kind}: {self.timestamp_formatter(item.timestamp)}" for item in items)
        return f"{indentation}{planning_text.rstrip()}\n"

    def _render_properties(self, property_list_items: list[PropertyListItem], indentation: str) -> str:
        if not property_list_items:
            return ""

        lines = [f"{indentation}{PROPERTIES_DRAWER_START}"]
        lines.extend(
            f"{indentation}:{item.name}: {self.text_renderer.render(item.value)}" for item in property_list_items
        )
        lines.append(f"{indentation}{DRAWER_END}")
        return "\n".join(lines) + "\n"

    def _render_logbook(self, log_book_entries: list[LogBookEntry], indentation: str) -> str:
        if not log_book_entries:
            return ""

        entries = "\n".join(self._render_logbook_entry(entry, indentation) for entry in log_book_entries).rstrip()
        return f"{indentation}{LOGBOOK_DRAWER_START}\n{entries}\n{indentation}{DRAWER_END}\n"

    def _render_logbook_entry(self, entry: LogBookEntry, indentation: str) -> str:
        if not isinstance(entry, ClockEntry):
            # Blank raw lines stay blank instead of carrying trailing spaces
            return f"{indentation}{entry.raw}" if entry.raw else ""

        clock = f"{indentation}{CLOCK_PREFIX}{self.timestamp_formatter(entry.start)}"
        if entry.end is None:
            return clock
        return (
            f"{clock}{TIMESTAMP_RANGE_SEPARATOR}{self.timestamp_formatter(entry.end)}"
            f"{CLOCK_DURATION_SEPARATOR}{self.duration_formatter(entry.start, entry.end)}"
        )


__all__ = ["HeaderRenderer", "generate_title_line", "normalize_description"]
