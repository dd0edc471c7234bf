#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/renderers/document.py
"""Whole-file rendering.

The DocumentRenderer writes the file preamble (``#+`` configuration lines,
TODO keyword sequences and any text before the first heading) followed by
every heading in order.

"""

from __future__ import annotations

import logging
from typing import Optional

from orgexport.ast.nodes import Document, TodoKeywordSet
from orgexport.diagnostics import DiagnosticCallback
from orgexport.options.org import OrgRendererOptions
from orgexport.renderers.base import BaseRenderer
from orgexport.renderers.header import HeaderRenderer
from orgexport.timestamps import (
    DurationFormatter,
    PlanningFilter,
    TimestampFormatter,
    render_timestamp,
    should_render_planning_item,
    timestamp_duration,
)

logger = logging.getLogger(__name__)


def _uses_default_keywords(todo_keyword_sets: list[TodoKeywordSet]) -> bool:
    # A file without keyword sets has nothing to write back
    return not todo_keyword_sets or todo_keyword_sets[0].default


class DocumentRenderer(BaseRenderer):
    """Render a Document to the text of an Org file.

    Parameters
    ----------
    options : OrgRendererOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives diagnostics for unrecognized parts
    timestamp_formatter : TimestampFormatter, default = render_timestamp
        Renders timestamps
    duration_formatter : DurationFormatter, default = timestamp_duration
        Renders clock durations
    planning_filter : PlanningFilter, default = should_render_planning_item
        Decides which planning items appear on planning lines
    header_renderer : HeaderRenderer or None, default = None
        Renderer for each heading. Built from the other arguments when
        omitted.

    Examples
    --------
        >>> from orgexport.ast import Document, Header, TitleLine
        >>> document = Document(
        ...     file_config_lines=["#+TITLE: Notes"],
        ...     headers=[Header(nesting_level=1, title_line=TitleLine(raw_title="Inbox"), raw_description="call Bob")],
        ... )
        >>> print(DocumentRenderer().render(document), end="")
        #+TITLE: Notes
        <BLANKLINE>
        * Inbox
        call Bob

    """

    def __init__(
        self,
        options: OrgRendererOptions | None = None,
        diagnostic_callback: Optional[DiagnosticCallback] = None,
        timestamp_formatter: TimestampFormatter = render_timestamp,
        duration_formatter: DurationFormatter = timestamp_duration,
        planning_filter: PlanningFilter = should_render_planning_item,
        header_renderer: HeaderRenderer | None = None,
    ):
        """Initialize the document renderer."""
        BaseRenderer._validate_options_type(options, OrgRendererOptions, "DocumentRenderer")
        options = options or OrgRendererOptions()
        BaseRenderer.__init__(self, options, diagnostic_callback)
        self.options: OrgRendererOptions = options
        self.header_renderer = header_renderer or HeaderRenderer(
            options,
            diagnostic_callback=diagnostic_callback,
            timestamp_formatter=timestamp_formatter,
            duration_formatter=duration_formatter,
            planning_filter=planning_filter,
        )

    def render(self, document: Document) -> str:
        """Render a document.

        Parameters
        ----------
        document : Document
            Document to render

        Returns
        -------
        str
            Complete file text

        """
        logger.debug(
            "Rendering document: %d headings, %d preamble lines",
            len(document.headers),
            len(document.lines_before_headings),
        )
        preamble = self._render_preamble(document)
        headers = "".join(self.header_renderer.render(header, include_title=True) for header in document.headers)
        return preamble + headers

    def _render_preamble(self, document: Document) -> str:
        """Configuration lines and text that precede the first heading."""
        preamble = ""
        if document.file_config_lines:
            preamble += "\n".join(document.file_config_lines) + "\n"

        if not _uses_default_keywords(document.todo_keyword_sets):
            preamble += "\n".join(keyword_set.config_line for keyword_set in document.todo_keyword_sets) + "\n"

        if document.lines_before_headings:
            preamble += "\n".join(document.lines_before_headings)

        if preamble:
            preamble += "\n"
        return preamble


__all__ = ["DocumentRenderer"]
