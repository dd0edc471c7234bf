#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/api.py
"""Function-level entry points for Org export.

These wrap the renderer classes for the common case of a single call. Every
function accepts the same keyword-only collaborators as the renderers
(``diagnostic_callback``, ``timestamp_formatter``, ``duration_formatter``,
``planning_filter``), and any remaining keyword arguments are treated as
OrgRendererOptions fields that override ``options``.

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, Sequence

from orgexport.ast.nodes import Document, Header, Node
from orgexport.diagnostics import DiagnosticCallback
from orgexport.options.org import OrgRendererOptions
from orgexport.renderers.attributed_text import AttributedTextRenderer
from orgexport.renderers.document import DocumentRenderer
from orgexport.renderers.header import HeaderRenderer
from orgexport.renderers.header import generate_title_line as _generate_title_line
from orgexport.timestamps import (
    DurationFormatter,
    PlanningFilter,
    TimestampFormatter,
    render_timestamp,
    should_render_planning_item,
    timestamp_duration,
)

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[OrgRendererOptions], **kwargs: Any) -> Optional[OrgRendererOptions]:
    """Apply keyword overrides to renderer options.

    Parameters
    ----------
    options : OrgRendererOptions or None
        Base options
    **kwargs
        Option field overrides; names that are not OrgRendererOptions fields
        are skipped

    Returns
    -------
    OrgRendererOptions or None
        ``options`` unchanged when there are no overrides

    """
    if not kwargs:
        return options

    option_names = [field.name for field in fields(OrgRendererOptions)]
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown renderer options: {missing}")

    if options is not None:
        return options.create_updated(**valid_kwargs)
    return OrgRendererOptions(**valid_kwargs)


def export_org(
    document: Document,
    options: Optional[OrgRendererOptions] = None,
    *,
    diagnostic_callback: Optional[DiagnosticCallback] = None,
    timestamp_formatter: TimestampFormatter = render_timestamp,
    duration_formatter: DurationFormatter = timestamp_duration,
    planning_filter: PlanningFilter = should_render_planning_item,
    **kwargs: Any,
) -> str:
    """Render a document to the full text of an Org file.

    Parameters
    ----------
    document : Document
        Document to render
    options : OrgRendererOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives a DiagnosticEvent for each unrecognized part. When None,
        unrecognized parts are logged as warnings.
    timestamp_formatter : TimestampFormatter, default = render_timestamp
        Renders timestamps
    duration_formatter : DurationFormatter, default = timestamp_duration
        Renders clock durations
    planning_filter : PlanningFilter, default = should_render_planning_item
        Decides which planning items appear on planning lines
    kwargs : Any
        OrgRendererOptions fields that override ``options``

    Returns
    -------
    str
        Org file text

    Raises
    ------
    RenderingError
        If an unrecognized part is found and ``fail_on_unknown_parts`` is set

    Examples
    --------
        >>> from orgexport.ast import Document, Header, TitleLine
        >>> doc = Document(headers=[Header(nesting_level=1, title_line=TitleLine(raw_title="Inbox"))])
        >>> export_org(doc)
        '* Inbox\\n'

    Drawers without indentation:
        >>> text = export_org(doc, dont_indent=True)

    """
    renderer = DocumentRenderer(
        _resolve_options(options, **kwargs),
        diagnostic_callback=diagnostic_callback,
        timestamp_formatter=timestamp_formatter,
        duration_formatter=duration_formatter,
        planning_filter=planning_filter,
    )
    return renderer.render(document)


def create_raw_description_text(
    header: Header,
    include_title: bool = True,
    dont_indent: bool | None = None,
    options: Optional[OrgRendererOptions] = None,
    *,
    diagnostic_callback: Optional[DiagnosticCallback] = None,
    timestamp_formatter: TimestampFormatter = render_timestamp,
    duration_formatter: DurationFormatter = timestamp_duration,
    planning_filter: PlanningFilter = should_render_planning_item,
) -> str:
    """Render one heading: title, planning line, drawers and body.

    Parameters
    ----------
    header : Header
        Heading to render
    include_title : bool, default = True
        Whether to start with the title line
    dont_indent : bool or None, default = None
        Write drawer lines without indentation. None uses
        ``options.dont_indent``, which is False by default.
    options : OrgRendererOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives diagnostics for unrecognized parts in property values
    timestamp_formatter : TimestampFormatter, default = render_timestamp
        Renders timestamps
    duration_formatter : DurationFormatter, default = timestamp_duration
        Renders clock durations
    planning_filter : PlanningFilter, default = should_render_planning_item
        Decides which planning items appear on the planning line

    Returns
    -------
    str
        Heading text

    """
    renderer = HeaderRenderer(
        options,
        diagnostic_callback=diagnostic_callback,
        timestamp_formatter=timestamp_formatter,
        duration_formatter=duration_formatter,
        planning_filter=planning_filter,
    )
    return renderer.render(header, include_title=include_title, dont_indent=dont_indent)


def attributed_string_to_raw_text(
    parts: Optional[Sequence[Node]],
    options: Optional[OrgRendererOptions] = None,
    *,
    diagnostic_callback: Optional[DiagnosticCallback] = None,
    timestamp_formatter: TimestampFormatter = render_timestamp,
) -> str:
    """Render an attributed string back to raw Org text.

    Parameters
    ----------
    parts : sequence of Node or None
        Attributed string; None and empty sequences give ""
    options : OrgRendererOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives a DiagnosticEvent for each unrecognized part
    timestamp_formatter : TimestampFormatter, default = render_timestamp
        Renders inline timestamps

    Returns
    -------
    str
        Raw Org text

    Examples
    --------
        >>> from orgexport.ast import FractionCookie, Text
        >>> attributed_string_to_raw_text([Text(content="Tasks "), FractionCookie(numerator=1, denominator=3)])
        'Tasks [1/3]'

    """
    renderer = AttributedTextRenderer(
        options,
        diagnostic_callback=diagnostic_callback,
        timestamp_formatter=timestamp_formatter,
    )
    return renderer.render(parts)


def generate_title_line(header: Header, include_stars: bool = True) -> str:
    """Build the title text of a heading.

    See :func:`orgexport.renderers.header.generate_title_line`.

    """
    return _generate_title_line(header, include_stars=include_stars)


__all__ = [
    "attributed_string_to_raw_text",
    "create_raw_description_text",
    "export_org",
    "generate_title_line",
]
