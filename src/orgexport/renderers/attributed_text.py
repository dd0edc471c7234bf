#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/renderers/attributed_text.py
"""Attributed-string rendering.

This module provides the AttributedTextRenderer, which turns a sequence of
inline parts (text, links, statistics cookies, timestamps, bare URLs and
embedded lists or tables) back into the raw Org text they were parsed from.

It also provides DisplayTextRenderer, the variant used to measure how wide a
table cell looks once Org has collapsed its links.

"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from orgexport.ast.nodes import (
    PART_TYPES,
    BareLink,
    FractionCookie,
    InlineTimestamp,
    Link,
    List,
    Node,
    PercentageCookie,
    Table,
    Text,
    UnrecognizedPart,
)
from orgexport.ast.visitors import NodeVisitor
from orgexport.constants import TIMESTAMP_RANGE_SEPARATOR
from orgexport.diagnostics import DiagnosticCallback
from orgexport.exceptions import RenderingError
from orgexport.options.org import OrgRendererOptions
from orgexport.renderers.base import BaseRenderer
from orgexport.renderers.lists import ListRenderer
from orgexport.renderers.table import TableRenderer
from orgexport.timestamps import TimestampFormatter, render_timestamp


def _cookie_value(value: Union[int, str, None]) -> str:
    return "" if value is None else str(value)


class AttributedTextRenderer(NodeVisitor, BaseRenderer):
    """Render attributed strings to raw Org text.

    Parts are rendered in order. Lists and tables never end with a newline of
    their own, so the part that follows one of them is prefixed with a
    newline.

    Parameters
    ----------
    options : OrgRendererOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives an "unknown_part" event for each unrecognized part
    timestamp_formatter : TimestampFormatter, default = render_timestamp
        Renders a Timestamp as text

    Examples
    --------
        >>> from orgexport.ast import Link, Text
        >>> renderer = AttributedTextRenderer()
        >>> renderer.render([Text(content="see "), Link(uri="https://orgmode.org", title="Org")])
        'see [[https://orgmode.org][Org]]'

    """

    # Whether a part following a list or table starts on a new line
    separate_blocks: bool = True

    def __init__(
        self,
        options: OrgRendererOptions | None = None,
        diagnostic_callback: Optional[DiagnosticCallback] = None,
        timestamp_formatter: TimestampFormatter = render_timestamp,
    ):
        """Initialize the attributed text renderer."""
        BaseRenderer._validate_options_type(options, OrgRendererOptions, type(self).__name__)
        options = options or OrgRendererOptions()
        BaseRenderer.__init__(self, options, diagnostic_callback)
        self.options: OrgRendererOptions = options
        self.timestamp_formatter = timestamp_formatter
        self._list_renderer: ListRenderer | None = None
        self._table_renderer: TableRenderer | None = None

    @property
    def list_renderer(self) -> ListRenderer:
        """ListRenderer bound to this renderer, created on first use."""
        if self._list_renderer is None:
            self._list_renderer = ListRenderer(self)
        return self._list_renderer

    @property
    def table_renderer(self) -> TableRenderer:
        """TableRenderer bound to this renderer, created on first use."""
        if self._table_renderer is None:
            display_renderer = DisplayTextRenderer(
                self.options,
                diagnostic_callback=self.diagnostic_callback,
                timestamp_formatter=self.timestamp_formatter,
            )
            self._table_renderer = TableRenderer(self, display_renderer)
        return self._table_renderer

    def render(self, parts: Optional[Sequence[Node]]) -> str:
        """Render a sequence of parts to text.

        Parameters
        ----------
        parts : sequence of Node or None
            The attributed string; None and empty sequences render as ""

        Returns
        -------
        str
            Raw Org text

        Raises
        ------
        RenderingError
            If an unrecognized part is found and ``options.fail_on_unknown_parts`` is set

        """
        if not parts:
            return ""

        output: list[str] = []
        previous: Node | None = None
        for part in parts:
            text = self._render_part(part)
            if self.separate_blocks and isinstance(previous, (List, Table)):
                text = "\n" + text
            output.append(text)
            previous = part
        return "".join(output)

    def _render_part(self, part: Any) -> str:
        if not isinstance(part, PART_TYPES):
            return self.generic_visit(part)
        return part.accept(self)

    def visit_text(self, node: Text) -> str:
        """Render a Text part."""
        return node.content

    def visit_link(self, node: Link) -> str:
        """Render a Link part as ``[[uri][title]]`` or ``[[uri]]``."""
        if node.title:
            return f"[[{node.uri}][{node.title}]]"
        return f"[[{node.uri}]]"

    def visit_fraction_cookie(self, node: FractionCookie) -> str:
        """Render a FractionCookie part as ``[n/d]``."""
        return f"[{_cookie_value(node.numerator)}/{_cookie_value(node.denominator)}]"

    def visit_percentage_cookie(self, node: PercentageCookie) -> str:
        """Render a PercentageCookie part as ``[p%]``."""
        return f"[{_cookie_value(node.percentage)}%]"

    def visit_table(self, node: Table) -> str:
        """Render an embedded table."""
        return self.table_renderer.render(node)

    def visit_list(self, node: List) -> str:
        """Render an embedded list."""
        return self.list_renderer.render(node)

    def visit_inline_timestamp(self, node: InlineTimestamp) -> str:
        """Render a timestamp or a ``first--second`` range."""
        text = self.timestamp_formatter(node.first_timestamp)
        if node.second_timestamp is not None:
            text += TIMESTAMP_RANGE_SEPARATOR + self.timestamp_formatter(node.second_timestamp)
        return text

    def visit_bare_link(self, node: BareLink) -> str:
        """Render a bare URL, e-mail address or phone number."""
        return node.content

    def generic_visit(self, node: Any) -> str:
        """Replace an unrecognized part with empty text and report it.

        Parameters
        ----------
        node : Any
            The unrecognized part

        Returns
        -------
        str
            Always ""

        Raises
        ------
        RenderingError
            If ``options.fail_on_unknown_parts`` is set

        """
        part_type = node.part_type if isinstance(node, UnrecognizedPart) else type(node).__name__
        message = f"Unknown attributed string part type: {part_type}"
        if self.options.fail_on_unknown_parts:
            raise RenderingError(message, rendering_stage="attributed_text")

        self._emit_diagnostic("unknown_part", message, part_type=part_type, renderer=type(self).__name__)
        return ""


class DisplayTextRenderer(AttributedTextRenderer):
    """Render attributed strings the way Org displays them.

    Used for table column widths: links collapse to their title (or their URI
    when untitled) and nested tables disappear. Every other part keeps its raw
    text.

    """

    separate_blocks = False

    def visit_link(self, node: Link) -> str:
        """Render a Link part as its title, or its URI when untitled."""
        return node.title or node.uri

    def visit_table(self, node: Table) -> str:
        """Nested tables take no display width."""
        return ""


__all__ = ["AttributedTextRenderer", "DisplayTextRenderer"]
