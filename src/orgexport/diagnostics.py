#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/diagnostics.py
"""Diagnostic callback system for Org rendering.

Rendering never aborts on input it does not understand. Instead, renderers
emit a DiagnosticEvent to a callback injected by the embedder, and substitute
empty text for the offending construct.

Examples
--------
Collecting diagnostics during an export:

    >>> from orgexport import export_org
    >>> from orgexport.diagnostics import DiagnosticEvent
    >>>
    >>> events: list[DiagnosticEvent] = []
    >>> text = export_org(document, diagnostic_callback=events.append)
    >>> for event in events:
    ...     print(event)

When no callback is injected, the event is logged as a warning on the
``orgexport.renderers`` loggers instead.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from orgexport.constants import DiagnosticEventType


@dataclass
class DiagnosticEvent:
    """Diagnostic event emitted while rendering.

    Parameters
    ----------
    event_type : DiagnosticEventType
        Type of diagnostic:

        - "unknown_part": An attributed-string part of an unrecognized type
            was replaced by empty text. ``metadata["part_type"]`` names it.

    message : str
        Human-readable description of the event
    metadata : dict, default empty
        Additional event-specific information

    Examples
    --------
        >>> event = DiagnosticEvent(
        ...     "unknown_part",
        ...     "Unknown attributed string part type: inline-markup",
        ...     metadata={"part_type": "inline-markup", "renderer": "AttributedTextRenderer"},
        ... )

    """

    event_type: DiagnosticEventType
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation.

        Returns
        -------
        str
            Formatted event description

        """
        return f"[{self.event_type.upper()}] {self.message}"


DiagnosticCallback = Callable[[DiagnosticEvent], None]
"""Type alias for diagnostic callback functions.

A diagnostic callback is any callable that accepts a DiagnosticEvent and
returns None. Callbacks should not raise; if one does, the exception is
logged and rendering continues.
"""


__all__ = ["DiagnosticEvent", "DiagnosticCallback"]
