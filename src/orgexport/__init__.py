"""orgexport - lossless Org-Mode serialization.

orgexport turns a parsed Org-Mode document model back into Org text. A file
that is parsed and then exported comes back byte for byte, so edits made to
the model (toggling a checkbox, rescheduling a task, retagging a heading)
can be written back without disturbing the rest of the file.

The model is a tree of frozen dataclasses (see :mod:`orgexport.ast`) that a
parser builds, either directly or from JSON through
:mod:`orgexport.ast.serialization`. Rendering is pure and synchronous.

Features
--------
- Headings with TODO keywords, tags, planning lines, property and logbook drawers
- Inline links, statistics cookies, timestamps and bare URLs
- Plain lists with checkboxes and ``[@N]`` counters
- Pipe tables aligned by displayed width
- Replaceable timestamp, duration and planning collaborators
- Diagnostics for unrecognized inline parts

Requirements
------------
- Python 3.10+

Examples
--------
Render a document:

    >>> from orgexport import export_org
    >>> from orgexport.ast import Document, Header, TitleLine
    >>> doc = Document(headers=[
    ...     Header(nesting_level=1, title_line=TitleLine(raw_title="Groceries", todo_keyword="TODO", tags=["home"]))
    ... ])
    >>> export_org(doc)
    '* TODO Groceries:home:\\n'

Collect diagnostics instead of logging them:

    >>> events = []
    >>> text = export_org(doc, diagnostic_callback=events.append)

See Also
--------
orgexport.ast : Document model
orgexport.renderers : Renderer classes

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "orgexport requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from orgexport import ast
from orgexport.api import (
    attributed_string_to_raw_text,
    create_raw_description_text,
    export_org,
    generate_title_line,
)
from orgexport.diagnostics import DiagnosticCallback, DiagnosticEvent
from orgexport.exceptions import InvalidOptionsError, OrgExportError, RenderingError, ValidationError
from orgexport.options.base import BaseRendererOptions
from orgexport.options.org import OrgRendererOptions
from orgexport.timestamps import render_timestamp, should_render_planning_item, timestamp_duration

__all__ = [
    "__version__",
    # Export functions
    "export_org",
    "create_raw_description_text",
    "attributed_string_to_raw_text",
    "generate_title_line",
    # Default collaborators
    "render_timestamp",
    "timestamp_duration",
    "should_render_planning_item",
    # Diagnostics
    "DiagnosticCallback",
    "DiagnosticEvent",
    # Options
    "BaseRendererOptions",
    "OrgRendererOptions",
    # Exceptions
    "OrgExportError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    # AST module
    "ast",
]
