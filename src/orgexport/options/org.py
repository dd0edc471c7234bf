#  Copyright (c) 2025 Tom Villani, Ph.D.

# orgexport/options/org.py
"""Configuration options for Org-Mode rendering.

This module defines options for serializing the Org document model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orgexport.constants import DEFAULT_DONT_INDENT
from orgexport.options.base import BaseRendererOptions


@dataclass(frozen=True)
class OrgRendererOptions(BaseRendererOptions):
    """Configuration options for model-to-Org-Mode rendering.

    Parameters
    ----------
    dont_indent : bool, default False
        Write PROPERTIES and LOGBOOK drawers flush left instead of indenting
        them by ``nesting_level + 1`` spaces. The planning line and the body
        are never affected.

    Notes
    -----
    **Drawer indentation:**
        With the default, a drawer under a level-2 heading is written as::

            ** Heading
               :PROPERTIES:
               :ID: 42
               :END:

        With ``dont_indent=True`` the drawer lines start in column 0.

    Examples
    --------
        >>> options = OrgRendererOptions(dont_indent=True)
        >>> strict = options.create_updated(fail_on_unknown_parts=True)

    """

    dont_indent: bool = field(
        default=DEFAULT_DONT_INDENT,
        metadata={
            "help": "Write PROPERTIES and LOGBOOK drawers without indentation",
            "cli_name": "dont-indent",
            "importance": "core",
        },
    )
