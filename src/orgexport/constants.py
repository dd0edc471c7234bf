#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the orgexport library.

This module centralizes the literal types, markers and default configuration
values used by the Org-Mode serializer.

Constants are organized by category:
1. Type Definitions - Literal types for the closed sets in the document model
2. Org Syntax Markers - Fixed pieces of Org-Mode syntax emitted by the renderers
3. Renderer Defaults - Default values for renderer options
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

CheckboxState = Literal["checked", "unchecked", "partial"]
BareLinkKind = Literal["url", "www-url", "e-mail", "phone-number"]
PlanningKind = Literal["SCHEDULED", "DEADLINE", "CLOSED", "TIMESTAMP"]
DiagnosticEventType = Literal["unknown_part"]

CHECKBOX_STATES: tuple[CheckboxState, ...] = ("checked", "unchecked", "partial")
BARE_LINK_KINDS: tuple[BareLinkKind, ...] = ("url", "www-url", "e-mail", "phone-number")

# =============================================================================
# Org Syntax Markers
# =============================================================================

HEADING_MARKER = "*"
TAG_SEPARATOR = ":"

CHECKBOX_GLYPHS: dict[CheckboxState, str] = {
    "checked": "[X]",
    "unchecked": "[ ]",
    "partial": "[-]",
}

# Two spaces under a list item, one more when the bullet is a star so the
# indented lines cannot be read as headings.
LIST_CONTENT_INDENT = "  "
STAR_BULLET_EXTRA_INDENT = " "
STAR_BULLET = "*"

TABLE_CELL_SEPARATOR = " | "
TABLE_ROW_PREFIX = "| "
TABLE_ROW_SUFFIX = " |"
TABLE_SEPARATOR_EDGE = "|"
TABLE_SEPARATOR_JOIN = "+"
TABLE_SEPARATOR_FILL = "-"

TIMESTAMP_RANGE_SEPARATOR = "--"

PROPERTIES_DRAWER_START = ":PROPERTIES:"
LOGBOOK_DRAWER_START = ":LOGBOOK:"
DRAWER_END = ":END:"
CLOCK_PREFIX = "CLOCK: "
CLOCK_DURATION_SEPARATOR = " => "

# Planning items of this kind are plain active timestamps that live in the
# heading body, not on the planning line.
NON_PLANNING_KINDS: frozenset[str] = frozenset({"TIMESTAMP"})

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_DONT_INDENT = False
DEFAULT_FAIL_ON_UNKNOWN_PARTS = False
DEFAULT_BULLET_CHARACTER = "-"
DEFAULT_NUMBER_TERMINATOR = "."

# Serialization
SCHEMA_VERSION = 1
