#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/timestamps.py
"""Default timestamp collaborators for the Org renderers.

The renderers never format timestamps themselves; they call three
replaceable functions. This module provides the defaults:

- :func:`render_timestamp` writes a :class:`~orgexport.ast.nodes.Timestamp`
  back as Org text.
- :func:`timestamp_duration` computes the ``=> H:MM`` sum of a CLOCK line.
- :func:`should_render_planning_item` decides which planning items belong on
  the planning line.

Embedders that keep timestamps in another representation can pass their own
callables (see :data:`TimestampFormatter`, :data:`DurationFormatter` and
:data:`PlanningFilter`) to any renderer.

"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from orgexport.ast.nodes import PlanningItem, Timestamp
from orgexport.constants import NON_PLANNING_KINDS

TimestampFormatter = Callable[[Timestamp], str]
DurationFormatter = Callable[[Timestamp, Timestamp], str]
PlanningFilter = Callable[[PlanningItem], bool]


def render_timestamp(timestamp: Timestamp) -> str:
    """Render a timestamp as Org text.

    Parameters
    ----------
    timestamp : Timestamp
        Timestamp to render

    Returns
    -------
    str
        Text such as ``<2019-08-02 Fri 10:00-11:30 +1w -2d>`` or
        ``[2019-08-02 Fri]``

    Examples
    --------
        >>> render_timestamp(Timestamp(year="2019", month="08", day="02", day_name="Fri"))
        '<2019-08-02 Fri>'

    """
    opening, closing = ("<", ">") if timestamp.is_active else ("[", "]")
    text = f"{opening}{timestamp.year}-{timestamp.month}-{timestamp.day}"
    if timestamp.day_name:
        text += f" {timestamp.day_name}"
    if timestamp.start_hour:
        text += f" {timestamp.start_hour}:{timestamp.start_minute}"
    if timestamp.end_hour:
        text += f"-{timestamp.end_hour}:{timestamp.end_minute}"
    if timestamp.repeater_type:
        text += f" {timestamp.repeater_type}{timestamp.repeater_value}{timestamp.repeater_unit}"
    if timestamp.delay_type:
        text += f" {timestamp.delay_type}{timestamp.delay_value}{timestamp.delay_unit}"
    return text + closing


def _timestamp_datetime(timestamp: Timestamp) -> datetime:
    return datetime(
        int(timestamp.year),
        int(timestamp.month),
        int(timestamp.day),
        int(timestamp.start_hour or 0),
        int(timestamp.start_minute or 0),
    )


def timestamp_duration(start: Timestamp, end: Timestamp) -> str:
    """Compute the clocked duration between two timestamps.

    The result uses the layout Emacs writes after ``=>`` on CLOCK lines:
    hours right-aligned to two characters, minutes zero-padded.

    Parameters
    ----------
    start : Timestamp
        Clock-in timestamp
    end : Timestamp
        Clock-out timestamp

    Returns
    -------
    str
        Duration such as ``" 1:05"`` or ``"12:30"``

    """
    total_minutes = int((_timestamp_datetime(end) - _timestamp_datetime(start)).total_seconds() // 60)
    sign = "-" if total_minutes < 0 else ""
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours}:{minutes:02d}".rjust(5)


def should_render_planning_item(planning_item: PlanningItem) -> bool:
    """Return whether a planning item belongs on the planning line.

    Plain active timestamps are attached to the heading by the parser but
    stay in the body text, so they are left off the planning line.

    Parameters
    ----------
    planning_item : PlanningItem
        Item to check

    Returns
    -------
    bool
        False for plain active timestamps, True for SCHEDULED, DEADLINE,
        CLOSED and any other kind

    """
    return planning_item.kind not in NON_PLANNING_KINDS


__all__ = [
    "DurationFormatter",
    "PlanningFilter",
    "TimestampFormatter",
    "render_timestamp",
    "should_render_planning_item",
    "timestamp_duration",
]
