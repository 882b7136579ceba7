"""
Pure text helpers shared by every console logger.

Nothing here touches logger state; each function maps its
arguments to a string and never raises for ordinary input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional

from repellent.call_site import CallSite
from repellent.log_category import LogCategory


def format_sequence(n: int, width: int = 3) -> str:
    return str(n).zfill(width)


def format_timestamp(now: Optional[datetime] = None, time_format: str = "%H:%M:%S") -> str:
    if now is None:
        now = datetime.now()
    return now.strftime(time_format)


def format_call_tag(
    call_site: CallSite,
    profile_mode: bool = False,
    root_marker: Optional[str] = None,
) -> str:
    """
    Render "[file.operation.line]", or "[file.operation]" in profile mode.
    """
    file_tag = call_site.file_tag(root_marker)
    if profile_mode:
        return f"[{file_tag}.{call_site.operation_tag}]"
    return f"[{file_tag}.{call_site.operation_tag}.{call_site.line}]"


def format_category_label(category: LogCategory) -> str:
    label = category.label
    return "" if label is None else f"{label} "


def display(item: Any) -> str:
    """
    Display string for an arbitrary value.

    Falls back to the default object representation when the
    value's own __str__ fails.
    """
    try:
        return str(item)
    except Exception:
        return object.__repr__(item)


def join_items(items: Iterable[Any]) -> str:
    return " ".join(display(item) for item in items)


def format_duration(milliseconds: float) -> str:
    return f"{milliseconds:.2f}"


def format_prefix(
    sequence: int,
    now: Optional[datetime] = None,
    width: int = 3,
    time_format: str = "%H:%M:%S",
) -> str:
    """Leading "<seq> | <HH:mm:ss> | " column of every log line."""
    return f"{format_sequence(sequence, width)} | {format_timestamp(now, time_format)} | "


def represent(item: Any) -> str:
    """Full developer representation of a value; never raises."""
    try:
        return repr(item)
    except Exception:
        return display(item)
