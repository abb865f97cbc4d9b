"""Terminal text helpers."""

from __future__ import annotations

from datetime import UTC, datetime

from rich.cells import cell_len, get_character_cell_size

from ghprojects import pluralize

ELLIPSIS = "..."
MIN_WIDTH_FOR_ELLIPSIS = len(ELLIPSIS) + 2


def truncate(max_width: int, text: str) -> str:
    """Shorten *text* to at most *max_width* display cells.

    An ellipsis is only added when at least two characters of *text* still
    fit; a wide character that no longer fits is replaced by a space.
    """
    if cell_len(text) <= max_width:
        return text

    tail = ELLIPSIS if max_width >= MIN_WIDTH_FOR_ELLIPSIS else ""
    limit = max_width - len(tail)
    head: list[str] = []
    width = 0
    for char in text:
        size = get_character_cell_size(char)
        if width + size > limit:
            break
        head.append(char)
        width += size

    result = "".join(head) + tail
    if cell_len(result) < max_width:
        result += " "
    return result


def ago(then: datetime, now: datetime | None = None) -> str:
    """Describe how long ago *then* was, e.g. ``"about 3 days ago"``."""
    now = now or datetime.now(UTC)
    if then.tzinfo is None:
        then = then.replace(tzinfo=UTC)
    seconds = (now - then).total_seconds()
    hours = int(seconds // 3600)

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        approx = pluralize(int(seconds // 60), "minute")
    elif hours < 24:
        approx = pluralize(hours, "hour")
    elif hours < 30 * 24:
        approx = pluralize(hours // 24, "day")
    elif hours < 365 * 24:
        approx = pluralize(hours // 24 // 30, "month")
    else:
        approx = pluralize(hours // 24 // 365, "year")
    return f"about {approx} ago"
