"""Display helpers for lookup results."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from .config import DISPLAY_TIMEZONE


def display(value: object) -> str:
    """Render a possibly-missing API value; None becomes '-'."""
    return "-" if value is None else str(value)


def _parse_iso(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_last_seen(
    iso_string: str | None,
    now: datetime | None = None,
    tz_name: str = DISPLAY_TIMEZONE,
) -> str:
    """Format a last-seen timestamp as local time plus its age.

    e.g. "19/10/2026, 14:05:03 (12m ago)" or "... (3h ago)". Empty input
    gives "N/A"; anything unparseable is returned unchanged.
    """
    if not iso_string:
        return "N/A"
    try:
        seen = _parse_iso(iso_string)
    except (AttributeError, TypeError, ValueError):
        return str(iso_string)

    if now is None:
        now = datetime.now(timezone.utc)

    local = seen.astimezone(ZoneInfo(tz_name)).strftime("%d/%m/%Y, %H:%M:%S")
    mins = int((now - seen).total_seconds() // 60)
    if mins < 60:
        return f"{local} ({mins}m ago)"
    return f"{local} ({mins // 60}h ago)"
