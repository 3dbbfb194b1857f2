"""Calendar helpers for schedule queries.

Schedule dates are plain ``YYYY-MM-DD`` strings throughout the pipeline;
tip-off times arrive from the feed as UTC ISO timestamps and are displayed
in US Eastern time, which is how the league publishes its schedule.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import pytz

EASTERN = pytz.timezone("America/New_York")
DATE_FORMAT = "%Y-%m-%d"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp with optional ``Z`` suffix and fractional seconds."""
    cleaned = str(value).strip().replace("Z", "+00:00")
    if "." in cleaned:
        head, _, tail = cleaned.partition(".")
        offset = ""
        for sep in ("+", "-"):
            if sep in tail:
                offset = sep + tail.split(sep, 1)[1]
                break
        cleaned = head + offset
    return datetime.fromisoformat(cleaned)


def parse_date(date_str: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` date.

    A full ISO timestamp (``2026-02-16T00:00:00Z``) is accepted and reduced to
    its date; any other trailing text raises ValueError.
    """
    text = str(date_str).strip()
    if len(text) > 10:
        if text[10] not in ("T", " "):
            raise ValueError(f"Not a date: {text!r}")
        parse_timestamp(text)
    return datetime.strptime(text[:10], DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def shift_date(date_str: str, days: int) -> str:
    """Move a schedule date by ``days`` (negative walks backwards)."""
    return format_date(parse_date(date_str) + timedelta(days=days))


def today_eastern(now: Optional[datetime] = None) -> str:
    """Current schedule date in US Eastern time."""
    moment = now or datetime.now(pytz.utc)
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return format_date(moment.astimezone(EASTERN).date())


def format_game_time_et(utc_datetime_str: Optional[str]) -> str:
    """
    Convert a UTC tip-off timestamp to a display string like ``7:00 PM ET``.

    Args:
        utc_datetime_str: ISO timestamp, e.g. ``2026-02-20T00:00:00.000Z``

    Returns:
        Eastern-time display string, or ``TBD`` if missing/unparseable
    """
    if not utc_datetime_str:
        return "TBD"
    try:
        moment = parse_timestamp(utc_datetime_str)
    except ValueError:
        return "TBD"

    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    local = moment.astimezone(EASTERN)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix} ET"
