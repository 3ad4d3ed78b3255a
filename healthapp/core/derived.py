"""
Derived display and status fields.

Everything here is a pure function of its arguments: nothing is mutated and
"today"/"now" can be injected so results are reproducible. Malformed input
raises ValidationFailure so callers can surface it like any other form error.
"""

import math
import re
from datetime import date, datetime, timedelta, timezone

from healthapp.errors import ValidationFailure

EVERYDAY = "everyday"
WEEK = "week"
CUSTOM = "custom"
DURATION_TYPES = (EVERYDAY, WEEK, CUSTOM)

UPCOMING_WINDOW_DAYS = 30
WEEK_DAYS = 7

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_date(value, field="date"):
    """Parse a strict ``YYYY-MM-DD`` string."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationFailure(field, f"Invalid date for {field}: {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationFailure(field, f"Invalid date for {field}: {value!r}")


def parse_time(value, field="time"):
    """Parse a strict 24h ``HH:MM`` string into ``(hour, minute)``."""
    m = _TIME_RE.match(value) if isinstance(value, str) else None
    if not m:
        raise ValidationFailure(field, f"Invalid time for {field}: {value!r}")
    return int(m.group(1)), int(m.group(2))


def parse_timestamp(value, field="timestamp"):
    """Parse an ISO date or datetime; ``Z`` is accepted as UTC, naive values are UTC."""
    if isinstance(value, str) and _DATE_RE.match(value):
        d = parse_date(value, field)
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        raise ValidationFailure(field, f"Invalid timestamp for {field}: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _today(today):
    return today if today is not None else date.today()


def compute_end_date(duration_type, start_date, explicit_end_date=""):
    if duration_type == EVERYDAY:
        return ""
    if duration_type == WEEK:
        start = parse_date(start_date, "startDate")
        return (start + timedelta(days=WEEK_DAYS)).isoformat()
    if duration_type == CUSTOM:
        return explicit_end_date
    raise ValidationFailure("durationType", f"Unknown duration type: {duration_type!r}")


def days_until(target_date, today=None):
    return (parse_date(target_date, "date") - _today(today)).days


def is_overdue(target_date, today=None):
    """True when the date is set and strictly before today. Today itself is not overdue."""
    if not target_date:
        return False
    return days_until(target_date, today) < 0


def is_upcoming(target_date, today=None):
    """True when the date falls within the next 30 days, today excluded."""
    if not target_date:
        return False
    return 0 < days_until(target_date, today) <= UPCOMING_WINDOW_DAYS


def format_display_date(value, pattern="long"):
    """
    Render a stored ISO date/datetime for display.

    Patterns (en-US):
      long  -> "June 1, 2024"
      full  -> "Saturday, June 1, 2024"
      short -> "6/1/2024"
    """
    if not value:
        return ""
    d = parse_timestamp(value, "date").date()
    if pattern == "long":
        return f"{d:%B} {d.day}, {d.year}"
    if pattern == "full":
        return f"{d:%A}, {d:%B} {d.day}, {d.year}"
    if pattern == "short":
        return f"{d.month}/{d.day}/{d.year}"
    raise ValueError(f"Unknown date pattern: {pattern}")


def format_display_time(hhmm):
    """``"14:05"`` -> ``"2:05 PM"``."""
    if not hhmm:
        return ""
    hour, minute = parse_time(hhmm)
    suffix = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def relative_day_label(value, now=None):
    """
    "Today", "Yesterday", "<n> days ago" or a short date.

    Elapsed time is rounded up to whole days, so anything more than zero
    seconds and up to one day reads "Yesterday".
    """
    then = parse_timestamp(value, "date")
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = abs((now - then).total_seconds())
    diff_days = math.ceil(elapsed / 86400)

    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"
    return format_display_date(value, "short")


def duration_text(duration_type, start_date, end_date):
    if duration_type == EVERYDAY:
        return "Everyday (Ongoing)"
    if duration_type == WEEK:
        return f"For One Week (until {format_display_date(end_date, 'short')})"
    return f"{format_display_date(start_date, 'short')} - {format_display_date(end_date, 'short')}"
