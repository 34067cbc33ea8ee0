from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.constants import MINUTES_PER_DAY


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: str) -> time:
    """Parse 'HH:MM' or 'HH:MM:SS' into a time."""
    value = value.strip()
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def to_minutes(value: str) -> int:
    """'HH:MM' -> minutes since midnight."""
    t = parse_time_of_day(value)
    return t.hour * 60 + t.minute


def format_time_of_day(value: time) -> str:
    """'HH:MM', or 'HH:MM:SS' when seconds are set."""
    return value.strftime("%H:%M:%S" if value.second else "%H:%M")


def minutes_on(day: date, mins: int) -> datetime:
    """Naive local datetime for a minute-of-day on the given date."""
    if not 0 <= mins <= MINUTES_PER_DAY:
        raise ValueError(f"Minute of day out of range: {mins}")
    return datetime.combine(day, time()) + timedelta(minutes=mins)


def minute_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def to_local_naive(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def parse_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 instant, returning None when missing or invalid."""
    if not value:
        return None
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return to_local_naive(datetime.fromisoformat(value))
    except ValueError:
        return None


def isoformat_local(moment: datetime) -> str:
    """ISO string with the local UTC offset attached."""
    return moment.astimezone().isoformat()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
