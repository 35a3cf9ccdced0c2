"""Day-granular date/time helpers (day, week, month, quarter, year boundaries)."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo

_TICK = timedelta(microseconds=1)


def start_of_day(dt: datetime) -> datetime:
    """00:00:00 of the day, keeping tzinfo."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt: datetime) -> datetime:
    """23:59:59.999999 of the day."""
    return add_days(start_of_day(dt), 1) - _TICK


def add_days(dt: datetime, days: int) -> datetime:
    return dt + timedelta(days=days)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(dt: datetime, months: int) -> datetime:
    """Shift by whole months; the day is clamped to the target month's length."""
    total = dt.month - 1 + months
    year = dt.year + total // 12
    month = total % 12 + 1
    day = min(dt.day, days_in_month(year, month))
    return dt.replace(year=year, month=month, day=day)


def start_of_week(dt: datetime, first_weekday: int = calendar.MONDAY) -> datetime:
    sd = start_of_day(dt)
    delta = (7 + sd.weekday() - first_weekday) % 7
    return sd - timedelta(days=delta)


def end_of_week(dt: datetime, first_weekday: int = calendar.MONDAY) -> datetime:
    return start_of_week(dt, first_weekday) + timedelta(days=7) - _TICK


def start_of_month(dt: datetime) -> datetime:
    return start_of_day(dt).replace(day=1)


def end_of_month(dt: datetime) -> datetime:
    return add_months(start_of_month(dt), 1) - _TICK


def start_of_quarter(dt: datetime) -> datetime:
    # 1/4/7/10
    month = (dt.month - 1) // 3 * 3 + 1
    return start_of_day(dt).replace(month=month, day=1)


def end_of_quarter(dt: datetime) -> datetime:
    return add_months(start_of_quarter(dt), 3) - _TICK


def start_of_year(dt: datetime) -> datetime:
    return start_of_day(dt).replace(month=1, day=1)


def end_of_year(dt: datetime) -> datetime:
    return start_of_year(dt).replace(year=dt.year + 1) - _TICK


def week_range(dt: datetime, first_weekday: int = calendar.MONDAY) -> tuple[datetime, datetime]:
    return start_of_week(dt, first_weekday), end_of_week(dt, first_weekday)


def month_range(dt: datetime) -> tuple[datetime, datetime]:
    return start_of_month(dt), end_of_month(dt)


def quarter_range(dt: datetime) -> tuple[datetime, datetime]:
    return start_of_quarter(dt), end_of_quarter(dt)


def year_range(dt: datetime) -> tuple[datetime, datetime]:
    return start_of_year(dt), end_of_year(dt)


def diff_days(a: date, b: date) -> int:
    """
    Signed number of calendar days from a to b (b - a).

    Datetimes are compared by their own local calendar day, so a DST jump
    between the two never changes the result.
    """
    da = a.date() if isinstance(a, datetime) else a
    db = b.date() if isinstance(b, datetime) else b
    return (db - da).days


def diff_hours(a: datetime, b: datetime) -> int:
    """Whole hours elapsed from a to b, truncated toward zero."""
    return int((b - a) / timedelta(hours=1))


def is_same_day(a: date, b: date) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def is_weekend(dt: date) -> bool:
    return dt.weekday() >= calendar.SATURDAY


def next_weekday(dt: datetime, weekday: int) -> datetime:
    """Next given weekday strictly after dt's day, at 00:00."""
    sd = start_of_day(dt)
    delta = (7 + weekday - sd.weekday()) % 7
    if delta == 0:
        delta = 7
    return sd + timedelta(days=delta)


def truncate_to_hour(dt: datetime) -> datetime:
    return dt.replace(minute=0, second=0, microsecond=0)


def format_rfc3339(dt: datetime) -> str:
    """RFC 3339 needs an offset, so naive datetimes are rejected."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(f"RFC 3339 formatting needs an aware datetime: {dt!r}")
    return dt.isoformat(timespec="seconds")


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp; a trailing 'Z' means UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        raise ValueError(f"RFC 3339 timestamp needs an offset: {value!r}")
    return dt


def to_local(dt: datetime, tz: tzinfo) -> datetime:
    """Same instant, shown in tz."""
    return dt.astimezone(tz)
