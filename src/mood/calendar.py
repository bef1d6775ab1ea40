"""Calendar-day bucketing of mood entries.

Resolves which local calendar day each entry belongs to and produces the
contiguous day windows the series builder expects.
"""

import calendar as _calendar
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from .models import DayBucket, MoodEntry

DEFAULT_WINDOW_DAYS = 7


def local_date(timestamp: datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar date of an instant in ``tz`` (system local zone if None).

    Naive timestamps are treated as already local.
    """
    if timestamp.tzinfo is None:
        return timestamp.date()
    return timestamp.astimezone(tz).date()


def day_range(start: date, end: date) -> list[date]:
    """Every date from start to end inclusive; empty if end < start."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def bucket_by_day(
    entries: Iterable[MoodEntry],
    start: date,
    end: date,
    tz: Optional[tzinfo] = None,
) -> list[DayBucket]:
    """One bucket per day in [start, end], entries sorted by timestamp."""
    grouped: dict[date, list[MoodEntry]] = defaultdict(list)
    for entry in entries:
        day = local_date(entry.timestamp, tz)
        if start <= day <= end:
            grouped[day].append(entry)

    return [
        DayBucket(date=day, entries=tuple(sorted(grouped.get(day, []), key=lambda e: e.timestamp.timestamp())))
        for day in day_range(start, end)
    ]


def last_n_days(
    entries: Iterable[MoodEntry],
    today: date,
    n: int = DEFAULT_WINDOW_DAYS,
    tz: Optional[tzinfo] = None,
) -> list[DayBucket]:
    """Window of ``n`` days ending on ``today`` inclusive."""
    if n <= 0:
        return []
    return bucket_by_day(entries, today - timedelta(days=n - 1), today, tz)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last = _calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def month_days(
    entries: Iterable[MoodEntry],
    year: int,
    month: int,
    tz: Optional[tzinfo] = None,
) -> list[DayBucket]:
    """Buckets for every day of a month (calendar grid)."""
    start, end = month_bounds(year, month)
    return bucket_by_day(entries, start, end, tz)


def entries_in_month(
    entries: Iterable[MoodEntry],
    year: int,
    month: int,
    tz: Optional[tzinfo] = None,
) -> list[MoodEntry]:
    start, end = month_bounds(year, month)
    return [e for e in entries if start <= local_date(e.timestamp, tz) <= end]
