"""Dashboard insights: streaks, dominant mood, trend direction."""

import math
from collections import Counter
from collections.abc import Sequence
from datetime import date, timedelta, tzinfo
from typing import Optional

import numpy as np

from shared_types import MoodLabel, TrendDirection

from .aggregate import flatten_labels
from .calendar import local_date
from .models import MoodEntry, MoodStatistics, SeriesPoint
from .sentiment import SENTIMENT_TABLE, average_sentiment, to_label

TREND_THRESHOLD = 0.05  # sentiment units per day

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _logged_days(entries: Sequence[MoodEntry], tz: Optional[tzinfo]) -> set[date]:
    return {local_date(e.timestamp, tz) for e in entries}


def current_streak(entries: Sequence[MoodEntry], today: date, tz: Optional[tzinfo] = None) -> int:
    """Consecutive logged days ending on ``today`` (0 if today is empty)."""
    days = _logged_days(entries, tz)
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(entries: Sequence[MoodEntry], tz: Optional[tzinfo] = None) -> int:
    days = sorted(_logged_days(entries, tz))
    best = run = 0
    prev = None
    for day in days:
        run = run + 1 if prev is not None and day - prev == timedelta(days=1) else 1
        best = max(best, run)
        prev = day
    return best


def dominant_mood(entries: Sequence[MoodEntry]) -> Optional[MoodLabel]:
    """Most frequent known label; ties broken by table order."""
    counts = Counter(
        label for label in (to_label(raw) for raw in flatten_labels(entries)) if label is not None
    )
    if not counts:
        return None
    order = {label: i for i, (label, _) in enumerate(SENTIMENT_TABLE)}
    return min(counts, key=lambda label: (-counts[label], order[label]))


def positive_percent(entries: Sequence[MoodEntry]) -> int:
    """Average sentiment rescaled to 0-100 (50 = neutral), halves rounded up."""
    avg = average_sentiment(flatten_labels(entries))
    return math.floor((avg + 1) / 2 * 100 + 0.5)


def average_intensity(entries: Sequence[MoodEntry]) -> float:
    if not entries:
        return 0.0
    return sum(e.intensity for e in entries) / len(entries)


def weekly_trend(series: Sequence[SeriesPoint], threshold: float = TREND_THRESHOLD) -> TrendDirection:
    """Direction of the least squares slope over observed days.

    Gap-filled points are ignored so inferred values cannot create a trend.
    """
    observed = [(i, p.value) for i, p in enumerate(series) if p.observed]
    if len(observed) < 2:
        return TrendDirection.STABLE

    x = np.array([i for i, _ in observed], dtype=float)
    y = np.array([v for _, v in observed], dtype=float)
    slope = float(np.polyfit(x, y, 1)[0])

    if slope > threshold:
        return TrendDirection.IMPROVING
    if slope < -threshold:
        return TrendDirection.DECLINING
    return TrendDirection.STABLE


def weekly_rhythm(entries: Sequence[MoodEntry], tz: Optional[tzinfo] = None) -> dict[str, Optional[float]]:
    """Average sentiment per weekday, None where nothing was logged."""
    by_weekday: dict[int, list[str]] = {i: [] for i in range(7)}
    for entry in entries:
        by_weekday[local_date(entry.timestamp, tz).weekday()].extend(entry.labels)

    return {
        name: round(average_sentiment(by_weekday[i]), 3) if by_weekday[i] else None
        for i, name in enumerate(WEEKDAYS)
    }


def summarize(
    entries: Sequence[MoodEntry],
    series: Sequence[SeriesPoint],
    today: date,
    tz: Optional[tzinfo] = None,
    threshold: float = TREND_THRESHOLD,
) -> MoodStatistics:
    """Bundle all insights for one user's entries.

    Args:
        entries: All entries to summarize
        series: Chart window used for the trend direction
        today: Reference day for the current streak
        tz: Zone used to assign entries to calendar days
        threshold: Minimum slope per day for a non-stable trend
    """
    return MoodStatistics(
        total_entries=len(entries),
        current_streak=current_streak(entries, today, tz),
        longest_streak=longest_streak(entries, tz),
        dominant_mood=dominant_mood(entries),
        average_intensity=round(average_intensity(entries), 1),
        positive_percent=positive_percent(entries),
        weekly_trend=weekly_trend(series, threshold),
        weekly_rhythm=weekly_rhythm(entries, tz),
    )
