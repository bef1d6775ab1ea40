"""Gap-filled daily sentiment series for trend charts."""

from collections.abc import Sequence
from typing import Optional

import structlog

from .aggregate import aggregate_day
from .models import DayBucket, SeriesPoint
from .sentiment import closest_label

logger = structlog.get_logger()


def fill_gaps(values: Sequence[Optional[float]]) -> list[float]:
    """Fill missing values from the nearest observed neighbours.

    Both neighbours found -> their simple mean (not distance weighted).
    Only one side found -> that value. Nothing observed -> 0.0.
    Neighbours are searched among the original observations only.
    """
    filled: list[float] = []
    for i, value in enumerate(values):
        if value is not None:
            filled.append(value)
            continue

        left = next((values[j] for j in range(i - 1, -1, -1) if values[j] is not None), None)
        right = next((values[j] for j in range(i + 1, len(values)) if values[j] is not None), None)

        if left is not None and right is not None:
            filled.append((left + right) / 2)
        elif left is not None:
            filled.append(left)
        elif right is not None:
            filled.append(right)
        else:
            filled.append(0.0)
    return filled


def build_series(days: Sequence[DayBucket]) -> list[SeriesPoint]:
    """Build one chart point per day bucket, in input order.

    ``days`` must be a gapless, ordered run of calendar days; resolving
    "today" or "last N days" is the caller's job.
    """
    summaries = [aggregate_day(day.entries) for day in days]
    filled = fill_gaps([s.sentiment for s in summaries])

    points = []
    for day, summary, value in zip(days, summaries, filled):
        observed = summary.sentiment is not None
        points.append(
            SeriesPoint(
                date=day.date,
                value=value,
                label=summary.label if observed else closest_label(value),
                observed=observed,
                is_mixed=summary.is_mixed,
                entry_count=len(day.entries),
            )
        )

    logger.debug(
        "series_built",
        days=len(points),
        observed=sum(1 for p in points if p.observed),
    )
    return points
