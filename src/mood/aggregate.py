"""Collapse one calendar day of mood entries into a single summary."""

from collections.abc import Iterable

from .models import DaySummary, MoodEntry
from .sentiment import NEUTRAL_LABEL, average_sentiment, clamp, closest_label, normalize, to_label


def flatten_labels(entries: Iterable[MoodEntry]) -> list[str]:
    """All labels of all entries; label-less entries contribute nothing."""
    return [label for entry in entries for label in (entry.labels or ())]


def _distinct_key(raw: str) -> str:
    label = to_label(raw)
    return label.value if label is not None else normalize(raw)


def aggregate_day(entries: Iterable[MoodEntry]) -> DaySummary:
    """Aggregate sentiment, representative label and mixed flag for a day.

    The caller supplies entries already filtered to the day; timestamps are
    never inspected. The label is the closest label to the mean sentiment,
    not a majority vote, so it always agrees with the plotted value.
    """
    labels = flatten_labels(entries)
    if not labels:
        return DaySummary(sentiment=None, label=NEUTRAL_LABEL, is_mixed=False)

    sentiment = clamp(average_sentiment(labels))
    distinct = {_distinct_key(raw) for raw in labels}

    return DaySummary(
        sentiment=sentiment,
        label=closest_label(sentiment),
        is_mixed=len(distinct) > 1,
    )
