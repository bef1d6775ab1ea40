from .aggregate import aggregate_day
from .models import DayBucket, DaySummary, MoodEntry, MoodStatistics, SeriesPoint
from .sentiment import closest_label, sentiment_of
from .series import build_series, fill_gaps
from .storage import MoodStore, MoodStoreError

__all__ = [
    "MoodEntry",
    "DayBucket",
    "DaySummary",
    "SeriesPoint",
    "MoodStatistics",
    "sentiment_of",
    "closest_label",
    "aggregate_day",
    "build_series",
    "fill_gaps",
    "MoodStore",
    "MoodStoreError",
]
