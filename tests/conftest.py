"""Shared test fixtures for mood-weather."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mood.models import DayBucket, MoodEntry  # noqa: E402

UTC = timezone.utc


def make_entry(labels, when=None, intensity=50, note=None, entry_id="e1"):
    """Build a MoodEntry; ``when`` defaults to noon UTC on 2024-03-10."""
    if isinstance(labels, str):
        labels = [labels]
    return MoodEntry(
        id=entry_id,
        timestamp=when or datetime(2024, 3, 10, 12, 0, tzinfo=UTC),
        labels=tuple(labels),
        intensity=intensity,
        note=note,
    )


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def week_start():
    return datetime(2024, 3, 4, 12, 0, tzinfo=UTC).date()


@pytest.fixture
def empty_week(week_start):
    """Seven consecutive empty day buckets."""
    return [DayBucket(date=week_start + timedelta(days=i)) for i in range(7)]


@pytest.fixture
def sample_entries():
    """A week of entries: three-day streak at the end, one gap day."""
    base = datetime(2024, 3, 10, 9, 0, tzinfo=UTC)
    return [
        make_entry(["sunny"], base, intensity=80, entry_id="a"),
        make_entry(["partly", "sunny"], base - timedelta(hours=2), intensity=60, entry_id="b"),
        make_entry(["cloudy"], base - timedelta(days=1), intensity=40, entry_id="c"),
        make_entry(["rainy"], base - timedelta(days=2), intensity=50, entry_id="d"),
        make_entry(["stormy", "rainy"], base - timedelta(days=4), intensity=90, entry_id="e"),
    ]
