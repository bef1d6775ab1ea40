"""Data models for mood entries, day summaries and chart series."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from shared_types import MoodLabel, TrendDirection


@dataclass(frozen=True)
class MoodEntry:
    """One logged moment. Owned by the entry store, read-only everywhere else."""

    id: str
    timestamp: datetime
    labels: tuple[str, ...] = ()
    intensity: int = 50
    note: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MoodEntry":
        """Build an entry from a stored/backend record.

        Accepts either ``emojis`` (backend field name) or ``labels``.
        Raises ValueError on a missing or unparseable timestamp.
        """
        raw_ts = data.get("timestamp")
        if not raw_ts:
            raise ValueError("entry has no timestamp")
        if isinstance(raw_ts, datetime):
            ts = raw_ts
        else:
            ts = datetime.fromisoformat(str(raw_ts).replace("Z", "+00:00"))

        labels = data.get("emojis", data.get("labels")) or []
        if isinstance(labels, str):
            labels = [labels]

        return cls(
            id=str(data.get("id", "")),
            timestamp=ts,
            labels=tuple(str(label) for label in labels),
            intensity=int(data.get("intensity", 50)),
            note=data.get("note") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "emojis": list(self.labels),
            "intensity": self.intensity,
            "note": self.note,
        }


@dataclass(frozen=True)
class DayBucket:
    """All entries whose timestamp falls on one calendar day."""

    date: date
    entries: tuple[MoodEntry, ...] = ()


@dataclass(frozen=True)
class DaySummary:
    sentiment: Optional[float]  # None = no observation that day
    label: MoodLabel
    is_mixed: bool = False


@dataclass(frozen=True)
class SeriesPoint:
    """One chart point. ``observed`` is False for gap-filled days."""

    date: date
    value: float
    label: MoodLabel
    observed: bool
    is_mixed: bool = False
    entry_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "value": self.value,
            "label": str(self.label),
            "observed": self.observed,
            "is_mixed": self.is_mixed,
            "entry_count": self.entry_count,
        }


@dataclass
class MoodStatistics:
    """Dashboard insight bundle."""

    total_entries: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    dominant_mood: Optional[MoodLabel] = None
    average_intensity: float = 0.0
    positive_percent: int = 50
    weekly_trend: TrendDirection = TrendDirection.STABLE
    weekly_rhythm: dict[str, Optional[float]] = field(default_factory=dict)
