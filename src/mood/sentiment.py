"""Weather-label sentiment mapping.

One canonical table keyed by MoodLabel. Legacy glyphs and the extended
weather types are translated into canonical labels before lookup, so there
is never a second table to drift out of sync.
"""

import math
from collections.abc import Iterable
from typing import Optional, Union

import structlog

from shared_types import MoodLabel

logger = structlog.get_logger()

# Ordered: iteration order is the tie-break order for closest_label
SENTIMENT_TABLE: tuple[tuple[MoodLabel, float], ...] = (
    (MoodLabel.SUNNY, 1.0),
    (MoodLabel.PARTLY, 0.5),
    (MoodLabel.CLOUDY, 0.0),
    (MoodLabel.RAINY, -0.5),
    (MoodLabel.STORMY, -0.8),
)

_VALUES = dict(SENTIMENT_TABLE)

NEUTRAL_LABEL = MoodLabel.CLOUDY

_VARIATION_SELECTOR = "\ufe0f"

_GLYPHS = {
    MoodLabel.SUNNY: "☀️",
    MoodLabel.PARTLY: "⛅",
    MoodLabel.CLOUDY: "☁️",
    MoodLabel.RAINY: "🌧️",
    MoodLabel.STORMY: "⛈️",
}

# Legacy representations -> canonical label (nearest canonical value of the
# old glyph scalar)
_LEGACY = {
    "rainbow": MoodLabel.SUNNY,
    "🌈": MoodLabel.SUNNY,
    "moon": MoodLabel.PARTLY,
    "🌙": MoodLabel.PARTLY,
    "lightning": MoodLabel.PARTLY,
    "⚡": MoodLabel.PARTLY,
    "snowy": MoodLabel.RAINY,
    "❄": MoodLabel.RAINY,
    "tornado": MoodLabel.STORMY,
    "🌪": MoodLabel.STORMY,
}

_DISPLAY = {
    MoodLabel.SUNNY: "Sunny & Energetic",
    MoodLabel.PARTLY: "Partly Cloudy",
    MoodLabel.CLOUDY: "Cloudy & Reflective",
    MoodLabel.RAINY: "Rainy & Melancholic",
    MoodLabel.STORMY: "Stormy & Intense",
}

MIXED_DISPLAY = "Mixed Feelings"


def _build_lookup() -> dict[str, MoodLabel]:
    lookup: dict[str, MoodLabel] = {}
    for label in MoodLabel:
        lookup[label.value] = label
        lookup[_GLYPHS[label].replace(_VARIATION_SELECTOR, "")] = label
    lookup.update(_LEGACY)
    return lookup


_LOOKUP = _build_lookup()


def normalize(raw: object) -> str:
    """Normalize a raw label for lookup/comparison."""
    return str(raw).strip().lower().replace(_VARIATION_SELECTOR, "")


def to_label(raw: Union[MoodLabel, str, None]) -> Optional[MoodLabel]:
    """Translate a label name, glyph or legacy weather type to a MoodLabel.

    Returns None for unknown input.
    """
    if raw is None:
        return None
    if isinstance(raw, MoodLabel):
        return raw
    return _LOOKUP.get(normalize(raw))


def sentiment_of(raw: Union[MoodLabel, str, None]) -> float:
    """Sentiment scalar in [-1, 1] for a label. Unknown labels are neutral."""
    label = to_label(raw)
    if label is None:
        logger.debug("unknown_mood_label", label=str(raw))
        return 0.0
    return _VALUES[label]


def average_sentiment(labels: Iterable[Union[MoodLabel, str]]) -> float:
    """Mean sentiment of a label list, 0.0 when empty."""
    values = sorted(sentiment_of(label) for label in labels)
    if not values:
        return 0.0
    return math.fsum(values) / len(values)


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def closest_label(value: float) -> MoodLabel:
    """Label whose table value is nearest to ``value``.

    Ties go to the earlier label in SENTIMENT_TABLE. Values outside
    [-1, 1] resolve to the nearest end of the table; NaN resolves to the
    neutral label.
    """
    if math.isnan(value):
        return NEUTRAL_LABEL
    value = clamp(value)

    closest = NEUTRAL_LABEL
    min_dist = math.inf
    for label, table_value in SENTIMENT_TABLE:
        dist = abs(table_value - value)
        if dist < min_dist:
            min_dist = dist
            closest = label
    return closest


def display_label(raw: Union[MoodLabel, str, None]) -> str:
    """Human-readable mood text, e.g. "Stormy & Intense"."""
    label = to_label(raw)
    if label is None:
        return MIXED_DISPLAY
    return _DISPLAY[label]


def glyph_for(raw: Union[MoodLabel, str, None]) -> str:
    """Canonical weather glyph for a label, cloud for unknown."""
    label = to_label(raw) or NEUTRAL_LABEL
    return _GLYPHS[label]
