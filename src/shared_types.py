"""Shared enums and types for mood-weather."""

from enum import StrEnum


class MoodLabel(StrEnum):
    """Weather mood labels, in canonical table order."""

    SUNNY = "sunny"
    PARTLY = "partly"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    STORMY = "stormy"


class TrendDirection(StrEnum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
