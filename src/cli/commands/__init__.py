"""CLI command modules."""

from .export import export
from .mood import add, calendar, day, stats, trend

__all__ = [
    "add",
    "day",
    "trend",
    "calendar",
    "stats",
    "export",
]
