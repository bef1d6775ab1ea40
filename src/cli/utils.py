"""Shared CLI utilities."""

import sys
from datetime import datetime

import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components():
    """Load config and build the entry store.

    Exits with a readable message on config errors.
    """
    from cli.config import get_timezone, load_config_model
    from mood.storage import MoodStore

    try:
        config = load_config_model()
        tz = get_timezone(config)
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    return {
        "config": config,
        "tz": tz,
        "store": MoodStore(config.paths.entries_file),
    }


def today_in(tz):
    """Current calendar date in the configured zone."""
    return datetime.now(tz).date()
