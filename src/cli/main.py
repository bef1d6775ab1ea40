"""CLI entry point for mood-weather."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import add, calendar, day, export, stats, trend
from cli.config import load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Mood Weather - weather-metaphor mood journal insights."""
    try:
        config = load_config_model()
    except ValueError as e:
        click.echo(f"Config error: {e}", err=True)
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    setup_logging(json_mode=config.logging.json_mode, level=level, log_file=config.paths.log_file)


cli.add_command(add)
cli.add_command(day)
cli.add_command(trend)
cli.add_command(calendar)
cli.add_command(stats)
cli.add_command(export)


if __name__ == "__main__":
    cli()
