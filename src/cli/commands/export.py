"""Trend series export command."""

from pathlib import Path

import click
from rich.console import Console

from cli.utils import get_components, today_in
from mood.calendar import last_n_days
from mood.export import SeriesExporter
from mood.series import build_series
from mood.storage import MoodStoreError

console = Console()


@click.command()
@click.option("-f", "--format", "fmt", default="csv", type=click.Choice(["csv", "json"]))
@click.option("-d", "--days", type=int, default=30, help="Window length in days")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Output file")
def export(fmt: str, days: int, output: Path | None):
    """Export the gap-filled mood series."""
    c = get_components()
    tz = c["tz"]
    if days < 1:
        raise click.BadParameter("days must be at least 1")

    try:
        entries = c["store"].list_entries()
    except MoodStoreError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    today = today_in(tz)
    series = build_series(last_n_days(entries, today, days, tz))

    if output is None:
        output = c["config"].paths.export_dir / f"mood_export_{today.isoformat()}.{fmt}"

    exporter = SeriesExporter()
    if fmt == "json":
        count = exporter.export_json(series, output)
    else:
        count = exporter.export_csv(series, output)

    console.print(f"[green]Exported {count} days to[/] {output}")
