"""Mood entry and insight CLI commands."""

from datetime import date, datetime

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, today_in
from mood.aggregate import aggregate_day
from mood.calendar import bucket_by_day, last_n_days, month_days
from mood.sentiment import display_label, glyph_for
from mood.series import build_series
from mood.stats import summarize, weekly_trend
from mood.storage import MoodStoreError
from shared_types import MoodLabel

console = Console()

MOOD_COLOR = {
    MoodLabel.SUNNY: "yellow",
    MoodLabel.PARTLY: "white",
    MoodLabel.CLOUDY: "bright_black",
    MoodLabel.RAINY: "blue",
    MoodLabel.STORMY: "magenta",
}

MIXED_MARK = "🔀"


def _load_entries(c):
    try:
        return c["store"].list_entries()
    except MoodStoreError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)


def _parse_day(value: str | None, tz) -> date:
    if not value:
        return today_in(tz)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


def _bar(value: float, width: int = 10) -> str:
    filled = round((value + 1) / 2 * width)
    return "█" * filled + "░" * (width - filled)


@click.command()
@click.argument("labels", nargs=-1)
@click.option("-i", "--intensity", type=int, default=None, help="Intensity 0-100")
@click.option("-n", "--note", default=None, help="Optional note")
def add(labels: tuple[str, ...], intensity: int | None, note: str | None):
    """Log a mood entry, e.g. `add sunny partly` (default label when none given)."""
    c = get_components()
    if intensity is None:
        intensity = c["config"].entries.default_intensity
    if not labels:
        labels = (c["config"].entries.default_label.value,)
    try:
        entry = c["store"].add(list(labels), intensity=intensity, note=note)
    except (ValueError, MoodStoreError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    glyphs = " ".join(glyph_for(label) for label in entry.labels)
    console.print(f"[green]Logged:[/] {glyphs} ({entry.intensity}%)")


@click.command()
@click.argument("when", required=False)
def day(when: str | None):
    """Show the summary for one day (default today)."""
    c = get_components()
    target = _parse_day(when, c["tz"])
    bucket = bucket_by_day(_load_entries(c), target, target, c["tz"])[0]
    summary = aggregate_day(bucket.entries)

    if summary.sentiment is None:
        console.print(f"[yellow]No entries on {target.isoformat()}.[/]")
        return

    mixed = f" {MIXED_MARK} mixed" if summary.is_mixed else ""
    color = MOOD_COLOR[summary.label]
    console.print(
        f"[bold]{target.isoformat()}[/]  {glyph_for(summary.label)} "
        f"[{color}]{display_label(summary.label)}[/]  {summary.sentiment:+.2f}{mixed}"
    )

    table = Table(show_header=True)
    table.add_column("Time", style="dim")
    table.add_column("Mood")
    table.add_column("Intensity", justify="right")
    table.add_column("Note")
    for entry in bucket.entries:
        table.add_row(
            entry.timestamp.strftime("%H:%M"),
            " ".join(glyph_for(label) for label in entry.labels),
            f"{entry.intensity}%",
            (entry.note or "")[:40],
        )
    console.print(table)


@click.command()
@click.option("-d", "--days", type=int, default=None, help="Window length in days")
@click.option("--end", "end_day", default=None, help="Last day of the window (YYYY-MM-DD)")
def trend(days: int | None, end_day: str | None):
    """Show the gap-filled sentiment trend for the last N days."""
    c = get_components()
    if days is None:
        days = c["config"].chart.window_days
    if days < 1:
        raise click.BadParameter("days must be at least 1")
    end = _parse_day(end_day, c["tz"])

    series = build_series(last_n_days(_load_entries(c), end, days, c["tz"]))

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Trend")
    table.add_column("Score", justify="right")

    for point in series:
        style = MOOD_COLOR[point.label] if point.observed else "dim"
        icon = MIXED_MARK if point.is_mixed else glyph_for(point.label)
        source = "" if point.observed else " (inferred)"
        table.add_row(
            point.date.isoformat(),
            f"{icon} {point.label}{source}",
            f"[{style}]{_bar(point.value)}[/]",
            f"{point.value:+.2f}",
        )

    console.print(table)
    direction = weekly_trend(series, threshold=c["config"].chart.trend_threshold)
    console.print(f"\n[bold]Direction:[/] {direction}")


@click.command()
@click.option("-m", "--month", "month_str", default=None, help="Month as YYYY-MM (default current)")
def calendar(month_str: str | None):
    """Show a month of representative day moods."""
    c = get_components()
    if month_str:
        try:
            parsed = datetime.strptime(month_str, "%Y-%m")
        except ValueError:
            raise click.BadParameter(f"expected YYYY-MM, got {month_str!r}")
        year, month = parsed.year, parsed.month
    else:
        today = today_in(c["tz"])
        year, month = today.year, today.month

    buckets = month_days(_load_entries(c), year, month, c["tz"])

    table = Table(show_header=True, title=f"{year}-{month:02d}")
    for name in ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"):
        table.add_column(name, justify="center")

    row = [""] * buckets[0].date.weekday()
    for bucket in buckets:
        summary = aggregate_day(bucket.entries)
        if summary.sentiment is None:
            cell = f"[dim]{bucket.date.day}[/]"
        else:
            icon = MIXED_MARK if summary.is_mixed else glyph_for(summary.label)
            cell = f"{bucket.date.day} {icon}"
        row.append(cell)
        if len(row) == 7:
            table.add_row(*row)
            row = []
    if row:
        table.add_row(*(row + [""] * (7 - len(row))))

    console.print(table)


@click.command()
@click.option("-d", "--days", type=int, default=None, help="Trend window length in days")
def stats(days: int | None):
    """Show streaks, dominant mood and weekly rhythm."""
    c = get_components()
    tz = c["tz"]
    if days is None:
        days = c["config"].chart.window_days
    if days < 1:
        raise click.BadParameter("days must be at least 1")
    entries = _load_entries(c)

    if not entries:
        console.print("[yellow]No entries found. Log a mood with `add` first.[/]")
        return

    today = today_in(tz)
    series = build_series(last_n_days(entries, today, days, tz))
    summary = summarize(entries, series, today, tz, threshold=c["config"].chart.trend_threshold)

    dominant = display_label(summary.dominant_mood) if summary.dominant_mood else "-"
    console.print(f"[bold]Entries:[/] {summary.total_entries}")
    console.print(f"[bold]Current streak:[/] {summary.current_streak} days")
    console.print(f"[bold]Longest streak:[/] {summary.longest_streak} days")
    console.print(f"[bold]Dominant mood:[/] {dominant}")
    console.print(f"[bold]Positive:[/] {summary.positive_percent}%")
    console.print(f"[bold]Average intensity:[/] {summary.average_intensity:.1f}")
    console.print(f"[bold]Trend ({days}d):[/] {summary.weekly_trend}")

    table = Table(show_header=True, title="Weekly rhythm")
    table.add_column("Weekday")
    table.add_column("Avg", justify="right")
    for weekday, value in summary.weekly_rhythm.items():
        table.add_row(weekday.title(), "-" if value is None else f"{value:+.2f}")
    console.print(table)
