"""Tests for series export."""

import csv
import json
from datetime import date

from mood.export import CSV_COLUMNS, SeriesExporter
from mood.models import SeriesPoint
from shared_types import MoodLabel


def _series():
    return [
        SeriesPoint(date=date(2024, 3, 9), value=1.0, label=MoodLabel.SUNNY, observed=True, entry_count=1),
        SeriesPoint(date=date(2024, 3, 10), value=0.1, label=MoodLabel.CLOUDY, observed=False),
    ]


class TestSeriesExporter:
    def test_csv(self, tmp_path):
        out = tmp_path / "nested" / "series.csv"
        count = SeriesExporter().export_csv(_series(), out)
        assert count == 2

        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert list(rows[0]) == CSV_COLUMNS
        assert rows[0]["date"] == "2024-03-09"
        assert rows[0]["value"] == "1.0000"
        assert rows[1]["label"] == "cloudy"
        assert rows[1]["observed"] == "False"

    def test_json(self, tmp_path):
        out = tmp_path / "series.json"
        count = SeriesExporter().export_json(_series(), out)
        assert count == 2

        data = json.loads(out.read_text())
        assert data["count"] == 2
        assert data["points"][0]["label"] == "sunny"
        assert data["points"][1]["observed"] is False
        assert "exported_at" in data

    def test_empty_series(self, tmp_path):
        out = tmp_path / "empty.csv"
        assert SeriesExporter().export_csv([], out) == 0
        assert out.read_text().strip() == ",".join(CSV_COLUMNS)
