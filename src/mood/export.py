"""Series export to CSV and JSON."""

import csv
import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from .models import SeriesPoint

CSV_COLUMNS = ["date", "value", "label", "observed", "is_mixed", "entry_count"]


class SeriesExporter:
    """Write chart series to files."""

    def export_csv(self, series: Sequence[SeriesPoint], output_path: Path) -> int:
        """Export series to CSV.

        Returns:
            Number of rows written
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
            writer.writeheader()
            for point in series:
                row = point.to_dict()
                row["value"] = f"{point.value:.4f}"
                writer.writerow(row)

        return len(series)

    def export_json(self, series: Sequence[SeriesPoint], output_path: Path) -> int:
        """Export series to JSON with an export timestamp."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        export_data = {
            "exported_at": datetime.now().isoformat(),
            "count": len(series),
            "points": [point.to_dict() for point in series],
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(export_data, f, indent=2)

        return len(series)
