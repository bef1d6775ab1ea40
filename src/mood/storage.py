"""JSON-file mood entry store."""

import json
import os
import tempfile
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog

from .models import MoodEntry
from .sentiment import to_label

logger = structlog.get_logger()

MAX_NOTE_LENGTH = 5_000
MAX_LABELS_PER_ENTRY = 5


class MoodStoreError(Exception):
    """Entry file is unreadable or not a valid mood document."""


class MoodStore:
    """Reads and appends mood entries in a single JSON document.

    Layout: ``{"entries": [{id, timestamp, emojis, intensity, note}, ...]}``.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _load_raw(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise MoodStoreError(f"Cannot read mood file {self.path}: {e}") from e

        if isinstance(data, list):
            return data
        if not isinstance(data, dict) or not isinstance(data.get("entries", []), list):
            raise MoodStoreError(f"Invalid mood file layout: {self.path}")
        return data.get("entries", [])

    def _write_raw(self, records: list[dict]) -> None:
        """Replace the file via a temp sibling so a failed write keeps the old one."""
        serialized = json.dumps({"entries": records}, indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(serialized)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def list_entries(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[MoodEntry]:
        """Entries sorted by timestamp, optionally within [start, end].

        Records that cannot be parsed are skipped.
        """
        entries = []
        for record in self._load_raw():
            try:
                entry = MoodEntry.from_dict(record)
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning("mood_entry_skipped", record=str(record)[:80], error=str(e))
                continue
            if start is not None and entry.timestamp.timestamp() < start.timestamp():
                continue
            if end is not None and entry.timestamp.timestamp() > end.timestamp():
                continue
            entries.append(entry)

        entries.sort(key=lambda e: e.timestamp.timestamp())
        return entries

    def add(
        self,
        labels: list[str],
        intensity: int = 50,
        note: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> MoodEntry:
        """Append a new entry and persist the file.

        Raises:
            ValueError: If labels are empty/unknown/too many, intensity out of
                range or the note too long
            MoodStoreError: If the existing file is corrupt
        """
        if not labels:
            raise ValueError("At least one mood label is required")
        if len(labels) > MAX_LABELS_PER_ENTRY:
            raise ValueError(f"At most {MAX_LABELS_PER_ENTRY} labels per entry")
        unknown = [raw for raw in labels if to_label(raw) is None]
        if unknown:
            raise ValueError(f"Unknown mood label(s): {', '.join(unknown)}")
        if not 0 <= intensity <= 100:
            raise ValueError(f"Intensity must be 0-100, got {intensity}")
        if note and len(note) > MAX_NOTE_LENGTH:
            raise ValueError(f"Note exceeds max length ({MAX_NOTE_LENGTH} chars)")

        entry = MoodEntry(
            id=uuid.uuid4().hex[:12],
            timestamp=timestamp or datetime.now().astimezone(),
            labels=tuple(labels),
            intensity=intensity,
            note=note or None,
        )

        records = self._load_raw()
        records.append(entry.to_dict())

        self._write_raw(records)

        logger.info("mood_entry_added", entry_id=entry.id, labels=list(entry.labels))
        return entry
