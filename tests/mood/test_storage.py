"""Tests for the JSON mood entry store."""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from mood.models import MoodEntry
from mood.storage import MoodStore, MoodStoreError

UTC = timezone.utc


@pytest.fixture
def store(tmp_path):
    return MoodStore(tmp_path / "moods" / "entries.json")


class TestMoodEntryFromDict:
    def test_backend_record(self):
        entry = MoodEntry.from_dict(
            {
                "id": "m1",
                "timestamp": "2024-03-10T08:30:00Z",
                "emojis": ["☀️", "⛅"],
                "intensity": 70,
                "note": "coffee",
            }
        )
        assert entry.timestamp == datetime(2024, 3, 10, 8, 30, tzinfo=UTC)
        assert entry.labels == ("☀️", "⛅")
        assert entry.intensity == 70

    def test_labels_field_and_string(self):
        entry = MoodEntry.from_dict({"timestamp": "2024-03-10T08:30:00", "labels": "rainy"})
        assert entry.labels == ("rainy",)
        assert entry.note is None

    def test_missing_timestamp(self):
        with pytest.raises(ValueError):
            MoodEntry.from_dict({"id": "x", "emojis": ["sunny"]})

    def test_round_trip_dict(self):
        entry = MoodEntry(id="a", timestamp=datetime(2024, 1, 1, tzinfo=UTC), labels=("sunny",))
        assert MoodEntry.from_dict(entry.to_dict()) == entry


class TestMoodStore:
    def test_missing_file_is_empty(self, store):
        assert store.list_entries() == []

    def test_add_and_list(self, store):
        first = store.add(["sunny"], intensity=80, timestamp=datetime(2024, 3, 10, 9, tzinfo=UTC))
        store.add(["rainy", "cloudy"], note="long day", timestamp=datetime(2024, 3, 9, 20, tzinfo=UTC))

        entries = store.list_entries()
        assert [e.labels for e in entries] == [("rainy", "cloudy"), ("sunny",)]
        assert entries[1].id == first.id
        assert store.path.exists()

    def test_add_default_timestamp_is_aware(self, store):
        entry = store.add(["partly"])
        assert entry.timestamp.tzinfo is not None

    def test_list_window(self, store):
        base = datetime(2024, 3, 10, 12, tzinfo=UTC)
        for i in range(5):
            store.add(["cloudy"], timestamp=base - timedelta(days=i))
        entries = store.list_entries(start=base - timedelta(days=2), end=base)
        assert len(entries) == 3

    @pytest.mark.parametrize(
        "labels,kwargs",
        [
            ([], {}),
            (["hail"], {}),
            (["sunny"] * 6, {}),
            (["sunny"], {"intensity": 101}),
            (["sunny"], {"note": "x" * 5001}),
        ],
    )
    def test_add_validation(self, store, labels, kwargs):
        with pytest.raises(ValueError):
            store.add(labels, **kwargs)
        assert not store.path.exists()

    def test_accepts_glyph_and_legacy_labels(self, store):
        entry = store.add(["🌈", "snowy"])
        assert entry.labels == ("🌈", "snowy")

    def test_malformed_record_skipped(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            json.dumps(
                {
                    "entries": [
                        {"id": "ok", "timestamp": "2024-03-10T10:00:00+00:00", "emojis": ["sunny"]},
                        {"id": "bad", "timestamp": "yesterday", "emojis": ["rainy"]},
                        {"id": "none", "emojis": ["rainy"]},
                    ]
                }
            )
        )
        assert [e.id for e in store.list_entries()] == ["ok"]

    def test_plain_list_layout(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps([{"id": "a", "timestamp": "2024-03-10T10:00:00"}]))
        assert len(store.list_entries()) == 1

    def test_corrupt_file(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        with pytest.raises(MoodStoreError):
            store.list_entries()

    def test_wrong_layout(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"entries": "nope"}))
        with pytest.raises(MoodStoreError):
            store.list_entries()

    def test_add_leaves_no_temp_file(self, store):
        store.add(["sunny"])
        store.add(["cloudy"])
        assert [p.name for p in store.path.parent.iterdir()] == ["entries.json"]
        assert len(json.loads(store.path.read_text())["entries"]) == 2

    def test_failed_write_keeps_previous_file(self, store):
        store.add(["sunny"], timestamp=datetime(2024, 3, 10, 9, tzinfo=UTC))
        before = store.path.read_text()

        with patch("mood.storage.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                store.add(["rainy"])

        assert store.path.read_text() == before
        assert [p.name for p in store.path.parent.iterdir()] == ["entries.json"]
        assert len(store.list_entries()) == 1
