"""
Unit tests for the event file logger.
"""

import json
from datetime import datetime, timedelta, timezone

from src.dojo.events import EventLogger, timestamp
from src.dojo.models import DojoEvent, EventType

MOMENT = datetime(2026, 10, 18, 9, 30, 5)


def make_event(message: str = "User started training session") -> DojoEvent:
    return DojoEvent(
        timestamp=timestamp(MOMENT),
        type=EventType.SESSION_START,
        user="Ada",
        level="dirt_claude",
        message=message,
    )


class TestEventLogger:
    """One JSON file per event."""

    def test_filename_from_clock(self, tmp_path):
        logger = EventLogger(tmp_path, clock=lambda: MOMENT)

        path = logger.append(make_event())

        assert path == tmp_path / "event-20261018-093005.json"
        assert path.exists()

    def test_contents(self, tmp_path):
        logger = EventLogger(tmp_path, clock=lambda: MOMENT)

        path = logger.append(make_event())
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["type"] == "session_start"
        assert data["user"] == "Ada"
        assert data["level"] == "dirt_claude"
        assert data["message"] == "User started training session"
        assert data["timestamp"].startswith("2026-10-18T09:30:05")

    def test_keys_sorted_and_indented(self, tmp_path):
        logger = EventLogger(tmp_path, clock=lambda: MOMENT)

        text = logger.append(make_event()).read_text(encoding="utf-8")

        assert text.startswith('{\n  "level": "dirt_claude",\n  "message"')

    def test_same_second_overwrites(self, tmp_path):
        logger = EventLogger(tmp_path, clock=lambda: MOMENT)

        logger.append(make_event("first"))
        path = logger.append(make_event("second"))

        assert len(list(tmp_path.glob("event-*.json"))) == 1
        assert json.loads(path.read_text(encoding="utf-8"))["message"] == "second"

    def test_write_failure_returns_none(self, tmp_path):
        logger = EventLogger(tmp_path / "does-not-exist", clock=lambda: MOMENT)

        assert logger.append(make_event()) is None


class TestTimestamp:
    """RFC 3339 timestamps."""

    def test_second_precision_with_offset(self):
        value = timestamp(MOMENT)

        assert value.startswith("2026-10-18T09:30:05")
        assert "." not in value
        assert value.endswith("Z") or value[-6] in "+-"

    def test_utc_written_as_z(self):
        value = timestamp(datetime(2026, 10, 18, 9, 30, 5, tzinfo=timezone.utc))

        assert value == "2026-10-18T09:30:05Z"

    def test_non_zero_offset_kept(self):
        value = timestamp(datetime(2026, 10, 18, 9, 30, 5, tzinfo=timezone(timedelta(hours=2))))

        assert value == "2026-10-18T09:30:05+02:00"
