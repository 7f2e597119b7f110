"""
Event files for the external assistant.

File Structure:
    .dojo/events/
        event-20261018-093000.json   # one event per file

Events are never read back or modified. Two events in the same second share
a filename, so the later one replaces the earlier.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from loguru import logger

from .models import DojoEvent

Clock = Callable[[], datetime]

FILENAME_FORMAT = "event-%Y%m%d-%H%M%S.json"


def timestamp(moment: datetime) -> str:
    """RFC 3339 timestamp with local offset, second precision; UTC is written as Z."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    value = moment.isoformat(timespec="seconds")
    if value.endswith("+00:00"):
        return value[:-6] + "Z"
    return value


class EventLogger:
    """
    Writes one JSON file per event.

    Serialization and write failures are logged, never raised.
    """

    def __init__(self, events_dir: Path, clock: Clock = datetime.now):
        self.events_dir = events_dir
        self.clock = clock

    def now(self) -> datetime:
        return self.clock()

    def append(self, event: DojoEvent) -> Path | None:
        """
        Write an event file.

        Returns:
            Path of the written file, or None if the write failed
        """
        filepath = self.events_dir / self.now().strftime(FILENAME_FORMAT)

        try:
            text = json.dumps(event.to_dict(), indent=2, sort_keys=True, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize event: {e}")
            return None

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Failed to write event file: {e}")
            return None

        logger.debug(f"Event {event.type.value} written to {filepath}")
        return filepath
