"""Filesystem layout of a dojo."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from config import Settings

DOJO_DIR = ".dojo"
EVENTS_DIR = "events"
PROGRESS_FILE = "progress.json"
INTEGRATION_FILE = "claude-integration.json"

# Empty practice folders created next to .dojo/
WORKSPACE_DIRS = ("foundations", "practice", "summaries")


@dataclass(frozen=True)
class DojoLayout:
    """Resolved paths for one dojo root."""

    root: Path

    @classmethod
    def from_settings(cls, settings: Settings) -> "DojoLayout":
        return cls(root=settings.root_dir)

    @property
    def dojo_dir(self) -> Path:
        return self.root / DOJO_DIR

    @property
    def events_dir(self) -> Path:
        return self.dojo_dir / EVENTS_DIR

    @property
    def progress_file(self) -> Path:
        return self.dojo_dir / PROGRESS_FILE

    @property
    def integration_file(self) -> Path:
        return self.dojo_dir / INTEGRATION_FILE

    @property
    def directories(self) -> list[Path]:
        """Every directory `dojo init` creates, parents first."""
        return [self.dojo_dir, self.events_dir, *(self.root / name for name in WORKSPACE_DIRS)]

    def create_directories(self) -> None:
        """Create the directory skeleton. Raises OSError on failure."""
        for directory in self.directories:
            directory.mkdir(parents=True, exist_ok=True)
