"""
Static curriculum table.

Topics are typed with hyphens on the command line (cli-basics) and stored
with underscores (cli_basics). New lesson content is added by extending
FOUNDATIONS.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import FoundationProgress, FoundationStatus

# Level assigned to every new learner
STARTING_LEVEL = "dirt_claude"


@dataclass(frozen=True)
class LessonPlan:
    """What the assistant should steer a lesson towards."""

    objective: str
    total_steps: int
    key_concepts: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Foundation:
    """A top-level curriculum topic."""

    key: str
    title: str
    summary: str
    total_lessons: int
    initial_status: FoundationStatus
    lesson: LessonPlan | None = None

    @property
    def slug(self) -> str:
        """Command-line form of the key."""
        return display_name(self.key)


FOUNDATIONS: tuple[Foundation, ...] = (
    Foundation(
        key="cli_basics",
        title="CLI Basics",
        summary="Terminal navigation and file operations",
        total_lessons=12,
        initial_status=FoundationStatus.AVAILABLE,
        lesson=LessonPlan(
            objective="Master terminal navigation, file operations, and basic commands",
            total_steps=12,
            key_concepts=["pwd", "ls", "cd", "mkdir", "touch", "cp", "mv", "rm"],
        ),
    ),
    Foundation(
        key="version_control",
        title="Version Control",
        summary="Git fundamentals and workflows",
        total_lessons=8,
        initial_status=FoundationStatus.LOCKED,
    ),
    Foundation(
        key="scripting",
        title="Scripting",
        summary="Bash automation and best practices",
        total_lessons=15,
        initial_status=FoundationStatus.LOCKED,
    ),
)

_BY_KEY = {foundation.key: foundation for foundation in FOUNDATIONS}


def storage_key(topic: str) -> str:
    """Map a command-line topic to its key in progress.json."""
    return topic.replace("-", "_")


def display_name(key: str) -> str:
    """Map a stored key back to its command-line form."""
    return key.replace("_", "-")


def get_foundation(key: str) -> Foundation | None:
    """Look up a foundation by storage key."""
    return _BY_KEY.get(key)


def lesson_plan(key: str) -> LessonPlan | None:
    """Return lesson content for a topic, if any has been written."""
    foundation = _BY_KEY.get(key)
    return foundation.lesson if foundation else None


def initial_foundations() -> dict[str, FoundationProgress]:
    """Build the foundations map for a freshly initialized dojo."""
    return {
        foundation.key: FoundationProgress(
            status=foundation.initial_status,
            lessons_completed=0,
            total_lessons=foundation.total_lessons,
            mastery_score=0,
        )
        for foundation in FOUNDATIONS
    }
