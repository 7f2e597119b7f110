"""
Document models for the dojo state files.

Two JSON documents live under .dojo/:
- progress.json: who the learner is and where they are in the curriculum
- claude-integration.json: live session/lesson state for the assistant to read

Events are written one per file and never read back, so they are plain
dataclasses rather than validated models.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_serializer, field_validator


# =============================================================================
# Enums
# =============================================================================


class FoundationStatus(str, Enum):
    """Lock state of a curriculum foundation."""

    AVAILABLE = "available"
    LOCKED = "locked"
    COMPLETED = "completed"  # declared, nothing sets it yet


class EventType(str, Enum):
    """Kinds of events written to .dojo/events/."""

    SESSION_START = "session_start"
    LESSON_START = "lesson_start"


def _none_to_list(value: Any) -> Any:
    # Older files may carry null where a list belongs
    return [] if value is None else value


StrList = Annotated[list[str], BeforeValidator(_none_to_list)]


# =============================================================================
# Progress Document
# =============================================================================


class UserProfile(BaseModel):
    """Learner identity and session counters."""

    name: str = ""
    start_date: str = ""  # YYYY-MM-DD
    current_level: str = ""
    total_sessions: int = 0
    streak_days: int = 0


class FoundationProgress(BaseModel):
    """Progress through one foundation topic."""

    status: FoundationStatus = FoundationStatus.LOCKED
    lessons_completed: int = 0
    total_lessons: int = 0
    mastery_score: int = 0


class LearningStyle(BaseModel):
    """Learner pacing profile (not populated yet)."""

    preferred_pace: str = ""
    struggle_areas: StrList = Field(default_factory=list)
    strength_areas: StrList = Field(default_factory=list)


class Progress(BaseModel):
    """Contents of .dojo/progress.json."""

    user: UserProfile = Field(default_factory=UserProfile)
    foundations: dict[str, FoundationProgress] = Field(default_factory=dict)
    achievements: StrList = Field(default_factory=list)
    last_session: str | None = None
    learning_style: LearningStyle = Field(default_factory=LearningStyle)

    @field_validator("foundations", mode="before")
    @classmethod
    def default_foundations(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_serializer("foundations")
    def serialize_foundations(self, foundations: dict[str, FoundationProgress]) -> dict[str, Any]:
        return {key: foundations[key].model_dump(mode="json") for key in sorted(foundations)}


# =============================================================================
# Assistant Integration Document
# =============================================================================


class SessionInfo(BaseModel):
    """Current training session as seen by the assistant."""

    active: bool = False
    start_time: str | None = None
    current_lesson: str | None = None
    current_topic: str | None = None
    learning_mode: str = ""


class UserState(BaseModel):
    """Struggle tracking the assistant uses to decide when to step in."""

    struggling_with: str | None = None
    last_error: str | None = None
    consecutive_failures: int = 0
    needs_encouragement: bool = False
    ask_for_help_count: int = 0


class AssistantBehavior(BaseModel):
    """How the assistant should teach during the session."""

    teaching_style: str = ""
    intervention_threshold: int = 0
    last_hint_time: str | None = None
    hint_level: int = 0


class LessonContext(BaseModel):
    """The lesson currently in progress."""

    topic: str | None = None
    objective: str | None = None
    current_step: int = 0
    total_steps: int = 0
    key_concepts: StrList = Field(default_factory=list)


class AssistantIntegration(BaseModel):
    """Contents of .dojo/claude-integration.json."""

    session: SessionInfo = Field(default_factory=SessionInfo)
    user_state: UserState = Field(default_factory=UserState)
    claude_behavior: AssistantBehavior = Field(default_factory=AssistantBehavior)
    lesson_context: LessonContext = Field(default_factory=LessonContext)
    event_log: Annotated[list[dict[str, Any]], BeforeValidator(_none_to_list)] = Field(default_factory=list)


# =============================================================================
# Events
# =============================================================================


@dataclass
class DojoEvent:
    """A single event record for the assistant's audit trail."""

    timestamp: str
    type: EventType
    message: str
    user: str | None = None
    level: str | None = None
    topic: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization, dropping unset fields."""
        data = {key: value for key, value in asdict(self).items() if value is not None}
        data["type"] = self.type.value
        return data
