"""
Command handlers for the dojo.

DojoService holds the two document stores and the event logger and
implements `init`, `start` and `learn` as plain method calls that return
result objects. Printing is left to the CLI.

Business outcomes (already initialized, not initialized, unknown or locked
topic) are reported through the result status. `init` raises OSError or
StoreWriteError when it cannot create the dojo; after that, failed saves
are logged and the command continues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from loguru import logger

from . import curriculum
from .errors import StoreError, StoreWriteError
from .events import Clock, EventLogger, timestamp
from .layout import DojoLayout
from .models import (
    AssistantIntegration,
    DojoEvent,
    EventType,
    FoundationProgress,
    FoundationStatus,
    Progress,
    UserProfile,
)
from .store import IntegrationStore, ProgressStore

# Values a fresh training session hands to the assistant
LEARNING_MODE = "practice"
TEACHING_STYLE = "socratic"
INTERVENTION_THRESHOLD = 3
HINT_LEVEL = 1


# =============================================================================
# Results
# =============================================================================


class InitStatus(str, Enum):
    CREATED = "created"
    ALREADY_INITIALIZED = "already_initialized"


class StartStatus(str, Enum):
    STARTED = "started"
    NOT_INITIALIZED = "not_initialized"


class LessonStatus(str, Enum):
    STARTED = "started"
    NOT_INITIALIZED = "not_initialized"
    UNKNOWN_TOPIC = "unknown_topic"
    LOCKED = "locked"


@dataclass
class InitResult:
    status: InitStatus
    progress: Progress | None = None


@dataclass
class StartResult:
    status: StartStatus
    progress: Progress | None = None
    integration: AssistantIntegration | None = None
    event_path: Path | None = None


@dataclass
class LessonResult:
    """Outcome of `learn <topic>`."""

    status: LessonStatus
    topic: str
    known_topics: list[str] = field(default_factory=list)
    foundation: FoundationProgress | None = None
    integration: AssistantIntegration | None = None
    event_path: Path | None = None


# =============================================================================
# Service
# =============================================================================


class DojoService:
    """Runs dojo commands against injected stores."""

    def __init__(
        self,
        layout: DojoLayout,
        progress_store: ProgressStore,
        integration_store: IntegrationStore,
        events: EventLogger,
        clock: Clock = datetime.now,
    ):
        self.layout = layout
        self.progress_store = progress_store
        self.integration_store = integration_store
        self.events = events
        self.clock = clock

    @classmethod
    def from_layout(cls, layout: DojoLayout, clock: Clock = datetime.now) -> "DojoService":
        """Wire the default file-backed stores for a dojo root."""
        return cls(
            layout=layout,
            progress_store=ProgressStore(layout.progress_file),
            integration_store=IntegrationStore(layout.integration_file),
            events=EventLogger(layout.events_dir, clock=clock),
            clock=clock,
        )

    def is_initialized(self) -> bool:
        return self.progress_store.exists()

    def _load_progress(self) -> Progress | None:
        # Missing and corrupt progress files both mean "not initialized"
        try:
            return self.progress_store.load()
        except StoreError as e:
            logger.debug(f"Progress unavailable: {e}")
            return None

    def _save(self, store: ProgressStore | IntegrationStore, document) -> None:
        # After init, a failed save loses only that write; the command carries on
        try:
            store.save(document)
        except StoreWriteError as e:
            logger.error(f"Failed to save {store.model.__name__}: {e}")

    # -------------------------------------------------------------------------
    # init
    # -------------------------------------------------------------------------

    def initialize(self, name: str) -> InitResult:
        """
        Create the dojo skeleton and the first progress document.

        Does nothing if progress.json already exists.

        Raises:
            OSError: a directory could not be created
            StoreWriteError: progress.json could not be written
        """
        if self.is_initialized():
            return InitResult(status=InitStatus.ALREADY_INITIALIZED)

        self.layout.create_directories()

        progress = Progress(
            user=UserProfile(
                name=name,
                start_date=self.clock().date().isoformat(),
                current_level=curriculum.STARTING_LEVEL,
            ),
            foundations=curriculum.initial_foundations(),
        )
        self.progress_store.save(progress)
        logger.info(f"Dojo initialized at {self.layout.root} for {name!r}")
        return InitResult(status=InitStatus.CREATED, progress=progress)

    # -------------------------------------------------------------------------
    # start
    # -------------------------------------------------------------------------

    def start_session(self) -> StartResult:
        """
        Begin a training session.

        Replaces the integration document with a fresh active session,
        bumps the session counter and logs a session_start event.
        """
        progress = self._load_progress()
        if progress is None:
            return StartResult(status=StartStatus.NOT_INITIALIZED)

        integration = AssistantIntegration()
        integration.session.active = True
        integration.session.start_time = timestamp(self.clock())
        integration.session.learning_mode = LEARNING_MODE
        integration.claude_behavior.teaching_style = TEACHING_STYLE
        integration.claude_behavior.intervention_threshold = INTERVENTION_THRESHOLD
        integration.claude_behavior.hint_level = HINT_LEVEL
        self._save(self.integration_store, integration)

        progress.user.total_sessions += 1
        self._save(self.progress_store, progress)

        event_path = self.events.append(
            DojoEvent(
                timestamp=timestamp(self.clock()),
                type=EventType.SESSION_START,
                user=progress.user.name,
                level=progress.user.current_level,
                message="User started training session",
            )
        )
        return StartResult(
            status=StartStatus.STARTED,
            progress=progress,
            integration=integration,
            event_path=event_path,
        )

    # -------------------------------------------------------------------------
    # learn
    # -------------------------------------------------------------------------

    def start_lesson(self, topic: str) -> LessonResult:
        """
        Begin a lesson on an unlocked topic.

        Args:
            topic: Topic as typed, hyphens or underscores (cli-basics)
        """
        key = curriculum.storage_key(topic)
        slug = curriculum.display_name(key)

        progress = self._load_progress()
        if progress is None:
            return LessonResult(status=LessonStatus.NOT_INITIALIZED, topic=slug)

        foundation = progress.foundations.get(key)
        if foundation is None:
            return LessonResult(
                status=LessonStatus.UNKNOWN_TOPIC,
                topic=topic,
                known_topics=[curriculum.display_name(k) for k in sorted(progress.foundations)],
            )

        if foundation.status == FoundationStatus.LOCKED:
            return LessonResult(status=LessonStatus.LOCKED, topic=slug, foundation=foundation)

        integration = self.integration_store.load_or_default()
        integration.session.current_topic = slug
        integration.lesson_context.topic = slug

        plan = curriculum.lesson_plan(key)
        if plan is not None:
            integration.lesson_context.objective = plan.objective
            integration.lesson_context.total_steps = plan.total_steps
            integration.lesson_context.key_concepts = list(plan.key_concepts)

        self._save(self.integration_store, integration)

        event_path = self.events.append(
            DojoEvent(
                timestamp=timestamp(self.clock()),
                type=EventType.LESSON_START,
                topic=slug,
                user=progress.user.name,
                message=f"Started lesson: {slug}",
            )
        )
        return LessonResult(
            status=LessonStatus.STARTED,
            topic=slug,
            foundation=foundation,
            integration=integration,
            event_path=event_path,
        )
