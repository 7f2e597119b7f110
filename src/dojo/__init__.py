"""
Dojo: a command-line learning dojo for terminal fundamentals.

Bootstraps a local practice directory, tracks curriculum progress in JSON,
and leaves session/lesson state plus timestamped event files behind for an
external AI assistant to watch.

Components:
- curriculum: Static foundation/lesson table
- models: Progress and assistant-integration documents, event records
- store: JSON persistence for both documents
- events: One-file-per-event audit trail
- service: init/start/learn command handlers
- cli: Typer entry point (`dojo`)
"""

from importlib.metadata import PackageNotFoundError, version

from .errors import DocumentCorruptError, DocumentNotFoundError, StoreError, StoreWriteError
from .events import EventLogger
from .layout import DojoLayout
from .models import AssistantIntegration, DojoEvent, EventType, FoundationStatus, Progress
from .service import DojoService
from .store import IntegrationStore, ProgressStore

try:
    __version__ = version("dojo-cli")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "__version__",
    # Documents
    "Progress",
    "AssistantIntegration",
    "DojoEvent",
    "EventType",
    "FoundationStatus",
    # Persistence
    "DojoLayout",
    "ProgressStore",
    "IntegrationStore",
    "EventLogger",
    "StoreError",
    "DocumentNotFoundError",
    "DocumentCorruptError",
    "StoreWriteError",
    # Commands
    "DojoService",
]
