"""
JSON persistence for the dojo documents.

Each store owns one file and reads/writes it whole:
- ProgressStore: .dojo/progress.json
- IntegrationStore: .dojo/claude-integration.json

Writes overwrite the file in place. There is no locking; the last writer wins.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from .errors import DocumentCorruptError, DocumentNotFoundError, StoreWriteError
from .models import AssistantIntegration, Progress

DocumentT = TypeVar("DocumentT", bound=BaseModel)


class JsonDocumentStore(Generic[DocumentT]):
    """
    Load and save one pydantic document as indented JSON.

    Subclasses set `model` to the document class.
    """

    model: type[DocumentT]

    def __init__(self, path: Path):
        self.path = path

    def exists(self) -> bool:
        """Whether the document file is present."""
        return self.path.exists()

    def load(self) -> DocumentT:
        """
        Read and validate the document.

        Raises:
            DocumentNotFoundError: the file does not exist
            DocumentCorruptError: the file is not JSON or does not fit the schema
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise DocumentNotFoundError(self.path, "not found") from e
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DocumentCorruptError(self.path, f"unreadable: {e}") from e

        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise DocumentCorruptError(self.path, f"invalid {self.model.__name__}: {e}") from e

    def save(self, document: DocumentT) -> Path:
        """
        Write the document with two-space indentation.

        Raises:
            StoreWriteError: the file could not be written
        """
        text = json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise StoreWriteError(self.path, f"write failed: {e}") from e

        logger.debug(f"Saved {self.model.__name__} to {self.path}")
        return self.path


class ProgressStore(JsonDocumentStore[Progress]):
    """Learner progress (.dojo/progress.json)."""

    model = Progress


class IntegrationStore(JsonDocumentStore[AssistantIntegration]):
    """Assistant session/lesson state (.dojo/claude-integration.json)."""

    model = AssistantIntegration

    def load_or_default(self) -> AssistantIntegration:
        """Load the document, falling back to a zero value on any load error."""
        try:
            return self.load()
        except (DocumentNotFoundError, DocumentCorruptError) as e:
            logger.debug(f"Starting from an empty integration document: {e}")
            return AssistantIntegration()
