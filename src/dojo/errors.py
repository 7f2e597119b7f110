"""Exceptions raised by the dojo document stores."""

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base class for failures reading or writing a dojo document."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class DocumentNotFoundError(StoreError):
    """Raised when a document file does not exist."""


class DocumentCorruptError(StoreError):
    """Raised when a document is not valid JSON or does not fit its schema."""


class StoreWriteError(StoreError):
    """Raised when a document cannot be written to disk."""
