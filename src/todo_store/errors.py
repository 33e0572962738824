from __future__ import annotations

from pathlib import Path


class TodoStoreError(Exception):
    """Base class for todo-store errors."""


class StorageUnavailable(TodoStoreError):
    """The tasks file could not be opened for writing."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"unable to write {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedRecord(TodoStoreError, ValueError):
    def __init__(self, line: str, line_no: int, reason: str) -> None:
        super().__init__(f"line {line_no}: {reason}")
        self.line = line
        self.line_no = line_no
        self.reason = reason
