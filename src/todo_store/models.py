from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from todo_store.errors import MalformedRecord

SEPARATOR = "|"
_LINE_BREAKS = ("\n", "\r")
# ASCII only: int() alone would also take "1_0", " 1" and non-ASCII digits
_INTEGER = re.compile(r"-?[0-9]+")


class CompleteResult(Enum):
    SUCCESS = "success"
    ALREADY_DONE = "already_done"
    NOT_FOUND = "not_found"


class DeleteResult(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    done: bool = False

    def __post_init__(self) -> None:
        # records are one per line and titles are written verbatim
        if any(ch in self.title for ch in _LINE_BREAKS):
            raise ValueError("title must not contain line breaks")

    def to_record(self) -> str:
        return f"{self.id}{SEPARATOR}{1 if self.done else 0}{SEPARATOR}{self.title}"

    @classmethod
    def from_record(cls, line: str, line_no: int = 0) -> "Task":
        """Parse one ``id|done|title`` line.

        Only the first two separators split fields, the rest of the line is
        the title. ``done`` accepts any integer, non-zero meaning completed.
        """
        parts = line.split(SEPARATOR, 2)
        if len(parts) < 3:
            raise MalformedRecord(line, line_no, "expected at least two separators")
        raw_id, raw_done, title = parts
        if not (_INTEGER.fullmatch(raw_id) and _INTEGER.fullmatch(raw_done)):
            raise MalformedRecord(line, line_no, "id and done must be decimal integers")
        task_id = int(raw_id)
        done = int(raw_done) != 0
        return cls(id=task_id, title=title, done=done)
