from __future__ import annotations

import errno
import logging
from pathlib import Path
from typing import Sequence

from todo_store.errors import MalformedRecord, StorageUnavailable
from todo_store.models import Task

logger = logging.getLogger(__name__)

# The medium itself is full: nothing sensible to do here, let it propagate.
_EXHAUSTED = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)}


class TaskStorage:
    """Line-oriented ``id|done|title`` file, rewritten in full on every save.

    Text goes through ``surrogateescape`` so titles holding bytes that are not
    valid UTF-8 come back exactly as they were read.
    """

    encoding = "utf-8"
    errors = "surrogateescape"

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_tasks(self) -> list[Task]:
        try:
            with self.path.open("r", encoding=self.encoding, errors=self.errors) as fh:
                lines = fh.read().split("\n")
        except FileNotFoundError:
            logger.debug("no tasks file at %s, starting empty", self.path)
            return []
        except OSError as exc:
            logger.warning("cannot read %s (%s), starting empty", self.path, exc)
            return []

        tasks: list[Task] = []
        seen: set[int] = set()
        for line_no, line in enumerate(lines, start=1):
            if not line:
                continue
            try:
                task = Task.from_record(line, line_no)
            except MalformedRecord as exc:
                logger.warning("skipping record in %s: %s", self.path, exc)
                continue
            if task.id in seen:
                logger.warning("skipping record in %s: line %d repeats id %d", self.path, line_no, task.id)
                continue
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        payload = "".join(f"{task.to_record()}\n" for task in tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding=self.encoding, errors=self.errors, newline="\n") as fh:
                fh.write(payload)
        except OSError as exc:
            if exc.errno in _EXHAUSTED:
                raise
            raise StorageUnavailable(self.path, exc.strerror or str(exc)) from exc
        logger.debug("saved %d tasks to %s", len(tasks), self.path)
