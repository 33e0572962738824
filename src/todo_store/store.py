from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from types import TracebackType

from todo_store.config import DEFAULT_TASKS_FILE
from todo_store.errors import StorageUnavailable
from todo_store.models import CompleteResult, DeleteResult, Task
from todo_store.storage import TaskStorage

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered task list bound to one tasks file.

    - loads once on construction, a missing or unreadable file means empty
    - every mutation ends with a full save
    - ``next_id`` only grows; after a restart it resumes from the highest id on disk

    A failed save does not undo the in-memory change. It is logged and kept in
    ``last_save_error`` until the next successful save.
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE, storage: TaskStorage | None = None) -> None:
        self.storage = storage or TaskStorage(Path(path))
        self.last_save_error: StorageUnavailable | None = None
        self._tasks = self.storage.load_tasks()
        # running maximum starts at 0, so ids resume at 1 or above
        self._next_id = max([0, *(task.id for task in self._tasks)]) + 1
        logger.info(
            "TaskStore ready path=%s tasks=%d next_id=%d",
            self.path,
            len(self._tasks),
            self._next_id,
        )

    @property
    def path(self) -> Path:
        return self.storage.path

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def add_task(self, title: str) -> int:
        task = Task(id=self._next_id, title=title)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("added task %d", task.id)
        self.save()
        return task.id

    def complete_task(self, task_id: int) -> CompleteResult:
        index = self._index_of(task_id)
        if index is None:
            return CompleteResult.NOT_FOUND
        task = self._tasks[index]
        if task.done:
            return CompleteResult.ALREADY_DONE
        self._tasks[index] = replace(task, done=True)
        logger.debug("completed task %d", task_id)
        self.save()
        return CompleteResult.SUCCESS

    def delete_task(self, task_id: int) -> DeleteResult:
        index = self._index_of(task_id)
        if index is None:
            return DeleteResult.NOT_FOUND
        del self._tasks[index]
        logger.debug("deleted task %d", task_id)
        self.save()
        return DeleteResult.SUCCESS

    def list_tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def save(self) -> bool:
        try:
            self.storage.save_tasks(self._tasks)
        except StorageUnavailable as exc:
            logger.warning("save failed, keeping in-memory tasks: %s", exc)
            self.last_save_error = exc
            return False
        self.last_save_error = None
        return True

    def close(self) -> None:
        """Final best-effort save."""
        self.save()

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None
