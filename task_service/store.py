import logging
from typing import Dict, List, Optional

from .exceptions import InvalidArgument, TaskNotFound
from .locking import ReadWriteLock
from .models import Task

logger = logging.getLogger(__name__)


class _TaskTable:
    """Task map and id counter, always guarded together."""

    def __init__(self):
        self.tasks: Dict[int, Task] = {}
        self.next_id = 1


class TaskStore:
    """In-memory task registry.

    Create, update and delete take the lock exclusively; reads share it.
    Every task returned is a copy, so callers may keep or modify it
    without further synchronisation.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._table = _TaskTable()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._table.tasks)

    def create(self, title: str, description: str = "", completed: bool = False) -> Task:
        """Store a new task under the next id and return it."""
        if not title or not title.strip():
            raise InvalidArgument("title is required")

        with self._lock.write_locked():
            task = Task(
                id=self._table.next_id,
                title=title,
                description=description,
                completed=completed,
            )
            self._table.next_id += 1
            self._table.tasks[task.id] = task

        logger.debug("Task created id=%s completed=%s", task.id, task.completed)
        return task.model_copy()

    def get_all(self) -> List[Task]:
        """Snapshot of every stored task, in no particular order."""
        with self._lock.read_locked():
            return [task.model_copy() for task in self._table.tasks.values()]

    def get_by_id(self, task_id: int) -> Task:
        with self._lock.read_locked():
            task = self._table.tasks.get(task_id)
            if task is None:
                raise TaskNotFound(task_id)
            return task.model_copy()

    def update(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Task:
        """Apply the supplied fields to a task and return the result.

        ``None`` means "leave unchanged". A blank title rejects the whole
        update: none of the other fields are applied either.
        """
        with self._lock.write_locked():
            task = self._table.tasks.get(task_id)
            if task is None:
                raise TaskNotFound(task_id)

            changes = {}
            if title is not None:
                if not title.strip():
                    raise InvalidArgument("title cannot be empty")
                changes["title"] = title
            if description is not None:
                changes["description"] = description
            if completed is not None:
                changes["completed"] = completed

            if changes:
                task = task.model_copy(update=changes)
                self._table.tasks[task_id] = task

        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return task.model_copy()

    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns False if there was nothing to remove."""
        with self._lock.write_locked():
            if self._table.tasks.pop(task_id, None) is None:
                return False

        logger.debug("Task deleted id=%s", task_id)
        return True
