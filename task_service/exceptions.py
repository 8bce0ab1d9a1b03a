class TaskServiceError(Exception):
    """Base class for errors raised by the task store."""


class InvalidArgument(TaskServiceError, ValueError):
    """A request carried a value the store refuses (e.g. an empty title)."""


class TaskNotFound(TaskServiceError, LookupError):
    """No task is stored under the requested id."""

    def __init__(self, task_id: int):
        super().__init__("task not found")
        self.task_id = task_id
