from pydantic import BaseModel, StrictBool, StrictStr
from typing import Optional

from ..models import Task as TaskModel


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    ``title`` is checked by the router after trimming, so a missing or
    null title is reported as "title is required" rather than a schema error.
    """
    title: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None

class TaskUpdate(BaseModel):
    """Schema for updating existing tasks. Null and missing fields are left untouched."""
    title: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None

class Task(BaseModel):
    """Task as returned by the API. An empty description is left out."""
    id: int
    title: str
    description: Optional[str] = None
    completed: bool

    @classmethod
    def from_model(cls, task: TaskModel) -> "Task":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description or None,
            completed=task.completed,
        )
