import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ..exceptions import TaskNotFound
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate
from ..store import TaskStore
from ..validation import normalize_title, parse_completed_filter, parse_task_id

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    """Dependency returning the store the application was built with."""
    return request.app.state.store


def _get_update_data(task_update: TaskUpdate) -> dict:
    return task_update.model_dump(exclude_unset=True, exclude_none=True)


@router.post(
    "/tasks",
    response_model=TaskSchema,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a new task."""
    created = store.create(
        title=normalize_title(task.title),
        description=task.description or "",
        completed=bool(task.completed),
    )
    logger.info("Created task id=%s", created.id)
    return TaskSchema.from_model(created)


@router.get("/tasks", response_model=List[TaskSchema], response_model_exclude_none=True)
def get_tasks(request: Request, store: TaskStore = Depends(get_store)):
    """List tasks, optionally only those with the given completion status.

    A repeated ``completed`` parameter is read from its first occurrence.
    """
    values = request.query_params.getlist("completed")
    wanted = parse_completed_filter(values[0] if values else None)
    tasks = store.get_all()
    if wanted is not None:
        tasks = [task for task in tasks if task.completed == wanted]
    return [TaskSchema.from_model(task) for task in tasks]


@router.get("/tasks/{task_id}", response_model=TaskSchema, response_model_exclude_none=True)
def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID."""
    return TaskSchema.from_model(store.get_by_id(parse_task_id(task_id)))


@router.put("/tasks/{task_id}", response_model=TaskSchema, response_model_exclude_none=True)
def update_task(task_id: str, task_update: TaskUpdate, store: TaskStore = Depends(get_store)):
    """Update the supplied fields of a specific task."""
    updated = store.update(parse_task_id(task_id), **_get_update_data(task_update))
    logger.info("Updated task id=%s", updated.id)
    return TaskSchema.from_model(updated)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a specific task."""
    parsed_id = parse_task_id(task_id)
    if not store.delete(parsed_id):
        raise TaskNotFound(parsed_id)
    logger.info("Deleted task id=%s", parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
