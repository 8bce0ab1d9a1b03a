from pydantic import BaseModel


class Task(BaseModel):
    """Task record owned by the in-memory store.

    Instances handed out by the store are copies; mutating one never
    touches the stored record.
    """

    id: int
    title: str
    description: str = ""
    completed: bool = False
