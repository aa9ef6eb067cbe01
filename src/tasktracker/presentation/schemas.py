from __future__ import annotations

from datetime import datetime

from pydantic import Field

from src.tasktracker.domain.models.base import WireModel
from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.task_status import TaskStatus


class TaskRequest(WireModel):
    """Body accepted by create and update. Any client-supplied id is ignored."""

    title: str | None = Field(default=None, description="Task title, 3-200 characters.")
    description: str = Field(default="", description="Up to 1000 characters.")
    priority: Priority | None = Field(default=None, description="Low, Medium or High.")
    due_date: datetime = Field(description="Due date and time.")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Task status.")


class ValidationProblem(WireModel):
    title: str = "Validation failed"
    status: int = 400
    errors: dict[str, list[str]] = Field(default_factory=dict)


class ProblemDetails(WireModel):
    type: str
    title: str
    status: int
    detail: str
    trace_id: str | None = None
