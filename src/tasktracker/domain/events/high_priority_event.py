from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from src.tasktracker.domain.models.task import Task


class TaskAction(str, Enum):
    CREATED = "Created"
    UPDATED = "Updated"


class HighPriorityTaskEvent(BaseModel):
    """Transient record describing a mutation that left a task at High priority."""

    task_id: UUID
    title: str
    description: str
    due_date: datetime
    action: TaskAction
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    task: Task

    @classmethod
    def for_task(cls, task: Task, action: TaskAction) -> HighPriorityTaskEvent:
        return cls(
            task_id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            action=action,
            task=task.model_copy(),
        )
