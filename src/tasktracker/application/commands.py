from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.task_status import TaskStatus


@dataclass(frozen=True)
class CreateTaskCommand:
    title: str
    description: str
    priority: Priority
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING


@dataclass(frozen=True)
class UpdateTaskCommand:
    id: UUID | None
    title: str
    description: str
    priority: Priority
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING


@dataclass(frozen=True)
class DeleteTaskCommand:
    id: UUID | None
