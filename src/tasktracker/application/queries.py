from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.task_status import TaskStatus

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class GetTaskByIdQuery:
    id: UUID | None


@dataclass(frozen=True)
class GetTasksQuery:
    priority: Priority | None = None
    status: TaskStatus | None = None
    cursor: UUID | None = None
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class GetTasksSummaryQuery:
    pass
