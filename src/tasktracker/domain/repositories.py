from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.tasktracker.domain.models.pagination import CursorPage
from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.status_summary import StatusSummary
from src.tasktracker.domain.models.task import Task
from src.tasktracker.domain.models.task_status import TaskStatus


class TaskRepository(Protocol):
    """Repository contract for durable task storage."""

    async def get_by_id(self, task_id: UUID) -> Task | None:
        """Return the task identified by ``task_id``, or ``None`` when it does not exist."""

    async def get_cursor_page(
        self,
        cursor: UUID | None,
        page_size: int,
        priority: Priority | None = None,
        status: TaskStatus | None = None,
    ) -> CursorPage[Task]:
        """Return up to ``page_size`` matching tasks with ids strictly greater than ``cursor``."""

    async def create(self, task: Task) -> Task:
        """Persist a new task; raise ``TaskConflictError`` if its id is taken."""

    async def update(self, task_id: UUID, replacement: Task) -> Task | None:
        """Replace every field but the id; return ``None`` when the task does not exist."""

    async def delete(self, task_id: UUID) -> bool:
        """Remove the task and report whether it existed."""

    async def get_status_summary(self) -> StatusSummary:
        """Count live tasks per status."""
