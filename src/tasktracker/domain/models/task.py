from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from src.tasktracker.domain.models.base import WireModel
from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.task_status import TaskStatus

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Task(WireModel):
    id: UUID = Field(default_factory=uuid4, description="Unique task identifier.")
    title: str = Field(description="Short task title.")
    description: str = Field(default="", description="Free-form task description.")
    priority: Priority = Field(default=Priority.NONE, description="Task priority.")
    due_date: datetime = Field(description="When the task is due (UTC).")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Task status.")

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def is_high_priority(self) -> bool:
        return self.priority is Priority.HIGH


NIL_ID = UUID(int=0)


def is_nil_id(task_id: UUID | None) -> bool:
    """True for identifiers that can never address a stored task."""
    return task_id is None or task_id == NIL_ID
