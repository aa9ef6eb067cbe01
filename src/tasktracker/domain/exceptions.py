from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.tasktracker.domain.validation import FieldError


class TaskValidationError(Exception):
    """Raised when task fields fail validation before a write."""

    def __init__(self, errors: list[FieldError]) -> None:
        fields = ", ".join(sorted({error.field for error in errors}))
        super().__init__(f"Task validation failed for: {fields}.")
        self.errors = errors


class TaskConflictError(Exception):
    """Raised when a task with the same identifier already exists."""

    def __init__(self, task_id: UUID) -> None:
        super().__init__(f"Task with id '{task_id}' already exists.")
        self.task_id = task_id


class StorageUnavailableError(Exception):
    """Raised when the task store cannot be reached."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Task storage is unavailable during '{operation}'.")
        self.operation = operation


class AuditWriteFailedError(Exception):
    """Raised when an audit entry could not be appended to the audit log."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to append audit entry to '{path}'.")
        self.path = path


class PreconditionViolatedError(Exception):
    """Raised when a collaborator is called in a way its contract forbids."""
