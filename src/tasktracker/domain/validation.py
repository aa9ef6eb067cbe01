from __future__ import annotations

from dataclasses import dataclass

from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.task import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def validate_task_fields(
    title: str | None,
    description: str | None,
    priority: Priority | None,
) -> list[FieldError]:
    """Check the writable task fields and return every problem found."""
    errors: list[FieldError] = []

    if title is None or not title.strip():
        errors.append(FieldError("title", "Title is required"))
    elif not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        errors.append(
            FieldError(
                "title",
                f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
            )
        )

    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                "description",
                f"Description can't exceed {DESCRIPTION_MAX_LENGTH} characters",
            )
        )

    if priority is None or priority is Priority.NONE:
        errors.append(FieldError("priority", "Priority is required"))

    return errors
