from __future__ import annotations

from src.tasktracker.domain.models.task import Task
from src.tasktracker.infrastructure.sql.orm import TaskRow


class OrmMapper:
    @staticmethod
    def to_task_row(task: Task) -> TaskRow:
        return TaskRow(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority,
            due_date=task.due_date,
            status=task.status,
        )

    @staticmethod
    def replacement_values(replacement: Task) -> dict:
        """Column values for a full replacement; the stored row keeps its own id."""
        return {
            "title": replacement.title,
            "description": replacement.description,
            "priority": replacement.priority,
            "due_date": replacement.due_date,
            "status": replacement.status,
        }

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            description=row.description or "",
            priority=row.priority,
            due_date=row.due_date,
            status=row.status,
        )
