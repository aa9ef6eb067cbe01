from __future__ import annotations

from typing import Protocol

from src.tasktracker.domain.events.high_priority_event import TaskAction
from src.tasktracker.domain.models.task import Task


class HighPriorityEventHook(Protocol):
    async def notify(self, task: Task, action: TaskAction) -> None:
        """Record that ``task`` was left at High priority by ``action``."""
