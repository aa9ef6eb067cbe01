from __future__ import annotations

import logging
from pathlib import Path

from src.tasktracker.application.event_hook import HighPriorityEventHook
from src.tasktracker.domain.events.high_priority_event import HighPriorityTaskEvent, TaskAction
from src.tasktracker.domain.exceptions import AuditWriteFailedError, PreconditionViolatedError
from src.tasktracker.domain.models.task import Task
from src.tasktracker.infrastructure.audit.append_log import AppendOnlyLog, format_timestamp

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 80


def render_entry(event: HighPriorityTaskEvent) -> str:
    """Render the human-readable audit block for one event."""
    task = event.task
    lines = [
        f"[{format_timestamp(event.timestamp)}] "
        f"*** CRITICAL HIGH PRIORITY TASK {event.action.value.upper()} ***",
        f"Task ID: {event.task_id}",
        f"Title: {event.title}",
        f"Description: {event.description}",
        f"Due Date: {event.due_date:%Y-%m-%d %H:%M:%S} UTC",
        f"Status: {task.status.value}",
        f"Priority: {task.priority.value}",
        f"Action: {event.action.value}",
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


class FileHighPriorityEventHook(HighPriorityEventHook):
    """Appends critical-task entries to an audit file and raises a warning log."""

    def __init__(self, log_path: str | Path) -> None:
        self._log = AppendOnlyLog(log_path)

    @property
    def log_path(self) -> Path:
        return self._log.path

    async def notify(self, task: Task, action: TaskAction) -> None:
        if not task.is_high_priority:
            raise PreconditionViolatedError(
                "Only high priority tasks can trigger high priority task events."
            )

        event = HighPriorityTaskEvent.for_task(task, TaskAction(action))
        await self._write(event)
        logger.warning(
            "CRITICAL: High priority task %s: %s - %s (Due: %s)",
            event.action.value,
            event.task_id,
            event.title,
            event.due_date.isoformat(),
            extra={
                "task_id": str(event.task_id),
                "action": event.action.value,
                "task_status": task.status.value,
                "priority": task.priority.value,
            },
        )

    async def _write(self, event: HighPriorityTaskEvent) -> None:
        try:
            await self._append(event)
        except AuditWriteFailedError as failure:
            logger.error(
                "Failed to write critical high priority task event to log file: %s",
                failure.path,
                exc_info=failure,
                extra={"task_id": str(event.task_id)},
            )

    async def _append(self, event: HighPriorityTaskEvent) -> None:
        try:
            await self._log.append(render_entry(event))
        except OSError as exc:
            raise AuditWriteFailedError(str(self._log.path)) from exc
