import logging
from uuid import uuid4

from src.tasktracker.application.commands import (
    CreateTaskCommand,
    DeleteTaskCommand,
    UpdateTaskCommand,
)
from src.tasktracker.application.event_hook import HighPriorityEventHook
from src.tasktracker.domain.events.high_priority_event import TaskAction
from src.tasktracker.domain.exceptions import PreconditionViolatedError, TaskValidationError
from src.tasktracker.domain.models.task import Task, is_nil_id
from src.tasktracker.domain.repositories import TaskRepository
from src.tasktracker.domain.validation import validate_task_fields

logger = logging.getLogger(__name__)


class TaskCommandHandler:
    """Write side: creates, replaces and deletes tasks, notifying on High priority."""

    def __init__(self, repository: TaskRepository, event_hook: HighPriorityEventHook) -> None:
        self._repository = repository
        self._event_hook = event_hook

    async def create(self, command: CreateTaskCommand) -> Task:
        self._validate(command)
        task = Task(
            id=uuid4(),
            title=command.title,
            description=command.description,
            priority=command.priority,
            due_date=command.due_date,
            status=command.status,
        )
        created = await self._repository.create(task)
        logger.info("Task created", extra={"task_id": str(created.id)})
        if created.is_high_priority:
            await self._notify(created, TaskAction.CREATED)
        return created

    async def update(self, command: UpdateTaskCommand) -> Task | None:
        if is_nil_id(command.id):
            return None
        self._validate(command)
        replacement = Task(
            id=command.id,
            title=command.title,
            description=command.description,
            priority=command.priority,
            due_date=command.due_date,
            status=command.status,
        )
        updated = await self._repository.update(command.id, replacement)
        if updated is None:
            logger.info("Task to update was not found", extra={"task_id": str(command.id)})
            return None
        logger.info("Task updated", extra={"task_id": str(updated.id)})
        if updated.is_high_priority:
            await self._notify(updated, TaskAction.UPDATED)
        return updated

    async def delete(self, command: DeleteTaskCommand) -> bool:
        # Deletions never notify the event hook, whatever the task's priority.
        if is_nil_id(command.id):
            return False
        deleted = await self._repository.delete(command.id)
        if deleted:
            logger.info("Task deleted", extra={"task_id": str(command.id)})
        return deleted

    @staticmethod
    def _validate(command: CreateTaskCommand | UpdateTaskCommand) -> None:
        errors = validate_task_fields(command.title, command.description, command.priority)
        if errors:
            raise TaskValidationError(errors)

    async def _notify(self, task: Task, action: TaskAction) -> None:
        try:
            await self._event_hook.notify(task, action)
        except PreconditionViolatedError:
            raise
        except Exception:
            logger.exception(
                "High priority event hook failed",
                extra={"task_id": str(task.id), "action": action.value},
            )
