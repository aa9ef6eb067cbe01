from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from src.tasktracker.application.command_handler import TaskCommandHandler
from src.tasktracker.application.commands import (
    CreateTaskCommand,
    DeleteTaskCommand,
    UpdateTaskCommand,
)
from src.tasktracker.application.queries import (
    GetTaskByIdQuery,
    GetTasksQuery,
    GetTasksSummaryQuery,
)
from src.tasktracker.application.query_handler import TaskQueryHandler, clamp_page_size
from src.tasktracker.domain.events.high_priority_event import TaskAction
from src.tasktracker.domain.exceptions import PreconditionViolatedError, TaskValidationError
from src.tasktracker.domain.models import Priority, TaskStatus
from src.tasktracker.domain.models.task import NIL_ID

from .fakes import DUE, RecordingEventHook, StubTaskRepository, make_task


def _create_command(priority: Priority = Priority.HIGH, title: str = "Write report") -> CreateTaskCommand:
    return CreateTaskCommand(
        title=title,
        description="Quarterly numbers",
        priority=priority,
        due_date=DUE,
        status=TaskStatus.PENDING,
    )


def _update_command(task_id: UUID | None, priority: Priority = Priority.HIGH) -> UpdateTaskCommand:
    return UpdateTaskCommand(
        id=task_id,
        title="Updated Title",
        description="Updated Description",
        priority=priority,
        due_date=DUE,
        status=TaskStatus.IN_PROGRESS,
    )


@pytest.fixture
def command_handler(
    stub_repository: StubTaskRepository, event_hook: RecordingEventHook
) -> TaskCommandHandler:
    return TaskCommandHandler(stub_repository, event_hook)


@pytest.fixture
def query_handler(stub_repository: StubTaskRepository) -> TaskQueryHandler:
    return TaskQueryHandler(stub_repository)


@pytest.mark.parametrize(
    ("requested", "effective"),
    [(-5, 1), (0, 1), (1, 1), (10, 10), (100, 100), (101, 100), (10_000, 100)],
)
def test_clamp_page_size_stays_within_bounds(requested: int, effective: int) -> None:
    assert clamp_page_size(requested) == effective


@pytest.mark.asyncio
async def test_get_page_passes_clamped_size_and_filters(
    query_handler: TaskQueryHandler, stub_repository: StubTaskRepository
) -> None:
    cursor = uuid4()

    await query_handler.get_page(
        GetTasksQuery(
            priority=Priority.HIGH,
            status=TaskStatus.COMPLETED,
            cursor=cursor,
            page_size=500,
        )
    )

    assert stub_repository.page_requests == [
        {
            "cursor": cursor,
            "page_size": 100,
            "priority": Priority.HIGH,
            "status": TaskStatus.COMPLETED,
        }
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("task_id", [None, NIL_ID])
async def test_get_by_id_rejects_nil_id_without_querying(
    query_handler: TaskQueryHandler, stub_repository: StubTaskRepository, task_id
) -> None:
    assert await query_handler.get_by_id(GetTaskByIdQuery(task_id)) is None
    assert stub_repository.calls == []


@pytest.mark.asyncio
async def test_get_by_id_and_summary_delegate_to_repository() -> None:
    task = make_task(status=TaskStatus.COMPLETED)
    handler = TaskQueryHandler(StubTaskRepository([task]))

    assert await handler.get_by_id(GetTaskByIdQuery(task.id)) == task
    summary = await handler.get_summary(GetTasksSummaryQuery())
    assert summary.as_mapping()[TaskStatus.COMPLETED] == 1
    assert summary.total == 1


@pytest.mark.asyncio
async def test_create_generates_id_and_notifies_for_high_priority(
    command_handler: TaskCommandHandler,
    stub_repository: StubTaskRepository,
    event_hook: RecordingEventHook,
) -> None:
    created = await command_handler.create(_create_command(Priority.HIGH))

    assert isinstance(created.id, UUID)
    assert created.id != NIL_ID
    assert stub_repository.tasks[created.id] == created
    assert event_hook.calls == [(created, TaskAction.CREATED)]


@pytest.mark.asyncio
@pytest.mark.parametrize("priority", [Priority.LOW, Priority.MEDIUM])
async def test_create_below_high_priority_does_not_notify(
    command_handler: TaskCommandHandler, event_hook: RecordingEventHook, priority: Priority
) -> None:
    await command_handler.create(_create_command(priority))

    assert event_hook.calls == []


@pytest.mark.asyncio
async def test_create_generates_distinct_ids(command_handler: TaskCommandHandler) -> None:
    first = await command_handler.create(_create_command())
    second = await command_handler.create(_create_command())

    assert first.id != second.id


@pytest.mark.asyncio
async def test_create_succeeds_when_event_hook_fails(stub_repository: StubTaskRepository) -> None:
    failing_hook = RecordingEventHook(fail_with=RuntimeError("audit sink down"))
    handler = TaskCommandHandler(stub_repository, failing_hook)

    created = await handler.create(_create_command(Priority.HIGH))

    assert stub_repository.tasks[created.id] == created
    assert len(failing_hook.calls) == 1


@pytest.mark.asyncio
async def test_create_propagates_hook_contract_violation(stub_repository: StubTaskRepository) -> None:
    strict_hook = RecordingEventHook(fail_with=PreconditionViolatedError("contract broken"))
    handler = TaskCommandHandler(stub_repository, strict_hook)

    with pytest.raises(PreconditionViolatedError):
        await handler.create(_create_command(Priority.HIGH))

    assert len(strict_hook.calls) == 1


@pytest.mark.asyncio
async def test_create_rejects_invalid_fields_before_storage(
    command_handler: TaskCommandHandler, stub_repository: StubTaskRepository
) -> None:
    with pytest.raises(TaskValidationError) as exc_info:
        await command_handler.create(_create_command(title="ab"))

    assert [error.field for error in exc_info.value.errors] == ["title"]
    assert stub_repository.calls == []


@pytest.mark.asyncio
async def test_update_preserves_id_and_notifies_for_high_priority(
    stub_repository: StubTaskRepository, event_hook: RecordingEventHook
) -> None:
    original = make_task("Original", priority=Priority.LOW)
    stub_repository.tasks[original.id] = original
    handler = TaskCommandHandler(stub_repository, event_hook)

    updated = await handler.update(_update_command(original.id, Priority.HIGH))

    assert updated.id == original.id
    assert updated.title == "Updated Title"
    assert updated.status is TaskStatus.IN_PROGRESS
    assert event_hook.calls == [(updated, TaskAction.UPDATED)]


@pytest.mark.asyncio
async def test_update_to_non_high_priority_does_not_notify(
    stub_repository: StubTaskRepository, event_hook: RecordingEventHook
) -> None:
    original = make_task("Original", priority=Priority.HIGH)
    stub_repository.tasks[original.id] = original
    handler = TaskCommandHandler(stub_repository, event_hook)

    await handler.update(_update_command(original.id, Priority.MEDIUM))

    assert event_hook.calls == []


@pytest.mark.asyncio
async def test_update_unknown_id_returns_none_without_event(
    command_handler: TaskCommandHandler,
    stub_repository: StubTaskRepository,
    event_hook: RecordingEventHook,
) -> None:
    result = await command_handler.update(_update_command(uuid4()))

    assert result is None
    assert stub_repository.tasks == {}
    assert event_hook.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("task_id", [None, NIL_ID])
async def test_update_nil_id_never_touches_storage(
    command_handler: TaskCommandHandler,
    stub_repository: StubTaskRepository,
    event_hook: RecordingEventHook,
    task_id,
) -> None:
    assert await command_handler.update(_update_command(task_id)) is None
    assert stub_repository.calls == []
    assert event_hook.calls == []


@pytest.mark.asyncio
async def test_delete_twice_reports_true_then_false(
    stub_repository: StubTaskRepository, event_hook: RecordingEventHook
) -> None:
    task = make_task(priority=Priority.HIGH)
    stub_repository.tasks[task.id] = task
    handler = TaskCommandHandler(stub_repository, event_hook)

    assert await handler.delete(DeleteTaskCommand(task.id)) is True
    assert await handler.delete(DeleteTaskCommand(task.id)) is False
    assert event_hook.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("task_id", [None, NIL_ID])
async def test_delete_nil_id_never_touches_storage(
    command_handler: TaskCommandHandler, stub_repository: StubTaskRepository, task_id
) -> None:
    assert await command_handler.delete(DeleteTaskCommand(task_id)) is False
    assert stub_repository.calls == []
