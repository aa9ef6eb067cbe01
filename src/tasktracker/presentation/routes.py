from __future__ import annotations

from uuid import UUID

import inject
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from src.tasktracker.application.command_handler import TaskCommandHandler
from src.tasktracker.application.commands import (
    CreateTaskCommand,
    DeleteTaskCommand,
    UpdateTaskCommand,
)
from src.tasktracker.application.queries import (
    DEFAULT_PAGE_SIZE,
    GetTaskByIdQuery,
    GetTasksQuery,
    GetTasksSummaryQuery,
)
from src.tasktracker.application.query_handler import TaskQueryHandler
from src.tasktracker.domain.models import CursorPage, Priority, StatusSummary, Task, TaskStatus
from src.tasktracker.domain.validation import validate_task_fields
from src.tasktracker.presentation.errors import validation_response
from src.tasktracker.presentation.schemas import ProblemDetails, TaskRequest, ValidationProblem

router = APIRouter(prefix="/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"description": "Task not found."}}
_INVALID = {400: {"model": ValidationProblem, "description": "Validation failed."}}
_SERVER_ERROR = {500: {"model": ProblemDetails, "description": "Internal server error."}}


def get_command_handler() -> TaskCommandHandler:
    return inject.instance(TaskCommandHandler)


def get_query_handler() -> TaskQueryHandler:
    return inject.instance(TaskQueryHandler)


@router.get(
    "",
    response_model=CursorPage[Task],
    summary="List tasks",
    description=(
        "Returns tasks ordered by id. Pass the previous page's `nextCursor` as `cursor` "
        "to continue. `pageSize` is clamped to 1..100."
    ),
    responses={**_INVALID, **_SERVER_ERROR},
)
async def list_tasks(
    priority: Priority | None = Query(default=None, description="Exact priority filter."),
    task_status: TaskStatus | None = Query(
        default=None, alias="status", description="Exact status filter."
    ),
    cursor: UUID | None = Query(default=None, description="Id of the last task already seen."),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    handler: TaskQueryHandler = Depends(get_query_handler),
):
    query = GetTasksQuery(
        priority=priority,
        status=task_status,
        cursor=cursor,
        page_size=page_size,
    )
    return await handler.get_page(query)


@router.get(
    "/summary",
    response_model=StatusSummary,
    summary="Task counts per status",
    responses=_SERVER_ERROR,
)
async def get_summary(handler: TaskQueryHandler = Depends(get_query_handler)):
    return await handler.get_summary(GetTasksSummaryQuery())


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def get_task(task_id: UUID, handler: TaskQueryHandler = Depends(get_query_handler)):
    task = await handler.get_by_id(GetTaskByIdQuery(task_id))
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={**_INVALID, **_SERVER_ERROR},
)
async def create_task(
    body: TaskRequest,
    request: Request,
    response: Response,
    handler: TaskCommandHandler = Depends(get_command_handler),
):
    errors = validate_task_fields(body.title, body.description, body.priority)
    if errors:
        return validation_response(errors)

    task = await handler.create(
        CreateTaskCommand(
            title=body.title,
            description=body.description,
            priority=body.priority,
            due_date=body.due_date,
            status=body.status,
        )
    )
    response.headers["Location"] = str(request.url_for("get_task", task_id=str(task.id)))
    return task


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Replace a task",
    responses={**_INVALID, **_NOT_FOUND, **_SERVER_ERROR},
)
async def update_task(
    task_id: UUID,
    body: TaskRequest,
    handler: TaskCommandHandler = Depends(get_command_handler),
):
    errors = validate_task_fields(body.title, body.description, body.priority)
    if errors:
        return validation_response(errors)

    task = await handler.update(
        UpdateTaskCommand(
            id=task_id,
            title=body.title,
            description=body.description,
            priority=body.priority,
            due_date=body.due_date,
            status=body.status,
        )
    )
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_task(task_id: UUID, handler: TaskCommandHandler = Depends(get_command_handler)):
    deleted = await handler.delete(DeleteTaskCommand(task_id))
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
