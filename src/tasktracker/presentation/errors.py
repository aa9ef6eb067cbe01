from __future__ import annotations

from collections.abc import Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.tasktracker.domain.exceptions import TaskConflictError, TaskValidationError
from src.tasktracker.domain.validation import FieldError
from src.tasktracker.presentation.schemas import ValidationProblem


def validation_response(errors: Iterable[FieldError]) -> JSONResponse:
    grouped: dict[str, list[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)
    problem = ValidationProblem(errors=grouped)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(mode="json", by_alias=True),
    )


def _field_name(location: tuple) -> str:
    names = [str(part) for part in location if part not in ("body", "query", "path")]
    return ".".join(names) or "request"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [FieldError(_field_name(tuple(error["loc"])), error["msg"]) for error in exc.errors()]
    return validation_response(errors)


async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    return validation_response(exc.errors)


async def task_conflict_handler(request: Request, exc: TaskConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"title": "Conflict", "status": 409, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TaskValidationError, task_validation_handler)
    app.add_exception_handler(TaskConflictError, task_conflict_handler)
