from __future__ import annotations

import logging
from functools import wraps
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from src.tasktracker.domain.exceptions import StorageUnavailableError, TaskConflictError
from src.tasktracker.domain.models.pagination import CursorPage
from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.status_summary import StatusSummary
from src.tasktracker.domain.models.task import Task
from src.tasktracker.domain.models.task_status import TaskStatus
from src.tasktracker.domain.repositories import TaskRepository
from src.tasktracker.infrastructure.sql.mappers import OrmMapper
from src.tasktracker.infrastructure.sql.orm import Database, TaskRow

logger = logging.getLogger(__name__)

_UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError, OSError)


def storage_guard(func):
    """Re-raise driver connectivity failures as ``StorageUnavailableError``."""

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except _UNAVAILABLE_ERRORS as exc:
            logger.error(
                "Task storage unavailable",
                extra={"operation": func.__name__, "error": type(exc).__name__},
            )
            raise StorageUnavailableError(func.__name__) from exc

    return wrapper


class SqlTaskRepository(TaskRepository):
    """Relational task storage using SQLAlchemy async sessions.

    Listings are ordered by the UUID primary key compared as a 128-bit number.
    The order is total and stable, so the last id of a page is a safe cursor,
    but it carries no meaning as a position for callers.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    @storage_guard
    async def get_by_id(self, task_id: UUID) -> Task | None:
        async with self._database.session_factory() as session:
            row = await session.get(TaskRow, task_id)
            if row is None:
                return None
            return OrmMapper.to_domain_task(row)

    @storage_guard
    async def get_cursor_page(
        self,
        cursor: UUID | None,
        page_size: int,
        priority: Priority | None = None,
        status: TaskStatus | None = None,
    ) -> CursorPage[Task]:
        """Fetch one page after ``cursor``, peeking one extra row to detect a next page."""
        statement = select(TaskRow)
        if priority is not None:
            statement = statement.where(TaskRow.priority == priority)
        if status is not None:
            statement = statement.where(TaskRow.status == status)
        if cursor is not None:
            statement = statement.where(TaskRow.id > cursor)

        statement = statement.order_by(TaskRow.id).limit(page_size + 1)

        async with self._database.session_factory() as session:
            result = await session.execute(statement)
            rows = list(result.scalars().all())

        has_next_page = len(rows) > page_size
        if has_next_page:
            rows = rows[:page_size]
        items = [OrmMapper.to_domain_task(row) for row in rows]
        return CursorPage[Task](
            items=items,
            page_size=page_size,
            has_next_page=has_next_page,
            next_cursor=items[-1].id if has_next_page else None,
        )

    @storage_guard
    async def create(self, task: Task) -> Task:
        """Insert ``task`` as a new row; an existing id is a conflict, never an overwrite."""
        row = OrmMapper.to_task_row(task)
        try:
            async with self._database.session_factory() as session:
                async with session.begin():
                    session.add(row)
        except IntegrityError as exc:
            raise TaskConflictError(task.id) from exc
        return OrmMapper.to_domain_task(row)

    @storage_guard
    async def update(self, task_id: UUID, replacement: Task) -> Task | None:
        """Replace the stored fields of ``task_id`` in one statement; ``None`` if no row matched."""
        statement = (
            update(TaskRow)
            .where(TaskRow.id == task_id)
            .values(**OrmMapper.replacement_values(replacement))
            .execution_options(synchronize_session=False)
        )
        async with self._database.session_factory() as session:
            async with session.begin():
                result = await session.execute(statement)
                matched = result.rowcount
        if matched == 0:
            return None
        return replacement.model_copy(update={"id": task_id})

    @storage_guard
    async def delete(self, task_id: UUID) -> bool:
        statement = (
            delete(TaskRow)
            .where(TaskRow.id == task_id)
            .execution_options(synchronize_session=False)
        )
        async with self._database.session_factory() as session:
            async with session.begin():
                result = await session.execute(statement)
                removed = result.rowcount
        return removed == 1

    @storage_guard
    async def get_status_summary(self) -> StatusSummary:
        statement = select(TaskRow.status, func.count(TaskRow.id)).group_by(TaskRow.status)
        async with self._database.session_factory() as session:
            result = await session.execute(statement)
            counts = {status: count for status, count in result.all()}
        return StatusSummary.from_counts(counts)
