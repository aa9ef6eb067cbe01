import logging

from src.tasktracker.application.queries import (
    GetTaskByIdQuery,
    GetTasksQuery,
    GetTasksSummaryQuery,
)
from src.tasktracker.domain.models.pagination import CursorPage
from src.tasktracker.domain.models.status_summary import StatusSummary
from src.tasktracker.domain.models.task import Task, is_nil_id
from src.tasktracker.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100


def clamp_page_size(page_size: int) -> int:
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, page_size))


class TaskQueryHandler:
    """Read side: resolves task lookups, listings and the status summary."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    async def get_by_id(self, query: GetTaskByIdQuery) -> Task | None:
        if is_nil_id(query.id):
            return None
        return await self._repository.get_by_id(query.id)

    async def get_page(self, query: GetTasksQuery) -> CursorPage[Task]:
        page_size = clamp_page_size(query.page_size)
        if page_size != query.page_size:
            logger.debug(
                "Clamped requested page size",
                extra={"requested": query.page_size, "effective": page_size},
            )
        return await self._repository.get_cursor_page(
            query.cursor,
            page_size,
            priority=query.priority,
            status=query.status,
        )

    async def get_summary(self, query: GetTasksSummaryQuery | None = None) -> StatusSummary:
        return await self._repository.get_status_summary()
