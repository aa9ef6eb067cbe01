from __future__ import annotations

from dataclasses import dataclass

import inject

from src.setup.audit_config import AuditSettings, get_audit_settings
from src.setup.db_config import DatabaseSettings, get_database_settings
from src.tasktracker.application.command_handler import TaskCommandHandler
from src.tasktracker.application.event_hook import HighPriorityEventHook
from src.tasktracker.application.query_handler import TaskQueryHandler
from src.tasktracker.domain.repositories import TaskRepository
from src.tasktracker.infrastructure.audit import FileHighPriorityEventHook
from src.tasktracker.infrastructure.sql import Database, SqlTaskRepository


@dataclass(frozen=True)
class Container:
    database: Database
    repository: TaskRepository
    event_hook: HighPriorityEventHook
    command_handler: TaskCommandHandler
    query_handler: TaskQueryHandler


def build_container(
    db_settings: DatabaseSettings | None = None,
    audit_settings: AuditSettings | None = None,
) -> Container:
    """Construct every collaborator once, passing dependencies explicitly."""
    if db_settings is None:
        db_settings = get_database_settings()
    if audit_settings is None:
        audit_settings = get_audit_settings()

    database = Database(db_settings.DATABASE_URL, echo=db_settings.DATABASE_ECHO)
    repository = SqlTaskRepository(database)
    event_hook = FileHighPriorityEventHook(audit_settings.AUDIT_LOG_PATH)
    return Container(
        database=database,
        repository=repository,
        event_hook=event_hook,
        command_handler=TaskCommandHandler(repository, event_hook),
        query_handler=TaskQueryHandler(repository),
    )


def configure_di(container: Container | None = None) -> Container:
    """Bind the container's instances into the inject registry."""
    if container is None:
        container = build_container()

    def _config(binder: inject.Binder) -> None:
        binder.bind(Database, container.database)
        binder.bind(TaskRepository, container.repository)
        binder.bind(HighPriorityEventHook, container.event_hook)
        binder.bind(TaskCommandHandler, container.command_handler)
        binder.bind(TaskQueryHandler, container.query_handler)

    inject.clear_and_configure(_config)
    return container
