from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import inject
import pytest
import pytest_asyncio

from src.setup.api_config import ApiSettings
from src.setup.app_config import Container, configure_di
from src.tasktracker.application.command_handler import TaskCommandHandler
from src.tasktracker.application.query_handler import TaskQueryHandler
from src.tasktracker.infrastructure.sql import Database, SqlTaskRepository
from src.tasktracker.presentation.main import create_app

from .fakes import RecordingEventHook, StubTaskRepository


@pytest.fixture
def stub_repository() -> StubTaskRepository:
    return StubTaskRepository()


@pytest.fixture
def event_hook() -> RecordingEventHook:
    return RecordingEventHook()


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def repository(database: Database) -> SqlTaskRepository:
    return SqlTaskRepository(database)


@pytest.fixture
def api_settings(tmp_path: Path) -> ApiSettings:
    return ApiSettings(
        APP_NAME="Test API",
        REQUEST_LOG_PATH=str(tmp_path / "logs" / "api-requests.log"),
    )


@pytest_asyncio.fixture
async def api_client(
    database: Database,
    repository: SqlTaskRepository,
    event_hook: RecordingEventHook,
    api_settings: ApiSettings,
) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client for an app wired to a temporary SQLite store and a recording hook."""
    container = Container(
        database=database,
        repository=repository,
        event_hook=event_hook,
        command_handler=TaskCommandHandler(repository, event_hook),
        query_handler=TaskQueryHandler(repository),
    )
    configure_di(container)
    app = create_app(settings=api_settings, container=container)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    inject.clear()
