from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import DateTime, Enum, String, Uuid
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from src.tasktracker.domain.models.task_status import TaskStatus


class Base(DeclarativeBase):
    pass


class TaskRow(Base):
    __tablename__ = "tasks"

    # Uuid compares by its 128-bit value on every backend, which makes it the pagination key.
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=False, default=""
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, name="task_priority"), nullable=False, index=True
    )
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[TaskStatus] = mapped_column(
        Enum(TaskStatus, name="task_status"), nullable=False, index=True
    )


class Database:
    """
    SQLAlchemy async engine and session factory. Create once and inject where needed.
    """

    def __init__(self, database_url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self._engine: AsyncEngine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine, expire_on_commit=False
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    async def create_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
