from src.tasktracker.infrastructure.sql.orm import Base, Database, TaskRow
from src.tasktracker.infrastructure.sql.repositories import SqlTaskRepository

__all__ = [
    "Base",
    "Database",
    "TaskRow",
    "SqlTaskRepository",
]
