from src.tasktracker.domain.models.pagination import CursorPage
from src.tasktracker.domain.models.priority import Priority
from src.tasktracker.domain.models.status_summary import StatusCount, StatusSummary
from src.tasktracker.domain.models.task import Task
from src.tasktracker.domain.models.task_status import TaskStatus

__all__ = [
    "Task",
    "Priority",
    "TaskStatus",
    "CursorPage",
    "StatusCount",
    "StatusSummary",
]
