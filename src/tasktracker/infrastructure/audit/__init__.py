from src.tasktracker.infrastructure.audit.append_log import AppendOnlyLog
from src.tasktracker.infrastructure.audit.high_priority_log import FileHighPriorityEventHook

__all__ = [
    "AppendOnlyLog",
    "FileHighPriorityEventHook",
]
