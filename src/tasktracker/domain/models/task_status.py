from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    ARCHIVED = "Archived"
