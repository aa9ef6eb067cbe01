from __future__ import annotations

from collections.abc import Mapping

from pydantic import Field

from src.tasktracker.domain.models.base import WireModel
from src.tasktracker.domain.models.task_status import TaskStatus


class StatusCount(WireModel):
    status: TaskStatus
    count: int = Field(ge=0)


class StatusSummary(WireModel):
    counts: list[StatusCount] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

    @classmethod
    def from_counts(cls, counts: Mapping[TaskStatus, int]) -> StatusSummary:
        """Build a summary with one entry per status, zero counts included."""
        entries = [StatusCount(status=status, count=counts.get(status, 0)) for status in TaskStatus]
        return cls(counts=entries, total=sum(entry.count for entry in entries))

    def as_mapping(self) -> dict[TaskStatus, int]:
        return {entry.status: entry.count for entry in self.counts}
