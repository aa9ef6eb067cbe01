from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import Field

from src.tasktracker.domain.models.base import WireModel

T = TypeVar("T")


class CursorPage(WireModel, Generic[T]):
    """One page of a listing ordered ascending by id."""

    items: list[T] = Field(default_factory=list, description="Items on this page.")
    page_size: int = Field(description="Effective page size used for the query.")
    has_next_page: bool = Field(default=False, description="Whether more items follow.")
    next_cursor: UUID | None = Field(
        default=None, description="Id of the last returned item when another page exists."
    )
