"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import Field

from tasktracker.domain.models.task import Task

from .base_dto import EnvelopeDTO, MessageResponseDTO, RequestDTO, ResponseDTO


class CreateTaskRequestDTO(RequestDTO):
    """DTO for creating a task."""

    title: Optional[str] = Field(default=None, description="Task title, 3-255 characters")
    description: Optional[str] = Field(default=None, description="Task description")
    status: Optional[str] = Field(default=None, description="pending or completed; defaults to pending")


class UpdateTaskRequestDTO(RequestDTO):
    """DTO for a partial task update. Every field is optional."""

    title: Optional[str] = Field(default=None, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    status: Optional[str] = Field(default=None, description="pending or completed")

    def changes(self) -> Dict[str, Any]:
        """Fields actually supplied with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ListTasksRequestDTO(RequestDTO):
    """Query parameters for listing tasks."""

    status: Optional[str] = Field(default=None, description="Filter by status")
    search: Optional[str] = Field(default=None, description="Substring of title or description")
    page: Optional[int] = Field(default=None, ge=1, description="Page number")
    limit: Optional[int] = Field(default=None, ge=1, description="Items per page")

    @property
    def is_paginated(self) -> bool:
        return self.page is not None or self.limit is not None


class TaskResponseDTO(ResponseDTO):
    """DTO for task in responses."""

    id: int
    title: str
    description: Optional[str] = None
    status: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            user_id=task.owner_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskDataResponseDTO(EnvelopeDTO):
    """Envelope with a single task."""

    data: TaskResponseDTO


class TaskMutationResponseDTO(MessageResponseDTO):
    """Envelope returned after creating or updating a task."""

    data: TaskResponseDTO


class TaskListResponseDTO(EnvelopeDTO):
    """Envelope with a list of tasks and its size."""

    data: List[TaskResponseDTO]
    count: int


class PaginatedTaskListResponseDTO(EnvelopeDTO):
    """Envelope with one page of tasks."""

    data: List[TaskResponseDTO]
    total: int
    page: int
    limit: int


class TaskStatsDTO(ResponseDTO):
    """Task counts per status."""

    total: int
    pending: int
    completed: int


class TaskStatsResponseDTO(EnvelopeDTO):
    data: TaskStatsDTO
