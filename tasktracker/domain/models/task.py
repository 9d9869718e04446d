"""
Task domain model.
Represents a personal task owned by exactly one user.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from tasktracker.domain.models.base import BaseEntity, ValidationError


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class TaskStatus(str, Enum):
    """
    Task status.

    Two states, freely bidirectional. Transitions only happen through an
    explicit update carrying the new value.
    """
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


@dataclass
class Task(BaseEntity):
    """
    Task entity.
    A task is always read and mutated through its owner's identity.
    """

    # Required fields
    title: str = ""
    owner_id: Optional[int] = None

    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING

    def __post_init__(self):
        """Initialize task after creation."""
        super().__post_init__()
        if isinstance(self.status, str) and not isinstance(self.status, TaskStatus):
            self.status = TaskStatus(self.status)
        self.validate()

    def validate(self) -> None:
        """Validate task invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Title is required", "title")
        if self.owner_id is None:
            raise ValidationError("Task owner is required", "owner_id")

    @classmethod
    def create(
        cls,
        owner_id: int,
        title: str,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None
    ) -> "Task":
        """Factory method to create a new task. Status defaults to pending."""
        return cls(
            title=title.strip(),
            owner_id=owner_id,
            description=description.strip() if description else description,
            status=TaskStatus(status) if status else TaskStatus.PENDING,
        )

    def apply_changes(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None
    ) -> None:
        """Apply a partial update and refresh updated_at."""
        if title is not None:
            self.title = title.strip()
        if description is not None:
            self.description = description.strip()
        if status is not None:
            self.status = TaskStatus(status)

        self.validate()
        self.mark_as_updated()
