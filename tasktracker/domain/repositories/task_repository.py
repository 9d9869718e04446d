"""
Task repository interface.
Defines the contract for task data persistence operations.

Every method takes the requesting user's id and must apply it in the same
lookup as the task id or search predicate. Tasks owned by another user are
reported exactly like tasks that do not exist.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from tasktracker.domain.models.task import Task, TaskStatus


# Largest integer the store accepts as an id or offset (signed 64-bit)
MAX_STORABLE_INT = 2 ** 63 - 1


class TaskRepository(ABC):
    """
    Repository interface for Task entity.
    Defines all operations needed for owner-scoped task persistence.
    """

    @abstractmethod
    def save(self, task: Task) -> Task:
        """
        Save a task entity.
        New tasks are inserted; existing tasks are updated only where both
        id and owner match. Raises EntityNotFoundError otherwise.
        """
        pass

    @abstractmethod
    def find_by_id_and_owner(self, task_id: int, owner_id: int) -> Optional[Task]:
        """
        Find a task by ID for its owner.
        Returns None if it does not exist or belongs to someone else.
        """
        pass

    @abstractmethod
    def find_by_owner(
        self,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Task]:
        """
        List an owner's tasks, newest first, with optional status filter,
        substring search over title and description, and pagination.
        """
        pass

    @abstractmethod
    def count_by_owner(
        self,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None
    ) -> int:
        """
        Count an owner's tasks matching the same filters as find_by_owner.
        """
        pass

    @abstractmethod
    def count_by_status(self, owner_id: int) -> Dict[str, int]:
        """
        Count an owner's tasks grouped by status.
        """
        pass

    @abstractmethod
    def delete(self, task_id: int, owner_id: int) -> bool:
        """
        Delete a task by ID for its owner.
        Returns False if nothing matched.
        """
        pass
