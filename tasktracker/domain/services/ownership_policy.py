"""
Ownership policy for task resources.
"""

import logging
from typing import Optional

from tasktracker.domain.models.base import EntityNotFoundError
from tasktracker.domain.models.task import Task

logger = logging.getLogger(__name__)


class OwnershipPolicy:
    """
    Decides whether a requester may see or change a task.

    Repositories already scope every lookup by owner id; this policy guards
    whatever comes back. A task that is not owned by the requester is
    reported as not found, never as forbidden, so its existence under
    another account is not confirmed.
    """

    def authorize(self, resource_owner_id: Optional[int], requester_id: Optional[int]) -> bool:
        """Check whether the requester owns the resource."""
        if resource_owner_id is None or requester_id is None:
            return False
        return int(resource_owner_id) == int(requester_id)

    def require(self, task: Optional[Task], requester_id: int) -> Task:
        """
        Return the task if the requester owns it.

        Raises:
            EntityNotFoundError: if the task is missing or owned by someone else
        """
        if task is None:
            raise EntityNotFoundError("Task")

        if not self.authorize(task.owner_id, requester_id):
            logger.warning("Ownership check failed for task %s", task.id)
            raise EntityNotFoundError("Task", task.id)

        return task
