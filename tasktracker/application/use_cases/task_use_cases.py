"""
Task use cases for the application layer.
Implements business logic for task operations.

Every use case acts for the current user and reads or writes only that
user's tasks. A task owned by someone else is reported as not found.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from tasktracker.application.dto.task_dto import (
    CreateTaskRequestDTO,
    ListTasksRequestDTO,
    UpdateTaskRequestDTO,
)
from tasktracker.application.use_cases.base_use_case import AuthorizedUseCase
from tasktracker.domain.models.base import EntityNotFoundError
from tasktracker.domain.models.task import Task, TaskStatus
from tasktracker.domain.repositories.task_repository import MAX_STORABLE_INT, TaskRepository
from tasktracker.domain.services.ownership_policy import OwnershipPolicy
from tasktracker.infrastructure.validation import (
    ValidationResult,
    validate_search_term,
    validate_status,
    validate_task_create,
    validate_task_update,
)

logger = logging.getLogger(__name__)


@dataclass
class UpdateTaskCommand:
    """Task id plus the partial update to apply."""

    task_id: int
    changes: UpdateTaskRequestDTO


@dataclass
class TaskPage:
    """One page of an owner's tasks."""

    items: List[Task]
    total: int
    page: int
    limit: int


class TaskUseCase(AuthorizedUseCase):
    """Shared wiring for task use cases."""

    def __init__(
        self,
        task_repository: TaskRepository,
        current_user_id: Optional[int],
        ownership_policy: Optional[OwnershipPolicy] = None
    ):
        super().__init__(current_user_id)
        self.task_repository = task_repository
        self.ownership_policy = ownership_policy or OwnershipPolicy()

    def _load_owned_task(self, task_id: int) -> Task:
        task = self.task_repository.find_by_id_and_owner(task_id, self.current_user_id)
        return self.ownership_policy.require(task, self.current_user_id)


class CreateTaskUseCase(TaskUseCase):
    """Use case for creating a new task."""

    def _validate(self, request: CreateTaskRequestDTO) -> ValidationResult:
        return validate_task_create(request.title, request.description, request.status)

    def _execute_business_logic(self, request: CreateTaskRequestDTO) -> Task:
        task = Task.create(
            owner_id=self.current_user_id,
            title=request.title,
            description=request.description,
            status=TaskStatus(request.status) if request.status else None
        )
        task = self.task_repository.save(task)
        logger.info("User %s created task %s", self.current_user_id, task.id)
        return task


class GetTaskUseCase(TaskUseCase):
    """Use case for fetching one task by id."""

    def _execute_business_logic(self, task_id: int) -> Task:
        return self._load_owned_task(task_id)


class UpdateTaskUseCase(TaskUseCase):
    """Use case for partially updating a task."""

    def _validate(self, request: UpdateTaskCommand) -> ValidationResult:
        return validate_task_update(request.changes.changes())

    def _execute_business_logic(self, request: UpdateTaskCommand) -> Task:
        task = self._load_owned_task(request.task_id)

        changes = request.changes.changes()
        task.apply_changes(
            title=changes.get("title"),
            description=changes.get("description"),
            status=TaskStatus(changes["status"]) if "status" in changes else None
        )

        task = self.task_repository.save(task)
        logger.info("User %s updated task %s", self.current_user_id, task.id)
        return task


class DeleteTaskUseCase(TaskUseCase):
    """Use case for deleting a task."""

    def _execute_business_logic(self, task_id: int) -> None:
        if not self.task_repository.delete(task_id, self.current_user_id):
            raise EntityNotFoundError("Task", task_id)
        logger.info("User %s deleted task %s", self.current_user_id, task_id)


class ListTasksUseCase(TaskUseCase):
    """
    Use case for listing tasks with optional status filter, search and pagination.
    Without page or limit the full filtered list is returned as a single page.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        current_user_id: Optional[int],
        default_page_size: int = 10,
        max_page_size: int = 100
    ):
        super().__init__(task_repository, current_user_id)
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def _validate(self, request: ListTasksRequestDTO) -> ValidationResult:
        if request.limit is not None and request.limit > self.max_page_size:
            return ValidationResult.fail("limit", f"Limit cannot exceed {self.max_page_size}")
        if request.page is not None:
            limit = request.limit or self.default_page_size
            if (request.page - 1) * limit > MAX_STORABLE_INT:
                return ValidationResult.fail("page", "Page is out of range")
        return validate_status(request.status)

    def _execute_business_logic(self, request: ListTasksRequestDTO) -> TaskPage:
        status = TaskStatus(request.status) if request.status else None
        search = request.search.strip() if request.search and request.search.strip() else None

        if not request.is_paginated:
            items = self.task_repository.find_by_owner(
                self.current_user_id, status=status, search=search
            )
            return TaskPage(items=items, total=len(items), page=1, limit=len(items))

        page = request.page or 1
        limit = request.limit or self.default_page_size
        items = self.task_repository.find_by_owner(
            self.current_user_id,
            status=status,
            search=search,
            limit=limit,
            offset=(page - 1) * limit
        )
        total = self.task_repository.count_by_owner(
            self.current_user_id, status=status, search=search
        )
        return TaskPage(items=items, total=total, page=page, limit=limit)


class SearchTasksUseCase(TaskUseCase):
    """Use case for searching titles and descriptions."""

    def _validate(self, term: str) -> ValidationResult:
        return validate_search_term(term)

    def _execute_business_logic(self, term: str) -> List[Task]:
        return self.task_repository.find_by_owner(self.current_user_id, search=term.strip())


class TaskStatsUseCase(TaskUseCase):
    """Use case for counting tasks per status."""

    def _execute_business_logic(self, request: None = None) -> Dict[str, int]:
        counts = self.task_repository.count_by_status(self.current_user_id)
        return {"total": sum(counts.values()), **counts}
