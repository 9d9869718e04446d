"""
Task repository implementation using SQLAlchemy.

All queries filter by owner id together with the task id or search
predicate, so rows belonging to other users are never loaded.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from tasktracker.domain.models.base import EntityNotFoundError, InternalError
from tasktracker.domain.models.task import Task, TaskStatus
from tasktracker.domain.repositories.task_repository import MAX_STORABLE_INT, TaskRepository
from tasktracker.infrastructure.db.models import TaskModel
from tasktracker.infrastructure.mappers.task_mapper import TaskMapper

logger = logging.getLogger(__name__)


class SQLAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TaskMapper()

    @staticmethod
    def _storable(task_id: int) -> bool:
        return 1 <= task_id <= MAX_STORABLE_INT

    def _owned(self, owner_id: int) -> Query:
        return self.session.query(TaskModel).filter(TaskModel.user_id == owner_id)

    def _filtered(
        self,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None
    ) -> Query:
        query = self._owned(owner_id)

        if status:
            query = query.filter(TaskModel.status == TaskStatus(status))

        if search:
            term = search.strip()
            query = query.filter(or_(
                TaskModel.title.icontains(term, autoescape=True),
                TaskModel.description.icontains(term, autoescape=True),
            ))

        return query

    def save(self, task: Task) -> Task:
        """Save a task entity."""
        try:
            if task.is_new:
                model = self.mapper.domain_to_model(task)
                self.session.add(model)
            else:
                model = self._owned(task.owner_id).filter(TaskModel.id == task.id).first()
                if not model:
                    raise EntityNotFoundError("Task", task.id)
                self.mapper.update_model(model, task)

            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.error("Error saving task %s", task.id, exc_info=True)
            raise InternalError()

        if task.is_new:
            task.id = model.id
        return task

    def find_by_id_and_owner(self, task_id: int, owner_id: int) -> Optional[Task]:
        """Get task by ID, scoped to its owner."""
        if not self._storable(task_id):
            return None

        try:
            model = self._owned(owner_id).filter(TaskModel.id == task_id).first()
        except SQLAlchemyError:
            logger.error("Error retrieving task %s", task_id, exc_info=True)
            raise InternalError()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_by_owner(
        self,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Task]:
        """Get an owner's tasks, newest first."""
        query = self._filtered(owner_id, status, search).order_by(
            TaskModel.created_at.desc(), TaskModel.id.desc()
        )

        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        try:
            models = query.all()
        except SQLAlchemyError:
            logger.error("Error listing tasks", exc_info=True)
            raise InternalError()

        return [self.mapper.model_to_domain(model) for model in models]

    def count_by_owner(
        self,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None
    ) -> int:
        """Get total task count for the owner's filters."""
        try:
            return self._filtered(owner_id, status, search).with_entities(
                func.count(TaskModel.id)
            ).scalar() or 0
        except SQLAlchemyError:
            logger.error("Error counting tasks", exc_info=True)
            raise InternalError()

    def count_by_status(self, owner_id: int) -> Dict[str, int]:
        """Get task counts grouped by status."""
        counts = {status.value: 0 for status in TaskStatus}
        try:
            rows = self.session.query(
                TaskModel.status, func.count(TaskModel.id)
            ).filter(
                TaskModel.user_id == owner_id
            ).group_by(TaskModel.status).all()
        except SQLAlchemyError:
            logger.error("Error counting tasks by status", exc_info=True)
            raise InternalError()

        for status, count in rows:
            counts[TaskStatus(status).value] = count
        return counts

    def delete(self, task_id: int, owner_id: int) -> bool:
        """Delete task by ID, scoped to its owner."""
        if not self._storable(task_id):
            return False

        try:
            deleted = self._owned(owner_id).filter(
                TaskModel.id == task_id
            ).delete(synchronize_session=False)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.error("Error deleting task %s", task_id, exc_info=True)
            raise InternalError()

        return deleted > 0
