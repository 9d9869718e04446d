"""
Task mapper for converting between domain entities and database models.
"""

from tasktracker.domain.models.task import Task, TaskStatus
from tasktracker.infrastructure.db.models import TaskModel


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to TaskModel."""
        return TaskModel(
            id=task.id,
            user_id=task.owner_id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at
        )

    def update_model(self, model: TaskModel, task: Task) -> TaskModel:
        """Copy mutable fields of the entity onto an existing row."""
        model.title = task.title
        model.description = task.description
        model.status = task.status
        model.updated_at = task.updated_at
        return model

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity."""
        return Task(
            id=model.id,
            owner_id=model.user_id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status) if model.status else TaskStatus.PENDING,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
