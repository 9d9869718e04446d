"""
Domain models for the task tracker.
This module exports all domain entities and the error taxonomy.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    AuthenticationError,
    EntityNotFoundError,
    DuplicateEntityError,
    InternalError
)

# Domain entities
from .task import Task, TaskStatus
from .user import User, normalize_email

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "AuthenticationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "InternalError",
    "Task",
    "TaskStatus",
    "User",
    "normalize_email",
]
