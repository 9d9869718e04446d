"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository
from .task_repository import SQLAlchemyTaskRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyTaskRepository"
]
