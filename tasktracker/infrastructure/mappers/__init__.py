"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper
from .task_mapper import TaskMapper

__all__ = [
    "UserMapper",
    "TaskMapper"
]
