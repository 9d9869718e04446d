"""
Database infrastructure for the task tracker.
"""

from .database import (
    Base,
    create_db_engine,
    create_session_factory,
    get_db_session,
    init_db,
)
from .models import UserModel, TaskModel

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "get_db_session",
    "init_db",
    "UserModel",
    "TaskModel",
]
