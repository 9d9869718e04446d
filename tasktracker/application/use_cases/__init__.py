"""
Application layer use cases.
Business logic for the task tracker.
"""

from .base_use_case import BaseUseCase, AuthorizedUseCase
from .auth_use_cases import AuthResult, RegisterUserUseCase, LoginUserUseCase
from .task_use_cases import (
    TaskPage,
    UpdateTaskCommand,
    CreateTaskUseCase,
    GetTaskUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    SearchTasksUseCase,
    TaskStatsUseCase,
)

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "AuthorizedUseCase",

    # Auth
    "AuthResult",
    "RegisterUserUseCase",
    "LoginUserUseCase",

    # Tasks
    "TaskPage",
    "UpdateTaskCommand",
    "CreateTaskUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "ListTasksUseCase",
    "SearchTasksUseCase",
    "TaskStatsUseCase",
]
