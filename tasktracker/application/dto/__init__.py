"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    ResponseDTO,
    EnvelopeDTO,
    MessageResponseDTO,
    ErrorResponseDTO,
)
from .auth_dto import (
    RegisterRequestDTO,
    LoginRequestDTO,
    UserResponseDTO,
    AuthResponseDTO,
)
from .task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskRequestDTO,
    ListTasksRequestDTO,
    TaskResponseDTO,
    TaskDataResponseDTO,
    TaskMutationResponseDTO,
    TaskListResponseDTO,
    PaginatedTaskListResponseDTO,
    TaskStatsDTO,
    TaskStatsResponseDTO,
)

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "EnvelopeDTO",
    "MessageResponseDTO",
    "ErrorResponseDTO",

    # Auth DTOs
    "RegisterRequestDTO",
    "LoginRequestDTO",
    "UserResponseDTO",
    "AuthResponseDTO",

    # Task DTOs
    "CreateTaskRequestDTO",
    "UpdateTaskRequestDTO",
    "ListTasksRequestDTO",
    "TaskResponseDTO",
    "TaskDataResponseDTO",
    "TaskMutationResponseDTO",
    "TaskListResponseDTO",
    "PaginatedTaskListResponseDTO",
    "TaskStatsDTO",
    "TaskStatsResponseDTO",
]
