"""
Task management router.
Handles CRUD, filtering, search and statistics for the current user's tasks.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from tasktracker.application.dto.base_dto import MessageResponseDTO
from tasktracker.application.dto.task_dto import (
    CreateTaskRequestDTO,
    ListTasksRequestDTO,
    PaginatedTaskListResponseDTO,
    TaskDataResponseDTO,
    TaskListResponseDTO,
    TaskMutationResponseDTO,
    TaskResponseDTO,
    TaskStatsDTO,
    TaskStatsResponseDTO,
    UpdateTaskRequestDTO,
)
from tasktracker.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    SearchTasksUseCase,
    TaskPage,
    TaskStatsUseCase,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from tasktracker.domain.models.task import Task
from tasktracker.infrastructure.auth import get_current_user_id
from tasktracker.infrastructure.db.database import get_db_session
from tasktracker.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository


router = APIRouter()


def get_task_repository(session: Session = Depends(get_db_session)) -> SQLAlchemyTaskRepository:
    """Dependency to get task repository."""
    return SQLAlchemyTaskRepository(session)


def _to_list_response(tasks: List[Task]) -> TaskListResponseDTO:
    data = [TaskResponseDTO.from_domain(task) for task in tasks]
    return TaskListResponseDTO(data=data, count=len(data))


def _list_tasks(
    http_request: Request,
    repository: SQLAlchemyTaskRepository,
    user_id: int,
    request: ListTasksRequestDTO
) -> TaskPage:
    settings = http_request.app.state.settings
    use_case = ListTasksUseCase(
        repository,
        user_id,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size
    )
    return use_case.execute(request)


@router.get("")
def list_tasks(
    http_request: Request,
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)],
    task_status: Optional[str] = Query(None, alias="status", description="Filter by task status"),
    q: Optional[str] = Query(None, description="Search in title and description"),
    page: Optional[int] = Query(None, ge=1, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, ge=1, description="Number of tasks per page")
):
    """
    List the current user's tasks, newest first.

    - **status**: Filter by status (pending, completed)
    - **q**: Case-insensitive search in title and description
    - **page**: Page number; enables pagination
    - **limit**: Page size; enables pagination
    """
    request = ListTasksRequestDTO(status=task_status, search=q, page=page, limit=limit)
    result = _list_tasks(http_request, repository, user_id, request)
    data = [TaskResponseDTO.from_domain(task) for task in result.items]

    if request.is_paginated:
        return PaginatedTaskListResponseDTO(
            data=data,
            total=result.total,
            page=result.page,
            limit=result.limit
        )
    return TaskListResponseDTO(data=data, count=len(data))


@router.get("/search", response_model=TaskListResponseDTO)
def search_tasks(
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)],
    q: Optional[str] = Query(None, description="Search term")
):
    """
    Search the current user's tasks by title or description.

    - **q**: Search term (required)
    """
    use_case = SearchTasksUseCase(repository, user_id)
    return _to_list_response(use_case.execute(q))


@router.get("/stats", response_model=TaskStatsResponseDTO)
def task_stats(
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
):
    """Count the current user's tasks per status."""
    use_case = TaskStatsUseCase(repository, user_id)
    return TaskStatsResponseDTO(data=TaskStatsDTO(**use_case.execute(None)))


@router.get("/status/{task_status}", response_model=TaskListResponseDTO)
def list_tasks_by_status(
    task_status: str,
    http_request: Request,
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
):
    """
    List the current user's tasks with the given status.

    - **task_status**: pending or completed
    """
    request = ListTasksRequestDTO(status=task_status)
    result = _list_tasks(http_request, repository, user_id, request)
    return _to_list_response(result.items)


@router.get("/{task_id}", response_model=TaskDataResponseDTO)
def get_task(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
):
    """
    Get a specific task by ID.

    - **task_id**: Task ID to retrieve
    """
    use_case = GetTaskUseCase(repository, user_id)
    task = use_case.execute(task_id)
    return TaskDataResponseDTO(data=TaskResponseDTO.from_domain(task))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskMutationResponseDTO)
def create_task(
    request: CreateTaskRequestDTO,
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
):
    """
    Create a new task.

    - **title**: Task title (required, 3-255 characters)
    - **description**: Task description (up to 1000 characters)
    - **status**: pending (default) or completed
    """
    use_case = CreateTaskUseCase(repository, user_id)
    task = use_case.execute(request)
    return TaskMutationResponseDTO(
        message="Task created successfully",
        data=TaskResponseDTO.from_domain(task)
    )


@router.put("/{task_id}", response_model=TaskMutationResponseDTO)
def update_task(
    task_id: int,
    request: UpdateTaskRequestDTO,
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
):
    """
    Update an existing task. Only the supplied fields change.

    - **task_id**: Task ID to update
    - **title**: New title
    - **description**: New description
    - **status**: pending or completed
    """
    use_case = UpdateTaskUseCase(repository, user_id)
    task = use_case.execute(UpdateTaskCommand(task_id=task_id, changes=request))
    return TaskMutationResponseDTO(
        message="Task updated successfully",
        data=TaskResponseDTO.from_domain(task)
    )


@router.delete("/{task_id}", response_model=MessageResponseDTO)
def delete_task(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
):
    """
    Delete a task.

    - **task_id**: Task ID to delete
    """
    use_case = DeleteTaskUseCase(repository, user_id)
    use_case.execute(task_id)
    return MessageResponseDTO(message="Task deleted successfully")
