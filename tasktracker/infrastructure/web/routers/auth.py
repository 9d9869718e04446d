"""
Authentication router.
Handles user registration and login.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tasktracker.application.dto.auth_dto import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from tasktracker.application.use_cases.auth_use_cases import (
    LoginUserUseCase,
    RegisterUserUseCase,
)
from tasktracker.domain.services.auth_service import PasswordHasher, TokenService
from tasktracker.infrastructure.auth import get_password_hasher, get_token_service
from tasktracker.infrastructure.db.database import get_db_session
from tasktracker.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


router = APIRouter()


def get_user_repository(session: Session = Depends(get_db_session)) -> SQLAlchemyUserRepository:
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponseDTO)
def register(
    request: RegisterRequestDTO,
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)]
):
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Valid email address, unique
    - **password**: At least 6 characters
    """
    use_case = RegisterUserUseCase(repository, password_hasher, token_service)
    result = use_case.execute(request)

    return AuthResponseDTO(
        message="User registered successfully",
        token=result.token,
        user=UserResponseDTO.from_domain(result.user)
    )


@router.post("/login", response_model=AuthResponseDTO)
def login(
    request: LoginRequestDTO,
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)]
):
    """
    Authenticate user and return an access token.

    - **email**: User email address
    - **password**: User password
    """
    use_case = LoginUserUseCase(repository, password_hasher, token_service)
    result = use_case.execute(request)

    return AuthResponseDTO(
        message="Login successful",
        token=result.token,
        user=UserResponseDTO.from_domain(result.user)
    )
