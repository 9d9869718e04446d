"""
Authentication use cases.
Registration and login: validate input, hash or verify the password, issue a token.
"""

import logging
from dataclasses import dataclass

from tasktracker.application.dto.auth_dto import LoginRequestDTO, RegisterRequestDTO
from tasktracker.application.use_cases.base_use_case import BaseUseCase
from tasktracker.domain.models.base import AuthenticationError, DuplicateEntityError
from tasktracker.domain.models.user import User
from tasktracker.domain.repositories.user_repository import UserRepository
from tasktracker.domain.services.auth_service import PasswordHasher, TokenService
from tasktracker.infrastructure.validation import (
    ValidationResult,
    validate_login,
    validate_registration,
)

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """A freshly issued token and the user it was issued for."""

    token: str
    user: User


class RegisterUserUseCase(BaseUseCase[RegisterRequestDTO, AuthResult]):
    """Use case for creating an account."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService
    ):
        super().__init__()
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    def _validate(self, request: RegisterRequestDTO) -> ValidationResult:
        return validate_registration(request.email, request.password, request.name)

    def _execute_business_logic(self, request: RegisterRequestDTO) -> AuthResult:
        if self.user_repository.exists_by_email(request.email):
            raise DuplicateEntityError("User", "email", request.email)

        user = User.create(
            email=request.email,
            name=request.name,
            password_hash=self.password_hasher.hash(request.password)
        )
        user = self.user_repository.save(user)
        logger.info("Registered user %s", user.id)

        return AuthResult(token=self.token_service.issue(user.id), user=user)


class LoginUserUseCase(BaseUseCase[LoginRequestDTO, AuthResult]):
    """Use case for exchanging credentials for a token."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService
    ):
        super().__init__()
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    def _validate(self, request: LoginRequestDTO) -> ValidationResult:
        return validate_login(request.email, request.password)

    def _execute_business_logic(self, request: LoginRequestDTO) -> AuthResult:
        user = self.user_repository.get_by_email(request.email)

        # Same error for unknown email and wrong password
        if user is None or not self.password_hasher.verify(request.password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError("Invalid credentials", "INVALID_CREDENTIALS")

        logger.info("User %s logged in", user.id)
        return AuthResult(token=self.token_service.issue(user.id), user=user)
