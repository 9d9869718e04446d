"""
Authentication dependencies for FastAPI.
Provides access to the auth components built by the application factory and
to the identity injected by the authentication middleware.
"""

from fastapi import Request

from tasktracker.domain.models.base import AuthenticationError
from tasktracker.domain.services.auth_service import PasswordHasher, TokenService


def get_token_service(request: Request) -> TokenService:
    """Dependency to get the token service."""
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    """Dependency to get the password hasher."""
    return request.app.state.password_hasher


def get_current_user_id(request: Request) -> int:
    """
    FastAPI dependency to get current authenticated user ID.

    The authentication middleware stores the verified id on request.state.

    Raises:
        AuthenticationError: If the request did not pass through authentication
    """
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise AuthenticationError("Access token required", "MISSING_TOKEN")
    return user_id
