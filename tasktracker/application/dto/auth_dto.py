"""
Authentication DTOs for the application layer.
"""

from typing import Optional
from pydantic import Field

from .base_dto import MessageResponseDTO, RequestDTO, ResponseDTO


class RegisterRequestDTO(RequestDTO):
    """DTO for registering a new account. Presence and format are checked by the validators."""

    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")
    password: Optional[str] = Field(default=None, description="Password, at least 6 characters")


class LoginRequestDTO(RequestDTO):
    """DTO for logging in."""

    email: Optional[str] = Field(default=None, description="Email address")
    password: Optional[str] = Field(default=None, description="Password")


class UserResponseDTO(ResponseDTO):
    """Public user fields."""

    id: int
    email: str
    name: str

    @classmethod
    def from_domain(cls, user) -> "UserResponseDTO":
        return cls(**user.to_public_dict())


class AuthResponseDTO(MessageResponseDTO):
    """Response for register and login."""

    token: str = Field(description="Bearer token, valid for one hour")
    user: UserResponseDTO
