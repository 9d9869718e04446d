"""
Authentication infrastructure module.
Handles JWT issuance and validation, password hashing, and identity lookup.
"""

from .jwt_handler import JWTHandler
from .password_hasher import BcryptPasswordHasher
from .dependencies import (
    get_current_user_id,
    get_password_hasher,
    get_token_service
)

__all__ = [
    "JWTHandler",
    "BcryptPasswordHasher",
    "get_current_user_id",
    "get_password_hasher",
    "get_token_service"
]
