"""
Domain services for the task tracker.
This module exports authentication ports and the ownership policy.
"""

from .auth_service import PasswordHasher, TokenService, TokenError, TokenVerification
from .ownership_policy import OwnershipPolicy

__all__ = [
    "PasswordHasher",
    "TokenService",
    "TokenError",
    "TokenVerification",
    "OwnershipPolicy",
]
