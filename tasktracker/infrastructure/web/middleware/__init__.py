"""
Web middleware.
"""

from .auth_middleware import AuthenticationMiddleware
from .error_handler import ErrorHandlerMiddleware, register_exception_handlers

__all__ = [
    "AuthenticationMiddleware",
    "ErrorHandlerMiddleware",
    "register_exception_handlers",
]
