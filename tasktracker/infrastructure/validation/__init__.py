"""
Input validation package.
"""

from .validators import (
    PASSWORD_MIN_LENGTH,
    ValidationResult,
    is_valid_email,
    validate_description,
    validate_login,
    validate_registration,
    validate_search_term,
    validate_status,
    validate_task_create,
    validate_task_update,
    validate_title,
)

__all__ = [
    'PASSWORD_MIN_LENGTH',
    'ValidationResult',
    'is_valid_email',
    'validate_description',
    'validate_login',
    'validate_registration',
    'validate_search_term',
    'validate_status',
    'validate_task_create',
    'validate_task_update',
    'validate_title',
]
