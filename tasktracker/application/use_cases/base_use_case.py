"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from datetime import datetime

from tasktracker.domain.models.base import AuthenticationError
from tasktracker.infrastructure.validation import ValidationResult


T = TypeVar('T')
R = TypeVar('R')

logger = logging.getLogger(__name__)


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.

    Domain exceptions raised while validating or executing propagate to the
    caller; the web layer maps them to HTTP responses.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    def execute(self, request: T) -> R:
        """
        Execute the use case: validate the request, then run the business logic.
        """
        self.execution_start = datetime.utcnow()
        try:
            self._validate(request).raise_for_error()
            return self._execute_business_logic(request)
        finally:
            self.execution_end = datetime.utcnow()
            logger.debug(
                "%s finished in %.4fs",
                type(self).__name__,
                (self.execution_end - self.execution_start).total_seconds()
            )

    def _validate(self, request: T) -> ValidationResult:
        """
        Validate the request. Override in subclasses if needed.
        """
        return ValidationResult.ok()

    @abstractmethod
    def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Base class for use cases that act on behalf of an authenticated user.
    """

    def __init__(self, current_user_id: Optional[int]):
        super().__init__()
        self.current_user_id = current_user_id

    def execute(self, request: T) -> R:
        """Execute after checking that a user is attached."""
        if self.current_user_id is None:
            raise AuthenticationError("Access token required", "MISSING_TOKEN")
        return super().execute(request)
