"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from tasktracker.domain.models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity.
    Users are created once and read at login; they are never updated or deleted.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Persist a new user.
        Raises DuplicateEntityError if the email is already registered.
        """
        pass

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by ID.
        """
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email, case-insensitively.
        """
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """
        Check whether an account already uses this email.
        """
        pass
