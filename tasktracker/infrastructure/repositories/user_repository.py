"""
User repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.domain.models.base import DuplicateEntityError, InternalError
from tasktracker.domain.models.user import User, normalize_email
from tasktracker.domain.repositories.user_repository import UserRepository
from tasktracker.infrastructure.db.models import UserModel
from tasktracker.infrastructure.mappers.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = UserMapper()

    def save(self, user: User) -> User:
        """Save a new user entity."""
        if self.exists_by_email(user.email):
            raise DuplicateEntityError("User", "email", user.email)

        model = self.mapper.domain_to_model(user)
        try:
            self.session.add(model)
            self.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration
            self.session.rollback()
            raise DuplicateEntityError("User", "email", user.email)
        except SQLAlchemyError:
            self.session.rollback()
            logger.error("Error creating user", exc_info=True)
            raise InternalError()

        user.id = model.id
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        try:
            model = self.session.query(UserModel).filter_by(id=user_id).first()
        except SQLAlchemyError:
            logger.error("Error retrieving user %s", user_id, exc_info=True)
            raise InternalError()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        try:
            model = self.session.query(UserModel).filter_by(
                email=normalize_email(email)
            ).first()
        except SQLAlchemyError:
            logger.error("Error retrieving user by email", exc_info=True)
            raise InternalError()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def exists_by_email(self, email: str) -> bool:
        """Check if user exists by email."""
        try:
            return self.session.query(
                self.session.query(UserModel).filter_by(
                    email=normalize_email(email)
                ).exists()
            ).scalar()
        except SQLAlchemyError:
            logger.error("Error checking email availability", exc_info=True)
            raise InternalError()
