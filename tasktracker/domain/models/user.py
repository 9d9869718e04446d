"""
User domain model.
Represents a registered account that owns tasks.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from tasktracker.domain.models.base import BaseEntity, ValidationError


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively; store and look them up lower-cased."""
    return email.strip().lower()


@dataclass
class User(BaseEntity):
    """
    User entity.
    Holds the password hash only; the raw secret never reaches this object.
    """

    email: str = ""
    name: str = ""
    password_hash: str = ""

    def __post_init__(self):
        """Initialize user after creation."""
        super().__post_init__()
        self.email = normalize_email(self.email) if self.email else self.email
        self.validate()

    def validate(self) -> None:
        """Validate user invariants."""
        if not self.email:
            raise ValidationError("Email is required", "email")
        if not self.password_hash:
            raise ValidationError("Password hash is required", "password")

    @classmethod
    def create(cls, email: str, name: str, password_hash: str) -> "User":
        """Factory method to create a new user."""
        return cls(email=email, name=name.strip(), password_hash=password_hash)

    def to_public_dict(self) -> Dict[str, Any]:
        """Public representation, never includes the password hash."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
        }
