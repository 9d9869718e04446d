"""
Authentication service interfaces.
Defines password hashing and bearer token operations used by the
authentication flow, plus the result type returned by token verification.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenError(str, Enum):
    """Reasons a bearer token is rejected."""
    MALFORMED = "malformed"
    EXPIRED = "expired"
    BAD_SIGNATURE = "bad_signature"


@dataclass(frozen=True)
class TokenVerification:
    """
    Result of verifying a bearer token.
    Either carries the embedded user id or the reason the token was rejected.
    """

    user_id: Optional[int] = None
    error: Optional[TokenError] = None

    @classmethod
    def success(cls, user_id: int) -> "TokenVerification":
        """Create a successful result."""
        return cls(user_id=user_id)

    @classmethod
    def failure(cls, error: TokenError) -> "TokenVerification":
        """Create a failed result."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class PasswordHasher(ABC):
    """
    One-way salted hashing of user secrets.
    """

    @abstractmethod
    def hash(self, secret: str) -> str:
        """
        Hash a secret using a deliberately slow, salted algorithm.
        """
        pass

    @abstractmethod
    def verify(self, secret: str, digest: str) -> bool:
        """
        Verify a secret against a stored digest.
        Returns False on mismatch or a malformed digest; never raises for a bad password.
        """
        pass


class TokenService(ABC):
    """
    Issues and verifies signed, time-limited bearer tokens.
    """

    @abstractmethod
    def issue(self, user_id: int) -> str:
        """
        Issue a signed token carrying the user id.
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenVerification:
        """
        Verify a token and return the embedded user id or the rejection reason.
        """
        pass
