"""
Password hashing with bcrypt.
"""

import logging

import bcrypt

from tasktracker.domain.services.auth_service import PasswordHasher

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Salted, cost-factored password hashing."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    @staticmethod
    def _encode(secret: str) -> bytes:
        return secret.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, secret: str) -> str:
        """Hash a plain text password using bcrypt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed_password = bcrypt.hashpw(password=self._encode(secret), salt=salt)
        return hashed_password.decode("utf-8")

    def verify(self, secret: str, digest: str) -> bool:
        """Verify a plain text password against a hashed password."""
        if not secret or not digest:
            return False

        try:
            return bcrypt.checkpw(self._encode(secret), digest.encode("utf-8"))
        except ValueError:
            # Malformed or foreign digest format
            logger.warning("Stored password digest could not be parsed")
            return False
