"""
JWT token handler.
Issues and validates HS256 bearer tokens carrying the user id.
"""

import logging
import math
import time
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError

from tasktracker.domain.services.auth_service import (
    TokenError,
    TokenService,
    TokenVerification,
)

logger = logging.getLogger(__name__)


class JWTHandler(TokenService):
    """
    Handles JWT token issuance and validation.

    Claims have the shape ``{"iat": ..., "exp": ..., "data": {"id": ...}}``.
    Tokens cannot be revoked; expiry is the only invalidation.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: int = 3600,
        clock: Optional[Callable[[], float]] = None
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")

        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.clock = clock or time.time

    def issue(self, user_id: int) -> str:
        """
        Issue a signed access token for the user.

        Args:
            user_id: ID of the authenticated user

        Returns:
            Encoded JWT string
        """
        now = self.clock()
        # Round expiry up so the token lives at least expires_in seconds
        payload = {
            "iat": int(now),
            "exp": math.ceil(now) + self.expires_in,
            "data": {"id": user_id},
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenVerification:
        """
        Verify a token and extract the user id.

        Checks run in order: structure, signature, expiry. Expiry is compared
        exactly against the current time, without leeway.

        Args:
            token: JWT token string

        Returns:
            TokenVerification with the user id, or the rejection reason
        """
        if not token or not isinstance(token, str):
            return TokenVerification.failure(TokenError.MALFORMED)

        try:
            jwt.get_unverified_claims(token)
        except JWTError:
            return TokenVerification.failure(TokenError.MALFORMED)

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "verify_iat": False, "verify_nbf": False}
            )
        except JWTClaimsError as e:
            logger.info("Token claims rejected: %s", e)
            return TokenVerification.failure(TokenError.MALFORMED)
        except JWTError as e:
            logger.info("Token signature rejected: %s", type(e).__name__)
            return TokenVerification.failure(TokenError.BAD_SIGNATURE)

        user_id = self._extract_user_id(payload)
        expires_at = payload.get("exp")
        if user_id is None or not isinstance(expires_at, (int, float)) or isinstance(expires_at, bool):
            return TokenVerification.failure(TokenError.MALFORMED)

        if self.clock() > expires_at:
            return TokenVerification.failure(TokenError.EXPIRED)

        return TokenVerification.success(user_id)

    @staticmethod
    def _extract_user_id(payload: Dict[str, Any]) -> Optional[int]:
        """Read data.id from the claims, accepting integers or numeric strings."""
        data = payload.get("data")
        if not isinstance(data, dict):
            return None

        user_id = data.get("id")
        if isinstance(user_id, bool):
            return None
        if isinstance(user_id, int):
            return user_id
        if isinstance(user_id, str) and user_id.isdigit():
            return int(user_id)
        return None
