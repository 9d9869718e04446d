"""
Authentication middleware for FastAPI.
Handles bearer token validation and user context injection.
"""

import logging
from typing import Iterable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from tasktracker.domain.services.auth_service import TokenService
from tasktracker.infrastructure.web.middleware.error_handler import error_response

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Access token required"
INVALID_TOKEN_MESSAGE = "Invalid token"


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Middleware for bearer token authentication.

    Requests under the protected prefix must carry ``Authorization: Bearer <token>``.
    Rejected requests never reach a handler. Accepted requests get the
    verified user id on ``request.state.user_id``.
    """

    def __init__(
        self,
        app,
        token_service: TokenService,
        protected_prefix: str = "/api/",
        public_endpoints: Optional[Iterable[str]] = None
    ):
        super().__init__(app)
        self.token_service = token_service
        self.protected_prefix = protected_prefix

        # Endpoints under the protected prefix that don't require authentication
        self.public_endpoints = set(public_endpoints or (
            "/api/register",
            "/api/login",
        ))

    async def dispatch(self, request: Request, call_next):
        """Process request through authentication middleware."""
        if not self._requires_auth(request):
            return await call_next(request)

        token = self._extract_token(request)
        if not token:
            logger.info("Rejected %s %s: missing token", request.method, request.url.path)
            return self._create_auth_error(MISSING_TOKEN_MESSAGE)

        verification = self.token_service.verify(token)
        if not verification.ok:
            logger.info(
                "Rejected %s %s: %s token",
                request.method, request.url.path, verification.error.value
            )
            return self._create_auth_error(INVALID_TOKEN_MESSAGE)

        # Inject user context into request state
        request.state.user_id = verification.user_id

        return await call_next(request)

    def _requires_auth(self, request: Request) -> bool:
        """Check whether the request targets a protected endpoint."""
        # CORS preflight carries no credentials
        if request.method == "OPTIONS":
            return False

        path = request.url.path.rstrip("/") or "/"
        if path in self.public_endpoints:
            return False

        return request.url.path.startswith(self.protected_prefix)

    def _extract_token(self, request: Request) -> Optional[str]:
        """Extract JWT token from Authorization header."""
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer":
            return None

        return token.strip() or None

    def _create_auth_error(self, message: str) -> JSONResponse:
        """Create standardized authentication error response."""
        return error_response(
            status.HTTP_401_UNAUTHORIZED,
            message,
            headers={"WWW-Authenticate": "Bearer"}
        )
