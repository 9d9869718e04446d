"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
from typing import Dict, Any, Optional

from tasktracker.config import Settings, get_settings
from tasktracker.infrastructure.auth import BcryptPasswordHasher, JWTHandler
from tasktracker.infrastructure.db.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from tasktracker.infrastructure.web.middleware.auth_middleware import AuthenticationMiddleware
from tasktracker.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from tasktracker.infrastructure.web.routers import auth, tasks

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    yield

    # Shutdown
    logger.info("Shutting down application")
    app.state.engine.dispose()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Everything a request needs (settings, signing secret, hasher, session
    factory) is built here and stored on ``app.state``.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # Shared components
    engine = create_db_engine(settings.database_url, echo=settings.debug)
    init_db(engine)

    token_service = JWTHandler(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_access_token_expire_seconds
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.token_service = token_service
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)

    # Add authentication middleware
    app.add_middleware(
        AuthenticationMiddleware,
        token_service=token_service,
        protected_prefix=f"{settings.api_prefix}/",
        public_endpoints=(f"{settings.api_prefix}/register", f"{settings.api_prefix}/login")
    )

    # Add CORS middleware; wraps authentication so 401s carry CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(
        auth.router,
        prefix=settings.api_prefix,
        tags=["Authentication"]
    )
    app.include_router(
        tasks.router,
        prefix=f"{settings.api_prefix}/tasks",
        tags=["Tasks"]
    )

    # Root endpoint
    @app.get("/")
    def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": "/docs" if settings.debug else None,
            "health": "/health"
        }

    # Health check endpoint
    @app.get("/health")
    def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "timestamp": int(time.time()),
            "service": settings.api_title
        }

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tasktracker.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
