"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.exceptions import StorageError
from shared.logging_config import setup_logging

from .dependencies import ServiceContainer
from .middleware.errors import register_exception_handlers
from .routes import auth, health, review, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Makes sure the user store exists before serving requests.
    """
    container: ServiceContainer = app.state.container
    settings = container.settings

    if settings.uses_default_secret:
        logger.warning("JWT_SECRET is not set; signing tokens with the insecure default secret")

    try:
        await container.users.ensure_storage()
    except StorageError as e:
        logger.error(f"Cannot initialize user store: {e.message}")
        raise

    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"(users file: {settings.users_file})"
    )
    yield
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to build services from. Defaults to the
            cached environment settings.

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Account registration and heuristic code review API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.container = ServiceContainer(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, prefix="/auth", tags=["auth"])
    app.include_router(review.router, prefix="/ai", tags=["review"])
    app.include_router(users.router, tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
