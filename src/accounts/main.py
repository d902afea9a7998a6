import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.accounts.api import customers
from src.accounts.api.errors import register_exception_handlers
from src.accounts.config import Settings
from src.accounts.containers import Container, API_MODULES
from src.accounts.logging import configure_logging

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates tables on startup, releases the pool on shutdown."""
    container: Container = app.state.container
    logger.info("Starting Customer Accounts API...")

    db = container.database()
    await db.create_tables()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Customer Accounts API...")
    await db.dispose()


def configure_cors(app: FastAPI, settings: Settings) -> None:
    origins = settings.cors.origins
    if not origins:
        logger.warning(
            "CORS__ALLOWED_ORIGINS is not set. CORS is configured to allow all origins."
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )


def create_app(container: Container, lifespan: LifespanType | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=API_MODULES)

    config = container.config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan or default_lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    register_exception_handlers(app, config)
    configure_cors(app, config)

    app.include_router(customers.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


container = Container()
app = create_app(container=container)
