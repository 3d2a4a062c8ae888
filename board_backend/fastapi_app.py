"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and DI.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from board_backend.config.logging_config import setup_logging
from board_backend.config.settings import Config, get_config
from board_backend.presentation.api import boards_router
from board_backend.presentation.errors import register_exception_handlers
from board_backend.presentation.middleware import CorrelationIdMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container is already attached by setup_dishka
    - Shutdown: close DI container (disconnects Prisma)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(
    container: AsyncContainer, cfg: type[Config] | None = None
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: dishka container providing handlers and their ports
        cfg: config class for logging (defaults to the APP_ENV selection)

    Returns:
        FastAPI application instance
    """
    cfg = cfg or get_config()
    setup_logging(cfg.LOG_LEVEL, cfg.LOG_PATH or None, cfg.LOG_FORMAT)

    app = FastAPI(
        title="Board API",
        description="CRUD backend for message-board posts",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(boards_router)  # /v1/boards

    return app
