"""
Application lifecycle management (FastAPI lifespan).

Startup checks database connectivity; shutdown disposes the engine pool.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from balnearios_ai.config.settings import get_settings
from balnearios_ai.database import check_async_db_connection, close_async_db_connections

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Handles startup verification and graceful shutdown."""

    def __init__(self) -> None:
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        settings = get_settings()
        logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

        # The API stays up without a database: store failures surface as 503 per request
        if await check_async_db_connection():
            logger.info("Database connectivity verified")
        else:
            logger.warning("Database not reachable at startup")

        logger.info(f"LLM: {settings.OLLAMA_API_MODEL} at {settings.OLLAMA_API_URL}")
        self._initialized = True

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        await close_async_db_connections()
        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()
    await lifecycle.startup()
    yield
    await lifecycle.shutdown()
