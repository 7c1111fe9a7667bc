"""
Application entry point.
"""

from balnearios_ai.config.settings import get_settings
from balnearios_ai.core.app_factory import create_app
from balnearios_ai.core.shared.logger import configure_logging, get_logger

settings = get_settings()
configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT, log_file=settings.LOG_FILE)

logger = get_logger(__name__)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "balnearios_ai.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
