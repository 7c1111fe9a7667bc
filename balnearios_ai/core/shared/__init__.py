"""
Shared utilities used across domains.
"""

from balnearios_ai.core.shared.logger import (
    ContextLogger,
    configure_logging,
    get_agent_logger,
    get_api_logger,
    get_logger,
    get_repository_logger,
    get_service_logger,
)

__all__ = [
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_agent_logger",
    "get_api_logger",
    "get_service_logger",
    "get_repository_logger",
]
