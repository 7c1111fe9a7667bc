"""
API middleware
"""

from .logging_middleware import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
