"""
Balnearios Infrastructure Repositories

Repository implementations for data access.
"""

from .balneario_repository import SQLAlchemyBalnearioRepository
from .filters import build_substring_filter, escape_like

__all__ = [
    "SQLAlchemyBalnearioRepository",
    "build_substring_filter",
    "escape_like",
]
