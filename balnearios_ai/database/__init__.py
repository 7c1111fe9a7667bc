"""
Acceso a base de datos (SQLAlchemy async).
"""

from balnearios_ai.database.async_db import (
    AsyncSessionLocal,
    async_engine,
    check_async_db_connection,
    close_async_db_connections,
    get_async_db,
    get_async_db_context,
)
from balnearios_ai.database.init_database import create_tables, drop_tables

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "check_async_db_connection",
    "close_async_db_connections",
    "get_async_db",
    "get_async_db_context",
    "create_tables",
    "drop_tables",
]
