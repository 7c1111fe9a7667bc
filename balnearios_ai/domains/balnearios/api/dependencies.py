"""
Balnearios API Dependencies

FastAPI dependencies for the balnearios domain.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from balnearios_ai.database.async_db import get_async_db
from balnearios_ai.domains.balnearios.application.services import BusquedaService
from balnearios_ai.domains.balnearios.infrastructure.repositories import SQLAlchemyBalnearioRepository

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_async_db)]


def get_busqueda_service(db: DbSession) -> BusquedaService:
    """Get a BusquedaService bound to the request's database session."""
    return BusquedaService(SQLAlchemyBalnearioRepository(db))


BusquedaServiceDep = Annotated[BusquedaService, Depends(get_busqueda_service)]

__all__ = [
    "BusquedaServiceDep",
    "get_busqueda_service",
]
