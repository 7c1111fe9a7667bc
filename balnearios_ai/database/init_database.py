"""
Creación de tablas para desarrollo local y tests.

En producción el esquema lo administra el almacén externo; esta función no
migra ni modifica tablas existentes.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from balnearios_ai.models.db import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Crea las tablas que falten (ciudades, balnearios, servicios, balnearios_servicios)"""
    if engine is None:
        from balnearios_ai.database.async_db import async_engine

        engine = async_engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created successfully")


async def drop_tables(engine: AsyncEngine) -> None:
    """Elimina todas las tablas (¡CUIDADO!)"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All database tables dropped")
