"""
Balneario Repository Implementation

SQLAlchemy implementation of IBalnearioRepository.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from balnearios_ai.core.domain.exceptions import DataStoreException
from balnearios_ai.core.shared.logger import get_repository_logger
from balnearios_ai.domains.balnearios.application.ports import IBalnearioRepository
from balnearios_ai.domains.balnearios.domain.entities import (
    AsociacionServicio,
    Balneario,
    BalnearioConCiudad,
    Ciudad,
    Servicio,
)
from balnearios_ai.domains.balnearios.infrastructure.repositories.filters import build_substring_filter
from balnearios_ai.models.db import balneario_servicio_association
from balnearios_ai.models.db import Balneario as BalnearioModel
from balnearios_ai.models.db import Ciudad as CiudadModel
from balnearios_ai.models.db import Servicio as ServicioModel

logger = get_repository_logger("balnearios")


class SQLAlchemyBalnearioRepository(IBalnearioRepository):
    """
    SQLAlchemy implementation of the balnearios repository.

    Read-only: issues SELECTs only, never commits.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def buscar_ciudades_por_nombre(self, nombre: str) -> list[Ciudad]:
        """Cities whose name contains ``nombre``, ordered by id."""
        stmt = (
            select(CiudadModel)
            .where(build_substring_filter(CiudadModel.nombre, [nombre]))
            .order_by(CiudadModel.id_ciudad)
        )
        result = await self._execute(stmt, "buscar_ciudades_por_nombre")
        return [self._ciudad_to_entity(m) for m in result.scalars().all()]

    async def buscar_servicios_por_nombres(self, nombres: Sequence[str]) -> list[Servicio]:
        """Services whose name contains any of ``nombres``, ordered by id."""
        stmt = (
            select(ServicioModel)
            .where(build_substring_filter(ServicioModel.nombre, nombres))
            .order_by(ServicioModel.id_servicio)
        )
        result = await self._execute(stmt, "buscar_servicios_por_nombres")
        return [self._servicio_to_entity(m) for m in result.scalars().all()]

    async def obtener_asociaciones(self, servicio_ids: Sequence[int]) -> list[AsociacionServicio]:
        """Association rows for the given services."""
        if not servicio_ids:
            return []

        tabla = balneario_servicio_association
        stmt = (
            select(tabla.c.id_balneario, tabla.c.id_servicio)
            .where(tabla.c.id_servicio.in_(list(servicio_ids)))
            .order_by(tabla.c.id_balneario, tabla.c.id_servicio)
        )
        result = await self._execute(stmt, "obtener_asociaciones")
        return [
            AsociacionServicio(id_balneario=row.id_balneario, id_servicio=row.id_servicio)
            for row in result.all()
        ]

    async def obtener_balnearios_por_ciudad(self, id_ciudad: int) -> list[Balneario]:
        """Resorts with ``id_ciudad`` as owning city."""
        stmt = (
            select(BalnearioModel)
            .where(BalnearioModel.id_ciudad == id_ciudad)
            .order_by(BalnearioModel.id_balneario)
        )
        result = await self._execute(stmt, "obtener_balnearios_por_ciudad")
        return [self._balneario_to_entity(m) for m in result.scalars().all()]

    async def obtener_balnearios_con_ciudad(
        self,
        balneario_ids: Sequence[int] | None = None,
        id_ciudad: int | None = None,
    ) -> list[BalnearioConCiudad]:
        """Resorts LEFT JOINed with their city and projected to the result shape."""
        if balneario_ids is not None and not balneario_ids:
            return []

        stmt = (
            select(
                BalnearioModel.id_balneario,
                BalnearioModel.nombre,
                BalnearioModel.direccion,
                BalnearioModel.telefono,
                BalnearioModel.imagen,
                CiudadModel.nombre.label("ciudad"),
                CiudadModel.img.label("ciudad_img"),
            )
            .outerjoin(CiudadModel, BalnearioModel.id_ciudad == CiudadModel.id_ciudad)
            .order_by(BalnearioModel.id_balneario)
        )
        if balneario_ids is not None:
            stmt = stmt.where(BalnearioModel.id_balneario.in_(list(balneario_ids)))
        if id_ciudad is not None:
            stmt = stmt.where(BalnearioModel.id_ciudad == id_ciudad)

        result = await self._execute(stmt, "obtener_balnearios_con_ciudad")
        return [self._row_to_resultado(row) for row in result.mappings().all()]

    async def listar_ciudades(self) -> list[Ciudad]:
        """All cities, ordered by id."""
        result = await self._execute(select(CiudadModel).order_by(CiudadModel.id_ciudad), "listar_ciudades")
        return [self._ciudad_to_entity(m) for m in result.scalars().all()]

    async def _execute(self, stmt: Any, operation: str):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Store read failed", operation=operation, error=str(e))
            raise DataStoreException(operation, f"Error al consultar la base de datos ({operation}): {e}", e) from e

    # Mapping methods

    def _ciudad_to_entity(self, model: CiudadModel) -> Ciudad:
        return Ciudad(id_ciudad=model.id_ciudad, nombre=model.nombre, img=model.img)

    def _servicio_to_entity(self, model: ServicioModel) -> Servicio:
        return Servicio(id_servicio=model.id_servicio, nombre=model.nombre, imagen=model.imagen)

    def _balneario_to_entity(self, model: BalnearioModel) -> Balneario:
        return Balneario(
            id_balneario=model.id_balneario,
            nombre=model.nombre,
            direccion=model.direccion,
            telefono=model.telefono,
            imagen=model.imagen,
            id_ciudad=model.id_ciudad,
        )

    def _row_to_resultado(self, row: Any) -> BalnearioConCiudad:
        return BalnearioConCiudad(
            id_balneario=row["id_balneario"],
            nombre=row["nombre"],
            direccion=row["direccion"],
            telefono=row["telefono"],
            imagen=row["imagen"],
            ciudad=row["ciudad"],
            ciudad_img=row["ciudad_img"],
        )
