"""
Balnearios Application Ports

Interface definitions (ports) for the Balnearios domain.
Uses Protocol for structural typing, so tests can pass an in-memory fake.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from balnearios_ai.domains.balnearios.domain.entities import (
        AsociacionServicio,
        Balneario,
        BalnearioConCiudad,
        Ciudad,
        Servicio,
    )


@runtime_checkable
class IBalnearioRepository(Protocol):
    """
    Read-only port over the externally owned store.

    Every method is one round trip. Natural order is ascending primary key.
    Implementations raise DataStoreException when the store read fails.
    """

    async def buscar_ciudades_por_nombre(self, nombre: str) -> list[Ciudad]:
        """Cities whose name contains ``nombre`` (case-insensitive)"""
        ...

    async def buscar_servicios_por_nombres(self, nombres: Sequence[str]) -> list[Servicio]:
        """Services whose name contains any of ``nombres`` (one OR query)"""
        ...

    async def obtener_asociaciones(self, servicio_ids: Sequence[int]) -> list[AsociacionServicio]:
        """Association rows whose service id is in ``servicio_ids``"""
        ...

    async def obtener_balnearios_por_ciudad(self, id_ciudad: int) -> list[Balneario]:
        """Resorts owned by a city, without join"""
        ...

    async def obtener_balnearios_con_ciudad(
        self,
        balneario_ids: Sequence[int] | None = None,
        id_ciudad: int | None = None,
    ) -> list[BalnearioConCiudad]:
        """
        Resorts joined with their owning city.

        ``balneario_ids=None`` means every resort; ``id_ciudad`` further
        restricts to one city.
        """
        ...

    async def listar_ciudades(self) -> list[Ciudad]:
        """All cities"""
        ...


__all__ = [
    "IBalnearioRepository",
]
