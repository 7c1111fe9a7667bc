"""
Busqueda Service

Application facade for resort search: by city, by required amenities, and by
both. Each operation is a short-circuiting pipeline of store reads; every step
that legitimately finds nothing answers with an empty list.
"""

from __future__ import annotations

from collections.abc import Sequence

from balnearios_ai.core.shared.logger import get_service_logger
from balnearios_ai.domains.balnearios.application.assembler import ResultadoAssembler
from balnearios_ai.domains.balnearios.application.membership_filter import FiltroServicios
from balnearios_ai.domains.balnearios.application.ports import IBalnearioRepository
from balnearios_ai.domains.balnearios.application.resolvers import CiudadResolver, ServicioResolver
from balnearios_ai.domains.balnearios.domain.entities import Balneario, BalnearioConCiudad, Ciudad

logger = get_service_logger("busqueda")


class BusquedaService:
    """
    Stateless search facade.

    Built per request around an injected repository (one store session);
    holds no cache between calls. Store failures propagate as
    DataStoreException.

    Example:
        ```python
        async with AsyncSessionLocal() as session:
            busqueda = BusquedaService(SQLAlchemyBalnearioRepository(session))
            resultados = await busqueda.filtrar_por_ciudad_y_servicios("Miramar", ["Wi-Fi", "Pileta"])
        ```
    """

    def __init__(self, repository: IBalnearioRepository):
        """
        Args:
            repository: Implementation of IBalnearioRepository
        """
        self._repository = repository
        self._ciudades = CiudadResolver(repository)
        self._servicios = ServicioResolver(repository)
        self._filtro = FiltroServicios(repository)
        self._assembler = ResultadoAssembler(repository)

    async def buscar_balnearios_por_ciudad(self, ciudad: str) -> list[Balneario]:
        """Resorts in the city whose name contains ``ciudad``."""
        id_ciudad = await self._ciudades.resolver(ciudad)
        if id_ciudad is None:
            return []

        balnearios = await self._repository.obtener_balnearios_por_ciudad(id_ciudad)
        logger.info("Balnearios por ciudad", ciudad=ciudad, id_ciudad=id_ciudad, total=len(balnearios))
        return balnearios

    async def listar_balnearios_con_ciudades(self) -> list[BalnearioConCiudad]:
        """Every resort joined with its owning city."""
        return await self._repository.obtener_balnearios_con_ciudad()

    async def listar_ciudades(self) -> list[Ciudad]:
        return await self._repository.listar_ciudades()

    async def filtrar_por_servicios(self, servicios: Sequence[str]) -> list[BalnearioConCiudad]:
        """Resorts offering every one of ``servicios``, in any city."""
        return await self.filtrar_por_ciudad_y_servicios(None, servicios)

    async def filtrar_por_ciudad_y_servicios(
        self,
        ciudad: str | None,
        servicios: Sequence[str],
    ) -> list[BalnearioConCiudad]:
        """
        Resorts offering every one of ``servicios``, optionally restricted to
        the city whose name contains ``ciudad``.

        Args:
            ciudad: City name fragment; None or blank means any city
            servicios: Service name fragments, all required

        Returns:
            Matching resorts with their city, empty if any step finds nothing
        """
        servicio_ids = await self._servicios.resolver(servicios)
        if not servicio_ids:
            logger.info("No se encontraron todos los servicios", servicios=list(servicios or []))
            return []

        id_ciudad = None
        if ciudad and ciudad.strip():
            id_ciudad = await self._ciudades.resolver(ciudad)
            if id_ciudad is None:
                return []

        balneario_ids = await self._filtro.filtrar_por_todos_los_servicios(servicio_ids)
        if not balneario_ids:
            return []

        resultados = await self._assembler.ensamblar(balneario_ids, id_ciudad=id_ciudad)
        logger.info(
            "Balnearios filtrados",
            ciudad=ciudad,
            servicio_ids=servicio_ids,
            total=len(resultados),
        )
        return resultados
