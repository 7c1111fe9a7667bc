"""
City and service resolvers

Turn free-text (possibly partial) names into store identifiers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from balnearios_ai.domains.balnearios.application.ports import IBalnearioRepository
from balnearios_ai.domains.balnearios.domain.services import MatchingService

logger = logging.getLogger(__name__)


class CiudadResolver:
    """
    Resolves a city name fragment to a single city id.

    "No match" is an answer (None), not an error.
    """

    def __init__(self, repository: IBalnearioRepository):
        self._repository = repository

    async def resolver(self, nombre: str | None) -> int | None:
        """
        Args:
            nombre: City name or part of it, any case

        Returns:
            Matching city id, or None when no city name contains the text
        """
        consulta = (nombre or "").strip()
        if not consulta:
            return None

        ciudades = await self._repository.buscar_ciudades_por_nombre(consulta)
        ciudad = MatchingService.preferir_exacta(consulta, ciudades, lambda c: c.nombre)
        if ciudad is None:
            logger.info(f"No city matches '{consulta}'")
            return None

        if len(ciudades) > 1:
            logger.debug(
                f"City query '{consulta}' matched {len(ciudades)} cities, using '{ciudad.nombre}' (id={ciudad.id_ciudad})"
            )
        return ciudad.id_ciudad


class ServicioResolver:
    """
    Resolves a list of service name fragments to service ids.

    Every fragment must resolve to exactly one service; if any fragment
    matches nothing the whole resolution fails (None). Fragments resolving to
    the same service collapse into one id.
    """

    def __init__(self, repository: IBalnearioRepository):
        self._repository = repository

    async def resolver(self, nombres: Sequence[str] | None) -> list[int] | None:
        """
        Args:
            nombres: Service names or parts of them

        Returns:
            Distinct service ids in request order, or None if not all were found
        """
        fragmentos = [(nombre or "").strip() for nombre in (nombres or [])]
        if not fragmentos or not all(fragmentos):
            return None

        servicios = await self._repository.buscar_servicios_por_nombres(fragmentos)

        ids: list[int] = []
        for fragmento in fragmentos:
            servicio = MatchingService.seleccionar(fragmento, servicios, lambda s: s.nombre)
            if servicio is None:
                logger.info(f"Service '{fragmento}' not found, {len(servicios)} candidates for {fragmentos}")
                return None
            if servicio.id_servicio not in ids:
                ids.append(servicio.id_servicio)

        return ids
