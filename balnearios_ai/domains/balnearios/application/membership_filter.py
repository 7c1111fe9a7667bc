"""
Conjunctive membership filter backed by the store.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from balnearios_ai.domains.balnearios.application.ports import IBalnearioRepository
from balnearios_ai.domains.balnearios.domain.services import MembershipService

logger = logging.getLogger(__name__)


class FiltroServicios:
    """Finds the resorts that offer every one of a set of services."""

    def __init__(self, repository: IBalnearioRepository):
        self._repository = repository

    async def filtrar_por_todos_los_servicios(self, servicio_ids: Sequence[int]) -> list[int]:
        """
        Args:
            servicio_ids: Already-resolved service ids

        Returns:
            Resort ids associated with all of them; empty for an empty request
        """
        requeridos = list(dict.fromkeys(servicio_ids))
        if not requeridos:
            return []

        asociaciones = await self._repository.obtener_asociaciones(requeridos)
        balneario_ids = MembershipService.filtrar_por_todos_los_servicios(asociaciones, requeridos)

        logger.debug(
            f"{len(asociaciones)} association rows for services {requeridos}, {len(balneario_ids)} resorts offer all"
        )
        return balneario_ids
