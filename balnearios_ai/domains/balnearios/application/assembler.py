"""
Result assembler: resort ids -> flattened resort + city records.
"""

from __future__ import annotations

from collections.abc import Sequence

from balnearios_ai.domains.balnearios.application.ports import IBalnearioRepository
from balnearios_ai.domains.balnearios.domain.entities import BalnearioConCiudad


class ResultadoAssembler:
    """Joins filtered resort ids with resort records and their owning city."""

    def __init__(self, repository: IBalnearioRepository):
        self._repository = repository

    async def ensamblar(
        self,
        balneario_ids: Sequence[int],
        id_ciudad: int | None = None,
    ) -> list[BalnearioConCiudad]:
        """
        Args:
            balneario_ids: Resorts to include
            id_ciudad: Optional owning-city restriction

        Returns:
            One record per resort, in store order
        """
        if not balneario_ids:
            return []
        return await self._repository.obtener_balnearios_con_ciudad(
            balneario_ids=list(balneario_ids),
            id_ciudad=id_ciudad,
        )
