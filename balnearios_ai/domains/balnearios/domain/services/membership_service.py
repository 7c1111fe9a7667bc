"""
Membership Service

Domain service for the strict AND amenity filter: a resort qualifies only if
it offers every requested amenity.
"""

from __future__ import annotations

from collections.abc import Iterable

from balnearios_ai.domains.balnearios.domain.entities import AsociacionServicio


class MembershipService:
    """
    Conjunctive membership over the resort/amenity association relation.

    Single Responsibility: decide which resorts offer all requested amenities.
    """

    @classmethod
    def filtrar_por_todos_los_servicios(
        cls,
        asociaciones: Iterable[AsociacionServicio],
        servicio_ids: Iterable[int],
    ) -> list[int]:
        """
        Return the resorts associated with every requested service.

        Single pass over the association rows with a counting map keyed by
        resort. Resorts offering extra, non-requested amenities still qualify.

        Args:
            asociaciones: Association rows (pairs are unique)
            servicio_ids: Requested service identifiers

        Returns:
            Qualifying resort ids, in first-seen order. Empty when no
            services were requested or no rows match.
        """
        requeridos = set(servicio_ids)
        if not requeridos:
            return []

        conteo: dict[int, int] = {}
        for asociacion in asociaciones:
            # Rows outside the requested set never count towards the conjunction
            if asociacion.id_servicio not in requeridos:
                continue
            conteo[asociacion.id_balneario] = conteo.get(asociacion.id_balneario, 0) + 1

        total = len(requeridos)
        return [id_balneario for id_balneario, cantidad in conteo.items() if cantidad == total]
