"""
Unit tests for MembershipService (strict AND amenity filter).
"""

import pytest

from balnearios_ai.domains.balnearios.domain.services import MembershipService
from tests.utils import asociar


@pytest.mark.unit
class TestMembershipService:
    """Conjunction over association rows."""

    @pytest.fixture
    def asociaciones(self):
        return asociar(
            (10, 100), (10, 101), (10, 103),
            (11, 100),
            (12, 101),
            (13, 100), (13, 101),
        )

    def test_resort_must_offer_every_requested_service(self, asociaciones):
        resultado = MembershipService.filtrar_por_todos_los_servicios(asociaciones, [100, 101])

        assert resultado == [10, 13]

    def test_extra_services_do_not_disqualify(self, asociaciones):
        resultado = MembershipService.filtrar_por_todos_los_servicios(asociaciones, [100])

        assert resultado == [10, 11, 13]

    def test_empty_request_returns_empty(self, asociaciones):
        assert MembershipService.filtrar_por_todos_los_servicios(asociaciones, []) == []

    def test_no_rows_returns_empty(self):
        assert MembershipService.filtrar_por_todos_los_servicios([], [100, 101]) == []

    def test_service_nobody_offers_empties_result(self, asociaciones):
        assert MembershipService.filtrar_por_todos_los_servicios(asociaciones, [100, 999]) == []

    def test_duplicate_requested_ids_count_once(self, asociaciones):
        resultado = MembershipService.filtrar_por_todos_los_servicios(asociaciones, [100, 100, 101])

        assert resultado == [10, 13]

    def test_rows_for_unrequested_services_are_ignored(self):
        # 20 offers 100 plus two services nobody asked for; the extra rows must not
        # push its count up to the number of requested services
        filas = asociar((20, 100), (20, 500), (20, 501), (21, 100), (21, 101))

        resultado = MembershipService.filtrar_por_todos_los_servicios(filas, [100, 101])

        assert resultado == [21]

    def test_conjunction_matches_brute_force(self, asociaciones):
        ofrecidos: dict[int, set[int]] = {}
        for a in asociaciones:
            ofrecidos.setdefault(a.id_balneario, set()).add(a.id_servicio)

        for requeridos in ([100], [101], [103], [100, 101], [100, 103], [100, 101, 103], [104]):
            esperado = {b for b, servicios in ofrecidos.items() if set(requeridos) <= servicios}
            resultado = MembershipService.filtrar_por_todos_los_servicios(asociaciones, requeridos)
            assert set(resultado) == esperado
            assert len(resultado) == len(set(resultado))
