"""
End-to-end search: BusquedaService over SQLAlchemyBalnearioRepository on the
test database.
"""

import pytest
import pytest_asyncio

from balnearios_ai.domains.balnearios.application import BusquedaService
from balnearios_ai.domains.balnearios.infrastructure.repositories import SQLAlchemyBalnearioRepository
from tests.utils import cargar_dataset, crear_dataset_miramar


@pytest_asyncio.fixture
async def busqueda_miramar(async_session_factory):
    async with async_session_factory() as session:
        await cargar_dataset(session, crear_dataset_miramar())

    async with async_session_factory() as session:
        yield BusquedaService(SQLAlchemyBalnearioRepository(session))


@pytest_asyncio.fixture
async def busqueda_demo(seeded_session):
    return BusquedaService(SQLAlchemyBalnearioRepository(seeded_session))


@pytest.mark.integration
@pytest.mark.asyncio
async def test_miramar_wifi_y_pileta(busqueda_miramar):
    resultados = await busqueda_miramar.filtrar_por_ciudad_y_servicios("Miramar", ["Wi-Fi", "Pileta"])

    assert len(resultados) == 1
    assert resultados[0].id_balneario == 10
    assert resultados[0].nombre == "Sol y Mar"
    assert resultados[0].ciudad == "Miramar"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_miramar_spa_unresolved(busqueda_miramar):
    assert await busqueda_miramar.filtrar_por_ciudad_y_servicios("Miramar", ["Wi-Fi", "Spa"]) == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_city_substring_law(busqueda_demo):
    completo = await busqueda_demo.buscar_balnearios_por_ciudad("Miramar")

    assert [b.id_balneario for b in completo] == [10, 11]
    assert await busqueda_demo.buscar_balnearios_por_ciudad("iramar") == completo
    assert await busqueda_demo.buscar_balnearios_por_ciudad("Atlantis") == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_join_completeness(busqueda_demo, dataset_demo):
    ciudades = {c.id_ciudad: c for c in dataset_demo.ciudades}
    duenos = {b.id_balneario: b.id_ciudad for b in dataset_demo.balnearios}

    for resultado in await busqueda_demo.listar_balnearios_con_ciudades():
        ciudad = ciudades.get(duenos[resultado.id_balneario])
        if ciudad is None:
            assert resultado.ciudad is None
            assert resultado.ciudad_img is None
        else:
            assert resultado.ciudad == ciudad.nombre
            assert resultado.ciudad_img == ciudad.img


@pytest.mark.integration
@pytest.mark.asyncio
async def test_filters_across_cities(busqueda_demo):
    resultados = await busqueda_demo.filtrar_por_servicios(["wi-fi", "pileta", "restaurante"])

    assert [(r.nombre, r.ciudad) for r in resultados] == [
        ("Sol y Mar", "Miramar"),
        ("Playa Grande Club", "Mar del Plata"),
    ]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_empty_service_list(busqueda_demo):
    assert await busqueda_demo.filtrar_por_servicios([]) == []
