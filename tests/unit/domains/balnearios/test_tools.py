"""
Unit tests for the balnearios agent tools.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from balnearios_ai.domains.balnearios.agents.formatters import (
    SIN_BALNEARIOS_CON_SERVICIOS,
    SIN_BALNEARIOS_CON_SERVICIOS_EN_CIUDAD,
    SIN_BALNEARIOS_EN_CIUDAD,
    SIN_BALNEARIOS_REGISTRADOS,
)
from balnearios_ai.domains.balnearios.agents.tools import crear_herramientas
from balnearios_ai.domains.balnearios.application import BusquedaService
from tests.utils import Dataset, InMemoryBalnearioRepository, crear_dataset_demo


def _por_nombre(herramientas):
    return {h.name: h for h in herramientas}


@pytest.fixture
def herramientas(busqueda_service):
    return _por_nombre(crear_herramientas(busqueda_service))


@pytest.fixture
def busqueda_mock():
    busqueda = MagicMock(spec=BusquedaService)
    busqueda.buscar_balnearios_por_ciudad = AsyncMock(return_value=[])
    busqueda.filtrar_por_servicios = AsyncMock(return_value=[])
    busqueda.filtrar_por_ciudad_y_servicios = AsyncMock(return_value=[])
    return busqueda


@pytest.mark.unit
def test_five_named_tools(herramientas):
    assert set(herramientas) == {
        "buscarBalneariosPorCiudad",
        "listarBalnearios",
        "listarCiudades",
        "filtrarBalneariosPorServicios",
        "filtrarBalneariosPorCiudadYServicios",
    }
    assert all(h.description for h in herramientas.values())


@pytest.mark.unit
@pytest.mark.asyncio
async def test_buscar_por_ciudad(herramientas):
    texto = await herramientas["buscarBalneariosPorCiudad"].ainvoke({"ciudad": "Miramar"})

    assert texto.splitlines() == [
        "Balneario: Sol y Mar, Dirección: Costanera 10, Teléfono: 2291-420000",
        "Balneario: Las Gaviotas, Dirección: Costanera 11, Teléfono: No informado",
    ]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_buscar_por_ciudad_sin_resultados(herramientas):
    assert await herramientas["buscarBalneariosPorCiudad"].ainvoke({"ciudad": "Atlantis"}) == SIN_BALNEARIOS_EN_CIUDAD


@pytest.mark.unit
@pytest.mark.asyncio
async def test_listar_balnearios_includes_city(herramientas):
    lineas = (await herramientas["listarBalnearios"].ainvoke({})).splitlines()

    assert len(lineas) == 5
    assert lineas[0] == "Balneario: Sol y Mar, Ciudad: Miramar, Dirección: Costanera 10, Teléfono: 2291-420000"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_listar_balnearios_vacio():
    herramientas = _por_nombre(crear_herramientas(BusquedaService(InMemoryBalnearioRepository(Dataset()))))

    assert await herramientas["listarBalnearios"].ainvoke({}) == SIN_BALNEARIOS_REGISTRADOS


@pytest.mark.unit
@pytest.mark.asyncio
async def test_listar_ciudades(herramientas):
    texto = await herramientas["listarCiudades"].ainvoke({})

    assert texto.splitlines()[0] == "Ciudad: Miramar"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_filtrar_por_servicios(herramientas):
    texto = await herramientas["filtrarBalneariosPorServicios"].ainvoke({"servicios": ["Wi-Fi", "Pileta"]})

    assert [linea.split(",")[0] for linea in texto.splitlines()] == [
        "Balneario: Sol y Mar",
        "Balneario: Playa Grande Club",
        "Balneario: Refugio Sin Ciudad",
    ]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_filtrar_por_servicios_sin_resultados(herramientas):
    texto = await herramientas["filtrarBalneariosPorServicios"].ainvoke({"servicios": ["Wi-Fi", "Spa"]})

    assert texto == SIN_BALNEARIOS_CON_SERVICIOS


@pytest.mark.unit
@pytest.mark.asyncio
async def test_filtrar_por_ciudad_y_servicios(herramientas):
    texto = await herramientas["filtrarBalneariosPorCiudadYServicios"].ainvoke(
        {"ciudad": "Miramar", "servicios": ["Wi-Fi", "Pileta"]}
    )

    assert texto == "Balneario: Sol y Mar, Ciudad: Miramar, Dirección: Costanera 10, Teléfono: 2291-420000"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_filtrar_por_ciudad_y_servicios_sin_ciudad(herramientas):
    texto = await herramientas["filtrarBalneariosPorCiudadYServicios"].ainvoke({"servicios": ["Wi-Fi", "Pileta"]})

    assert len(texto.splitlines()) == 3


@pytest.mark.unit
@pytest.mark.asyncio
async def test_filtrar_por_ciudad_y_servicios_sin_resultados(herramientas):
    texto = await herramientas["filtrarBalneariosPorCiudadYServicios"].ainvoke(
        {"ciudad": "Necochea", "servicios": ["Wi-Fi", "Pileta"]}
    )

    assert texto == SIN_BALNEARIOS_CON_SERVICIOS_EN_CIUDAD


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("nombre", "entrada"),
    [
        ("buscarBalneariosPorCiudad", {}),
        ("buscarBalneariosPorCiudad", {"ciudad": ""}),
        ("buscarBalneariosPorCiudad", {"ciudad": ["Miramar"]}),
        ("filtrarBalneariosPorServicios", {"servicios": []}),
        ("filtrarBalneariosPorServicios", {"servicios": "Wi-Fi"}),
        ("filtrarBalneariosPorCiudadYServicios", {"ciudad": "Miramar"}),
    ],
)
async def test_invalid_input_rejected_before_search(busqueda_mock, nombre, entrada):
    herramientas = _por_nombre(crear_herramientas(busqueda_mock))

    with pytest.raises(ValidationError):
        await herramientas[nombre].ainvoke(entrada)

    busqueda_mock.buscar_balnearios_por_ciudad.assert_not_awaited()
    busqueda_mock.filtrar_por_servicios.assert_not_awaited()
    busqueda_mock.filtrar_por_ciudad_y_servicios.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("nombre", "entrada", "prefijo"),
    [
        ("buscarBalneariosPorCiudad", {"ciudad": "Miramar"}, "Error al buscar balnearios: "),
        ("listarBalnearios", {}, "Error al listar balnearios: "),
        ("listarCiudades", {}, "Error al listar ciudades: "),
        ("filtrarBalneariosPorServicios", {"servicios": ["Wi-Fi"]}, "Error al filtrar balnearios: "),
        (
            "filtrarBalneariosPorCiudadYServicios",
            {"ciudad": "Miramar", "servicios": ["Wi-Fi"]},
            "Error al filtrar balnearios: ",
        ),
    ],
)
async def test_store_failure_becomes_error_text(nombre, entrada, prefijo):
    repo = InMemoryBalnearioRepository(crear_dataset_demo(), fallar=True)
    herramientas = _por_nombre(crear_herramientas(BusquedaService(repo)))

    texto = await herramientas[nombre].ainvoke(entrada)

    assert texto == f"{prefijo}connection refused"
