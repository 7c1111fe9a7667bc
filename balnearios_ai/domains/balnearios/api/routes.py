"""
Balnearios API Routes

FastAPI router for resort search endpoints.
"""

from fastapi import APIRouter, Path

from balnearios_ai.domains.balnearios.api.dependencies import BusquedaServiceDep
from balnearios_ai.domains.balnearios.api.schemas import (
    BalnearioConCiudadResponse,
    BalnearioResponse,
    CiudadResponse,
    FiltrarBalneariosRequest,
)

router = APIRouter(tags=["Balnearios"])


@router.get("/balnearios", response_model=list[BalnearioConCiudadResponse])
async def listar_balnearios(busqueda: BusquedaServiceDep):
    """Lista todos los balnearios con su ciudad."""
    return await busqueda.listar_balnearios_con_ciudades()


@router.get("/balnearios/ciudad/{ciudad}", response_model=list[BalnearioResponse])
async def buscar_balnearios_por_ciudad(
    busqueda: BusquedaServiceDep,
    ciudad: str = Path(..., min_length=1, description="Nombre (o parte del nombre) de la ciudad"),
):
    """
    Balnearios de la ciudad cuyo nombre contiene ``ciudad``.

    Lista vacía si ninguna ciudad coincide.
    """
    return await busqueda.buscar_balnearios_por_ciudad(ciudad)


@router.get("/ciudades", response_model=list[CiudadResponse])
async def listar_ciudades(busqueda: BusquedaServiceDep):
    return await busqueda.listar_ciudades()


@router.post("/balnearios/filtrar", response_model=list[BalnearioConCiudadResponse])
async def filtrar_balnearios(request: FiltrarBalneariosRequest, busqueda: BusquedaServiceDep):
    """Balnearios que ofrecen todos los servicios pedidos, opcionalmente en una ciudad."""
    if request.ciudad and request.ciudad.strip():
        return await busqueda.filtrar_por_ciudad_y_servicios(request.ciudad, request.servicios)
    return await busqueda.filtrar_por_servicios(request.servicios)
