"""
Tools del asistente de balnearios.

Cada tool valida sus argumentos con su schema, llama a BusquedaService y
devuelve texto. Los errores de la base se devuelven como texto
("Error al ...") para que la conversación no se corte.
"""

import logging

from langchain_core.tools import BaseTool, tool
from pydantic import BaseModel, Field

from balnearios_ai.domains.balnearios.agents.formatters import (
    SIN_BALNEARIOS_CON_SERVICIOS,
    SIN_BALNEARIOS_CON_SERVICIOS_EN_CIUDAD,
    SIN_BALNEARIOS_EN_CIUDAD,
    SIN_BALNEARIOS_REGISTRADOS,
    SIN_CIUDADES_REGISTRADAS,
    formatear_balneario,
    formatear_balneario_con_ciudad,
    formatear_ciudad,
    formatear_lista,
)
from balnearios_ai.domains.balnearios.application.services import BusquedaService

logger = logging.getLogger(__name__)


class BuscarPorCiudadInput(BaseModel):
    """Input para búsqueda de balnearios por ciudad"""

    ciudad: str = Field(min_length=1, description="El nombre de la ciudad a buscar")


class SinArgumentosInput(BaseModel):
    """Input vacío para los listados"""


class FiltrarPorServiciosInput(BaseModel):
    """Input para filtrar balnearios por servicios"""

    servicios: list[str] = Field(
        min_length=1,
        description="Servicios que el balneario debe ofrecer, todos a la vez (por ejemplo: Wi-Fi, Pileta)",
    )


class FiltrarPorCiudadYServiciosInput(BaseModel):
    """Input para filtrar balnearios por ciudad y servicios"""

    ciudad: str | None = Field(default=None, description="Ciudad donde buscar (opcional)")
    servicios: list[str] = Field(
        min_length=1,
        description="Servicios que el balneario debe ofrecer, todos a la vez",
    )


def crear_herramientas(busqueda: BusquedaService) -> list[BaseTool]:
    """
    Crea las tools ligadas a un BusquedaService.

    Args:
        busqueda: Servicio de búsqueda de la request actual

    Returns:
        Las cinco tools de búsqueda
    """

    @tool("buscarBalneariosPorCiudad", args_schema=BuscarPorCiudadInput)
    async def buscar_balnearios_por_ciudad(ciudad: str) -> str:
        """Usa esta función para encontrar balnearios en una ciudad específica."""
        try:
            balnearios = await busqueda.buscar_balnearios_por_ciudad(ciudad)
        except Exception as e:
            logger.error(f"Error buscando balnearios en '{ciudad}': {e}")
            return f"Error al buscar balnearios: {e}"
        return formatear_lista(balnearios, formatear_balneario, SIN_BALNEARIOS_EN_CIUDAD)

    @tool("listarBalnearios", args_schema=SinArgumentosInput)
    async def listar_balnearios() -> str:
        """Muestra todos los balnearios y la ciudad donde se encuentran."""
        try:
            balnearios = await busqueda.listar_balnearios_con_ciudades()
        except Exception as e:
            logger.error(f"Error listando balnearios: {e}")
            return f"Error al listar balnearios: {e}"
        return formatear_lista(balnearios, formatear_balneario_con_ciudad, SIN_BALNEARIOS_REGISTRADOS)

    @tool("listarCiudades", args_schema=SinArgumentosInput)
    async def listar_ciudades() -> str:
        """Muestra todas las ciudades que tienen balnearios registrados."""
        try:
            ciudades = await busqueda.listar_ciudades()
        except Exception as e:
            logger.error(f"Error listando ciudades: {e}")
            return f"Error al listar ciudades: {e}"
        return formatear_lista(ciudades, formatear_ciudad, SIN_CIUDADES_REGISTRADAS)

    @tool("filtrarBalneariosPorServicios", args_schema=FiltrarPorServiciosInput)
    async def filtrar_balnearios_por_servicios(servicios: list[str]) -> str:
        """Encuentra los balnearios que ofrecen TODOS los servicios pedidos, en cualquier ciudad."""
        try:
            balnearios = await busqueda.filtrar_por_servicios(servicios)
        except Exception as e:
            logger.error(f"Error filtrando balnearios por {servicios}: {e}")
            return f"Error al filtrar balnearios: {e}"
        return formatear_lista(balnearios, formatear_balneario_con_ciudad, SIN_BALNEARIOS_CON_SERVICIOS)

    @tool("filtrarBalneariosPorCiudadYServicios", args_schema=FiltrarPorCiudadYServiciosInput)
    async def filtrar_balnearios_por_ciudad_y_servicios(servicios: list[str], ciudad: str | None = None) -> str:
        """Encuentra los balnearios de una ciudad que ofrecen TODOS los servicios pedidos."""
        try:
            balnearios = await busqueda.filtrar_por_ciudad_y_servicios(ciudad, servicios)
        except Exception as e:
            logger.error(f"Error filtrando balnearios en '{ciudad}' por {servicios}: {e}")
            return f"Error al filtrar balnearios: {e}"
        sin_resultados = SIN_BALNEARIOS_CON_SERVICIOS_EN_CIUDAD if ciudad else SIN_BALNEARIOS_CON_SERVICIOS
        return formatear_lista(balnearios, formatear_balneario_con_ciudad, sin_resultados)

    return [
        buscar_balnearios_por_ciudad,
        listar_balnearios,
        listar_ciudades,
        filtrar_balnearios_por_servicios,
        filtrar_balnearios_por_ciudad_y_servicios,
    ]
