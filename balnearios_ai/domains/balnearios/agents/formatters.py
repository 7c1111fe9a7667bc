"""
Formateo de resultados de búsqueda como texto para el agente.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from balnearios_ai.domains.balnearios.domain.entities import Balneario, BalnearioConCiudad, Ciudad

T = TypeVar("T")

TELEFONO_NO_INFORMADO = "No informado"

SIN_BALNEARIOS_EN_CIUDAD = "No se encontraron balnearios en esa ciudad."
SIN_BALNEARIOS_REGISTRADOS = "No hay balnearios registrados."
SIN_CIUDADES_REGISTRADAS = "No hay ciudades registradas."
SIN_BALNEARIOS_CON_SERVICIOS = "No se encontraron balnearios con todos esos servicios."
SIN_BALNEARIOS_CON_SERVICIOS_EN_CIUDAD = "No se encontraron balnearios con todos esos servicios en esa ciudad."


def _telefono(telefono: str | None) -> str:
    return telefono or TELEFONO_NO_INFORMADO


def formatear_balneario(balneario: Balneario) -> str:
    return (
        f"Balneario: {balneario.nombre}, Dirección: {balneario.direccion}, "
        f"Teléfono: {_telefono(balneario.telefono)}"
    )


def formatear_balneario_con_ciudad(balneario: BalnearioConCiudad) -> str:
    return (
        f"Balneario: {balneario.nombre}, Ciudad: {balneario.ciudad}, Dirección: {balneario.direccion}, "
        f"Teléfono: {_telefono(balneario.telefono)}"
    )


def formatear_ciudad(ciudad: Ciudad) -> str:
    return f"Ciudad: {ciudad.nombre}"


def formatear_lista(items: Sequence[T], formateador: Callable[[T], str], sin_resultados: str) -> str:
    """
    Una línea por resultado, separadas por salto de línea.

    Args:
        items: Resultados de la búsqueda
        formateador: Convierte un resultado en una línea
        sin_resultados: Frase fija cuando no hay resultados

    Returns:
        Texto listo para devolver al agente
    """
    if not items:
        return sin_resultados
    return "\n".join(formateador(item) for item in items)
