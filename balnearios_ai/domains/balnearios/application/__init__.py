"""
Balnearios Application Layer

Resolvers, the conjunctive filter, the result assembler and the search facade.
"""

from .assembler import ResultadoAssembler
from .membership_filter import FiltroServicios
from .ports import IBalnearioRepository
from .resolvers import CiudadResolver, ServicioResolver
from .services import BusquedaService

__all__ = [
    "IBalnearioRepository",
    "CiudadResolver",
    "ServicioResolver",
    "FiltroServicios",
    "ResultadoAssembler",
    "BusquedaService",
]
