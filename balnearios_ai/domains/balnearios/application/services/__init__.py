"""
Balnearios Application Services
"""

from .busqueda_service import BusquedaService

__all__ = ["BusquedaService"]
