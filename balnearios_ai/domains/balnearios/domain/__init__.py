"""
Balnearios Domain Layer

Entities and domain services for the resort search.
"""

from .entities import AsociacionServicio, Balneario, BalnearioConCiudad, Ciudad, Servicio
from .services import MatchingService, MembershipService

__all__ = [
    # Entities
    "Ciudad",
    "Balneario",
    "Servicio",
    "AsociacionServicio",
    "BalnearioConCiudad",
    # Services
    "MatchingService",
    "MembershipService",
]
