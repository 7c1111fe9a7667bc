"""
Database models package
"""

from .balnearios import Balneario, Ciudad, Servicio, balneario_servicio_association
from .base import Base

__all__ = [
    "Base",
    "Ciudad",
    "Balneario",
    "Servicio",
    "balneario_servicio_association",
]
