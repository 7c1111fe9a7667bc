"""
Utilidades compartidas
"""

from .reasoning import extraer_texto_visible

__all__ = ["extraer_texto_visible"]
