"""
Balnearios AI: búsqueda de balnearios por ciudad y servicios, con asistente conversacional.
"""

__version__ = "0.1.0"
