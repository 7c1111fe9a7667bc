"""
Balnearios Agents

Tools and ReAct agent for the conversational assistant.
"""

from .agent import BalneariosChatService, RespuestaChat, crear_agente_balnearios
from .tools import crear_herramientas

__all__ = [
    "BalneariosChatService",
    "RespuestaChat",
    "crear_agente_balnearios",
    "crear_herramientas",
]
