"""
Agente conversacional de balnearios (ReAct de LangGraph sobre Ollama)
"""

from dataclasses import dataclass
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.runnables import RunnableConfig
from langgraph.prebuilt import create_react_agent

from balnearios_ai.config.settings import Settings, get_settings
from balnearios_ai.core.shared.logger import get_agent_logger
from balnearios_ai.domains.balnearios.agents.prompts import SYSTEM_PROMPT
from balnearios_ai.domains.balnearios.agents.tools import crear_herramientas
from balnearios_ai.domains.balnearios.application.services import BusquedaService
from balnearios_ai.integrations.llm.model_provider import get_llm
from balnearios_ai.utils.reasoning import extraer_texto_visible

logger = get_agent_logger("balnearios")

RECURSION_LIMIT = 25


def crear_agente_balnearios(busqueda: BusquedaService, llm: BaseChatModel):
    """
    Arma el agente ReAct con las tools de búsqueda.

    Args:
        busqueda: Servicio de búsqueda de la request actual
        llm: Modelo de chat con soporte de tool calling

    Returns:
        Grafo compilado, listo para ``ainvoke({"messages": [...]})``
    """
    return create_react_agent(llm, crear_herramientas(busqueda), prompt=SYSTEM_PROMPT)


@dataclass(frozen=True)
class RespuestaChat:
    """Respuesta del agente: texto crudo (con razonamiento) y texto visible."""

    raw: str
    visible: str


class BalneariosChatService:
    """Procesa mensajes de chat con el agente de balnearios."""

    def __init__(self, llm: BaseChatModel | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._llm = llm

    async def procesar_mensaje(self, mensaje: str, busqueda: BusquedaService) -> RespuestaChat:
        """
        Ejecuta el agente sobre un mensaje del usuario.

        Args:
            mensaje: Texto libre del usuario
            busqueda: Servicio de búsqueda de la request actual

        Returns:
            RespuestaChat con el último mensaje del agente
        """
        agente = crear_agente_balnearios(busqueda, self._llm or get_llm())
        config: RunnableConfig = {"recursion_limit": RECURSION_LIMIT}

        resultado: dict[str, Any] = await agente.ainvoke({"messages": [HumanMessage(content=mensaje)]}, config)
        mensajes: list[BaseMessage] = resultado.get("messages", [])

        if self.settings.AGENT_VERBOSE:
            self._log_tool_calls(mensajes)

        raw = self._contenido_texto(mensajes[-1]) if mensajes else ""
        return RespuestaChat(raw=raw, visible=extraer_texto_visible(raw))

    def _log_tool_calls(self, mensajes: list[BaseMessage]) -> None:
        for msg in mensajes:
            if isinstance(msg, AIMessage):
                for call in msg.tool_calls:
                    logger.info("Tool call", tool=call.get("name"), args=call.get("args"))

    @staticmethod
    def _contenido_texto(mensaje: BaseMessage) -> str:
        contenido = mensaje.content
        if isinstance(contenido, str):
            return contenido
        partes = []
        for parte in contenido:
            if isinstance(parte, str):
                partes.append(parte)
            elif isinstance(parte, dict) and parte.get("type") == "text":
                partes.append(parte.get("text", ""))
        return "".join(partes)
