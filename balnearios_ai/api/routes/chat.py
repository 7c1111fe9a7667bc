"""
Endpoint de chat del asistente de balnearios.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from balnearios_ai.core.shared.logger import get_api_logger
from balnearios_ai.domains.balnearios.agents import BalneariosChatService
from balnearios_ai.domains.balnearios.api.dependencies import BusquedaServiceDep
from balnearios_ai.models.chat import ChatMessageRequest, ChatMessageResponse, ChatResult

router = APIRouter(tags=["chat"])
logger = get_api_logger("chat")


def get_chat_service() -> BalneariosChatService:
    return BalneariosChatService()


ChatServiceDep = Annotated[BalneariosChatService, Depends(get_chat_service)]


@router.post("/message", response_model=ChatMessageResponse)
async def process_chat_message(
    request: ChatMessageRequest,
    busqueda: BusquedaServiceDep,
    chat_service: ChatServiceDep,
) -> ChatMessageResponse:
    """
    Procesa un mensaje con el agente de balnearios.

    Devuelve la salida cruda en ``data.result`` y el texto visible
    (sin el bloque de razonamiento) en ``response``.
    """
    logger.info("Processing chat message", length=len(request.message))
    respuesta = await chat_service.procesar_mensaje(request.message, busqueda)
    return ChatMessageResponse(data=ChatResult(result=respuesta.raw), response=respuesta.visible)
