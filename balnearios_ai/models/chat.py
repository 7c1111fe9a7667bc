"""
Modelos Pydantic para el endpoint de chat del asistente de balnearios
"""

from pydantic import BaseModel, ConfigDict, Field


class ChatMessageRequest(BaseModel):
    """Modelo para solicitud de mensaje de chat"""

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "¿Qué balnearios hay en Miramar con Wi-Fi y pileta?"}}
    )

    message: str = Field(..., description="Mensaje del usuario", min_length=1, max_length=5000)


class ChatResult(BaseModel):
    """Salida cruda del modelo, incluido el bloque <think> si lo hay"""

    result: str = Field(..., description="Texto completo devuelto por el agente")


class ChatMessageResponse(BaseModel):
    """Modelo para respuesta de mensaje de chat"""

    data: ChatResult
    response: str = Field(..., description="Texto visible para el usuario (sin razonamiento)")
