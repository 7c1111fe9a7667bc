# balnearios_ai/integrations/llm/model_provider.py
"""
Model Provider - Cached ChatOllama instances for the assistant.
"""

import logging
from functools import lru_cache

from langchain_core.language_models import BaseChatModel
from langchain_ollama import ChatOllama

from balnearios_ai.config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def get_llm(model: str | None = None, temperature: float | None = None) -> BaseChatModel:
    """
    Returns a configured ChatOllama instance, cached by (model, temperature).

    Args:
        model: Ollama model name. Defaults to OLLAMA_API_MODEL.
        temperature: Generation temperature. Defaults to OLLAMA_TEMPERATURE.

    Returns:
        A configured ChatOllama instance.
    """
    settings = get_settings()
    model_name = model or settings.OLLAMA_API_MODEL
    temp = settings.OLLAMA_TEMPERATURE if temperature is None else temperature

    llm = ChatOllama(
        model=model_name,
        base_url=settings.OLLAMA_API_URL,
        temperature=temp,
        client_kwargs={"timeout": settings.OLLAMA_REQUEST_TIMEOUT},
    )
    logger.info(f"Created and cached ChatOllama instance: model={model_name}, temp={temp}")
    return llm
