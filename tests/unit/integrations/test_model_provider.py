"""
Unit tests for the cached ChatOllama provider.
"""

from unittest.mock import patch

import pytest

from balnearios_ai.config.settings import get_settings
from balnearios_ai.integrations.llm import model_provider


@pytest.fixture(autouse=True)
def clear_llm_cache():
    model_provider.get_llm.cache_clear()
    yield
    model_provider.get_llm.cache_clear()


@pytest.mark.unit
def test_get_llm_uses_settings():
    settings = get_settings()

    with patch.object(model_provider, "ChatOllama") as mock_chat:
        model_provider.get_llm()

    mock_chat.assert_called_once_with(
        model=settings.OLLAMA_API_MODEL,
        base_url=settings.OLLAMA_API_URL,
        temperature=settings.OLLAMA_TEMPERATURE,
        client_kwargs={"timeout": settings.OLLAMA_REQUEST_TIMEOUT},
    )


@pytest.mark.unit
def test_get_llm_is_cached_per_model_and_temperature():
    with patch.object(model_provider, "ChatOllama") as mock_chat:
        mock_chat.side_effect = lambda **kwargs: object()
        primero = model_provider.get_llm()
        segundo = model_provider.get_llm()
        otro = model_provider.get_llm(temperature=0.0)

    assert primero is segundo
    assert otro is not primero
    assert mock_chat.call_count == 2


@pytest.mark.unit
def test_default_model_settings():
    from balnearios_ai.config.settings import Settings

    settings = Settings(_env_file=None)

    assert settings.OLLAMA_API_MODEL == "qwen3:1.7b"
    assert settings.OLLAMA_TEMPERATURE == 0.75
    assert settings.OLLAMA_REQUEST_TIMEOUT == 120
