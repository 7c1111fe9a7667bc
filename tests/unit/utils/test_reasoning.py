"""Tests for extraer_texto_visible."""

import pytest

from balnearios_ai.utils.reasoning import extraer_texto_visible


@pytest.mark.unit
@pytest.mark.parametrize(
    ("texto", "esperado"),
    [
        ("<think>razono</think>\n\nRespuesta", "Respuesta"),
        ("<think>a</think>Hola </think> chau", "Hola </think> chau"),
        ("  sin razonamiento  ", "sin razonamiento"),
        ("<think>solo razonamiento</think>", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_extraer_texto_visible(texto, esperado):
    assert extraer_texto_visible(texto) == esperado
