"""
Reasoning-trace handling for reasoning models (qwen3, deepseek-r1).

These models prepend a ``<think>...</think>`` block to their answer; only
the text after the closing tag is meant for the user.
"""

THINK_CLOSE_TAG = "</think>"


def extraer_texto_visible(texto: str | None) -> str:
    """
    Text after the first ``</think>``, or the whole trimmed text if absent.

    Args:
        texto: Raw model output

    Returns:
        User-visible answer
    """
    if not texto:
        return ""
    if THINK_CLOSE_TAG in texto:
        return texto.split(THINK_CLOSE_TAG, 1)[1].strip()
    return texto.strip()
