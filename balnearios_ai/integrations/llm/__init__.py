"""
LLM integrations.
"""

from .model_provider import get_llm

__all__ = ["get_llm"]
