"""
Provider abstraction layer for model-agnostic AI integration.
"""
from app.core.providers.llm_provider import LLMProvider
from app.core.providers.gemini_provider import GeminiProvider

__all__ = [
    "LLMProvider",
    "GeminiProvider",
]
