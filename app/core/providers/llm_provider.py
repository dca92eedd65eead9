"""
Abstract base class for LLM providers.

This module defines a vendor-neutral interface for single-shot text
generation. Concrete implementations (Gemini) must implement this interface.
"""
from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """
    Abstract interface for LLM providers.

    Example:
        provider = GeminiProvider(client, api_key="...", model_name="gemini-2.5-flash")
        text = await provider.generate_text("Summarize: ...")
    """

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Generate a completion for a single prompt.

        Args:
            prompt: The full instruction block, sent as one user turn.

        Returns:
            The text of the first candidate.

        Raises:
            SummarizationError: If the service reports an error or the reply
                has no text.
            ConfigurationError: If the provider is missing its credential.
        """
        ...
