"""
Google Gemini implementation of LLMProvider.

Talks to the ``generateContent`` REST endpoint directly over httpx.
"""
from typing import Any, Optional

import httpx
from loguru import logger

from app.core.exceptions import ConfigurationError, SummarizationError
from app.core.providers.llm_provider import LLMProvider


class GeminiProvider(LLMProvider):
    """
    Google Gemini implementation of LLMProvider.

    Example:
        async with httpx.AsyncClient() as client:
            provider = GeminiProvider(
                client,
                api_key="your-api-key",
                model_name="gemini-2.5-flash",
            )
            text = await provider.generate_text(prompt)
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: Optional[str],
        model_name: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
    ):
        """
        Initialize the Gemini provider.

        Args:
            client: Async HTTP client used for the request.
            api_key: Google AI API key. May be None; the call then fails with
                a configuration error.
            model_name: Gemini model to use (e.g., "gemini-2.5-flash").
            base_url: API root up to and including the version segment.
        """
        self.client = client
        self.api_key = api_key
        self.model_name = model_name
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    async def generate_text(self, prompt: str) -> str:
        if not self.api_key:
            logger.error("GEMINI_API_KEY is not configured")
            raise ConfigurationError("Server misconfiguration: Missing GEMINI_API_KEY")

        body = {"contents": [{"parts": [{"text": prompt}]}]}

        logger.debug(f"Sending request to Gemini ({self.model_name})")
        try:
            response = await self.client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=body,
            )
        except httpx.HTTPError as e:
            logger.opt(exception=e).error("Gemini request failed")
            raise SummarizationError("Could not reach the AI service.") from e

        try:
            data: Any = response.json()
        except ValueError as e:
            logger.error(
                f"Gemini returned a non-JSON body (HTTP {response.status_code}): "
                f"{response.text[:500]}"
            )
            raise SummarizationError("AI service returned an unreadable response.") from e

        if not isinstance(data, dict):
            raise SummarizationError("AI service returned an unreadable response.")

        error = data.get("error")
        if error:
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            logger.error(f"Gemini API error (HTTP {response.status_code}): {error}")
            raise SummarizationError(f"AI API Error: {message}")

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Gemini response had no candidate text: {data}")
            raise SummarizationError("AI response contained no text.") from e

        usage = data.get("usageMetadata")
        if usage:
            logger.debug(f"Gemini token usage: {usage}")

        return text
