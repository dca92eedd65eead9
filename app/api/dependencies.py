"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. Tests replace them through
``app.dependency_overrides``.
"""
from functools import lru_cache
from typing import AsyncIterator

import httpx
from fastapi import Depends

from app.core.config import settings
from app.core.limiter import InMemoryRateLimiter, RateLimiter
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.llm_provider import LLMProvider
from app.services.summarization import SummarizationService
from app.services.youtube import YouTubeService


@lru_cache
def get_rate_limiter() -> RateLimiter:
    """
    Get the process-wide quota store.

    Created on first use and kept for the life of the process.
    """
    return InMemoryRateLimiter(rate=settings.RATE_LIMIT_SUMMARIZE)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Get an HTTP client for outbound calls made while serving one request."""
    async with httpx.AsyncClient(
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        follow_redirects=True,
    ) as client:
        yield client


def get_youtube_service(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> YouTubeService:
    """Get YouTube service for transcript extraction."""
    return YouTubeService(client=client, base_url=settings.YOUTUBE_BASE_URL)


def get_llm_provider(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> LLMProvider:
    """Get the Gemini provider. A missing key fails at call time."""
    return GeminiProvider(
        client=client,
        api_key=settings.GEMINI_API_KEY,
        model_name=settings.GEMINI_MODEL_NAME,
        base_url=settings.GEMINI_API_BASE_URL,
    )


def get_summarization_service(
    llm_provider: LLMProvider = Depends(get_llm_provider),
) -> SummarizationService:
    """Get summarization service."""
    return SummarizationService(llm_provider=llm_provider)
