"""
Shared pytest fixtures and configuration.
"""
import json
from typing import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from app.main import app
from app.api.dependencies import (
    get_http_client,
    get_rate_limiter,
    get_summarization_service,
    get_youtube_service,
)
from app.core.limiter import InMemoryRateLimiter
from app.services.summarization import SummarizationService
from app.services.youtube import YouTubeService

from tests.utils.fixtures import CAPTION_XML, SUMMARY, TRACK_URL, gemini_reply, make_watch_page


@pytest.fixture
def upstream_routes():
    """Canned upstream responses: YouTube keyed by path, plus "gemini"."""
    return {
        "/watch": httpx.Response(
            200,
            text=make_watch_page(
                [
                    {"baseUrl": "https://www.youtube.com/api/timedtext?v=x&lang=de", "languageCode": "de"},
                    {"baseUrl": TRACK_URL, "languageCode": "en", "kind": "asr"},
                ]
            ),
        ),
        "/api/timedtext": httpx.Response(200, text=CAPTION_XML),
        "gemini": httpx.Response(200, json=gemini_reply(json.dumps(SUMMARY))),
    }


@pytest.fixture
def mock_transport(upstream_routes) -> httpx.MockTransport:
    """Transport that fakes YouTube and the Gemini REST API."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.host == "generativelanguage.googleapis.com":
            response = upstream_routes["gemini"]
        else:
            response = upstream_routes.get(request.url.path)
        if response is None:
            return httpx.Response(404, text="Not Found")
        # Fresh copy so a canned response can be served more than once
        return httpx.Response(
            response.status_code, headers=response.headers, content=response.content
        )

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


@pytest.fixture
def client_factory(mock_transport) -> Callable[[], httpx.AsyncClient]:
    return lambda: httpx.AsyncClient(transport=mock_transport)


@pytest.fixture
def rate_limiter():
    return InMemoryRateLimiter("30/day")


@pytest.fixture
def mock_youtube_service():
    """Create a mock YouTubeService."""
    service = AsyncMock(spec=YouTubeService)
    service.fetch_transcript.return_value = "word " * 40
    return service


@pytest.fixture
def mock_summarization_service():
    """Create a mock SummarizationService."""
    service = AsyncMock(spec=SummarizationService)
    service.summarize.return_value = dict(SUMMARY)
    return service


@pytest.fixture
def override_dependencies(rate_limiter, mock_youtube_service, mock_summarization_service):
    """Override FastAPI dependencies with mocked services."""
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
    app.dependency_overrides[get_youtube_service] = lambda: mock_youtube_service
    app.dependency_overrides[get_summarization_service] = lambda: mock_summarization_service

    yield

    app.dependency_overrides.clear()


@pytest.fixture
def override_transport(rate_limiter, mock_transport, monkeypatch):
    """Run the real services against the fake transport."""
    from app.api import dependencies

    async def override_get_http_client():
        async with httpx.AsyncClient(transport=mock_transport) as client:
            yield client

    monkeypatch.setattr(dependencies.settings, "GEMINI_API_KEY", "test-key")
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
    app.dependency_overrides[get_http_client] = override_get_http_client

    yield

    app.dependency_overrides.clear()
