"""
API endpoint for YouTube video summarization.
"""
import math
import time

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.dependencies import (
    get_rate_limiter,
    get_summarization_service,
    get_youtube_service,
)
from app.core.exceptions import (
    AppException,
    BadRequestError,
    ErrorResponse,
    InternalServerError,
    RateLimitError,
)
from app.core.limiter import RateLimiter
from app.models.api import SummarizeRequest, SummaryResult
from app.services.summarization import SummarizationService
from app.services.youtube import YouTubeService, extract_video_id


router = APIRouter()


def get_client_key(request: Request) -> str:
    """Client address: first X-Forwarded-For hop, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


@router.options("/summarize", include_in_schema=False)
async def summarize_preflight() -> Response:
    """Answer bare preflight requests; CORSMiddleware handles the rest."""
    return Response(status_code=200)


@router.post(
    "/summarize",
    responses={
        200: {"model": SummaryResult},
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def summarize_video(
    request: Request,
    payload: SummarizeRequest,
    rate_limiter: RateLimiter = Depends(get_rate_limiter),
    youtube_service: YouTubeService = Depends(get_youtube_service),
    summarization_service: SummarizationService = Depends(get_summarization_service),
):
    """
    Summarizes a YouTube video from its caption transcript.

    Args:
        request: FastAPI request object (used for the client address).
        payload: The request body containing the video URL.
        rate_limiter: Per-client daily quota.
        youtube_service: Fetches the transcript.
        summarization_service: Produces the structured summary.

    Returns:
        A JSON object with ``summary``, ``terms`` and ``points``.
    """
    if not payload.url:
        raise BadRequestError("URL is required")

    client_key = get_client_key(request)
    if not rate_limiter.admit(client_key):
        logger.warning(f"Rate limit exceeded for {client_key}")
        raise RateLimitError(
            detail=f"Rate limit exceeded ({rate_limiter.describe()}).",
            retry_after=math.ceil(rate_limiter.retry_after(client_key)),
        )

    video_id = extract_video_id(payload.url)
    if not video_id:
        logger.warning(f"Could not extract a video ID from {payload.url!r}")
        raise BadRequestError("Invalid YouTube URL")

    logger.info(f"Incoming request for video {video_id} from {client_key}")
    start_time = time.perf_counter()

    try:
        transcript = await youtube_service.fetch_transcript(video_id)
        result = await summarization_service.summarize(transcript)
    except AppException:
        raise
    except Exception as e:
        logger.opt(exception=e).error(f"Summarization failed for video {video_id}")
        raise InternalServerError(str(e) or e.__class__.__name__) from e

    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s")
    return JSONResponse(content=result)
