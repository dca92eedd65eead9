"""
YouTube service for extracting video IDs and scraping caption transcripts.
"""
import re
from typing import Optional

import httpx
from loguru import logger

from app.core.constants import TranscriptConfig
from app.core.exceptions import TranscriptError
from app.services.captions import extract_caption_tracks, parse_caption_payload, select_track

# watch?v=, /v/, /embed/, /e/, /<segment>/.../<id> and youtu.be/<id>
VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    The ID is not checked against YouTube; an unknown video fails later when
    its page is fetched.

    Args:
        url: Any string claimed to be a YouTube URL.

    Returns:
        The video ID, or None if no supported URL shape matches.
    """
    match = VIDEO_ID_RE.search(url)
    return match.group(1) if match else None


class YouTubeService:
    """
    Service for fetching the caption transcript of a single video.

    The pipeline is strictly sequential and has no retries:
    1. Fetch the watch page.
    2. Extract the embedded caption-track array.
    3. Pick a track (English preferred).
    4. Fetch the track payload and flatten it to plain text.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = "https://www.youtube.com"):
        """
        Initialize the YouTubeService.

        Args:
            client: Shared async HTTP client for page and track requests.
            base_url: Origin of the video host.
        """
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def _fetch_watch_page(self, video_id: str) -> str:
        response = await self.client.get(
            f"{self.base_url}/watch",
            params={"v": video_id},
            headers={
                "User-Agent": TranscriptConfig.USER_AGENT,
                "Accept-Language": TranscriptConfig.ACCEPT_LANGUAGE,
            },
        )
        if not response.is_success:
            logger.error(f"Watch page for {video_id} returned HTTP {response.status_code}")
            raise TranscriptError("Failed to reach YouTube")
        return response.text

    async def _fetch_track_payload(self, url: str) -> str:
        response = await self.client.get(url)
        if not response.is_success:
            logger.error(f"Caption track returned HTTP {response.status_code}")
            raise TranscriptError("Failed to fetch caption track.")
        return response.text

    async def fetch_transcript(self, video_id: str) -> str:
        """
        Fetch and flatten the caption transcript for a video.

        Args:
            video_id: The 11-character YouTube video ID.

        Returns:
            The transcript as a single trimmed string of at least
            ``TranscriptConfig.MIN_LENGTH`` characters.

        Raises:
            TranscriptError: On any network failure, missing captions,
                unparseable track data, or a transcript that is too short.
        """
        try:
            html = await self._fetch_watch_page(video_id)
            tracks = extract_caption_tracks(html)

            track = select_track(tracks)
            if track is None:
                raise TranscriptError("No suitable caption track found.")
            logger.info(
                f"Video {video_id}: using caption track '{track.language_code}' "
                f"({len(tracks)} available)"
            )

            payload = await self._fetch_track_payload(track.base_url)
            transcript = parse_caption_payload(payload)

            if len(transcript) < TranscriptConfig.MIN_LENGTH:
                raise TranscriptError("Transcript too short or empty.")

        except TranscriptError as e:
            logger.warning(f"Transcript unavailable for {video_id}: {e.reason}")
            raise
        except httpx.HTTPError as e:
            logger.opt(exception=e).error(f"Network error fetching transcript for {video_id}")
            raise TranscriptError("Network error while contacting YouTube.") from e

        logger.info(f"Fetched transcript for {video_id} ({len(transcript)} chars)")
        return transcript
