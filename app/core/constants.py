"""
Application-wide constants for the transcript and summarization pipeline.
"""


class TranscriptConfig:
    """Configuration for caption scraping."""
    CAPTION_MARKER = "captionTracks"  # JSON key announcing the track array
    PREFERRED_LANGUAGE = "en"
    MIN_LENGTH = 50  # Characters; shorter transcripts are rejected
    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )
    ACCEPT_LANGUAGE = "en-US,en;q=0.9"


class SummarizationConfig:
    """Configuration for the generative-text call."""
    MAX_TRANSCRIPT_CHARS = 15_000  # Characters sent to the model


class CorsConfig:
    """Cross-origin headers for browser clients."""
    ALLOW_METHODS = ["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"]


class RateLimitConfig:
    """Per-client quota in ``limits`` notation."""
    SUMMARIZE = "30/day"
