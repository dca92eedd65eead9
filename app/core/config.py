"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import RateLimitConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Video Summarizer"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    # Gemini API. The key is checked per request, not at startup.
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL_NAME: str = "gemini-2.5-flash"
    GEMINI_API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    # Video host
    YOUTUBE_BASE_URL: str = "https://www.youtube.com"

    # Applied to every outbound request (page, caption track, Gemini)
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # Per-client quota, e.g. "30/day" or "100 per 12 hours"
    RATE_LIMIT_SUMMARIZE: str = RateLimitConfig.SUMMARIZE

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
