"""
Pydantic models for API request/response schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class SummarizeRequest(BaseModel):
    """Request model for video summarization."""

    url: Optional[str] = None


class SummaryResult(BaseModel):
    """
    Documented shape of a successful summarization.

    The endpoint returns the model's JSON object as-is; this schema is not
    enforced on the response.
    """

    summary: str
    terms: List[str]
    points: List[str]

    model_config = ConfigDict(frozen=True)
