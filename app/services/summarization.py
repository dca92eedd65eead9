"""
Structured summarization of a single video transcript.

The transcript is truncated, wrapped in one instruction block, and sent to the
LLM provider in a single request. The reply is expected to contain a JSON
object with ``summary``, ``terms`` and ``points``; the first ``{`` through the
last ``}`` of the reply is parsed, which tolerates surrounding prose and
markdown fencing. The parsed object is returned without schema validation.
"""
import json
import re
from typing import Any

from loguru import logger

from app.core.constants import SummarizationConfig
from app.core.exceptions import SummarizationError
from app.core.prompts import SummarizationPrompts
from app.core.providers.llm_provider import LLMProvider

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(text: str) -> dict[str, Any]:
    """
    Parse the outermost brace-delimited block of ``text`` as JSON.

    Raises:
        SummarizationError: If there is no ``{...}`` block or it is not a
            valid JSON object.
    """
    match = _JSON_OBJECT_RE.search(text)
    if not match:
        raise SummarizationError("AI returned non-JSON text.")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise SummarizationError("AI returned malformed JSON.") from e

    if not isinstance(parsed, dict):
        raise SummarizationError("AI returned malformed JSON.")
    return parsed


class SummarizationService:
    """Turns a transcript into a summary, key terms and bullet points."""

    def __init__(self, llm_provider: LLMProvider):
        """
        Initialize the summarization service.

        Args:
            llm_provider: LLM provider for text generation.
        """
        self.llm_provider = llm_provider

    def build_prompt(self, transcript: str) -> str:
        truncated = transcript[: SummarizationConfig.MAX_TRANSCRIPT_CHARS]
        return SummarizationPrompts.VIDEO_SUMMARY.format(transcript=truncated)

    async def summarize(self, transcript: str) -> dict[str, Any]:
        """
        Summarize a transcript.

        Args:
            transcript: Validated transcript text.

        Returns:
            The JSON object returned by the model.

        Raises:
            SummarizationError: If the provider fails or the reply holds no
                parseable JSON object.
            ConfigurationError: If the provider is not configured.
        """
        prompt = self.build_prompt(transcript)
        logger.info(
            f"Summarizing transcript ({len(transcript)} chars, "
            f"{min(len(transcript), SummarizationConfig.MAX_TRANSCRIPT_CHARS)} sent)"
        )

        raw_text = await self.llm_provider.generate_text(prompt)

        try:
            return extract_json_object(raw_text)
        except SummarizationError:
            logger.error(f"Unparseable model output: {raw_text[:500]}")
            raise
