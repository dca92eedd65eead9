"""
Centralized configuration for LLM Prompts.
"""


class SummarizationPrompts:
    """Prompts for the Video Summarization Service."""

    # Single-shot request; the transcript is substituted via str.format
    VIDEO_SUMMARY = """You are a helpful assistant. Analyze the following YouTube transcript.
Provide the output in strict JSON format with these keys:
- "summary": A 3-5 sentence concise summary.
- "terms": An array of 5-10 key terms.
- "points": An array of 5-8 bullet points.
Do not include markdown formatting (like ```json). Just the raw JSON object.

Transcript:
"{transcript}"
"""
