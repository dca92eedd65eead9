"""
Extraction helpers for caption data scraped from YouTube.

These functions work on raw documents only (no network access), so they can
be tested against literal fixtures:

1. ``extract_caption_tracks`` finds the caption-track array in a watch page.
2. ``select_track`` picks the track to download.
3. ``parse_caption_payload`` flattens a timed-text payload into plain text.
"""
import json
import re
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from app.core.constants import TranscriptConfig
from app.core.exceptions import TranscriptError
from app.models import CaptionTrack

NO_CAPTIONS = "No captions found for this video (Private or No Captions)."
MALFORMED_TRACKS = "Caption track data could not be parsed."

_MARKER_RE = re.compile(r'"%s"\s*:\s*' % re.escape(TranscriptConfig.CAPTION_MARKER))
_TEXT_ELEMENT_RE = re.compile(r"<text[^>]*>(.*?)</text>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")

# &#10; becomes a space so that the transcript stays on one line
_ENTITIES = {
    "&#39;": "'",
    "&quot;": '"',
    "&#10;": " ",
}

_tracks_adapter = TypeAdapter(List[CaptionTrack])


def extract_caption_tracks(html: str) -> List[CaptionTrack]:
    """
    Locate the ``"captionTracks"`` array in a watch page and parse it.

    Args:
        html: The watch page body.

    Returns:
        The caption tracks in page order (possibly empty).

    Raises:
        TranscriptError: If the marker is absent or the array is not valid JSON.
    """
    match = _MARKER_RE.search(html)
    if not match:
        raise TranscriptError(NO_CAPTIONS)

    try:
        raw_tracks, _ = json.JSONDecoder().raw_decode(html, match.end())
    except json.JSONDecodeError as e:
        raise TranscriptError(MALFORMED_TRACKS) from e

    if not isinstance(raw_tracks, list):
        raise TranscriptError(MALFORMED_TRACKS)

    try:
        return _tracks_adapter.validate_python(raw_tracks)
    except ValidationError as e:
        raise TranscriptError(MALFORMED_TRACKS) from e


def select_track(tracks: List[CaptionTrack]) -> Optional[CaptionTrack]:
    """First track whose language code contains "en", else the first track."""
    for track in tracks:
        if TranscriptConfig.PREFERRED_LANGUAGE in track.language_code:
            return track
    return tracks[0] if tracks else None


def decode_fragment(fragment: str) -> str:
    """Decode the supported entities and strip any nested markup."""
    for entity, replacement in _ENTITIES.items():
        fragment = fragment.replace(entity, replacement)
    return _TAG_RE.sub("", fragment)


def parse_caption_payload(payload: str) -> str:
    """
    Concatenate the text of every ``<text>`` element in a caption payload.

    Fragments are joined with single spaces and the result is trimmed.
    """
    fragments = [decode_fragment(m) for m in _TEXT_ELEMENT_RE.findall(payload)]
    return " ".join(fragments).strip()
