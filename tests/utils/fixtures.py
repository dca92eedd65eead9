"""
Literal documents shared by the tests: a watch page, a caption payload and a
Gemini reply.
"""
import json
from typing import Optional

VIDEO_ID = "dQw4w9WgXcQ"
TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=en"

CAPTION_XML = """<?xml version="1.0" encoding="utf-8" ?><transcript>
<text start="0.0" dur="2.1">We&#39;re no strangers to love</text>
<text start="2.1" dur="2.4">You know the rules and so do I</text>
<text start="4.5" dur="3.0">A full commitment&#39;s what I&#39;m thinking of</text>
<text start="7.5" dur="2.8">You wouldn&#39;t get this from any other guy</text>
</transcript>"""

SUMMARY = {
    "summary": "A singer promises unwavering commitment. The song is upbeat.",
    "terms": ["commitment", "love", "rules", "promise", "loyalty"],
    "points": [
        "Never gonna give you up",
        "Never gonna let you down",
        "Never gonna run around",
        "Never gonna make you cry",
        "Never gonna say goodbye",
    ],
}


def make_watch_page(tracks: Optional[list] = None) -> str:
    """Minimal watch page embedding a caption-track array (or none)."""
    if tracks is None:
        player = {"playabilityStatus": {"status": "OK"}}
    else:
        player = {
            "captions": {
                "playerCaptionsTracklistRenderer": {"captionTracks": tracks}
            }
        }
    return (
        "<html><head><title>Video</title></head><body><script>"
        f"var ytInitialPlayerResponse = {json.dumps(player)};"
        "</script></body></html>"
    )


def gemini_reply(text: str) -> dict:
    """Body of a successful generateContent response."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
