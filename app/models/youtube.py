from pydantic import BaseModel, ConfigDict, Field

# --- Internal Parsing Models (watch page) ---

class CaptionTrack(BaseModel):
    """One entry of the caption-track array embedded in a watch page."""
    language_code: str = Field(alias="languageCode")
    base_url: str = Field(alias="baseUrl")

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)
