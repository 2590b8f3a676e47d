"""
Pydantic models for the Invidious search results and the conversion proxy.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A single video candidate from the search mirror."""

    title: str
    video_id: str = Field(alias="videoId")

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True


class ConversionRequest(BaseModel):
    """Body sent to the conversion proxy. The audio-only flag is a string."""

    url: str
    is_audio_only: Literal["true"] = Field(default="true", alias="isAudioOnly")

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class ConversionResponse(BaseModel):
    """
    Response of the conversion proxy. A successful answer carries `url`;
    failures usually carry `status` and a human-readable `text` instead.
    """

    url: Optional[str] = None
    status: Optional[str] = None
    text: Optional[str] = None
