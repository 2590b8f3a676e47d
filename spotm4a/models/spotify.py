"""
Pydantic models for the Spotify token and playlist-items payloads.
"""

from typing import Optional

from pydantic import BaseModel


class Credentials(BaseModel):
    """Bearer token issued by the client-credentials grant."""

    access_token: str
    token_type: str
    expires_in: int

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.access_token}"


class Artist(BaseModel):
    name: Optional[str] = None
    id: Optional[str] = None


class Track(BaseModel):
    """A track as returned inside a playlist item. Every field may be absent."""

    name: Optional[str] = None
    artists: Optional[list[Artist]] = None
    id: Optional[str] = None
    uri: Optional[str] = None
    duration_ms: Optional[int] = None
    is_local: Optional[bool] = None


class PlaylistItem(BaseModel):
    """One playlist entry. `track` is null for unavailable or local-only entries."""

    track: Optional[Track] = None
    added_at: Optional[str] = None
    is_local: Optional[bool] = None


class PlaylistPage(BaseModel):
    """A single page of the `playlists/{id}/tracks` endpoint."""

    items: list[PlaylistItem]
    total: Optional[int] = None
    href: Optional[str] = None
    limit: Optional[int] = None
    next: Optional[str] = None
    offset: Optional[int] = None
    previous: Optional[str] = None
