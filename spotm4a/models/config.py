"""
Pydantic model for the run configuration.
Holds the command-line values together with the fixed service endpoints.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from spotm4a.exceptions import ConfigurationError

TOKEN_URL = "https://accounts.spotify.com/api/token"
CATALOG_BASE_URL = "https://api.spotify.com/v1/"
SEARCH_URL = "https://iv.ggtyler.dev/api/v1/search"
CONVERSION_URL = "https://co.wuk.sh/api/json"
WATCH_URL_PREFIX = "https://youtu.be/"

# Only the fields the download flow reads
PLAYLIST_FIELD_FILTER = "items(track(name,artists(name))),total"


class RunConfig(BaseModel):
    """A validated configuration for one download session."""

    # Credentials & target
    client_id: str
    client_secret: str = Field(..., repr=False)
    playlist_id: str

    # Output
    output_dir: Path = Field(default_factory=Path)
    file_extension: str = "m4a"
    title_length: int = 36
    chunk_size: int = 131072  # 128 KB

    # Remote services
    token_url: str = TOKEN_URL
    catalog_base_url: str = CATALOG_BASE_URL
    search_url: str = SEARCH_URL
    conversion_url: str = CONVERSION_URL
    watch_url_prefix: str = WATCH_URL_PREFIX
    field_filter: str = PLAYLIST_FIELD_FILTER
    search_sort_by: str = "relevance"
    search_result_type: str = "video"

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("client_id", "client_secret", "playlist_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Value cannot be empty.")
        return v

    @field_validator("title_length", "chunk_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be a positive integer.")
        return v

    @field_validator("catalog_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Keeps relative endpoint joins predictable."""
        return v if v.endswith("/") else v + "/"

    @classmethod
    def load(cls, **values: Any) -> "RunConfig":
        """
        Builds a configuration, turning validation failures into
        ConfigurationError.
        """
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e
