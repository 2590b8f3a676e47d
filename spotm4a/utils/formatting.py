"""
Helper functions for formatting data into human-readable strings.
"""

from spotm4a.exceptions import MissingFieldError
from spotm4a.models.spotify import Track


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '145.3 MB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    while bytes_size >= 1024 and i < len(units) - 1:
        bytes_size /= 1024
        i += 1
    return f"{bytes_size:.1f} {units[i]}"


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2h 34m 12s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def get_track_title(track: Track) -> str:
    """Returns the track's name, which the download flow cannot do without."""
    if track.name is None:
        raise MissingFieldError("Playlist track has no name.")
    return track.name


def build_search_query(track: Track) -> str:
    """
    Builds the video search query, e.g. 'Artist1, Artist2 - Title'.

    Raises:
        MissingFieldError: If the artist list or any artist name is missing.
    """
    title = get_track_title(track)
    if track.artists is None:
        raise MissingFieldError(f"Track '{title}' has no artist list.")

    names = []
    for artist in track.artists:
        if artist.name is None:
            raise MissingFieldError(f"An artist of track '{title}' has no name.")
        names.append(artist.name)
    return f"{', '.join(names)} - {title}"
