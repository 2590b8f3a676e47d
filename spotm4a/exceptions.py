"""
Defines custom exceptions for the application. Every failure during a run
funnels into one of these and aborts the session.
"""


class SpotM4aError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(SpotM4aError):
    """Raised when command-line values fail validation."""


class TransportError(SpotM4aError):
    """Raised when a request cannot be completed at the network level."""


class HttpStatusError(TransportError):
    """Raised when a remote service answers with a non-2xx status."""

    def __init__(self, status: int, url: str, message: str = ""):
        self.status = status
        self.url = url
        super().__init__(message or f"HTTP {status} from {url}")


class AuthenticationError(HttpStatusError):
    """Raised when the token endpoint rejects the client credentials."""


class ResponseDecodeError(SpotM4aError):
    """Raised when a response body is not JSON or does not match the expected schema."""


class MissingFieldError(SpotM4aError):
    """Raised when a track or artist lacks a field the download flow needs."""


class NoSearchResultsError(SpotM4aError):
    """Raised when a video search returns no candidates."""


class ConversionError(SpotM4aError):
    """Raised when the conversion proxy does not return a download URL."""


class StorageError(SpotM4aError):
    """Raised when the destination file cannot be opened or written."""


class PaginationStalledError(SpotM4aError):
    """
    Raised when a playlist page advances the offset by zero while tracks remain,
    which would otherwise re-fetch the same page forever.
    """
