"""
Client for the cobalt-style conversion proxy that turns a video URL into a
direct audio download link.
"""

import logging

from spotm4a.api.http import JSON_HEADERS, HttpTransport, parse_payload
from spotm4a.exceptions import ConversionError
from spotm4a.models.youtube import ConversionRequest, ConversionResponse

log = logging.getLogger(__name__)


class AudioConverter:
    """Requests audio-only downloads from the conversion proxy."""

    def __init__(self, transport: HttpTransport, conversion_url: str):
        self._transport = transport
        self.conversion_url = conversion_url

    async def request_audio_url(self, video_url: str) -> str:
        """
        Asks the proxy for an audio-only rendition of `video_url`.

        Returns:
            The direct, time-limited download URL.

        Raises:
            ConversionError: If the proxy answers without a `url`.
        """
        request = ConversionRequest(url=video_url)
        payload = await self._transport.post_json(
            self.conversion_url, request.to_payload(), headers=JSON_HEADERS
        )
        response = parse_payload(ConversionResponse, payload, "conversion endpoint")
        if not response.url:
            reason = response.text or response.status or "no download URL returned"
            raise ConversionError(f"Conversion of {video_url} failed: {reason}")
        log.debug(f"Conversion proxy resolved {video_url}")
        return response.url
