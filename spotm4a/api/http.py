"""
Minimal HTTP capability interface used by every remote client, and its
aiohttp implementation.

All failures are translated into the application's exception hierarchy so the
orchestration layer only has to deal with SpotM4aError.
"""

import logging
from typing import Any, AsyncIterator, Mapping, Optional, Protocol

import aiohttp
from pydantic import TypeAdapter, ValidationError

from spotm4a import __version__
from spotm4a.exceptions import HttpStatusError, ResponseDecodeError, TransportError

log = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


class HttpTransport(Protocol):
    """The four network operations the application needs."""

    async def post_form(self, url: str, data: Mapping[str, str]) -> Any: ...

    async def get_json(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any: ...

    async def post_json(
        self,
        url: str,
        payload: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any: ...

    def get_stream(self, url: str, chunk_size: int) -> AsyncIterator[bytes]: ...


def parse_payload(model: Any, payload: Any, source: str) -> Any:
    """
    Validates a decoded JSON payload against a model or type.

    Raises:
        ResponseDecodeError: If the payload does not match the schema.
    """
    try:
        return TypeAdapter(model).validate_python(payload)
    except ValidationError as e:
        raise ResponseDecodeError(f"Unexpected response from {source}: {e}") from e


class AiohttpTransport:
    """
    HttpTransport backed by a single aiohttp session for the whole run.

    No timeouts are configured: a hung remote blocks until the process is
    stopped.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session

    async def _initialize_session(self) -> aiohttp.ClientSession:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"User-Agent": f"spotm4a/{__version__}"},
                timeout=aiohttp.ClientTimeout(total=None),
            )
        return self._session

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "AiohttpTransport":
        await self._initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    async def _check_status(response: aiohttp.ClientResponse) -> None:
        if response.status >= 400:
            body = (await response.text(errors="replace"))[:200]
            raise HttpStatusError(
                response.status,
                str(response.url),
                f"HTTP {response.status} from {response.url}: {body}",
            )

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        session = await self._initialize_session()
        log.debug(f"{method} {url}")
        try:
            async with session.request(method, url, **kwargs) as response:
                await self._check_status(response)
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise ResponseDecodeError(
                        f"Response from {url} is not valid JSON: {e}"
                    ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    async def post_form(self, url: str, data: Mapping[str, str]) -> Any:
        """POSTs an x-www-form-urlencoded body and decodes the JSON reply."""
        return await self._request_json("POST", url, data=dict(data))

    async def get_json(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._request_json(
            "GET", url, params=dict(params or {}), headers=dict(headers or {})
        )

    async def post_json(
        self,
        url: str,
        payload: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._request_json(
            "POST", url, json=payload, headers=dict(headers or JSON_HEADERS)
        )

    async def get_stream(self, url: str, chunk_size: int) -> AsyncIterator[bytes]:
        """
        Yields the response body chunk by chunk, in arrival order, without
        buffering the whole body.
        """
        session = await self._initialize_session()
        log.debug(f"GET {url} (streaming)")
        try:
            async with session.get(url, allow_redirects=True) as response:
                await self._check_status(response)
                async for chunk in response.content.iter_chunked(chunk_size):
                    yield chunk
        except aiohttp.ClientError as e:
            raise TransportError(f"GET {url} failed: {e}") from e
