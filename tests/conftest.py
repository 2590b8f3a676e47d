"""
Shared fixtures: an in-memory HTTP transport and a run configuration.
"""

from typing import Any, Callable, Optional

import pytest

from spotm4a.models.config import RunConfig

TOKEN_URL = "https://auth.test/api/token"
CATALOG_BASE_URL = "https://api.test/v1/"
PLAYLIST_URL = "https://api.test/v1/playlists/pl123/tracks"
SEARCH_URL = "https://search.test/api/v1/search"
CONVERSION_URL = "https://convert.test/api/json"

TOKEN_PAYLOAD = {"access_token": "tok", "token_type": "Bearer", "expires_in": 3600}


class FakeTransport:
    """
    HttpTransport double. Responses are registered per (method, url); a
    callable response receives the request keyword arguments. Exceptions are
    raised instead of returned.
    """

    def __init__(self):
        self.calls: list[tuple[str, str, dict]] = []
        self.responses: dict[tuple[str, str], Any] = {}
        self.stream_factory: Callable[[str], list] = lambda url: [b"audio"]

    def route(self, method: str, url: str, response: Any) -> None:
        self.responses[(method, url)] = response

    def calls_to(self, method: str, url: Optional[str] = None) -> list[dict]:
        return [
            kwargs
            for m, u, kwargs in self.calls
            if m == method and (url is None or u == url)
        ]

    async def _respond(self, method: str, url: str, **kwargs: Any) -> Any:
        self.calls.append((method, url, kwargs))
        response = self.responses[(method, url)]
        if callable(response):
            response = response(**kwargs)
        if isinstance(response, Exception):
            raise response
        return response

    async def post_form(self, url, data):
        return await self._respond("POST_FORM", url, data=dict(data))

    async def get_json(self, url, params=None, headers=None):
        return await self._respond(
            "GET", url, params=dict(params or {}), headers=dict(headers or {})
        )

    async def post_json(self, url, payload, headers=None):
        return await self._respond(
            "POST_JSON", url, payload=payload, headers=dict(headers or {})
        )

    async def get_stream(self, url, chunk_size):
        self.calls.append(("STREAM", url, {"chunk_size": chunk_size}))
        for chunk in self.stream_factory(url):
            if isinstance(chunk, Exception):
                raise chunk
            yield chunk


def make_track(name: str, *artists: str) -> dict:
    return {"name": name, "artists": [{"name": a} for a in artists]}


def playlist_handler(entries: list, page_size: int, total: Optional[int] = None):
    """Serves `entries` (track dicts or None) in pages starting at the requested offset."""

    def handler(params, headers):
        offset = int(params["offset"])
        items = [{"track": t} for t in entries[offset : offset + page_size]]
        return {
            "total": len(entries) if total is None else total,
            "offset": offset,
            "items": items,
        }

    return handler


def search_by_query(params, headers):
    return [{"title": params["q"], "videoId": f"vid-{params['q']}"}]


def convert_to_cdn(payload, headers):
    video_id = payload["url"].rsplit("/", 1)[1]
    return {"status": "stream", "url": f"https://cdn.test/{video_id}.m4a"}


@pytest.fixture
def transport() -> FakeTransport:
    fake = FakeTransport()
    fake.route("POST_FORM", TOKEN_URL, TOKEN_PAYLOAD)
    fake.route("GET", SEARCH_URL, search_by_query)
    fake.route("POST_JSON", CONVERSION_URL, convert_to_cdn)
    return fake


@pytest.fixture
def config(tmp_path) -> RunConfig:
    return RunConfig(
        client_id="client",
        client_secret="secret",
        playlist_id="pl123",
        output_dir=tmp_path,
        token_url=TOKEN_URL,
        catalog_base_url=CATALOG_BASE_URL,
        search_url=SEARCH_URL,
        conversion_url=CONVERSION_URL,
    )
