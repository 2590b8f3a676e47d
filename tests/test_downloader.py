"""
Unit tests for the streaming downloader.
"""

import pytest
from conftest import FakeTransport

from spotm4a.exceptions import StorageError, TransportError
from spotm4a.media import Downloader


@pytest.mark.asyncio
class TestDownloader:
    async def test_writes_chunks_in_arrival_order(self, tmp_path):
        transport = FakeTransport()
        transport.stream_factory = lambda url: [b"ab", b"", b"cd", b"\xff"]
        destination = tmp_path / "out.m4a"

        result = await Downloader(transport, chunk_size=2).download_file(
            "https://cdn.test/a.m4a", destination
        )

        assert destination.read_bytes() == b"abcd\xff"
        assert result.bytes_written == 5
        assert result.path == destination
        assert result.elapsed_s >= 0
        assert transport.calls == [
            ("STREAM", "https://cdn.test/a.m4a", {"chunk_size": 2})
        ]

    async def test_existing_file_is_truncated(self, tmp_path):
        transport = FakeTransport()
        transport.stream_factory = lambda url: [b"new"]
        destination = tmp_path / "out.m4a"
        destination.write_bytes(b"old content that is longer")

        await Downloader(transport).download_file("https://cdn.test/a", destination)

        assert destination.read_bytes() == b"new"

    async def test_file_is_created_before_request_and_kept_on_failure(self, tmp_path):
        transport = FakeTransport()
        transport.stream_factory = lambda url: [b"part", TransportError("reset")]
        destination = tmp_path / "out.m4a"

        with pytest.raises(TransportError):
            await Downloader(transport).download_file("https://cdn.test/a", destination)

        assert destination.read_bytes() == b"part"

    async def test_empty_body_leaves_empty_file(self, tmp_path):
        transport = FakeTransport()
        transport.stream_factory = lambda url: []
        destination = tmp_path / "out.m4a"

        result = await Downloader(transport).download_file(
            "https://cdn.test/a", destination
        )

        assert destination.exists()
        assert result.bytes_written == 0

    async def test_unwritable_destination_is_storage_error(self, tmp_path):
        transport = FakeTransport()
        destination = tmp_path / "missing-dir" / "out.m4a"

        with pytest.raises(StorageError):
            await Downloader(transport).download_file("https://cdn.test/a", destination)

        assert transport.calls == []
